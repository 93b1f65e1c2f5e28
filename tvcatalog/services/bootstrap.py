"""
Chargement initial du catalogue depuis les entrees de configuration.

Le chargement se fait en deux phases sur la meme liste d'entrees :
1. Les entrees `channel` creent les chaines.
2. Les entrees `service` creent les transports via le configurateur de backend
   designe par l'entree, puis les enregistrent sur leur chaine.

Chaque entree `channel` ou `service` aboutit a exactement un resultat
(SKIPPED, BACKEND_FAILED, REGISTERED) et ne laisse jamais d'etat partiel.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from loguru import logger

from tvcatalog.core.entities.transport import Transport
from tvcatalog.core.exceptions import BackendConfigurationError, CatalogError
from tvcatalog.core.value_objects.config_entry import ConfigEntry
from tvcatalog.services.backend_registry import BackendConfiguratorRegistry
from tvcatalog.services.catalog import Catalog
from tvcatalog.utils.constants import (
    CHANNEL_ENTRY,
    CHANNEL_NAME_FIELD,
    CHANNEL_TELETEXT_FIELD,
    SERVICE_CHANNEL_FIELD,
    SERVICE_ENTRY,
    SERVICE_PRIO_FIELD,
)


class EntryOutcome(Enum):
    """Resultat du traitement d'une entree de configuration."""

    SKIPPED = "skipped"
    BACKEND_FAILED = "backend_failed"
    REGISTERED = "registered"


@dataclass(frozen=True)
class EntryResult:
    """
    Resultat d'une entree.

    Attributs:
        kind: Type de bloc (channel ou service)
        outcome: Resultat du traitement
        reference: Nom de chaine designe par l'entree (None si absent)
        backend: Configurateur utilise pour un service
        reason: Motif d'un abandon
    """

    kind: str
    outcome: EntryOutcome
    reference: Optional[str] = None
    backend: Optional[str] = None
    reason: Optional[str] = None


@dataclass
class BootstrapReport:
    """Bilan d'un chargement."""

    results: list[EntryResult] = field(default_factory=list)

    def add(self, result: EntryResult) -> None:
        self.results.append(result)

    def count(self, outcome: EntryOutcome, kind: Optional[str] = None) -> int:
        return sum(
            1
            for r in self.results
            if r.outcome is outcome and (kind is None or r.kind == kind)
        )

    @property
    def counts(self) -> Counter:
        return Counter(r.outcome for r in self.results)


class BootstrapLoader:
    """
    Construit le catalogue a partir des entrees de configuration.

    Args:
        catalog: Catalogue a peupler
        backends: Configurateurs de backends, sondes dans l'ordre

    Le groupe par defaut est celui du registre des groupes du catalogue.
    """

    def __init__(
        self,
        catalog: Catalog,
        backends: BackendConfiguratorRegistry,
    ) -> None:
        self._catalog = catalog
        self._backends = backends

    def load(self, entries: Iterable[ConfigEntry]) -> BootstrapReport:
        """
        Charge les chaines puis les services.

        Args:
            entries: Entrees de configuration, dans l'ordre de la source

        Returns:
            Le bilan par entree `channel` et `service`.
        """
        entries = list(entries)
        report = BootstrapReport()

        with self._catalog.lock:
            self._catalog.groups.init_default()

            for entry in entries:
                if entry.is_kind(CHANNEL_ENTRY):
                    report.add(self._load_channel(entry))

            for entry in entries:
                if entry.is_kind(SERVICE_ENTRY):
                    report.add(self._load_service(entry))

        logger.info(
            f"Catalogue charge: {len(self._catalog.channels)} chaines, "
            f"{len(self._catalog.linker)} services, "
            f"{report.count(EntryOutcome.SKIPPED)} entrees ignorees, "
            f"{report.count(EntryOutcome.BACKEND_FAILED)} echecs de backend"
        )
        return report

    def _load_channel(self, entry: ConfigEntry) -> EntryResult:
        name = entry.get_str(CHANNEL_NAME_FIELD)
        if name is None:
            logger.debug("Entree channel sans champ 'name', ignoree")
            return EntryResult(
                kind=CHANNEL_ENTRY,
                outcome=EntryOutcome.SKIPPED,
                reason=f"champ '{CHANNEL_NAME_FIELD}' absent",
            )

        try:
            channel = self._catalog.channels.find_or_create(name, True)
        except CatalogError as e:
            logger.error(f'Chaine "{name}" non creee: {e}')
            return EntryResult(
                kind=CHANNEL_ENTRY,
                outcome=EntryOutcome.SKIPPED,
                reference=name,
                reason=str(e),
            )
        logger.debug(f'Added channel "{name}"')

        if entry.has(CHANNEL_TELETEXT_FIELD):
            channel.teletext_rundown = entry.get_int(CHANNEL_TELETEXT_FIELD)

        return EntryResult(
            kind=CHANNEL_ENTRY, outcome=EntryOutcome.REGISTERED, reference=name
        )

    def _load_service(self, entry: ConfigEntry) -> EntryResult:
        channel_name = entry.get_str(SERVICE_CHANNEL_FIELD)
        if channel_name is None:
            logger.debug("Entree service sans champ 'channel', ignoree")
            return EntryResult(
                kind=SERVICE_ENTRY,
                outcome=EntryOutcome.SKIPPED,
                reason=f"champ '{SERVICE_CHANNEL_FIELD}' absent",
            )

        transport = Transport(priority=entry.get_int(SERVICE_PRIO_FIELD))

        configurator = self._backends.probe(entry)
        if configurator is None:
            logger.debug(f'Service pour "{channel_name}" sans backend reconnu, abandonne')
            return EntryResult(
                kind=SERVICE_ENTRY,
                outcome=EntryOutcome.BACKEND_FAILED,
                reference=channel_name,
                reason="aucun backend reconnu",
            )

        try:
            transport = configurator.configure(entry, transport)
        except BackendConfigurationError as e:
            logger.debug(f'Service pour "{channel_name}" abandonne: {e}')
            return EntryResult(
                kind=SERVICE_ENTRY,
                outcome=EntryOutcome.BACKEND_FAILED,
                reference=channel_name,
                backend=configurator.name,
                reason=e.reason,
            )

        channel = self._catalog.channels.find_or_create(channel_name, False)
        if channel is None:
            logger.warning(
                f'Service "{transport.name}" reference une chaine inconnue: "{channel_name}"'
            )
            return EntryResult(
                kind=SERVICE_ENTRY,
                outcome=EntryOutcome.SKIPPED,
                reference=channel_name,
                backend=configurator.name,
                reason="chaine inconnue",
            )

        try:
            self._catalog.linker.register(transport, channel)
        except CatalogError as e:
            logger.error(f'Service "{transport.name}" non enregistre: {e}')
            return EntryResult(
                kind=SERVICE_ENTRY,
                outcome=EntryOutcome.SKIPPED,
                reference=channel_name,
                backend=configurator.name,
                reason=str(e),
            )

        return EntryResult(
            kind=SERVICE_ENTRY,
            outcome=EntryOutcome.REGISTERED,
            reference=channel_name,
            backend=configurator.name,
        )
