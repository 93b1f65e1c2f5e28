"""
Allocation des tags (identifiants opaques uniques pour la duree du processus).

Les tags ne portent aucun sens d'un redemarrage a l'autre. Chaque registre
possede son propre allocateur : les espaces de tags des chaines et des groupes
sont independants.
"""

import threading
import time
from typing import Optional

from tvcatalog.core.exceptions import TagSpaceExhaustedError
from tvcatalog.utils.constants import TAG_MAX

# Graine derivee de l'horloge, bornee pour laisser de la marge avant TAG_MAX
_SEED_MASK = 0xFFFFFF


def clock_seed() -> int:
    """Graine arbitraire derivee de l'horloge."""
    return int(time.time()) & _SEED_MASK


class TagAllocator:
    """
    Distribue des valeurs 32 bits uniques et strictement croissantes.

    Utilisation :
        tags = TagAllocator(seed=1000)
        tags.next()  # 1000
        tags.next()  # 1001
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialise l'allocateur.

        Args:
            seed: Premiere valeur distribuee. None pour une graine derivee de l'horloge.
        """
        if seed is None:
            seed = clock_seed()
        if not 0 <= seed <= TAG_MAX:
            raise ValueError(f"Graine de tag hors de l'espace 32 bits: {seed}")
        self._next = seed
        self._lock = threading.Lock()

    def next(self) -> int:
        """Retourne le prochain tag."""
        with self._lock:
            if self._next > TAG_MAX:
                raise TagSpaceExhaustedError("Espace des tags 32 bits epuise")
            tag = self._next
            self._next += 1
            return tag

    def peek(self) -> int:
        """Retourne le tag qui sera distribue au prochain appel, sans le consommer."""
        with self._lock:
            return self._next
