"""
Fonctions utilitaires partagees dans le projet tvcatalog.

Ce module centralise les fonctions reutilisees a travers le codebase :
- to_printable : translitteration Unicode -> ASCII imprimable
- slugify : nom d'affichage -> slug utilisable dans une URL
- describe_ca_system : identifiant CA -> nom du systeme d'acces conditionnel
"""

import unicodedata

from tvcatalog.utils.constants import CA_SYSTEM_EXACT, CA_SYSTEM_RANGES

_LIGATURE_MAP = {
    "œ": "oe",
    "Œ": "OE",
    "æ": "ae",
    "Æ": "AE",
    "ß": "ss",
    "ø": "o",
    "Ø": "O",
    "đ": "d",
    "Đ": "D",
    "ł": "l",
    "Ł": "L",
}

# Remplacement des caracteres sans equivalent ASCII
_UNPRINTABLE = "?"


def _is_printable_ascii(char: str) -> bool:
    return " " <= char <= "~"


def to_printable(text: str) -> str:
    """
    Translittere une chaine en ASCII imprimable (meilleur effort).

    Applique dans l'ordre : decomposition NFKD, suppression des marques
    diacritiques (Mn), expansion des ligatures, puis remplacement de tout
    caractere restant hors ASCII imprimable par "?".

    Ex: "Télé Matin" -> "Tele Matin", "Canal+" -> "Canal+"
    """
    normalized = unicodedata.normalize("NFKD", text)
    result = []
    for char in normalized:
        if unicodedata.category(char) == "Mn":
            continue
        char = _LIGATURE_MAP.get(char, char)
        for c in char:
            result.append(c if _is_printable_ascii(c) else _UNPRINTABLE)
    return "".join(result)


def slugify(name: str) -> str:
    """
    Convertit un nom d'affichage en slug compose de [a-z0-9-].

    Chaque caractere de la forme imprimable est mis en minuscule, conserve s'il
    est alphanumerique, remplace par un tiret sinon. La longueur du slug est
    celle de la forme imprimable ; un nom non vide donne toujours un slug non vide.

    Deux noms differents peuvent produire le meme slug.

    Ex: "BBC One" -> "bbc-one", "Canal+" -> "canal-"
    """
    return "".join(c if c.isalnum() else "-" for c in to_printable(name).lower())


def describe_ca_system(caid: int) -> str:
    """
    Retourne le nom du systeme d'acces conditionnel d'un CAID.

    Cherche d'abord l'identifiant exact, puis la plage constructeur
    (octet de poids fort). Un CAID inconnu est rendu en hexadecimal.
    """
    if caid in CA_SYSTEM_EXACT:
        return CA_SYSTEM_EXACT[caid]
    name = CA_SYSTEM_RANGES.get(caid & 0xFF00)
    if name is not None:
        return name
    return f"0x{caid:04x}"
