"""
Constantes globales pour tvcatalog.

Ce module contient les constantes utilisees dans l'application:
- Nom du groupe de chaines par defaut
- Types de blocs de configuration reconnus
- Champs obligatoires des entrees de configuration
- Correspondance des identifiants d'acces conditionnel vers les systemes CA
"""

# Groupe qui recoit toute nouvelle chaine et les membres des groupes detruits
DEFAULT_GROUP_NAME = "Uncategorized"

# Types de blocs de configuration
CHANNEL_ENTRY = "channel"
SERVICE_ENTRY = "service"

# Champs des entrees de configuration
CHANNEL_NAME_FIELD = "name"
CHANNEL_TELETEXT_FIELD = "teletext-rundown"
SERVICE_CHANNEL_FIELD = "channel"
SERVICE_PRIO_FIELD = "prio"
SERVICE_STREAMS_FIELD = "streams"

# Espace des tags (valeurs 32 bits)
TAG_MAX = 0xFFFFFFFF

# Identifiants CA exacts (prioritaires sur les plages constructeur)
CA_SYSTEM_EXACT = {
    0x4A70: "DreamCrypt",
    0x4AD4: "Novel-SuperTV",
    0x5501: "Griffin",
}

# Plages constructeur (octet de poids fort du CAID)
# Source: ETSI TR 101 162, attribution des CA_system_id
CA_SYSTEM_RANGES = {
    0x0100: "Seca/Mediaguard",
    0x0500: "Viaccess",
    0x0600: "Irdeto",
    0x0900: "NDS/Videoguard",
    0x0B00: "Conax",
    0x0D00: "CryptoWorks",
    0x0E00: "PowerVu",
    0x1000: "RAS",
    0x1700: "BetaCrypt",
    0x1800: "Nagravision",
    0x2200: "Codicrypt",
    0x2600: "BISS",
    0x4700: "General Instrument",
    0x5600: "Verimatrix",
}
