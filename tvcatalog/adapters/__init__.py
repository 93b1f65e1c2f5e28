"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages et modules :
- backends/ : Configurateurs des backends de capture (DVB, IPTV, V4L)
- cli/ : Interface ligne de commande (Typer + Rich)
- config_source : Lecture des entrées de configuration (JSON)
- monitor : Surveillance des transports enregistrés
"""
