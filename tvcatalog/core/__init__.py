"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), et objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, CLI, backends).

Sous-packages :
- entities/ : Entités métier (Channel, ChannelGroup, Transport)
- ports/ : Interfaces abstraites (configurateurs de backend, surveillance)
- value_objects/ : Objets valeur immutables (ConfigEntry)
"""
