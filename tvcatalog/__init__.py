"""
tvcatalog - Catalogue en memoire des chaines, groupes et transports d'un serveur TV.

Ce package fournit l'identification des entites (tags, index), la gestion des
groupes de chaines, la liaison ordonnee des transports aux chaines et le
chargement initial depuis une configuration declarative.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- services/ : Couche application (registres, liaison, bootstrap)
- adapters/ : Couche infrastructure (CLI, source de configuration, backends de capture)
"""
