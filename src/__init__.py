"""
shokosync - Client des métadonnées d'un serveur Shoko.

Ce package fournit les enregistrements typés (séries, épisodes) du serveur,
un client HTTP pour les récupérer et les tâches planifiées de synchronisation
des données utilisateur destinées à un serveur multimédia hôte.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, objets valeur, ports, exceptions)
- services/ : Couche application (tâches planifiées)
- adapters/ : Couche infrastructure (client API, CLI)
"""
