"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur
et exceptions. Cette couche n'a AUCUNE dépendance vers l'infrastructure
(adapters, clients HTTP, CLI).

Sous-packages :
- entities/ : Enregistrements Series et Episode
- value_objects/ : Identifiants, images, notes, titres, statistiques, enums
- ports/ : Interfaces abstraites (client API, synchronisation, tâches)
"""
