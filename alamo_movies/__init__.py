"""
Alamo Movies - Consultation des programmes des cinemas Alamo Drafthouse.

Ce package interroge le flux de programmation publie par Alamo Drafthouse,
conserve localement un fichier calendrier par cinema et permet de lister
les films et les cinemas (texte ou JSON).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, erreurs)
- services/ : Couche application (fraicheur du cache, synchronisation, orchestration)
- adapters/ : Couche infrastructure (CLI, client HTTP, stockage, parsing)
"""

__version__ = "0.1.0"
