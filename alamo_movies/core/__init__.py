"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), objets valeur
et la hierarchie d'erreurs. Cette couche n'a AUCUNE dependance vers
l'infrastructure (adapters, frameworks, HTTP).

Sous-packages :
- entities/ : Entites metier (Cinema, Market, Film)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (identifiant de cinema, verdict de fraicheur)
"""
