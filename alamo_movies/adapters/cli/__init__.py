"""
Interface ligne de commande (Typer).

- commands/ : commandes films, cinema, get, get-all
- printer : affichage texte et JSON des cinemas et des films
- helpers : console Rich (stderr), injection du container, report d'erreurs
"""
