"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- console : instance Rich Console sur stderr (diagnostics, jamais les donnees)
- with_container : decorateur injectant un container et fermant le client HTTP
- report_error : affichage d'une erreur metier
"""

from functools import wraps

from rich.console import Console
from rich.markup import escape

from alamo_movies.container import Container
from alamo_movies.core.errors import AlamoError, SyncFailedError

# Les donnees vont sur stdout (typer.echo), les messages sur stderr
console = Console(stderr=True)


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Le client HTTP partage est ferme a la fin de la commande.

    Usage:
        @with_container()
        async def my_command(container, ...):
            resolver = container.cinema_resolver()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.calendar_client().close()
        return wrapper
    return decorator


def report_error(error: AlamoError) -> None:
    """Affiche une erreur metier sur stderr."""
    console.print(f"[red]Erreur:[/red] {escape(str(error))}")
    if isinstance(error, SyncFailedError):
        console.print("[dim]L'identifiant de cinema est-il valide ?[/dim]")
