"""
Point d'entree CLI d'Alamo Movies.

Configure le logging a partir des options globales et monte les commandes.
"""

from typing import Annotated

import typer
from loguru import logger

from alamo_movies import __version__
from alamo_movies.adapters.cli.commands import cinema, films, get, get_all
from alamo_movies.config import Settings
from alamo_movies.logging_config import configure_logging, level_for_verbosity

app = typer.Typer(
    name="alamo",
    help="Consultation des programmes des cinemas Alamo Drafthouse",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Alamo Movies - programmes des cinemas Alamo Drafthouse."""
    settings = Settings()
    configure_logging(
        log_level=level_for_verbosity(settings.log_level, verbose, quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    logger.debug("Demarrage d'Alamo Movies", version=__version__)


# Consultation
app.command()(films)
app.command()(cinema)

# Synchronisation
app.command()(get)
app.command(name="get-all")(get_all)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    typer.echo(f"Donnees : {config.data_dir}")
    typer.echo(f"Cache des calendriers : {config.db_dir}")
    typer.echo(f"Flux : {config.feed_base_url}")
    typer.echo(f"Timeout HTTP : {config.http_timeout or 'aucun'}")
    typer.echo(f"Workers : {config.workers or 'nombre de CPU'}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Alamo Movies v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    app()


if __name__ == "__main__":
    main()
