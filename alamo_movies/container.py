"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI : le repertoire
du cache et l'URL du flux sont lus une seule fois dans Settings puis
passes aux adaptateurs a leur construction.
"""

from dependency_injector import containers, providers

from alamo_movies.adapters.api.calendar_client import AlamoCalendarClient
from alamo_movies.adapters.calendar_store import FileCalendarStore
from alamo_movies.config import Settings
from alamo_movies.services.resolver import CinemaResolver
from alamo_movies.services.staleness import StalenessChecker
from alamo_movies.services.synchronizer import CalendarSyncService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        resolver = container.cinema_resolver()
        cinema, films = await resolver.resolve("0002")
        await container.calendar_client().close()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    calendar_store = providers.Singleton(
        FileCalendarStore,
        base_dir=config.provided.db_dir,
    )

    # Client HTTP - Singleton pour partager les connexions entre cinemas
    calendar_client = providers.Singleton(
        AlamoCalendarClient,
        base_url=config.provided.feed_base_url,
        timeout=config.provided.http_timeout,
    )

    # Services
    staleness_checker = providers.Singleton(StalenessChecker)

    sync_service = providers.Factory(
        CalendarSyncService,
        source=calendar_client,
        store=calendar_store,
    )

    cinema_resolver = providers.Factory(
        CinemaResolver,
        store=calendar_store,
        checker=staleness_checker,
        sync_service=sync_service,
        workers=config.provided.workers,
    )
