"""
Service de synchronisation d'un calendrier depuis le flux distant.

Une seule tentative de telechargement par appel. Le contenu est decode
avant d'etre ecrit : un flux invalide ne remplace jamais un fichier
du cache.
"""

import asyncio

from loguru import logger

from alamo_movies.adapters.parsing.calendar_parser import parse_calendar
from alamo_movies.core.entities.cinema import Cinema, Film
from alamo_movies.core.ports.calendar_source import ICalendarSource
from alamo_movies.core.ports.calendar_store import ICalendarStore


class CalendarSyncService:
    """
    Telecharge le calendrier d'un cinema et remplace son fichier de cache.

    Example:
        service = CalendarSyncService(source=client, store=store)
        cinema, films = await service.sync("0002")
    """

    def __init__(self, source: ICalendarSource, store: ICalendarStore) -> None:
        """
        Args:
            source: Source distante du flux
            store: Cache local des calendriers
        """
        self._source = source
        self._store = store

    async def sync(self, cinema_id: str) -> tuple[Cinema, list[Film]]:
        """
        Synchronise le calendrier d'un cinema.

        Args:
            cinema_id: Identifiant normalise

        Returns:
            Tuple (cinema, films) decode depuis le contenu telecharge

        Raises:
            NetworkError: Echec de transport
            RemoteError: Statut HTTP hors 2xx
            ParseError: Contenu impossible a decoder
            CacheIOError: Ecriture du cache impossible
        """
        payload = await self._source.fetch_calendar(cinema_id)
        cinema, films = parse_calendar(payload, source=f"flux {cinema_id}")

        if cinema.id != cinema_id:
            logger.warning(
                f"Le flux du cinema {cinema_id} decrit le cinema {cinema.id}"
            )

        # Ecriture disque hors de la boucle evenementielle
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._store.write, cinema_id, payload)
        logger.info(f"Cinema {cinema_id} synchronise: {cinema.name} ({len(films)} films)")
        return cinema, films
