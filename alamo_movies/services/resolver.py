"""
Orchestration du cache des calendriers.

Pour un cinema : verification de fraicheur, rafraichissement eventuel
(une seule tentative), puis chargement du fichier. Un echec de
rafraichissement est remonte en SyncFailedError : les donnees perimees
ne sont jamais servies silencieusement.

Pour un ensemble de cinemas : execution en parallele bornee (semaphore
dimensionne sur le nombre de CPU), chaque erreur etant isolee dans le
resultat de son cinema. Le bilan n'est etabli qu'une fois tous les
cinemas traites.
"""

import asyncio
import os
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Iterable, Optional

from loguru import logger

from alamo_movies.adapters.parsing.calendar_parser import load_calendar
from alamo_movies.core.entities.cinema import Cinema, Film
from alamo_movies.core.errors import AlamoError, SyncFailedError
from alamo_movies.core.ports.calendar_store import ICalendarStore
from alamo_movies.core.value_objects.cinema_id import to_cinema_id
from alamo_movies.services.staleness import StalenessChecker
from alamo_movies.services.synchronizer import CalendarSyncService
from alamo_movies.utils.constants import KNOWN_CINEMAS

CinemaData = tuple[Cinema, list[Film]]


@dataclass
class BulkReport:
    """
    Bilan d'un traitement en masse.

    Attributes:
        successes: Cinemas traites avec succes (ordre de la liste de travail)
        failures: Erreur par identifiant en echec
        no_local_data: True si aucun cache local n'existe (mode mise a jour seule)
    """

    successes: list[Cinema] = field(default_factory=list)
    failures: dict[str, AlamoError] = field(default_factory=dict)
    no_local_data: bool = False

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures


class CinemaResolver:
    """
    Point d'entree metier : garantit un cache valide avant chaque lecture.

    Example:
        resolver = CinemaResolver(store, checker, sync_service)
        cinema, films = await resolver.resolve("2")
        report = await resolver.resolve_all(update_only_local=True)
    """

    def __init__(
        self,
        store: ICalendarStore,
        checker: StalenessChecker,
        sync_service: CalendarSyncService,
        workers: Optional[int] = None,
        catalog: Iterable[Cinema] = KNOWN_CINEMAS,
    ) -> None:
        """
        Args:
            store: Cache local des calendriers
            checker: Verificateur de fraicheur
            sync_service: Service de synchronisation distante
            workers: Nombre de cinemas traites en parallele (defaut: nombre de CPU)
            catalog: Liste de reference des cinemas connus
        """
        self._store = store
        self._checker = checker
        self._sync_service = sync_service
        self._workers = workers or os.cpu_count() or 1
        self._catalog = tuple(catalog)

    @property
    def workers(self) -> int:
        return self._workers

    async def resolve(self, cinema_id: str) -> CinemaData:
        """
        Retourne le cinema et ses films depuis un cache valide.

        Le calendrier est rafraichi (une fois) s'il est absent, expire
        ou malforme, puis relu depuis le cache.

        Raises:
            InvalidCinemaIdError: Identifiant invalide
            SyncFailedError: Le rafraichissement necessaire a echoue
            CacheIOError, ParseError: Le fichier du cache est illisible
        """
        cinema_id = to_cinema_id(cinema_id)
        path = self._store.path_for(cinema_id)

        # Lectures disque hors de la boucle evenementielle
        loop = asyncio.get_running_loop()
        verdict = await loop.run_in_executor(None, self._checker.check, path)
        if not verdict.is_fresh:
            logger.debug(f"Rafraichissement du cinema {cinema_id}: {verdict.as_error(path)}")
            await self._sync(cinema_id)

        return await loop.run_in_executor(None, load_calendar, path)

    async def refresh(self, cinema_id: str) -> CinemaData:
        """
        Force la synchronisation d'un cinema, sans verifier la fraicheur.

        Raises:
            InvalidCinemaIdError: Identifiant invalide
            SyncFailedError: La synchronisation a echoue
        """
        return await self._sync(to_cinema_id(cinema_id))

    async def _sync(self, cinema_id: str) -> CinemaData:
        try:
            return await self._sync_service.sync(cinema_id)
        except AlamoError as e:
            raise SyncFailedError(cinema_id, e) from e

    async def resolve_all(
        self,
        cinema_ids: Optional[Iterable[str]] = None,
        update_only_local: bool = False,
    ) -> BulkReport:
        """
        Traite un ensemble de cinemas en parallele.

        Args:
            cinema_ids: Cinemas a traiter (defaut: catalogue complet, ou
                tout le cache local en mode mise a jour seule)
            update_only_local: Limiter aux cinemas deja en cache et forcer
                leur synchronisation

        Returns:
            BulkReport avec succes et echecs par cinema

        Raises:
            CacheIOError: Le repertoire du cache existe mais ne peut pas etre lu
        """
        report = BulkReport()

        if update_only_local:
            if not self._store.is_initialized():
                report.no_local_data = True
                return report
            local_ids = self._store.list_cinema_ids()
            if cinema_ids is not None:
                wanted = set(self._normalize_all(cinema_ids, report))
                local_ids = [cid for cid in local_ids if cid in wanted]
            work = local_ids
            operation = self.refresh
        else:
            if cinema_ids is None:
                cinema_ids = [cinema.id for cinema in self._catalog]
            work = self._normalize_all(cinema_ids, report)
            operation = self.resolve

        results = await self._run_pool(work, operation)

        for cinema_id, result in zip(work, results):
            if isinstance(result, AlamoError):
                logger.warning(f"Echec pour le cinema {cinema_id}: {result}")
                report.failures[cinema_id] = result
            elif isinstance(result, BaseException):
                raise result
            else:
                cinema, _films = result
                report.successes.append(cinema)

        logger.info(
            f"Traitement en masse termine: {len(report.successes)} succes, "
            f"{report.failure_count} echec(s)"
        )
        return report

    async def list_local_cinemas(self) -> BulkReport:
        """
        Charge tous les cinemas du cache local (rafraichis si necessaire).

        Returns:
            BulkReport dont les succes sont tries par identifiant
        """
        if not self._store.is_initialized():
            return BulkReport(no_local_data=True)

        report = await self.resolve_all(self._store.list_cinema_ids())
        report.successes.sort(key=lambda cinema: cinema.id)
        return report

    def known_cinemas(self) -> list[Cinema]:
        """Catalogue de reference, trie par identifiant."""
        return sorted(self._catalog, key=lambda cinema: cinema.id)

    @staticmethod
    def _normalize_all(cinema_ids: Iterable[str], report: BulkReport) -> list[str]:
        """Normalise et dedoublonne; les identifiants invalides vont dans les echecs."""
        normalized: dict[str, None] = {}
        for raw in cinema_ids:
            try:
                normalized[to_cinema_id(raw)] = None
            except AlamoError as e:
                logger.warning(str(e))
                report.failures[str(raw)] = e
        return list(normalized)

    async def _run_pool(
        self,
        cinema_ids: list[str],
        operation: Callable[[str], Awaitable[CinemaData]],
    ) -> list:
        """Execute l'operation pour chaque cinema avec au plus `workers` en parallele."""
        semaphore = asyncio.Semaphore(self._workers)

        async def _run(cinema_id: str) -> CinemaData:
            async with semaphore:
                return await operation(cinema_id)

        return await asyncio.gather(
            *(_run(cinema_id) for cinema_id in cinema_ids),
            return_exceptions=True,
        )
