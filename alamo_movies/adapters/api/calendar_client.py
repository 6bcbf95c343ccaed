"""
Client HTTP pour le flux calendrier Alamo Drafthouse.

Implemente l'interface ICalendarSource. Le contenu est renvoye brut :
le decodage est fait par le service de synchronisation afin que le
fichier mis en cache soit exactement celui publie par la source.

Usage:
    client = AlamoCalendarClient(base_url=DEFAULT_FEED_BASE_URL)
    payload = await client.fetch_calendar("0002")
    await client.close()
"""

from typing import Optional

import httpx
from loguru import logger

from alamo_movies.core.errors import NetworkError, RemoteError
from alamo_movies.core.ports.calendar_source import ICalendarSource

DEFAULT_FEED_BASE_URL = "https://feeds.drafthouse.com/adcService/showtimes.svc"


class AlamoCalendarClient(ICalendarSource):
    """
    Client du flux calendrier.

    Attributes:
        base_url: URL de base du service de programmation

    Example:
        client = AlamoCalendarClient()
        try:
            payload = await client.fetch_calendar("0002")
        finally:
            await client.close()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_FEED_BASE_URL,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL de base du flux
            timeout: Delai maximum par requete en secondes (None = pas de limite)
        """
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    def calendar_url(self, cinema_id: str) -> str:
        """URL complete du calendrier d'un cinema."""
        return f"{self.base_url}/calendar/{cinema_id}/"

    async def fetch_calendar(self, cinema_id: str) -> bytes:
        url = self.calendar_url(cinema_id)
        logger.debug(f"GET {url}")

        client = self._get_client()
        try:
            response = await client.get(f"/calendar/{cinema_id}/")
        except httpx.TransportError as e:
            raise NetworkError(url, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise RemoteError(url, response.status_code)

        return response.content

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
