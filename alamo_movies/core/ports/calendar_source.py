"""
Interface port pour la source distante des calendriers.
"""

from abc import ABC, abstractmethod


class ICalendarSource(ABC):
    """
    Interface pour recuperer le flux calendrier d'un cinema.

    Une seule tentative par appel : aucune relance n'est faite ici.
    """

    @abstractmethod
    async def fetch_calendar(self, cinema_id: str) -> bytes:
        """
        Telecharge le flux calendrier brut d'un cinema.

        Args :
            cinema_id : Identifiant normalise

        Retourne :
            Contenu brut de la reponse

        Leve :
            NetworkError : Echec de transport
            RemoteError : Statut HTTP hors 2xx
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources (connexions HTTP)."""
        ...
