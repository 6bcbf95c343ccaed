"""
Hierarchie des erreurs de l'application.

Toutes les erreurs metier derivent de AlamoError, ce qui permet a la CLI
de les intercepter a la frontiere des commandes et aux traitements en masse
de les isoler par cinema.

Erreurs du cache local :
- MissingCalendarError : aucun fichier calendrier
- ExpiredCalendarError : fichier present mais trop ancien
- MalformedCalendarError : fichier present mais date de generation illisible
- CacheIOError : lecture/ecriture impossible sur le disque

Erreurs de synchronisation :
- NetworkError : echec de transport HTTP
- RemoteError : reponse HTTP hors 2xx
- ParseError : contenu impossible a decoder (local ou distant)
- SyncFailedError : enveloppe d'une erreur survenue pendant un rafraichissement
"""

from pathlib import Path
from typing import Optional


class AlamoError(Exception):
    """Erreur de base de l'application."""


class InvalidCinemaIdError(AlamoError):
    """Identifiant de cinema impossible a normaliser."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Identifiant de cinema invalide: {raw!r}")


class CacheError(AlamoError):
    """Erreur liee a un fichier du cache local."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class MissingCalendarError(CacheError):
    """Aucun fichier calendrier pour ce chemin."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, "Fichier calendrier absent")


class ExpiredCalendarError(CacheError):
    """Fichier calendrier plus ancien que la duree de validite."""

    def __init__(self, path: Path, generated_at: str) -> None:
        self.generated_at = generated_at
        super().__init__(path, f"Fichier calendrier expire (genere le {generated_at})")


class MalformedCalendarError(CacheError):
    """Fichier calendrier present mais sans date de generation exploitable."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Fichier calendrier malforme ({reason})")


class CacheIOError(CacheError):
    """Lecture ou ecriture impossible dans le cache local."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Erreur d'acces au cache ({reason})")


class NetworkError(AlamoError):
    """Echec de transport lors de l'appel au flux distant."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"Erreur reseau sur {url}: {reason}")


class RemoteError(AlamoError):
    """Le flux distant a repondu avec un statut d'erreur."""

    def __init__(self, url: str, status_code: int) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Le flux distant a repondu {status_code} pour {url}")


class ParseError(AlamoError):
    """Contenu de calendrier impossible a decoder."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        self.source = source
        if source:
            message = f"{message} ({source})"
        super().__init__(message)


class SyncFailedError(AlamoError):
    """
    Echec du rafraichissement d'un cinema.

    Attributes:
        cinema_id: Identifiant normalise du cinema concerne
        cause: Erreur d'origine (NetworkError, RemoteError, ParseError, CacheIOError)
    """

    def __init__(self, cinema_id: str, cause: Exception) -> None:
        self.cinema_id = cinema_id
        self.cause = cause
        super().__init__(f"Echec de synchronisation du cinema {cinema_id}: {cause}")
