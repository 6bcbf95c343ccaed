"""
Adaptateur pour le cache local des calendriers.

Implementation concrete de ICalendarStore sur le systeme de fichiers :
un fichier <cinema_id>.calendar.json par cinema sous un repertoire racine
passe a la construction.
"""

import os
import uuid
from pathlib import Path

from loguru import logger

from alamo_movies.core.errors import CacheIOError
from alamo_movies.core.ports.calendar_store import ICalendarStore

# Suffixe des fichiers calendrier
CALENDAR_SUFFIX = ".calendar.json"


class FileCalendarStore(ICalendarStore):
    """
    Cache des calendriers sur disque.

    Example:
        store = FileCalendarStore(Path("~/.alamo/db").expanduser())
        path = store.path_for("0002")
        store.write("0002", payload)
    """

    def __init__(self, base_dir: Path) -> None:
        """
        Initialise le cache.

        Args:
            base_dir: Repertoire racine (cree a la premiere ecriture)
        """
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, cinema_id: str) -> Path:
        return self._base_dir / f"{cinema_id}{CALENDAR_SUFFIX}"

    def is_initialized(self) -> bool:
        return self._base_dir.is_dir()

    def list_cinema_ids(self) -> list[str]:
        """
        Liste les cinemas presents dans le cache par scan du repertoire.

        Les fichiers temporaires et les sous-repertoires sont ignores.
        """
        if not self.is_initialized():
            return []

        try:
            entries = list(self._base_dir.iterdir())
        except OSError as e:
            raise CacheIOError(self._base_dir, str(e)) from e

        cinema_ids = [
            entry.name[: -len(CALENDAR_SUFFIX)]
            for entry in entries
            if entry.name.endswith(CALENDAR_SUFFIX)
            and not entry.name.startswith(".")
            and entry.is_file()
        ]
        return sorted(cinema_ids)

    def write(self, cinema_id: str, payload: bytes) -> Path:
        """
        Remplace le fichier calendrier de maniere atomique.

        Le contenu est ecrit dans un fichier temporaire du meme repertoire
        puis renomme avec os.replace : un lecteur concurrent voit soit
        l'ancien fichier complet, soit le nouveau.
        """
        destination = self.path_for(cinema_id)
        temp = destination.with_name(f".tmp_{uuid.uuid4().hex}_{cinema_id}")

        try:
            self._base_dir.mkdir(parents=True, exist_ok=True)
            temp.write_bytes(payload)
            os.replace(temp, destination)
        except OSError as e:
            # Nettoyer le fichier temporaire en cas d'erreur
            temp.unlink(missing_ok=True)
            raise CacheIOError(destination, str(e)) from e

        logger.debug(f"Calendrier ecrit: {destination} ({len(payload)} octets)")
        return destination
