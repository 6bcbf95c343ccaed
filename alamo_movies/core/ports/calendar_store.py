"""
Interface port pour le cache local des calendriers.

Chaque cinema possede au plus un fichier calendrier, nomme de facon
deterministe a partir de son identifiant normalise.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ICalendarStore(ABC):
    """
    Interface pour le stockage des fichiers calendrier.

    Les identifiants recus sont toujours sous forme normalisee.
    """

    @property
    @abstractmethod
    def base_dir(self) -> Path:
        """Repertoire racine du cache."""
        ...

    @abstractmethod
    def path_for(self, cinema_id: str) -> Path:
        """
        Retourne le chemin du fichier calendrier d'un cinema.

        Args :
            cinema_id : Identifiant normalise

        Retourne :
            Chemin du fichier (qu'il existe ou non)
        """
        ...

    @abstractmethod
    def is_initialized(self) -> bool:
        """Verifie si le repertoire du cache existe."""
        ...

    @abstractmethod
    def list_cinema_ids(self) -> list[str]:
        """
        Liste les identifiants pour lesquels un fichier calendrier existe.

        Retourne :
            Identifiants tries, liste vide si le repertoire n'existe pas

        Leve :
            CacheIOError : Si le repertoire existe mais ne peut pas etre lu
        """
        ...

    @abstractmethod
    def write(self, cinema_id: str, payload: bytes) -> Path:
        """
        Ecrit (ou remplace entierement) le fichier calendrier d'un cinema.

        L'ecriture est atomique : le fichier est soit complet, soit inchange.

        Leve :
            CacheIOError : Si l'ecriture echoue
        """
        ...
