"""
Verdict de fraicheur d'un fichier calendrier.

Le verdict n'est jamais stocke : il est calcule a la demande par le
StalenessChecker et transmis a l'orchestrateur qui decide d'un
rafraichissement.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

from alamo_movies.core.errors import (
    CacheError,
    ExpiredCalendarError,
    MalformedCalendarError,
    MissingCalendarError,
)


class Freshness(Enum):
    """Etat d'un fichier calendrier du cache local."""

    FRESH = "fresh"
    MISSING = "missing"
    EXPIRED = "expired"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class StalenessVerdict:
    """
    Resultat de la verification d'un fichier calendrier.

    Attributs :
        freshness : Etat du fichier
        reason : Explication lisible pour EXPIRED et MALFORMED
        generated_at : Date de generation du flux si elle a pu etre lue
    """

    freshness: Freshness
    reason: Optional[str] = None
    generated_at: Optional[datetime] = None

    @property
    def is_fresh(self) -> bool:
        """Le fichier peut etre utilise sans rafraichissement."""
        return self.freshness is Freshness.FRESH

    def as_error(self, path: Path) -> Optional[CacheError]:
        """Convertit un verdict non frais en erreur de cache (pour les diagnostics)."""
        if self.freshness is Freshness.MISSING:
            return MissingCalendarError(path)
        if self.freshness is Freshness.EXPIRED:
            generated = self.generated_at.isoformat() if self.generated_at else "?"
            return ExpiredCalendarError(path, generated)
        if self.freshness is Freshness.MALFORMED:
            return MalformedCalendarError(path, self.reason or "contenu invalide")
        return None
