"""
Verification de fraicheur des fichiers calendrier.

Un fichier est utilisable si la date de generation du flux qu'il contient
(Calendar.FeedGenerated) date de moins de 24 heures. La source publie cette
date sans fuseau : elle est interpretee en UTC.
"""

import json
import re
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Optional

from alamo_movies.core.errors import CacheIOError
from alamo_movies.core.value_objects.staleness import Freshness, StalenessVerdict

# Age maximum d'un calendrier avant rafraichissement
MAX_CALENDAR_AGE = timedelta(hours=24)

# Date-heure complete : YYYY-MM-DDTHH:MM:SS[.fraction][+HH:MM]
_FEED_TIMESTAMP_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?([+-]\d{2}:\d{2})?$", re.ASCII
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_feed_timestamp(value: str) -> datetime:
    """
    Parse la date de generation du flux.

    Exige une date-heure complete (ISO 8601 / RFC 3339) avec ou sans
    decalage, un suffixe "Z" et des fractions de seconde de longueur variable.
    Une date seule ou le format compact sont refuses.

    Raises:
        ValueError: Si la valeur n'est pas une date-heure valide
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    if not _FEED_TIMESTAMP_PATTERN.match(text):
        raise ValueError(f"Date-heure incomplete: {value!r}")
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class StalenessChecker:
    """
    Decide si un fichier calendrier est FRESH, MISSING, EXPIRED ou MALFORMED.

    Lecture seule, sans memorisation du verdict : chaque appel relit le fichier.
    """

    def __init__(
        self,
        max_age: timedelta = MAX_CALENDAR_AGE,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Args:
            max_age: Age au-dela duquel un calendrier est expire
            clock: Horloge UTC (injectable pour les tests)
        """
        self._max_age = max_age
        self._clock = clock or _utc_now

    def check(self, path: Path) -> StalenessVerdict:
        """
        Verifie un fichier calendrier.

        Raises:
            CacheIOError: Si le fichier existe mais ne peut pas etre lu
        """
        path = Path(path)
        if not path.is_file():
            return StalenessVerdict(Freshness.MISSING)

        try:
            contents = path.read_bytes()
        except OSError as e:
            raise CacheIOError(path, str(e)) from e

        try:
            document = json.loads(contents)
        except ValueError as e:
            return StalenessVerdict(Freshness.MALFORMED, reason=f"JSON invalide: {e}")

        raw = None
        if isinstance(document, dict) and isinstance(document.get("Calendar"), dict):
            raw = document["Calendar"].get("FeedGenerated")
        if not isinstance(raw, str):
            return StalenessVerdict(Freshness.MALFORMED, reason="FeedGenerated absent")

        try:
            generated_at = parse_feed_timestamp(raw)
        except ValueError:
            return StalenessVerdict(
                Freshness.MALFORMED, reason=f"FeedGenerated illisible: {raw!r}"
            )

        # Une date dans le futur donne un age negatif : le fichier reste frais
        age = self._clock() - generated_at
        if age > self._max_age:
            return StalenessVerdict(
                Freshness.EXPIRED,
                reason=f"genere il y a {age}",
                generated_at=generated_at,
            )

        return StalenessVerdict(Freshness.FRESH, generated_at=generated_at)
