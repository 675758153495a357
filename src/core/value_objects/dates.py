"""
Normalisation des dates et durees recues du fournisseur de metadonnees.

Le serveur utilise des dates "sentinelles" (epoch Unix, date minimale,
date maximale) pour signifier l'absence de date, et serialise les durees
au format TimeSpan ([-][d.]hh:mm:ss[.fffffff]).
"""

import re
from datetime import datetime, timedelta
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer

UNIX_EPOCH = datetime(1970, 1, 1)

# Plus de 6 decimales (TimeSpan/DateTime cote serveur: 7 decimales)
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")

_TIMESPAN_PATTERN = re.compile(
    r"^(?P<sign>-)?"
    r"(?:(?P<days>\d+)\.)?"
    r"(?P<hours>\d{1,2}):(?P<minutes>\d{2}):(?P<seconds>\d{2})"
    r"(?:\.(?P<fraction>\d{1,7}))?$"
)


def normalize_sentinel_date(value: Optional[datetime]) -> Optional[datetime]:
    """
    Ramene les dates sentinelles a None.

    La comparaison porte sur l'heure murale (tzinfo ignore). La date maximale
    est comparee apres troncature des fractions (.9999999 -> .999999).

    Args:
        value: Date recue ou None

    Returns:
        None pour une sentinelle, sinon la date inchangee
    """
    if value is None:
        return None
    wall_clock = value.replace(tzinfo=None)
    if wall_clock in (UNIX_EPOCH, datetime.min, datetime.max):
        return None
    return value


def trim_fraction(value: Any) -> Any:
    """Tronque les fractions de seconde au-dela de 6 chiffres."""
    if isinstance(value, str):
        return _EXCESS_FRACTION.sub(r"\1", value)
    return value


def parse_timespan(value: Any) -> Any:
    """
    Convertit une duree TimeSpan en timedelta.

    Les autres formats (ISO 8601, secondes) sont laisses a pydantic.

    Examples:
        "00:24:00" -> timedelta(minutes=24)
        "1.02:03:04.5" -> timedelta(days=1, hours=2, minutes=3, seconds=4.5)
    """
    if not isinstance(value, str):
        return value
    match = _TIMESPAN_PATTERN.match(value.strip())
    if match is None:
        return value

    fraction = match.group("fraction") or "0"
    try:
        duration = timedelta(
            days=int(match.group("days") or 0),
            hours=int(match.group("hours")),
            minutes=int(match.group("minutes")),
            seconds=int(match.group("seconds")),
            microseconds=int(fraction.ljust(7, "0")[:6]),
        )
        return -duration if match.group("sign") else duration
    except OverflowError as e:
        # Au-dela de timedelta.max: signale a pydantic comme valeur invalide
        raise ValueError(f"TimeSpan out of range: {value}") from e


def format_timespan(value: timedelta) -> str:
    """Formate un timedelta au format TimeSpan ([-][d.]hh:mm:ss[.ffffff])."""
    sign = "-" if value < timedelta(0) else ""
    value = abs(value)
    hours, remainder = divmod(value.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    text = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if value.days:
        text = f"{value.days}.{text}"
    if value.microseconds:
        text = f"{text}.{value.microseconds:06d}"
    return sign + text


# Types annotes reutilises par les enregistrements
ShokoDateTime = Annotated[datetime, BeforeValidator(trim_fraction)]

ShokoDuration = Annotated[
    timedelta,
    BeforeValidator(parse_timespan),
    PlainSerializer(format_timespan, return_type=str, when_used="json"),
]
