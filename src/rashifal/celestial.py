"""Tithi and nakshatra derivation from Sun/Moon ecliptic longitudes."""

import math
from collections.abc import Mapping, Sequence

from rashifal.catalog import NAKSHATRA_FLAVOR, NAKSHATRAS
from rashifal.errors import InvalidInputError, InvariantViolationError
from rashifal.models import CelestialFacts

TITHI_SPAN_DEG = 12.0
TITHI_COUNT = 30
NAKSHATRA_COUNT = 27
NAKSHATRA_SPAN_DEG = 360.0 / NAKSHATRA_COUNT

# Largest double below 360; keeps a wrapped -1e-20 from landing on 360.0.
_JUST_BELOW_360 = math.nextafter(360.0, 0.0)


def _finite(value: object, name: str) -> float:
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from e
    if not math.isfinite(number):
        raise InvalidInputError(f"{name} must be finite, got {number!r}")
    return number


def normalize_degrees(deg: float) -> float:
    """Map any finite angle into [0, 360)."""
    wrapped = math.fmod(deg, 360.0)
    if wrapped < 0:
        wrapped += 360.0
    return min(wrapped, _JUST_BELOW_360)


def tithi_index(sun_longitude_deg: float, moon_longitude_deg: float) -> int:
    """1-based lunar day: each tithi spans 12° of Moon−Sun elongation."""
    elongation = normalize_degrees(moon_longitude_deg - sun_longitude_deg + 360.0)
    index = math.floor(elongation / TITHI_SPAN_DEG) + 1
    if not 1 <= index <= TITHI_COUNT:
        raise InvariantViolationError(
            "tithi index out of range",
            index=index,
            sun=sun_longitude_deg,
            moon=moon_longitude_deg,
        )
    return index


def nakshatra_index(moon_longitude_deg: float) -> int:
    """0-based lunar mansion: each nakshatra spans 360/27° of Moon longitude."""
    index = math.floor(normalize_degrees(moon_longitude_deg) / NAKSHATRA_SPAN_DEG)
    if not 0 <= index < NAKSHATRA_COUNT:
        raise InvariantViolationError(
            "nakshatra index out of range", index=index, moon=moon_longitude_deg
        )
    return index


def derive(
    sun_longitude_deg: float,
    moon_longitude_deg: float,
    names: Sequence[str] = NAKSHATRAS,
    flavors: Mapping[str, str] = NAKSHATRA_FLAVOR,
) -> CelestialFacts:
    """Compute the request-wide celestial facts.

    Args:
        sun_longitude_deg: Sun ecliptic longitude, any finite real.
        moon_longitude_deg: Moon ecliptic longitude, any finite real.
        names: Nakshatra names in canonical order (27 entries).
        flavors: Nakshatra name → phrase. Missing names yield "".

    Returns:
        CelestialFacts with tithi 1..30 and nakshatra 0..26.

    Raises:
        InvalidInputError: On non-numeric or non-finite longitudes.
        InvariantViolationError: If an index leaves its range or the name
            table does not have 27 entries.
    """
    sun = _finite(sun_longitude_deg, "sun_longitude_deg")
    moon = _finite(moon_longitude_deg, "moon_longitude_deg")
    if len(names) != NAKSHATRA_COUNT:
        raise InvariantViolationError(
            "nakshatra name table has wrong length", length=len(names)
        )

    nak = nakshatra_index(moon)
    name = names[nak]
    return CelestialFacts(
        tithi_index=tithi_index(sun, moon),
        nakshatra_index=nak,
        nakshatra_name=name,
        flavor_phrase=flavors.get(name, ""),
    )
