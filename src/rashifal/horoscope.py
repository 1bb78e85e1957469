"""Deterministic per-sign horoscope composition and response assembly."""

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import TypeVar

from pytz import utc

from rashifal.catalog import SIGNS, TEMPLATES
from rashifal.celestial import derive
from rashifal.errors import InvalidInputError, InvariantViolationError
from rashifal.i18n import t
from rashifal.models import (
    CelestialFacts,
    HoroscopeRequest,
    HoroscopeResponse,
    Location,
    SignHoroscope,
    TemplatePools,
)
from rashifal.prng import SeededRandom

logger = logging.getLogger(__name__)

T = TypeVar("T")

SEED_SEPARATOR = "|"
LONGITUDE_DECIMALS = 6
DATE_KEY_FORMAT = "%Y-%m-%d"


def pick(rng: SeededRandom, pool: Sequence[T]) -> T:
    """Select one element with a single draw from rng."""
    if not pool:
        raise ValueError("cannot pick from an empty pool")
    index = int(rng.next() * len(pool))
    return pool[min(index, len(pool) - 1)]


def _check_date_key(date_key: str) -> str:
    if not isinstance(date_key, str) or not date_key:
        raise InvalidInputError(f"date key must be a non-empty string, got {date_key!r}")
    try:
        parsed = datetime.strptime(date_key, DATE_KEY_FORMAT)
    except ValueError as e:
        raise InvalidInputError(f"date key must be YYYY-MM-DD, got {date_key!r}") from e
    # strptime tolerates "2025-1-6"; the seed needs the zero-padded form.
    if parsed.strftime(DATE_KEY_FORMAT) != date_key:
        raise InvalidInputError(f"date key must be YYYY-MM-DD, got {date_key!r}")
    return date_key


def sign_seed(date_key: str, sign: str) -> str:
    """Seed string for one (date, sign) pair.

    Format is "<date_key>|<sign>". Changing it changes every historical horoscope.
    """
    return f"{date_key}{SEED_SEPARATOR}{sign}"


def compose(
    date_key: str,
    sign: str,
    facts: CelestialFacts,
    pools: TemplatePools = TEMPLATES,
    locale: str = "bn",
) -> SignHoroscope:
    """Build one sign's record.

    Draw order on the sign's generator is fixed: lead, health, advice.

    Args:
        date_key: "YYYY-MM-DD" already resolved in the visitor's timezone.
        sign: Sign name as it appears in the payload.
        facts: Shared celestial facts for the request.
        pools: Template fragments.
        locale: Language of the tithi label.

    Returns:
        SignHoroscope for (date_key, sign).

    Raises:
        InvalidInputError: If date_key is not an ISO calendar date.
    """
    rng = SeededRandom(sign_seed(_check_date_key(date_key), sign))
    lead = pick(rng, pools.lead)
    health = pick(rng, pools.health)
    advice = pick(rng, pools.advice)

    return SignHoroscope(
        sign=sign,
        text=f"{lead} {facts.flavor_phrase}".strip(),
        health=health,
        advice=advice,
        tithi_label=t("tithi_label", locale, n=facts.tithi_index),
        nakshatra_name=facts.nakshatra_name,
    )


def compose_all(
    date_key: str,
    facts: CelestialFacts,
    signs: Sequence[str] = SIGNS,
    pools: TemplatePools = TEMPLATES,
    locale: str = "bn",
) -> tuple[SignHoroscope, ...]:
    """Compose every sign, in the order given."""
    return tuple(compose(date_key, sign, facts, pools, locale) for sign in signs)


def _iso_utc(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = utc.localize(moment)
    stamp = moment.astimezone(utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def assemble(
    display_date: str,
    location: Location,
    sun_longitude_deg: float,
    moon_longitude_deg: float,
    facts: CelestialFacts,
    records: Sequence[SignHoroscope],
    generated_at: datetime,
    meta: Mapping[str, str] | None = None,
    signs: Sequence[str] = SIGNS,
) -> HoroscopeResponse:
    """Package all sign records and request metadata.

    Raises:
        InvariantViolationError: Unless records cover exactly the signs, once each.
    """
    got = [record.sign for record in records]
    if sorted(got) != sorted(signs) or len(set(got)) != len(got):
        missing = [s for s in signs if s not in got]
        raise InvariantViolationError(
            "incomplete horoscope", expected=len(signs), got=len(got), missing=missing
        )

    return HoroscopeResponse(
        date=display_date,
        location=location,
        sun_longitude=round(sun_longitude_deg, LONGITUDE_DECIMALS),
        moon_longitude=round(moon_longitude_deg, LONGITUDE_DECIMALS),
        tithi=facts.tithi_index,
        nakshatra=facts.nakshatra_name,
        horoscope=tuple(records),
        generated_at=_iso_utc(generated_at),
        meta=tuple((meta or {}).items()),
    )


def generate_horoscope(
    request: HoroscopeRequest,
    now: datetime | None = None,
    meta: Mapping[str, str] | None = None,
    locale: str = "bn",
) -> HoroscopeResponse:
    """Top-level entry point: resolved request in, full 12-sign payload out.

    Args:
        request: Date keys, location and the two longitudes.
        now: Generation timestamp; defaults to the current UTC time.
        meta: Engine/source tags copied into the payload's meta block.
        locale: Language of the tithi label.

    Returns:
        Fully assembled HoroscopeResponse.

    Raises:
        HoroscopeError: On any failure; no partial horoscope is returned.
    """
    facts = derive(request.sun_longitude_deg, request.moon_longitude_deg)
    records = compose_all(request.local_date_key, facts, locale=locale)
    response = assemble(
        request.display_date,
        request.location,
        float(request.sun_longitude_deg),
        float(request.moon_longitude_deg),
        facts,
        records,
        generated_at=now or datetime.now(utc),
        meta=meta,
    )
    logger.debug(
        "horoscope %s tithi=%d nakshatra=%d",
        request.local_date_key,
        facts.tithi_index,
        facts.nakshatra_index,
    )
    return response
