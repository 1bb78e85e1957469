"""Boundary layer: IP geolocation, local date resolution, and skyfield longitudes.

Everything here talks to the outside world or to the clock; the content
pipeline in rashifal.horoscope only ever sees the resolved values.
"""

import logging
from datetime import datetime
from functools import lru_cache
from pathlib import Path

import httpx
from pytz import UnknownTimeZoneError, timezone, utc
from skyfield.api import Loader
from skyfield.framelib import ecliptic_frame
from timezonefinder import TimezoneFinder

from rashifal.config import Settings
from rashifal.errors import InvalidInputError
from rashifal.horoscope import generate_horoscope
from rashifal.models import HoroscopeQuery, HoroscopeRequest, HoroscopeResponse, Location

logger = logging.getLogger(__name__)

METHOD = "skyfield + deterministic templates"


@lru_cache(maxsize=1)
def _timezone_finder() -> TimezoneFinder:
    return TimezoneFinder()


@lru_cache(maxsize=4)
def _ephemeris(data_dir: Path, name: str):
    """Load (downloading on first use) the JPL ephemeris once per process."""
    loader = Loader(str(data_dir))
    return loader, loader(name)


def client_address(forwarded_for: str | None, remote_addr: str | None) -> str | None:
    """Pick the visitor address: first X-Forwarded-For hop, else the socket peer."""
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    return remote_addr or None


def lookup_geo(ip: str, settings: Settings) -> dict | None:
    """Single ipapi.co call. Returns None on any failure; never retries.

    Args:
        ip: Visitor IPv4/IPv6 address.
        settings: Supplies the lookup URL template and timeout.

    Returns:
        Raw provider payload (latitude, longitude, city, region,
        country_name, timezone), or None if the lookup failed.
    """
    url = settings.geo_url.format(ip=ip)
    try:
        resp = httpx.get(url, timeout=settings.geo_timeout)
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("geo lookup failed for %s: %s", ip, e)
        return None
    if not isinstance(data, dict) or data.get("error"):
        reason = data.get("reason") if isinstance(data, dict) else type(data).__name__
        logger.warning("geo lookup rejected %s: %s", ip, reason)
        return None
    return data


def _coordinate(value: object, default: float) -> float:
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


def resolve_location(
    geo: dict | None, tz_override: str | None, settings: Settings
) -> Location:
    """Merge the provider payload with configured fallbacks, field by field.

    Timezone precedence: explicit override, provider timezone, timezone at
    the provider's coordinates, configured fallback.
    """
    geo = geo or {}
    lat = _coordinate(geo.get("latitude"), settings.fallback_lat)
    lon = _coordinate(geo.get("longitude"), settings.fallback_lon)

    tz_name = tz_override or geo.get("timezone")
    if not tz_name and "latitude" in geo and "longitude" in geo:
        tz_name = _timezone_finder().timezone_at(lat=lat, lng=lon)

    return Location(
        city=geo.get("city") or settings.fallback_city,
        region=geo.get("region") or settings.fallback_region,
        country=geo.get("country_name") or settings.fallback_country,
        lat=lat,
        lon=lon,
        time_zone=tz_name or settings.fallback_tz,
    )


def local_dates(now_utc: datetime, tz_name: str) -> tuple[str, str]:
    """Resolve the visitor's calendar date.

    Returns:
        ("YYYY-MM-DD", "dd/MM/yyyy") in tz_name.

    Raises:
        InvalidInputError: If tz_name is not a known IANA zone.
    """
    try:
        local_tz = timezone(tz_name)
    except UnknownTimeZoneError as e:
        raise InvalidInputError(f"Unknown timezone: {tz_name!r}") from e
    if now_utc.tzinfo is None:
        now_utc = utc.localize(now_utc)
    local = now_utc.astimezone(local_tz)
    return local.strftime("%Y-%m-%d"), local.strftime("%d/%m/%Y")


def ecliptic_longitudes(utc_dt: datetime, settings: Settings) -> tuple[float, float]:
    """Geocentric apparent ecliptic longitudes (of date) of the Sun and Moon.

    Args:
        utc_dt: Instant to evaluate (tz-aware).
        settings: Supplies the ephemeris file and its directory.

    Returns:
        (sun_deg, moon_deg), each in [0, 360).
    """
    loader, eph = _ephemeris(settings.data_dir, settings.ephemeris)
    t = loader.timescale().from_datetime(utc_dt)
    earth = eph["earth"].at(t)

    longitudes = []
    for body in ("sun", "moon"):
        _, lon, _ = earth.observe(eph[body]).apparent().frame_latlon(ecliptic_frame)
        longitudes.append(float(lon.degrees))
    return longitudes[0], longitudes[1]


def run(
    query: HoroscopeQuery,
    settings: Settings | None = None,
    now: datetime | None = None,
) -> HoroscopeResponse:
    """Top-level entry point: takes a HoroscopeQuery and returns a HoroscopeResponse.

    Args:
        query: Visitor address and optional timezone override.
        settings: Deployment settings; read from the environment if None.
        now: Instant to compute for; current UTC time if None.

    Returns:
        Fully computed HoroscopeResponse.

    Raises:
        HoroscopeError: On invalid timezone or any pipeline failure.
    """
    settings = settings or Settings.from_env()
    now = now or datetime.now(utc)
    if now.tzinfo is None:
        now = utc.localize(now)

    geo = lookup_geo(query.client_ip, settings) if query.client_ip else None
    location = resolve_location(geo, query.tz, settings)
    date_key, display_date = local_dates(now, location.time_zone)
    sun, moon = ecliptic_longitudes(now, settings)

    request = HoroscopeRequest(
        local_date_key=date_key,
        display_date=display_date,
        location=location,
        sun_longitude_deg=sun,
        moon_longitude_deg=moon,
    )
    return generate_horoscope(
        request,
        now=now,
        meta={"method": METHOD, "ephemeris": settings.ephemeris},
        locale=settings.locale,
    )
