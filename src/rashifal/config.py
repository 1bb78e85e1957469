"""Runtime settings read from the environment (after load_dotenv at each entry point)."""

import os
from dataclasses import dataclass
from pathlib import Path

_ROOT = Path(__file__).parent.parent.parent
_PREFIX = "RASHIFAL_"


def _env(name: str, default: str) -> str:
    return os.environ.get(_PREFIX + name) or default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(_PREFIX + name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{_PREFIX}{name} must be a number, got {raw!r}") from e


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(_PREFIX + name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{_PREFIX}{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    """Deployment-specific defaults. The horoscope content never depends on these."""

    fallback_city: str = "New Delhi"
    fallback_region: str = "Delhi"
    fallback_country: str = "India"
    fallback_lat: float = 28.6139
    fallback_lon: float = 77.2090
    fallback_tz: str = "Asia/Kolkata"
    geo_url: str = "https://ipapi.co/{ip}/json/"  # ipapi.co free tier
    geo_timeout: float = 5.0  # Seconds
    data_dir: Path = _ROOT / "resources"  # skyfield download/cache directory
    ephemeris: str = "de421.bsp"
    cache_max_age: int = 900  # s-maxage (seconds)
    stale_while_revalidate: int = 3600  # Seconds
    locale: str = "bn"  # Tithi label language
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build Settings from RASHIFAL_* variables, keeping defaults for unset ones.

        Raises:
            ValueError: If a numeric variable does not parse.
        """
        d = cls()
        return cls(
            fallback_city=_env("FALLBACK_CITY", d.fallback_city),
            fallback_region=_env("FALLBACK_REGION", d.fallback_region),
            fallback_country=_env("FALLBACK_COUNTRY", d.fallback_country),
            fallback_lat=_env_float("FALLBACK_LAT", d.fallback_lat),
            fallback_lon=_env_float("FALLBACK_LON", d.fallback_lon),
            fallback_tz=_env("FALLBACK_TZ", d.fallback_tz),
            geo_url=_env("GEO_URL", d.geo_url),
            geo_timeout=_env_float("GEO_TIMEOUT", d.geo_timeout),
            data_dir=Path(_env("DATA_DIR", str(d.data_dir))),
            ephemeris=_env("EPHEMERIS", d.ephemeris),
            cache_max_age=_env_int("CACHE_MAX_AGE", d.cache_max_age),
            stale_while_revalidate=_env_int(
                "STALE_WHILE_REVALIDATE", d.stale_while_revalidate
            ),
            locale=_env("LOCALE", d.locale),
            log_level=_env("LOG_LEVEL", d.log_level).upper(),
        )

    @property
    def cache_control(self) -> str:
        return (
            f"s-maxage={self.cache_max_age}, "
            f"stale-while-revalidate={self.stale_while_revalidate}"
        )
