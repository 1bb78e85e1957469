"""Data model definitions — explicit boundaries between input, compute, and render layers."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HoroscopeQuery:
    """Raw visitor input. Not yet resolved."""

    client_ip: str | None  # First X-Forwarded-For entry or socket peer
    tz: str | None = None  # Optional "Area/City" override (?tz=)


@dataclass(frozen=True)
class Location:
    """Best-effort visitor location after geolocation + fallback."""

    city: str
    region: str
    country: str
    lat: float  # Latitude (decimal degrees)
    lon: float  # Longitude (decimal degrees)
    time_zone: str  # IANA timezone name ("Asia/Kolkata")

    def to_dict(self) -> dict[str, Any]:
        return {
            "city": self.city,
            "region": self.region,
            "country": self.country,
            "lat": self.lat,
            "lon": self.lon,
            "timeZone": self.time_zone,
        }


@dataclass(frozen=True)
class HoroscopeRequest:
    """Fully resolved input to the content pipeline."""

    local_date_key: str  # "YYYY-MM-DD" in the visitor's timezone
    display_date: str  # "dd/MM/yyyy"
    location: Location
    sun_longitude_deg: float  # Ecliptic longitude (degrees)
    moon_longitude_deg: float  # Ecliptic longitude (degrees)


@dataclass(frozen=True)
class CelestialFacts:
    """Tithi/nakshatra derived once per request, shared by all signs."""

    tithi_index: int  # 1..30
    nakshatra_index: int  # 0..26
    nakshatra_name: str
    flavor_phrase: str  # "" when the nakshatra has no flavour entry


@dataclass(frozen=True)
class TemplatePools:
    """Ordered candidate fragments. Index order must never change."""

    lead: tuple[str, ...]
    health: tuple[str, ...]
    advice: tuple[str, ...]


@dataclass(frozen=True)
class SignHoroscope:
    """One sign's record for one date."""

    sign: str
    text: str
    health: str
    advice: str
    tithi_label: str  # Localised "Tithi {n}"
    nakshatra_name: str

    def to_dict(self) -> dict[str, str]:
        return {
            "text": self.text,
            "health": self.health,
            "advice": self.advice,
            "tithi": self.tithi_label,
            "nakshatra": self.nakshatra_name,
        }


@dataclass(frozen=True)
class HoroscopeResponse:
    """The sole input to serializers and renderers. Never mutated after assembly."""

    date: str
    location: Location
    sun_longitude: float  # Rounded to 6 decimals
    moon_longitude: float  # Rounded to 6 decimals
    tithi: int
    nakshatra: str
    horoscope: tuple[SignHoroscope, ...]  # Canonical sign order
    generated_at: str  # ISO-8601 UTC ("2025-10-16T04:12:33.123Z")
    meta: tuple[tuple[str, str], ...] = ()  # Engine/source tags

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "location": self.location.to_dict(),
            "sun_longitude": self.sun_longitude,
            "moon_longitude": self.moon_longitude,
            "tithi": self.tithi,
            "nakshatra": self.nakshatra,
            "horoscope": {record.sign: record.to_dict() for record in self.horoscope},
            "meta": {"generatedAt": self.generated_at, **dict(self.meta)},
        }
