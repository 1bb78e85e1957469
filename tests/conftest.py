from __future__ import annotations

from datetime import datetime

import pytest
from pytz import utc

from rashifal import compute
from rashifal.celestial import derive
from rashifal.config import Settings
from rashifal.models import HoroscopeRequest, Location

KOLKATA_GEO = {
    "ip": "203.0.113.7",
    "city": "Kolkata",
    "region": "West Bengal",
    "country_name": "India",
    "latitude": 22.5726,
    "longitude": 88.3639,
    "timezone": "Asia/Kolkata",
}


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(data_dir=tmp_path)


@pytest.fixture
def location() -> Location:
    return Location(
        city="Kolkata",
        region="West Bengal",
        country="India",
        lat=22.5726,
        lon=88.3639,
        time_zone="Asia/Kolkata",
    )


@pytest.fixture
def example_request(location) -> HoroscopeRequest:
    return HoroscopeRequest(
        local_date_key="2025-10-16",
        display_date="16/10/2025",
        location=location,
        sun_longitude_deg=30.0,
        moon_longitude_deg=42.0,
    )


@pytest.fixture
def example_facts():
    return derive(30.0, 42.0)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 10, 16, 4, 12, 33, 123000, tzinfo=utc)


@pytest.fixture
def offline(monkeypatch):
    """Stub the network and the ephemeris; record what the pipeline asked for."""
    calls: dict[str, list] = {"geo": [], "longitudes": []}

    def fake_lookup_geo(ip, settings):
        calls["geo"].append(ip)
        return dict(KOLKATA_GEO)

    def fake_longitudes(utc_dt, settings):
        calls["longitudes"].append(utc_dt)
        return 30.0, 42.0

    monkeypatch.setattr(compute, "lookup_geo", fake_lookup_geo)
    monkeypatch.setattr(compute, "ecliptic_longitudes", fake_longitudes)
    return calls
