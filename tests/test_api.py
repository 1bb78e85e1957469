"""Tests for the HTTP surface."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from rashifal import api, compute
from rashifal.catalog import SIGNS
from rashifal.config import Settings

client = TestClient(api.app)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch, tmp_path):
    monkeypatch.setattr(api, "settings", Settings(data_dir=tmp_path))


def test_horoscope_shape_and_cache_header(offline):
    resp = client.get("/api/horoscope")
    assert resp.status_code == 200
    assert resp.headers["cache-control"] == "s-maxage=900, stale-while-revalidate=3600"

    data = resp.json()
    assert set(data) == {
        "date",
        "location",
        "sun_longitude",
        "moon_longitude",
        "tithi",
        "nakshatra",
        "horoscope",
        "meta",
    }
    assert data["location"]["timeZone"] == "Asia/Kolkata"
    assert data["tithi"] == 2
    assert list(data["horoscope"]) == list(SIGNS)
    assert data["horoscope"]["মেষ"]["tithi"] == "তিথি 2"
    assert "generatedAt" in data["meta"]


def test_forwarded_for_is_used_for_lookup(offline):
    client.get("/api/horoscope", headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})
    assert offline["geo"] == ["203.0.113.7"]


def test_tz_query_overrides_provider(offline):
    data = client.get("/api/horoscope", params={"tz": "Asia/Dhaka"}).json()
    assert data["location"]["timeZone"] == "Asia/Dhaka"


def test_repeat_calls_differ_only_in_timestamp(offline):
    first = client.get("/api/horoscope").json()
    second = client.get("/api/horoscope").json()
    first["meta"].pop("generatedAt")
    second["meta"].pop("generatedAt")
    assert first == second


def test_invalid_timezone_is_generic_500(offline, caplog):
    with caplog.at_level("ERROR", logger="rashifal.api"):
        resp = client.get("/api/horoscope", params={"tz": "Not/AZone"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to generate horoscope"}
    assert "Not/AZone" in caplog.text


def test_internal_failure_does_not_leak_detail(offline, monkeypatch):
    def broken(utc_dt, settings):
        return float("nan"), 42.0

    monkeypatch.setattr(compute, "ecliptic_longitudes", broken)
    resp = client.get("/api/horoscope")
    assert resp.status_code == 500
    assert "nan" not in resp.text
    assert "cache-control" not in resp.headers


def test_embed_script_served():
    resp = client.get("/embed.js")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/javascript")
    assert "data-endpoint" in resp.text


def test_health():
    assert client.get("/__health").json() == {"ok": True}
