from __future__ import annotations

import json
from datetime import date, timedelta

import pytest

from rashifal.catalog import NAKSHATRA_FLAVOR, SIGNS, TEMPLATES
from rashifal.celestial import derive
from rashifal.errors import HoroscopeError, InvalidInputError, InvariantViolationError
from rashifal.horoscope import (
    assemble,
    compose,
    compose_all,
    generate_horoscope,
    pick,
    sign_seed,
)
from rashifal.models import HoroscopeRequest
from rashifal.prng import SeededRandom


class _StuckAtOne:
    def next(self) -> float:
        return 1.0


def test_pick_clamps_degenerate_draw():
    assert pick(_StuckAtOne(), ("a", "b", "c")) == "c"


def test_pick_rejects_empty_pool():
    with pytest.raises(ValueError):
        pick(SeededRandom("x"), ())


def test_pick_consumes_one_draw():
    a = SeededRandom("s")
    b = SeededRandom("s")
    pick(a, TEMPLATES.lead)
    b.next()
    assert a.next() == b.next()


def test_sign_seed_format():
    assert sign_seed("2025-10-16", "মেষ") == "2025-10-16|মেষ"


def test_example_date_is_pinned(example_facts):
    flavor = NAKSHATRA_FLAVOR["রোহিণী"]

    mesha = compose("2025-10-16", "মেষ", example_facts)
    assert mesha.text == f"{TEMPLATES.lead[0]} {flavor}"
    assert mesha.health == TEMPLATES.health[0]
    assert mesha.advice == TEMPLATES.advice[0]
    assert mesha.tithi_label == "তিথি 2"
    assert mesha.nakshatra_name == "রোহিণী"

    vrisha = compose("2025-10-16", "বৃষ", example_facts)
    assert vrisha.text == f"{TEMPLATES.lead[4]} {flavor}"
    assert vrisha.health == TEMPLATES.health[0]
    assert vrisha.advice == TEMPLATES.advice[3]

    mithuna = compose("2025-10-16", "মিথুন", example_facts)
    assert (mithuna.text, mithuna.health, mithuna.advice) == (
        f"{TEMPLATES.lead[3]} {flavor}",
        TEMPLATES.health[3],
        TEMPLATES.advice[1],
    )


def test_draw_order_is_lead_health_advice(example_facts):
    rng = SeededRandom(sign_seed("2025-10-17", "ধনু"))
    expected = (pick(rng, TEMPLATES.lead), pick(rng, TEMPLATES.health), pick(rng, TEMPLATES.advice))
    record = compose("2025-10-17", "ধনু", derive(0.0, 250.0))
    assert (record.text, record.health, record.advice) == expected


def test_compose_is_deterministic(example_facts):
    for sign in SIGNS:
        assert compose("2025-10-16", sign, example_facts) == compose(
            "2025-10-16", sign, example_facts
        )


def test_text_without_flavor_has_no_trailing_space():
    facts = derive(0.0, 250.0)  # Mula, no flavour line
    assert facts.flavor_phrase == ""
    record = compose("2025-10-16", "মেষ", facts)
    assert record.text == TEMPLATES.lead[0]


def test_tithi_label_follows_locale(example_facts):
    assert compose("2025-10-16", "মেষ", example_facts, locale="en").tithi_label == "Tithi 2"


def test_content_changes_across_dates():
    facts = derive(0.0, 250.0)
    start = date(2025, 1, 1)
    for sign in SIGNS:
        seen = {
            compose((start + timedelta(days=d)).isoformat(), sign, facts) for d in range(30)
        }
        assert len(seen) > 1


def test_seeds_are_collision_free_over_sample():
    start = date(2020, 1, 1)
    keys = [(start + timedelta(days=d)).isoformat() for d in range(84)]
    seeds = {sign_seed(k, s) for k in keys for s in SIGNS}
    assert len(seeds) == 84 * 12
    first_draws = {SeededRandom(seed).next() for seed in seeds}
    assert len(first_draws) == len(seeds)


@pytest.mark.parametrize("bad", ["", "16/10/2025", "2025-1-6", "2025-02-30", "today", None])
def test_malformed_date_key_is_rejected(bad, example_facts):
    with pytest.raises(InvalidInputError):
        compose(bad, "মেষ", example_facts)


def test_compose_all_keeps_sign_order(example_facts):
    records = compose_all("2025-10-16", example_facts)
    assert tuple(r.sign for r in records) == SIGNS


def test_assemble_rounds_longitudes(example_facts, location, fixed_now):
    records = compose_all("2025-10-16", example_facts)
    response = assemble(
        "16/10/2025", location, 30.123456789, 42.98765432123, example_facts, records, fixed_now
    )
    assert response.sun_longitude == 30.123457
    assert response.moon_longitude == 42.987654
    assert response.generated_at == "2025-10-16T04:12:33.123Z"


def test_assemble_refuses_partial_output(example_facts, location, fixed_now):
    records = compose_all("2025-10-16", example_facts)
    with pytest.raises(InvariantViolationError) as excinfo:
        assemble("16/10/2025", location, 30.0, 42.0, example_facts, records[:11], fixed_now)
    assert excinfo.value.detail["missing"] == ["মীন"]

    duplicated = records[:11] + (records[0],)
    with pytest.raises(InvariantViolationError):
        assemble("16/10/2025", location, 30.0, 42.0, example_facts, duplicated, fixed_now)


def test_generate_horoscope_payload_shape(example_request, fixed_now):
    payload = generate_horoscope(
        example_request, now=fixed_now, meta={"method": "test"}
    ).to_dict()

    assert payload["date"] == "16/10/2025"
    assert payload["location"] == {
        "city": "Kolkata",
        "region": "West Bengal",
        "country": "India",
        "lat": 22.5726,
        "lon": 88.3639,
        "timeZone": "Asia/Kolkata",
    }
    assert payload["tithi"] == 2
    assert payload["nakshatra"] == "রোহিণী"
    assert payload["sun_longitude"] == 30.0
    assert payload["meta"] == {"generatedAt": "2025-10-16T04:12:33.123Z", "method": "test"}
    assert list(payload["horoscope"]) == list(SIGNS)
    for record in payload["horoscope"].values():
        assert record["text"] and record["health"] and record["advice"]
        assert record["tithi"] == "তিথি 2"
        assert record["nakshatra"] == "রোহিণী"
    json.dumps(payload, ensure_ascii=False)


def test_generate_horoscope_is_repeatable(example_request, fixed_now):
    first = generate_horoscope(example_request, now=fixed_now).to_dict()
    second = generate_horoscope(example_request).to_dict()
    first["meta"].pop("generatedAt")
    second["meta"].pop("generatedAt")
    assert first == second


def test_generate_horoscope_fails_closed(location):
    request = HoroscopeRequest(
        local_date_key="2025-10-16",
        display_date="16/10/2025",
        location=location,
        sun_longitude_deg=float("nan"),
        moon_longitude_deg=42.0,
    )
    with pytest.raises(HoroscopeError):
        generate_horoscope(request)
