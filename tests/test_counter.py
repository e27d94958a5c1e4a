# tests/test_counter.py

import random
from datetime import date

import pytest

import anniv
from anniv import converter
from anniv.core.errors import ConversionFailed, ErrorKind
from anniv.core.types import CalendarDate
from anniv.counter import calculate, label, occurrence


def L(y, m, d, leap=False):
    return CalendarDate.lunisolar(y, m, d, leap)


def S(y, m, d):
    return CalendarDate.solar(y, m, d)


class FakeBackend:
    """Table-driven backend: only the listed lunar dates exist."""

    def __init__(self, table):
        self.table = table

    def info(self):
        return {"name": "fake"}

    def to_solar(self, year, month, day, is_leap_month):
        return self.table[(year, month, day, is_leap_month)]

    def from_solar(self, d):
        raise NotImplementedError

    def leap_month(self, year):
        return None


@pytest.fixture
def fake():
    backend = FakeBackend({
        (2000, 4, 30, True): S(2000, 6, 1),
        (2000, 4, 30, False): S(2000, 5, 2),
        (2025, 4, 30, False): S(2025, 5, 27),
    })
    reg = converter._reg()
    saved = dict(reg._backends)
    anniv.register_backend("fake", backend, overwrite=True)
    yield "fake"
    reg._backends.clear()
    reg._backends.update(saved)


# --- countup ---

def test_countup_past():
    r = calculate(S(2024, 1, 1), "countup", S(2024, 6, 15))
    assert (r.phase, r.magnitude) == ("past", 166)
    assert r.display_label == "166 days elapsed"
    assert r.resolved_solar_date == S(2024, 1, 1)


def test_countup_future():
    r = calculate(S(2024, 6, 15), "countup", S(2024, 1, 1))
    assert (r.phase, r.magnitude) == ("future", 166)
    assert r.display_label == "166 days until start"


def test_countup_today():
    r = calculate(S(2024, 6, 15), "countup", S(2024, 6, 15))
    assert (r.phase, r.magnitude, r.display_label) == ("today", 0, "today")


def test_countup_lunar_anchor():
    r = calculate(L(2024, 1, 1), "countup", S(2024, 2, 10))
    assert r.phase == "today"
    assert r.resolved_solar_date == S(2024, 2, 10)

    r = calculate(L(2020, 4, 1, leap=True), "countup", S(2020, 6, 1))
    assert (r.phase, r.magnitude) == ("past", 9)
    assert r.resolved_solar_date == S(2020, 5, 23)


def test_countup_zh_labels():
    assert calculate(S(2024, 1, 1), "countup", S(2024, 6, 15), lang="zh").display_label == "已经 166 天"
    assert calculate(S(2024, 6, 15), "countup", S(2024, 1, 1), lang="zh").display_label == "还有 166 天"
    assert calculate(S(2024, 1, 1), "countup", S(2024, 1, 1), lang="zh").display_label == "就是今天"


# --- countdown, solar ---

def test_countdown_this_year():
    r = calculate(S(1990, 6, 15), "countdown", S(2024, 6, 1))
    assert (r.phase, r.magnitude) == ("future", 14)
    assert r.display_label == "14 days remaining"
    assert r.resolved_solar_date == S(2024, 6, 15)


def test_countdown_next_year():
    r = calculate(S(1990, 6, 15), "countdown", S(2024, 6, 16))
    assert (r.phase, r.magnitude) == ("future", 364)
    assert r.resolved_solar_date == S(2025, 6, 15)


def test_countdown_today():
    r = calculate(S(2000, 6, 15), "countdown", S(2024, 6, 15))
    assert (r.phase, r.magnitude, r.display_label) == ("today", 0, "today")
    assert r.resolved_solar_date == S(2024, 6, 15)


def test_countdown_feb29_common_year():
    r = calculate(S(2020, 2, 29), "countdown", S(2023, 1, 10))
    assert r.resolved_solar_date == S(2023, 3, 1)
    assert (r.phase, r.magnitude) == ("future", 50)


def test_countdown_feb29_leap_year():
    r = calculate(S(2020, 2, 29), "countdown", S(2024, 1, 10))
    assert r.resolved_solar_date == S(2024, 2, 29)
    assert (r.phase, r.magnitude) == ("future", 50)


def test_countdown_feb29_rolls_into_leap_year():
    r = calculate(S(2020, 2, 29), "countdown", S(2023, 12, 1))
    assert r.resolved_solar_date == S(2024, 2, 29)
    assert r.magnitude == 90


def test_countdown_feb29_on_mar1():
    r = calculate(S(2020, 2, 29), "countdown", S(2023, 3, 1))
    assert r.phase == "today"
    assert r.resolved_solar_date == S(2023, 3, 1)


def test_countdown_zh_label():
    r = calculate(S(1990, 6, 15), "countdown", S(2024, 6, 1), lang="zh")
    assert r.display_label == "还剩 14 天"


# --- countdown, lunisolar ---

def test_countdown_lunar_this_year():
    r = calculate(L(1990, 8, 15), "countdown", S(2024, 9, 1))
    assert r.resolved_solar_date == S(2024, 9, 17)
    assert (r.phase, r.magnitude) == ("future", 16)


def test_countdown_lunar_today():
    r = calculate(L(1990, 8, 15), "countdown", S(2024, 9, 17))
    assert (r.phase, r.magnitude) == ("today", 0)


def test_countdown_lunar_next_year():
    r = calculate(L(1990, 8, 15), "countdown", S(2024, 9, 18))
    assert r.resolved_solar_date == S(2025, 10, 6)
    assert (r.phase, r.magnitude) == ("future", (date(2025, 10, 6) - date(2024, 9, 18)).days)
    assert r.magnitude == 383


def test_countdown_lunar_leap_anchor_uses_plain_month():
    # anchor in leap 4th month of 2020; yearly occurrence is the ordinary 4th month
    r = calculate(L(2020, 4, 1, leap=True), "countdown", S(2024, 1, 1))
    assert r.resolved_solar_date == converter.lunar_to_solar(L(2024, 4, 1))
    assert r.phase == "future"


def test_countdown_skips_missing_year(fake):
    r = calculate(L(2000, 4, 30), "countdown", S(2024, 3, 1), backend=fake)
    assert r.resolved_solar_date == S(2025, 5, 27)
    assert r.phase == "future"
    assert r.magnitude == (date(2025, 5, 27) - date(2024, 3, 1)).days


def test_countdown_fallback_when_no_occurrence(fake):
    r = calculate(L(2000, 4, 30, leap=True), "countdown", S(2030, 3, 1), backend=fake)
    assert r.phase == "past"
    assert r.resolved_solar_date == S(2000, 6, 1)
    assert r.magnitude == (date(2030, 3, 1) - date(2000, 6, 1)).days
    assert r.display_label == f"{r.magnitude} days elapsed"


def test_occurrence(fake):
    assert occurrence(S(2020, 2, 29), 2023) == S(2023, 3, 1)
    assert occurrence(S(2020, 2, 29), 2024) == S(2024, 2, 29)
    assert occurrence(S(2020, 12, 31), 2023) == S(2023, 12, 31)
    assert occurrence(L(2000, 4, 30), 2024, backend=fake) is None
    assert occurrence(L(2000, 4, 30), 2025, backend=fake) == S(2025, 5, 27)


def test_countdown_never_past():
    random.seed(99)
    lo, hi = date(1950, 1, 1).toordinal(), date(2090, 12, 31).toordinal()
    for _ in range(300):
        event = CalendarDate.from_date(date.fromordinal(random.randint(lo, hi)))
        today = CalendarDate.from_date(date.fromordinal(random.randint(lo, hi)))
        r = calculate(event, "countdown", today)
        assert r.phase in ("future", "today")
        assert (r.magnitude == 0) == (r.phase == "today")
        assert r.resolved_solar_date.to_date() >= today.to_date()


def test_countdown_lunar_never_past_outside_fallback():
    random.seed(2024)
    lo, hi = date(1950, 1, 1).toordinal(), date(2090, 12, 31).toordinal()
    for _ in range(300):
        solar = CalendarDate.from_date(date.fromordinal(random.randint(lo, hi)))
        event = converter.solar_to_lunar(solar).as_date()
        assert converter.is_valid_lunar_date(event)
        today = CalendarDate.from_date(date.fromordinal(random.randint(lo, hi)))

        r = calculate(event, "countdown", today)
        assert (r.magnitude == 0) == (r.phase == "today")
        if r.phase == "past":
            # fallback: no occurrence on or after today in either searched year
            assert r.resolved_solar_date == solar
            for year in (today.year, today.year + 1):
                c = occurrence(event, year)
                assert c is None or c.to_date() < today.to_date()
        else:
            assert r.resolved_solar_date.to_date() >= today.to_date()


def test_fake_backend_does_not_leak(fake):
    assert fake in anniv.list_backends()


def test_registry_restored_after_fake_backend():
    assert "fake" not in anniv.list_backends()


# --- errors ---

def test_anchor_conversion_failure_propagates():
    with pytest.raises(ConversionFailed) as ei:
        calculate(L(2024, 4, 1, leap=True), "countup", S(2024, 6, 1))
    assert ei.value.kind is ErrorKind.CONVERSION_FAILED
    with pytest.raises(ConversionFailed):
        calculate(L(2024, 4, 1, leap=True), "countdown", S(2024, 6, 1))


def test_bad_arguments():
    with pytest.raises(ValueError):
        calculate(S(2024, 1, 1), "sideways", S(2024, 1, 1))
    with pytest.raises(ValueError):
        calculate(S(2024, 1, 1), "countup", S(2024, 1, 1), lang="fr")
    with pytest.raises(ValueError):
        label("today", 0, "fr")
