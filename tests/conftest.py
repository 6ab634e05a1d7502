# tests/conftest.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

import pytest

from bikrami.core.types import Adhimasa, Location
from bikrami.engines.panchang import PanchangEngine
from bikrami.engines.specs import AMRITSAR, UJJAIN


@dataclass
class StubAstronomy:
    """
    Deterministic AstronomyProvider: every query returns the configured value.
    Records the arguments it was called with where ordering matters.
    """
    sun: float = 10.0
    moon: float = 100.0
    last_conj: float = 350.0
    next_conj: float = 20.0
    masa: int = 0
    saura_masa: int = 0
    saura_divasa: int = 5
    kali: int = 5125
    daylight: float = 0.0
    kali_args: List[float] = field(default_factory=list)
    daylight_args: List[float] = field(default_factory=list)

    def julian_day_to_ahargana(self, julian_day: float) -> float:
        return julian_day - 588465.5

    def ahargana_to_kali(self, ahargana: float) -> int:
        self.kali_args.append(ahargana)
        return self.kali

    def kali_to_saka(self, kali_year: int) -> int:
        return kali_year - 3179

    def daylight_equation(self, year: int, latitude: float, ahargana: float) -> float:
        self.daylight_args.append(ahargana)
        return self.daylight

    def true_longitudes(self, ahargana: float) -> Tuple[float, float]:
        return self.sun, self.moon

    def tithi(self, true_solar_longitude: float, true_lunar_longitude: float) -> float:
        return ((true_lunar_longitude - true_solar_longitude) % 360.0) / 12.0

    def last_conjunction_longitude(self, ahargana: float, tithi: float) -> float:
        return self.last_conj

    def next_conjunction_longitude(self, ahargana: float, tithi: float) -> float:
        return self.next_conj

    def adhimasa(self, last_conjunction_longitude: float, next_conjunction_longitude: float) -> Adhimasa:
        if int(last_conjunction_longitude // 30) == int(next_conjunction_longitude // 30):
            return Adhimasa.ADHIKA
        return Adhimasa.NIJA

    def masa_num(self, true_solar_longitude: float, last_conjunction_longitude: float) -> int:
        return self.masa

    def saura_masa_and_divasa(self, ahargana: float, desantara: float) -> Tuple[int, int]:
        return self.saura_masa, self.saura_divasa


@dataclass(frozen=True)
class FixedSunrise:
    utc_hours: Optional[float] = 0.5

    def sunrise_utc_hours(self, d: date, loc: Location) -> Optional[float]:
        return self.utc_hours


def moon_at_tithi(sun: float, tithi: float) -> float:
    return (sun + tithi * 12.0) % 360.0


@pytest.fixture
def stub_engine():
    """Factory: stub_engine(**stub_fields) -> (engine, stub)."""
    def _make(**kw):
        sunrise = kw.pop("sunrise", FixedSunrise())
        stub = StubAstronomy(**kw)
        eng = PanchangEngine("stub", astro=stub, sunrise=sunrise, observer=AMRITSAR, reference=UJJAIN)
        return eng, stub
    return _make
