"""
bikrami.engines.panchang
------------------------
The Orchestrator. Runs a civil date through the ahargana corrections, queries
the astronomy provider, and normalizes the result into Bikrami lunar and
solar dates under the Purnimanta convention.

Each correction is a small pure function taking and returning explicit values,
composed in a fixed order by PanchangEngine.panchang(). The order is
load-bearing: no step may be reordered and nothing is rounded mid-sequence.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Tuple, Union

from bikrami.core.errors import InvalidDateError, OutOfRangeAstronomicalValueError
from bikrami.core.time import (
    GREGORIAN_REFORM_JDN,
    from_jdn,
    jd_to_jdn,
    jdn_to_julian_calendar,
    julian_calendar_to_jdn,
    midnight_jd,
    weekday_index,
)
from bikrami.core.types import (
    Adhimasa,
    EraYears,
    JulianDate,
    LunarDate,
    Location,
    Paksha,
    PanchangRecord,
    SolarDate,
)
from bikrami.data.names import NAKSHATRAS
from bikrami.engines.interfaces import AstronomyProvider, SunriseModel

log = logging.getLogger(__name__)


# ============================================================
# 1. Date normalization
# ============================================================

@dataclass(frozen=True)
class NormalizedDate:
    gregorian: date
    julian_day: float  # JD at 00:00 UTC
    weekday: int       # 0 = Sunday


# Civil date, or a (year, month, day) triple for calendar dates `date` cannot hold
DateLike = Union[date, Tuple[int, int, int]]


def normalize_date(d: DateLike, is_julian: bool = False) -> NormalizedDate:
    """
    Resolve the input to a Gregorian date and its JD at midnight UTC.
    With is_julian=True, (year, month, day) are read as a proleptic Julian
    calendar date; pass a tuple for days such as Julian 1700-02-29 that do
    not exist in the Gregorian calendar.
    """
    ymd = (d.year, d.month, d.day) if isinstance(d, date) else tuple(d)
    if is_julian:
        julian_day = julian_calendar_to_jdn(*ymd) - 0.5
        gregorian = from_jdn(jd_to_jdn(julian_day))
    else:
        try:
            gregorian = date(*ymd)
        except ValueError as e:
            raise InvalidDateError(f"{ymd} is not a Gregorian calendar date: {e}") from None
        julian_day = midnight_jd(gregorian)
    return NormalizedDate(gregorian=gregorian, julian_day=julian_day, weekday=weekday_index(gregorian))


# ============================================================
# 2. Ahargana corrections
# ============================================================

def desantara(observer: Location, reference: Location) -> float:
    """Longitudinal correction as a fraction of a day."""
    return (observer.longitude - reference.longitude) / 360.0

def add_sunrise_offset(ahargana: float, day_fraction: float = 0.25) -> float:
    """Shift the nominal instant from midnight to the 6 AM sunrise reference."""
    return ahargana + day_fraction

def apply_desantara(ahargana: float, correction: float) -> float:
    return ahargana - correction

def apply_daylight_equation(ahargana: float, astro: AstronomyProvider, year: int, latitude: float) -> float:
    """Move the mean 6 AM sunrise to the true local sunrise."""
    return ahargana - astro.daylight_equation(year, latitude, ahargana)

def resolve_ahargana(
    julian_day: float,
    year: int,
    astro: AstronomyProvider,
    observer: Location,
    reference: Location,
    sunrise_fraction: float = 0.25,
) -> float:
    """Ahargana at true local sunrise."""
    a = astro.julian_day_to_ahargana(julian_day)
    a = add_sunrise_offset(a, sunrise_fraction)
    a = apply_desantara(a, desantara(observer, reference))
    return apply_daylight_equation(a, astro, year, observer.latitude)


# ============================================================
# 3. Celestial query
# ============================================================

@dataclass(frozen=True)
class CelestialState:
    true_solar_longitude: float
    true_lunar_longitude: float
    tithi: float
    last_conjunction_longitude: float
    next_conjunction_longitude: float


def query_celestial(astro: AstronomyProvider, ahargana: float) -> CelestialState:
    sun, moon = astro.true_longitudes(ahargana)
    tithi = astro.tithi(sun, moon)
    return CelestialState(
        true_solar_longitude=sun,
        true_lunar_longitude=moon,
        tithi=tithi,
        last_conjunction_longitude=astro.last_conjunction_longitude(ahargana, tithi),
        next_conjunction_longitude=astro.next_conjunction_longitude(ahargana, tithi),
    )


# ============================================================
# 4. Tithi and paksha
# ============================================================

def tithi_day(tithi: float) -> int:
    """1-indexed day in the lunation (1..30)."""
    return math.trunc(tithi) + 1

def resolve_paksha(tithi: float, month_num: int, adhimasa: Adhimasa) -> Tuple[Paksha, int, int]:
    """
    Returns (paksha, day_in_paksha, month_num).
    In the Vadi half the Purnimanta month has already moved on to the next
    month, except inside an adhika month.
    """
    day = tithi_day(tithi)
    if day > 15:
        if adhimasa is Adhimasa.ADHIKA:
            return Paksha.VADI, day - 15, month_num
        return Paksha.VADI, day - 15, month_num + 1
    return Paksha.SUDI, day, month_num


# ============================================================
# 5. Month and year
# ============================================================

def kali_anchor(ahargana: float, month_num: int) -> float:
    """Ahargana moved near the start of the month count, for the year lookup."""
    return ahargana + (4 - month_num) * 30

def wrap_month(month_num: int, kali_year: int) -> Tuple[int, int]:
    """
    Fold month_num into 0..11. Crossing from Phagan into Chet Vadi
    (Phagan Vadi in the Amanta system) opens the next year.
    """
    if month_num >= 12:
        month_num -= 12
        if month_num == 0:
            kali_year += 1
    return month_num, kali_year

def era_years(astro: AstronomyProvider, kali_year: int) -> EraYears:
    return EraYears(kali=kali_year, saka=astro.kali_to_saka(kali_year))

def solar_year(bikrami_year: int, saura_masa: int, month_num: int) -> int:
    """Bikrami year of the solar date; the solar and lunar new years fall apart."""
    year = bikrami_year
    if saura_masa == 0 and month_num == 11:
        year += 1
    elif (saura_masa == 10 or saura_masa == 11) and (month_num == 0 or month_num == 1):
        year -= 1
    return year


# ============================================================
# 6. Solar date
# ============================================================

def vaisakh_first_index(saura_masa: int) -> int:
    """Index into the Chet-first month table for a Mesha-first solar month."""
    index = saura_masa + 1
    if index >= 12:
        index -= 12
    return index


# ============================================================
# 7. Checks and formatting
# ============================================================

def check_index(name: str, value: int, size: int) -> int:
    if not 0 <= value < size:
        raise OutOfRangeAstronomicalValueError(f"{name} index {value} outside 0..{size - 1}")
    return value

def nakshatra_index(true_lunar_longitude: float) -> int:
    return check_index("nakshatra", math.trunc(true_lunar_longitude * 27 / 360), len(NAKSHATRAS))

def format_clock(hours: float, label: str) -> str:
    """
    'H:MM AM' style civil clock string, e.g. '6:05 AM IST'. The hour is not
    zero-padded; two-digit-hour clocks would print '06:05 AM IST'.
    """
    minutes = int(round((hours % 24.0) * 60.0)) % (24 * 60)
    h, m = divmod(minutes, 60)
    suffix = "AM" if h < 12 else "PM"
    h12 = h % 12 or 12
    return f"{h12}:{m:02d} {suffix} {label}"

def julian_date_block(julian_day: float) -> JulianDate:
    # Julian calendar date of the civil day (JD at noon)
    year, month, day = jdn_to_julian_calendar(math.trunc(julian_day) + 1)
    return JulianDate(year=year, month=month, date=day)


# ============================================================
# Engine
# ============================================================

class PanchangEngine:
    """
    Binds an AstronomyProvider and a SunriseModel to a fixed observer and
    reference meridian.
    """
    def __init__(
        self,
        name: str,
        astro: AstronomyProvider,
        sunrise: SunriseModel,
        observer: Location,
        reference: Location,
        tz_label: str = "IST",
        tz_offset_hours: float = 5.5,
        sunrise_fraction: float = 0.25,
    ):
        self.name = name
        self.astro = astro
        self.sunrise_model = sunrise
        self.observer = observer
        self.reference = reference
        self.tz_label = tz_label
        self.tz_offset_hours = tz_offset_hours
        self.sunrise_fraction = sunrise_fraction

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "observer": self.observer.__dict__,
            "reference": self.reference.__dict__,
            "tz": self.tz_label,
            "astronomy": type(self.astro).__name__,
        }

    def sunrise(self, d: date) -> Optional[str]:
        utc_hours = self.sunrise_model.sunrise_utc_hours(d, self.observer)
        if utc_hours is None:
            return None
        return format_clock(utc_hours + self.tz_offset_hours, self.tz_label)

    def panchang(self, d: DateLike, *, is_julian: bool = False, debug: bool = False) -> PanchangRecord:
        nd = normalize_date(d, is_julian)
        astro = self.astro

        ahargana = resolve_ahargana(
            nd.julian_day, nd.gregorian.year, astro, self.observer, self.reference, self.sunrise_fraction
        )
        local_desantara = desantara(self.observer, self.reference)
        log.debug("%s: jd=%s ahargana=%.6f", nd.gregorian, nd.julian_day, ahargana)

        cs = query_celestial(astro, ahargana)
        adhimasa = astro.adhimasa(cs.last_conjunction_longitude, cs.next_conjunction_longitude)
        month_num = check_index("month", astro.masa_num(cs.true_solar_longitude, cs.last_conjunction_longitude), 12)

        saura_masa, saura_divasa = astro.saura_masa_and_divasa(ahargana, local_desantara)
        check_index("solar month", saura_masa, 12)

        kali_year = astro.ahargana_to_kali(kali_anchor(ahargana, month_num))

        paksha, day, month_num = resolve_paksha(cs.tithi, month_num, adhimasa)
        month_num, kali_year = wrap_month(month_num, kali_year)
        eras = era_years(astro, kali_year)
        log.debug("%s: month=%d paksha=%s tithi=%d %s kali=%d", nd.gregorian, month_num, paksha.en, day, adhimasa.name, kali_year)

        lunar = LunarDate(
            ahargana=math.trunc(ahargana),
            month_index=month_num,
            paksha=paksha,
            tithi=day,
            year=eras.bikrami,
            mal_maas=adhimasa.is_mal_maas,
            nakshatra_index=nakshatra_index(cs.true_lunar_longitude),
            tithi_fraction=cs.tithi % 1,
        )
        solar = SolarDate(
            saura_masa=saura_masa,
            month_name_index=vaisakh_first_index(saura_masa),
            date=saura_divasa,
            year=solar_year(eras.bikrami, saura_masa, month_num),
            weekday=nd.weekday,
        )

        julian_date = None
        if nd.julian_day < GREGORIAN_REFORM_JDN or is_julian:
            julian_date = julian_date_block(nd.julian_day)

        return PanchangRecord(
            gregorian_date=nd.gregorian,
            julian_day=nd.julian_day,
            lunar=lunar,
            solar=solar,
            sunrise=self.sunrise(nd.gregorian),
            eras=eras,
            julian_date=julian_date,
            debug={**cs.__dict__, "ahargana": ahargana, "adhimasa": adhimasa.name} if debug else None,
        )

    def panchang_range(self, start: date, days: int) -> List[PanchangRecord]:
        """Consecutive records starting at `start` (Gregorian)."""
        return [self.panchang(start + timedelta(days=i)) for i in range(days)]
