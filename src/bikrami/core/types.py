from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional

from ..data.names import GREGORIAN_MONTHS, MONTHS, NAKSHATRAS, WEEKDAYS, Name
from ..utils.unicode_num import to_unicode_num
from .errors import InvalidLocationError

BIKRAMI_SAKA_OFFSET = 135


@dataclass(frozen=True)
class Location:
    latitude: float   # degrees, positive North
    longitude: float  # degrees, positive East

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidLocationError(f"latitude {self.latitude} outside [-90, 90]")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidLocationError(f"longitude {self.longitude} outside [-180, 180]")


class Paksha(Enum):
    SUDI = Name("Sudi", "ਸੁਦੀ")  # bright half
    VADI = Name("Vadi", "ਵਦੀ")   # dark half

    @property
    def en(self) -> str:
        return self.value.en

    @property
    def pa(self) -> str:
        return self.value.pa


class Adhimasa(Enum):
    ADHIKA = "Adhika-"
    NIJA = ""

    @property
    def is_mal_maas(self) -> bool:
        return self is Adhimasa.ADHIKA


@dataclass(frozen=True)
class EraYears:
    """Kali and Saka years; Bikrami is always derived from Saka."""
    kali: int
    saka: int

    @property
    def bikrami(self) -> int:
        return self.saka + BIKRAMI_SAKA_OFFSET


@dataclass(frozen=True)
class LunarDate:
    ahargana: int
    month_index: int  # 0 = Chet
    paksha: Paksha
    tithi: int        # 1..15 within the paksha
    year: int         # Bikrami
    mal_maas: bool
    nakshatra_index: int
    tithi_fraction: float

    @property
    def pooranmashi(self) -> bool:
        return self.paksha is Paksha.SUDI and self.tithi == 15

    @property
    def month_name(self) -> Name:
        return MONTHS[self.month_index]

    @property
    def nakshatra(self) -> Name:
        return NAKSHATRAS[self.nakshatra_index]

    def english_date(self) -> Dict[str, Any]:
        return {
            "month": self.month_index + 1,
            "monthName": self.month_name.en,
            "paksh": self.paksha.en,
            "tithi": self.tithi,
            "year": self.year,
        }

    def punjabi_date(self) -> Dict[str, Any]:
        return {
            "month": to_unicode_num(self.month_index + 1),
            "monthName": self.month_name.pa,
            "paksh": self.paksha.pa,
            "tithi": to_unicode_num(self.tithi),
            "year": to_unicode_num(self.year),
        }

    def as_dict(self) -> Dict[str, Any]:
        return {
            "ahargana": self.ahargana,
            "malMaas": self.mal_maas,
            "pooranmashi": self.pooranmashi,
            "englishDate": self.english_date(),
            "punjabiDate": self.punjabi_date(),
            "nakshatra": {"en": self.nakshatra.en, "pa": self.nakshatra.pa},
            "tithiFraction": self.tithi_fraction,
        }


@dataclass(frozen=True)
class SolarDate:
    saura_masa: int       # sidereal month, 0 = Mesha
    month_name_index: int # into MONTHS, Vaisakh-first
    date: int
    year: int
    weekday: int          # 0 = Sunday

    @property
    def month(self) -> int:
        return self.saura_masa + 1

    @property
    def month_name(self) -> Name:
        return MONTHS[self.month_name_index]

    def english_date(self) -> Dict[str, Any]:
        return {
            "month": self.month,
            "monthName": self.month_name.en,
            "date": self.date,
            "year": self.year,
            "day": WEEKDAYS[self.weekday].en,
        }

    def punjabi_date(self) -> Dict[str, Any]:
        return {
            "month": to_unicode_num(self.month),
            "monthName": self.month_name.pa,
            "date": to_unicode_num(self.date),
            "year": to_unicode_num(self.year),
            "day": WEEKDAYS[self.weekday].pa,
        }

    def as_dict(self) -> Dict[str, Any]:
        return {"englishDate": self.english_date(), "punjabiDate": self.punjabi_date()}


@dataclass(frozen=True)
class JulianDate:
    year: int
    month: int
    date: int

    @property
    def month_name(self) -> str:
        return GREGORIAN_MONTHS[self.month - 1]

    def as_dict(self) -> Dict[str, Any]:
        return {"year": self.year, "month": self.month, "monthName": self.month_name, "date": self.date}


@dataclass(frozen=True)
class PanchangRecord:
    gregorian_date: date
    julian_day: float
    lunar: LunarDate
    solar: SolarDate
    sunrise: Optional[str]
    eras: EraYears
    julian_date: Optional[JulianDate] = None
    debug: Optional[Dict[str, Any]] = None

    @property
    def kali_year(self) -> int:
        return self.eras.kali

    @property
    def saka_year(self) -> int:
        return self.eras.saka

    @property
    def bikrami_year(self) -> int:
        return self.eras.bikrami

    def as_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "gregorianDate": self.gregorian_date,
            "julianDay": self.julian_day,
            "lunarDate": self.lunar.as_dict(),
            "solarDate": self.solar.as_dict(),
            "sunrise": self.sunrise,
            "kaliYear": self.eras.kali,
            "sakaYear": self.eras.saka,
        }
        if self.julian_date is not None:
            out["julianDate"] = self.julian_date.as_dict()
        return out
