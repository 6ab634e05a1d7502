"""
bikrami.engines.interfaces
--------------------------
Capability boundaries between the calendar rules (the Panchang pipeline)
and the astronomy that feeds them.

Reference frame:
All `ahargana` values are days (with fraction) elapsed since the Kaliyuga
epoch at the reference meridian. Longitudes are sidereal degrees in [0, 360).
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Tuple

from bikrami.core.types import Adhimasa, Location


class AstronomyProvider(Protocol):
    """
    The astronomical and calendrical primitives consumed by the pipeline.
    Implementations must be pure: the same arguments give the same answer.
    """

    # ---------------------------------------------------------
    # 1. Time axis and eras
    # ---------------------------------------------------------
    def julian_day_to_ahargana(self, julian_day: float) -> float:
        ...

    def ahargana_to_kali(self, ahargana: float) -> int:
        """Elapsed Kaliyuga (sidereal solar) years at the given ahargana."""
        ...

    def kali_to_saka(self, kali_year: int) -> int:
        ...

    def daylight_equation(self, year: int, latitude: float, ahargana: float) -> float:
        """Offset of local sunrise from 6 AM mean time, as a fraction of a day."""
        ...

    # ---------------------------------------------------------
    # 2. Celestial positions
    # ---------------------------------------------------------
    def true_longitudes(self, ahargana: float) -> Tuple[float, float]:
        """Returns (true_solar_longitude, true_lunar_longitude)."""
        ...

    def tithi(self, true_solar_longitude: float, true_lunar_longitude: float) -> float:
        """Elongation in tithis, range [0, 30)."""
        ...

    def last_conjunction_longitude(self, ahargana: float, tithi: float) -> float:
        """Solar longitude at the new moon opening the current lunation."""
        ...

    def next_conjunction_longitude(self, ahargana: float, tithi: float) -> float:
        """Solar longitude at the new moon closing the current lunation."""
        ...

    # ---------------------------------------------------------
    # 3. Month labels
    # ---------------------------------------------------------
    def adhimasa(self, last_conjunction_longitude: float, next_conjunction_longitude: float) -> Adhimasa:
        ...

    def masa_num(self, true_solar_longitude: float, last_conjunction_longitude: float) -> int:
        """Amanta lunar month index, 0 = Chet."""
        ...

    def saura_masa_and_divasa(self, ahargana: float, desantara: float) -> Tuple[int, int]:
        """Sidereal solar month (0 = Mesha) and 1-based day within it."""
        ...


class SunriseModel(Protocol):
    def sunrise_utc_hours(self, d: date, loc: Location) -> Optional[float]:
        """UTC clock hours of sunrise on `d`, or None if the Sun does not rise."""
        ...
