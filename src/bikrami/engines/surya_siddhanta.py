"""
bikrami.engines.surya_siddhanta
-------------------------------
Siddhantic astronomy provider.
Mean longitudes come from integer revolutions per mahayuga; true longitudes
apply the manda (equation of centre) correction only. Historical Panchang
dates are reckoned with this model, while modern Punjab jantris use drik
(observational) positions, so recent dates may differ by a day.

Fully implements AstronomyProvider.
"""

from __future__ import annotations

import math
from typing import Tuple

from bikrami.core.types import Adhimasa
from bikrami.engines.interfaces import AstronomyProvider
from bikrami.engines.specs import SuryaSiddhantaParams

_MAX_ITER = 50
_CONJUNCTION_TOL = 1e-7  # degrees of elongation


def zero360(deg: float) -> float:
    """Wraps degrees to [0, 360)."""
    y = deg % 360.0
    return 0.0 if y == 360.0 else y


def _sign(longitude: float) -> int:
    return int(longitude // 30.0)


class SuryaSiddhantaProvider(AstronomyProvider):
    def __init__(self, p: SuryaSiddhantaParams = SuryaSiddhantaParams()):
        self.p = p
        # Mean elongation rate (degrees per day)
        self._elongation_rate = 360.0 / p.synodic_month

    # ---------------------------------------------------------
    # Time axis and eras
    # ---------------------------------------------------------

    def julian_day_to_ahargana(self, julian_day: float) -> float:
        return julian_day - self.p.epoch_jd

    def ahargana_to_kali(self, ahargana: float) -> int:
        return math.floor(ahargana * self.p.sun_revolutions / self.p.yuga_civil_days)

    def kali_to_saka(self, kali_year: int) -> int:
        return kali_year - self.p.kali_saka_offset

    def daylight_equation(self, year: int, latitude: float, ahargana: float) -> float:
        # Good for North India: declination from the sayana mean Sun
        mean_sun = self.mean_longitude(ahargana, self.p.sun_revolutions)
        sayana = mean_sun + (self.p.precession_arcsec / 3600.0) * (year - self.p.precession_zero_year)
        declination = math.asin(math.sin(math.radians(self.p.obliquity)) * math.sin(math.radians(sayana)))
        a = math.tan(math.radians(latitude)) * math.tan(declination)
        a = max(-1.0, min(1.0, a))  # polar day/night
        return math.degrees(math.asin(a)) / 360.0

    # ---------------------------------------------------------
    # Positions
    # ---------------------------------------------------------

    def mean_longitude(self, ahargana: float, revolutions: int) -> float:
        turns = revolutions * ahargana / self.p.yuga_civil_days
        return zero360(360.0 * (turns % 1.0))

    @staticmethod
    def manda_equation(mean: float, apogee: float, circumference: float) -> float:
        s = circumference / 360.0 * math.sin(math.radians(mean - apogee))
        return math.degrees(math.asin(s))

    def true_solar_longitude(self, ahargana: float) -> float:
        mean = self.mean_longitude(ahargana, self.p.sun_revolutions)
        return zero360(mean - self.manda_equation(mean, self.p.sun_apogee, self.p.sun_circumference))

    def true_lunar_longitude(self, ahargana: float) -> float:
        mean = self.mean_longitude(ahargana, self.p.moon_revolutions)
        apogee = zero360(self.mean_longitude(ahargana, self.p.moon_apogee_revolutions) + self.p.moon_apogee_epoch)
        return zero360(mean - self.manda_equation(mean, apogee, self.p.moon_circumference))

    def true_longitudes(self, ahargana: float) -> Tuple[float, float]:
        return self.true_solar_longitude(ahargana), self.true_lunar_longitude(ahargana)

    def tithi(self, true_solar_longitude: float, true_lunar_longitude: float) -> float:
        return zero360(true_lunar_longitude - true_solar_longitude) / 12.0

    def conjunction(self, ahargana: float) -> float:
        """Ahargana of the true new moon nearest the initial guess."""
        t = ahargana
        for _ in range(_MAX_ITER):
            sun, moon = self.true_longitudes(t)
            e = zero360(moon - sun + 180.0) - 180.0
            if abs(e) < _CONJUNCTION_TOL:
                break
            t -= e / self._elongation_rate
        return t

    def last_conjunction_longitude(self, ahargana: float, tithi: float) -> float:
        t = self.conjunction(ahargana - tithi * self.p.synodic_month / 30.0)
        return self.true_solar_longitude(t)

    def next_conjunction_longitude(self, ahargana: float, tithi: float) -> float:
        t = self.conjunction(ahargana + (30.0 - tithi) * self.p.synodic_month / 30.0)
        return self.true_solar_longitude(t)

    # ---------------------------------------------------------
    # Month labels
    # ---------------------------------------------------------

    def adhimasa(self, last_conjunction_longitude: float, next_conjunction_longitude: float) -> Adhimasa:
        # No sankranti between the two new moons
        if _sign(last_conjunction_longitude) == _sign(next_conjunction_longitude):
            return Adhimasa.ADHIKA
        return Adhimasa.NIJA

    def masa_num(self, true_solar_longitude: float, last_conjunction_longitude: float) -> int:
        # Month is named after the sign following the Sun's sign at the new moon
        return (_sign(last_conjunction_longitude) + 1) % 12

    def saura_masa_and_divasa(self, ahargana: float, desantara: float) -> Tuple[int, int]:
        # A sankranti before local midnight makes that civil day the 1st
        midnight = math.floor(ahargana) + 1.0 - desantara
        masa = _sign(self.true_solar_longitude(midnight))
        divasa = 1
        while divasa < 33 and _sign(self.true_solar_longitude(midnight - divasa)) == masa:
            divasa += 1
        return masa, divasa
