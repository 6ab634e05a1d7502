# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from bikrami.core.errors import InvalidLocationError
from bikrami.core.time import to_jdn
from bikrami.core.types import Location

JD_J2000 = 2451545.0


def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0, 360)."""
    y = x_deg % 360.0
    return 0.0 if y == 360.0 else y


def T_centuries(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - JD_J2000) / 36525.0


@dataclass(frozen=True)
class SolarMean:
    L0_deg: float  # geometric mean longitude
    M_deg: float   # mean anomaly
    Omega_deg: float  # longitude of the Moon's ascending node


def solar_mean_elements(T: float) -> SolarMean:
    T2 = T * T
    L0 = 280.46646 + 36000.76983 * T + 0.0003032 * T2
    M = 357.52911 + 35999.05029 * T - 0.0001537 * T2
    Omega = 125.04452 - 1934.136261 * T
    return SolarMean(L0_deg=wrap_deg(L0), M_deg=wrap_deg(M), Omega_deg=wrap_deg(Omega))


def mean_obliquity_deg(T: float) -> float:
    """IAU 1980 mean obliquity of the ecliptic."""
    arcsec = 84381.448 - 46.8150 * T - 0.00059 * T * T + 0.001813 * T * T * T
    return arcsec / 3600.0


@dataclass(frozen=True)
class SolarCoordinates:
    """True and apparent solar coordinates (degrees)."""
    L_true_deg: float
    L_app_deg: float


def solar_longitude(jd: float) -> SolarCoordinates:
    """
    True and apparent tropical solar longitude from a truncated series
    (accurate to ~0.01 deg). The difference between UT and TT is ignored.
    """
    T = T_centuries(jd)
    sm = solar_mean_elements(T)
    M_rad = math.radians(sm.M_deg)

    # Equation of centre
    C_sun = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )
    L_true = wrap_deg(sm.L0_deg + C_sun)

    # Aberration and leading nutation term
    L_app = wrap_deg(L_true - 0.00569 - 0.00478 * math.sin(math.radians(sm.Omega_deg)))
    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app)


def solar_declination_deg(L_app_deg: float, eps_deg: float) -> float:
    sin_delta = math.sin(math.radians(eps_deg)) * math.sin(math.radians(L_app_deg))
    return math.degrees(math.asin(sin_delta))


def equation_of_time_minutes(jd: float) -> float:
    """Apparent minus mean solar time, in minutes."""
    T = T_centuries(jd)
    sm = solar_mean_elements(T)
    eps_rad = math.radians(mean_obliquity_deg(T))
    L_app_rad = math.radians(solar_longitude(jd).L_app_deg)

    # Right ascension, atan2 keeps the quadrant
    y = math.cos(eps_rad) * math.sin(L_app_rad)
    x = math.cos(L_app_rad)
    alpha_deg = wrap_deg(math.degrees(math.atan2(y, x)))

    diff_deg = wrap_deg(sm.L0_deg - alpha_deg + 180.0) - 180.0
    return 4.0 * diff_deg


@dataclass(frozen=True)
class SunriseApparent:
    """Local Apparent Time of sunrise/sunset (hours)."""
    rise_app_hours: float
    set_app_hours: float


def sunrise_apparent_time(jd: float, lat_deg: float, h0_deg: float = -0.833) -> Optional[SunriseApparent]:
    """Returns None if the sun does not rise or set (polar day/night)."""
    T = T_centuries(jd)
    delta_rad = math.radians(solar_declination_deg(solar_longitude(jd).L_app_deg, mean_obliquity_deg(T)))
    lat_rad = math.radians(lat_deg)
    h0_rad = math.radians(h0_deg)

    cos_H0 = (math.sin(h0_rad) - math.sin(lat_rad) * math.sin(delta_rad)) / (math.cos(lat_rad) * math.cos(delta_rad))
    if cos_H0 < -1.0 or cos_H0 > 1.0:
        return None

    H0_deg = math.degrees(math.acos(cos_H0))
    # 15 degrees per hour
    return SunriseApparent(rise_app_hours=12.0 - H0_deg / 15.0, set_app_hours=12.0 + H0_deg / 15.0)


@dataclass(frozen=True)
class SunriseCivil:
    """Uniform civil clock time (UTC) of sunrise/sunset."""
    rise_utc_hours: float
    set_utc_hours: float


def sunrise_sunset_utc(
    jd_utc_noon: float,
    lat_deg: float,
    lon_deg_east: float,
    h0_deg: float = -0.833,
) -> Optional[SunriseCivil]:
    """
    Sunrise/sunset in UTC hours, refined once at the event time.
    Expects jd_utc_noon to be the JD of 12:00 UTC on the civil date.
    """
    if not -90.0 <= lat_deg <= 90.0 or not -180.0 <= lon_deg_east <= 180.0:
        raise InvalidLocationError(f"invalid location ({lat_deg}, {lon_deg_east})")
    if abs(lat_deg) == 90.0:
        return None

    app_times = sunrise_apparent_time(jd_utc_noon, lat_deg, h0_deg)
    if not app_times:
        return None

    dt_zone = lon_deg_east / 15.0
    eot_base = equation_of_time_minutes(jd_utc_noon)

    def refine_event(app_time_hours: float) -> float:
        utc_hours_guess = app_time_hours - (eot_base / 60.0) - dt_zone
        jd_event = math.floor(jd_utc_noon - 0.5) + 0.5 + (utc_hours_guess / 24.0)

        refined_app = sunrise_apparent_time(jd_event, lat_deg, h0_deg)
        if not refined_app:
            return utc_hours_guess

        if app_time_hours < 12.0:
            final_app = refined_app.rise_app_hours
        else:
            final_app = refined_app.set_app_hours
        return final_app - (equation_of_time_minutes(jd_event) / 60.0) - dt_zone

    rise_utc = refine_event(app_times.rise_app_hours) % 24.0
    set_utc = refine_event(app_times.set_app_hours) % 24.0
    return SunriseCivil(rise_utc_hours=rise_utc, set_utc_hours=set_utc)


@dataclass(frozen=True)
class SphericalSunrise:
    """SunriseModel over sunrise_sunset_utc."""
    h0_deg: float = -0.833

    def sunrise_utc_hours(self, d: date, loc: Location) -> Optional[float]:
        times = sunrise_sunset_utc(float(to_jdn(d)), loc.latitude, loc.longitude, h0_deg=self.h0_deg)
        return None if times is None else times.rise_utc_hours
