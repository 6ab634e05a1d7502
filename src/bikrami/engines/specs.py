from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict

from ..core.types import Location


# ============================================================
# LOCATIONS
# ============================================================

AMRITSAR = Location(latitude=31.6, longitude=74.9)

# Prime meridian of the Siddhantic model
UJJAIN = Location(latitude=23.2, longitude=75.8)


# ============================================================
# SURYA SIDDHANTA CONSTANTS
# ============================================================

@dataclass(frozen=True)
class SuryaSiddhantaParams:
    # Civil days and revolutions per mahayuga
    yuga_civil_days: int = 1577917828
    sun_revolutions: int = 4320000
    moon_revolutions: int = 57753336
    moon_apogee_revolutions: int = 488203

    # Lunar apogee longitude at the Kaliyuga epoch (degrees)
    moon_apogee_epoch: float = 90.0
    # Fixed solar apogee (degrees)
    sun_apogee: float = 77.0 + 17.0 / 60.0

    # Manda epicycle circumferences (degrees)
    sun_circumference: float = 13.0 + 50.0 / 60.0
    moon_circumference: float = 31.0 + 50.0 / 60.0

    # JD of the Kaliyuga epoch (midnight, 18 Feb 3102 BCE Julian)
    epoch_jd: float = 588465.5
    # Saka era begins 3179 Kali years later
    kali_saka_offset: int = 3179

    # Daylight equation: obliquity and precession (arc-seconds per year from 499 CE)
    obliquity: float = 24.0
    precession_arcsec: float = 54.0
    precession_zero_year: int = 499

    @property
    def yuga_synodic_months(self) -> int:
        return self.moon_revolutions - self.sun_revolutions

    @property
    def synodic_month(self) -> float:
        return self.yuga_civil_days / self.yuga_synodic_months


# ============================================================
# PANCHANG SPECS
# ============================================================

@dataclass(frozen=True)
class PanchangSpec:
    """Pure data payload for building a Panchang engine."""
    name: str
    observer: Location = AMRITSAR
    reference: Location = UJJAIN
    # Fixed civil time label and its offset from UTC (hours)
    tz_label: str = "IST"
    tz_offset_hours: float = 5.5
    # Nominal sunrise as a fraction of the civil day
    sunrise_fraction: float = 0.25
    model: SuryaSiddhantaParams = field(default_factory=SuryaSiddhantaParams)
    meta: Dict[str, str] = field(default_factory=dict)

    def tweak(self, **changes) -> "PanchangSpec":
        return replace(self, **changes)


DEFAULT_SPEC = PanchangSpec(
    name="surya-siddhanta",
    meta={"description": "Surya Siddhanta, Amritsar observer, Ujjain meridian"},
)

ALL_SPECS: Dict[str, PanchangSpec] = {
    DEFAULT_SPEC.name: DEFAULT_SPEC,
}
