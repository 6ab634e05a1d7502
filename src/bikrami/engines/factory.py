"""
bikrami.engines.factory
-----------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations
from bikrami.engines.panchang import PanchangEngine
from bikrami.engines.specs import PanchangSpec
from bikrami.engines.surya_siddhanta import SuryaSiddhantaProvider
from bikrami.reference.solar import SphericalSunrise


def make_engine(spec: PanchangSpec) -> PanchangEngine:
    """The universal entry point."""
    return PanchangEngine(
        name=spec.name,
        astro=SuryaSiddhantaProvider(spec.model),
        sunrise=SphericalSunrise(),
        observer=spec.observer,
        reference=spec.reference,
        tz_label=spec.tz_label,
        tz_offset_hours=spec.tz_offset_hours,
        sunrise_fraction=spec.sunrise_fraction,
    )
