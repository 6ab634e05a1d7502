"""bikrami public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    get_panchang,
    get_panchang_range,
    sunrise,
    list_engines,
    engine_info,
    get_calendar,
    make_engine,
    register_engine,
)
from .core.errors import BikramiError, InvalidDateError, InvalidLocationError, OutOfRangeAstronomicalValueError
from .core.types import Adhimasa, Location, Paksha, PanchangRecord
from .utils.unicode_num import to_unicode_num

__all__ = [
    "get_panchang",
    "get_panchang_range",
    "sunrise",
    "list_engines",
    "engine_info",
    "get_calendar",
    "make_engine",
    "register_engine",
    "BikramiError",
    "InvalidDateError",
    "InvalidLocationError",
    "OutOfRangeAstronomicalValueError",
    "Adhimasa",
    "Location",
    "Paksha",
    "PanchangRecord",
    "to_unicode_num",
]
