from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple, Union

from .core.engine import CalendarEngine, EngineRegistry
from .core.types import Location, PanchangRecord
from .engines.factory import make_engine as _make_engine
from .engines.specs import ALL_SPECS, PanchangSpec

DEFAULT_ENGINE = "surya-siddhanta"
_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_panchang(
    d: Union[date, Tuple[int, int, int]],
    is_julian: bool = False,
    *,
    engine: str = DEFAULT_ENGINE,
    debug: bool = False,
) -> PanchangRecord:
    """
    Bikrami Panchang (lunar and solar date) for a calendar date.
    Set is_julian=True if `d` is given in the Julian calendar; a (year, month, day)
    tuple also accepts Julian days missing from the Gregorian calendar (1700-02-29).
    """
    return _reg().get(engine).panchang(d, is_julian=is_julian, debug=debug)

def get_panchang_range(start: date, days: int, *, engine: str = DEFAULT_ENGINE) -> List[PanchangRecord]:
    """Records for `days` consecutive Gregorian dates from `start`."""
    return _reg().get(engine).panchang_range(start, days)

def sunrise(d: date, *, engine: str = DEFAULT_ENGINE) -> Optional[str]:
    return _reg().get(engine).sunrise(d)

def get_calendar(name: str, *, observer: Optional[Location] = None) -> CalendarEngine:
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown engine spec '{name}'")
    spec = ALL_SPECS[name]
    if observer is not None:
        spec = spec.tweak(observer=observer, name=f"{name}@{observer.latitude},{observer.longitude}")
    return _make_engine(spec)

def make_engine(spec: PanchangSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)
