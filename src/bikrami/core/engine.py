from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Protocol, Tuple, Union

from .types import PanchangRecord

class CalendarEngine(Protocol):
    """What the public API needs from an engine bound to one observer."""
    def info(self) -> Dict[str, Any]: ...
    def panchang(
        self, d: Union[date, Tuple[int, int, int]], *, is_julian: bool = False, debug: bool = False
    ) -> PanchangRecord: ...
    def panchang_range(self, start: date, days: int) -> List[PanchangRecord]: ...
    def sunrise(self, d: date) -> Optional[str]: ...

@dataclass
class EngineRegistry:
    """Named engines; names are matched exactly."""
    engines: Dict[str, CalendarEngine] = field(default_factory=dict)

    def __contains__(self, name: str) -> bool:
        return name in self.engines

    def get(self, name: str) -> CalendarEngine:
        try:
            return self.engines[name]
        except KeyError:
            raise KeyError(f"No Panchang engine named '{name}' (known: {', '.join(self.list())})") from None

    def list(self) -> List[str]:
        return sorted(self.engines)

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if name in self and not overwrite:
            raise KeyError(f"Panchang engine '{name}' is already registered; pass overwrite=True to replace it")
        self.engines[name] = engine
