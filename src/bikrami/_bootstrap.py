from __future__ import annotations
from bikrami.core.engine import EngineRegistry
from bikrami.engines.specs import ALL_SPECS
from bikrami.engines.factory import make_engine

def build_registry() -> EngineRegistry:
    """One engine per named spec, keyed by spec name."""
    return EngineRegistry({name: make_engine(spec) for name, spec in ALL_SPECS.items()})
