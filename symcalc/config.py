"""
Engine configuration

The only process-wide state of symcalc. The active configuration is an
immutable SymCalcConfig held in a context variable: it is replaced as a whole,
never mutated, and `config_context` scopes a change to a `with` block.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace, fields
from typing import Iterator, Optional

from .logging_system import log_debug


@dataclass(frozen=True)
class SymCalcConfig:
    """Settings read by operator sugar and the query API"""
    auto_simplify: bool = True      # simplify after every operator and derivative step
    max_literal_chars: int = 6      # longest numeric power folded into a literal

    def __post_init__(self):
        if self.max_literal_chars < 0:
            raise ValueError("max_literal_chars must be non-negative")


DEFAULT_CONFIG = SymCalcConfig()

_active_config: ContextVar[SymCalcConfig] = ContextVar('symcalc_config', default=DEFAULT_CONFIG)


def get_config() -> SymCalcConfig:
    """Get the active configuration"""
    return _active_config.get()


def resolve_config(config: Optional[SymCalcConfig]) -> SymCalcConfig:
    """Explicit configuration wins over the active one"""
    return config if config is not None else get_config()


def _with_changes(base: SymCalcConfig, changes) -> SymCalcConfig:
    known = {f.name for f in fields(SymCalcConfig)}
    unknown = set(changes) - known
    if unknown:
        raise TypeError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}")
    return replace(base, **changes)


def configure(**changes) -> SymCalcConfig:
    """Replace the active configuration with a modified copy"""
    config = _with_changes(get_config(), changes)
    _active_config.set(config)
    log_debug(f"configuration set to {config}")
    return config


def set_auto_simplify(enabled: bool) -> SymCalcConfig:
    """Toggle auto-simplification for expressions built from here on"""
    return configure(auto_simplify=bool(enabled))


@contextmanager
def config_context(**changes) -> Iterator[SymCalcConfig]:
    """Apply configuration changes for the duration of a with block"""
    config = _with_changes(get_config(), changes)
    token = _active_config.set(config)
    try:
        yield config
    finally:
        _active_config.reset(token)
