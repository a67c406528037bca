"""Per-object and per-class debug printing with selectable levels."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import IntEnum


class DebugLevel(IntEnum):
    """Levels of debug messages; lower values are more severe."""

    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3
    TRACE = 4
    IGNORE = 255


_LEVEL_TEXT = {
    DebugLevel.ERROR: "(e)",
    DebugLevel.WARNING: "(w)",
    DebugLevel.INFO: "(i)",
    DebugLevel.DEBUG: "(d)",
}


@dataclass
class _ClassSettings:
    objects: list = field(default_factory=list)
    debug_class: bool = False
    max_level: int = DebugLevel.IGNORE


_registry: dict[type, _ClassSettings] = {}


def _settings(cls: type) -> _ClassSettings:
    return _registry.setdefault(cls, _ClassSettings())


def level_text(level: int) -> str:
    """Return the short marker printed for a level."""
    try:
        return _LEVEL_TEXT.get(DebugLevel(level), "(t)")
    except ValueError:
        return "(t)"


class Debug:
    """Registration of a single object for debug output.

    Creating a ``Debug`` registers the object; newer registrations of the
    same object take precedence over older ones.
    """

    def __init__(self, obj: object, level: int, name: str) -> None:
        self.obj = obj
        self.level = DebugLevel(level)
        self.name = name
        self.enabled = True
        _settings(type(obj)).objects.insert(0, self)

    def set_enabled(self, enable: bool = True) -> None:
        """Enable or disable output for this object."""
        self.enabled = bool(enable)

    def set_disabled(self, disable: bool = True) -> None:
        """Disable or enable output for this object."""
        self.set_enabled(not disable)


def debug_class(cls: type, max_level: int) -> None:
    """Enable output for every object of ``cls`` up to ``max_level``."""
    settings = _settings(cls)
    settings.debug_class = True
    settings.max_level = DebugLevel(max_level)


def debug_object(obj: object, level: int, name: str) -> Debug:
    """Register ``obj`` for output up to ``level`` under ``name``."""
    return Debug(obj, level, name)


def _format(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


def internal_debug(obj: object, level: int, name: str, fmt: str, *args: object) -> None:
    """Print a printf-style message from ``obj`` if its settings allow it."""
    settings = _registry.get(type(obj))
    if settings is None or (not settings.objects and not settings.debug_class):
        return

    for entry in settings.objects:
        if entry.obj is obj and level <= entry.level and entry.enabled:
            sys.stdout.write(f"{name} {entry.name} {level_text(level)}: {_format(fmt, args)}\n")
            return

    if settings.debug_class and level <= settings.max_level:
        sys.stdout.write(f"{name} {level_text(level)}: {_format(fmt, args)}\n")


def reset_debug(cls: type) -> None:
    """Drop all registrations and class-wide settings for ``cls``."""
    _registry.pop(cls, None)