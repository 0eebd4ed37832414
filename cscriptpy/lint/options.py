"""Scan configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

SETTINGS_PREFIX: Final[str] = "cscript."


@dataclass(frozen=True, slots=True)
class ScanOptions:
    """Flags controlling whether and when documents are scanned.

    Only `diagnostics_enabled` affects the engine; `check_on_type` and
    `debounce_seconds` describe the caller's trigger policy.
    """

    diagnostics_enabled: bool = True
    check_on_type: bool = True
    debounce_seconds: float = 0.5

    def __post_init__(self):
        if self.debounce_seconds < 0:
            raise ValueError("debounce_seconds cannot be negative")

    @staticmethod
    def from_settings(settings: Mapping[str, object]) -> "ScanOptions":
        """Build options from editor-style keys such as `cscript.diagnostics.enabled`.

        The `cscript.` prefix is optional and unknown keys are ignored.
        """
        normalized = {
            key.removeprefix(SETTINGS_PREFIX): value for key, value in settings.items()
        }
        defaults = ScanOptions()
        debounce_ms = _read_number(normalized, "diagnostics.debounceMs")
        return ScanOptions(
            diagnostics_enabled=_read_bool(normalized, "diagnostics.enabled", defaults.diagnostics_enabled),
            check_on_type=_read_bool(normalized, "diagnostics.checkOnType", defaults.check_on_type),
            debounce_seconds=defaults.debounce_seconds if debounce_ms is None else debounce_ms / 1000,
        )


def _read_bool(settings: Mapping[str, object], key: str, default: bool) -> bool:
    value = settings.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"Setting `{SETTINGS_PREFIX}{key}` must be a boolean, got {value!r}")
    return value


def _read_number(settings: Mapping[str, object], key: str) -> float | None:
    if key not in settings:
        return None
    value = settings[key]
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(f"Setting `{SETTINGS_PREFIX}{key}` must be a number, got {value!r}")
    return float(value)
