"""Perf UI configuration — loads overlay settings from config/perfui.yaml.

Provides a single ``PerfUiConfig`` dataclass that is loaded once at
startup and then passed to the loop, the renderer and the entry factory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from perfui.engine.clock import SystemClock
from perfui.entries.base import PerfUiEntry
from perfui.entries.factory import build_entry
from perfui.util import constants

log = logging.getLogger(__name__)

DEFAULT_PERFUI_CONFIG_PATH = "config/perfui.yaml"


def _default_entries() -> List[Dict[str, Any]]:
    return [{"kind": "running_time"}, {"kind": "clock"}]


@dataclass
class PerfUiConfig:
    """All tunable overlay settings.

    Every field has a sensible default so the overlay runs without the file.
    """

    # -- Timing ------------------------------------------------------
    refresh_interval_ms: float = constants.REFRESH_INTERVAL_MS

    # -- Clock -------------------------------------------------------
    local_time: bool = True

    # -- Rendering ---------------------------------------------------
    label_width: int = constants.LABEL_WIDTH

    # -- Entries -----------------------------------------------------
    entries: List[Dict[str, Any]] = field(default_factory=_default_entries)


def load_perfui_config(path: str | Path = DEFAULT_PERFUI_CONFIG_PATH) -> PerfUiConfig:
    """Load overlay configuration from a YAML file.

    Missing keys fall back to dataclass defaults. If the file does not
    exist, a warning is logged and pure defaults are returned.
    """
    p = Path(path)
    if not p.exists():
        log.warning("Perf UI config not found at %s — using defaults", p)
        return PerfUiConfig()

    with p.open() as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        log.warning("Perf UI config at %s is not a mapping (%s) — using defaults", p, type(raw).__name__)
        return PerfUiConfig()

    log.info("Loaded perf UI config from %s (%d keys)", p, len(raw))

    ignored = sorted(k for k in raw if k not in PerfUiConfig.__dataclass_fields__)
    if ignored:
        log.warning("Ignoring unknown config keys: %s", ", ".join(ignored))

    cfg = PerfUiConfig(**{
        k: v for k, v in raw.items()
        if k in PerfUiConfig.__dataclass_fields__
    })
    if cfg.entries is None:
        cfg.entries = []
    return cfg


def build_entries(
    config: PerfUiConfig,
    clock: Optional[SystemClock] = None,
) -> list[PerfUiEntry]:
    """Create the configured entries. Invalid definitions are logged and skipped."""
    entries: list[PerfUiEntry] = []
    for i, spec in enumerate(config.entries):
        if not isinstance(spec, dict):
            log.warning("Entry #%d is not a mapping (%r) — skipped", i, spec)
            continue
        try:
            entries.append(build_entry(spec, clock=clock))
        except (TypeError, ValueError) as e:
            log.warning("Entry #%d skipped: %s", i, e)
    return entries
