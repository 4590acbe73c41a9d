"""Perf UI entry point.

Initializes all components and starts the asyncio event loop:
1. Load configuration (refresh interval, clock capability, entries)
2. Create services (time, clock, event bus, perf UI, renderer, loop)
3. Run the refresh loop until a shutdown signal (or --ticks) is reached

Usage:
    python -m perfui.main [--config config/perfui.yaml] [--ticks N]
    # or via entry point:
    perfui
"""

from __future__ import annotations

import asyncio
import json
import logging
import signal
import sys
from dataclasses import dataclass
from typing import Optional

from perfui.debug.monitor import collect_snapshot
from perfui.engine.app_time import Time
from perfui.engine.clock import SystemClock
from perfui.engine.perf_ui import PerfUi
from perfui.engine.refresh_loop import RefreshLoop
from perfui.loaders.config_loader import (
    DEFAULT_PERFUI_CONFIG_PATH,
    PerfUiConfig,
    build_entries,
    load_perfui_config,
)
from perfui.render.text import TextOverlay
from perfui.util.events import EventBus

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Container for all services (makes passing around easier)
# ---------------------------------------------------------------------------


@dataclass
class Services:
    """Holds references to all overlay services."""

    config: Optional[PerfUiConfig] = None
    event_bus: Optional[EventBus] = None
    app_time: Optional[Time] = None
    clock: Optional[SystemClock] = None
    perf_ui: Optional[PerfUi] = None
    overlay: Optional[TextOverlay] = None
    refresh_loop: Optional[RefreshLoop] = None


# ===================================================================
# 1. Create services
# ===================================================================


def create_services(config: PerfUiConfig, max_ticks: Optional[int] = None) -> Services:
    """Instantiate all services and attach the configured entries.

    Args:
        config: Loaded overlay configuration.
        max_ticks: Stop the loop after this many refreshes.

    Returns:
        Populated :class:`Services` container.
    """
    log.info("Creating services …")

    event_bus = EventBus()
    app_time = Time()
    clock = SystemClock(local_time=config.local_time)
    log.info("  clock:        %s", "local time" if clock.has_local_time else "UTC only")

    perf_ui = PerfUi(event_bus)
    overlay = TextOverlay(event_bus, label_width=config.label_width)
    for entry in build_entries(config, clock=clock):
        perf_ui.add(entry)
    log.info("  perf_ui:      %d entries", len(perf_ui))

    refresh_loop = RefreshLoop(perf_ui, app_time, config, max_ticks=max_ticks)

    return Services(
        config=config,
        event_bus=event_bus,
        app_time=app_time,
        clock=clock,
        perf_ui=perf_ui,
        overlay=overlay,
        refresh_loop=refresh_loop,
    )


# ===================================================================
# 2. Run refresh loop
# ===================================================================


async def run_refresh_loop(services: Services) -> None:
    """Run the refresh loop until stopped.

    Args:
        services: All instantiated services.
    """
    log.info("Starting refresh loop …")
    loop = asyncio.get_running_loop()

    # Graceful shutdown on SIGINT / SIGTERM
    def _request_shutdown() -> None:
        log.info("Shutdown signal received — stopping …")
        services.refresh_loop.stop()

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _request_shutdown)
        except NotImplementedError:
            log.debug("Signal handlers not supported on this platform")
            break

    log.info("  refresh loop running (%.0f ms interval)", services.config.refresh_interval_ms)
    await services.refresh_loop.run()

    # --- Cleanup after loop exits ---
    log.info("Shutting down …")
    log.debug("Final snapshot: %s", json.dumps(collect_snapshot(services.refresh_loop)))
    services.overlay.close()
    services.perf_ui.clear()
    services.event_bus.clear()
    log.info("  goodbye")


# ===================================================================
# Entry points
# ===================================================================


async def _start(config_path: str = DEFAULT_PERFUI_CONFIG_PATH, max_ticks: Optional[int] = None) -> None:
    """Initialize and run all overlay components.

    Args:
        config_path: Path to the overlay YAML file.
        max_ticks: Stop after this many refreshes (``None`` runs until a signal).
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    log.info("=== Perf UI starting ===")

    config = load_perfui_config(config_path)
    services = create_services(config, max_ticks=max_ticks)
    await run_refresh_loop(services)


def _option(argv: list[str], name: str) -> Optional[str]:
    if name not in argv:
        return None
    idx = argv.index(name)
    if idx + 1 >= len(argv):
        print(f"Error: {name} requires an argument", file=sys.stderr)
        sys.exit(1)
    return argv[idx + 1]


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the overlay.

    Supports command-line arguments:
        --config <path>  Overlay config file (default: config/perfui.yaml)
        --ticks <n>      Stop after n refreshes
    """
    argv = sys.argv[1:] if argv is None else argv

    config_path = _option(argv, "--config") or DEFAULT_PERFUI_CONFIG_PATH
    max_ticks: Optional[int] = None
    ticks = _option(argv, "--ticks")
    if ticks is not None:
        try:
            max_ticks = int(ticks)
        except ValueError:
            print(f"Error: --ticks expects an integer, got {ticks!r}", file=sys.stderr)
            sys.exit(1)
        if max_ticks < 1:
            print(f"Error: --ticks must be at least 1, got {max_ticks}", file=sys.stderr)
            sys.exit(1)

    asyncio.run(_start(config_path=config_path, max_ticks=max_ticks))


if __name__ == "__main__":
    main()
