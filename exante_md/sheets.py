"""Spreadsheet-style functions over a process-wide client.

Hosts that only recalculate a cell when its arguments change can pass any
changing value as ``timestamp``; it is otherwise ignored. ``exante_update``
produces such a value.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from .config import get_settings
from .market.exante_client import MID_DURATION_SECONDS, ExanteClient
from .models import ClientConfig

_client: ExanteClient | None = None


def _get_client() -> ExanteClient:
    global _client
    if _client is None:
        _client = ExanteClient(ClientConfig.from_settings(get_settings()))
    return _client


def reset_client() -> None:
    """Close and drop the process client. Useful for testing or after a settings change."""
    global _client
    if _client is not None:
        _client.close()
    _client = None


def exante_crossrates(from_: str, to: str, timestamp: Any = None) -> Any:
    return _get_client().cross_rate(from_, to)


def exante_group(group: str, field: str) -> Any:
    return _get_client().group_field(group, field)


def exante_group_nearest(group: str, field: str) -> Any:
    return _get_client().nearest_group_field(group, field)


def exante_ohlc(symbol: str, duration: int | str, what: str, timestamp: Any = None) -> Any:
    """OHLC property for a symbol and bar duration in seconds.

    Example: ``exante_ohlc("EUR/USD.E.FX", 60, "open")``
    """
    return _get_client().ohlc_field(symbol, duration, what)


def exante_symbol(symbol: str, field: str) -> Any:
    """Symbol property, e.g. ``exante_symbol("AAPL.NASDAQ", "description")``."""
    return _get_client().symbol_field(symbol, field)


def exante_mid(symbol: str, timestamp: Any = None) -> Any:
    return exante_ohlc(symbol, MID_DURATION_SECONDS, "close")


def exante_update(on_update: Callable[[str], None] | None = None) -> str:
    """Produce a fresh time string for the host to write into a trigger cell.

    No request is made. The host callback, if given, receives the value.
    """
    stamp = datetime.now().strftime("%H:%M:%S")
    if on_update is not None:
        on_update(stamp)
    return stamp
