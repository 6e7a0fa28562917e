"""Logging callbacks that receive Unity's output as it streams in."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

import structlog

SimpleLogger: TypeAlias = Callable[[str], None]


def noop_logger(message: str) -> None:
    """Discard *message*."""


def structlog_logger(name: str = "unity_invoker.unity") -> SimpleLogger:
    """Forward each non-empty chunk of Unity output to a structlog logger."""
    log = structlog.get_logger(name)

    def _log(message: str) -> None:
        if message:
            log.info(message)

    return _log
