"""Decision trail — records which pricing branch was taken and why."""

from __future__ import annotations

import logging
from typing import Any

from act_pricing.models.results import TraceEvent

logger = logging.getLogger(__name__)


class DecisionTrail:
    """Collects ``TraceEvent``s and mirrors them to a logger.

    Pass a logger to route the trail somewhere other than this module's.
    """

    def __init__(self, log: logging.Logger | None = None):
        self.events: list[TraceEvent] = []
        self._log = log or logger

    def record(self, step: str, message: str, **data: Any) -> None:
        self.events.append(TraceEvent(step=step, message=message, data=data))
        self._log.debug(f"[{step}] {message} {data if data else ''}".rstrip())

    def warn(self, step: str, message: str, **data: Any) -> None:
        self.events.append(TraceEvent(step=step, message=message, data=data))
        self._log.warning(f"[{step}] {message} {data if data else ''}".rstrip())
