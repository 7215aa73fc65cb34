"""Lifecycle hooks around the graph-building stages."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class HookName(str, Enum):
    BEFORE_AGGREGATE = "before_aggregate"
    AFTER_AGGREGATE = "after_aggregate"
    BEFORE_STATISTICS = "before_statistics"
    AFTER_STATISTICS = "after_statistics"
    BEFORE_CLASSIFY = "before_classify"
    AFTER_CLASSIFY = "after_classify"
    BEFORE_LAYOUT = "before_layout"
    AFTER_LAYOUT = "after_layout"
    ON_ERROR = "on_error"


HookCallback = Callable[[dict[str, Any], dict[str, Any]], dict[str, Any] | None]


class HookManager:
    """Stage callbacks, run in registration order.

    A callback receives the run context and a copy of the stage envelope and may
    return a patch that is merged into the envelope seen by later callbacks.
    """

    def __init__(self) -> None:
        self._callbacks: dict[HookName, list[HookCallback]] = defaultdict(list)

    def register(self, name: HookName | str, callback: HookCallback) -> None:
        self._callbacks[HookName(name)].append(callback)

    def emit(self, name: HookName, context: dict[str, Any], envelope: dict[str, Any]) -> dict[str, Any]:
        merged = dict(envelope)
        for callback in self._callbacks[name]:
            try:
                patch = callback(context, dict(merged))
            except Exception as exc:
                logger.warning("Hook %s failed: %s", name.value, exc)
                self._report_failure(name, exc, context)
                continue
            if patch:
                merged.update(patch)
        return merged

    def _report_failure(self, name: HookName, exc: Exception, context: dict[str, Any]) -> None:
        error_context = {**context, "exception": exc, "hook": name.value}
        for callback in self._callbacks[HookName.ON_ERROR]:
            try:
                callback(error_context, {})
            except Exception:
                logger.exception("Error hook failed while handling %s", name.value)
