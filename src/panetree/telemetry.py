"""Telemetry - 统一日志和指标入口

日志格式: [module] [Operation] msg
指标示例: reconcile.pruned, equalize.resize, settle.timeout
"""

import logging

from .config import LOG_FORMAT, LOG_LEVEL, METRICS_ENABLED


def get_logger(name: str) -> logging.Logger:
    """Get a module logger (usually called with __name__)."""
    return logging.getLogger(name)


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger for the daemon and CLI.

    Args:
        level: Log level name; defaults to config.LOG_LEVEL
    """
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)


def format_pane_log(window_id: str, tab_id: str, pane_id: str, msg: str) -> str:
    """Format a message about a single pane.

    Returns:
        "w:<window> t:<tab> p:<pane> : msg"
    """
    return f"w:{window_id} t:{tab_id} p:{pane_id} : {msg}"


class Metrics:
    """In-memory counters.

    Used for diagnostics and by tests to observe how many host commands an
    operation issued.
    """

    def __init__(self, enabled: bool = True):
        self._enabled = enabled
        self._counters: dict[str, int] = {}

    def inc(self, name: str, labels: dict[str, str] | None = None, value: int = 1) -> None:
        """Increment a counter.

        Args:
            name: Counter name (e.g. "equalize.resize")
            labels: Optional labels (e.g. {"tab": tab_id})
            value: Increment, default 1
        """
        if not self._enabled:
            return
        key = self._make_key(name, labels)
        self._counters[key] = self._counters.get(key, 0) + value

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        """Read a counter (used by tests)."""
        return self._counters.get(self._make_key(name, labels), 0)

    def get_all_counters(self) -> dict[str, int]:
        """All counters (exposed by the daemon for debugging)."""
        return dict(self._counters)

    def reset(self) -> None:
        """Clear all counters (used by tests)."""
        self._counters.clear()

    def _make_key(self, name: str, labels: dict[str, str] | None) -> str:
        if not labels:
            return name
        label_str = ",".join(f"{k}={v}" for k, v in sorted(labels.items()))
        return f"{name}{{{label_str}}}"


# Global metrics instance
metrics = Metrics(enabled=METRICS_ENABLED)
