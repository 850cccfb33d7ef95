"""
Observation hooks invoked after successful API calls.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)

Primitive = Union[str, int, float, bool, None]
Observer = Callable[[str, Dict[str, Primitive]], None]


class LoggingObserver:
    """Observer that writes every event to a logger."""

    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self.log = log or logger
        self.level = level

    def __call__(self, event: str, properties: Dict[str, Primitive]) -> None:
        details = " ".join(f"{k}={v}" for k, v in properties.items())
        self.log.log(self.level, f"{event} {details}".rstrip())


def notify(observer: Optional[Observer], event: str, properties: Dict[str, Primitive]) -> None:
    """Call the observer, discarding anything it raises."""
    if observer is None:
        return
    try:
        observer(event, properties)
    except Exception as e:
        logger.debug(f"Observer failed on {event}: {e}", exc_info=True)


def describe_input(options: Mapping[str, Any]) -> str:
    """Comma-separated names of the options that were actually sent."""
    return ",".join(k for k, v in options.items() if v is not None and v is not False)


def describe_output(result: Any) -> Dict[str, Primitive]:
    """Coarse shape of a response: status and item count."""
    if not isinstance(result, dict):
        return {"result_type": type(result).__name__}

    shape: Dict[str, Primitive] = {"status": str(result.get("status"))}
    count = result.get("count")
    if isinstance(count, int) and not isinstance(count, bool):
        shape["count"] = count
        return shape
    for key in ("feeds", "items", "episodes"):
        if isinstance(result.get(key), list):
            shape["count"] = len(result[key])
            return shape
    for key in ("feed", "episode", "value", "stats"):
        if isinstance(result.get(key), dict):
            shape["count"] = 1
            return shape
    return shape
