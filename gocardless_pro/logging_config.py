"""
logging_config.py
------------------

Shared logging utilities for the GoCardless Pro client.  The client
uses Python's built-in ``logging`` module and serialises every message
as a JSON string so that applications embedding the library can ship
the records to ELK, Grafana or Datadog without extra parsing.

Being a library, this module only attaches a ``NullHandler`` to the
package logger.  Applications that want the records on stdout call
:func:`configure_logging` once at start-up.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

# Expose a module level logger.  Code elsewhere in the package imports
# this instead of instantiating new Logger instances.
logger = logging.getLogger("gocardless_pro")
logger.addHandler(logging.NullHandler())

# Header names whose values never reach the logs.
SENSITIVE_HEADERS = {"authorization", "idempotency-key"}


def configure_logging(level: int = logging.INFO) -> None:
    """Route package log records to stdout.

    Records are formatted with a timestamp, the level and the raw JSON
    message.  Calling this more than once does not duplicate handlers.

    :param level: minimum level emitted by the package logger
    """
    logger.setLevel(level)
    if any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
           for h in logger.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries have keys containing 'token', 'password' or 'secret'
    removed.  Lists and tuples are processed element-wise.  Byte strings
    are summarised by length.  Pydantic models are dumped first.

    Parameters
    ----------
    obj : Any
        Arbitrary Python object to sanitise.

    Returns
    -------
    Any
        A sanitised representation of the input suitable for JSON serialisation.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in ("token", "password", "secret")):
                continue
            clean[k] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    if hasattr(obj, "model_dump"):
        return _sanitize(obj.model_dump(mode="json"))
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def log_event(level: int, event: str, **fields: Any) -> None:
    """Emit a JSON event on the package logger."""
    if not logger.isEnabledFor(level):
        return
    data: Dict[str, Any] = {"event": event}
    data.update(_sanitize(fields))
    logger.log(level, json.dumps(data))


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     attempt: int | None = None, status: int | None = None,
                     duration_ms: float | None = None) -> None:
    """Log an outbound HTTP exchange at DEBUG level.

    Centralises HTTP logging so that credentials and idempotency keys are
    removed from headers and only high-level information (method, URL,
    attempt, status and duration) is recorded.  Bodies are never logged;
    they may carry bank details.

    Parameters
    ----------
    method : str
        The HTTP method (GET, POST, etc.)
    url : str
        The URL being requested.
    headers : dict, optional
        Request headers.  Sensitive keys are removed.
    attempt : int, optional
        1-based attempt number within the logical call.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = {k: v for k, v in headers.items() if k.lower() not in SENSITIVE_HEADERS}
    if attempt is not None:
        data["attempt"] = attempt
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
