# monitoring/html_logger.py
"""
HTML journal for the monitoring application.

This module provides simple logging functions (info, warn, error)
that append entries to an HTML file, plus :func:`log_event` used by
the mutating API endpoints to trace the ``start``, ``success`` and
``error`` phases of an action. The generated file can be displayed
directly in a browser and is rendered by the staff logs view.

Every entry is mirrored to the ``monitoring.journal`` logger so the
console output carries the same events.
"""

from contextlib import contextmanager
from html import escape
from pathlib import Path
from typing import Any, Iterator
import json
import logging

from django.conf import settings
from django.utils.timezone import now

journal = logging.getLogger("monitoring.journal")

LOG_FILENAME = "app.log.html"

# HTML header and footer for the log file
HEADER = """<!doctype html>
<html lang="fr"><head><meta charset="utf-8"><title>Journaux</title>
<style>
.log-info{ background:#e3f2fd; color:#0d47a1; padding:.5rem; border-left:4px solid #1976d2; margin:.25rem 0; }
.log-warn{ background:#fff8e1; color:#e65100; padding:.5rem; border-left:4px solid #ff9800; margin:.25rem 0; }
.log-error{ background:#ffebee; color:#b71c1c; padding:.5rem; border-left:4px solid #f44336; margin:.25rem 0; }
.code{ font-family:monospace; }
</style></head><body>
<h3>Journaux applicatifs</h3>
"""
FOOTER = "</body></html>"

#: Level used for each event phase
PHASE_LEVELS = {
    "start": "info",
    "success": "info",
    "error": "error",
}


def log_file() -> Path:
    """
    Return the path of the journal file.

    The directory comes from ``settings.JOURNAL_DIR`` and is read at
    call time so tests can redirect it with ``override_settings``.
    """
    return Path(getattr(settings, "JOURNAL_DIR", Path(settings.BASE_DIR) / "logs")) / LOG_FILENAME


def _ensure_file(path: Path):
    """
    Ensure that the log file exists.

    If the file does not exist, it is created with the HTML header.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        path.write_text(HEADER, encoding="utf-8")


def _append(html_line: str):
    """
    Append a single HTML line to the log file.

    Nothing is written when ``settings.JOURNAL_ENABLED`` is false.

    Parameters
    ----------
    html_line : str
        The HTML-formatted log entry to append.
    """
    if not getattr(settings, "JOURNAL_ENABLED", True):
        return
    path = log_file()
    _ensure_file(path)
    with path.open("a", encoding="utf-8") as f:
        f.write(html_line + "\n")


def _write(level: str, message: str):
    ts = now().strftime("%Y-%m-%d %H:%M:%S")
    _append(
        f'<div class="log-{level}"><strong>[{level.upper()} {ts}]</strong> '
        f'<span class="code">{escape(message)}</span></div>'
    )
    getattr(journal, "warning" if level == "warn" else level)(message)


def info(message: str):
    """
    Log an informational message.

    Parameters
    ----------
    message : str
        The message to log.
    """
    _write("info", message)


def warn(message: str):
    """
    Log a warning message.

    Parameters
    ----------
    message : str
        The message to log.
    """
    _write("warn", message)


def error(message: str):
    """
    Log an error message.

    Parameters
    ----------
    message : str
        The message to log.
    """
    _write("error", message)


def log_event(action: str, phase: str, **fields: Any):
    """
    Record one phase of an API action.

    The entry is a JSON object ``{"action", "phase", "timestamp", ...}``
    where the extra keyword arguments carry the actor and target
    identifiers and, for the ``error`` phase, the error code and status.

    Parameters
    ----------
    action : str
        Upper-case action name, for example ``ENROLL_CHILD``.
    phase : str
        One of ``start``, ``success`` or ``error``.
    **fields : Any
        Additional JSON-serializable context.

    Examples
    --------
    >>> log_event("ENROLL_CHILD", "start", parent_id=3, child_id=7, activity_id=2)
    """
    payload = {"action": action, "phase": phase, "timestamp": now().isoformat()}
    payload.update(fields)
    _write(PHASE_LEVELS.get(phase, "info"), json.dumps(payload, default=str, sort_keys=True))


@contextmanager
def journaled(action: str, **fields: Any) -> Iterator[None]:
    """
    Log the ``start`` phase, then ``success`` or ``error`` around a block.

    Errors are re-raised unchanged after being recorded.

    Parameters
    ----------
    action : str
        Upper-case action name.
    **fields : Any
        Context recorded with every phase.
    """
    log_event(action, "start", **fields)
    try:
        yield
    except Exception as exc:
        code = getattr(exc, "code", None)
        log_event(
            action,
            "error",
            code=getattr(code, "value", code) or "INTERNAL_ERROR",
            status=getattr(exc, "status", 500),
            message=str(exc),
            **fields,
        )
        raise
    log_event(action, "success", **fields)
