"""
Structured reporting helpers and exception types for the migration.

The :mod:`typo2wp.utils.errors` module centralizes the writing of report
entries for both failed and successful operations during the migration.
When a report directory is configured each entry is appended to a JSON
Lines file inside it so that the information can be reviewed or parsed
after a run.  Without a report directory the entries are only echoed to
stdout.

Two public functions are provided:

``report_error``
    Record a problem with a single item.  An optional exception can be
    supplied and will be serialized to the log.

``report_ok``
    Record a successful step for an item.  Additional key/value
    information can be attached to the entry via the ``extra`` parameter.

The ``EVENTS`` dictionary maps event codes to human readable messages.
Codes not present in the dictionary fall back to the code itself.

Fatal conditions are raised as :class:`MigrationError` subclasses and
terminate the whole run.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional

# Mapping of event codes used throughout the migration to descriptive messages.
EVENTS: Dict[str, str] = {
    "TERM_COPIED": "Taxonomy term copied",
    "POST_INSERTED": "Post inserted",
    "POST_UPDATED": "Existing post overwritten",
    "POST_SKIPPED": "Existing post kept, item skipped",
    "POST_AMBIGUOUS": "More than one existing post matches",
    "RELATIONSHIP_UNMAPPED": "Link references a term that was not migrated",
    "COMMENT_INSERTED": "Comment inserted",
    "TRACKBACK_INSERTED": "Trackback inserted",
}

ERROR_LOG = "errors.jsonl"
OK_LOG = "success.jsonl"


class MigrationError(Exception):
    """Base class for conditions that abort the entire run."""


class ConfigurationError(MigrationError):
    """The configuration file could not be read."""


class AmbiguousMatchError(MigrationError):
    """More than one destination post shares a name and post type."""

    def __init__(self, kind: str, ids: List[Any]) -> None:
        self.kind = kind
        self.ids = list(ids)
        super().__init__(
            f"Found more than 1 {kind} with the same name\n"
            f"Ids: {', '.join(str(i) for i in self.ids)}"
        )


def _write_jsonl(report_dir: str, filename: str, data: Dict[str, Any]) -> None:
    """Append ``data`` as a JSON object followed by a newline."""
    os.makedirs(report_dir, exist_ok=True)
    with open(os.path.join(report_dir, filename), "a", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, default=str)
        f.write("\n")


def _entry(code: str, item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "code": code,
        "message": EVENTS.get(code, code),
        "kind": item.get("kind"),
        "source_id": item.get("id"),
        "slug": item.get("slug"),
        "title": item.get("title"),
    }


def report_error(
    code: str,
    item: Dict[str, Any],
    exc: Optional[Exception] = None,
    *,
    report_dir: Optional[str] = None,
) -> Dict[str, Any]:
    """Log a problem with ``item``.

    Parameters
    ----------
    code:
        A key identifying the type of problem.  If ``code`` is present in
        :data:`EVENTS` its value will be used as the message.
    item:
        Description of the migrated item.  Only the ``kind``, ``id``,
        ``slug`` and ``title`` keys are referenced if present.
    exc:
        Optional exception instance that triggered the error.
    report_dir:
        Directory receiving ``errors.jsonl``.  Nothing is written when
        ``None``.

    Returns the entry that was logged.
    """
    entry = _entry(code, item)
    if exc is not None:
        entry["error"] = str(exc)
    print(f"[ERROR] {entry['message']} - {item.get('slug') or item.get('id') or ''}")
    if report_dir:
        _write_jsonl(report_dir, ERROR_LOG, entry)
    return entry


def report_ok(
    code: str,
    item: Dict[str, Any],
    extra: Optional[Dict[str, Any]] = None,
    *,
    report_dir: Optional[str] = None,
) -> Dict[str, Any]:
    """Log a successful event for ``item``.

    Unlike :func:`report_error` nothing is echoed to stdout; the
    migration tool already prints a progress line for every item.
    """
    entry = _entry(code, item)
    if extra:
        entry.update(extra)
    if report_dir:
        _write_jsonl(report_dir, OK_LOG, entry)
    return entry
