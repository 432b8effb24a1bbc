"""
Module: diagnostics

Captures field-level problems during form compilation so the host can
report them after a batch run.

Issue types:
- unmatched_element: header recognised, rhs matched no element grammar (warning)
- malformed_spec: rendering failed for the field (error)
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

UNMATCHED_ELEMENT = "unmatched_element"
MALFORMED_SPEC = "malformed_spec"


@dataclass(frozen=True)
class Diagnostic:
    """
    A single field diagnostic.

    Fields:
    - issue_type: UNMATCHED_ELEMENT or MALFORMED_SPEC
    - level: "warning" or "error"
    - message: Human-readable text, also used as the log message
    - field_id: "<title>_<code>" when the header parsed
    - rhs: Offending right-hand side
    """
    issue_type: str
    level: str
    message: str
    field_id: Optional[str] = None
    rhs: Optional[str] = None

    @property
    def log_level(self) -> int:
        return logging.ERROR if self.level == "error" else logging.WARNING

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "issue_type": self.issue_type,
            "level": self.level,
            "message": self.message,
        }
        if self.field_id:
            d["field_id"] = self.field_id
        if self.rhs is not None:
            d["rhs"] = self.rhs
        return d


def unmatched_element(field_id: str, rhs: str) -> Diagnostic:
    return Diagnostic(
        issue_type=UNMATCHED_ELEMENT,
        level="warning",
        message=f"Unmatched form element: {rhs}",
        field_id=field_id,
        rhs=rhs,
    )


def malformed_spec(message: str, field_id: Optional[str] = None, rhs: Optional[str] = None) -> Diagnostic:
    return Diagnostic(
        issue_type=MALFORMED_SPEC,
        level="error",
        message=f"Form parsing failed: {message}",
        field_id=field_id,
        rhs=rhs,
    )


class DiagnosticsCollector:
    """
    Thread-safe collector for field diagnostics.

    The pipeline adds to it when one is passed in; it never configures
    logging itself.
    """

    def __init__(self):
        self._issues: List[Diagnostic] = []
        self._lock = threading.Lock()

    def add(self, diagnostic: Diagnostic) -> None:
        with self._lock:
            self._issues.append(diagnostic)

    def add_unmatched(self, field_id: str, rhs: str) -> Diagnostic:
        """Record an rhs that matched no element grammar."""
        diagnostic = unmatched_element(field_id, rhs)
        self.add(diagnostic)
        return diagnostic

    def add_malformed(self, message: str, field_id: Optional[str] = None, rhs: Optional[str] = None) -> Diagnostic:
        """Record a field that failed to render."""
        diagnostic = malformed_spec(message, field_id, rhs)
        self.add(diagnostic)
        return diagnostic

    @property
    def issues(self) -> List[Diagnostic]:
        with self._lock:
            return list(self._issues)

    @property
    def has_errors(self) -> bool:
        return any(d.level == "error" for d in self.issues)

    def summary(self) -> Dict[str, int]:
        """Count of issues by type."""
        counts: Dict[str, int] = {}
        for issue in self.issues:
            counts[issue.issue_type] = counts.get(issue.issue_type, 0) + 1
        return counts

    def to_json(self) -> str:
        report = {
            "total_issues": len(self.issues),
            "summary": self.summary(),
            "issues": [d.to_dict() for d in self.issues],
        }
        return json.dumps(report, indent=2)

    def clear(self) -> None:
        with self._lock:
            self._issues.clear()
