"""
Build Issues and Contract Errors

Recoverable anomalies found while building a graph are recorded as data,
never raised. Only contract violations (programming errors) raise.

BOUNDARY ENFORCEMENT:
=====================
- Issues are immutable and attached to the graph that produced them
- The builder never drops a record silently: every skip has an issue
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class IssueCode(Enum):
    """Enumerated, recoverable build anomalies."""
    MALFORMED_DATE = "malformed_date"
    MALFORMED_YEAR = "malformed_year"
    DUPLICATE_ID = "duplicate_id"


@dataclass(frozen=True)
class BuildIssue:
    """Record of a recoverable anomaly and how it was resolved."""
    code: IssueCode
    record_key: str
    message: str

    def to_dict(self) -> dict:
        return {
            'code': self.code.value,
            'record_key': self.record_key,
            'message': self.message,
        }


class GraphContractError(ValueError):
    """Raised when a caller breaks a structural contract (self-loop, bad size)."""
