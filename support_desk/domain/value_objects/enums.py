"""Domain enums — pure Python, no external dependencies."""

from __future__ import annotations

import logging
import re
from enum import Enum

logger = logging.getLogger(__name__)


class IssueType(str, Enum):
    PAYMENT_RELATED = "PAYMENT_RELATED"
    MUTUAL_FUND_RELATED = "MUTUAL_FUND_RELATED"
    GOLD_RELATED = "GOLD_RELATED"
    INSURANCE_RELATED = "INSURANCE_RELATED"
    OTHER = "OTHER"


class IssueStatus(str, Enum):
    OPEN = "OPEN"
    WAITING = "WAITING"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"

    @property
    def is_terminal(self) -> bool:
        return self in (IssueStatus.RESOLVED, IssueStatus.CLOSED)


class AgentStatus(str, Enum):
    FREE = "FREE"
    BUSY = "BUSY"


# Short names people actually type into the intake form
ISSUE_TYPE_ALIASES: dict[str, IssueType] = {
    "PAYMENT": IssueType.PAYMENT_RELATED,
    "MUTUAL_FUND": IssueType.MUTUAL_FUND_RELATED,
    "FUND": IssueType.MUTUAL_FUND_RELATED,
    "GOLD": IssueType.GOLD_RELATED,
    "INSURANCE": IssueType.INSURANCE_RELATED,
}


def _normalize_key(raw: str) -> str:
    """'Mutual fund-related ' -> 'MUTUAL_FUND_RELATED'."""
    return re.sub(r"[\s\-]+", "_", raw.strip()).upper()


def parse_issue_type(raw: str) -> IssueType:
    """Strict category lookup.

    Raises:
        ValueError: if *raw* does not name a known category.
    """
    key = _normalize_key(raw or "")
    if key in IssueType.__members__:
        return IssueType[key]
    if key in ISSUE_TYPE_ALIASES:
        return ISSUE_TYPE_ALIASES[key]
    raise ValueError(f"Unknown issue type: {raw!r}")


def resolve_issue_type(raw: str) -> IssueType:
    """Lenient category lookup used at intake — never raises.

    Unrecognized input falls back to OTHER with a warning.
    """
    try:
        return parse_issue_type(raw)
    except ValueError:
        logger.warning("Unknown issue type %r, falling back to %s", raw, IssueType.OTHER.value)
        return IssueType.OTHER


def parse_issue_status(raw: str) -> IssueStatus:
    """Strict status lookup.

    Raises:
        ValueError: if *raw* does not name a known status.
    """
    key = _normalize_key(raw or "")
    if key in IssueStatus.__members__:
        return IssueStatus[key]
    raise ValueError(f"Unknown issue status: {raw!r}")
