"""Domain errors raised by the dispatcher.

Every error is raised before any entity, queue or counter is touched, so a
failed call never leaves partial state behind.
"""


class SupportDeskError(Exception):
    """Base class for all dispatcher errors."""


class ValidationError(SupportDeskError, ValueError):
    """Required input is missing or malformed."""


class NotFoundError(SupportDeskError, LookupError):
    """A referenced entity does not exist."""


class AgentNotFoundError(NotFoundError):
    pass


class IssueNotFoundError(NotFoundError):
    pass


class InvalidTransitionError(SupportDeskError):
    """The requested status change is not allowed by the issue lifecycle."""


class InvalidFilterError(SupportDeskError, ValueError):
    """A query filter names an unknown key or enumerated value."""


class AgentBusyError(SupportDeskError):
    """An agent that already holds an issue was asked to take another one."""
