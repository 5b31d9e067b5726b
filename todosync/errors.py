"""Outcome classification for controller actions."""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    """How an action's exchange ended."""
    SUCCESS = "success"  # 2xx, state applied
    PROTOCOL_ERROR = "protocol_error"  # Exchange completed with a non-2xx status
    TRANSPORT_ERROR = "transport_error"  # Exchange never completed, or body unusable
    SKIPPED = "skipped"  # Precondition guard, no request issued


# Diagnostic prefixes for transport-level failures, keyed by action name
ERROR_PREFIXES: dict[str, str] = {
    "ping": "Fetch error: ",
    "load_todos": "Load error: ",
    "create_todo": "Create error: ",
    "toggle_todo": "Update error: ",
    "delete_todo": "Delete error: ",
}


@dataclass
class ActionResult:
    """Result of one controller action."""
    action: str
    outcome: Outcome
    diagnostic: str = ""
    status: int | None = None
    error: BaseException | None = None
    refresh: "ActionResult | None" = None  # Reload triggered by a successful mutation

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.SUCCESS


def is_success(status: int) -> bool:
    """Return True for statuses in the 2xx range."""
    return 200 <= status <= 299


def describe_failure(exception: BaseException) -> str:
    """Return the failure detail used in transport-level diagnostics."""
    text = str(exception)
    if not text:
        return type(exception).__name__
    return text


def transport_diagnostic(action: str, exception: BaseException) -> str:
    """
    Build the diagnostic for an exchange that could not complete.

    Args:
        action: Controller action name (key of ERROR_PREFIXES)
        exception: The absorbed failure

    Returns:
        Prefixed diagnostic string, e.g. ``"Delete error: Connection refused"``
    """
    prefix = ERROR_PREFIXES.get(action, "Error: ")
    return f"{prefix}{describe_failure(exception)}"


def classify_status(action: str, status: int, diagnostic: str) -> ActionResult:
    """Classify a completed exchange by its status code."""
    outcome = Outcome.SUCCESS if is_success(status) else Outcome.PROTOCOL_ERROR
    return ActionResult(action=action, outcome=outcome, diagnostic=diagnostic, status=status)


def classify_failure(action: str, exception: BaseException) -> ActionResult:
    """Classify an exchange that failed before producing a usable response."""
    diagnostic = transport_diagnostic(action, exception)
    logger.warning(f"{action} failed: {type(exception).__name__}: {exception}")
    return ActionResult(
        action=action,
        outcome=Outcome.TRANSPORT_ERROR,
        diagnostic=diagnostic,
        status=None,
        error=exception,
    )
