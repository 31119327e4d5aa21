"""
Booking status workflow
Pending → Confirmed/Declined, Confirmed → Completed/No-Show.
Declined, Completed and No-Show are terminal.

The table is only enforced when ENFORCE_STATUS_TRANSITIONS is on; by default
staff may move a booking to any status to correct mistakes.
"""

from ..models import (
    BOOKING_STATUSES,
    STATUS_COMPLETED,
    STATUS_CONFIRMED,
    STATUS_DECLINED,
    STATUS_NO_SHOW,
    STATUS_PENDING,
    TERMINAL_STATUSES,
)

ALLOWED_TRANSITIONS = {
    STATUS_PENDING: [STATUS_CONFIRMED, STATUS_DECLINED],
    STATUS_CONFIRMED: [STATUS_COMPLETED, STATUS_NO_SHOW],
    STATUS_DECLINED: [],  # Terminal state
    STATUS_COMPLETED: [],  # Terminal state
    STATUS_NO_SHOW: [],  # Terminal state
}


def is_valid_status(status: str) -> bool:
    return status in BOOKING_STATUSES


def is_terminal(status: str) -> bool:
    return status in TERMINAL_STATUSES


def validate_status_transition(current_status: str, new_status: str) -> bool:
    """
    Check a transition against the strict table

    Args:
        current_status: Current booking status
        new_status: Desired new status

    Returns:
        bool: True if transition is valid, False otherwise
    """
    # Allow same status (no-op)
    if current_status == new_status:
        return True

    return new_status in ALLOWED_TRANSITIONS.get(current_status, [])
