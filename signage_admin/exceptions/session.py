"""Media dialog session exceptions."""

from signage_admin.exceptions.base import SignageError


class SessionStateError(SignageError):
    """Operation is not valid in the current session state.

    Raised when a second session is opened while one is active, or when an
    edit session is switched away from URL mode.
    """

    pass
