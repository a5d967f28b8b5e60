"""Base exception classes for Signage Admin."""


class SignageError(Exception):
    """
    Base exception for all Signage Admin errors.

    All custom exceptions in the application should inherit from this class
    to enable consistent error handling and catching.
    """

    pass
