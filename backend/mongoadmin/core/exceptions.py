"""
Exceptions raised across the admin API.
"""


class AdminError(Exception):
    """Base class for admin API errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DriverUnavailableError(AdminError):
    """No MongoDB server is configured or reachable for this request."""
