"""
HTTP error type rendered as {"error", "details"?}.
"""

from typing import Any, Dict, Optional


class ApiError(Exception):
    """An error response to send back to the caller."""

    def __init__(self, status_code: int, error: str, details: Optional[Any] = None):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body
