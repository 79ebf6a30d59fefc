from __future__ import annotations

from typing import Sequence


class ElectionsMCPError(Exception):
    """Base class for errors surfaced to the host as tool error results."""


class ToolValidationError(ElectionsMCPError):
    """One or more required tool arguments are missing or empty."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        if len(self.missing) == 1:
            message = f"{self.missing[0]} is required"
        else:
            message = f"{', '.join(self.missing[:-1])} and {self.missing[-1]} are required"
        super().__init__(message)


class UnknownToolError(ElectionsMCPError, LookupError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class APIResponseError(ElectionsMCPError):
    """The elections API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, status_text: str) -> None:
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"API request failed: {status_code} {status_text}")


class ElectionsAPIError(ElectionsMCPError):
    """Normalized failure of a request against the elections API."""
