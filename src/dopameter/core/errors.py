"""Exception hierarchy for Dopameter.

    DopameterError
    ├── ValidationError   -> HTTP 400
    └── NotFoundError     -> HTTP 404

Anything else escaping a request handler is reported as HTTP 500.
"""

from __future__ import annotations


class DopameterError(Exception):
    """Base exception for all Dopameter errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DopameterError):
    """Bad or missing input: unknown emoji, empty URL, disallowed type."""

    status_code = 400


class NotFoundError(DopameterError):
    """A referenced entity does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: object) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")
