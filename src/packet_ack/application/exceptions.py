from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class ValidationError(AppError):
    pass


class InvalidPayloadError(ValidationError):
    """Frame is not a JSON object."""

    def __init__(self, detail: str = "Invalid JSON format") -> None:
        super().__init__(detail)


class MissingFieldError(ValidationError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required")
