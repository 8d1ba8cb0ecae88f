# -*- encoding: utf-8 -*-
"""
Europass Credential error hierarchy.

Every failure carries a deterministic error code plus the context needed to
act on it (field name, offending raw value, vocabulary domain).

Error Codes:
- EDC_UNKNOWN_CODE: Value not present in a controlled vocabulary
- EDC_INVALID_IDENTIFIER: Empty or inconsistent identifier fields
- EDC_STRUCTURAL_CYCLE: Self-referential relation would form a cycle
- EDC_MISSING_FIELD: Required source field absent
- EDC_DATE_PARSE: Malformed date string
- EDC_NUMERIC_RANGE: Number outside its permitted range
- EDC_SOURCE_FORMAT: Source field has the wrong JSON type
- EDC_INVALID_VALUE: Malformed plain value (empty text, bad URI)
"""

from typing import Any, Dict, Optional
import json

__all__ = [
    "CredentialError",
    "UnknownCodeError",
    "InvalidIdentifierError",
    "StructuralCycleError",
    "MissingFieldError",
    "DateParseError",
    "NumericRangeError",
    "SourceFormatError",
    "InvalidValueError",
]


class CredentialError(Exception):
    """
    Base exception for all credential model and mapping errors.

    Provides:
    - code: A deterministic error code (EDC_*)
    - message: Human-readable error description
    - details: Additional context as a dictionary
    """

    code: str = "EDC_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error to a dictionary."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize error to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r})"
        )


class UnknownCodeError(CredentialError):
    """
    A value did not resolve in its controlled vocabulary.

    Matching is exact, so this is also raised for case variants
    of a known code (e.g. "eur" for "EUR").
    """

    code: str = "EDC_UNKNOWN_CODE"

    def __init__(self, domain: str, value: Any, field: Optional[str] = None) -> None:
        self.domain = str(domain)
        self.value = value
        self.field = field
        where = f" (field {field!r})" if field else ""
        super().__init__(
            f"Unknown {self.domain} code {value!r}{where}",
            details={"domain": self.domain, "value": value, "field": field},
        )

    def for_field(self, field: str) -> "UnknownCodeError":
        """Return a copy of this error attributed to a source field."""
        return UnknownCodeError(self.domain, self.value, field=field)


class InvalidIdentifierError(CredentialError):
    """Identifier content is empty or its scheme fields are inconsistent."""

    code: str = "EDC_INVALID_IDENTIFIER"

    def __init__(self, message: str, content: Any = None, scheme_id: Optional[str] = None) -> None:
        self.content = content
        self.scheme_id = scheme_id
        super().__init__(message, details={"content": content, "scheme_id": scheme_id})


class StructuralCycleError(CredentialError):
    """A self-referential relation would reach its originating node again."""

    code: str = "EDC_STRUCTURAL_CYCLE"

    def __init__(self, relation: str, node_id: Optional[str] = None) -> None:
        self.relation = relation
        self.node_id = node_id
        super().__init__(
            f"Relation {relation!r} forms a cycle through {node_id!r}",
            details={"relation": relation, "node_id": node_id},
        )


class MissingFieldError(CredentialError):
    """A required source field is absent or null."""

    code: str = "EDC_MISSING_FIELD"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing required field {name!r}", details={"name": name})


class DateParseError(CredentialError):
    """A date field is not a valid YYYY-MM-DD calendar date."""

    code: str = "EDC_DATE_PARSE"

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Cannot parse date {value!r} in field {field!r}",
            details={"field": field, "value": value},
        )


class NumericRangeError(CredentialError):
    """A number is not finite or lies outside its permitted range."""

    code: str = "EDC_NUMERIC_RANGE"

    def __init__(self, field: str, value: Any = None, reason: str = "") -> None:
        self.field = field
        self.value = value
        self.reason = reason
        message = f"Value {value!r} out of range for field {field!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, details={"field": field, "value": value, "reason": reason})


class SourceFormatError(CredentialError):
    """A source field is present but has the wrong JSON type."""

    code: str = "EDC_SOURCE_FORMAT"

    def __init__(self, field: str, value: Any, expected: str) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(
            f"Field {field!r} must be {expected}, got {type(value).__name__}",
            details={"field": field, "value": value, "expected": expected},
        )


class InvalidValueError(CredentialError):
    """A plain value (text content, URI) is malformed."""

    code: str = "EDC_INVALID_VALUE"

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid value {value!r} for {field!r}: {reason}",
            details={"field": field, "value": value, "reason": reason},
        )
