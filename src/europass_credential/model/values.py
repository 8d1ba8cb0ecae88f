# -*- encoding: utf-8 -*-
"""
Value types of the Europass Learning Model.

Each value type is a frozen dataclass whose __post_init__ is its single
validation gate: an instance that exists is valid.

Key principles:
    - Codes resolve EXACTLY against a vocabulary registry
    - Numbers must be finite; credits, durations and amounts are non-negative
    - Text carries an EU official language
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional, Union
import math
import re

from ..errors import (
    InvalidIdentifierError,
    InvalidValueError,
    NumericRangeError,
    UnknownCodeError,
)
from ..vocabularies import (
    DEFAULT_REGISTRY,
    DomainLike,
    VocabularyDomain,
    VocabularyRegistry,
)


# Units whose measures may go below zero
SIGNED_UNITS = frozenset({"CEL"})

TEXT_FORMATS = frozenset({"text/plain", "text/html", "text/markdown"})

_URI_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:\S+$")


def check_uri(value: Any, field_name: str) -> str:
    """Return value if it is an absolute URI, else raise InvalidValueError."""
    if not isinstance(value, str) or not _URI_PATTERN.match(value):
        raise InvalidValueError(field_name, value, "not an absolute URI")
    return value


def check_number(value: Any, field_name: str, non_negative: bool = True) -> float:
    """
    Check that a value is a finite real number.

    Raises:
        NumericRangeError: if the value is not a number, not finite, or
            negative where non_negative is set
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NumericRangeError(field_name, value, "not a number")
    if not math.isfinite(value):
        raise NumericRangeError(field_name, value, "not finite")
    if non_negative and value < 0:
        raise NumericRangeError(field_name, value, "must not be negative")
    return value


@dataclass(frozen=True)
class Identifier:
    """
    An identifier, unique within the scope of its scheme.

    Scheme fields describe the issuing scheme; version, name and agency
    only make sense once a scheme id is given.
    """
    content: str
    scheme_id: Optional[str] = None
    scheme_version_id: Optional[str] = None
    scheme_agency_id: Optional[str] = None
    scheme_name: Optional[str] = None
    scheme_agency_name: Optional[str] = None
    issued_date: Optional[date] = None
    identifier_type: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.content, str) or not self.content.strip():
            raise InvalidIdentifierError(
                "Identifier content must be a non-empty string",
                content=self.content,
                scheme_id=self.scheme_id,
            )
        if self.scheme_id is None:
            dangling = [
                name for name in ("scheme_version_id", "scheme_name", "scheme_agency_id")
                if getattr(self, name) is not None
            ]
            if dangling:
                raise InvalidIdentifierError(
                    f"{', '.join(dangling)} set without scheme_id",
                    content=self.content,
                )
        elif not self.scheme_id:
            raise InvalidIdentifierError(
                "scheme_id must not be empty",
                content=self.content,
                scheme_id=self.scheme_id,
            )

    @property
    def scope_key(self) -> tuple[Optional[str], str]:
        """Key under which this identifier must be unique."""
        return (self.scheme_id, self.content)


@dataclass(frozen=True)
class LegalIdentifier(Identifier):
    """An identifier issued under the law of a jurisdiction (spatial_id)."""
    spatial_id: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if not self.spatial_id:
            raise InvalidIdentifierError(
                "LegalIdentifier requires a spatial_id",
                content=self.content,
                scheme_id=self.scheme_id,
            )


@dataclass(frozen=True)
class Code:
    """
    A term of a controlled vocabulary, as placed in a credential.

    The notation is validated against the registry for the declared domain
    on construction. Prefer Code.resolve(), which also fills in the labels.
    """
    domain: str
    notation: str
    framework_uri: str = ""
    framework_name: str = ""
    display_name: str = ""
    description: str = ""
    uri: str = ""
    registry: Optional[VocabularyRegistry] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if isinstance(self.domain, VocabularyDomain):
            object.__setattr__(self, "domain", self.domain.value)
        (self.registry or DEFAULT_REGISTRY).validate(self.domain, self.notation)

    @classmethod
    def resolve(
        cls,
        domain: DomainLike,
        notation: str,
        registry: Optional[VocabularyRegistry] = None,
    ) -> "Code":
        """
        Build a Code from a registry term.

        Raises:
            UnknownCodeError: if the notation is not in the domain
        """
        registry = registry or DEFAULT_REGISTRY
        term = registry.validate(domain, notation)
        vocabulary = registry.vocabulary(term.domain)
        return cls(
            domain=term.domain,
            notation=term.notation,
            framework_uri=vocabulary.framework_uri,
            framework_name=vocabulary.name,
            display_name=term.label,
            description=term.description,
            uri=term.uri,
            registry=registry,
        )


def expect_code(code: Any, domain: DomainLike, field_name: str) -> None:
    """
    Check that a field holds a Code of its declared domain.

    Raises:
        UnknownCodeError: if the value is not a Code of that domain
    """
    name = domain.value if isinstance(domain, VocabularyDomain) else str(domain)
    if not isinstance(code, Code):
        raise UnknownCodeError(name, code, field=field_name)
    if code.domain != name:
        raise UnknownCodeError(name, code.notation, field=field_name)


@dataclass(frozen=True)
class Text:
    """Text content in one EU official language (ISO 639-1 notation)."""
    content: str
    language: str = "en"

    def __post_init__(self):
        if not isinstance(self.content, str) or not self.content.strip():
            raise InvalidValueError("content", self.content, "text must not be empty")
        DEFAULT_REGISTRY.validate(VocabularyDomain.LANGUAGE, self.language)


@dataclass(frozen=True)
class Note(Text):
    """A text with a media format and an optional topic."""
    format: str = "text/plain"
    topic: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if self.format not in TEXT_FORMATS:
            raise InvalidValueError("format", self.format, "unsupported text format")


@dataclass(frozen=True)
class NumericScore:
    """A grade expressed as a number within a scoring scheme."""
    content: float
    scoring_scheme: Optional[str] = None

    def __post_init__(self):
        check_number(self.content, "NumericScore.content")


@dataclass(frozen=True)
class TextualScore:
    """A grade expressed as a symbol or word within a scoring scheme."""
    content: str
    scoring_scheme: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.content, str) or not self.content.strip():
            raise InvalidValueError("TextualScore.content", self.content, "score must not be empty")


Score = Union[NumericScore, TextualScore]


def make_score(content: Any, scoring_scheme: Optional[str] = None) -> Score:
    """Build a NumericScore for numbers and a TextualScore for strings."""
    if isinstance(content, (int, float)) and not isinstance(content, bool):
        return NumericScore(content=content, scoring_scheme=scoring_scheme)
    return TextualScore(content=content, scoring_scheme=scoring_scheme)


@dataclass(frozen=True)
class GradeAverage:
    """An average grade, how it was calculated and the credits it covers."""
    value: NumericScore
    method: Code
    total_included_credits: float

    def __post_init__(self):
        if not isinstance(self.value, NumericScore):
            raise InvalidValueError("GradeAverage.value", self.value, "must be a NumericScore")
        expect_code(self.method, VocabularyDomain.GRADE_AVERAGE_METHOD, "GradeAverage.method")
        check_number(self.total_included_credits, "GradeAverage.total_included_credits")


@dataclass(frozen=True)
class Measure:
    """A quantity in a measurement unit."""
    content: float
    unit: Code

    def __post_init__(self):
        expect_code(self.unit, VocabularyDomain.MEASUREMENT_UNIT, "Measure.unit")
        check_number(
            self.content,
            "Measure.content",
            non_negative=self.unit.notation not in SIGNED_UNITS,
        )

    @classmethod
    def create(
        cls,
        content: float,
        unit_code: str,
        registry: Optional[VocabularyRegistry] = None,
    ) -> "Measure":
        """
        Build a Measure from a number and a unit notation.

        Raises:
            UnknownCodeError: if the unit is not a known measurement unit
            NumericRangeError: if the number is not finite or out of range
        """
        return cls(content=content, unit=Code.resolve(VocabularyDomain.MEASUREMENT_UNIT, unit_code, registry))


@dataclass(frozen=True)
class Amount:
    """A non-negative amount of money in a currency."""
    content: float
    unit: Code

    def __post_init__(self):
        expect_code(self.unit, VocabularyDomain.CURRENCY, "Amount.unit")
        check_number(self.content, "Amount.content")

    @classmethod
    def create(
        cls,
        content: float,
        currency_code: str,
        registry: Optional[VocabularyRegistry] = None,
    ) -> "Amount":
        """
        Build an Amount from a number and an ISO 4217 currency notation.

        Raises:
            UnknownCodeError: if the currency is unknown (matching is exact)
            NumericRangeError: if the number is not finite or negative
        """
        return cls(content=content, unit=Code.resolve(VocabularyDomain.CURRENCY, currency_code, registry))
