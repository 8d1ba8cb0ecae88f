# -*- encoding: utf-8 -*-
"""
europass-credential: SISU attainments as Europass digital credentials.

Components:
- vocabularies: closed controlled vocabularies and the exact code validator
- model: value types and the recursive credential entity graph
- crosswalk: the SISU attainment mapping engine
"""

__version__ = "0.1.0"

from .errors import (
    CredentialError,
    DateParseError,
    InvalidIdentifierError,
    InvalidValueError,
    MissingFieldError,
    NumericRangeError,
    SourceFormatError,
    StructuralCycleError,
    UnknownCodeError,
)
from .vocabularies import DEFAULT_REGISTRY, Term, VocabularyDomain, VocabularyRegistry
from .model import Credential, validate_graph
from .crosswalk import MapperConfig, MappingResult, load_attainments, load_config, map_attainment, map_attainments

__all__ = [
    "__version__",
    "CredentialError",
    "DateParseError",
    "InvalidIdentifierError",
    "InvalidValueError",
    "MissingFieldError",
    "NumericRangeError",
    "SourceFormatError",
    "StructuralCycleError",
    "UnknownCodeError",
    "DEFAULT_REGISTRY",
    "Term",
    "VocabularyDomain",
    "VocabularyRegistry",
    "Credential",
    "validate_graph",
    "MapperConfig",
    "MappingResult",
    "load_attainments",
    "load_config",
    "map_attainment",
    "map_attainments",
]
