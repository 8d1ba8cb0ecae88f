# -*- encoding: utf-8 -*-
"""
Controlled vocabularies for Europass credentials.

DEFAULT_REGISTRY holds every domain: Europass NALs, MDR authority tables,
qualification frameworks and SISU code lists. It is built once at import
and never mutated.
"""

from .registry import (
    DomainLike,
    Term,
    Vocabulary,
    VocabularyDomain,
    VocabularyRegistry,
)
from .named_authority_lists import DURATION_UNITS, build_named_authority_lists
from .qualification_frameworks import EQF_DESCRIPTORS, EQFDescriptor, build_qualification_frameworks
from .sisu_codes import build_sisu_codes


def build_default_registry() -> VocabularyRegistry:
    """Build a registry holding all bundled vocabularies."""
    return VocabularyRegistry(
        build_named_authority_lists()
        + build_qualification_frameworks()
        + build_sisu_codes()
    )


DEFAULT_REGISTRY = build_default_registry()


__all__ = [
    "DomainLike",
    "Term",
    "Vocabulary",
    "VocabularyDomain",
    "VocabularyRegistry",
    "DEFAULT_REGISTRY",
    "DURATION_UNITS",
    "EQF_DESCRIPTORS",
    "EQFDescriptor",
    "build_default_registry",
]
