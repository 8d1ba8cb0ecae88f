# -*- encoding: utf-8 -*-
"""
Mapper configuration.

Can be loaded from pyproject.toml [tool.europass-credential] section:

    [tool.europass-credential]
    home_institution_urn = "urn:code:educational-institution:10122"
    language_preference = ["en", "fi", "sv"]
    share_tolerance = 1e-9
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import tomllib

from ..vocabularies import DEFAULT_REGISTRY, VocabularyDomain


TOOL_SECTION = "europass-credential"


@dataclass
class MapperConfig:
    """Configuration for the SISU attainment mapper.

    Attributes:
        language_preference: Order in which localized SISU texts are picked
        home_institution_urn: Issuer used when no organisation names an institution
        credential_type: Europass credential type notation of produced credentials
        id_namespace: URI prefix of every generated entity id
        share_tolerance: Allowed deviation of summed organisation shares from 1
        person_scheme_id: Identifier scheme of SISU person ids
        attainment_scheme_id: Identifier scheme of SISU attainment ids
        student_number_scheme_id: Identifier scheme of student numbers
    """

    language_preference: List[str] = field(default_factory=lambda: ["en", "fi", "sv"])
    home_institution_urn: Optional[str] = None
    credential_type: str = "generic"
    id_namespace: str = "urn:sisu"
    share_tolerance: float = 1e-9
    person_scheme_id: str = "urn:sisu:person"
    attainment_scheme_id: str = "urn:sisu:attainment"
    student_number_scheme_id: str = "urn:sisu:student-number"

    def __post_init__(self):
        self._check_types()
        if not self.language_preference:
            raise ValueError("language_preference must name at least one language")
        for language in self.language_preference:
            if not DEFAULT_REGISTRY.is_valid(VocabularyDomain.LANGUAGE, language):
                raise ValueError(f"Unknown language in language_preference: {language!r}")
        if self.home_institution_urn is not None and not DEFAULT_REGISTRY.is_valid(
            VocabularyDomain.EDUCATIONAL_INSTITUTION, self.home_institution_urn
        ):
            raise ValueError(f"Unknown home_institution_urn: {self.home_institution_urn!r}")
        if not DEFAULT_REGISTRY.is_valid(VocabularyDomain.CREDENTIAL_TYPE, self.credential_type):
            raise ValueError(f"Unknown credential_type: {self.credential_type!r}")
        if ":" not in self.id_namespace or self.id_namespace.endswith(":"):
            raise ValueError(f"id_namespace must be a URI prefix without trailing colon: {self.id_namespace!r}")
        if not 0 <= self.share_tolerance < 1:
            raise ValueError(f"share_tolerance must be in [0, 1): {self.share_tolerance!r}")
        for name in ("person_scheme_id", "attainment_scheme_id", "student_number_scheme_id"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")

    def _check_types(self) -> None:
        """Reject settings of the wrong type, e.g. from a hand-edited TOML table."""
        if not isinstance(self.language_preference, list) or not all(
            isinstance(language, str) for language in self.language_preference
        ):
            raise ValueError(f"language_preference must be a list of strings: {self.language_preference!r}")
        if self.home_institution_urn is not None and not isinstance(self.home_institution_urn, str):
            raise ValueError(f"home_institution_urn must be a string: {self.home_institution_urn!r}")
        for name in (
            "credential_type",
            "id_namespace",
            "person_scheme_id",
            "attainment_scheme_id",
            "student_number_scheme_id",
        ):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string: {value!r}")
        if isinstance(self.share_tolerance, bool) or not isinstance(self.share_tolerance, (int, float)):
            raise ValueError(f"share_tolerance must be a number: {self.share_tolerance!r}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> MapperConfig:
        unknown = set(d) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        defaults = cls()
        return cls(
            language_preference=d.get("language_preference", defaults.language_preference),
            home_institution_urn=d.get("home_institution_urn"),
            credential_type=d.get("credential_type", defaults.credential_type),
            id_namespace=d.get("id_namespace", defaults.id_namespace),
            share_tolerance=d.get("share_tolerance", defaults.share_tolerance),
            person_scheme_id=d.get("person_scheme_id", defaults.person_scheme_id),
            attainment_scheme_id=d.get("attainment_scheme_id", defaults.attainment_scheme_id),
            student_number_scheme_id=d.get("student_number_scheme_id", defaults.student_number_scheme_id),
        )


def load_config(path: Union[str, Path]) -> MapperConfig:
    """Load MapperConfig from a pyproject.toml file.

    A missing [tool.europass-credential] section yields the defaults.

    Raises:
        FileNotFoundError: if the file does not exist
        tomllib.TOMLDecodeError: if the file is not valid TOML
        ValueError: if a setting is invalid
    """
    with open(path, "rb") as f:
        data = tomllib.load(f)
    section = data.get("tool", {}).get(TOOL_SECTION, {})
    return MapperConfig.from_dict(section)
