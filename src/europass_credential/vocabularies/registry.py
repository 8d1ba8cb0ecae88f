# -*- encoding: utf-8 -*-
"""
Vocabulary Registry - closed controlled vocabularies and exact validation.

Every coded field of a Europass credential takes its value from a closed list:
a Europass Named Authority List (NAL), an EU Publications Office authority
table, a qualification framework, or (on the source side) a SISU code list.

Key principles:
    - Matching is EXACT: case-sensitive, no trimming, no partial match
    - Tables are static data, loaded once at import
    - The registry is read-only after construction (safe for concurrent reads)
    - Adding a code is a table change, never a change to consuming code

Crosswalks:
    A term may name one target term in another domain, e.g. the SISU
    attainment type "CourseUnitAttainment" names the Europass learning
    opportunity type "course". translate() follows that link and fails
    for terms that carry none.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Union

from ..errors import UnknownCodeError


class VocabularyDomain(str, Enum):
    """
    Controlled vocabulary domains known to the registry.

    Values double as the domain names carried by UnknownCodeError.
    """
    # MDR authority tables
    CURRENCY = "currency"
    MEASUREMENT_UNIT = "measurement-unit"
    LANGUAGE = "language"

    # Qualification frameworks
    EQF_LEVEL = "eqf-level"
    NQF_LEVEL_FI = "nqf-level-fi"

    # Europass Named Authority Lists
    CREDENTIAL_TYPE = "credential-type"
    VERIFICATION_TYPE = "verification-type"
    VERIFICATION_STATUS = "verification-status"
    ENTITLEMENT_TYPE = "entitlement-type"
    ENTITLEMENT_STATUS = "entitlement-status"
    ACCREDITATION_TYPE = "accreditation-type"
    ASSESSMENT_TYPE = "assessment-type"
    LEARNING_ACTIVITY_TYPE = "learning-activity-type"
    LEARNING_OPPORTUNITY_TYPE = "learning-opportunity-type"
    LEARNING_SCHEDULE = "learning-schedule"
    LEARNING_SETTING = "learning-setting"
    MODE_OF_LEARNING = "mode-of-learning"
    TARGET_GROUP = "target-group"
    COMMUNICATION_CHANNEL = "communication-channel"
    COMMUNICATION_CHANNEL_USAGE = "communication-channel-usage"
    CONTENT_ENCODING = "content-encoding"
    EDUCATIONAL_CREDIT_SYSTEM = "educational-credit-system"
    ATTACHMENT_TYPE = "attachment-type"

    # SISU source code lists
    ROLE = "role"
    DOCUMENT_STATE = "document-state"
    ATTAINMENT_STATE = "attainment-state"
    ATTAINMENT_TYPE = "attainment-type"
    GRADE_AVERAGE_METHOD = "grade-average-method"
    ORGANISATION_ROLE = "organisation-role"
    EDUCATIONAL_INSTITUTION = "educational-institution"
    ATTAINMENT_LANGUAGE = "attainment-language"


DomainLike = Union[VocabularyDomain, str]


def _domain_name(domain: DomainLike) -> str:
    if isinstance(domain, VocabularyDomain):
        return domain.value
    return str(domain)


@dataclass(frozen=True)
class Term:
    """
    A single entry of a controlled vocabulary.

    The notation is the exact string a source supplies; label and
    description are the human-readable rendering.
    """
    domain: str
    notation: str
    label: str
    description: str = ""
    uri: str = ""
    maps_to: Optional[tuple[str, str]] = None  # (target domain, target notation)


@dataclass(frozen=True)
class Vocabulary:
    """
    A closed, versioned table of terms for one domain.

    Build with Vocabulary.from_table(); the term mapping is read-only.
    """
    domain: str
    name: str
    framework_uri: str
    version: str
    terms: Mapping[str, Term] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_table(
        cls,
        domain: DomainLike,
        name: str,
        framework_uri: str,
        version: str,
        rows: Iterable[tuple],
        uri_base: str = "",
        maps_to_domain: Optional[DomainLike] = None,
    ) -> "Vocabulary":
        """
        Build a vocabulary from (notation, label[, description[, target]]) rows.

        Args:
            domain: Domain the vocabulary belongs to
            name: Name of the controlled list
            framework_uri: URI of the controlled list
            version: Table version
            rows: Static data rows
            uri_base: If set, each term URI is uri_base + notation
            maps_to_domain: Domain of the crosswalk target in a row's 4th column

        Raises:
            ValueError: on duplicate or empty notations
        """
        name_of_domain = _domain_name(domain)
        target_domain = _domain_name(maps_to_domain) if maps_to_domain is not None else None
        terms: dict[str, Term] = {}
        for row in rows:
            notation, label = row[0], row[1]
            description = row[2] if len(row) > 2 else ""
            target = row[3] if len(row) > 3 else None
            if not notation:
                raise ValueError(f"Empty notation in {name_of_domain} table")
            if notation in terms:
                raise ValueError(f"Duplicate notation {notation!r} in {name_of_domain} table")
            maps_to = None
            if target is not None:
                if target_domain is None:
                    raise ValueError(f"{name_of_domain} row {notation!r} has a target but no target domain")
                maps_to = (target_domain, target)
            terms[notation] = Term(
                domain=name_of_domain,
                notation=notation,
                label=label,
                description=description,
                uri=f"{uri_base}{notation}" if uri_base else "",
                maps_to=maps_to,
            )
        return cls(
            domain=name_of_domain,
            name=name,
            framework_uri=framework_uri,
            version=version,
            terms=MappingProxyType(terms),
        )

    def __contains__(self, notation: object) -> bool:
        return notation in self.terms

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms.values())

    def __len__(self) -> int:
        return len(self.terms)


class VocabularyRegistry:
    """
    Read-only registry of all controlled vocabularies.

    Thread-safety: no mutation after __init__, so concurrent reads need
    no locking.
    """

    def __init__(self, vocabularies: Iterable[Vocabulary]):
        tables: dict[str, Vocabulary] = {}
        for vocabulary in vocabularies:
            if vocabulary.domain in tables:
                raise ValueError(f"Duplicate vocabulary domain {vocabulary.domain!r}")
            tables[vocabulary.domain] = vocabulary
        self._vocabularies: Mapping[str, Vocabulary] = MappingProxyType(tables)
        self._check_crosswalks()

    def _check_crosswalks(self) -> None:
        """Every crosswalk target must itself be a registered term."""
        for vocabulary in self._vocabularies.values():
            for term in vocabulary:
                if term.maps_to is None:
                    continue
                target_domain, target_notation = term.maps_to
                target = self._vocabularies.get(target_domain)
                if target is None or target_notation not in target:
                    raise ValueError(
                        f"{term.domain} term {term.notation!r} maps to unknown "
                        f"{target_domain} term {target_notation!r}"
                    )

    def validate(self, domain: DomainLike, code: str) -> Term:
        """
        Resolve a code to its term in the given domain.

        Args:
            domain: Vocabulary domain
            code: Exact notation to look up

        Returns:
            The matching Term

        Raises:
            UnknownCodeError: if the domain or the code is unknown
        """
        name = _domain_name(domain)
        vocabulary = self._vocabularies.get(name)
        if vocabulary is None or not isinstance(code, str):
            raise UnknownCodeError(name, code)
        term = vocabulary.terms.get(code)
        if term is None:
            raise UnknownCodeError(name, code)
        return term

    def is_valid(self, domain: DomainLike, code: str) -> bool:
        """Check whether a code exists in a domain."""
        try:
            self.validate(domain, code)
        except UnknownCodeError:
            return False
        return True

    def translate(self, term: Term) -> Term:
        """
        Follow a term's crosswalk to its target term.

        Raises:
            UnknownCodeError: if the term has no crosswalk target
        """
        if term.maps_to is None:
            raise UnknownCodeError(term.domain, term.notation)
        target_domain, target_notation = term.maps_to
        return self.validate(target_domain, target_notation)

    def vocabulary(self, domain: DomainLike) -> Vocabulary:
        """Get the full vocabulary of a domain."""
        name = _domain_name(domain)
        try:
            return self._vocabularies[name]
        except KeyError:
            raise UnknownCodeError("domain", name) from None

    def domains(self) -> list[str]:
        """List registered domain names."""
        return sorted(self._vocabularies)

    def __contains__(self, domain: object) -> bool:
        if isinstance(domain, VocabularyDomain):
            domain = domain.value
        return domain in self._vocabularies
