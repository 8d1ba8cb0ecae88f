# -*- encoding: utf-8 -*-
"""
SISU Attainment to Europass Credential mapping.

Maps one SISU attainment record onto a Europass credential. Five stages
run strictly in order; the first failure aborts the mapping and no
partial credential is ever returned:

    1. extract_attainment    raw JSON fields  -> SisuAttainment
    2. resolve_codes         URNs and enums   -> registry Codes
    3. normalize_attainment  dates, numbers   -> date / checked float
    4. assemble_credential   pieces           -> Credential graph
    5. validate_graph        acyclicity and identifier consistency

Key mappings:
    attainment.id                → Credential.id, Credential.identifier
    personId, person*Names       → Credential.subject (Person)
    organisations[].educationalInstitutionUrn → Credential.issuer
    organisations[].organisationId → issuer.has_unit
    acceptorPersons[]            → Assessment.assessed_by
    gradeId, gradeScaleId        → Assessment.grade
    type                         → LearningSpecification.learning_opportunity_type
    credits                      → LearningSpecification.ects_credit_points
    studyWeeks                   → LearningSpecification.volume_of_learning (WEE)
    attainmentLanguageUrn        → LearningSpecification.language
    creditTransferInfo           → AwardingProcess.awarding_body, recognition_date
    registrationDate / attainmentDate / expiryDate → issuance, validity

The engine keeps no state between calls; every id is derived from the
source ids, so mapping the same record twice gives equal credentials.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Iterable, Optional
import json
import logging
import math
import re

from ..errors import (
    CredentialError,
    DateParseError,
    InvalidValueError,
    MissingFieldError,
    NumericRangeError,
    SourceFormatError,
    UnknownCodeError,
)
from ..model import (
    Acceptor,
    Assessment,
    AwardingProcess,
    Code,
    Credential,
    GradeAverage,
    Identifier,
    LearningAchievement,
    LearningSpecification,
    Measure,
    Note,
    NumericScore,
    Organisation,
    OrganisationShare,
    Person,
    Text,
    make_score,
    validate_graph,
)
from ..vocabularies import DEFAULT_REGISTRY, VocabularyDomain, VocabularyRegistry
from ..vocabularies.sisu_codes import EDUCATIONAL_INSTITUTION_PREFIX, ORGANISATION_ROLE_PREFIX
from .config import MapperConfig
from .sisu_attainment import SisuAttainment, extract_attainment

logger = logging.getLogger(__name__)


RESPONSIBLE_ROLE = f"{ORGANISATION_ROLE_PREFIX}responsible-organisation"

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


# ---------------------------------------------------------------------------
# Stage results
# ---------------------------------------------------------------------------

@dataclass
class ResolvedCodes:
    """Registry Codes for every coded field of one attainment."""
    credential_type: Code
    document_state: Code
    state: Code
    attainment_type: Code
    learning_opportunity_type: Code
    acceptor_roles: list[Code]
    organisation_roles: list[Code]
    organisation_institutions: list[Optional[Code]]
    transfer_institution: Optional[Code] = None
    transfer_international_institution: Optional[Code] = None
    grade_average_method: Optional[Code] = None
    language: Optional[Code] = None


@dataclass
class NormalizedValues:
    """Dates and numbers of one attainment, parsed and range checked."""
    attainment_date: date
    credits: float
    shares: list[float]
    registration_date: Optional[date] = None
    expiry_date: Optional[date] = None
    credit_transfer_date: Optional[date] = None
    study_weeks: Optional[float] = None


@dataclass
class MappingResult:
    """
    Result of mapping one SISU attainment.

    Holds either the credential (success) or the error that aborted
    the mapping, never both.
    """
    credential: Optional[Credential] = None
    error: Optional[CredentialError] = None
    success: bool = True
    source_id: str = ""
    source_format: str = "sisu_attainment"
    mapped_at: str = ""

    def unwrap(self) -> Credential:
        """Return the credential, or raise the mapping error."""
        if self.error is not None:
            raise self.error
        return self.credential

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "success": self.success,
            "credential_id": self.credential.id if self.credential else None,
            "error": self.error.to_dict() if self.error else None,
            "source_id": self.source_id,
            "source_format": self.source_format,
            "mapped_at": self.mapped_at,
        }


# ---------------------------------------------------------------------------
# Stage 2: code resolution
# ---------------------------------------------------------------------------

def _code(registry: VocabularyRegistry, domain: VocabularyDomain, value: str, field_name: str) -> Code:
    try:
        return Code.resolve(domain, value, registry)
    except UnknownCodeError as e:
        raise e.for_field(field_name) from None


def _crosswalk(
    registry: VocabularyRegistry,
    domain: VocabularyDomain,
    value: str,
    field_name: str,
) -> Code:
    """Resolve a source code and follow its crosswalk to the target Code."""
    try:
        target = registry.translate(registry.validate(domain, value))
        return Code.resolve(target.domain, target.notation, registry)
    except UnknownCodeError as e:
        raise e.for_field(field_name) from None


def resolve_codes(
    attainment: SisuAttainment,
    registry: VocabularyRegistry = DEFAULT_REGISTRY,
    config: Optional[MapperConfig] = None,
) -> ResolvedCodes:
    """
    Resolve every coded SISU field against the registry.

    No generic or "other" code is ever substituted for an unknown value.

    Raises:
        UnknownCodeError: naming the domain, source field and raw value
    """
    config = config or MapperConfig()
    codes = ResolvedCodes(
        credential_type=_code(registry, VocabularyDomain.CREDENTIAL_TYPE, config.credential_type, "credential_type"),
        document_state=_code(registry, VocabularyDomain.DOCUMENT_STATE, attainment.document_state, "documentState"),
        state=_code(registry, VocabularyDomain.ATTAINMENT_STATE, attainment.state, "state"),
        attainment_type=_code(registry, VocabularyDomain.ATTAINMENT_TYPE, attainment.type, "type"),
        learning_opportunity_type=_crosswalk(registry, VocabularyDomain.ATTAINMENT_TYPE, attainment.type, "type"),
        acceptor_roles=[
            _code(registry, VocabularyDomain.ROLE, acceptor.role_urn, f"acceptorPersons[{i}].roleUrn")
            for i, acceptor in enumerate(attainment.acceptor_persons)
        ],
        organisation_roles=[
            _code(registry, VocabularyDomain.ORGANISATION_ROLE, org.role_urn, f"organisations[{i}].roleUrn")
            for i, org in enumerate(attainment.organisations)
        ],
        organisation_institutions=[
            _code(
                registry,
                VocabularyDomain.EDUCATIONAL_INSTITUTION,
                org.educational_institution_urn,
                f"organisations[{i}].educationalInstitutionUrn",
            ) if org.educational_institution_urn is not None else None
            for i, org in enumerate(attainment.organisations)
        ],
    )

    transfer = attainment.credit_transfer_info
    if transfer is not None:
        if transfer.educational_institution_urn is not None:
            codes.transfer_institution = _code(
                registry,
                VocabularyDomain.EDUCATIONAL_INSTITUTION,
                transfer.educational_institution_urn,
                "creditTransferInfo.educationalInstitutionUrn",
            )
        if transfer.international_institution_urn is not None:
            codes.transfer_international_institution = _code(
                registry,
                VocabularyDomain.EDUCATIONAL_INSTITUTION,
                transfer.international_institution_urn,
                "creditTransferInfo.internationalInstitutionUrn",
            )

    if attainment.grade_average is not None:
        codes.grade_average_method = _code(
            registry,
            VocabularyDomain.GRADE_AVERAGE_METHOD,
            attainment.grade_average.method,
            "gradeAverage.method",
        )

    if attainment.attainment_language_urn is not None:
        codes.language = _crosswalk(
            registry,
            VocabularyDomain.ATTAINMENT_LANGUAGE,
            attainment.attainment_language_urn,
            "attainmentLanguageUrn",
        )

    return codes


# ---------------------------------------------------------------------------
# Stage 3: normalization
# ---------------------------------------------------------------------------

def parse_date(value: Optional[str], field_name: str) -> Optional[date]:
    """
    Parse a strict YYYY-MM-DD calendar date.

    Raises:
        DateParseError: on any other format or an impossible date
    """
    if value is None:
        return None
    if not isinstance(value, str) or not _DATE_PATTERN.match(value):
        raise DateParseError(field_name, value)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise DateParseError(field_name, value) from None


def _finite(value: float, field_name: str, non_negative: bool = True) -> float:
    if not math.isfinite(value):
        raise NumericRangeError(field_name, value, "not finite")
    if non_negative and value < 0:
        raise NumericRangeError(field_name, value, "must not be negative")
    return value


def normalize_attainment(
    attainment: SisuAttainment,
    config: Optional[MapperConfig] = None,
) -> NormalizedValues:
    """
    Parse dates and range check numbers.

    Each organisation share must lie in (0, 1], and the shares of one
    organisation role must sum to 1 within config.share_tolerance.

    Raises:
        DateParseError: on a malformed date
        NumericRangeError: on a number out of range
    """
    config = config or MapperConfig()

    shares = []
    totals: dict[str, float] = {}
    for i, org in enumerate(attainment.organisations):
        share = _finite(org.share, f"organisations[{i}].share")
        if not 0 < share <= 1:
            raise NumericRangeError(f"organisations[{i}].share", share, "must be in (0, 1]")
        shares.append(share)
        totals[org.role_urn] = totals.get(org.role_urn, 0.0) + share
    for role, total in totals.items():
        if not math.isclose(total, 1.0, rel_tol=0.0, abs_tol=config.share_tolerance):
            raise NumericRangeError("organisations.share", total, f"shares of role {role} sum to {total}, not 1")

    if attainment.grade_average is not None:
        _finite(attainment.grade_average.value, "gradeAverage.value")
        _finite(attainment.grade_average.total_included_credits, "gradeAverage.totalIncludedCredits")
    if isinstance(attainment.grade_id, float):
        _finite(attainment.grade_id, "gradeId")

    transfer = attainment.credit_transfer_info
    return NormalizedValues(
        attainment_date=parse_date(attainment.attainment_date, "attainmentDate"),
        credits=_finite(attainment.credits, "credits"),
        shares=shares,
        registration_date=parse_date(attainment.registration_date, "registrationDate"),
        expiry_date=parse_date(attainment.expiry_date, "expiryDate"),
        credit_transfer_date=parse_date(
            transfer.credit_transfer_date if transfer else None,
            "creditTransferInfo.creditTransferDate",
        ),
        study_weeks=(
            _finite(attainment.study_weeks, "studyWeeks")
            if attainment.study_weeks is not None else None
        ),
    )


# ---------------------------------------------------------------------------
# Stage 4: structure assembly
# ---------------------------------------------------------------------------

def _texts(
    localized: dict[str, str],
    field_name: str,
    config: MapperConfig,
    registry: VocabularyRegistry,
) -> tuple[Text, ...]:
    """Localized SISU strings as Texts, preferred languages first."""
    for language in localized:
        _code(registry, VocabularyDomain.LANGUAGE, language, f"{field_name}.{language}")
    order = [lang for lang in config.language_preference if lang in localized]
    order += sorted(lang for lang in localized if lang not in order)
    return tuple(
        Text(content=localized[lang], language=lang)
        for lang in order
        if localized[lang].strip()
    )


def _institution(code: Code, units: Iterable[Organisation] = ()) -> Organisation:
    return Organisation(
        id=code.notation,
        preferred_name=Text(content=code.display_name, language="en"),
        identifier=(Identifier(
            content=code.notation[len(EDUCATIONAL_INSTITUTION_PREFIX):],
            scheme_id=EDUCATIONAL_INSTITUTION_PREFIX.rstrip(":"),
            scheme_name="Finnish educational institution code",
        ),),
        educational_institution=code,
        has_unit=tuple(units),
    )


def _id_segment(value: str, field_name: str) -> str:
    """A source id placed into a generated URI; it must be one non-empty token."""
    if not value or any(c.isspace() for c in value):
        raise InvalidValueError(field_name, value, "source id must be non-empty and contain no whitespace")
    return value


def _unit_id(config: MapperConfig, organisation_id: str, field_name: str) -> str:
    return f"{config.id_namespace}:organisation:{_id_segment(organisation_id, field_name)}"


def _issuer_code(
    codes: ResolvedCodes,
    values: NormalizedValues,
    config: MapperConfig,
    registry: VocabularyRegistry,
) -> Code:
    """The institution with the largest responsible share, else any named one, else home."""
    totals: dict[str, float] = {}
    fallback: Optional[Code] = None
    for role, institution, share in zip(
        codes.organisation_roles, codes.organisation_institutions, values.shares,
    ):
        if institution is None:
            continue
        fallback = fallback or institution
        if role.notation == RESPONSIBLE_ROLE:
            totals[institution.notation] = totals.get(institution.notation, 0.0) + share
    if totals:
        best = max(totals, key=lambda urn: totals[urn])
        return next(c for c in codes.organisation_institutions if c is not None and c.notation == best)
    if fallback is not None:
        return fallback
    if config.home_institution_urn is not None:
        return _code(registry, VocabularyDomain.EDUCATIONAL_INSTITUTION, config.home_institution_urn,
                     "home_institution_urn")
    raise MissingFieldError("organisations[0].educationalInstitutionUrn")


def _awarding_bodies(
    attainment: SisuAttainment,
    codes: ResolvedCodes,
    issuer_code: Code,
    config: MapperConfig,
) -> tuple[Organisation, list[Organisation], list[OrganisationShare]]:
    """Build the issuer, the co-awarding institutions and the organisation shares."""
    units: dict[str, dict[str, Organisation]] = {}
    institutions: dict[str, Code] = {issuer_code.notation: issuer_code}
    shares = []
    for i, (org, role, institution) in enumerate(zip(
        attainment.organisations, codes.organisation_roles, codes.organisation_institutions,
    )):
        owner = institution or issuer_code
        institutions.setdefault(owner.notation, owner)
        if org.organisation_id is not None:
            unit_id = _unit_id(config, org.organisation_id, f"organisations[{i}].organisationId")
            units.setdefault(owner.notation, {}).setdefault(unit_id, Organisation(
                id=unit_id,
                preferred_name=Text(content=org.organisation_id, language="en"),
                identifier=(Identifier(content=org.organisation_id, scheme_id=f"{config.id_namespace}:organisation"),),
            ))
            share_holder = unit_id
        else:
            share_holder = owner.notation
        shares.append(OrganisationShare(
            organisation_id=share_holder,
            role=role,
            share=org.share,
            educational_institution=institution,
        ))

    built = {
        urn: _institution(code, units.get(urn, {}).values())
        for urn, code in institutions.items()
    }
    issuer = built.pop(issuer_code.notation)
    return issuer, list(built.values()), shares


def _transfer_origin(
    attainment: SisuAttainment,
    codes: ResolvedCodes,
    credential_id: str,
) -> Optional[Organisation]:
    """The organisation a transferred attainment was originally earned at."""
    transfer = attainment.credit_transfer_info
    if transfer is None:
        return None
    origin = codes.transfer_institution or codes.transfer_international_institution
    if origin is not None:
        return _institution(origin)
    if transfer.organisation:
        return Organisation(
            id=f"{credential_id}#transfer-origin",
            preferred_name=Text(content=transfer.organisation, language="en"),
        )
    return None


def _subject_identifiers(attainment: SisuAttainment, config: MapperConfig) -> tuple[Identifier, ...]:
    identifiers = [Identifier(content=attainment.person_id, scheme_id=config.person_scheme_id)]
    if attainment.person_student_number:
        identifiers.append(Identifier(
            content=attainment.person_student_number,
            scheme_id=config.student_number_scheme_id,
            identifier_type="student-number",
        ))
    return tuple(identifiers)


def assemble_credential(
    attainment: SisuAttainment,
    codes: ResolvedCodes,
    values: NormalizedValues,
    registry: VocabularyRegistry = DEFAULT_REGISTRY,
    config: Optional[MapperConfig] = None,
) -> Credential:
    """
    Build the credential graph for one attainment.

    The attainment becomes one LearningAchievement with one Assessment,
    awarded through one AwardingProcess and specified by one
    LearningSpecification.

    Raises:
        CredentialError: if any entity rejects its inputs
    """
    config = config or MapperConfig()
    if attainment.misregistration:
        raise InvalidValueError(
            "misregistration",
            attainment.misregistration_rationale or True,
            "attainment is marked as misregistered",
        )

    credential_id = f"{config.id_namespace}:attainment:{_id_segment(attainment.id, 'id')}"
    subject_id = f"{config.id_namespace}:person:{_id_segment(attainment.person_id, 'personId')}"
    title = Text(content=codes.attainment_type.display_name, language="en")

    issuer_code = _issuer_code(codes, values, config, registry)
    issuer, co_awarding, shares = _awarding_bodies(attainment, codes, issuer_code, config)
    origin = _transfer_origin(attainment, codes, credential_id)

    acceptors = tuple(
        Acceptor(
            identifier=Identifier(content=person.person_id, scheme_id=config.person_scheme_id),
            role=role,
            title=_texts(person.title, f"acceptorPersons[{i}].title", config, registry),
            text=_texts(person.text, f"acceptorPersons[{i}].text", config, registry),
        )
        for i, (person, role) in enumerate(zip(attainment.acceptor_persons, codes.acceptor_roles))
    )

    grade_average = None
    if attainment.grade_average is not None:
        grade_average = GradeAverage(
            value=NumericScore(
                content=attainment.grade_average.value,
                scoring_scheme=attainment.grade_average.grade_scale_id,
            ),
            method=codes.grade_average_method,
            total_included_credits=attainment.grade_average.total_included_credits,
        )

    assessment = Assessment(
        id=f"{credential_id}#assessment",
        title=title,
        grade=make_score(attainment.grade_id, attainment.grade_scale_id),
        assessed_by=acceptors,
        issued_date=values.attainment_date,
        result_status=codes.state,
        grade_average=grade_average,
    )

    specification = LearningSpecification(
        id=f"{credential_id}#specification",
        title=title,
        learning_opportunity_type=(codes.learning_opportunity_type,),
        ects_credit_points=values.credits,
        volume_of_learning=(
            Measure.create(values.study_weeks, "WEE", registry)
            if values.study_weeks is not None else None
        ),
        language=(codes.language,) if codes.language is not None else (),
    )

    awarding = AwardingProcess(
        id=f"{credential_id}#awarding",
        awarding_body=(origin,) if origin is not None else (issuer, *co_awarding),
        awarding_date=values.attainment_date,
        recognition_date=values.credit_transfer_date,
        used_assessment_id=assessment.id,
        learning_achievement_id=f"{credential_id}#achievement",
        organisation_shares=tuple(shares),
    )

    descriptions = _texts(attainment.additional_info, "additionalInfo", config, registry)
    description = None
    if descriptions:
        description = Note(content=descriptions[0].content, language=descriptions[0].language)

    achievement = LearningAchievement(
        id=f"{credential_id}#achievement",
        title=title,
        was_awarded_by=awarding,
        description=description,
        was_derived_from=(assessment,),
        specified_by=specification,
    )

    subject = Person(
        id=subject_id,
        given_names=attainment.person_first_names,
        family_name=attainment.person_last_name,
        identifier=_subject_identifiers(attainment, config),
        achieved=(achievement,),
    )

    return Credential(
        id=credential_id,
        identifier=(Identifier(content=attainment.id, scheme_id=config.attainment_scheme_id),),
        credential_type=codes.credential_type,
        title=title,
        description=description,
        issuer=issuer,
        subject=subject,
        issuance_date=values.registration_date or values.attainment_date,
        valid_from=values.attainment_date,
        expiration_date=values.expiry_date,
        document_state=codes.document_state,
    )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

def map_attainment(
    record: Any,
    registry: VocabularyRegistry = DEFAULT_REGISTRY,
    config: Optional[MapperConfig] = None,
) -> MappingResult:
    """
    Map one SISU attainment record to a Europass credential.

    Args:
        record: Decoded JSON object of one attainment
        registry: Vocabulary registry to resolve codes against
        config: Mapper configuration (defaults if None)

    Returns:
        MappingResult with the credential, or the error that aborted mapping
    """
    config = config or MapperConfig()
    result = MappingResult(mapped_at=datetime.now(timezone.utc).isoformat())
    if isinstance(record, dict) and isinstance(record.get("id"), str):
        result.source_id = record["id"]

    try:
        attainment = extract_attainment(record)
        logger.debug(f"Extracted attainment {attainment.id}")

        codes = resolve_codes(attainment, registry, config)
        logger.debug(f"Resolved codes for attainment {attainment.id}")

        values = normalize_attainment(attainment, config)
        logger.debug(f"Normalized attainment {attainment.id}")

        credential = assemble_credential(attainment, codes, values, registry, config)
        logger.debug(f"Assembled credential {credential.id}")

        validate_graph(credential)
    except CredentialError as e:
        logger.warning(f"Mapping attainment {result.source_id or '<unknown>'} failed: {e}")
        result.success = False
        result.error = e
        return result

    result.credential = credential
    return result


def map_attainments(
    records: Iterable[Any],
    registry: VocabularyRegistry = DEFAULT_REGISTRY,
    config: Optional[MapperConfig] = None,
) -> list[MappingResult]:
    """Map many records independently; one failure never affects another."""
    results = [map_attainment(record, registry, config) for record in records]
    failed = sum(1 for r in results if not r.success)
    logger.debug(f"Mapped {len(results)} attainments, {failed} failed")
    return results


def load_attainments(json_text: str) -> list[dict]:
    """
    Decode a SISU API response body into attainment records.

    The body may be one attainment object or an array of them.

    Raises:
        SourceFormatError: if the body is not JSON or not objects
    """
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise SourceFormatError("response", json_text, f"valid JSON ({e.msg})") from e
    if isinstance(data, dict):
        return [data]
    if not isinstance(data, list):
        raise SourceFormatError("response", data, "an object or an array")
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise SourceFormatError(f"response[{i}]", item, "an object")
    return data
