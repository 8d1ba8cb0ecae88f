# -*- encoding: utf-8 -*-
"""
SISU attainment records.

A SISU attainment is one grade/credit transaction as returned by the SISU
ORI attainment API (camelCase JSON). extract_attainment() pulls the raw
fields into typed dataclasses without interpreting them: codes stay
strings and dates stay YYYY-MM-DD strings until later stages.

Nested fields are reported with dotted paths, e.g. organisations[0].share.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..errors import MissingFieldError, SourceFormatError


REQUIRED_FIELDS = (
    "id",
    "personId",
    "personFirstNames",
    "personLastName",
    "attainmentDate",
    "credits",
    "gradeId",
    "documentState",
    "state",
    "type",
    "acceptorPersons",
    "organisations",
)

LocalizedString = dict[str, str]


@dataclass
class SisuAcceptorPerson:
    """A person who accepted the attainment."""
    person_id: str
    role_urn: str
    text: LocalizedString = field(default_factory=dict)
    title: LocalizedString = field(default_factory=dict)


@dataclass
class SisuOrganisation:
    """An organisation's share of the attainment in one role."""
    role_urn: str
    share: float
    organisation_id: Optional[str] = None
    educational_institution_urn: Optional[str] = None


@dataclass
class SisuCreditTransferInfo:
    """Where an attainment transferred from another institution was earned."""
    credit_transfer_date: Optional[str] = None
    educational_institution_urn: Optional[str] = None
    international_institution_urn: Optional[str] = None
    organisation: Optional[str] = None


@dataclass
class SisuGradeAverage:
    """Average grade over included attainments."""
    grade_scale_id: Optional[str]
    method: str
    total_included_credits: float
    value: float


@dataclass
class SisuAttainment:
    """
    Raw fields of one SISU attainment.

    Field names are the snake_case forms of the SISU keys.
    """
    id: str
    person_id: str
    person_first_names: str
    person_last_name: str
    attainment_date: str
    credits: float
    document_state: str
    state: str
    type: str
    acceptor_persons: list[SisuAcceptorPerson]
    organisations: list[SisuOrganisation]
    grade_id: Any

    additional_info: LocalizedString = field(default_factory=dict)
    attainment_language_urn: Optional[str] = None
    credit_transfer_info: Optional[SisuCreditTransferInfo] = None
    expiry_date: Optional[str] = None
    grade_average: Optional[SisuGradeAverage] = None
    grade_scale_id: Optional[str] = None
    misregistration: bool = False
    misregistration_rationale: Optional[str] = None
    module_content_application_id: Optional[str] = None
    person_student_number: Optional[str] = None
    primary: bool = True
    registration_date: Optional[str] = None
    student_application_id: Optional[str] = None
    study_field_urn: Optional[str] = None
    study_right_id: Optional[str] = None
    study_weeks: Optional[float] = None
    verifier_person_id: Optional[str] = None


# ---------------------------------------------------------------------------
# Field access
# ---------------------------------------------------------------------------

_EXPECTED = {
    str: "a string",
    "number": "a number",
    bool: "a boolean",
    dict: "an object",
    list: "an array",
    "grade": "a number or a string",
}


def _check_type(value: Any, kind: Any, path: str) -> Any:
    if kind == "number":
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    elif kind == "grade":
        ok = isinstance(value, str) or (isinstance(value, (int, float)) and not isinstance(value, bool))
    else:
        ok = isinstance(value, kind)
    if not ok:
        raise SourceFormatError(path, value, _EXPECTED[kind])
    return value


def _required(obj: dict, key: str, kind: Any, prefix: str = "") -> Any:
    path = f"{prefix}{key}"
    value = obj.get(key)
    if value is None:
        raise MissingFieldError(path)
    return _check_type(value, kind, path)


def _optional(obj: dict, key: str, kind: Any, prefix: str = "", default: Any = None) -> Any:
    value = obj.get(key)
    if value is None:
        return default
    return _check_type(value, kind, f"{prefix}{key}")


def _localized(obj: dict, key: str, prefix: str = "") -> LocalizedString:
    value = _optional(obj, key, dict, prefix, default={})
    path = f"{prefix}{key}"
    result: LocalizedString = {}
    for language, text in value.items():
        if text is None:
            continue
        result[language] = _check_type(text, str, f"{path}.{language}")
    return result


def _non_empty_list(record: dict, key: str) -> list:
    items = _required(record, key, list)
    if not items:
        raise MissingFieldError(key)
    return items


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

def _extract_acceptor(raw: Any, index: int) -> SisuAcceptorPerson:
    prefix = f"acceptorPersons[{index}]."
    _check_type(raw, dict, prefix[:-1])
    return SisuAcceptorPerson(
        person_id=_required(raw, "personId", str, prefix),
        role_urn=_required(raw, "roleUrn", str, prefix),
        text=_localized(raw, "text", prefix),
        title=_localized(raw, "title", prefix),
    )


def _extract_organisation(raw: Any, index: int) -> SisuOrganisation:
    prefix = f"organisations[{index}]."
    _check_type(raw, dict, prefix[:-1])
    return SisuOrganisation(
        role_urn=_required(raw, "roleUrn", str, prefix),
        share=_required(raw, "share", "number", prefix),
        organisation_id=_optional(raw, "organisationId", str, prefix),
        educational_institution_urn=_optional(raw, "educationalInstitutionUrn", str, prefix),
    )


def _extract_credit_transfer(raw: Optional[dict]) -> Optional[SisuCreditTransferInfo]:
    if raw is None:
        return None
    prefix = "creditTransferInfo."
    return SisuCreditTransferInfo(
        credit_transfer_date=_optional(raw, "creditTransferDate", str, prefix),
        educational_institution_urn=_optional(raw, "educationalInstitutionUrn", str, prefix),
        international_institution_urn=_optional(raw, "internationalInstitutionUrn", str, prefix),
        organisation=_optional(raw, "organisation", str, prefix),
    )


def _extract_grade_average(raw: Optional[dict]) -> Optional[SisuGradeAverage]:
    if raw is None:
        return None
    prefix = "gradeAverage."
    return SisuGradeAverage(
        grade_scale_id=_optional(raw, "gradeScaleId", str, prefix),
        method=_required(raw, "method", str, prefix),
        total_included_credits=_required(raw, "totalIncludedCredits", "number", prefix),
        value=_required(raw, "value", "number", prefix),
    )


def extract_attainment(record: Any) -> SisuAttainment:
    """
    Extract the raw fields of a SISU attainment JSON object.

    Args:
        record: Decoded JSON object of one attainment

    Returns:
        SisuAttainment with uninterpreted field values

    Raises:
        MissingFieldError: if a required field is absent, null or empty
        SourceFormatError: if a field has the wrong JSON type
    """
    _check_type(record, dict, "attainment")
    for name in REQUIRED_FIELDS:
        if record.get(name) is None:
            raise MissingFieldError(name)

    acceptors = [
        _extract_acceptor(raw, index)
        for index, raw in enumerate(_non_empty_list(record, "acceptorPersons"))
    ]
    organisations = [
        _extract_organisation(raw, index)
        for index, raw in enumerate(_non_empty_list(record, "organisations"))
    ]

    return SisuAttainment(
        id=_required(record, "id", str),
        person_id=_required(record, "personId", str),
        person_first_names=_required(record, "personFirstNames", str),
        person_last_name=_required(record, "personLastName", str),
        attainment_date=_required(record, "attainmentDate", str),
        credits=_required(record, "credits", "number"),
        document_state=_required(record, "documentState", str),
        state=_required(record, "state", str),
        type=_required(record, "type", str),
        acceptor_persons=acceptors,
        organisations=organisations,
        additional_info=_localized(record, "additionalInfo"),
        attainment_language_urn=_optional(record, "attainmentLanguageUrn", str),
        credit_transfer_info=_extract_credit_transfer(_optional(record, "creditTransferInfo", dict)),
        expiry_date=_optional(record, "expiryDate", str),
        grade_average=_extract_grade_average(_optional(record, "gradeAverage", dict)),
        grade_id=_required(record, "gradeId", "grade"),
        grade_scale_id=_optional(record, "gradeScaleId", str),
        misregistration=_optional(record, "misregistration", bool, default=False),
        misregistration_rationale=_optional(record, "misregistrationRationale", str),
        module_content_application_id=_optional(record, "moduleContentApplicationId", str),
        person_student_number=_optional(record, "personStudentNumber", str),
        primary=_optional(record, "primary", bool, default=True),
        registration_date=_optional(record, "registrationDate", str),
        student_application_id=_optional(record, "studentApplicationId", str),
        study_field_urn=_optional(record, "studyFieldUrn", str),
        study_right_id=_optional(record, "studyRightId", str),
        study_weeks=_optional(record, "studyWeeks", "number"),
        verifier_person_id=_optional(record, "verifierPersonId", str),
    )
