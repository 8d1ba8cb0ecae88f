# -*- encoding: utf-8 -*-
"""
Europass Learning Model entities.

Entities are frozen dataclasses identified by a URI id. Collections are
tuples (lists are converted on construction), so nothing changes after
__post_init__ has run.

Each entity class declares its constraints as class-level tables:
    code_domains:        field -> vocabulary domain of the Code(s) it holds
    self_relations:      fields pointing at entities of the same kind
    exclusive_relations: self relations that also require single ownership

Cross-links that point back up the ownership tree (an awarding process
naming its achievement, the assessment it used) are id references.
"""

from dataclasses import dataclass, fields, replace
from datetime import date, datetime
from typing import ClassVar, Mapping, Optional

from ..errors import InvalidValueError, NumericRangeError
from ..vocabularies import DURATION_UNITS, VocabularyDomain
from .graph import check_relation
from .values import (
    Code,
    GradeAverage,
    Identifier,
    LegalIdentifier,
    Measure,
    Note,
    NumericScore,
    Score,
    Text,
    TextualScore,
    check_number,
    check_uri,
    expect_code,
)


def _check_codes(obj, code_domains: Mapping[str, VocabularyDomain]) -> None:
    for name, domain in code_domains.items():
        value = getattr(obj, name)
        if value is None:
            continue
        qualified = f"{type(obj).__name__}.{name}"
        for code in value if isinstance(value, tuple) else (value,):
            expect_code(code, domain, qualified)


def _freeze_lists(obj) -> None:
    for f in fields(obj):
        value = getattr(obj, f.name)
        if isinstance(value, list):
            object.__setattr__(obj, f.name, tuple(value))


def _check_types(obj, **expected) -> None:
    for name, kind in expected.items():
        value = getattr(obj, name)
        items = value if isinstance(value, tuple) else (value,)
        for item in items:
            if item is not None and not isinstance(item, kind):
                raise InvalidValueError(
                    f"{type(obj).__name__}.{name}",
                    item,
                    f"expected {kind.__name__ if isinstance(kind, type) else kind}",
                )


def _check_period(obj, start: str, end: str) -> None:
    first, last = getattr(obj, start), getattr(obj, end)
    if first is not None and last is not None and last < first:
        raise InvalidValueError(f"{type(obj).__name__}.{end}", last, f"before {start}")


@dataclass(frozen=True)
class Entity:
    """Base of all model entities: a URI id plus table-driven checks."""
    id: str

    code_domains: ClassVar[Mapping[str, VocabularyDomain]] = {}
    self_relations: ClassVar[tuple[str, ...]] = ()
    exclusive_relations: ClassVar[tuple[str, ...]] = ()

    def __post_init__(self):
        check_uri(self.id, f"{type(self).__name__}.id")
        _freeze_lists(self)
        _check_codes(self, self.code_domains)
        for relation in self.self_relations:
            check_relation(self, relation, exclusive=relation in self.exclusive_relations)


# ---------------------------------------------------------------------------
# Small records owned by entities
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ContactPoint:
    """A way to reach a person or organisation."""
    channel: Code
    address: str
    usage: Optional[Code] = None

    def __post_init__(self):
        _check_codes(self, {
            "channel": VocabularyDomain.COMMUNICATION_CHANNEL,
            "usage": VocabularyDomain.COMMUNICATION_CHANNEL_USAGE,
        })
        if not isinstance(self.address, str) or not self.address.strip():
            raise InvalidValueError("ContactPoint.address", self.address, "address must not be empty")


@dataclass(frozen=True)
class Acceptor:
    """A person who accepted an assessment result, in a given role."""
    identifier: Identifier
    role: Code
    title: tuple[Text, ...] = ()
    text: tuple[Text, ...] = ()

    def __post_init__(self):
        _freeze_lists(self)
        _check_types(self, identifier=Identifier, title=Text, text=Text)
        _check_codes(self, {"role": VocabularyDomain.ROLE})


@dataclass(frozen=True)
class OrganisationShare:
    """The share of an awarding organisation in one role, in (0, 1]."""
    organisation_id: str
    role: Code
    share: float
    educational_institution: Optional[Code] = None

    def __post_init__(self):
        _check_codes(self, {
            "role": VocabularyDomain.ORGANISATION_ROLE,
            "educational_institution": VocabularyDomain.EDUCATIONAL_INSTITUTION,
        })
        check_number(self.share, "OrganisationShare.share")
        if not 0 < self.share <= 1:
            raise NumericRangeError("OrganisationShare.share", self.share, "must be in (0, 1]")


@dataclass(frozen=True)
class Proof:
    """A seal over a credential, produced by an external signer."""
    proof_type: str
    created: datetime
    verification_method: str
    value: str

    def __post_init__(self):
        for name in ("proof_type", "verification_method", "value"):
            content = getattr(self, name)
            if not isinstance(content, str) or not content:
                raise InvalidValueError(f"Proof.{name}", content, "must not be empty")
        _check_types(self, created=datetime)


# ---------------------------------------------------------------------------
# Agents
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Accreditation(Entity):
    """Quality assurance or licensing of an organisation or programme."""
    accreditation_type: Code = None
    title: Text = None
    accrediting_agent_id: Optional[str] = None
    limit_qualification_id: Optional[str] = None
    issued_date: Optional[date] = None
    expiry_date: Optional[date] = None
    identifier: tuple[Identifier, ...] = ()

    code_domains: ClassVar = {"accreditation_type": VocabularyDomain.ACCREDITATION_TYPE}

    def __post_init__(self):
        if self.accreditation_type is None or self.title is None:
            raise InvalidValueError("Accreditation", self.id, "accreditation_type and title are required")
        super().__post_init__()
        _check_types(self, title=Text, identifier=Identifier)
        _check_period(self, "issued_date", "expiry_date")


@dataclass(frozen=True)
class Organisation(Entity):
    """An organisation; units form a tree in both directions."""
    preferred_name: Text = None
    legal_identifier: Optional[LegalIdentifier] = None
    identifier: tuple[Identifier, ...] = ()
    alternative_name: tuple[Text, ...] = ()
    homepage: tuple[str, ...] = ()
    contact_point: tuple[ContactPoint, ...] = ()
    has_accreditation: tuple[Accreditation, ...] = ()
    educational_institution: Optional[Code] = None
    has_unit: tuple["Organisation", ...] = ()
    unit_of: Optional["Organisation"] = None

    code_domains: ClassVar = {"educational_institution": VocabularyDomain.EDUCATIONAL_INSTITUTION}
    self_relations: ClassVar = ("has_unit", "unit_of")

    def __post_init__(self):
        if self.preferred_name is None:
            raise InvalidValueError("Organisation.preferred_name", None, "required")
        super().__post_init__()
        _check_types(
            self,
            preferred_name=Text,
            identifier=Identifier,
            alternative_name=Text,
            contact_point=ContactPoint,
            has_accreditation=Accreditation,
            has_unit=Organisation,
            unit_of=Organisation,
        )
        for page in self.homepage:
            check_uri(page, "Organisation.homepage")


@dataclass(frozen=True)
class Person(Entity):
    """The subject of a credential and the achievements they hold."""
    given_names: str = ""
    family_name: str = ""
    identifier: tuple[Identifier, ...] = ()
    national_id: Optional[LegalIdentifier] = None
    date_of_birth: Optional[date] = None
    contact_point: tuple[ContactPoint, ...] = ()
    achieved: tuple["LearningAchievement", ...] = ()
    entitled_to: tuple["Entitlement", ...] = ()
    performed: tuple["LearningActivity", ...] = ()

    def __post_init__(self):
        super().__post_init__()
        for name in ("given_names", "family_name"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidValueError(f"Person.{name}", value, "must not be empty")
        _check_types(
            self,
            identifier=Identifier,
            contact_point=ContactPoint,
            achieved=LearningAchievement,
            entitled_to=Entitlement,
            performed=LearningActivity,
        )

    @property
    def full_name(self) -> str:
        return f"{self.given_names} {self.family_name}"


# ---------------------------------------------------------------------------
# Specifications
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LearningSpecification(Entity):
    """What a learning opportunity is expected to lead to."""
    title: Text = None
    identifier: tuple[Identifier, ...] = ()
    definition: Optional[Note] = None
    learning_opportunity_type: tuple[Code, ...] = ()
    ects_credit_points: Optional[float] = None
    volume_of_learning: Optional[Measure] = None
    language: tuple[Code, ...] = ()
    mode: tuple[Code, ...] = ()
    learning_setting: Optional[Code] = None
    learning_schedule: Optional[Code] = None
    target_group: tuple[Code, ...] = ()
    has_part: tuple["LearningSpecification", ...] = ()
    specialisation_of: tuple["LearningSpecification", ...] = ()

    code_domains: ClassVar = {
        "learning_opportunity_type": VocabularyDomain.LEARNING_OPPORTUNITY_TYPE,
        "language": VocabularyDomain.LANGUAGE,
        "mode": VocabularyDomain.MODE_OF_LEARNING,
        "learning_setting": VocabularyDomain.LEARNING_SETTING,
        "learning_schedule": VocabularyDomain.LEARNING_SCHEDULE,
        "target_group": VocabularyDomain.TARGET_GROUP,
    }
    self_relations: ClassVar = ("has_part", "specialisation_of")

    def __post_init__(self):
        if self.title is None:
            raise InvalidValueError(f"{type(self).__name__}.title", None, "required")
        super().__post_init__()
        _check_types(
            self,
            title=Text,
            identifier=Identifier,
            definition=Note,
            has_part=LearningSpecification,
            specialisation_of=LearningSpecification,
        )
        if self.ects_credit_points is not None:
            check_number(self.ects_credit_points, f"{type(self).__name__}.ects_credit_points")
        if self.volume_of_learning is not None and self.volume_of_learning.unit.notation not in DURATION_UNITS:
            raise InvalidValueError(
                f"{type(self).__name__}.volume_of_learning",
                self.volume_of_learning.unit.notation,
                "not a unit of duration",
            )


@dataclass(frozen=True)
class Qualification(LearningSpecification):
    """A learning specification placed in the EQF and national frameworks."""
    eqf_level: Optional[Code] = None
    nqf_level: tuple[Code, ...] = ()
    is_partial_qualification: bool = False

    code_domains: ClassVar = {
        **LearningSpecification.code_domains,
        "eqf_level": VocabularyDomain.EQF_LEVEL,
        "nqf_level": VocabularyDomain.NQF_LEVEL_FI,
    }


@dataclass(frozen=True)
class LearningActivitySpecification(Entity):
    """A planned learning activity."""
    title: Text = None
    identifier: tuple[Identifier, ...] = ()
    learning_activity_type: tuple[Code, ...] = ()
    workload: Optional[Measure] = None
    language: tuple[Code, ...] = ()
    mode: tuple[Code, ...] = ()
    has_part: tuple["LearningActivitySpecification", ...] = ()
    specialisation_of: tuple["LearningActivitySpecification", ...] = ()

    code_domains: ClassVar = {
        "learning_activity_type": VocabularyDomain.LEARNING_ACTIVITY_TYPE,
        "language": VocabularyDomain.LANGUAGE,
        "mode": VocabularyDomain.MODE_OF_LEARNING,
    }
    self_relations: ClassVar = ("has_part", "specialisation_of")

    def __post_init__(self):
        if self.title is None:
            raise InvalidValueError("LearningActivitySpecification.title", None, "required")
        super().__post_init__()
        _check_types(
            self,
            title=Text,
            identifier=Identifier,
            has_part=LearningActivitySpecification,
            specialisation_of=LearningActivitySpecification,
        )
        if self.workload is not None and self.workload.unit.notation not in DURATION_UNITS:
            raise InvalidValueError("LearningActivitySpecification.workload", self.workload.unit.notation,
                                    "not a unit of duration")


@dataclass(frozen=True)
class AssessmentSpecification(Entity):
    """How an assessment is carried out and graded."""
    title: Text = None
    identifier: tuple[Identifier, ...] = ()
    assessment_type: Optional[Code] = None
    grading_scheme: Optional[str] = None
    language: tuple[Code, ...] = ()
    mode: tuple[Code, ...] = ()
    has_part: tuple["AssessmentSpecification", ...] = ()
    specialisation_of: tuple["AssessmentSpecification", ...] = ()

    code_domains: ClassVar = {
        "assessment_type": VocabularyDomain.ASSESSMENT_TYPE,
        "language": VocabularyDomain.LANGUAGE,
        "mode": VocabularyDomain.MODE_OF_LEARNING,
    }
    self_relations: ClassVar = ("has_part", "specialisation_of")

    def __post_init__(self):
        if self.title is None:
            raise InvalidValueError("AssessmentSpecification.title", None, "required")
        super().__post_init__()
        _check_types(
            self,
            title=Text,
            identifier=Identifier,
            has_part=AssessmentSpecification,
            specialisation_of=AssessmentSpecification,
        )


@dataclass(frozen=True)
class EntitlementSpecification(Entity):
    """A right that an achievement may lead to."""
    title: Text = None
    entitlement_type: Code = None
    status: Code = None
    identifier: tuple[Identifier, ...] = ()
    limit_organisation: tuple[Organisation, ...] = ()
    limit_jurisdiction: tuple[str, ...] = ()
    has_part: tuple["EntitlementSpecification", ...] = ()
    specialisation_of: tuple["EntitlementSpecification", ...] = ()

    code_domains: ClassVar = {
        "entitlement_type": VocabularyDomain.ENTITLEMENT_TYPE,
        "status": VocabularyDomain.ENTITLEMENT_STATUS,
    }
    self_relations: ClassVar = ("has_part", "specialisation_of")

    def __post_init__(self):
        if self.title is None or self.entitlement_type is None or self.status is None:
            raise InvalidValueError("EntitlementSpecification", self.id,
                                    "title, entitlement_type and status are required")
        super().__post_init__()
        _check_types(
            self,
            title=Text,
            identifier=Identifier,
            limit_organisation=Organisation,
            has_part=EntitlementSpecification,
            specialisation_of=EntitlementSpecification,
        )


# ---------------------------------------------------------------------------
# Achievements and how they were obtained
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LearningActivity(Entity):
    """Something a person did that contributed to an achievement."""
    title: Text = None
    specified_by: Optional[LearningActivitySpecification] = None
    workload: Optional[Measure] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    directed_by: tuple[Organisation, ...] = ()

    def __post_init__(self):
        if self.title is None:
            raise InvalidValueError("LearningActivity.title", None, "required")
        super().__post_init__()
        _check_types(self, title=Text, specified_by=LearningActivitySpecification, directed_by=Organisation)
        _check_period(self, "start_date", "end_date")


@dataclass(frozen=True)
class Assessment(Entity):
    """A graded assessment result."""
    title: Text = None
    grade: Score = None
    specified_by: Optional[AssessmentSpecification] = None
    assessed_by: tuple[Acceptor, ...] = ()
    issued_date: Optional[date] = None
    result_status: Optional[Code] = None
    grade_average: Optional[GradeAverage] = None
    identifier: tuple[Identifier, ...] = ()

    code_domains: ClassVar = {"result_status": VocabularyDomain.ATTAINMENT_STATE}

    def __post_init__(self):
        if self.title is None or self.grade is None:
            raise InvalidValueError("Assessment", self.id, "title and grade are required")
        super().__post_init__()
        _check_types(
            self,
            title=Text,
            grade=(NumericScore, TextualScore),
            specified_by=AssessmentSpecification,
            assessed_by=Acceptor,
            grade_average=GradeAverage,
            identifier=Identifier,
        )


@dataclass(frozen=True)
class AwardingProcess(Entity):
    """Who awarded an achievement, when, and on the basis of which assessment."""
    awarding_body: tuple[Organisation, ...] = ()
    awarding_date: Optional[date] = None
    recognition_date: Optional[date] = None
    used_assessment_id: Optional[str] = None
    learning_achievement_id: Optional[str] = None
    organisation_shares: tuple[OrganisationShare, ...] = ()
    description: Optional[Note] = None

    def __post_init__(self):
        super().__post_init__()
        if not self.awarding_body:
            raise InvalidValueError("AwardingProcess.awarding_body", (), "at least one awarding body is required")
        _check_types(self, awarding_body=Organisation, organisation_shares=OrganisationShare, description=Note)
        for name in ("used_assessment_id", "learning_achievement_id"):
            value = getattr(self, name)
            if value is not None:
                check_uri(value, f"AwardingProcess.{name}")


@dataclass(frozen=True)
class Entitlement(Entity):
    """A right held by a person."""
    title: Text = None
    specified_by: Optional[EntitlementSpecification] = None
    issued_date: Optional[date] = None
    expiry_date: Optional[date] = None
    description: Optional[Note] = None

    def __post_init__(self):
        if self.title is None:
            raise InvalidValueError("Entitlement.title", None, "required")
        super().__post_init__()
        _check_types(self, title=Text, specified_by=EntitlementSpecification, description=Note)
        _check_period(self, "issued_date", "expiry_date")


@dataclass(frozen=True)
class LearningAchievement(Entity):
    """A learning outcome acknowledged by an awarding body."""
    title: Text = None
    was_awarded_by: AwardingProcess = None
    description: Optional[Note] = None
    identifier: tuple[Identifier, ...] = ()
    was_derived_from: tuple[Assessment, ...] = ()
    was_influenced_by: tuple[LearningActivity, ...] = ()
    specified_by: Optional[LearningSpecification] = None
    entitles_to: tuple[Entitlement, ...] = ()

    def __post_init__(self):
        if self.title is None or self.was_awarded_by is None:
            raise InvalidValueError("LearningAchievement", self.id, "title and was_awarded_by are required")
        super().__post_init__()
        _check_types(
            self,
            title=Text,
            was_awarded_by=AwardingProcess,
            description=Note,
            identifier=Identifier,
            was_derived_from=Assessment,
            was_influenced_by=LearningActivity,
            specified_by=LearningSpecification,
            entitles_to=Entitlement,
        )


# ---------------------------------------------------------------------------
# Credential
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Attachment(Entity):
    """A document embedded in a credential, base64 encoded."""
    content: str = ""
    content_type: Code = None
    content_encoding: Code = None
    title: Optional[Text] = None

    code_domains: ClassVar = {
        "content_type": VocabularyDomain.ATTACHMENT_TYPE,
        "content_encoding": VocabularyDomain.CONTENT_ENCODING,
    }

    def __post_init__(self):
        if self.content_type is None or self.content_encoding is None:
            raise InvalidValueError("Attachment", self.id, "content_type and content_encoding are required")
        super().__post_init__()
        if not isinstance(self.content, str) or not self.content:
            raise InvalidValueError("Attachment.content", self.content, "must not be empty")


@dataclass(frozen=True)
class VerificationCheck(Entity):
    """Outcome of one verification performed on a credential."""
    verification_type: Code = None
    status: Code = None
    subject_id: Optional[str] = None
    description: Optional[Text] = None

    code_domains: ClassVar = {
        "verification_type": VocabularyDomain.VERIFICATION_TYPE,
        "status": VocabularyDomain.VERIFICATION_STATUS,
    }

    def __post_init__(self):
        if self.verification_type is None or self.status is None:
            raise InvalidValueError("VerificationCheck", self.id, "verification_type and status are required")
        super().__post_init__()
        if self.subject_id is not None:
            check_uri(self.subject_id, "VerificationCheck.subject_id")


@dataclass(frozen=True)
class Credential(Entity):
    """
    Root of a Europass credential.

    contains holds sub-credentials; each is owned by exactly one parent,
    and no credential may contain itself at any depth.
    """
    credential_type: Code = None
    title: Text = None
    issuer: Organisation = None
    subject: Person = None
    issuance_date: date = None
    valid_from: date = None
    identifier: tuple[Identifier, ...] = ()
    description: Optional[Note] = None
    expiration_date: Optional[date] = None
    document_state: Optional[Code] = None
    attachment: Optional[Attachment] = None
    proof: Optional[Proof] = None
    verification_checks: tuple[VerificationCheck, ...] = ()
    contains: tuple["Credential", ...] = ()

    code_domains: ClassVar = {
        "credential_type": VocabularyDomain.CREDENTIAL_TYPE,
        "document_state": VocabularyDomain.DOCUMENT_STATE,
    }
    self_relations: ClassVar = ("contains",)
    exclusive_relations: ClassVar = ("contains",)

    _required: ClassVar = ("credential_type", "title", "issuer", "subject", "issuance_date", "valid_from")

    def __post_init__(self):
        missing = [name for name in self._required if getattr(self, name) is None]
        if missing:
            raise InvalidValueError("Credential", self.id, f"missing {', '.join(missing)}")
        super().__post_init__()
        _check_types(
            self,
            title=Text,
            issuer=Organisation,
            subject=Person,
            identifier=Identifier,
            description=Note,
            attachment=Attachment,
            proof=Proof,
            verification_checks=VerificationCheck,
            contains=Credential,
        )
        _check_period(self, "valid_from", "expiration_date")

    @property
    def achievements(self) -> tuple[LearningAchievement, ...]:
        return self.subject.achieved

    def with_proof(self, proof: Proof) -> "Credential":
        """Return a copy of this credential carrying a seal."""
        return replace(self, proof=proof)
