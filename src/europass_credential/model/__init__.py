# -*- encoding: utf-8 -*-
"""
Europass credential data model: value types, entities and graph checks.
"""

from .values import (
    Amount,
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
    make_score,
)
from .entities import (
    Acceptor,
    Accreditation,
    Assessment,
    AssessmentSpecification,
    Attachment,
    AwardingProcess,
    ContactPoint,
    Credential,
    Entitlement,
    EntitlementSpecification,
    LearningAchievement,
    LearningActivity,
    LearningActivitySpecification,
    LearningSpecification,
    Organisation,
    OrganisationShare,
    Person,
    Proof,
    Qualification,
    VerificationCheck,
)
from .graph import check_relation, iter_entities, validate_graph


__all__ = [
    # Values
    "Amount",
    "Code",
    "GradeAverage",
    "Identifier",
    "LegalIdentifier",
    "Measure",
    "Note",
    "NumericScore",
    "Score",
    "Text",
    "TextualScore",
    "make_score",
    # Entities
    "Acceptor",
    "Accreditation",
    "Assessment",
    "AssessmentSpecification",
    "Attachment",
    "AwardingProcess",
    "ContactPoint",
    "Credential",
    "Entitlement",
    "EntitlementSpecification",
    "LearningAchievement",
    "LearningActivity",
    "LearningActivitySpecification",
    "LearningSpecification",
    "Organisation",
    "OrganisationShare",
    "Person",
    "Proof",
    "Qualification",
    "VerificationCheck",
    # Graph
    "check_relation",
    "iter_entities",
    "validate_graph",
]
