# -*- encoding: utf-8 -*-
"""
SISU code lists - the source-side vocabularies of an attainment record.

Codes here are the exact strings the SISU ORI attainment API emits.
Where a SISU code has a Europass counterpart, the row carries it as a
crosswalk target (fourth column).
"""

from .registry import Vocabulary, VocabularyDomain


SISU_URI = "https://sis-tuni.funidata.fi/ori"
SISU_VERSION = "ori-v1"

ACCEPTOR_ROLE_PREFIX = "urn:code:attainment-acceptor-type:"
ORGANISATION_ROLE_PREFIX = "urn:code:organisation-role:"
EDUCATIONAL_INSTITUTION_PREFIX = "urn:code:educational-institution:"
LANGUAGE_PREFIX = "urn:code:language:"

ACCEPTOR_ROLES = tuple(
    (f"{ACCEPTOR_ROLE_PREFIX}{name}", label)
    for name, label in (
        ("approved-by", "Approved by"),
        ("coordinating-supervisor", "Coordinating supervisor"),
        ("coordinating-professor", "Coordinating professor"),
        ("supervising-professor", "Supervising professor"),
        ("more-supervising-professor", "Additional supervising professor"),
        ("examinator", "Examinator"),
        ("supervisor", "Supervisor"),
        ("thesis-advisor", "Thesis advisor"),
        ("examiner", "Examiner"),
        ("preliminary-examiner", "Preliminary examiner"),
        ("opponent", "Opponent"),
        ("custos", "Custos"),
    )
)

DOCUMENT_STATES = (
    ("DRAFT", "Draft"),
    ("ACTIVE", "Active"),
    ("DELETED", "Deleted"),
)

ATTAINMENT_STATES = (
    ("ATTAINED", "Attained", "Valid attainment not yet attached to a parent"),
    ("INCLUDED", "Included", "Attainment attached to a parent attainment"),
    ("SUBSTITUTED", "Substituted", "Attainment replaced by another attainment"),
    ("FAILED", "Failed", "Failed attainment"),
)

ATTAINMENT_TYPES = (
    ("AssessmentItemAttainment", "Assessment item attainment",
     "Completion of a single assessment item of a course", "course"),
    ("CourseUnitAttainment", "Course unit attainment",
     "Completion of a course unit", "course"),
    ("ModuleAttainment", "Module attainment",
     "Completion of a study module", "programme-module"),
)

GRADE_AVERAGE_METHODS = (
    ("COURSE_UNIT_ARITHMETIC_MEAN_WEIGHTING_BY_CREDITS",
     "Course unit arithmetic mean weighted by credits"),
    ("ARITHMETIC_MEAN_WEIGHTING_BY_CREDITS",
     "Arithmetic mean weighted by credits"),
)

ORGANISATION_ROLES = (
    (f"{ORGANISATION_ROLE_PREFIX}responsible-organisation", "Responsible organisation"),
    (f"{ORGANISATION_ROLE_PREFIX}coordinating-organisation", "Coordinating organisation"),
)

# Finnish higher education institution codes (Statistics Finland)
EDUCATIONAL_INSTITUTIONS = tuple(
    (f"{EDUCATIONAL_INSTITUTION_PREFIX}{code}", label)
    for code, label in (
        ("01901", "University of Helsinki"),
        ("01903", "Åbo Akademi University"),
        ("01904", "University of Oulu"),
        ("01906", "University of Jyväskylä"),
        ("01910", "Hanken School of Economics"),
        ("01913", "University of Vaasa"),
        ("01914", "LUT University"),
        ("01918", "University of Lapland"),
        ("02557", "National Defence University"),
        ("10076", "Aalto University"),
        ("10088", "University of Eastern Finland"),
        ("10089", "University of Turku"),
        ("10103", "University of the Arts Helsinki"),
        ("10122", "Tampere University"),
    )
)

# (SISU language URN, label, target EU language notation)
ATTAINMENT_LANGUAGES = tuple(
    (f"{LANGUAGE_PREFIX}{code}", label, "", code)
    for code, label in (
        ("fi", "Finnish"),
        ("sv", "Swedish"),
        ("en", "English"),
        ("de", "German"),
        ("fr", "French"),
        ("es", "Spanish"),
        ("it", "Italian"),
        ("et", "Estonian"),
    )
)


def build_sisu_codes() -> list[Vocabulary]:
    """Build the SISU source vocabularies."""
    def table(domain, name, rows, maps_to_domain=None):
        return Vocabulary.from_table(
            domain=domain,
            name=name,
            framework_uri=SISU_URI,
            version=SISU_VERSION,
            rows=rows,
            maps_to_domain=maps_to_domain,
        )

    return [
        table(VocabularyDomain.ROLE, "SISU attainment acceptor types", ACCEPTOR_ROLES),
        table(VocabularyDomain.DOCUMENT_STATE, "SISU document states", DOCUMENT_STATES),
        table(VocabularyDomain.ATTAINMENT_STATE, "SISU attainment states", ATTAINMENT_STATES),
        table(
            VocabularyDomain.ATTAINMENT_TYPE,
            "SISU attainment types",
            ATTAINMENT_TYPES,
            maps_to_domain=VocabularyDomain.LEARNING_OPPORTUNITY_TYPE,
        ),
        table(VocabularyDomain.GRADE_AVERAGE_METHOD, "SISU grade average methods", GRADE_AVERAGE_METHODS),
        table(VocabularyDomain.ORGANISATION_ROLE, "SISU organisation roles", ORGANISATION_ROLES),
        table(VocabularyDomain.EDUCATIONAL_INSTITUTION, "SISU educational institutions", EDUCATIONAL_INSTITUTIONS),
        table(
            VocabularyDomain.ATTAINMENT_LANGUAGE,
            "SISU languages",
            ATTAINMENT_LANGUAGES,
            maps_to_domain=VocabularyDomain.LANGUAGE,
        ),
    ]
