# -*- encoding: utf-8 -*-
"""
Qualification frameworks - EQF levels and the Finnish NQF.

EQF levels are defined by three descriptors (knowledge, skills,
responsibility and autonomy). The Finnish national framework is referenced
one-to-one to the EQF, so each NQF level crosswalks to the EQF level of the
same number.

See:
    https://europa.eu/europass/en/description-eight-eqf-levels
    https://www.oph.fi/en/education-and-qualifications/qualifications-frameworks
"""

from dataclasses import dataclass

from .registry import Vocabulary, VocabularyDomain


EQF_URI = "http://data.europa.eu/snb/eqf/25831c2"
EQF_LEVEL_URI_BASE = "http://data.europa.eu/snb/eqf/"
NQF_FI_URI = "https://www.oph.fi/en/education-and-qualifications/qualifications-frameworks"


@dataclass(frozen=True)
class EQFDescriptor:
    """Learning outcomes relevant to qualifications at one EQF level."""
    level: int
    knowledge: str
    skills: str
    responsibility_and_autonomy: str


EQF_DESCRIPTORS: dict[int, EQFDescriptor] = {
    1: EQFDescriptor(
        level=1,
        knowledge="Basic general knowledge",
        skills="Basic skills required to carry out simple tasks",
        responsibility_and_autonomy="Work or study under direct supervision in a structured context",
    ),
    2: EQFDescriptor(
        level=2,
        knowledge="Basic factual knowledge of a field of work or study",
        skills=(
            "Basic cognitive and practical skills required to use relevant information "
            "in order to carry out tasks and to solve routine problems using simple rules and tools"
        ),
        responsibility_and_autonomy="Work or study under supervision with some autonomy",
    ),
    3: EQFDescriptor(
        level=3,
        knowledge="Knowledge of facts, principles, processes and general concepts, in a field of work or study",
        skills=(
            "A range of cognitive and practical skills required to accomplish tasks and solve "
            "problems by selecting and applying basic methods, tools, materials and information"
        ),
        responsibility_and_autonomy=(
            "Take responsibility for completion of tasks in work or study; "
            "adapt own behaviour to circumstances in solving problems"
        ),
    ),
    4: EQFDescriptor(
        level=4,
        knowledge="Factual and theoretical knowledge in broad contexts within a field of work or study",
        skills=(
            "A range of cognitive and practical skills required to generate solutions "
            "to specific problems in a field of work or study"
        ),
        responsibility_and_autonomy=(
            "Exercise self-management within the guidelines of work or study contexts that are "
            "usually predictable, but are subject to change; supervise the routine work of others, "
            "taking some responsibility for the evaluation and improvement of work or study activities"
        ),
    ),
    5: EQFDescriptor(
        level=5,
        knowledge=(
            "Comprehensive, specialised, factual and theoretical knowledge within a field of work "
            "or study and an awareness of the boundaries of that knowledge"
        ),
        skills=(
            "A comprehensive range of cognitive and practical skills required to develop "
            "creative solutions to abstract problems"
        ),
        responsibility_and_autonomy=(
            "Exercise management and supervision in contexts of work or study activities where "
            "there is unpredictable change; review and develop performance of self and others"
        ),
    ),
    6: EQFDescriptor(
        level=6,
        knowledge=(
            "Advanced knowledge of a field of work or study, involving a critical understanding "
            "of theories and principles"
        ),
        skills=(
            "Advanced skills, demonstrating mastery and innovation, required to solve complex and "
            "unpredictable problems in a specialised field of work or study"
        ),
        responsibility_and_autonomy=(
            "Manage complex technical or professional activities or projects, taking responsibility "
            "for decision-making in unpredictable work or study contexts; take responsibility for "
            "managing professional development of individuals and groups"
        ),
    ),
    7: EQFDescriptor(
        level=7,
        knowledge=(
            "Highly specialised knowledge, some of which is at the forefront of knowledge in a field "
            "of work or study, as the basis for original thinking and/or research; critical awareness "
            "of knowledge issues in a field and at the interface between different fields"
        ),
        skills=(
            "Specialised problem-solving skills required in research and/or innovation in order to "
            "develop new knowledge and procedures and to integrate knowledge from different fields"
        ),
        responsibility_and_autonomy=(
            "Manage and transform work or study contexts that are complex, unpredictable and require "
            "new strategic approaches; take responsibility for contributing to professional knowledge "
            "and practice and/or for reviewing the strategic performance of teams"
        ),
    ),
    8: EQFDescriptor(
        level=8,
        knowledge=(
            "Knowledge at the most advanced frontier of a field of work or study and at the "
            "interface between fields"
        ),
        skills=(
            "The most advanced and specialised skills and techniques, including synthesis and "
            "evaluation, required to solve critical problems in research and/or innovation and to "
            "extend and redefine existing knowledge or professional practice"
        ),
        responsibility_and_autonomy=(
            "Demonstrate substantial authority, innovation, autonomy, scholarly and professional "
            "integrity and sustained commitment to the development of new ideas or processes at the "
            "forefront of work or study contexts including research"
        ),
    ),
}

EQF_LEVELS = tuple(
    (str(level), f"EQF level {level}", descriptor.knowledge)
    for level, descriptor in EQF_DESCRIPTORS.items()
)

# (notation, label, qualifications placed at the level, EQF target)
NQF_LEVELS_FI = (
    ("2", "NQF level 2",
     "Basic education syllabus; preparatory education for work and independent living (TELMA)", "2"),
    ("3", "NQF level 3",
     "Preparatory education for general upper secondary (LUVA) and vocational training (VALMA); "
     "advanced syllabus for basic education in the arts", "3"),
    ("4", "NQF level 4",
     "General upper secondary syllabus and the Matriculation Examination; upper secondary and "
     "further vocational qualifications", "4"),
    ("5", "NQF level 5",
     "Specialist vocational qualifications; Sub-Officer Qualification; Vocational Qualification "
     "in Air Traffic Control", "5"),
    ("6", "NQF level 6",
     "Bachelor's degrees at universities and universities of applied sciences; professional "
     "specialisation programmes for Bachelor's degree holders", "6"),
    ("7", "NQF level 7",
     "Master's degrees at universities and universities of applied sciences; professional "
     "specialisation programmes for Master's degree holders", "7"),
    ("8", "NQF level 8",
     "Scientific and artistic postgraduate degrees (licentiate and doctor); General Staff "
     "Officer's Degree; specialist training in medicine and dentistry", "8"),
)


def build_qualification_frameworks() -> list[Vocabulary]:
    """Build the EQF and Finnish NQF vocabularies."""
    return [
        Vocabulary.from_table(
            domain=VocabularyDomain.EQF_LEVEL,
            name="European Qualifications Framework",
            framework_uri=EQF_URI,
            version="2017",
            rows=EQF_LEVELS,
            uri_base=EQF_LEVEL_URI_BASE,
        ),
        Vocabulary.from_table(
            domain=VocabularyDomain.NQF_LEVEL_FI,
            name="Finnish National Qualifications Framework",
            framework_uri=NQF_FI_URI,
            version="2017",
            rows=NQF_LEVELS_FI,
            maps_to_domain=VocabularyDomain.EQF_LEVEL,
        ),
    ]
