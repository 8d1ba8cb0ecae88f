# -*- encoding: utf-8 -*-
"""
SISU attainment to Europass credential crosswalk.

Usage:
    from europass_credential.crosswalk import load_attainments, map_attainment

    for record in load_attainments(response_body):
        result = map_attainment(record)
        if result.success:
            credential = result.credential
"""

from .config import MapperConfig, load_config
from .sisu_attainment import (
    SisuAcceptorPerson,
    SisuAttainment,
    SisuCreditTransferInfo,
    SisuGradeAverage,
    SisuOrganisation,
    extract_attainment,
)
from .ingest_sisu import (
    MappingResult,
    NormalizedValues,
    ResolvedCodes,
    assemble_credential,
    load_attainments,
    map_attainment,
    map_attainments,
    normalize_attainment,
    parse_date,
    resolve_codes,
)

__all__ = [
    # Configuration
    "MapperConfig",
    "load_config",
    # Source records
    "SisuAcceptorPerson",
    "SisuAttainment",
    "SisuCreditTransferInfo",
    "SisuGradeAverage",
    "SisuOrganisation",
    "extract_attainment",
    # Mapping
    "MappingResult",
    "NormalizedValues",
    "ResolvedCodes",
    "assemble_credential",
    "load_attainments",
    "map_attainment",
    "map_attainments",
    "normalize_attainment",
    "parse_date",
    "resolve_codes",
]
