"""
Validation layer for congregation schedule imports.

This module provides Pydantic-based structural validation and the cleaners that
turn extracted schedule data into domain records. It validates in-memory
structures; file IO happens in file_io.

Public API:
  - Schemas: Direct Pydantic validation (WeeklyMeetingJsonSchema, TalkJsonSchema, etc.)
  - Structural validators: raw JSON → ValidationResult (validate_nvc_schema, etc.)
  - Cleaners: raw JSON → CleanResult with domain records (validate_and_clean_nvc, etc.)
  - Date normalization: parse_portuguese_date, normalize_date
  - Orchestration: IMPORT_KINDS, load_and_clean, load_roster
"""

# Errors
from congregation_scheduler.validation.errors import (
    ImportValidationError,
    RosterFileError,
    format_roster_errors,
    format_validation_errors,
)
from congregation_scheduler.validation.fields import ValidationContext

# Schemas for direct Pydantic validation
from congregation_scheduler.validation.file_schemas.discursos_json import TalkJsonSchema
from congregation_scheduler.validation.file_schemas.limpeza_json import (
    CleaningScheduleJsonSchema,
)
from congregation_scheduler.validation.file_schemas.mecanicas_json import (
    MechanicsDesignationJsonSchema,
)
from congregation_scheduler.validation.file_schemas.nvc_json import (
    SpecialEventMeetingJsonSchema,
    WeeklyMeetingJsonSchema,
)
from congregation_scheduler.validation.file_schemas.person_json import PersonJsonSchema
from congregation_scheduler.validation.file_schemas.roster_json import (
    RosterEntryJsonSchema,
    RosterFileSchema,
)

# Validators, cleaners and orchestration (high-level API)
from congregation_scheduler.validation.imports import (
    IMPORT_KINDS,
    ImportKind,
    get_import_kind,
    load_and_clean,
    validate_and_clean_discursos,
    validate_and_clean_limpeza,
    validate_and_clean_mecanicas,
    validate_and_clean_nvc,
    validate_discursos_schema,
    validate_limpeza_schema,
    validate_mecanicas_schema,
    validate_nvc_schema,
)
from congregation_scheduler.validation.parsers import (
    DateSpec,
    normalize_date,
    parse_portuguese_date,
)
from congregation_scheduler.validation.results import CleaningLog, CleanResult, ValidationResult
from congregation_scheduler.validation.roster_file import load_roster, validate_roster

__all__ = [
    "IMPORT_KINDS",
    "CleanResult",
    "CleaningLog",
    "CleaningScheduleJsonSchema",
    "DateSpec",
    "ImportKind",
    "ImportValidationError",
    "MechanicsDesignationJsonSchema",
    "PersonJsonSchema",
    "RosterEntryJsonSchema",
    "RosterFileError",
    "RosterFileSchema",
    "SpecialEventMeetingJsonSchema",
    "TalkJsonSchema",
    "ValidationContext",
    "ValidationResult",
    "WeeklyMeetingJsonSchema",
    "format_roster_errors",
    "format_validation_errors",
    "get_import_kind",
    "load_and_clean",
    "load_roster",
    "normalize_date",
    "parse_portuguese_date",
    "validate_and_clean_discursos",
    "validate_and_clean_limpeza",
    "validate_and_clean_mecanicas",
    "validate_and_clean_nvc",
    "validate_discursos_schema",
    "validate_limpeza_schema",
    "validate_mecanicas_schema",
    "validate_nvc_schema",
    "validate_roster",
]
