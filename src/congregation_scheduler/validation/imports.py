"""
Structural validation and cleaning for the four schedule import kinds.

Every import is a JSON object holding one array under a kind-specific root key.
Validation checks the top level first (terminal on failure) and then validates
each element independently so a single pass reports every problem. Cleaning
runs only on structurally valid input and converts each element into a domain
record, recording auto-corrections as warnings.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from pydantic import BaseModel, ValidationError
from congregation_scheduler import file_io
from congregation_scheduler.constants import ROOT_KEYS
from congregation_scheduler.models import CleaningData, MechanicsData, NvcData, TalksData
from congregation_scheduler.validation.builders import (
    build_cleaning_schedule,
    build_mechanics_designation,
    build_talk,
    build_weekly_meeting,
)
from congregation_scheduler.validation.errors import (
    ImportValidationError,
    format_validation_errors,
)
from congregation_scheduler.validation.fields import ValidationContext
from congregation_scheduler.validation.file_schemas.discursos_json import TalkJsonSchema
from congregation_scheduler.validation.file_schemas.limpeza_json import (
    CleaningScheduleJsonSchema,
)
from congregation_scheduler.validation.file_schemas.mecanicas_json import (
    MechanicsDesignationJsonSchema,
)
from congregation_scheduler.validation.file_schemas.nvc_json import meeting_schema_for
from congregation_scheduler.validation.helpers import is_object
from congregation_scheduler.validation.results import CleaningLog, CleanResult, ValidationResult

# Cleaning defers enum checks so the cleaner can coerce unknown values.
CLEAN_CONTEXT = {"defer_enums": True}


def _as_raw(data):
    """Accept either decoded JSON or a domain container (re-cleaning previous output)."""
    if hasattr(data, "to_dict"):
        return data.to_dict()
    return data


def _check_top_level(raw, root_key: str, allow_empty: bool) -> list[str]:
    if not is_object(raw):
        return ["Dados devem ser um objeto"]
    if root_key not in raw:
        return [f'Propriedade "{root_key}" é obrigatória']
    if not isinstance(raw[root_key], list):
        return [f'"{root_key}" deve ser um array']
    if not allow_empty and not raw[root_key]:
        return [f'"{root_key}" não pode estar vazio']
    return []


def _validate_items(
    raw,
    root_key: str,
    label: str,
    schema_for: Callable[[dict], type[BaseModel]],
    allow_empty: bool = True,
    context: dict | None = None,
) -> tuple[list[str], list[tuple[int, BaseModel]]]:
    """
    Validate every element under ``root_key``.

    Returns:
        (errors, validated) where validated holds (1-based index, schema) pairs
        for the elements that passed
    """
    errors = _check_top_level(raw, root_key, allow_empty)
    if errors:
        return errors, []

    validated = []
    for index, item in enumerate(raw[root_key], start=1):
        item_label = f"{label} {index}"
        if not is_object(item):
            errors.append(f"{item_label} deve ser um objeto")
            continue
        try:
            validated.append((index, schema_for(item).model_validate(item, context=context)))
        except ValidationError as e:
            errors.extend(format_validation_errors(item_label, e))

    return errors, validated


def _clean_items(validated, label: str, build, ctx: ValidationContext, log: CleaningLog) -> list:
    cleaned = []
    for index, schema in validated:
        try:
            record = build(index, schema, ctx, log)
        except Exception as e:
            log.error(f"{label} {index}: erro ao processar - {e}")
            continue
        if record is not None:
            cleaned.append(record)
    return cleaned


def _result(log: CleaningLog, cleaned_data) -> CleanResult:
    return CleanResult(
        valid=not log.errors,
        errors=log.errors,
        warnings=log.warnings,
        cleaned_data=cleaned_data,
    )


# NVC (Nossa Vida Cristã) weekly program


def validate_nvc_schema(raw) -> ValidationResult:
    errors, _ = _validate_items(
        _as_raw(raw), ROOT_KEYS["nvc"], "Reunião", meeting_schema_for, allow_empty=False
    )
    return ValidationResult(valid=not errors, errors=errors)


def validate_and_clean_nvc(raw, ctx: ValidationContext | None = None) -> CleanResult[NvcData]:
    """
    Validate and clean a weekly meeting program import.

    Args:
        raw: Decoded ``{"nossa_vida_crista": [...]}`` object or an NvcData
        ctx: Roster, reference date and default congregation id

    Returns:
        CleanResult with an NvcData on success, structural errors otherwise
    """
    ctx = ctx or ValidationContext()
    errors, validated = _validate_items(
        _as_raw(raw), ROOT_KEYS["nvc"], "Reunião", meeting_schema_for, allow_empty=False
    )
    if errors:
        return CleanResult(valid=False, errors=errors)

    log = CleaningLog()
    meetings = _clean_items(validated, "Reunião", build_weekly_meeting, ctx, log)
    return _result(log, NvcData(meetings=meetings))


# Mechanics designations


def _mechanics_schema(_item) -> type[BaseModel]:
    return MechanicsDesignationJsonSchema


def validate_mecanicas_schema(raw) -> ValidationResult:
    errors, _ = _validate_items(
        _as_raw(raw), ROOT_KEYS["mecanicas"], "Designação", _mechanics_schema
    )
    return ValidationResult(valid=not errors, errors=errors)


def validate_and_clean_mecanicas(
    raw, ctx: ValidationContext | None = None
) -> CleanResult[MechanicsData]:
    """Validate and clean mechanics designations; an unknown ``tipo_reuniao`` is coerced, not rejected."""
    ctx = ctx or ValidationContext()
    errors, validated = _validate_items(
        _as_raw(raw),
        ROOT_KEYS["mecanicas"],
        "Designação",
        _mechanics_schema,
        context=CLEAN_CONTEXT,
    )
    if errors:
        return CleanResult(valid=False, errors=errors)

    log = CleaningLog()
    designations = _clean_items(validated, "Designação", build_mechanics_designation, ctx, log)
    if not designations:
        log.error("Nenhuma designação válida foi encontrada")
    return _result(log, MechanicsData(designations=designations))


# Hall cleaning schedules


def _cleaning_schema(_item) -> type[BaseModel]:
    return CleaningScheduleJsonSchema


def validate_limpeza_schema(raw) -> ValidationResult:
    errors, _ = _validate_items(_as_raw(raw), ROOT_KEYS["limpeza"], "Escala", _cleaning_schema)
    return ValidationResult(valid=not errors, errors=errors)


def validate_and_clean_limpeza(
    raw, ctx: ValidationContext | None = None
) -> CleanResult[CleaningData]:
    ctx = ctx or ValidationContext()
    errors, validated = _validate_items(
        _as_raw(raw), ROOT_KEYS["limpeza"], "Escala", _cleaning_schema
    )
    if errors:
        return CleanResult(valid=False, errors=errors)

    log = CleaningLog()
    schedules = _clean_items(validated, "Escala", build_cleaning_schedule, ctx, log)
    return _result(log, CleaningData(schedules=schedules))


# Public talks


def _talk_schema(_item) -> type[BaseModel]:
    return TalkJsonSchema


def validate_discursos_schema(raw) -> ValidationResult:
    errors, _ = _validate_items(_as_raw(raw), ROOT_KEYS["discursos"], "Discurso", _talk_schema)
    return ValidationResult(valid=not errors, errors=errors)


def validate_and_clean_discursos(
    raw, ctx: ValidationContext | None = None
) -> CleanResult[TalksData]:
    ctx = ctx or ValidationContext()
    errors, validated = _validate_items(
        _as_raw(raw), ROOT_KEYS["discursos"], "Discurso", _talk_schema
    )
    if errors:
        return CleanResult(valid=False, errors=errors)

    log = CleaningLog()
    talks = _clean_items(validated, "Discurso", build_talk, ctx, log)
    if not talks:
        log.error("Nenhum discurso válido encontrado")
    return _result(log, TalksData(talks=talks))


@dataclass(frozen=True)
class ImportKind:
    """Data class tying an import kind to its root key and pipeline functions."""

    name: str
    root_key: str
    validate: Callable[..., ValidationResult]
    clean: Callable[..., CleanResult]


IMPORT_KINDS = {
    "nvc": ImportKind("nvc", ROOT_KEYS["nvc"], validate_nvc_schema, validate_and_clean_nvc),
    "mecanicas": ImportKind(
        "mecanicas", ROOT_KEYS["mecanicas"], validate_mecanicas_schema, validate_and_clean_mecanicas
    ),
    "limpeza": ImportKind(
        "limpeza", ROOT_KEYS["limpeza"], validate_limpeza_schema, validate_and_clean_limpeza
    ),
    "discursos": ImportKind(
        "discursos", ROOT_KEYS["discursos"], validate_discursos_schema, validate_and_clean_discursos
    ),
}


def get_import_kind(name: str) -> ImportKind:
    try:
        return IMPORT_KINDS[name]
    except KeyError:
        raise ValueError(f"Unknown import kind: {name}") from None


def load_and_clean(path, kind: str, ctx: ValidationContext | None = None) -> CleanResult:
    """
    Load an extracted JSON file and run the validate-and-clean pipeline for ``kind``.

    Raises:
        ExtractionParseError: If the file does not hold valid JSON
        ImportValidationError: If validation or cleaning reported errors
        ValueError: If ``kind`` is not a known import kind
    """
    import_kind = get_import_kind(kind)
    raw = file_io.load_extracted_json(path)
    result = import_kind.clean(raw, ctx)
    if not result.valid:
        raise ImportValidationError(str(Path(path)), result.errors, result.warnings)

    logging.info(
        f"{import_kind.name}: {Path(path).name} limpo com {len(result.warnings)} aviso(s)"
    )
    return result
