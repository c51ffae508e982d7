"""Load a roster from a JSON list or an ``id,nome`` CSV file."""

import json
import logging
from pathlib import Path
from pydantic import ValidationError
from congregation_scheduler import file_io
from congregation_scheduler.roster import Roster, RosterEntry
from congregation_scheduler.validation.errors import RosterFileError
from congregation_scheduler.validation.file_schemas.roster_json import RosterFileSchema

ROSTER_CSV_COLUMNS = ["id", "nome"]


def validate_roster(raw_rows: list[dict], file_path: str) -> Roster:
    """
    Validate roster rows and build a Roster.

    Raises:
        RosterFileError: If any row lacks a usable id/nome or ids repeat
    """
    try:
        rows = RosterFileSchema.model_validate(raw_rows).root
    except ValidationError as e:
        raise RosterFileError(file_path, e) from e
    return Roster(RosterEntry(id=row.id, nome=row.nome) for row in rows)


def load_roster(path) -> Roster:
    """
    Read a roster file; ``.csv`` files need ``id`` and ``nome`` columns, anything
    else is read as a JSON list of ``{"id": ..., "nome": ...}`` objects.

    Raises:
        FileNotFoundError: If the file does not exist
        RosterFileError: If the file cannot be parsed or validation fails
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Roster file not found: {path}")

    try:
        if path.suffix.lower() == ".csv":
            raw_rows = file_io.load_csv(path, required_columns=ROSTER_CSV_COLUMNS)
        else:
            with path.open(encoding="utf-8") as f:
                raw_rows = json.load(f)
    except ValueError as e:
        # json.JSONDecodeError is a ValueError too
        raise RosterFileError(str(path), reason=str(e)) from e

    roster = validate_roster(raw_rows, str(path))
    logging.debug(f"Loaded {len(roster)} roster entries from {path}")
    return roster
