import csv
import datetime
import json
import logging
import re
from pathlib import Path
import congregation_scheduler.constants as constants

# Extraction services often wrap their JSON answer in a markdown code block.
CODE_FENCE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)


class ExtractionParseError(ValueError):
    """Raised when extracted text cannot be decoded as JSON; keeps the raw text for review."""

    def __init__(self, source: str, raw_text: str, reason: str):
        super().__init__(f"Erro ao fazer parse do JSON em {source}: {reason}")
        self.source = source
        self.raw_text = raw_text


def strip_code_fences(text: str) -> str:
    return CODE_FENCE.sub("", text).strip()


def parse_extracted_text(text: str, source: str = "<text>"):
    """Decode JSON returned by an extraction service, tolerating ```json fences."""
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        logging.error(f"Erro ao fazer parse do JSON: {e}")
        logging.debug(f"Texto retornado: {text}")
        raise ExtractionParseError(source, text, str(e)) from e


def load_extracted_json(filename):
    path = Path(filename)
    with path.open(encoding="utf-8") as f:
        text = f.read()
    return parse_extracted_text(text, source=str(path))


def load_csv(filename, required_columns=None):
    """Load CSV file and validate required columns, trimming whitespace from headers and values."""
    if required_columns is None:
        required_columns = []
    with Path(filename).open(newline="", encoding="utf-8") as csvfile:
        reader = csv.reader(csvfile)
        try:
            raw_fieldnames = next(reader)
        except StopIteration:
            return []

        fieldnames = [name.strip() for name in raw_fieldnames]

        missing = set(required_columns) - set(fieldnames)
        if required_columns and missing:
            raise ValueError(f"missing required column(s): {missing}")

        dict_reader = csv.DictReader(csvfile, fieldnames=fieldnames)
        return [
            {k: " ".join(v.split()) if v else "" for k, v in row.items()} for row in dict_reader
        ]


def save_json(data, filename):
    """Save data to a JSON file, handling Enums and dates."""

    def custom_serializer(obj):
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        if hasattr(obj, "value"):
            return obj.value
        if isinstance(obj, datetime.date):
            return obj.strftime(constants.DATE_FORMAT)
        return str(obj)

    with Path(filename).open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=4, ensure_ascii=False, default=custom_serializer)
    logging.info(f"Dados salvos em {filename}")
