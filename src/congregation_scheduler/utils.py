import logging
from congregation_scheduler.validation.results import CleanResult, ValidationResult

MAX_RECORDS_LISTED = 20


def setup_logging(verbose=False):
    stream_log_level = logging.DEBUG if verbose else logging.INFO

    # stream level is set by the verbose arg
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(stream_log_level)

    # file level is always DEBUG
    file_handler = logging.FileHandler("debug.log")
    file_handler.setLevel(logging.DEBUG)

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[stream_handler, file_handler],
    )


def _record_label(record) -> str:
    for attr in ("periodo", "data", "data_limpeza"):
        value = getattr(record, attr, None)
        if value:
            break
    else:
        value = "?"
    extra = getattr(record, "evento_especial", None) or getattr(record, "orador", None)
    return f"{value} ({extra})" if extra else str(value)


def summarize_result(kind: str, result: ValidationResult | CleanResult) -> list[str]:
    """Render a validation or cleaning result as printable lines."""
    status = "OK" if result.valid else "INVÁLIDO"
    lines = [f"[{kind}] {status}"]

    for error in result.errors:
        lines.append(f"  erro: {error}")

    for warning in getattr(result, "warnings", []):
        lines.append(f"  aviso: {warning}")

    cleaned = getattr(result, "cleaned_data", None)
    if cleaned is not None:
        # Every domain container holds a single list of records.
        records = next(iter(vars(cleaned).values()), [])
        lines.append(f"  {len(records)} registro(s)")
        for record in records[:MAX_RECORDS_LISTED]:
            lines.append(f"    - {_record_label(record)}")
        if len(records) > MAX_RECORDS_LISTED:
            lines.append(f"    ... e mais {len(records) - MAX_RECORDS_LISTED}")

    return lines


def print_import_summary(kind: str, result: ValidationResult | CleanResult):
    for line in summarize_result(kind, result):
        print(line)
