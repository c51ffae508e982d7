"""Validation error handling and wrapping."""

from pydantic import ValidationError

MAX_ERRORS_DISPLAYED = 10

ERROR_MESSAGES = {
    "string_type": "deve ser uma string",
    "bool_type": "deve ser um booleano",
    "model_type": "deve ser um objeto",
    "dict_type": "deve ser um objeto",
    "model_attributes_type": "deve ser um objeto",
    "list_type": "deve ser um array",
    "missing": "é obrigatório",
}


def format_location(loc: tuple) -> str:
    """
    Render a pydantic error location as a dotted path.

    Examples:
        ("tesourosPalavra", "joiasEspirituais", "texto") -> "tesourosPalavra.joiasEspirituais.texto"
        ("facaSeuMelhor", 0, "responsavel") -> "facaSeuMelhor[0].responsavel"
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def describe_error(error: dict) -> str:
    error_type = error.get("type", "")
    limits = error.get("ctx") or {}
    if error_type in ERROR_MESSAGES:
        return ERROR_MESSAGES[error_type]
    if error_type == "too_long":
        return f"deve ter no máximo {limits.get('max_length')} itens"
    if error_type == "too_short":
        return f"deve ter pelo menos {limits.get('min_length')} itens"
    if error_type == "string_too_long":
        return f"deve ter no máximo {limits.get('max_length')} caracteres"
    if error_type == "string_too_short":
        return "não pode ser vazio"
    msg = error.get("msg", "")
    return msg.removeprefix("Value error, ")


def format_error(label: str, loc: tuple, error: dict) -> str:
    path = format_location(loc)
    description = describe_error(error)
    if path:
        return f"{label}: {path} {description}"
    return f"{label}: {description}"


def format_validation_errors(label: str, validation_error: ValidationError) -> list[str]:
    """Convert a pydantic ValidationError into labelled, human-readable messages."""
    return [
        format_error(label, error.get("loc", ()), error) for error in validation_error.errors()
    ]


def format_roster_errors(validation_error: ValidationError) -> list[str]:
    """
    Format errors from a roster list, labelling each by its 1-based row.

    Examples:
        loc (0, "nome") -> "Publicador 1: nome não pode ser vazio"
        loc ()          -> "Lista de publicadores: id de publicador duplicado"
    """
    messages = []
    for error in validation_error.errors():
        loc = error.get("loc", ())
        if loc and isinstance(loc[0], int):
            messages.append(format_error(f"Publicador {loc[0] + 1}", loc[1:], error))
        else:
            messages.append(format_error("Lista de publicadores", loc, error))
    return messages


def render_failure(source: str, errors: list[str]) -> str:
    lines = [f"Validation failed in {source}:"]

    for error in errors[:MAX_ERRORS_DISPLAYED]:
        lines.append(f"  {error}")

    if len(errors) > MAX_ERRORS_DISPLAYED:
        remaining = len(errors) - MAX_ERRORS_DISPLAYED
        lines.append(f"  ... and {remaining} more error(s)")

    return "\n".join(lines)


class ImportValidationError(Exception):
    """Raised when an import source cannot be validated or cleaned."""

    def __init__(self, source: str, errors: list[str], warnings: list[str] | None = None):
        self.source = source
        self.errors = list(errors)
        self.warnings = list(warnings or [])

    def __str__(self) -> str:
        return render_failure(self.source, self.errors)


class RosterFileError(Exception):
    """
    Raised when a roster file cannot be read or its rows fail validation.

    Carries either the pydantic ValidationError of the rows or, for files that
    never got that far (bad JSON, missing CSV columns), a plain reason.
    """

    def __init__(
        self,
        file_path: str,
        validation_error: ValidationError | None = None,
        reason: str | None = None,
    ):
        self.file_path = file_path
        self.validation_error = validation_error
        self.reason = reason

    def errors(self) -> list[dict]:
        if self.validation_error is None:
            return []
        return self.validation_error.errors()

    def messages(self) -> list[str]:
        if self.validation_error is None:
            return [f"Arquivo: {self.reason}"]
        return format_roster_errors(self.validation_error)

    def __str__(self) -> str:
        return render_failure(self.file_path, self.messages())
