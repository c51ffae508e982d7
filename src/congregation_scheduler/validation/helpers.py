import re
import unicodedata

NAME_SEPARATORS = re.compile(r"[,&]|\s+e\s+")


def collapse_whitespace(text: str | None) -> str:
    """
    Trim and collapse internal whitespace runs to single spaces.

    Examples:
        "  Célio   Horn " -> "Célio Horn"
        None -> ""
    """
    if not text:
        return ""
    return " ".join(text.split())


def split_names(text: str | None) -> list[str]:
    """
    Split a free-text list of people into individual names.

    Separators are commas, ampersands and the standalone word "e".

    Examples:
        "Vilson, Loni e Isolde" -> ["Vilson", "Loni", "Isolde"]
        "Ana & Pedro" -> ["Ana", "Pedro"]
    """
    if not text or not isinstance(text, str):
        return []
    return [name.strip() for name in NAME_SEPARATORS.split(text) if name.strip()]


def is_object(value) -> bool:
    return isinstance(value, dict)


def validate_unique(items, key=None, msg="duplicate value"):
    values = [key(item) if key else item for item in items]
    if len(values) != len(set(values)):
        raise ValueError(msg)


def strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))
