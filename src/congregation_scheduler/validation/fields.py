from dataclasses import dataclass, field
from datetime import date
from typing import Annotated
from pydantic import AfterValidator, BeforeValidator, StrictStr, StringConstraints
from congregation_scheduler.constants import MEETING_TYPES
from congregation_scheduler.roster import Roster
from congregation_scheduler.validation.helpers import split_names

MAX_PERSON_NAME_LENGTH = 100


@dataclass(frozen=True)
class ValidationContext:
    """Data class representing the context for cleaning an import."""

    roster: Roster = field(default_factory=Roster.default)
    today: date = field(default_factory=date.today)
    congregacao_id: str = ""


def none_if_falsy(v):
    """Treat null, empty objects and empty strings as an absent optional part."""
    if not v:
        return None
    return v


def text_or_none(v):
    return v if isinstance(v, str) else None


def bool_or_false(v):
    return v if isinstance(v, bool) else False


def coerce_publisher_names(v):
    """Accept a list of names/ids or a free-text string such as "Vilson, Loni e Isolde"."""
    if isinstance(v, str):
        return split_names(v)
    return v


def validate_meeting_type(v, info):
    # The clean pipeline defers this check so the cleaner can coerce the value.
    if (info.context or {}).get("defer_enums"):
        return v
    if v not in MEETING_TYPES:
        raise ValueError('deve ser "meio_semana" ou "fim_semana"')
    return v


def validate_person_name(v):
    if not v.strip():
        raise ValueError("não pode ser vazio")
    return v


PersonNameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, max_length=MAX_PERSON_NAME_LENGTH),
    AfterValidator(validate_person_name),
]
RosterIdStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
LenientText = Annotated[str | None, BeforeValidator(text_or_none)]
LenientBool = Annotated[bool, BeforeValidator(bool_or_false)]
PublisherNames = Annotated[list[StrictStr], BeforeValidator(coerce_publisher_names)]
MeetingTypeStr = Annotated[StrictStr | None, AfterValidator(validate_meeting_type)]
