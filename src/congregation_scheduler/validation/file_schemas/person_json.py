from typing import Annotated
from pydantic import BaseModel, BeforeValidator, ConfigDict, StrictStr
from congregation_scheduler.validation.fields import none_if_falsy


class PersonJsonSchema(BaseModel):
    """
    Schema for a person reference: ``{"nome": ..., "id": ...}``.

    ``id`` is None when the key is missing; cleaned output always carries it,
    blank for a name the roster could not resolve.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    nome: StrictStr = ""
    id: StrictStr | None = None


OptionalPerson = Annotated[PersonJsonSchema | None, BeforeValidator(none_if_falsy)]
