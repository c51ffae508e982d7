from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator
from congregation_scheduler.validation.fields import PublisherNames


class CleaningScheduleJsonSchema(BaseModel):
    """
    Schema for a hall-cleaning turn.

    ``publicadores`` accepts a list of roster ids/names or a single free-text
    string such as "Vilson, Loni e Isolde", which is split into names.
    ``publicadores_from_text`` records which of the two was given.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    grupo_id: StrictStr | None = None
    data_limpeza: StrictStr
    publicadores: PublisherNames
    observacoes: StrictStr | None = None
    publicadores_from_text: bool = Field(default=False)

    @model_validator(mode="before")
    @classmethod
    def note_free_text_publishers(cls, data):
        if not isinstance(data, dict):
            return data
        return {**data, "publicadores_from_text": isinstance(data.get("publicadores"), str)}
