from pydantic import BaseModel, ConfigDict, StrictStr


class TalkJsonSchema(BaseModel):
    """Schema for a public talk arrangement."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    orador: StrictStr
    tema: StrictStr
    data: StrictStr
    cantico: StrictStr | None = None
    hospitalidade: StrictStr | None = None
