from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator
from congregation_scheduler.validation.fields import PersonNameStr, RosterIdStr
from congregation_scheduler.validation.helpers import validate_unique


class RosterEntryJsonSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    id: RosterIdStr = Field(alias="id")
    nome: PersonNameStr = Field(alias="nome")


class RosterFileSchema(RootModel[list[RosterEntryJsonSchema]]):
    @model_validator(mode="after")
    def validate_unique_ids(self):
        validate_unique([entry.id for entry in self.root], msg="id de publicador duplicado")
        return self
