from pydantic import BaseModel, ConfigDict, Field, StrictStr
from congregation_scheduler.validation.fields import MeetingTypeStr
from congregation_scheduler.validation.file_schemas.person_json import OptionalPerson


class MechanicsDesignationJsonSchema(BaseModel):
    """
    Schema for one meeting's support-role designation.

    ``tipo_reuniao`` must be "meio_semana" or "fim_semana" unless the
    validation context sets ``defer_enums``.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    id: StrictStr | None = None
    data: StrictStr
    tipo_reuniao: MeetingTypeStr = Field(default=None, validate_default=True)

    presidente: OptionalPerson = None
    leitor: OptionalPerson = None
    indicador_entrada: OptionalPerson = None
    indicador_auditorio: OptionalPerson = None
    audio_video: OptionalPerson = None
    volante: OptionalPerson = None
    palco: OptionalPerson = None
