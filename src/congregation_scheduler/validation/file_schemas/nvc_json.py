from typing import Annotated
from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    field_validator,
    model_validator,
)
from congregation_scheduler.constants import MAX_CHRISTIAN_LIFE_PARTS, MAX_MINISTRY_PARTS
from congregation_scheduler.validation.fields import (
    LenientBool,
    LenientText,
    none_if_falsy,
)
from congregation_scheduler.validation.file_schemas.person_json import OptionalPerson

# Program fields a special event makes irrelevant.
PROGRAM_KEYS = (
    "leituraBiblica",
    "presidente",
    "oracoes",
    "canticos",
    "comentarios",
    "tesourosPalavra",
    "facaSeuMelhor",
    "nossaVidaCrista",
)


class PrayersJsonSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    inicial: OptionalPerson = None
    final: OptionalPerson = None


class SongsJsonSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    inicial: StrictStr
    intermediario: StrictStr
    final: StrictStr


class CommentsJsonSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    iniciais: StrictStr | None = None
    finais: StrictStr | None = None


class SpiritualGemsJsonSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    texto: StrictStr
    pergunta: StrictStr
    referencia: StrictStr
    duracao: StrictStr
    responsavel: OptionalPerson = None


class BibleReadingJsonSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    texto: StrictStr
    duracao: StrictStr
    responsavel: OptionalPerson = None


class TreasuresJsonSchema(BaseModel):
    """Schema for the "Tesouros da Palavra de Deus" section."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    titulo: StrictStr
    duracao: StrictStr
    responsavel: OptionalPerson = None
    joias_espirituais: Annotated[
        SpiritualGemsJsonSchema | None, BeforeValidator(none_if_falsy)
    ] = Field(default=None, alias="joiasEspirituais")
    leitura_biblica: Annotated[
        BibleReadingJsonSchema | None, BeforeValidator(none_if_falsy)
    ] = Field(default=None, alias="leituraBiblica")


class MinistryPartJsonSchema(BaseModel):
    """Schema for a "Faça seu melhor no ministério" part."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    tipo: StrictStr
    duracao: StrictStr
    descricao: StrictStr
    responsavel: OptionalPerson = None
    ajudante: OptionalPerson = None


class ChristianLifePartJsonSchema(BaseModel):
    """Schema for a "Nossa vida cristã" part; ``leitor`` only applies to the congregation study."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    tipo: StrictStr
    duracao: StrictStr
    conteudo: StrictStr | None = None
    responsavel: OptionalPerson = None
    leitor: OptionalPerson = None


class WeeklyMeetingJsonSchema(BaseModel):
    """Schema for one week of a regular midweek meeting program."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    id: StrictStr | None = None
    congregacao_id: StrictStr | None = None
    periodo: StrictStr
    semana_visita_superintendente: StrictBool = Field(alias="semanaVisitaSuperintendente")
    dia_terca: StrictBool = Field(alias="diaTerca")
    evento_especial: StrictStr | None = Field(default=None, alias="eventoEspecial")

    leitura_biblica: StrictStr | None = Field(default=None, alias="leituraBiblica")
    presidente: OptionalPerson = None
    oracoes: Annotated[PrayersJsonSchema | None, BeforeValidator(none_if_falsy)] = None
    canticos: Annotated[SongsJsonSchema | None, BeforeValidator(none_if_falsy)] = None
    comentarios: Annotated[CommentsJsonSchema | None, BeforeValidator(none_if_falsy)] = None
    tesouros_palavra: Annotated[TreasuresJsonSchema | None, BeforeValidator(none_if_falsy)] = (
        Field(default=None, alias="tesourosPalavra")
    )
    faca_seu_melhor: list[MinistryPartJsonSchema] | None = Field(
        default=None, alias="facaSeuMelhor"
    )
    nossa_vida_crista: list[ChristianLifePartJsonSchema] | None = Field(
        default=None, alias="nossaVidaCrista"
    )

    @field_validator("faca_seu_melhor", mode="after")
    @classmethod
    def validate_ministry_part_count(cls, v):
        if v and len(v) > MAX_MINISTRY_PARTS:
            raise ValueError(f"deve ter no máximo {MAX_MINISTRY_PARTS} partes")
        return v

    @field_validator("nossa_vida_crista", mode="after")
    @classmethod
    def validate_christian_life_part_count(cls, v):
        if v and len(v) > MAX_CHRISTIAN_LIFE_PARTS:
            raise ValueError(f"deve ter no máximo {MAX_CHRISTIAN_LIFE_PARTS} partes")
        return v


class SpecialEventMeetingJsonSchema(BaseModel):
    """
    Schema for a week whose program is replaced by a special event.

    Only ``eventoEspecial`` is checked; the remaining scalar fields are kept when
    they have the right type and the program sections are dropped.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    evento_especial: StrictStr = Field(alias="eventoEspecial")
    id: LenientText = None
    congregacao_id: LenientText = None
    periodo: LenientText = None
    semana_visita_superintendente: LenientBool = Field(
        default=False, alias="semanaVisitaSuperintendente"
    )
    dia_terca: LenientBool = Field(default=False, alias="diaTerca")
    discarded_sections: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def collect_discarded_sections(cls, data):
        if not isinstance(data, dict):
            return data
        discarded = [key for key in PROGRAM_KEYS if data.get(key)]
        return {**data, "discarded_sections": discarded}


def meeting_schema_for(raw: dict) -> type[BaseModel]:
    """Pick the meeting schema: a non-blank ``eventoEspecial`` short-circuits the program checks."""
    if str(raw.get("eventoEspecial") or "").strip():
        return SpecialEventMeetingJsonSchema
    return WeeklyMeetingJsonSchema
