"""
Domain records produced by the import cleaners.

Each record keeps Python attribute names; ``to_dict`` renders the wire shape
accepted by the validators, so cleaned output can be fed back in unchanged.
"""

from dataclasses import dataclass, field
from enum import Enum


class MeetingType(Enum):
    MIDWEEK = "meio_semana"
    WEEKEND = "fim_semana"

    @classmethod
    def from_string(cls, value: str) -> "MeetingType":
        value = (value or "").strip().lower()
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Invalid meeting type: {value}")


@dataclass(frozen=True)
class Person:
    """An assigned volunteer; ``id`` is empty when the name was not resolved."""

    id: str
    nome: str

    def to_dict(self) -> dict:
        return {"id": self.id, "nome": self.nome}


def _person_dict(person: Person | None) -> dict | None:
    return person.to_dict() if person else None


@dataclass
class Prayers:
    inicial: Person | None
    final: Person | None

    def to_dict(self) -> dict:
        return {"inicial": _person_dict(self.inicial), "final": _person_dict(self.final)}


@dataclass
class Songs:
    inicial: str
    intermediario: str
    final: str

    def to_dict(self) -> dict:
        return {"inicial": self.inicial, "intermediario": self.intermediario, "final": self.final}


@dataclass
class Comments:
    iniciais: str | None
    finais: str | None

    def to_dict(self) -> dict:
        return {"iniciais": self.iniciais, "finais": self.finais}


@dataclass
class SpiritualGems:
    texto: str
    pergunta: str
    referencia: str
    duracao: str
    responsavel: Person | None

    def to_dict(self) -> dict:
        return {
            "texto": self.texto,
            "pergunta": self.pergunta,
            "referencia": self.referencia,
            "duracao": self.duracao,
            "responsavel": _person_dict(self.responsavel),
        }


@dataclass
class BibleReading:
    texto: str
    duracao: str
    responsavel: Person | None

    def to_dict(self) -> dict:
        return {
            "texto": self.texto,
            "duracao": self.duracao,
            "responsavel": _person_dict(self.responsavel),
        }


@dataclass
class Treasures:
    titulo: str
    duracao: str
    responsavel: Person | None
    joias_espirituais: SpiritualGems | None = None
    leitura_biblica: BibleReading | None = None

    def to_dict(self) -> dict:
        return {
            "titulo": self.titulo,
            "duracao": self.duracao,
            "responsavel": _person_dict(self.responsavel),
            "joiasEspirituais": self.joias_espirituais.to_dict() if self.joias_espirituais else None,
            "leituraBiblica": self.leitura_biblica.to_dict() if self.leitura_biblica else None,
        }


@dataclass
class MinistryPart:
    tipo: str
    duracao: str
    descricao: str
    responsavel: Person | None
    ajudante: Person | None = None

    def to_dict(self) -> dict:
        return {
            "tipo": self.tipo,
            "duracao": self.duracao,
            "descricao": self.descricao,
            "responsavel": _person_dict(self.responsavel),
            "ajudante": _person_dict(self.ajudante),
        }


@dataclass
class ChristianLifePart:
    tipo: str
    duracao: str
    responsavel: Person | None
    conteudo: str | None = None
    leitor: Person | None = None

    def to_dict(self) -> dict:
        return {
            "tipo": self.tipo,
            "duracao": self.duracao,
            "conteudo": self.conteudo,
            "responsavel": _person_dict(self.responsavel),
            "leitor": _person_dict(self.leitor),
        }


@dataclass
class WeeklyMeeting:
    """One week of the Christian Life and Ministry meeting program."""

    id: str
    congregacao_id: str
    periodo: str
    semana_visita_superintendente: bool
    dia_terca: bool
    leitura_biblica: str | None = None
    presidente: Person | None = None
    oracoes: Prayers | None = None
    canticos: Songs | None = None
    comentarios: Comments | None = None
    tesouros_palavra: Treasures | None = None
    faca_seu_melhor: list[MinistryPart] | None = None
    nossa_vida_crista: list[ChristianLifePart] | None = None
    evento_especial: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "congregacao_id": self.congregacao_id,
            "periodo": self.periodo,
            "leituraBiblica": self.leitura_biblica,
            "presidente": _person_dict(self.presidente),
            "oracoes": self.oracoes.to_dict() if self.oracoes else None,
            "canticos": self.canticos.to_dict() if self.canticos else None,
            "comentarios": self.comentarios.to_dict() if self.comentarios else None,
            "tesourosPalavra": self.tesouros_palavra.to_dict() if self.tesouros_palavra else None,
            "facaSeuMelhor": (
                [part.to_dict() for part in self.faca_seu_melhor]
                if self.faca_seu_melhor is not None
                else None
            ),
            "nossaVidaCrista": (
                [part.to_dict() for part in self.nossa_vida_crista]
                if self.nossa_vida_crista is not None
                else None
            ),
            "eventoEspecial": self.evento_especial,
            "semanaVisitaSuperintendente": self.semana_visita_superintendente,
            "diaTerca": self.dia_terca,
        }


@dataclass
class NvcData:
    meetings: list[WeeklyMeeting] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"nossa_vida_crista": [meeting.to_dict() for meeting in self.meetings]}


@dataclass
class MechanicsDesignation:
    """Support roles for a single meeting occurrence."""

    id: str
    data: str
    tipo_reuniao: MeetingType
    presidente: Person | None = None
    leitor: Person | None = None
    indicador_entrada: Person | None = None
    indicador_auditorio: Person | None = None
    audio_video: Person | None = None
    volante: Person | None = None
    palco: Person | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "data": self.data,
            "tipo_reuniao": self.tipo_reuniao.value,
            "presidente": _person_dict(self.presidente),
            "leitor": _person_dict(self.leitor),
            "indicador_entrada": _person_dict(self.indicador_entrada),
            "indicador_auditorio": _person_dict(self.indicador_auditorio),
            "audio_video": _person_dict(self.audio_video),
            "volante": _person_dict(self.volante),
            "palco": _person_dict(self.palco),
        }


@dataclass
class MechanicsData:
    designations: list[MechanicsDesignation] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"designacoes_mecanicas": [d.to_dict() for d in self.designations]}


@dataclass
class CleaningSchedule:
    """Hall cleaning turn for a group; ``publicadores`` holds roster ids or placeholder names."""

    grupo_id: str
    data_limpeza: str
    publicadores: list[str]
    observacoes: str | None = None

    def to_dict(self) -> dict:
        data = {
            "grupo_id": self.grupo_id,
            "data_limpeza": self.data_limpeza,
            "publicadores": list(self.publicadores),
        }
        if self.observacoes is not None:
            data["observacoes"] = self.observacoes
        return data


@dataclass
class CleaningData:
    schedules: list[CleaningSchedule] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"escalas": [schedule.to_dict() for schedule in self.schedules]}


@dataclass
class Talk:
    data: str
    orador: str
    tema: str
    cantico: str | None = None
    hospitalidade: str | None = None

    def to_dict(self) -> dict:
        return {
            "data": self.data,
            "orador": self.orador,
            "tema": self.tema,
            "cantico": self.cantico,
            "hospitalidade": self.hospitalidade,
        }


@dataclass
class TalksData:
    talks: list[Talk] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"discursos": [talk.to_dict() for talk in self.talks]}
