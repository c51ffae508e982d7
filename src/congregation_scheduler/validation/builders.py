"""Factory functions that turn validated import schemas into cleaned domain records."""

import uuid
from congregation_scheduler.constants import (
    CONGREGATION_STUDY_PART,
    DEFAULT_MEETING_TYPE,
    MECHANICS_ROLES,
    TEMP_ID_NAMESPACE,
    TEMP_ID_PREFIX,
)
from congregation_scheduler.models import (
    BibleReading,
    ChristianLifePart,
    CleaningSchedule,
    Comments,
    MechanicsDesignation,
    MeetingType,
    MinistryPart,
    Person,
    Prayers,
    Songs,
    SpiritualGems,
    Talk,
    Treasures,
    WeeklyMeeting,
)
from congregation_scheduler.validation.fields import ValidationContext
from congregation_scheduler.validation.file_schemas.discursos_json import TalkJsonSchema
from congregation_scheduler.validation.file_schemas.limpeza_json import (
    CleaningScheduleJsonSchema,
)
from congregation_scheduler.validation.file_schemas.mecanicas_json import (
    MechanicsDesignationJsonSchema,
)
from congregation_scheduler.validation.file_schemas.nvc_json import (
    ChristianLifePartJsonSchema,
    MinistryPartJsonSchema,
    SpecialEventMeetingJsonSchema,
    TreasuresJsonSchema,
    WeeklyMeetingJsonSchema,
)
from congregation_scheduler.validation.file_schemas.person_json import PersonJsonSchema
from congregation_scheduler.validation.helpers import collapse_whitespace, strip_accents
from congregation_scheduler.validation.parsers import parse_meeting_type, parse_portuguese_date
from congregation_scheduler.validation.results import CleaningLog



def build_person(
    raw: PersonJsonSchema | None, label: str, ctx: ValidationContext, log: CleaningLog
) -> Person | None:
    """
    Clean a person reference, resolving a missing id through the roster.

    A blank slot (no name, no id) becomes None. A name without an id is looked
    up by name; an unresolved name is kept with an empty id for the
    persistence layer to reconcile. An id without a name is looked up by id.

    A blank ``id`` that is present (rather than missing) marks a placeholder
    already kept by an earlier pass, so failing to resolve it again is quiet.
    """
    if raw is None:
        return None

    nome = collapse_whitespace(raw.nome)
    person_id = (raw.id or "").strip()
    kept_placeholder = raw.id is not None

    if not nome:
        if not person_id:
            return None
        entry = ctx.roster.find_by_id(person_id)
        if entry:
            log.warn(f'{label}: nome preenchido a partir do ID "{person_id}" → "{entry.nome}"')
            return Person(id=entry.id, nome=entry.nome)
        log.warn(f"{label}: pessoa sem nome foi removida")
        return None

    if not person_id:
        entry = ctx.roster.find_by_name(nome)
        if entry:
            person_id = entry.id
            log.warn(f'{label}: ID mapeado automaticamente para "{nome}" → "{entry.nome}"')
        elif not kept_placeholder:
            log.warn(f'{label}: pessoa "{nome}" não encontrada na lista de publicadores')

    return Person(id=person_id, nome=nome)


def _optional_text(value: str | None, label: str, field_name: str, log: CleaningLog) -> str | None:
    if value is None:
        return None
    text = collapse_whitespace(value)
    if not text:
        log.warn(f"{label}: {field_name} vazio definido como null")
        return None
    return text


def _normalized_date(value: str, label: str, field_name: str, ctx, log: CleaningLog) -> str:
    parsed = parse_portuguese_date(value, ctx.today)
    if parsed.fallback:
        log.warn(f'{label}: {field_name} "{value}" não reconhecida, usando a data de hoje ({parsed.value})')
    return parsed.value


def _temp_id(periodo: str, index: int) -> str:
    return f"{TEMP_ID_PREFIX}{uuid.uuid5(TEMP_ID_NAMESPACE, f'{periodo}|{index}')}"


def _meeting_ids(schema, index: int, periodo: str, ctx, log: CleaningLog) -> tuple[str, str]:
    label = f"Reunião {index}"

    meeting_id = (schema.id or "").strip()
    if not meeting_id:
        meeting_id = _temp_id(periodo, index)
        log.warn(f"{label}: ID foi gerado automaticamente")

    congregacao_id = (schema.congregacao_id or "").strip()
    if not congregacao_id:
        congregacao_id = ctx.congregacao_id
        if congregacao_id:
            log.warn(f"{label}: congregacao_id preenchido com a congregação padrão")
        elif schema.congregacao_id is None:
            # An explicit blank is what a previous pass left behind.
            log.warn(f"{label}: congregacao_id está vazio")

    return meeting_id, congregacao_id


def _is_congregation_study(tipo: str) -> bool:
    return strip_accents(CONGREGATION_STUDY_PART.casefold()) in strip_accents(tipo.casefold())


def _build_treasures(
    raw: TreasuresJsonSchema, label: str, ctx: ValidationContext, log: CleaningLog
) -> Treasures:
    gems = None
    if raw.joias_espirituais:
        gems = SpiritualGems(
            texto=collapse_whitespace(raw.joias_espirituais.texto),
            pergunta=collapse_whitespace(raw.joias_espirituais.pergunta),
            referencia=collapse_whitespace(raw.joias_espirituais.referencia),
            duracao=raw.joias_espirituais.duracao,
            responsavel=build_person(
                raw.joias_espirituais.responsavel, f"{label} (joiasEspirituais)", ctx, log
            ),
        )

    reading = None
    if raw.leitura_biblica:
        reading = BibleReading(
            texto=collapse_whitespace(raw.leitura_biblica.texto),
            duracao=raw.leitura_biblica.duracao,
            responsavel=build_person(
                raw.leitura_biblica.responsavel, f"{label} (leituraBiblica)", ctx, log
            ),
        )

    return Treasures(
        titulo=collapse_whitespace(raw.titulo),
        duracao=raw.duracao,
        responsavel=build_person(raw.responsavel, f"{label} (tesourosPalavra)", ctx, log),
        joias_espirituais=gems,
        leitura_biblica=reading,
    )


def _build_ministry_parts(
    parts: list[MinistryPartJsonSchema] | None, label: str, ctx, log: CleaningLog
) -> list[MinistryPart] | None:
    if parts is None:
        return None
    if not parts:
        log.warn(f"{label}: facaSeuMelhor vazio definido como null")
        return None

    cleaned = []
    for position, part in enumerate(parts):
        slot = f"{label} (facaSeuMelhor[{position}]"
        cleaned.append(
            MinistryPart(
                tipo=collapse_whitespace(part.tipo),
                duracao=part.duracao,
                descricao=collapse_whitespace(part.descricao),
                responsavel=build_person(part.responsavel, f"{slot}.responsavel)", ctx, log),
                ajudante=build_person(part.ajudante, f"{slot}.ajudante)", ctx, log),
            )
        )
    return cleaned


def _build_christian_life_parts(
    parts: list[ChristianLifePartJsonSchema] | None,
    label: str,
    overseer_visit: bool,
    ctx: ValidationContext,
    log: CleaningLog,
) -> list[ChristianLifePart] | None:
    if parts is None:
        return None
    if not parts:
        log.warn(f"{label}: nossaVidaCrista vazio definido como null")
        return None

    cleaned = []
    for position, part in enumerate(parts):
        tipo = collapse_whitespace(part.tipo)
        if overseer_visit and _is_congregation_study(tipo):
            # The circuit overseer's talk takes the study's slot that week.
            log.warn(
                f"{label}: {CONGREGATION_STUDY_PART} removido na semana de visita do superintendente"
            )
            continue

        slot = f"{label} (nossaVidaCrista[{position}]"
        cleaned.append(
            ChristianLifePart(
                tipo=tipo,
                duracao=part.duracao,
                conteudo=_optional_text(part.conteudo, slot + ")", "conteudo", log),
                responsavel=build_person(part.responsavel, f"{slot}.responsavel)", ctx, log),
                leitor=build_person(part.leitor, f"{slot}.leitor)", ctx, log),
            )
        )

    return cleaned or None


def build_weekly_meeting(
    index: int,
    raw: WeeklyMeetingJsonSchema | SpecialEventMeetingJsonSchema,
    ctx: ValidationContext,
    log: CleaningLog,
) -> WeeklyMeeting:
    """
    Convert a validated meeting week into a WeeklyMeeting.

    Args:
        index: 1-based position of the week in the import, used in messages
        raw: Validated meeting schema (regular week or special event)
        ctx: Validation context (roster, today, default congregation)
        log: Accumulator for warnings

    Returns:
        WeeklyMeeting with ids filled in and person references resolved
    """
    if isinstance(raw, SpecialEventMeetingJsonSchema):
        return build_special_event_meeting(index, raw, ctx, log)

    label = f"Reunião {index}"
    periodo = collapse_whitespace(raw.periodo)
    meeting_id, congregacao_id = _meeting_ids(raw, index, periodo, ctx, log)

    oracoes = None
    if raw.oracoes:
        oracoes = Prayers(
            inicial=build_person(raw.oracoes.inicial, f"{label} (oracoes.inicial)", ctx, log),
            final=build_person(raw.oracoes.final, f"{label} (oracoes.final)", ctx, log),
        )

    canticos = None
    if raw.canticos:
        canticos = Songs(
            inicial=raw.canticos.inicial,
            intermediario=raw.canticos.intermediario,
            final=raw.canticos.final,
        )

    comentarios = None
    if raw.comentarios:
        comentarios = Comments(iniciais=raw.comentarios.iniciais, finais=raw.comentarios.finais)

    return WeeklyMeeting(
        id=meeting_id,
        congregacao_id=congregacao_id,
        periodo=periodo,
        semana_visita_superintendente=raw.semana_visita_superintendente,
        dia_terca=raw.dia_terca,
        leitura_biblica=_optional_text(raw.leitura_biblica, label, "leituraBiblica", log),
        presidente=build_person(raw.presidente, f"{label} (presidente)", ctx, log),
        oracoes=oracoes,
        canticos=canticos,
        comentarios=comentarios,
        tesouros_palavra=(
            _build_treasures(raw.tesouros_palavra, label, ctx, log) if raw.tesouros_palavra else None
        ),
        faca_seu_melhor=_build_ministry_parts(raw.faca_seu_melhor, label, ctx, log),
        nossa_vida_crista=_build_christian_life_parts(
            raw.nossa_vida_crista, label, raw.semana_visita_superintendente, ctx, log
        ),
        evento_especial=None,
    )


def build_special_event_meeting(
    index: int, raw: SpecialEventMeetingJsonSchema, ctx: ValidationContext, log: CleaningLog
) -> WeeklyMeeting:
    label = f"Reunião {index}"
    evento = collapse_whitespace(raw.evento_especial)
    periodo = collapse_whitespace(raw.periodo)
    meeting_id, congregacao_id = _meeting_ids(raw, index, periodo, ctx, log)

    if raw.discarded_sections:
        sections = ", ".join(raw.discarded_sections)
        log.warn(f'{label}: evento especial "{evento}", programação ignorada ({sections})')

    return WeeklyMeeting(
        id=meeting_id,
        congregacao_id=congregacao_id,
        periodo=periodo,
        semana_visita_superintendente=raw.semana_visita_superintendente,
        dia_terca=raw.dia_terca,
        evento_especial=evento,
    )


def build_mechanics_designation(
    index: int,
    raw: MechanicsDesignationJsonSchema,
    ctx: ValidationContext,
    log: CleaningLog,
) -> MechanicsDesignation | None:
    """Convert a validated designation; returns None when it has no usable date."""
    label = f"Designação {index}"

    if not raw.data:
        log.warn(f"{label}: data inválida, designação ignorada")
        return None

    try:
        tipo_reuniao = parse_meeting_type(raw.tipo_reuniao)
    except ValueError:
        tipo_reuniao = MeetingType(DEFAULT_MEETING_TYPE)
        log.warn(f'{label}: tipo de reunião inválido, definido como "{DEFAULT_MEETING_TYPE}"')

    people = {
        slot: build_person(getattr(raw, slot), f"{label} ({slot})", ctx, log)
        for slot in MECHANICS_ROLES
    }

    return MechanicsDesignation(
        id=(raw.id or "").strip(),
        data=_normalized_date(raw.data, label, "data", ctx, log),
        tipo_reuniao=tipo_reuniao,
        **people,
    )


def build_cleaning_schedule(
    index: int,
    raw: CleaningScheduleJsonSchema,
    ctx: ValidationContext,
    log: CleaningLog,
) -> CleaningSchedule:
    """
    Convert a validated cleaning turn.

    Entries that are already roster ids are kept; names are resolved to ids and
    unresolved names are kept as placeholders so the publisher can be created
    when the schedule is saved. Only names split from free text warn when they
    stay unresolved: a list is the shape a previous pass already produced.
    """
    label = f"Escala {index}"

    publicadores = []
    for value in raw.publicadores:
        value = collapse_whitespace(value)
        if not value:
            continue
        if ctx.roster.find_by_id(value):
            publicadores.append(value)
            continue
        entry = ctx.roster.find_by_name(value)
        if entry:
            publicadores.append(entry.id)
        else:
            publicadores.append(value)
            if raw.publicadores_from_text:
                log.warn(f'{label}: publicador "{value}" não encontrado, mantido pelo nome')

    if not publicadores and (raw.publicadores_from_text or raw.publicadores):
        log.warn(f"{label}: nenhum publicador válido encontrado")

    grupo_id = (raw.grupo_id or "").strip()
    if raw.grupo_id is None:
        log.warn(f"{label}: grupo_id está vazio")

    return CleaningSchedule(
        grupo_id=grupo_id,
        data_limpeza=_normalized_date(raw.data_limpeza, label, "data_limpeza", ctx, log),
        publicadores=publicadores,
        observacoes=_optional_text(raw.observacoes, label, "observacoes", log),
    )


def build_talk(
    index: int, raw: TalkJsonSchema, ctx: ValidationContext, log: CleaningLog
) -> Talk:
    label = f"Discurso {index}"
    cantico = (raw.cantico or "").strip() or None
    return Talk(
        data=_normalized_date(raw.data, label, "data", ctx, log),
        orador=collapse_whitespace(raw.orador),
        tema=collapse_whitespace(raw.tema),
        cantico=cantico,
        hospitalidade=_optional_text(raw.hospitalidade, label, "hospitalidade", log),
    )
