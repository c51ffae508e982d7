"""Shared test data factories for validation test suite.

These factories create default test data that can be customized via overrides.
Use the convention: call factory with defaults, only override what you're testing.

Every person in the defaults is resolved against the test roster in
tests/conftest.py, so cleaning the defaults produces no warnings.

Example:
    result = validate_and_clean_nvc(
        nvc_payload(meeting_data({"periodo": "13-19 de outubro"})), ctx
    )
"""


def person(nome: str, id: str | None = None) -> dict:
    """A person reference as the extractor emits it; ``id`` is left out unless given."""
    if id is None:
        return {"nome": nome}
    return {"nome": nome, "id": id}


def meeting_data(overrides: dict | None = None) -> dict:
    """Factory for a valid regular week of the midweek meeting program."""
    defaults = {
        "id": "week-1",
        "congregacao_id": "cong-1",
        "periodo": "6-12 de outubro",
        "leituraBiblica": "ISAÍAS 58-59",
        "presidente": person("Célio Horn", "p-celio-horn"),
        "oracoes": {
            "inicial": person("Vilson", "p-vilson"),
            "final": person("Matheus Fernandes", "p-matheus"),
        },
        "canticos": {"inicial": "80", "intermediario": "5", "final": "151"},
        "comentarios": {"iniciais": "1 min", "finais": "3 min"},
        "tesourosPalavra": {
            "titulo": "Anuncie o ano de boa vontade de Jeová",
            "duracao": "10 min",
            "responsavel": person("Célio", "p-celio"),
            "joiasEspirituais": {
                "texto": "Joias espirituais",
                "pergunta": "Que lição aprendemos?",
                "referencia": "Is 58:13",
                "duracao": "10 min",
                "responsavel": person("Vilson", "p-vilson"),
            },
            "leituraBiblica": {
                "texto": "Is 58:1-14",
                "duracao": "4 min",
                "responsavel": person("Matheus Fernandes", "p-matheus"),
            },
        },
        "facaSeuMelhor": [
            {
                "tipo": "Iniciando conversas",
                "duracao": "3 min",
                "descricao": "Testemunho informal",
                "responsavel": person("Marta", "p-marta"),
                "ajudante": person("Isolde", "p-isolde"),
            }
        ],
        "nossaVidaCrista": [
            {
                "tipo": "Necessidades locais",
                "duracao": "15 min",
                "conteudo": None,
                "responsavel": person("Célio", "p-celio"),
                "leitor": None,
            },
            {
                "tipo": "Estudo bíblico de congregação",
                "duracao": "30 min",
                "conteudo": "lfb lição 10",
                "responsavel": person("Célio Horn", "p-celio-horn"),
                "leitor": person("Loni", "p-loni"),
            },
        ],
        "eventoEspecial": None,
        "semanaVisitaSuperintendente": False,
        "diaTerca": False,
    }
    return {**defaults, **(overrides or {})}


def special_event_data(overrides: dict | None = None) -> dict:
    """Factory for a week replaced by a special event; every program field is null."""
    defaults = {
        "eventoEspecial": "Assembleia de circuito",
        "periodo": None,
        "leituraBiblica": None,
        "presidente": None,
        "oracoes": None,
        "canticos": None,
        "comentarios": None,
        "tesourosPalavra": None,
        "facaSeuMelhor": None,
        "nossaVidaCrista": None,
        "semanaVisitaSuperintendente": None,
        "diaTerca": None,
    }
    return {**defaults, **(overrides or {})}


def designation_data(overrides: dict | None = None) -> dict:
    """Factory for a valid mechanics designation."""
    defaults = {
        "id": "des-1",
        "data": "2024-10-05",
        "tipo_reuniao": "fim_semana",
        "presidente": person("Célio Horn", "p-celio-horn"),
        "leitor": person("Vilson", "p-vilson"),
        "indicador_entrada": person("Matheus Fernandes", "p-matheus"),
        "indicador_auditorio": None,
        "audio_video": person("Célio", "p-celio"),
        "volante": None,
        "palco": None,
    }
    return {**defaults, **(overrides or {})}


def cleaning_data(overrides: dict | None = None) -> dict:
    """Factory for a valid hall-cleaning turn."""
    defaults = {
        "grupo_id": "grupo-1",
        "data_limpeza": "2024-10-05",
        "publicadores": ["p-vilson", "p-loni"],
        "observacoes": "Trazer material de limpeza",
    }
    return {**defaults, **(overrides or {})}


def talk_data(overrides: dict | None = None) -> dict:
    """Factory for a valid public talk."""
    defaults = {
        "orador": "Célio Horn",
        "tema": "Obedecer a Deus é mesmo a melhor coisa a fazer?",
        "data": "2024-10-11",
        "cantico": None,
        "hospitalidade": "Família Fernandes",
    }
    return {**defaults, **(overrides or {})}


def nvc_payload(*meetings) -> dict:
    return {"nossa_vida_crista": list(meetings) if meetings else [meeting_data()]}


def mecanicas_payload(*designations) -> dict:
    return {
        "designacoes_mecanicas": list(designations) if designations else [designation_data()]
    }


def limpeza_payload(*schedules) -> dict:
    return {"escalas": list(schedules) if schedules else [cleaning_data()]}


def discursos_payload(*talks) -> dict:
    return {"discursos": list(talks) if talks else [talk_data()]}
