import pytest
from pydantic import ValidationError
from congregation_scheduler.validation.file_schemas.nvc_json import (
    SpecialEventMeetingJsonSchema,
    WeeklyMeetingJsonSchema,
    meeting_schema_for,
)
from congregation_scheduler.validation.file_schemas.person_json import PersonJsonSchema
from tests.validation.conftest import assert_error_for_field
from tests.validation.fixtures import meeting_data, person, special_event_data


@pytest.mark.unit
class TestWeeklyMeetingJsonSchema:
    def test_valid_defaults(self):
        meeting = WeeklyMeetingJsonSchema.model_validate(meeting_data())

        assert meeting.periodo == "6-12 de outubro"
        assert meeting.semana_visita_superintendente is False
        assert meeting.presidente == PersonJsonSchema(nome="Célio Horn", id="p-celio-horn")
        assert meeting.tesouros_palavra.joias_espirituais.referencia == "Is 58:13"
        assert meeting.tesouros_palavra.leitura_biblica.texto == "Is 58:1-14"
        assert len(meeting.faca_seu_melhor) == 1
        assert meeting.nossa_vida_crista[1].leitor.nome == "Loni"

    def test_optional_sections_may_be_absent(self):
        data = {"periodo": "6-12 de outubro", "semanaVisitaSuperintendente": False, "diaTerca": True}
        meeting = WeeklyMeetingJsonSchema.model_validate(data)

        assert meeting.presidente is None
        assert meeting.tesouros_palavra is None
        assert meeting.faca_seu_melhor is None

    @pytest.mark.parametrize("empty", [None, {}, ""])
    def test_falsy_optional_objects_are_absent(self, empty):
        data = meeting_data({"presidente": empty, "oracoes": empty, "tesourosPalavra": empty})
        meeting = WeeklyMeetingJsonSchema.model_validate(data)

        assert meeting.presidente is None
        assert meeting.oracoes is None
        assert meeting.tesouros_palavra is None

    def test_falsy_treasure_sub_parts_are_absent(self):
        treasures = {**meeting_data()["tesourosPalavra"], "joiasEspirituais": {}, "leituraBiblica": None}
        meeting = WeeklyMeetingJsonSchema.model_validate(meeting_data({"tesourosPalavra": treasures}))

        assert meeting.tesouros_palavra.joias_espirituais is None
        assert meeting.tesouros_palavra.leitura_biblica is None

    @pytest.mark.parametrize(
        "field", ["periodo", "semanaVisitaSuperintendente", "diaTerca"]
    )
    def test_required_fields(self, field):
        data = meeting_data()
        del data[field]

        with pytest.raises(ValidationError) as e:
            WeeklyMeetingJsonSchema.model_validate(data)

        assert_error_for_field(e.value.errors(), field)

    def test_person_without_id_is_accepted(self):
        meeting = WeeklyMeetingJsonSchema.model_validate(
            meeting_data({"presidente": {"nome": "Célio Horn"}})
        )
        assert meeting.presidente.id is None

    def test_nested_type_error_path(self):
        treasures = meeting_data()["tesourosPalavra"]
        treasures["joiasEspirituais"]["texto"] = 5

        with pytest.raises(ValidationError) as e:
            WeeklyMeetingJsonSchema.model_validate(meeting_data({"tesourosPalavra": treasures}))

        locs = [err["loc"] for err in e.value.errors()]
        assert ("tesourosPalavra", "joiasEspirituais", "texto") in locs

    def test_ministry_part_limit(self):
        parts = meeting_data()["facaSeuMelhor"] * 5

        with pytest.raises(ValidationError) as e:
            WeeklyMeetingJsonSchema.model_validate(meeting_data({"facaSeuMelhor": parts}))

        assert_error_for_field(e.value.errors(), "facaSeuMelhor", "no máximo 4 partes")

    def test_christian_life_part_limit(self):
        parts = meeting_data()["nossaVidaCrista"] * 2

        with pytest.raises(ValidationError) as e:
            WeeklyMeetingJsonSchema.model_validate(meeting_data({"nossaVidaCrista": parts}))

        assert_error_for_field(e.value.errors(), "nossaVidaCrista", "no máximo 3 partes")

    def test_empty_part_list_is_kept_for_the_cleaner(self):
        meeting = WeeklyMeetingJsonSchema.model_validate(meeting_data({"facaSeuMelhor": []}))
        assert meeting.faca_seu_melhor == []

    def test_ministry_helper_is_optional(self):
        part = {"tipo": "Discurso", "duracao": "5 min", "descricao": "th lição 7"}
        part["responsavel"] = person("Marta", "p-marta")
        meeting = WeeklyMeetingJsonSchema.model_validate(meeting_data({"facaSeuMelhor": [part]}))
        assert meeting.faca_seu_melhor[0].ajudante is None


@pytest.mark.unit
class TestSpecialEventMeetingJsonSchema:
    def test_only_event_is_required(self):
        meeting = SpecialEventMeetingJsonSchema.model_validate({"eventoEspecial": "Congresso"})

        assert meeting.evento_especial == "Congresso"
        assert meeting.periodo is None
        assert meeting.semana_visita_superintendente is False
        assert meeting.discarded_sections == []

    def test_null_program_fields_are_accepted(self):
        meeting = SpecialEventMeetingJsonSchema.model_validate(special_event_data())
        assert meeting.discarded_sections == []

    def test_wrongly_typed_scalars_are_ignored(self):
        meeting = SpecialEventMeetingJsonSchema.model_validate(
            special_event_data({"periodo": 12, "diaTerca": "sim"})
        )
        assert meeting.periodo is None
        assert meeting.dia_terca is False

    def test_collects_discarded_sections(self):
        data = meeting_data({"eventoEspecial": "Assembleia de circuito"})
        meeting = SpecialEventMeetingJsonSchema.model_validate(data)

        assert meeting.periodo == "6-12 de outubro"
        assert "presidente" in meeting.discarded_sections
        assert "nossaVidaCrista" in meeting.discarded_sections

    def test_event_must_be_string(self):
        with pytest.raises(ValidationError) as e:
            SpecialEventMeetingJsonSchema.model_validate({"eventoEspecial": 1})

        assert_error_for_field(e.value.errors(), "eventoEspecial")


@pytest.mark.unit
class TestMeetingSchemaFor:
    @pytest.mark.parametrize(
        "data, expected",
        [
            ({"eventoEspecial": "Congresso"}, SpecialEventMeetingJsonSchema),
            ({"eventoEspecial": 1}, SpecialEventMeetingJsonSchema),
            ({"eventoEspecial": ""}, WeeklyMeetingJsonSchema),
            ({"eventoEspecial": "   "}, WeeklyMeetingJsonSchema),
            ({"eventoEspecial": None}, WeeklyMeetingJsonSchema),
            ({}, WeeklyMeetingJsonSchema),
        ],
    )
    def test_picks_schema(self, data, expected):
        assert meeting_schema_for(data) is expected
