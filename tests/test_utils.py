import pytest
from congregation_scheduler import utils
from congregation_scheduler.models import Talk, TalksData
from congregation_scheduler.validation.results import CleanResult, ValidationResult


@pytest.mark.unit
class TestSummarizeResult:
    def test_invalid_validation_result(self):
        result = ValidationResult(valid=False, errors=["Discurso 1: tema é obrigatório"])

        assert utils.summarize_result("discursos", result) == [
            "[discursos] INVÁLIDO",
            "  erro: Discurso 1: tema é obrigatório",
        ]

    def test_clean_result_lists_records(self):
        talks = TalksData([Talk("2024-10-11", "Célio Horn", "Tema")])
        result = CleanResult(valid=True, warnings=["aviso qualquer"], cleaned_data=talks)

        assert utils.summarize_result("discursos", result) == [
            "[discursos] OK",
            "  aviso: aviso qualquer",
            "  1 registro(s)",
            "    - 2024-10-11 (Célio Horn)",
        ]

    def test_long_record_lists_are_truncated(self):
        talks = TalksData([Talk(f"2024-10-{i:02d}", "Orador", "Tema") for i in range(1, 26)])
        lines = utils.summarize_result("discursos", CleanResult(valid=True, cleaned_data=talks))

        assert lines[-1] == "    ... e mais 5"
        assert len([line for line in lines if line.startswith("    - ")]) == utils.MAX_RECORDS_LISTED

    def test_print_import_summary(self, capsys):
        utils.print_import_summary("nvc", ValidationResult(valid=True))
        assert capsys.readouterr().out == "[nvc] OK\n"
