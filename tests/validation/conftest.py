import pytest
from congregation_scheduler.validation.fields import ValidationContext


@pytest.fixture
def ctx(roster, today):
    return ValidationContext(roster=roster, today=today, congregacao_id="cong-1")


def assert_error_containing(errors, msg_substring):
    assert any(msg_substring in e for e in errors), {
        "expected_message": msg_substring,
        "all_errors": errors,
    }


def assert_warning_containing(warnings, msg_substring):
    assert any(msg_substring in w for w in warnings), {
        "expected_warning": msg_substring,
        "all_warnings": warnings,
    }


def assert_error_for_field(errors, field, msg_substring=None):
    """Check a raw pydantic error list (``ValidationError.errors()``) for a field."""
    matching = [e for e in errors if e["loc"] and e["loc"][0] == field]

    assert matching, {
        "expected_field": field,
        "all_errors": errors,
    }

    if msg_substring:
        assert any(msg_substring in e["msg"] for e in matching), {
            "expected_message": msg_substring,
            "matching_errors": matching,
            "all_errors": errors,
        }
