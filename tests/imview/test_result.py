import pytest

from imview.models import Err, LoadError, Ok


def test_ok_reports_success_and_unwraps_value():
    result = Ok(42)
    assert result.is_ok() is True
    assert result.is_err() is False
    assert result.unwrap() == 42
    assert result.unwrap_or(0) == 42


def test_err_reports_failure_and_raises_stored_error_on_unwrap():
    error = LoadError("x.png", "bad data")
    result = Err(error)
    assert result.is_ok() is False
    assert result.is_err() is True
    assert result.unwrap_or("fallback") == "fallback"

    with pytest.raises(LoadError) as excinfo:
        result.unwrap()
    assert excinfo.value is error


def test_results_are_immutable_and_comparable():
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(ValueError())
    with pytest.raises(AttributeError):
        Ok(1).value = 2  # type: ignore[misc]


def test_results_support_structural_matching():
    match Err(LoadError("x.png", "gone")):
        case Ok(value):
            pytest.fail(f"unexpected value {value!r}")
        case Err(error):
            assert error.path == "x.png"
