import pytest

from jsonhome.errors import IncompatibleLinksError
from jsonhome.result import Failure, Success


def test_success_unwraps_value():
    assert Success(3).unwrap() == 3


def test_failure_unwrap_raises_carried_error():
    error = IncompatibleLinksError("conflict")
    with pytest.raises(IncompatibleLinksError) as exc_info:
        Failure(error).unwrap()
    assert exc_info.value is error


def test_results_support_pattern_matching():
    match Failure(IncompatibleLinksError("conflict")):
        case Success(value=value):
            pytest.fail(f"unexpected success {value}")
        case Failure(error=error):
            assert error.reason == "conflict"


def test_incompatible_links_error_without_links():
    error = IncompatibleLinksError("conflict")
    assert error.this is None
    assert error.other is None
    assert error.reason == "conflict"
