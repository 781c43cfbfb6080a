from datetime import date

import pytest

from haccp.results import DuplicateKey, NotFound, RecordStoreError, Result


def test_success_unwraps_to_value():
    result = Result.success("payload")
    assert result.ok
    assert result.error is None
    assert result.unwrap() == "payload"


def test_fail_unwrap_raises_with_error_kind():
    result = Result.fail(DuplicateKey("A"))
    assert not result.ok
    with pytest.raises(RecordStoreError, match=r"already exists with the given id \(A\)") as excinfo:
        result.unwrap()
    assert excinfo.value.error == DuplicateKey("A")


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (NotFound("X"), "No record exists with the given id (X)"),
        (NotFound(date(2024, 1, 1), "date"), "No record exists with the given date (2024-01-01)"),
        (DuplicateKey("B"), "Record already exists with the given id (B)"),
    ],
)
def test_error_messages_name_the_key(error, message):
    assert error.message == message
    assert str(RecordStoreError(error)) == message
