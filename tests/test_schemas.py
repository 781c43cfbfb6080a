from datetime import date

import pytest
from pydantic import ValidationError

from haccp.schemas import StorageControl, WasteControl


def test_extra_fields_are_kept_as_payload():
    record = StorageControl.model_validate(
        {"id": "s-1", "date": "2024-01-01", "temperature": 3.5, "unit": "fridge-2"}
    )
    assert record.date == date(2024, 1, 1)
    assert record.model_dump() == {
        "id": "s-1",
        "date": date(2024, 1, 1),
        "temperature": 3.5,
        "unit": "fridge-2",
    }


@pytest.mark.parametrize("payload", [{"date": "2024-01-01"}, {"id": "", "date": "2024-01-01"}, {"id": "w-1"}])
def test_id_and_date_are_required(payload):
    with pytest.raises(ValidationError):
        WasteControl.model_validate(payload)


def test_records_are_immutable():
    record = WasteControl(id="w-1", date=date(2024, 1, 1))
    with pytest.raises(ValidationError):
        record.id = "w-2"
