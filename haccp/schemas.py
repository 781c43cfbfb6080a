from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, constr


class ControlRecord(BaseModel):
    """A HACCP control entry. Fields beyond ``id`` and ``date`` are kept as-is."""

    id: constr(min_length=1)
    date: dt.date

    model_config = ConfigDict(extra="allow", frozen=True)


class StorageControl(ControlRecord):
    pass


class WasteControl(ControlRecord):
    pass
