"""
Composition root for the record stores.

``build_record_stores`` is the single place that creates stores.  The
caller owns the returned ``RecordStores`` and passes it to whatever
needs it; nothing in the package keeps a module-level store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from haccp.config import Settings, settings as default_settings
from haccp.logging_config import setup_logging
from haccp.repository import InMemoryRecordStore
from haccp.schemas import StorageControl, WasteControl

logger = logging.getLogger(__name__)


@dataclass
class RecordStores:
    storage: InMemoryRecordStore[StorageControl] = field(
        default_factory=lambda: InMemoryRecordStore[StorageControl]("storage")
    )
    waste: InMemoryRecordStore[WasteControl] = field(
        default_factory=lambda: InMemoryRecordStore[WasteControl]("waste")
    )


def build_record_stores(settings: Settings | None = None) -> RecordStores:
    cfg = settings or default_settings
    setup_logging(cfg.log_level, cfg.log_file)
    stores = RecordStores()
    logger.info("Record stores ready: %s, %s", stores.storage.name, stores.waste.name)
    return stores
