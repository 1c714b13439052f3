"""Export records to JSON files.

Files are written to a temporary sibling first and renamed into place, so a
failed export never leaves a truncated file behind.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from pydantic import TypeAdapter

from kafkaview.exceptions import ExportError
from kafkaview.models.core.records import ExportedRecord, KafkaRecord

logger = logging.getLogger(__name__)

_RECORDS_ADAPTER = TypeAdapter(list[ExportedRecord])


class FileExporter:
    """Writes one or many records as pretty-printed JSON."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory).expanduser()

    @property
    def directory(self) -> Path:
        return self._directory

    def default_record_path(self, record: KafkaRecord) -> Path:
        return self._directory / f"{record.topic}-{record.partition}-{record.offset}.json"

    def default_records_path(self) -> Path:
        stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        return self._directory / f"records-{stamp}.json"

    def write_record(
        self,
        record: KafkaRecord,
        path: Path | None = None,
        *,
        search_query: str = "",
    ) -> Path:
        """Export a single record.

        Raises:
            ExportError: The file could not be written.
        """
        path = path or self.default_record_path(record)
        payload = record.export(search_query).model_dump_json(indent=2)
        return self._write_atomic(path, payload.encode())

    def write_records(
        self,
        records: Sequence[KafkaRecord],
        path: Path | None = None,
        *,
        search_query: str = "",
    ) -> Path:
        """Export a list of records as a JSON array.

        Raises:
            ExportError: The file could not be written.
        """
        path = path or self.default_records_path()
        exported = [record.export(search_query) for record in records]
        return self._write_atomic(path, _RECORDS_ADAPTER.dump_json(exported, indent=2))

    def _write_atomic(self, path: Path, payload: bytes) -> Path:
        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            logger.warning("Export to %s failed: %s", path, exc)
            raise ExportError(f"Cannot write {path}: {exc}") from exc
        logger.info("Exported %d bytes to %s", len(payload), path)
        return path


__all__ = ["FileExporter"]
