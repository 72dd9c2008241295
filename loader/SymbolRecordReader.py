# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: SymbolRecordReader
# -----------------------------------------------------------------------------
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Iterator

from pydantic import ValidationError

from record.SymbolRecord import SymbolRecord
from utility.errors import DecodeError
from utility.logging_utils import get_class_logger


class SymbolRecordReader:
    """
    Reads SymbolRecords from a JSONL file, one object per line.

    Reading stops at the first empty line or at end of file. Any line that is
    not valid JSON, or does not match the record shape, raises DecodeError;
    nothing is skipped.
    """

    def __init__(self, path: str | Path, *, logger: logging.Logger | None = None) -> None:
        self.path = Path(path)
        self.logger = logger or get_class_logger(self.__class__)

    def __iter__(self) -> Iterator[SymbolRecord]:
        return self.iter_records()

    def iter_records(self) -> Iterator[SymbolRecord]:
        if not self.path.is_file():
            raise DecodeError("Input file not found", source=str(self.path))

        self.logger.info("Reading symbol records from '%s'", self.path)
        # Bytes in, decoded per line, so a bad UTF-8 sequence still has a line number
        with self.path.open("rb") as f:
            for record in read_records(f, source=str(self.path)):
                self.logger.debug("Decoded %s", record.short_preview())
                yield record


def read_records(lines: Iterable[str | bytes], *, source: str | None = None) -> Iterator[SymbolRecord]:
    """Decode records from an iterable of lines (binary or text file object, list of strings)."""
    for line_no, raw_line in enumerate(lines, start=1):
        if isinstance(raw_line, bytes):
            try:
                raw_line = raw_line.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeError(f"Line is not valid UTF-8: {e}", line_no=line_no, source=source) from e
        line = raw_line.strip()
        if not line:
            break
        yield decode_line(line, line_no=line_no, source=source)


def decode_line(line: str, *, line_no: int | None = None, source: str | None = None) -> SymbolRecord:
    try:
        obj = json.loads(line)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Bad JSON: {e}", line_no=line_no, source=source) from e

    if not isinstance(obj, dict):
        raise DecodeError(
            f"Expected a JSON object, got {type(obj).__name__}", line_no=line_no, source=source
        )

    try:
        return SymbolRecord.model_validate(obj)
    except ValidationError as e:
        raise DecodeError(
            f"Record shape mismatch: {e.error_count()} error(s): {e.errors(include_url=False)}",
            line_no=line_no,
            source=source,
        ) from e
