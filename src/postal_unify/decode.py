from __future__ import annotations

import csv
from typing import BinaryIO, Iterator

from postal_unify.errors import MalformedInputError

LEGACY_ENCODING = "cp932"


def _decode_lines(stream: BinaryIO, encoding: str, source: str) -> Iterator[str]:
    # 0x0A is never a cp932 trail byte, so splitting on it before decoding is safe.
    for number, raw in enumerate(stream, start=1):
        try:
            yield raw.decode(encoding)
        except UnicodeDecodeError as exc:
            raise MalformedInputError(f"cannot decode as {encoding}: {exc.reason}", source=source, line=number) from exc


def iter_rows(
    stream: BinaryIO,
    *,
    encoding: str = LEGACY_ENCODING,
    source: str = "<stream>",
) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(line_number, fields)`` for each CSV record in a legacy-encoded byte stream.

    Each physical line is decoded on its own so a bad byte is reported on the
    line that holds it. Decoding and quoting are both strict; the first problem
    aborts the read. Closing the stream stays with the caller.
    """
    reader = csv.reader(_decode_lines(stream, encoding, source), strict=True)
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            raise MalformedInputError(str(exc), source=source, line=reader.line_num) from exc
        if not row:
            continue
        yield reader.line_num, row
