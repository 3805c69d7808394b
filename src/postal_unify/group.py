from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Generic, Protocol, Sequence, TypeVar

from postal_unify.records import GeneralAddressRecord

LOGGER = logging.getLogger(__name__)

OPENING_PARENS = ("(", "（")
CLOSING_PARENS = (")", "）")


class Keyed(Protocol):
    postal_code: str


R = TypeVar("R", bound=Keyed)


@dataclass
class Flush:
    rows: list[list[str]] = field(default_factory=list)
    flushed: bool = False


@dataclass
class GroupStats:
    records: int = 0
    groups: int = 0
    merged_groups: int = 0
    rows: int = 0


def is_split_label_tail(label: str) -> bool:
    """True when a label closes a parenthesis it never opened."""
    return label.endswith(CLOSING_PARENS) and not any(p in label for p in OPENING_PARENS)


def merge_split_labels(buffer: Sequence[GeneralAddressRecord]) -> list[GeneralAddressRecord]:
    """Collapse a group whose town label was split over several rows.

    KEN_ALL truncates long town labels and continues them on the following
    rows under the same postal code. When the last row of a group looks like
    the tail of such a label, the labels are joined in order onto a copy of the
    first record. Anything else is returned unchanged.
    """
    if len(buffer) < 2 or not is_split_label_tail(buffer[-1].label):
        return list(buffer)
    joined = "".join(record.label for record in buffer)
    LOGGER.debug("merged %d rows for %s: %s", len(buffer), buffer[0].postal_code, joined)
    return [replace(buffer[0], town=joined)]


class Grouper(Generic[R]):
    """Buffers consecutive records with the same postal code and projects them on key change."""

    def __init__(
        self,
        project: Callable[[R], list[str]],
        merge: Callable[[Sequence[R]], list[R]] | None = None,
    ) -> None:
        self.project = project
        self.merge = merge
        self.buffer: list[R] = []
        self.key = ""
        self.stats = GroupStats()

    def ingest(self, record: R) -> Flush:
        result = Flush()
        if self.buffer and record.postal_code != self.key:
            result = self._flush()
        self.buffer.append(record)
        self.key = record.postal_code
        self.stats.records += 1
        return result

    def finish(self) -> Flush:
        if not self.buffer:
            return Flush()
        return self._flush()

    def _flush(self) -> Flush:
        group = self.buffer
        emitted = self.merge(group) if self.merge is not None else group
        if len(emitted) < len(group):
            self.stats.merged_groups += 1
        rows = [self.project(record) for record in emitted]
        self.stats.groups += 1
        self.stats.rows += len(rows)
        self.buffer = []
        return Flush(rows=rows, flushed=True)
