from __future__ import annotations

import csv
import logging
from dataclasses import asdict, dataclass
from functools import partial
from pathlib import Path
from typing import Any, BinaryIO, Callable, Sequence

import pandas as pd

from postal_unify.decode import LEGACY_ENCODING, iter_rows
from postal_unify.group import Grouper, merge_split_labels
from postal_unify.normalize.kana import KanaNormalizer, normalize_kana
from postal_unify.project import project_business, project_general
from postal_unify.records import BusinessAddressRecord, GeneralAddressRecord

LOGGER = logging.getLogger(__name__)

GENERAL_DATASET = "ken_all"
BUSINESS_DATASET = "jigyosyo"
STATS_COLUMNS = ["dataset", "source", "records", "groups", "merged_groups", "rows"]


@dataclass(frozen=True)
class ConvertSettings:
    ken_all_path: Path
    jigyosyo_path: Path | None
    output_path: Path
    input_encoding: str = LEGACY_ENCODING
    output_encoding: str = "utf-8"
    layout: str = "isolated"


@dataclass
class DatasetStats:
    dataset: str
    source: str
    records: int = 0
    groups: int = 0
    merged_groups: int = 0
    rows: int = 0


def open_writer(fh) -> Any:
    return csv.writer(fh, lineterminator="\n")


def _convert(
    dataset: str,
    stream: BinaryIO,
    writer: Any,
    grouper: Grouper,
    from_row: Callable[..., Any],
    *,
    encoding: str,
    source: str,
) -> DatasetStats:
    LOGGER.info("converting %s from %s", dataset, source)
    for line, row in iter_rows(stream, encoding=encoding, source=source):
        result = grouper.ingest(from_row(row, source=source, line=line))
        if result.flushed:
            writer.writerows(result.rows)
    writer.writerows(grouper.finish().rows)

    stats = DatasetStats(dataset=dataset, source=source, **asdict(grouper.stats))
    LOGGER.info(
        "%s: records=%d groups=%d merged_groups=%d rows=%d",
        dataset,
        stats.records,
        stats.groups,
        stats.merged_groups,
        stats.rows,
    )
    return stats


def convert_general(
    stream: BinaryIO,
    writer: Any,
    *,
    encoding: str = LEGACY_ENCODING,
    layout: str = "isolated",
    normalize: KanaNormalizer = normalize_kana,
    source: str = "KEN_ALL.CSV",
) -> DatasetStats:
    grouper: Grouper[GeneralAddressRecord] = Grouper(
        partial(project_general, layout=layout),
        merge=merge_split_labels,
    )
    from_row = partial(GeneralAddressRecord.from_row, normalize=normalize)
    return _convert(GENERAL_DATASET, stream, writer, grouper, from_row, encoding=encoding, source=source)


def convert_business(
    stream: BinaryIO,
    writer: Any,
    *,
    encoding: str = LEGACY_ENCODING,
    layout: str = "isolated",
    normalize: KanaNormalizer = normalize_kana,
    source: str = "JIGYOSYO.CSV",
) -> DatasetStats:
    grouper: Grouper[BusinessAddressRecord] = Grouper(partial(project_business, layout=layout))
    from_row = partial(BusinessAddressRecord.from_row, normalize=normalize)
    return _convert(BUSINESS_DATASET, stream, writer, grouper, from_row, encoding=encoding, source=source)


def run(settings: ConvertSettings, normalize: KanaNormalizer = normalize_kana) -> list[DatasetStats]:
    """Convert both datasets into ``settings.output_path``.

    Rows go to a sibling ``.tmp`` file that replaces the output only once every
    dataset has been converted, so a failed run leaves no half-written table.
    """
    output_path = Path(settings.output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = output_path.with_name(output_path.name + ".tmp")
    stats: list[DatasetStats] = []
    try:
        with tmp_path.open("w", encoding=settings.output_encoding, newline="") as out:
            writer = open_writer(out)
            with Path(settings.ken_all_path).open("rb") as fh:
                stats.append(
                    convert_general(
                        fh,
                        writer,
                        encoding=settings.input_encoding,
                        layout=settings.layout,
                        normalize=normalize,
                        source=str(settings.ken_all_path),
                    )
                )
            if settings.jigyosyo_path is not None:
                with Path(settings.jigyosyo_path).open("rb") as fh:
                    stats.append(
                        convert_business(
                            fh,
                            writer,
                            encoding=settings.input_encoding,
                            layout=settings.layout,
                            normalize=normalize,
                            source=str(settings.jigyosyo_path),
                        )
                    )
        tmp_path.replace(output_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return stats


def write_stats(stats: Sequence[DatasetStats], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame([asdict(item) for item in stats], columns=STATS_COLUMNS)
    df.to_csv(path, index=False, encoding="utf-8-sig", lineterminator="\r\n", quoting=csv.QUOTE_ALL)
