from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from postal_unify.errors import MalformedRowError
from postal_unify.normalize.kana import KanaNormalizer, normalize_kana
from postal_unify.normalize.label import suppress_sentinel_label

GENERAL_COLUMNS = (
    "jis_code",
    "old_postal_code",
    "postal_code",
    "prefecture_kana",
    "city_kana",
    "town_kana",
    "prefecture",
    "city",
    "town",
    "multi_code_town",
    "koaza_banchi",
    "has_chome",
    "multi_town_code",
    "update_status",
    "change_reason",
)

BUSINESS_COLUMNS = (
    "jis_code",
    "business_name_kana",
    "business_name",
    "prefecture",
    "city",
    "town",
    "street_detail",
    "postal_code",
    "old_postal_code",
    "handling_office",
    "individual_code_type",
    "multiple_code",
    "revision_code",
)


def _check_width(row: Sequence[str], columns: tuple[str, ...], schema: str, source: str, line: int | None) -> None:
    if len(row) != len(columns):
        raise MalformedRowError(
            f"{schema} row has {len(row)} columns, expected {len(columns)}",
            source=source,
            line=line,
        )


@dataclass(frozen=True)
class GeneralAddressRecord:
    """One row of KEN_ALL.CSV. ``town`` is the label used for grouping merges."""

    jis_code: str
    old_postal_code: str
    postal_code: str
    prefecture_kana: str
    city_kana: str
    town_kana: str
    prefecture: str
    city: str
    town: str
    multi_code_town: str
    koaza_banchi: str
    has_chome: str
    multi_town_code: str
    update_status: str
    change_reason: str

    @property
    def label(self) -> str:
        return self.town

    @classmethod
    def from_row(
        cls,
        row: Sequence[str],
        normalize: KanaNormalizer = normalize_kana,
        *,
        source: str = "<stream>",
        line: int | None = None,
    ) -> GeneralAddressRecord:
        _check_width(row, GENERAL_COLUMNS, "KEN_ALL", source, line)
        return cls(
            jis_code=row[0],
            old_postal_code=row[1],
            postal_code=row[2],
            prefecture_kana=normalize(row[3]),
            city_kana=normalize(row[4]),
            town_kana=normalize(row[5]),
            prefecture=normalize(row[6]),
            city=normalize(row[7]),
            town=suppress_sentinel_label(normalize(row[8])),
            multi_code_town=row[9],
            koaza_banchi=row[10],
            has_chome=row[11],
            multi_town_code=row[12],
            update_status=row[13],
            change_reason=row[14],
        )


@dataclass(frozen=True)
class BusinessAddressRecord:
    """One row of JIGYOSYO.CSV."""

    jis_code: str
    business_name_kana: str
    business_name: str
    prefecture: str
    city: str
    town: str
    street_detail: str
    postal_code: str
    old_postal_code: str
    handling_office: str
    individual_code_type: str
    multiple_code: str
    revision_code: str

    @classmethod
    def from_row(
        cls,
        row: Sequence[str],
        normalize: KanaNormalizer = normalize_kana,
        *,
        source: str = "<stream>",
        line: int | None = None,
    ) -> BusinessAddressRecord:
        _check_width(row, BUSINESS_COLUMNS, "JIGYOSYO", source, line)
        return cls(
            jis_code=row[0],
            business_name_kana=normalize(row[1]),
            business_name=normalize(row[2]),
            prefecture=normalize(row[3]),
            city=normalize(row[4]),
            town=normalize(row[5]),
            street_detail=normalize(row[6]),
            postal_code=row[7],
            old_postal_code=row[8],
            handling_office=row[9],
            individual_code_type=row[10],
            multiple_code=row[11],
            revision_code=row[12],
        )
