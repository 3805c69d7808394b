from __future__ import annotations

from postal_unify.records import BusinessAddressRecord, GeneralAddressRecord

UNIFIED_COLUMNS = (
    "jis_code",
    "old_postal_code",
    "postal_code",
    "prefecture_kana",
    "city_kana",
    "town_kana",
    "prefecture",
    "city",
    "town",
    "street_detail",
    "business_name",
    "business_name_kana",
    "multi_code_town",
    "koaza_banchi",
    "has_chome",
    "multi_town_code",
    "update_status",
    "change_reason",
    "handling_office",
    "individual_code_type",
    "multiple_code",
    "revision_code",
)

GENERAL_ONLY_COLUMNS = (
    "jis_code",
    "old_postal_code",
    "postal_code",
    "multi_code_town",
    "koaza_banchi",
    "has_chome",
    "multi_town_code",
    "update_status",
    "change_reason",
)
BUSINESS_ONLY_COLUMNS = (
    "prefecture_kana",
    "city_kana",
    "town_kana",
    "business_name",
    "business_name_kana",
    "handling_office",
    "individual_code_type",
    "multiple_code",
    "revision_code",
)

# isolated: every column range belongs to one schema.
# shared: general kana names and business identifiers are also written.
LAYOUTS = ("isolated", "shared")


def _check_layout(layout: str) -> None:
    if layout not in LAYOUTS:
        raise ValueError(f"unknown layout: {layout!r} (expected one of {', '.join(LAYOUTS)})")


def _to_row(values: dict[str, str]) -> list[str]:
    return [values.get(column) or "" for column in UNIFIED_COLUMNS]


def project_general(record: GeneralAddressRecord, layout: str = "isolated") -> list[str]:
    _check_layout(layout)
    values = {
        "jis_code": record.jis_code,
        "old_postal_code": record.old_postal_code,
        "postal_code": record.postal_code,
        "prefecture": record.prefecture,
        "city": record.city,
        "town": record.town,
        "multi_code_town": record.multi_code_town,
        "koaza_banchi": record.koaza_banchi,
        "has_chome": record.has_chome,
        "multi_town_code": record.multi_town_code,
        "update_status": record.update_status,
        "change_reason": record.change_reason,
    }
    if layout == "shared":
        values["prefecture_kana"] = record.prefecture_kana
        values["city_kana"] = record.city_kana
        values["town_kana"] = record.town_kana
    return _to_row(values)


def project_business(record: BusinessAddressRecord, layout: str = "isolated") -> list[str]:
    _check_layout(layout)
    values = {
        "prefecture": record.prefecture,
        "city": record.city,
        "town": record.town,
        "street_detail": record.street_detail,
        "business_name": record.business_name,
        "business_name_kana": record.business_name_kana,
        "handling_office": record.handling_office,
        "individual_code_type": record.individual_code_type,
        "multiple_code": record.multiple_code,
        "revision_code": record.revision_code,
    }
    if layout == "shared":
        values["jis_code"] = record.jis_code
        values["old_postal_code"] = record.old_postal_code
        values["postal_code"] = record.postal_code
    return _to_row(values)
