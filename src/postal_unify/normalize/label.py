from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

NO_LISTING_BELOW = "以下に掲載がない場合"
NUMBER_FOLLOWS_TOWN = "境町の次に番地がくる場合"
WHOLE_AREA = "一円"


@dataclass(frozen=True)
class LabelRule:
    name: str
    matches: Callable[[str], bool]
    replace: Callable[[str], str]


def _keep(label: str) -> str:
    return label


def _blank(label: str) -> str:
    return ""


# First match wins. "一円" at the start is a real place name, so it must be
# checked before the catch-all suffix rule.
LABEL_RULES: tuple[LabelRule, ...] = (
    LabelRule("whole_area_prefix", lambda s: s.startswith(WHOLE_AREA), _keep),
    LabelRule("no_listing_below", lambda s: s == NO_LISTING_BELOW, _blank),
    LabelRule("number_follows_town", lambda s: s == NUMBER_FOLLOWS_TOWN, _blank),
    LabelRule("whole_area_suffix", lambda s: s.endswith(WHOLE_AREA), _blank),
)


def match_label_rule(label: str, rules: tuple[LabelRule, ...] = LABEL_RULES) -> LabelRule | None:
    for rule in rules:
        if rule.matches(label):
            return rule
    return None


def suppress_sentinel_label(label: str | None, rules: tuple[LabelRule, ...] = LABEL_RULES) -> str:
    text = label or ""
    rule = match_label_rule(text, rules)
    if rule is None:
        return text
    return rule.replace(text)
