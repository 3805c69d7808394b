from __future__ import annotations

from typing import Callable

import jaconv

KanaNormalizer = Callable[[str], str]

# Voiced marks h2z leaves behind when there is no letter to combine with.
LONE_SOUND_MARKS = str.maketrans({"ﾞ": "゛", "ﾟ": "゜"})


def normalize_kana(value: str | None) -> str:
    """Half-width katakana to full-width. Everything else is left as is."""
    if not value:
        return ""
    return jaconv.h2z(value, kana=True, ascii=False, digit=False).translate(LONE_SOUND_MARKS)
