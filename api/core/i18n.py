"""
Bilingual (Hebrew / English) text fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

HEBREW = "he"
ENGLISH = "en"


@dataclass(frozen=True)
class Bilingual:
    he: str | None
    en: str | None

    def select(self, lang: str | None) -> str | None:
        # Anything other than Hebrew falls back to English.
        return self.he if lang == HEBREW else self.en


def bilingual_field(row: dict[str, Any], name: str) -> Bilingual:
    """
    Build a `Bilingual` from the `<name>_he` / `<name>_en` columns of a row.
    """
    return Bilingual(he=row.get(f"{name}_he"), en=row.get(f"{name}_en"))


def localize(row: dict[str, Any], lang: str | None, *names: str) -> dict[str, Any]:
    """
    Return a new row where each bilingual column pair is replaced by a single
    `<name>` field in the requested language.
    """
    out = {k: v for k, v in row.items() if not any(k in (f"{n}_he", f"{n}_en") for n in names)}
    for name in names:
        out[name] = bilingual_field(row, name).select(lang)
    return out
