from __future__ import annotations
from pathlib import Path
import json
from typing import List, Sequence, TypedDict

from kivy.logger import Logger

NONE_MARK = "(none)"

class Example(TypedDict, total=False):
    en: str
    cn: str

class RelatedWord(TypedDict, total=False):
    word: str
    cn: str

class WordRecord(TypedDict, total=False):
    word: str
    phonetics: dict[str, str]
    meaning: str
    phrases: List[Example]
    sentences: List[Example]
    synonyms: List[RelatedWord]
    confusing: List[RelatedWord]

def load_catalog(json_path) -> list[WordRecord]:
    """Read the word list; order is significant because indices identify words.

    Accepts a plain list or ``{"words": [...]}``. Entries that are not objects
    are kept as empty records so later indices do not shift.
    """
    p = Path(json_path)
    if not p.exists():
        Logger.error(f"Catalog: word file not found: {p}")
        return []
    try:
        with open(p, "r", encoding="utf-8") as f:
            obj = json.load(f)
    except (OSError, ValueError) as e:
        Logger.error(f"Catalog: cannot read {p}: {e}")
        return []
    items = obj.get("words", []) if isinstance(obj, dict) else obj
    if not isinstance(items, list):
        Logger.error(f"Catalog: {p} does not contain a word list")
        return []
    out = [item if isinstance(item, dict) else {} for item in items]
    Logger.info(f"Catalog: loaded {len(out)} words from {p.name}")
    return out

def phonetics_line(record: WordRecord, order: Sequence[str] = ("uk", "us")) -> str:
    phon = record.get("phonetics") or {}
    if not isinstance(phon, dict):
        return ""
    parts = []
    for region in order:
        val = (phon.get(region) or "").strip()
        if val:
            parts.append(f"{region.upper()} {val}")
    return "   ".join(parts)

def _example_lines(items) -> list[str]:
    return [f"{(i.get('en') or '').strip()}\n{(i.get('cn') or '').strip()}".strip()
            for i in items if isinstance(i, dict)]

def _related_lines(items) -> list[str]:
    return [f"{(i.get('word') or '').strip()}  {(i.get('cn') or '').strip()}".strip()
            for i in items if isinstance(i, dict)]

def card_sections(record: WordRecord) -> list[tuple[str, list[str]]]:
    """Body of a word card as ``(title, lines)`` pairs.

    Missing or empty lists produce ``[NONE_MARK]`` instead of an empty section.
    """
    sections = [("Meaning", [(record.get("meaning") or "").strip() or NONE_MARK])]
    for title, key, fmt in (
        ("Phrases", "phrases", _example_lines),
        ("Sentences", "sentences", _example_lines),
        ("Synonyms", "synonyms", _related_lines),
        ("Confusable", "confusing", _related_lines),
    ):
        items = record.get(key)
        lines = fmt(items) if isinstance(items, list) else []
        sections.append((title, [l for l in lines if l] or [NONE_MARK]))
    return sections
