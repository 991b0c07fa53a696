"""Tests for loading words and building card content."""

import json

from GravityApp.models.catalog import NONE_MARK, card_sections, load_catalog, phonetics_line


def test_load_list(tmp_path):
    p = tmp_path / "words.json"
    p.write_text(json.dumps([{"word": "a"}, "junk", {"word": "b"}]), encoding="utf-8")
    words = load_catalog(p)
    assert [w.get("word") for w in words] == ["a", None, "b"]


def test_load_wrapped(tmp_path):
    p = tmp_path / "words.json"
    p.write_text(json.dumps({"words": [{"word": "a"}]}), encoding="utf-8")
    assert load_catalog(p) == [{"word": "a"}]


def test_missing_or_broken_file(tmp_path):
    assert load_catalog(tmp_path / "nope.json") == []
    p = tmp_path / "broken.json"
    p.write_text("{", encoding="utf-8")
    assert load_catalog(p) == []


def test_bundled_words_file():
    from GravityApp.config import RES_DIR

    words = load_catalog(RES_DIR / "words.json")
    assert len(words) == 25
    assert all(w.get("word") for w in words)


def test_phonetics_order():
    rec = {"phonetics": {"uk": "/a/", "us": "/b/"}}
    assert phonetics_line(rec) == "UK /a/   US /b/"
    assert phonetics_line(rec, order=("us", "uk")) == "US /b/   UK /a/"
    assert phonetics_line({"phonetics": {"us": "/b/"}}) == "US /b/"
    assert phonetics_line({}) == ""


def test_absent_lists_render_none_mark():
    sections = dict(card_sections({"word": "x", "meaning": "m", "phrases": []}))
    assert sections["Meaning"] == ["m"]
    for title in ("Phrases", "Sentences", "Synonyms", "Confusable"):
        assert sections[title] == [NONE_MARK]


def test_filled_sections():
    rec = {
        "word": "adapt",
        "meaning": "v. to adjust",
        "sentences": [{"en": "Adapt or die.", "cn": "适者生存"}],
        "confusing": [{"word": "adopt", "cn": "采纳"}],
    }
    sections = dict(card_sections(rec))
    assert sections["Sentences"] == ["Adapt or die.\n适者生存"]
    assert sections["Confusable"] == ["adopt  采纳"]
    assert [t for t, _ in card_sections(rec)] == ["Meaning", "Phrases", "Sentences", "Synonyms", "Confusable"]
