# tests/test_verse.py
#
# What it does:
# Tests the verse value types and the 'chapter:verse' parsers.
#
# How to run it:
#   pytest tests/test_verse.py

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from quran.translation.chapters import ChapterInfo
from quran.translation.verse import (
    InvalidRangeError,
    TextItem,
    VerseKey,
    VerseRange,
    parse_verse_key,
    parse_verse_range,
)


def test_verse_keys_order_by_chapter_then_verse():
    keys = [VerseKey(2, 1), VerseKey(1, 10), VerseKey(1, 2)]
    assert sorted(keys) == [VerseKey(1, 2), VerseKey(1, 10), VerseKey(2, 1)]


def test_verse_key_is_hashable_value():
    assert VerseKey(1, 1) == VerseKey(1, 1)
    assert len({VerseKey(1, 1), VerseKey(1, 1)}) == 1
    assert str(VerseKey(2, 255)) == "2:255"


def test_text_item_shortcuts():
    item = TextItem.of(3, 4, "text")
    assert item.key == VerseKey(3, 4)
    assert (item.chapter, item.verse) == (3, 4)


def test_verse_range_bounds():
    verse_range = VerseRange(1, 6, 2, 2, 4)
    assert verse_range.start == VerseKey(1, 6)
    assert verse_range.end == VerseKey(2, 2)
    assert verse_range.is_ordered()
    assert verse_range.covers(VerseKey(2, 1))
    assert not verse_range.covers(VerseKey(1, 5))
    assert str(verse_range) == "1:6-2:2"


@pytest.mark.parametrize("text, expected", [
    ("2:255", VerseKey(2, 255)),
    (" 1 : 7 ", VerseKey(1, 7)),
])
def test_parse_verse_key(text, expected):
    assert parse_verse_key(text) == expected


@pytest.mark.parametrize("text", ["", "2", "2:", "a:b", "0:1", "1:0", "1:2:3", None])
def test_parse_verse_key_rejects_malformed(text):
    with pytest.raises(InvalidRangeError):
        parse_verse_key(text)


@pytest.mark.parametrize("text, expected", [
    ("2:2", VerseRange(2, 2, 2, 2, 1)),
    ("1:1-7", VerseRange(1, 1, 1, 7, 7)),
    ("1:6-2:3", VerseRange(1, 6, 2, 3, 5)),
])
def test_parse_verse_range(text, expected):
    assert parse_verse_range(text, ChapterInfo([7, 3, 5])) == expected


@pytest.mark.parametrize("text", ["", "  ", "1:5-1:2", "1:1-8", "4:1", "1:1-x"])
def test_parse_verse_range_rejects_invalid(text):
    with pytest.raises(InvalidRangeError):
        parse_verse_range(text, ChapterInfo([7, 3, 5]))
