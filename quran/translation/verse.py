# quran/translation/verse.py
#
# What it does:
# This module defines the value types shared by every alignment routine:
# verse keys, verse ranges and keyed text items. It also parses the usual
# "chapter:verse" notation (e.g. '2:255' or '1:1-7') into those types.
#
# How to use it:
#    from quran.translation.verse import VerseKey, TextItem, parse_verse_key
#    key = parse_verse_key("2:255")
#    item = TextItem.of(2, 255, "Allah - there is no deity except Him")

import re
from dataclasses import dataclass


class InvalidRangeError(ValueError):
    """Raised when a verse key or range falls outside the valid domain."""


@dataclass(frozen=True, order=True)
class VerseKey:
    chapter: int
    verse: int

    def __str__(self):
        return f"{self.chapter}:{self.verse}"


@dataclass(frozen=True)
class VerseRange:
    """
    A contiguous span of verses, possibly crossing chapter boundaries.

    `verse_count` is whatever the caller says it is. Nothing in this package
    recomputes it or relies on it to decide range membership.
    """
    start_chapter: int
    start_verse: int
    end_chapter: int
    end_verse: int
    verse_count: int

    @property
    def start(self):
        return VerseKey(self.start_chapter, self.start_verse)

    @property
    def end(self):
        return VerseKey(self.end_chapter, self.end_verse)

    def is_ordered(self):
        return self.start <= self.end

    def covers(self, key):
        """Bounds check only; does not consult chapter metadata."""
        return self.start <= key <= self.end

    def __str__(self):
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class TextItem:
    key: VerseKey
    text: str

    @classmethod
    def of(cls, chapter, verse, text):
        return cls(VerseKey(chapter, verse), text)

    @property
    def chapter(self):
        return self.key.chapter

    @property
    def verse(self):
        return self.key.verse


_KEY_PATTERN = re.compile(r'^\s*(\d+)\s*:\s*(\d+)\s*$')


def parse_verse_key(text):
    """
    Parses a key string like '2:255' into a VerseKey.

    Raises:
        InvalidRangeError: If the text is not 'chapter:verse' with both parts >= 1.
    """
    match = _KEY_PATTERN.match(text or '')
    if not match:
        raise InvalidRangeError(f"Could not parse verse key: '{text}'")
    chapter, verse = (int(part) for part in match.groups())
    if chapter < 1 or verse < 1:
        raise InvalidRangeError(f"Chapter and verse numbers are 1-based: '{text}'")
    return VerseKey(chapter, verse)


def parse_verse_range(text, chapters):
    """
    Parses a range string into a VerseRange with a computed verse count.

    Accepted forms:
        '2:255'      a single verse
        '1:1-7'      verses 1 to 7 of chapter 1
        '1:6-2:3'    across a chapter boundary

    Args:
        text (str): The range string.
        chapters: Chapter metadata used to count the verses in the range.

    Returns:
        VerseRange: The parsed range.
    """
    if text is None or not text.strip():
        raise InvalidRangeError("Empty verse range")

    start_text, sep, end_text = text.strip().partition('-')
    start = parse_verse_key(start_text)
    if not sep:
        end = start
    elif ':' in end_text:
        end = parse_verse_key(end_text)
    else:
        # '1:1-7' shorthand keeps the start chapter
        end = parse_verse_key(f"{start.chapter}:{end_text}")
    return chapters.make_range(start, end)
