"""
Quran Chapter Metadata
======================

Description:
------------
Provides the per-chapter verse counts that range iteration needs in order to
roll over from the last verse of one chapter to the first verse of the next.

The metadata is an injected object rather than a global table so that every
alignment routine can be exercised with a small synthetic chapter list. The
default table is the Madani mushaf (114 chapters, 6236 verses). A different
table can be supplied through a YAML file:

    verse_counts: [7, 286, 200, ...]
"""

import os
import yaml

from quran.translation.logger import get_logger
from quran.translation.verse import InvalidRangeError, VerseKey, VerseRange

logger = get_logger(__name__)

# Number of verses in each chapter of the Madani mushaf, chapter 1 first.
MADANI_VERSE_COUNTS = [
    7, 286, 200, 176, 120, 165, 206, 75, 129, 109,
    123, 111, 43, 52, 99, 128, 111, 110, 98, 135,
    112, 78, 118, 64, 77, 227, 93, 88, 69, 60,
    34, 30, 73, 54, 45, 83, 182, 88, 75, 85,
    54, 53, 89, 59, 37, 35, 38, 29, 18, 45,
    60, 49, 62, 55, 78, 96, 29, 22, 24, 13,
    14, 11, 11, 18, 12, 12, 30, 52, 52, 44,
    28, 28, 20, 56, 40, 31, 50, 40, 46, 42,
    29, 19, 36, 25, 22, 17, 19, 26, 30, 20,
    15, 21, 11, 8, 8, 19, 5, 8, 8, 11,
    11, 8, 3, 9, 5, 4, 7, 3, 6, 3,
    5, 4, 5, 6,
]


class ChapterInfo:
    """
    Verse counts for an ordered list of chapters (chapter 1 first).
    """
    def __init__(self, verse_counts):
        counts = list(verse_counts)
        if not counts:
            raise ValueError("ChapterInfo needs at least one chapter.")
        if any(not isinstance(c, int) or isinstance(c, bool) or c < 1 for c in counts):
            raise ValueError("Every chapter must have a positive integer verse count.")
        self._counts = counts
        # Absolute number of the verse preceding each chapter's first verse.
        self._offsets = []
        running = 0
        for count in counts:
            self._offsets.append(running)
            running += count
        self._total = running

    @classmethod
    def from_yaml(cls, path):
        """Loads chapter verse counts from a YAML file with a `verse_counts` list."""
        if not os.path.exists(path):
            raise FileNotFoundError(f"Chapter metadata file not found: {path}")
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        counts = data.get('verse_counts') if isinstance(data, dict) else None
        if not isinstance(counts, list):
            raise ValueError(f"'{path}' has no 'verse_counts' list.")
        logger.info(f"Loaded verse counts for {len(counts)} chapters from {path}")
        return cls(counts)

    @property
    def chapter_count(self):
        return len(self._counts)

    @property
    def total_verses(self):
        return self._total

    def verse_count(self, chapter):
        if not 1 <= chapter <= len(self._counts):
            raise InvalidRangeError(
                f"Chapter {chapter} is outside 1..{len(self._counts)}")
        return self._counts[chapter - 1]

    def contains(self, key):
        return (1 <= key.chapter <= len(self._counts)
                and 1 <= key.verse <= self._counts[key.chapter - 1])

    def validate(self, key):
        if not self.contains(key):
            raise InvalidRangeError(f"Verse {key} does not exist")

    def absolute_verse_number(self, key):
        """1-based position of the verse across the whole corpus."""
        self.validate(key)
        return self._offsets[key.chapter - 1] + key.verse

    def make_range(self, start, end):
        """
        Builds a VerseRange between two keys, counting the verses it spans.

        Raises:
            InvalidRangeError: If either key does not exist or start is after end.
        """
        self.validate(start)
        self.validate(end)
        if start > end:
            raise InvalidRangeError(f"Range start {start} is after its end {end}")
        count = self.absolute_verse_number(end) - self.absolute_verse_number(start) + 1
        return VerseRange(start.chapter, start.verse, end.chapter, end.verse, count)


def madani_chapters():
    return ChapterInfo(MADANI_VERSE_COUNTS)


def load_chapter_info(cfg=None):
    """
    Returns the chapter metadata named by `cfg.data.paths.chapters_file`, or
    the Madani table when the config does not name a file.
    """
    paths = getattr(getattr(cfg, 'data', None), 'paths', None)
    chapters_file = getattr(paths, 'chapters_file', None)
    if chapters_file:
        return ChapterInfo.from_yaml(chapters_file)
    return madani_chapters()
