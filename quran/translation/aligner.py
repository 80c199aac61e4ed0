"""
Quran Translation Aligner
=========================

Description:
------------
Combines the canonical (Arabic) text of a run of verses with any number of
parallel translations into one record per verse, and pads sparse translation
text so that every verse of a range has exactly one entry.

Data sources hand over already-loaded lists of `TextItem`s ordered by verse
key. Any of these lists may skip verses that have no text.

Usage:
------
    from quran.translation.aligner import TranslationAligner
    from quran.translation.verse import TextItem, VerseKey

    aligner = TranslationAligner()
    verse_range = aligner.chapters.make_range(VerseKey(1, 1), VerseKey(1, 2))
    records = aligner.combine_verse_data(
        verse_range,
        [TextItem.of(1, 1, "..."), TextItem.of(1, 2, "...")],
        [[TextItem.of(1, 1, "In the name of Allah ...")]],
    )
"""
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from quran.translation.catalog import resolve_translation_names
from quran.translation.chapters import madani_chapters
from quran.translation.logger import get_logger
from quran.translation.verse import InvalidRangeError, TextItem, VerseKey

logger = get_logger(__name__)


@dataclass(frozen=True)
class TranslatedVerseRecord:
    """
    One verse with its canonical text and one text per translation source.

    `canonical_text` is None when no canonical text was supplied for the verse,
    which is not the same as an empty canonical text. A translation source
    without text for the verse contributes "" in its slot.
    """
    key: VerseKey
    canonical_text: Optional[str]
    translation_texts: Tuple[str, ...]
    verse_id: Optional[int] = None

    @property
    def chapter(self):
        return self.key.chapter

    @property
    def verse(self):
        return self.key.verse

    @property
    def has_canonical_text(self):
        return self.canonical_text is not None


# --- 1. Range iteration ---

def _check_key(key, chapters, label):
    if not 1 <= key.chapter <= chapters.chapter_count:
        raise InvalidRangeError(
            f"Range {label} {key}: chapter is outside 1..{chapters.chapter_count}")
    last_verse = chapters.verse_count(key.chapter)
    if not 1 <= key.verse <= last_verse:
        raise InvalidRangeError(
            f"Range {label} {key}: chapter {key.chapter} has verses 1..{last_verse}")


def _walk(start, end, chapters):
    chapter, verse = start.chapter, start.verse
    while True:
        key = VerseKey(chapter, verse)
        yield key
        if key == end:
            return
        if verse < chapters.verse_count(chapter):
            verse += 1
        else:
            chapter, verse = chapter + 1, 1


def keys_in_range(verse_range, chapters) -> Iterator[VerseKey]:
    """
    Yields every verse key from the start of the range to its end, inclusive.

    The range is validated eagerly, before the iterator is returned, so a bad
    range never produces partial output. Each call returns a fresh iterator.

    Args:
        verse_range (VerseRange): The range to walk.
        chapters: Chapter metadata exposing `chapter_count` and `verse_count(chapter)`.

    Raises:
        InvalidRangeError: If an endpoint does not exist or start is after end.
    """
    start, end = verse_range.start, verse_range.end
    _check_key(start, chapters, 'start')
    _check_key(end, chapters, 'end')
    if start > end:
        raise InvalidRangeError(f"Range start {start} is after its end {end}")
    return _walk(start, end, chapters)


# --- 2. Gap filling ---

def _index_texts(items):
    """Maps each key to its text. The first item wins when a key repeats."""
    texts = {}
    for item in items:
        texts.setdefault(item.key, item.text)
    return texts


def ensure_dense_text(verse_range, sparse_items, chapters) -> List[TextItem]:
    """
    Returns one TextItem per verse of the range, in verse order.

    Verses missing from `sparse_items` get an empty text. Items outside the
    range are ignored. Feeding the result back in returns the same list.

    Raises:
        InvalidRangeError: Propagated from `keys_in_range`.
    """
    keys = keys_in_range(verse_range, chapters)
    texts = _index_texts(sparse_items)

    dense = []
    matched = 0
    for key in keys:
        text = texts.get(key)
        if text is None:
            dense.append(TextItem(key, ""))
        else:
            matched += 1
            dense.append(TextItem(key, text))

    if matched < len(texts):
        logger.debug(f"Ignored {len(texts) - matched} text item(s) outside {verse_range}.")
    logger.debug(f"Filled {len(dense) - matched} of {len(dense)} verse(s) in {verse_range} with empty text.")
    return dense


# --- 3. Merging canonical text with translations ---

def combine_verse_data(verse_range, canonical_items, translation_item_lists, chapters=None) -> List[TranslatedVerseRecord]:
    """
    Merges canonical text and N translation sources into per-verse records.

    Only verses that appear in at least one input list get a record; the
    range is never used to pad the output. Records are ordered by verse key.
    A reversed range or a negative verse count yields an empty list.

    Args:
        verse_range (VerseRange): Scopes the output; keys outside it are dropped.
        canonical_items (list[TextItem]): Canonical text, possibly sparse.
        translation_item_lists (list[list[TextItem]]): One list per translation source.
        chapters (ChapterInfo, optional): When given, records carry their absolute verse id.

    Returns:
        list[TranslatedVerseRecord]: One record per verse present in the inputs.
    """
    if not verse_range.is_ordered() or verse_range.verse_count < 0:
        logger.debug(f"Degenerate verse range {verse_range}; nothing to combine.")
        return []

    canonical = _index_texts(canonical_items)
    translations = [_index_texts(items) for items in translation_item_lists]

    present = set(canonical)
    for texts in translations:
        present.update(texts)
    keys = sorted(key for key in present if verse_range.covers(key))
    if len(keys) < len(present):
        logger.debug(f"Dropped {len(present) - len(keys)} verse(s) outside {verse_range}.")

    records = []
    for key in keys:
        verse_id = None
        if chapters is not None and chapters.contains(key):
            verse_id = chapters.absolute_verse_number(key)
        records.append(TranslatedVerseRecord(
            key=key,
            canonical_text=canonical.get(key),
            translation_texts=tuple(texts.get(key, "") for texts in translations),
            verse_id=verse_id,
        ))

    logger.debug(f"Combined {len(records)} verse(s) from {len(translations)} translation source(s).")
    return records


# --- 4. Facade ---

class TranslationAligner:
    """Binds one set of chapter metadata to the alignment routines."""

    def __init__(self, chapters=None):
        self.chapters = chapters if chapters is not None else madani_chapters()

    def keys_in_range(self, verse_range):
        return keys_in_range(verse_range, self.chapters)

    def ensure_dense_text(self, verse_range, sparse_items):
        return ensure_dense_text(verse_range, sparse_items, self.chapters)

    def combine_verse_data(self, verse_range, canonical_items, translation_item_lists):
        return combine_verse_data(verse_range, canonical_items, translation_item_lists, self.chapters)

    def translation_names(self, identifiers, catalog):
        return resolve_translation_names(identifiers, catalog)
