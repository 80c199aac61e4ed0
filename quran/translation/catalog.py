# quran/translation/catalog.py
#
# What it does:
# Holds the metadata the application keeps about each installed translation
# and turns a list of translation identifiers (database file names such as
# 'sahih.db') into the names shown to the reader.
#
# Lookups are exact string matches on the identifier. When a translation has
# no catalog entry yet (metadata not fetched or not stored), the identifier
# itself is shown instead.

import os
from dataclasses import dataclass
from typing import Dict, List, Optional

import yaml

from quran.translation.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TranslationMetadata:
    identifier: str
    name: str = ""
    translator: Optional[str] = None
    translator_foreign: Optional[str] = None
    url: str = ""
    language_code: Optional[str] = None
    version: int = 1
    id: Optional[int] = None

    @property
    def display_name(self) -> str:
        """The native-script translator name, then the translator, then the title."""
        for candidate in (self.translator_foreign, self.translator, self.name):
            if candidate:
                return candidate
        return self.identifier


def build_catalog(entries) -> Dict[str, TranslationMetadata]:
    """Keys metadata entries by identifier. A later duplicate replaces an earlier one."""
    catalog = {}
    for entry in entries:
        if entry.identifier in catalog:
            logger.warning(f"Duplicate catalog entry for '{entry.identifier}', keeping the last one.")
        catalog[entry.identifier] = entry
    return catalog


def load_catalog(path) -> Dict[str, TranslationMetadata]:
    """
    Reads a YAML catalog file of the form:

        translations:
          - identifier: sahih.db
            name: Sahih International
            translator: Saheeh International
            language_code: en

    Unknown keys in an entry are ignored.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Translation catalog not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"'{path}' must hold a mapping with a 'translations' list.")

    fields = set(TranslationMetadata.__dataclass_fields__)
    entries = []
    for raw in data.get('translations', []) or []:
        if not isinstance(raw, dict) or not raw.get('identifier'):
            raise ValueError(f"Catalog entry without an identifier in '{path}': {raw!r}")
        entries.append(TranslationMetadata(**{k: v for k, v in raw.items() if k in fields}))
    return build_catalog(entries)


def resolve_translation_names(identifiers, catalog) -> List[str]:
    """
    Maps each identifier to its catalog display name, in order.

    Args:
        identifiers (list[str]): Translation identifiers, possibly repeated.
        catalog (Mapping[str, TranslationMetadata]): Known translation metadata.

    Returns:
        list[str]: One name per identifier; the identifier itself when the
        catalog has no entry for it.
    """
    names = []
    for identifier in identifiers:
        metadata = catalog.get(identifier)
        if metadata is None:
            logger.debug(f"No catalog entry for '{identifier}', using the identifier as its name.")
            names.append(identifier)
        else:
            names.append(metadata.display_name)
    return names
