"""Shared data tables: lexicon, band tables and descriptors."""

from .lexicon import Lexicon, DEFAULT_LEXICON, DEFAULT_SYNONYMS, DEFAULT_STOP_WORDS
from .band_tables import DEFAULT_BAND_TABLES, LISTENING_BAND_TABLE, READING_BAND_TABLE
from .descriptors import band_descriptor

__all__ = [
    "Lexicon",
    "DEFAULT_LEXICON",
    "DEFAULT_SYNONYMS",
    "DEFAULT_STOP_WORDS",
    "DEFAULT_BAND_TABLES",
    "LISTENING_BAND_TABLE",
    "READING_BAND_TABLE",
    "band_descriptor",
]
