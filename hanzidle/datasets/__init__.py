from .validator import validate_vocabulary, pretty_summary
from .io import read_lines, read_table, write_lines
from .repository import VocabularyRepository, pinyin_letter_count, DATA_DIR

__all__ = [
    "validate_vocabulary", "pretty_summary", "read_lines", "read_table", "write_lines",
    "VocabularyRepository", "pinyin_letter_count", "DATA_DIR",
]
