from .service import DictionaryService
from .cache import ExclusionSet, LookupCache

__all__ = ["DictionaryService", "ExclusionSet", "LookupCache"]
