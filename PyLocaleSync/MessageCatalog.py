from typing import Any

from PyLocaleSync.Helpers.Keys import FlattenCatalog, GetByPath, GetCatalogKeys, HasKey, IsShapeConflict, SetByPath
from PyLocaleSync.Helpers.Localization import get_language_name

class MessageCatalog:
    """
    The message tree for a single language
    """
    def __init__(self, language : str, messages : dict|None = None, path : str|None = None):
        self.language : str = language
        self.messages : dict = messages if messages is not None else {}
        self.path : str|None = path
        self.modified : bool = False

    @property
    def language_name(self) -> str:
        return get_language_name(self.language)

    @property
    def keys(self) -> list[str]:
        """ Dotted keys of every message, in catalog order """
        return GetCatalogKeys(self.messages)

    @property
    def flattened(self) -> dict[str, Any]:
        return FlattenCatalog(self.messages)

    @property
    def size(self) -> int:
        return len(self.keys)

    def GetMessage(self, key : str) -> Any|None:
        """
        Get the value at a dotted key, or None if there is no such key
        """
        return GetByPath(self.messages, key)

    def HasMessage(self, key : str) -> bool:
        return HasKey(self.messages, key)

    def ConflictsWith(self, key : str) -> bool:
        """
        True if the key cannot be added without overwriting messages already in the catalog
        """
        return IsShapeConflict(self.messages, key)

    def SetMessage(self, key : str, value : Any) -> None:
        """
        Write a value at a dotted key, creating intermediate branches as needed
        """
        SetByPath(self.messages, key, value)
        self.modified = True

    def __str__(self) -> str:
        return f"{self.language} ({self.size} messages)"

    def __repr__(self) -> str:
        return f"MessageCatalog({self.language!r}, path={self.path!r})"
