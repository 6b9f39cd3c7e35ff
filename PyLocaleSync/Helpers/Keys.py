"""
Operations on nested message catalogs addressed by dotted keys.

A catalog is a tree of dicts whose leaves are messages. A dotted key such as
`greeting.morning` addresses the leaf reached by following each segment in turn.
All traversals use an explicit stack so deeply nested catalogs cannot exhaust
the interpreter's recursion limit.
"""
from typing import Any

import regex

KEY_SEPARATOR = '.'

_word_separators = regex.compile(r'[-_]')
_word_start = regex.compile(r'\b\w')

def SplitKey(key : str) -> list[str]:
    """
    Split a dotted key into its path segments
    """
    if not isinstance(key, str) or not key:
        raise ValueError(f"Invalid catalog key: {key!r}")

    return key.split(KEY_SEPARATOR)

def JoinKey(prefix : str, segment : str) -> str:
    return f"{prefix}{KEY_SEPARATOR}{segment}" if prefix else segment

def IsBranch(value : Any) -> bool:
    return isinstance(value, dict)

def FlattenCatalog(catalog : dict) -> dict[str, Any]:
    """
    Map every leaf in the catalog to its dotted key, depth first in the order keys were encountered.

    Empty branches contribute no keys.
    """
    flattened : dict[str, Any] = {}

    # Each frame is an iterator over a branch and the dotted prefix of that branch
    stack : list[tuple[Any, str]] = [ (iter(catalog.items()), '') ]
    while stack:
        items, prefix = stack[-1]
        entry = next(items, None)
        if entry is None:
            stack.pop()
            continue

        segment, value = entry
        key = JoinKey(prefix, str(segment))
        if IsBranch(value):
            stack.append((iter(value.items()), key))
        else:
            flattened[key] = value

    return flattened

def GetCatalogKeys(catalog : dict) -> list[str]:
    """
    Dotted keys of every leaf in the catalog, in traversal order
    """
    return list(FlattenCatalog(catalog).keys())

def UnflattenCatalog(flattened : dict[str, Any]) -> dict:
    """
    Rebuild a nested catalog from a mapping of dotted keys to leaf values
    """
    catalog : dict = {}
    for key, value in flattened.items():
        SetByPath(catalog, key, value)
    return catalog

def GetByPath(catalog : dict, key : str) -> Any|None:
    """
    Descend through the catalog following the dotted key.

    Returns None if any segment along the path is missing, never raises for a missing path.
    """
    current : Any = catalog
    for segment in SplitKey(key):
        if not IsBranch(current) or segment not in current:
            return None
        current = current[segment]
    return current

def SetByPath(catalog : dict, key : str, value : Any) -> None:
    """
    Assign a leaf value, creating intermediate branches as needed.

    A non-branch value found where a branch is required is replaced, so the write always succeeds.
    """
    segments = SplitKey(key)
    current = catalog
    for segment in segments[:-1]:
        child = current.get(segment)
        if not IsBranch(child):
            child = {}
            current[segment] = child
        current = child

    current[segments[-1]] = value

def HasKey(catalog : dict, key : str) -> bool:
    """
    True if the dotted key addresses a leaf in the catalog
    """
    value = GetByPath(catalog, key)
    return value is not None and not IsBranch(value)

def IsShapeConflict(catalog : dict, key : str) -> bool:
    """
    True if writing a leaf at the key would replace existing messages, either a
    branch at the key itself or a message at one of its parent segments
    """
    current : Any = catalog
    for segment in SplitKey(key):
        if not IsBranch(current):
            return current is not None
        current = current.get(segment)

    return IsBranch(current)

def HumaniseKey(key : str) -> str:
    """
    Derive a readable placeholder from a dotted key, e.g. `user_profile.first-name` -> `User Profile First Name`
    """
    words = []
    for segment in SplitKey(key):
        segment = _word_separators.sub(' ', segment)
        segment = _word_start.sub(lambda m: m.group(0).upper(), segment)
        words.append(segment)

    return ' '.join(words)
