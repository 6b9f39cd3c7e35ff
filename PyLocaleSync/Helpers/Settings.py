"""
Type-safe settings retrieval and coercion functions.

Settings arrive from environment variables, JSON config files and the command
line, so values are frequently strings that need to be coerced to the type the
caller expects. Each getter raises SettingsError when that is impossible.
"""

from typing import Any, Mapping, overload

import regex

from PyLocaleSync.LocaleSyncError import SettingsError
from PyLocaleSync.SettingsType import SettingType, SettingsType

@overload
def GetBoolSetting(settings: SettingsType|Mapping[str, SettingType], key: str) -> bool: ...

@overload
def GetBoolSetting(settings: SettingsType|Mapping[str, SettingType], key: str, default: bool|None) -> bool: ...

def GetBoolSetting(settings: SettingsType|Mapping[str, SettingType], key: str, default: bool|None = False) -> bool:
    """
    Safely retrieve a boolean setting from a settings dictionary.

    Args:
        settings: The settings dictionary
        key: The setting key
        default: Default value if key is not present

    Returns:
        Boolean value of the setting

    Raises:
        SettingsError: If the setting cannot be converted to bool
    """
    value = settings.get(key, default)
    if value is None:
        return False

    if isinstance(value, bool):
        return value
    elif isinstance(value, int):
        return value != 0
    elif isinstance(value, str):
        lower_val = value.strip().lower()
        if lower_val in ('true', 'yes', '1', 'on'):
            return True
        elif lower_val in ('false', 'no', '0', 'off', ''):
            return False

    raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {repr(value)} to bool")


def GetIntSetting(settings: SettingsType|Mapping[str, SettingType], key: str, default: int|None = 0) -> int|None:
    """
    Safely retrieve an integer setting from a settings dictionary.

    Raises:
        SettingsError: If the setting cannot be converted to int
    """
    value = settings.get(key, default)
    if value is None:
        return None

    if isinstance(value, bool):
        raise SettingsError(f"Cannot convert setting '{key}' with boolean value {value} to int")

    if isinstance(value, (int, float)):
        return int(value)
    elif isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass

    raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {repr(value)} to int")


def GetFloatSetting(settings: SettingsType|Mapping[str, SettingType], key: str, default: float|None = None) -> float|None:
    """
    Safely retrieve a float setting from a settings dictionary.

    Raises:
        SettingsError: If the setting cannot be converted to float
    """
    value = settings.get(key, default)
    if value is None:
        return None

    if isinstance(value, bool):
        raise SettingsError(f"Cannot convert setting '{key}' with boolean value {value} to float")

    if isinstance(value, (int, float)):
        return float(value)
    elif isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass

    raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {repr(value)} to float")


def GetStrSetting(settings: SettingsType|Mapping[str, SettingType], key: str, default: str|None = None) -> str|None:
    """
    Safely retrieve a string setting from a settings dictionary.
    Lists are joined with commas, scalars are converted with str().
    """
    value = settings.get(key, default)
    if value is None:
        return None
    elif isinstance(value, str):
        return value
    elif isinstance(value, (int, float, bool)):
        return str(value)
    elif isinstance(value, list):
        return ', '.join(str(v) for v in value)

    raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} to str")


def GetListSetting(settings: SettingsType|Mapping[str, SettingType], key: str, default: list[Any]|None = None) -> list[Any]:
    """
    Safely retrieve a list setting from a settings dictionary.
    Strings are split on commas or semicolons.

    Raises:
        SettingsError: If the setting cannot be converted to list
    """
    value = settings.get(key, default)
    if value is None:
        return []

    if isinstance(value, list):
        return value
    elif isinstance(value, (tuple, set)):
        return list(value)
    elif isinstance(value, str):
        values = regex.split(r'[;,]', value)
        return [ v.strip() for v in values if v.strip() ]

    raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} to list")


def GetStringListSetting(settings: SettingsType|Mapping[str, SettingType], key: str, default: list[str]|None = None) -> list[str]:
    """
    Safely retrieve a list of strings, dropping empty entries.
    """
    value = GetListSetting(settings, key, default or [])
    return [ str(item).strip() for item in value if item is not None and str(item).strip() ]
