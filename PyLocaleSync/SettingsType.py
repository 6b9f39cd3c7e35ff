from __future__ import annotations
from collections.abc import Mapping
from typing import TypeAlias

BasicType: TypeAlias = str | int | float | bool | list[str] | None
SettingType: TypeAlias = BasicType | dict[str, 'SettingType'] | dict[str, 'SettingsType']

class SettingsType(dict[str, SettingType]):
    """
    Settings dictionary with restricted range of types allowed and type-safe getters
    """
    def __init__(self, settings : Mapping[str,SettingType]|None = None):
        if not isinstance(settings, SettingsType):
            settings = dict(settings or {})
        super().__init__(settings)

    def get_bool(self, key: str, default: bool|None = False) -> bool:
        from .Helpers.Settings import GetBoolSetting
        return GetBoolSetting(self, key, default)

    def get_int(self, key: str, default: int|None = None) -> int|None:
        from .Helpers.Settings import GetIntSetting
        return GetIntSetting(self, key, default)

    def get_float(self, key: str, default: float|None = None) -> float|None:
        from .Helpers.Settings import GetFloatSetting
        return GetFloatSetting(self, key, default)

    def get_str(self, key: str, default: str|None = None) -> str|None:
        from .Helpers.Settings import GetStrSetting
        return GetStrSetting(self, key, default)

    def get_str_list(self, key: str, default: list[str]|None = None) -> list[str]:
        from .Helpers.Settings import GetStringListSetting
        return GetStringListSetting(self, key, default or [])

    def get_dict(self, key: str) -> SettingsType:
        """Get a nested settings dictionary, storing it back so that changes are retained"""
        value = self.get(key)
        if value is None:
            value = SettingsType()
            self[key] = value
            return value

        if isinstance(value, SettingsType):
            return value

        if isinstance(value, dict):
            settings = SettingsType(value)
            self[key] = settings
            return settings

        raise TypeError(f"Expected dict for key '{key}', got {type(value).__name__}")

    def update(self, other=(), /, **kwds) -> None:
        """Update settings, filtering out None values"""
        if hasattr(other, 'items'):
            other = {k: v for k, v in dict(other).items() if v is not None}
        kwds = {k: v for k, v in kwds.items() if v is not None}
        super().update(other, **kwds)

    def copy(self) -> SettingsType:
        return SettingsType(dict(self))
