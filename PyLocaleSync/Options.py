from __future__ import annotations
from collections.abc import Mapping
from copy import deepcopy
import json
import logging
import os
import dotenv

from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.SettingsType import SettingType, SettingsType
from PyLocaleSync.TranslationPrompt import default_instructions, default_prompt_template
from PyLocaleSync.version import __version__

default_config_file = 'localesync.json'

# Load environment variables from .env file
dotenv.load_dotenv()

def env_bool(key : str, default : bool = False) -> bool:
    var = os.getenv(key)
    if var is None:
        return default
    return str(var).strip().lower() in ('true', 'yes', '1')

def env_int(key : str, default : int|None = None) -> int|None:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return int(value)

def env_float(key : str, default : float|None = None) -> float|None:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return float(value)

def env_str(key : str, default : str|None = None) -> str|None:
    value = os.getenv(key)
    return str(value) if value is not None else default

def env_list(key : str, default : list[str]) -> list[str]:
    value = os.getenv(key)
    if value is None:
        return list(default)
    return [ item.strip() for item in value.split(',') if item.strip() ]

default_settings = {
    'version': __version__,
    'provider': env_str('PROVIDER', 'Gemini'),
    'provider_settings': SettingsType({}),
    'locales_dir': env_str('LOCALES_DIR', 'messages'),
    'source_dir': env_str('SOURCE_DIR', 'components'),
    'source_extensions': env_list('SOURCE_EXTENSIONS', ['.ts', '.tsx']),
    'exclude_dirs': env_list('EXCLUDE_DIRS', ['node_modules', '.git', '.next', 'dist', 'build']),
    'base_language': env_str('BASE_LANGUAGE', 'en'),
    'compare_languages': env_list('COMPARE_LANGUAGES', ['ar']),
    'generate_placeholders': env_bool('GENERATE_PLACEHOLDERS', True),
    'translate_orphans': env_bool('TRANSLATE_ORPHANS', True),
    'auto_translate': env_bool('AUTO_TRANSLATE', True),
    'create_missing_catalogs': env_bool('CREATE_MISSING_CATALOGS', False),
    'dry_run': env_bool('DRY_RUN', False),
    'max_threads': env_int('MAX_THREADS', 1),
    'max_attempts': env_int('MAX_ATTEMPTS', 3),
    'backoff_time': env_float('BACKOFF_TIME', 1.0),
    'max_backoff': env_float('MAX_BACKOFF', 10.0),
    'max_jitter': env_float('MAX_JITTER', 0.5),
    'request_delay': env_float('REQUEST_DELAY', 1.0),
    'failure_marker': env_str('FAILURE_MARKER', '[translation failed]'),
    'prompt_template': env_str('PROMPT_TEMPLATE', default_prompt_template),
    'instructions': env_str('INSTRUCTIONS', default_instructions),
}

class Options(SettingsType):
    def __init__(self, settings : SettingsType|Mapping[str, SettingType]|None = None, **kwargs : SettingType):
        """ Initialise the Options object with default options and any provided options. """
        super().__init__()

        self.update(deepcopy(default_settings))

        settings = SettingsType(settings)

        if settings:
            # Remove None values from options and merge with defaults
            filtered_settings = {k: deepcopy(v) for k, v in settings.items() if v is not None}
            self.update(filtered_settings)

        # Apply any explicit parameters
        self.update(kwargs)

    @property
    def version(self) -> str:
        return self.get_str('version') or ''

    @property
    def provider(self) -> str:
        """ the name of the translation provider """
        return self.get_str('provider') or ''

    @provider.setter
    def provider(self, value: str):
        self['provider'] = value

    @property
    def provider_settings(self) -> SettingsType:
        return self.get_dict('provider_settings')

    @property
    def current_provider_settings(self) -> SettingsType:
        return self.GetProviderSettings(self.provider)

    @property
    def locales_dir(self) -> str:
        return self.get_str('locales_dir') or 'messages'

    @property
    def source_dir(self) -> str:
        return self.get_str('source_dir') or '.'

    @property
    def source_extensions(self) -> list[str]:
        return [ ext.lower() if ext.startswith('.') else f".{ext.lower()}" for ext in self.get_str_list('source_extensions') ]

    @property
    def exclude_dirs(self) -> list[str]:
        return self.get_str_list('exclude_dirs')

    @property
    def base_language(self) -> str:
        return self.get_str('base_language') or 'en'

    @property
    def compare_languages(self) -> list[str]:
        """ Languages kept in sync with the base language, excluding the base language itself """
        return [ language for language in self.get_str_list('compare_languages') if language != self.base_language ]

    @property
    def failure_marker(self) -> str:
        return self.get_str('failure_marker') or str(default_settings['failure_marker'])

    def GetProviderSettings(self, provider : str) -> SettingsType:
        """ Get the settings for a specific provider """
        if not provider:
            return SettingsType()

        return deepcopy(SettingsType(self.provider_settings.get(provider) or {}))

    def InitialiseProviderSettings(self, provider : str, settings : SettingsType) -> None:
        """
        Create or update the settings for a provider, moving any matching top-level settings into it
        """
        provider_settings = self.provider_settings
        if provider not in provider_settings:
            provider_settings[provider] = SettingsType(deepcopy(settings))

        self.MoveSettingsToProvider(provider, list(settings.keys()))

    def MoveSettingsToProvider(self, provider : str, keys : list[str]) -> None:
        """
        Move settings from the main options to a provider's settings
        """
        provider_settings = self.provider_settings.get_dict(provider)

        settings_to_move : dict[str,SettingType] = {key: self.pop(key) for key in keys if key in self}
        if settings_to_move:
            provider_settings.update(settings_to_move)

    def LoadSettings(self, path : str|None = None) -> bool:
        """
        Load settings from a JSON project config file, if it exists
        """
        settings_path = path or default_config_file
        if not os.path.exists(settings_path):
            return False

        try:
            with open(settings_path, "r", encoding="utf-8") as settings_file:
                settings = json.load(settings_file)

            if not isinstance(settings, dict) or not settings:
                logging.warning(_("Settings file {path} does not contain any settings").format(path=settings_path))
                return False

            settings.pop('version', None)
            self.update(settings)

            logging.debug(f"Loaded settings from {settings_path}")
            return True

        except (OSError, json.JSONDecodeError) as e:
            logging.debug("Error loading settings from {}: {}".format(settings_path, e))
            logging.error(_("Error loading settings from {}").format(settings_path))
            return False
