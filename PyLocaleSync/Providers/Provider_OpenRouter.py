import os

from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.Options import env_float
from PyLocaleSync.Providers.Custom.OpenRouterClient import OpenRouterClient
from PyLocaleSync.SettingsType import SettingsType
from PyLocaleSync.TranslationClient import TranslationClient
from PyLocaleSync.TranslationProvider import TranslationProvider

class OpenRouterProvider(TranslationProvider):
    name = "OpenRouter"

    def __init__(self, settings : SettingsType|dict):
        super().__init__(self.name, {
            "api_key": settings.get('api_key') or os.getenv('OPENROUTER_API_KEY'),
            "server_address": settings.get('server_address') or os.getenv('OPENROUTER_SERVER_ADDRESS', "https://openrouter.ai/api/"),
            "model": settings.get('model') or os.getenv('OPENROUTER_MODEL', "openrouter/auto"),
            'temperature': settings.get('temperature', env_float('OPENROUTER_TEMPERATURE', 0.0)),
            'timeout': settings.get('timeout', 120),
        })

    @property
    def api_key(self) -> str|None:
        return self.settings.get_str('api_key')

    def GetTranslationClient(self, settings : SettingsType) -> TranslationClient:
        """ Returns a new instance of the OpenRouter client """
        client_settings = self.settings.copy()
        client_settings.update(settings)
        return OpenRouterClient(client_settings)

    def ValidateSettings(self) -> bool:
        if not self.api_key:
            self.validation_message = _("API Key is required (set OPENROUTER_API_KEY)")
            return False

        return True
