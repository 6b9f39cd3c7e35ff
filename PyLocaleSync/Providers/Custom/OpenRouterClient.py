from PyLocaleSync.Providers.Custom.CustomClient import CustomClient
from PyLocaleSync.SettingsType import SettingsType

class OpenRouterClient(CustomClient):
    """
    Handles chat communication with OpenRouter to request translations
    """
    def __init__(self, settings : SettingsType|dict):
        settings = SettingsType(settings)
        settings.setdefault('server_address', 'https://openrouter.ai/api/')
        settings.setdefault('endpoint', '/v1/chat/completions')
        settings.setdefault('additional_headers', {
            'X-Title': 'LocaleSync'
            })
        super().__init__(settings)
