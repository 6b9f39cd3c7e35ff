import importlib.util
import logging
import os

if not importlib.util.find_spec("google"):
    logging.info("Google SDK (google-genai) is not installed. Gemini provider will not be available")
else:
    try:
        from PyLocaleSync.Helpers.Localization import _
        from PyLocaleSync.Options import env_float
        from PyLocaleSync.Providers.Gemini.GeminiClient import GeminiClient
        from PyLocaleSync.SettingsType import SettingsType
        from PyLocaleSync.TranslationClient import TranslationClient
        from PyLocaleSync.TranslationProvider import TranslationProvider

        class GeminiProvider(TranslationProvider):
            name = "Gemini"

            def __init__(self, settings : SettingsType|dict):
                super().__init__(self.name, {
                    "api_key": settings.get('api_key') or os.getenv('GEMINI_API_KEY') or os.getenv('GOOGLE_AI_API_KEY'),
                    "model": settings.get('model') or os.getenv('GEMINI_MODEL', 'gemini-2.5-flash'),
                    'temperature': settings.get('temperature', env_float('GEMINI_TEMPERATURE', 0.0)),
                })

            @property
            def api_key(self) -> str|None:
                return self.settings.get_str('api_key')

            def GetTranslationClient(self, settings : SettingsType) -> TranslationClient:
                client_settings = self.settings.copy()
                client_settings.update(settings)
                return GeminiClient(client_settings)

            def ValidateSettings(self) -> bool:
                """
                Validate the settings for the provider
                """
                if not self.api_key:
                    self.validation_message = _("API Key is required (set GEMINI_API_KEY or GOOGLE_AI_API_KEY)")
                    return False

                if not self.selected_model:
                    self.validation_message = _("No Gemini model selected")
                    return False

                return True

    except ImportError:
        logging.info("Latest Google AI SDK (google-genai) is not installed. Gemini provider will not be available. Run `pip install google-genai` to fix.")
