import logging

from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.Helpers.Settings import GetFloatSetting, GetStrSetting
from PyLocaleSync.LocaleSyncError import TranslationAbortedError, TranslationResponseError
from PyLocaleSync.SettingsType import SettingsType
from PyLocaleSync.TranslationPrompt import TranslationPrompt

class TranslationClient:
    """
    Handles communication with the translation provider.

    A client makes exactly one request per call to Translate. Retrying is the
    responsibility of the caller, so providers must signal throttling by raising
    RateLimitedError and report any other failure as a TranslationError.
    """
    def __init__(self, settings : SettingsType|dict):
        self.settings: SettingsType = SettingsType(settings)
        self.aborted: bool = False

    @property
    def prompt_template(self) -> str|None:
        return GetStrSetting(self.settings, 'prompt_template')

    @property
    def instructions(self) -> str|None:
        return GetStrSetting(self.settings, 'instructions')

    @property
    def temperature(self) -> float:
        return GetFloatSetting(self.settings, 'temperature') or 0.0

    def BuildTranslationPrompt(self, text : str, source_language : str, target_language : str) -> TranslationPrompt:
        """
        Generate the prompt to translate a single message
        """
        return TranslationPrompt(text, source_language, target_language,
                                 prompt_template=self.prompt_template,
                                 instructions=self.instructions)

    def Translate(self, text : str, source_language : str, target_language : str) -> str:
        """
        Translate text from the source language to the target language
        """
        if self.aborted:
            raise TranslationAbortedError()

        prompt = self.BuildTranslationPrompt(text, source_language, target_language)

        translated = self._request_translation(prompt)

        if self.aborted:
            raise TranslationAbortedError()

        if not isinstance(translated, str) or not translated.strip():
            raise TranslationResponseError(_("Provider returned an empty translation"), response=translated)

        translated = translated.strip()
        logging.debug(f"Response: {translated}")
        return translated

    def AbortTranslation(self) -> None:
        self.aborted = True
        self._abort()

    def _request_translation(self, prompt : TranslationPrompt) -> str|None:
        """
        Make a request to the API to provide a translation
        """
        raise NotImplementedError

    def _abort(self) -> None:
        # Try to terminate ongoing requests
        pass
