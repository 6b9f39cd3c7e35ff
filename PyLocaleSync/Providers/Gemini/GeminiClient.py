import logging

from google import genai
from google.genai import errors as genai_errors
from google.genai.types import (
    AutomaticFunctionCallingConfig,
    FinishReason,
    GenerateContentConfig,
    GenerateContentResponse,
    Part
)

from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.Helpers.Settings import GetStrSetting
from PyLocaleSync.LocaleSyncError import RateLimitedError, TranslationError, TranslationImpossibleError, TranslationResponseError
from PyLocaleSync.SettingsType import SettingsType
from PyLocaleSync.TranslationClient import TranslationClient
from PyLocaleSync.TranslationPrompt import TranslationPrompt

class GeminiClient(TranslationClient):
    """
    Handles communication with Google Gemini to request translations
    """
    def __init__(self, settings : SettingsType|dict):
        super().__init__(settings)

        if not self.api_key:
            raise TranslationImpossibleError(_("A Gemini API key is required"))

        logging.info(_("Translating with Gemini {model} model").format(
            model=self.model or _("default")
        ))

        self.client : genai.Client = genai.Client(api_key=self.api_key)
        self.automatic_function_calling: AutomaticFunctionCallingConfig = AutomaticFunctionCallingConfig(disable=True, maximum_remote_calls=None)

    @property
    def api_key(self) -> str|None:
        return GetStrSetting(self.settings, 'api_key')

    @property
    def model(self) -> str|None:
        return GetStrSetting(self.settings, 'model')

    def _request_translation(self, prompt : TranslationPrompt) -> str|None:
        """
        Request a translation based on the provided prompt
        """
        if not self.model:
            raise TranslationImpossibleError(_("No model specified"))

        logging.debug(f"Prompt:\n{prompt.content}")

        config = GenerateContentConfig(
            candidate_count=1,
            temperature=self.temperature,
            system_instruction=prompt.instructions,
            automatic_function_calling=self.automatic_function_calling
        )

        try:
            gcr : GenerateContentResponse = self.client.models.generate_content(
                model=self.model,
                contents=Part.from_text(text=prompt.content),
                config=config
                )

        except genai_errors.APIError as e:
            if e.code == 429:
                raise RateLimitedError(_("Gemini rate limit reached: {error}").format(error=e.message or str(e)), error=e)
            raise TranslationError(_("Gemini request failed ({code}): {error}").format(code=e.code, error=e.message or str(e)), error=e)

        if self.aborted:
            return None

        if not gcr:
            raise TranslationResponseError(_("No response from Gemini"), response=gcr)

        if gcr.prompt_feedback and gcr.prompt_feedback.block_reason:
            raise TranslationResponseError(_("Request was blocked by Gemini: {block_reason}").format(
                block_reason=str(gcr.prompt_feedback.block_reason)
            ), response=gcr)

        candidates = [candidate for candidate in gcr.candidates if candidate.content] if gcr.candidates else []
        if not candidates:
            raise TranslationResponseError(_("No valid candidates returned in the response"), response=gcr)

        candidate = candidates[0]
        if candidate.finish_reason not in (None, FinishReason.STOP):
            raise TranslationResponseError(_("Gemini response was incomplete: {reason}").format(
                reason=str(candidate.finish_reason)
            ), response=candidate)

        if not candidate.content or not candidate.content.parts:
            raise TranslationResponseError(_("Gemini response has no valid content parts"), response=candidate)

        return "\n".join(part.text for part in candidate.content.parts if part.text and not part.thought)
