import logging
from typing import Any
import httpx

from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.Helpers.Parse import ParseDelayFromHeader, ParseErrorMessageFromText
from PyLocaleSync.Helpers.Settings import GetIntSetting, GetStrSetting
from PyLocaleSync.LocaleSyncError import RateLimitedError, TranslationError, TranslationImpossibleError, TranslationResponseError
from PyLocaleSync.SettingsType import SettingsType
from PyLocaleSync.TranslationClient import TranslationClient
from PyLocaleSync.TranslationPrompt import TranslationPrompt

class CustomClient(TranslationClient):
    """
    Handles communication with an OpenAI-compatible chat completions server
    """
    def __init__(self, settings : SettingsType|dict):
        super().__init__(settings)
        self.headers: dict[str, str] = {'Content-Type': 'application/json'}
        self.headers.update(self.settings.get_dict('additional_headers') or {})

        if self.api_key:
            self.headers['Authorization'] = f"Bearer {self.api_key}"

        if not self.server_address or not self.endpoint:
            raise TranslationImpossibleError(_("Server address or endpoint is not set"))

        self.client: httpx.Client = httpx.Client(base_url=self.server_address, follow_redirects=True, timeout=self.timeout, headers=self.headers)

        logging.info(_("Translating with server at {server_address}{endpoint}").format(
            server_address=self.server_address, endpoint=self.endpoint
        ))
        if self.model:
            logging.info(_("Using model: {model}").format(model=self.model))

    @property
    def server_address(self) -> str|None:
        return GetStrSetting(self.settings, 'server_address')

    @property
    def endpoint(self) -> str|None:
        return GetStrSetting(self.settings, 'endpoint')

    @property
    def api_key(self) -> str|None:
        return GetStrSetting(self.settings, 'api_key')

    @property
    def model(self) -> str|None:
        return GetStrSetting(self.settings, 'model')

    @property
    def timeout(self) -> int:
        return GetIntSetting(self.settings, 'timeout') or 120

    def _request_translation(self, prompt : TranslationPrompt) -> str|None:
        """
        Make a request to the server to provide a translation
        """
        request_body = self._generate_request_body(prompt)
        logging.debug(f"Request Body:\n{request_body}")

        try:
            result : httpx.Response = self.client.post(str(self.endpoint), json=request_body)

        except httpx.TimeoutException as e:
            raise TranslationError(_("Request to server timed out: {error}").format(error=str(e)), error=e)

        except httpx.HTTPError as e:
            raise TranslationError(_("Network error communicating with server: {error}").format(error=str(e)), error=e)

        if self.aborted:
            return None

        if result.status_code == 429:
            retry_after = ParseDelayFromHeader(result.headers.get('Retry-After'))
            raise RateLimitedError(_("Rate limit reached: {text}").format(
                text=ParseErrorMessageFromText(result.text) or result.reason_phrase
            ), retry_after=retry_after)

        if result.is_error:
            summary_text = ParseErrorMessageFromText(result.text) or result.text
            raise TranslationResponseError(_("Server error: {status_code} {text}").format(
                status_code=result.status_code, text=summary_text
            ), response=result)

        logging.debug(f"Response:\n{result.text}")

        try:
            content : dict[str, Any] = result.json()
        except ValueError as e:
            raise TranslationResponseError(_("Invalid response received from server"), response=result) from e

        choices = content.get('choices')
        if not choices:
            raise TranslationResponseError(_("No choices returned in the response"), response=result)

        choice = choices[0]
        message = choice.get('message') or {}
        return message.get('content') or choice.get('text')

    def _generate_request_body(self, prompt : TranslationPrompt) -> dict[str, Any]:
        request_body : dict[str, Any] = {
            'messages': prompt.messages,
            'temperature': self.temperature,
            'stream': False
        }

        if self.model:
            request_body['model'] = self.model

        return request_body

    def _abort(self) -> None:
        self.client.close()
        return super()._abort()
