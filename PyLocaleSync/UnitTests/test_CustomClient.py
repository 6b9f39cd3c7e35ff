import json
import unittest

import httpx

from PyLocaleSync.Helpers.Tests import log_input_expected_error, log_input_expected_result, log_test_name
from PyLocaleSync.LocaleSyncError import RateLimitedError, TranslationError, TranslationResponseError
from PyLocaleSync.Providers.Custom.OpenRouterClient import OpenRouterClient
from PyLocaleSync.SettingsType import SettingsType

class TestOpenRouterClient(unittest.TestCase):
    def setUp(self):
        self.requests : list[httpx.Request] = []

    def _create_client(self, handler) -> OpenRouterClient:
        def record(request : httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        client = OpenRouterClient(SettingsType({
            'api_key': 'test-key',
            'model': 'test/model',
            'temperature': 0.2,
            'instructions': 'Translate UI text',
        }))
        client.client = httpx.Client(base_url=str(client.server_address), headers=client.headers, transport=httpx.MockTransport(record))
        return client

    def test_Translate(self):
        log_test_name("OpenRouter Translate")
        client = self._create_client(lambda request: httpx.Response(200, json={
            'choices': [ { 'message': { 'role': 'assistant', 'content': ' Bonjour \n' } } ]
        }))

        result = client.Translate("Hello", "en", "fr")

        log_input_expected_result("Hello", "Bonjour", result)
        self.assertEqual(result, "Bonjour")
        self.assertEqual(len(self.requests), 1)

        request = self.requests[0]
        self.assertEqual(request.url.path, "/api/v1/chat/completions")
        self.assertEqual(request.headers['Authorization'], "Bearer test-key")
        self.assertEqual(request.headers['X-Title'], "LocaleSync")

        body = json.loads(request.content)
        self.assertEqual(body['model'], 'test/model')
        self.assertEqual(body['temperature'], 0.2)
        self.assertEqual(body['messages'][0], { 'role': 'system', 'content': 'Translate UI text' })
        self.assertEqual(body['messages'][1]['role'], 'user')
        self.assertIn("Hello", body['messages'][1]['content'])
        self.assertIn("French", body['messages'][1]['content'])

    def test_RateLimited(self):
        log_test_name("OpenRouter RateLimited")
        client = self._create_client(lambda request: httpx.Response(429, headers={'Retry-After': '3'}, json={
            'error': { 'message': 'Too many requests' }
        }))

        with self.assertRaises(RateLimitedError) as context:
            client.Translate("Hello", "en", "fr")

        log_input_expected_error("429", RateLimitedError, context.exception)
        self.assertEqual(context.exception.retry_after, 3.0)
        self.assertIn("Too many requests", str(context.exception))

    def test_ServerError(self):
        log_test_name("OpenRouter ServerError")
        client = self._create_client(lambda request: httpx.Response(500, text="Internal error"))

        with self.assertRaises(TranslationResponseError) as context:
            client.Translate("Hello", "en", "fr")

        log_input_expected_error("500", TranslationResponseError, context.exception)
        self.assertNotIsInstance(context.exception, RateLimitedError)

    def test_NoChoices(self):
        log_test_name("OpenRouter NoChoices")
        client = self._create_client(lambda request: httpx.Response(200, json={ 'choices': [] }))

        with self.assertRaises(TranslationResponseError):
            client.Translate("Hello", "en", "fr")

    def test_EmptyContent(self):
        log_test_name("OpenRouter EmptyContent")
        client = self._create_client(lambda request: httpx.Response(200, json={
            'choices': [ { 'message': { 'role': 'assistant', 'content': '' } } ]
        }))

        with self.assertRaises(TranslationResponseError):
            client.Translate("Hello", "en", "fr")

    def test_NetworkError(self):
        log_test_name("OpenRouter NetworkError")

        def fail(request : httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        client = self._create_client(fail)

        with self.assertRaises(TranslationError) as context:
            client.Translate("Hello", "en", "fr")

        log_input_expected_error("ConnectError", TranslationError, context.exception)
        self.assertIsInstance(context.exception.error, httpx.ConnectError)

if __name__ == '__main__':
    unittest.main()
