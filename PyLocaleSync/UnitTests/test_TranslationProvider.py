import unittest
from unittest.mock import patch

from PyLocaleSync.Helpers.TestCases import DummyProvider, DummyTranslationClient
from PyLocaleSync.Helpers.Tests import log_input_expected_result, log_test_name
from PyLocaleSync.LocaleSyncError import NoProviderError, ProviderError
from PyLocaleSync.Options import Options
from PyLocaleSync.SettingsType import SettingsType
from PyLocaleSync.TranslationProvider import TranslationProvider

class TestTranslationProvider(unittest.TestCase):
    def test_GetProviders(self):
        log_test_name("GetProviders")
        providers = TranslationProvider.get_providers()
        log_input_expected_result("providers", True, "OpenRouter" in providers)
        self.assertIn("OpenRouter", providers)
        self.assertIn("Dummy Provider", providers)

    def test_GetProvider(self):
        log_test_name("GetProvider")
        options = Options({ 'provider': 'Dummy Provider' })
        provider = TranslationProvider.get_provider(options)

        self.assertIsInstance(provider, DummyProvider)
        self.assertEqual(provider.selected_model, "dummy")

        client = provider.GetTranslationClient(SettingsType({ 'instructions': 'Test instructions' }))
        self.assertIsInstance(client, DummyTranslationClient)
        self.assertEqual(client.instructions, 'Test instructions')

    def test_UnknownProvider(self):
        log_test_name("UnknownProvider")
        with self.assertRaises(ProviderError):
            TranslationProvider.get_provider(Options({ 'provider': 'Nobody' }))

    def test_NoProvider(self):
        log_test_name("NoProvider")
        with self.assertRaises(NoProviderError):
            TranslationProvider.get_provider(Options({ 'provider': '' }))

    def test_OpenRouterSettings(self):
        log_test_name("OpenRouterSettings")
        with patch.dict('os.environ', { 'OPENROUTER_API_KEY': '' }):
            options = Options({ 'provider': 'OpenRouter', 'model': 'test/model', 'temperature': 0.3 })
            provider = TranslationProvider.get_provider(options)

            self.assertEqual(provider.name, "OpenRouter")
            self.assertEqual(provider.selected_model, "test/model")
            self.assertEqual(provider.settings.get_float('temperature'), 0.3)
            self.assertFalse(provider.ValidateSettings())
            self.assertIsNotNone(provider.validation_message)

            options = Options({ 'provider': 'OpenRouter', 'api_key': 'secret' })
            provider = TranslationProvider.get_provider(options)
            self.assertTrue(provider.ValidateSettings())

if __name__ == '__main__':
    unittest.main()
