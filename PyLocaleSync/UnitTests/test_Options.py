import json
import os
import shutil
import tempfile
import unittest

from PyLocaleSync.Helpers.Tests import log_input_expected_result, log_test_name
from PyLocaleSync.Options import Options, default_settings
from PyLocaleSync.SettingsType import SettingsType

class TestOptions(unittest.TestCase):
    """Unit tests for the Options class"""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp(prefix='localesync-options-')

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_DefaultInitialization(self):
        log_test_name("Options defaults")
        options = Options()

        for key in ['max_attempts', 'backoff_time', 'max_backoff', 'max_jitter', 'request_delay', 'failure_marker']:
            with self.subTest(key=key):
                log_input_expected_result(key, default_settings[key], options.get(key))
                self.assertEqual(options.get(key), default_settings[key])

        self.assertEqual(options.get('provider_settings'), {})
        self.assertIsInstance(options.provider_settings, SettingsType)

    def test_InitializationWithDict(self):
        log_test_name("Options from dict")
        options = Options({
            'base_language': 'fr',
            'compare_languages': 'de, fr, es',
            'source_extensions': ['ts', '.TSX', '.vue'],
            'request_delay': None,
        })

        self.assertEqual(options.base_language, 'fr')
        self.assertListEqual(options.compare_languages, ['de', 'es'])
        self.assertListEqual(options.source_extensions, ['.ts', '.tsx', '.vue'])
        self.assertEqual(options.get('request_delay'), default_settings['request_delay'])

    def test_KeywordArguments(self):
        log_test_name("Options keyword arguments")
        options = Options({'locales_dir': 'locales'}, locales_dir='i18n', dry_run=True)
        self.assertEqual(options.locales_dir, 'i18n')
        self.assertTrue(options.get_bool('dry_run'))

    def test_DefaultsAreNotShared(self):
        log_test_name("Options defaults are copied")
        options = Options()
        options.provider_settings['Gemini'] = SettingsType({'model': 'test'})
        self.assertEqual(Options().get('provider_settings'), {})

    def test_ProviderSettings(self):
        log_test_name("Options provider settings")
        options = Options({
            'provider': 'OpenRouter',
            'model': 'test/model',
            'api_key': 'secret',
        })

        options.InitialiseProviderSettings('OpenRouter', SettingsType({'model': 'openrouter/auto', 'api_key': None, 'timeout': 120}))

        provider_settings = options.current_provider_settings
        log_input_expected_result('OpenRouter', 'test/model', provider_settings.get('model'))
        self.assertEqual(provider_settings.get('model'), 'test/model')
        self.assertEqual(provider_settings.get('api_key'), 'secret')
        self.assertEqual(provider_settings.get('timeout'), 120)
        self.assertNotIn('model', options)
        self.assertNotIn('api_key', options)

    def test_LoadSettings(self):
        log_test_name("Options LoadSettings")
        path = os.path.join(self.temp_dir, 'localesync.json')
        with open(path, 'w', encoding='utf-8') as file:
            json.dump({'version': 'v0.0.1', 'base_language': 'de', 'compare_languages': ['en', 'fr'], 'request_delay': 0.25}, file)

        options = Options()
        self.assertTrue(options.LoadSettings(path))

        self.assertEqual(options.base_language, 'de')
        self.assertListEqual(options.compare_languages, ['en', 'fr'])
        self.assertEqual(options.get_float('request_delay'), 0.25)
        self.assertEqual(options.version, default_settings['version'])

    def test_LoadSettingsMissingOrInvalid(self):
        log_test_name("Options LoadSettings invalid")
        options = Options()
        self.assertFalse(options.LoadSettings(os.path.join(self.temp_dir, 'missing.json')))

        path = os.path.join(self.temp_dir, 'broken.json')
        with open(path, 'w', encoding='utf-8') as file:
            file.write('{"base_language": ')

        self.assertFalse(options.LoadSettings(path))
        self.assertEqual(options.base_language, default_settings['base_language'])

if __name__ == '__main__':
    unittest.main()
