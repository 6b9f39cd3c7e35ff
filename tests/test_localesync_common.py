import os
import tempfile
import unittest
from unittest.mock import patch

from scripts.localesync_common import CreateArgParser, CreateOptions, CreateSynchroniser
from PyLocaleSync.LocaleSyncError import ProviderConfigurationError

class TestCommandLine(unittest.TestCase):
    def setUp(self):
        self.parser = CreateArgParser("Test parser")
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.temp_dir.name, 'missing.json')

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_CreateOptions(self):
        args = self.parser.parse_args([
            '--source', 'src', '--locales', 'locales', '--base', 'en',
            '--compare', 'ar,fr', '--compare', 'de',
            '--provider', 'OpenRouter', '--model', 'test/model',
            '--request-delay', '0.5', '--max-attempts', '5',
            '--no-orphans', '--dry-run',
        ])
        options = CreateOptions(args)

        self.assertEqual(options.source_dir, 'src')
        self.assertEqual(options.locales_dir, 'locales')
        self.assertListEqual(options.compare_languages, ['ar', 'fr', 'de'])
        self.assertEqual(options.provider, 'OpenRouter')
        self.assertEqual(options.get('model'), 'test/model')
        self.assertEqual(options.get_float('request_delay'), 0.5)
        self.assertEqual(options.get_int('max_attempts'), 5)
        self.assertFalse(options.get_bool('translate_orphans'))
        self.assertTrue(options.get_bool('dry_run'))
        self.assertTrue(options.get_bool('auto_translate'))

    def test_MissingConfigFile(self):
        args = self.parser.parse_args([ '--config', self.config_path ])
        with self.assertRaises(FileNotFoundError):
            CreateOptions(args)

    def test_NoTranslateNeedsNoProvider(self):
        args = self.parser.parse_args([ '--no-translate', '--provider', 'Nobody' ])
        options = CreateOptions(args)
        synchroniser = CreateSynchroniser(options)

        self.assertFalse(synchroniser.auto_translate)
        self.assertIsNone(synchroniser.translation_provider)

    def test_InvalidProviderSettings(self):
        args = self.parser.parse_args([ '--provider', 'OpenRouter', '--apikey', '' ])
        options = CreateOptions(args)
        options.pop('api_key', None)

        with patch.dict('os.environ', { 'OPENROUTER_API_KEY': '' }):
            with self.assertRaises(ProviderConfigurationError):
                CreateSynchroniser(options)

if __name__ == '__main__':
    unittest.main()
