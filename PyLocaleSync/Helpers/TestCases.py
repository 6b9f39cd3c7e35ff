import os
import shutil
import tempfile
import unittest
from typing import Any

from PyLocaleSync.Helpers.Tests import read_json_file, write_json_file, write_text_file
from PyLocaleSync.LocaleSyncError import TranslationError
from PyLocaleSync.Options import Options
from PyLocaleSync.SettingsType import SettingsType
from PyLocaleSync.TranslationClient import TranslationClient
from PyLocaleSync.TranslationPrompt import TranslationPrompt
from PyLocaleSync.TranslationProvider import TranslationProvider

class DummyTranslationClient(TranslationClient):
    """
    Replays scripted responses instead of calling a translation service.

    `responses` is consumed in order, an exception in the list is raised instead of returned.
    Once it is exhausted `response_map` is consulted for the source text, and failing that
    the text is returned with the target language as a prefix.
    """
    def __init__(self, settings : SettingsType|dict):
        super().__init__(settings)
        data : dict[str, Any] = settings.get('data') or {}   # type: ignore[assignment]
        self.responses : list[Any] = list(data.get('responses', []))
        self.response_map : dict[str, str] = data.get('response_map', {})
        self.requests : list[TranslationPrompt] = []

    def _request_translation(self, prompt : TranslationPrompt) -> str|None:
        if not prompt.content:
            raise TranslationError("Translator did not receive a prompt")

        self.requests.append(prompt)

        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response

        if prompt.text in self.response_map:
            return self.response_map[prompt.text]

        return f"[{prompt.target_language}] {prompt.text}"

class DummyProvider(TranslationProvider):
    name = "Dummy Provider"

    def __init__(self, data : dict|None = None):
        super().__init__("Dummy Provider", SettingsType({
            "model": "dummy",
            "data": data or {},
        }))

    def GetTranslationClient(self, settings : SettingsType) -> TranslationClient:
        client_settings = self.settings.copy()
        client_settings.update(settings)
        return DummyTranslationClient(client_settings)

def CreateTestOptions(root : str, custom_options : dict|None = None) -> Options:
    """
    Options for a project in a temporary directory, with no delays between requests
    """
    options = SettingsType({
        'provider': 'Dummy Provider',
        'provider_settings': { 'Dummy Provider' : SettingsType() },
        'locales_dir': os.path.join(root, 'messages'),
        'source_dir': os.path.join(root, 'components'),
        'source_extensions': ['.ts', '.tsx'],
        'exclude_dirs': ['node_modules'],
        'base_language': 'en',
        'compare_languages': ['ar'],
        'generate_placeholders': True,
        'translate_orphans': True,
        'auto_translate': True,
        'create_missing_catalogs': False,
        'dry_run': False,
        'max_threads': 1,
        'max_attempts': 3,
        'backoff_time': 1.0,
        'max_backoff': 10.0,
        'max_jitter': 0.5,
        'request_delay': 0.0,
        'failure_marker': '[translation failed]',
    })

    if custom_options:
        options.update(custom_options)

    return Options(options)

class LocaleSyncTestCase(unittest.TestCase):
    """
    Base class for tests that need a project on disk, with a source tree and a catalog for each language
    """
    def setUp(self) -> None:
        self.root = tempfile.mkdtemp(prefix='localesync-test-')
        self.options = CreateTestOptions(self.root)

    def tearDown(self) -> None:
        shutil.rmtree(self.root, ignore_errors=True)

    @property
    def locales_dir(self) -> str:
        return self.options.locales_dir

    @property
    def source_dir(self) -> str:
        return self.options.source_dir

    def write_catalog(self, language : str, messages : dict) -> str:
        return write_json_file(os.path.join(self.locales_dir, f"{language}.json"), messages)

    def read_catalog(self, language : str) -> Any:
        return read_json_file(os.path.join(self.locales_dir, f"{language}.json"))

    def write_source(self, relative_path : str, text : str) -> str:
        return write_text_file(os.path.join(self.source_dir, relative_path), text)
