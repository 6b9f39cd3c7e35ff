import os
import unittest
from unittest.mock import patch

from PyLocaleSync.Helpers.TestCases import LocaleSyncTestCase
from PyLocaleSync.Helpers.Tests import log_input_expected_result, log_test_name
from PyLocaleSync.KeyExtractor import ExtractKeysFromText, KeyExtractor
from PyLocaleSync.LocaleSyncError import ScanReadError

class TestExtractKeysFromText(unittest.TestCase):
    test_cases = [
        ('t("home.title")', {"home.title"}),
        ("t('home.title')", {"home.title"}),
        ("t(`home.title`)", {"home.title"}),
        ('t( "home.title" )', {"home.title"}),
        ('t ("home.title")', {"home.title"}),
        ('const label = i18n.t("nav.back");', {"nav.back"}),
        ('<p>{t("a.b")}</p><span>{t("c")}</span>', {"a.b", "c"}),
        ('t("a.b") + t("a.b")', {"a.b"}),
        ('path.split(".")', set()),
        ('format("x")', set()),
        ('start("x")', set()),
        ('$t("x")', set()),
        ('t(key)', set()),
        ('t("")', set()),
        ('t("a.b", { count: 2 })', set()),
        ('t("mismatched\')', set()),
    ]

    def test_ExtractKeysFromText(self):
        log_test_name("ExtractKeysFromText")
        for text, expected in self.test_cases:
            with self.subTest(text=text):
                result = ExtractKeysFromText(text)
                log_input_expected_result(text, expected, result)
                self.assertSetEqual(result, expected)

class TestKeyExtractor(LocaleSyncTestCase):
    def test_ExtractKeys(self):
        log_test_name("ExtractKeys")
        self.write_source("a.ts", 'export const title = t("home.title");\nconst x = t("shared");')
        self.write_source("nested/deeper/b.tsx", 'return <h1>{t("home.title")}</h1>; t(\'profile.name\')')
        self.write_source("c.js", 't("ignored.extension")')
        self.write_source("README.md", 't("ignored.readme")')

        extractor = KeyExtractor(self.options)
        result = extractor.ExtractKeys(self.source_dir)

        expected = {"home.title", "shared", "profile.name"}
        log_input_expected_result(self.source_dir, expected, result)
        self.assertSetEqual(result, expected)
        self.assertEqual(extractor.files_scanned, 2)
        self.assertListEqual(extractor.skipped_files, [])

    def test_DuplicateKeysAcrossFiles(self):
        log_test_name("DuplicateKeysAcrossFiles")
        self.write_source("a.ts", 'const first = t("x.y");\nconst second = t("x.y");')
        self.write_source("b.ts", 'export const label = t("x.y");')

        extractor = KeyExtractor(self.options)
        result = extractor.ExtractKeys(self.source_dir)

        log_input_expected_result("a.ts, b.ts", {"x.y"}, result)
        self.assertSetEqual(result, {"x.y"})
        self.assertEqual(len(result), 1)
        self.assertEqual(extractor.files_scanned, 2)

    def test_ExtensionsAreCaseInsensitive(self):
        log_test_name("ExtensionsAreCaseInsensitive")
        self.write_source("Upper.TSX", 't("upper.case")')

        result = KeyExtractor(self.options).ExtractKeys(self.source_dir)
        self.assertSetEqual(result, {"upper.case"})

    def test_ExcludedDirectories(self):
        log_test_name("ExcludedDirectories")
        self.write_source("app.ts", 't("app.key")')
        self.write_source("node_modules/lib/index.ts", 't("library.key")')

        extractor = KeyExtractor(self.options)
        result = extractor.ExtractKeys(self.source_dir)

        log_input_expected_result("node_modules", {"app.key"}, result)
        self.assertSetEqual(result, {"app.key"})
        self.assertEqual(extractor.files_scanned, 1)

    def test_MissingSourceDirectory(self):
        log_test_name("MissingSourceDirectory")
        extractor = KeyExtractor(self.options)
        result = extractor.ExtractKeys(os.path.join(self.root, "does-not-exist"))
        self.assertSetEqual(result, set())
        self.assertEqual(extractor.files_scanned, 0)

    def test_UnreadableFileIsSkipped(self):
        log_test_name("UnreadableFileIsSkipped")
        good_path = self.write_source("good.ts", 't("good.key")')
        bad_path = self.write_source("bad.ts", 't("bad.key")')

        extractor = KeyExtractor(self.options)
        original_read = extractor.ReadSourceFile

        def read_source(path : str) -> str:
            if path == bad_path:
                raise ScanReadError(path, error=PermissionError("Permission denied"))
            return original_read(path)

        with patch.object(extractor, 'ReadSourceFile', side_effect=read_source):
            result = extractor.ExtractKeys(self.source_dir)

        log_input_expected_result(bad_path, {"good.key"}, result)
        self.assertSetEqual(result, {"good.key"})
        self.assertListEqual(extractor.skipped_files, [bad_path])
        self.assertEqual(extractor.files_scanned, 1)
        self.assertTrue(os.path.exists(good_path))

    def test_InvalidEncodingIsSkipped(self):
        log_test_name("InvalidEncodingIsSkipped")
        self.write_source("good.ts", 't("good.key")')
        bad_path = os.path.join(self.source_dir, "binary.ts")
        with open(bad_path, 'wb') as file:
            file.write(b'\xff\xfe\xfa t("bad.key")')

        extractor = KeyExtractor(self.options)
        result = extractor.ExtractKeys(self.source_dir)

        self.assertSetEqual(result, {"good.key"})
        self.assertListEqual(extractor.skipped_files, [bad_path])

    def test_ParallelScan(self):
        log_test_name("ParallelScan")
        expected = set()
        for index in range(20):
            self.write_source(f"module{index}/file.ts", f't("module{index}.title")\nt("shared.key")')
            expected.add(f"module{index}.title")
        expected.add("shared.key")

        self.options['max_threads'] = 4
        extractor = KeyExtractor(self.options)
        result = extractor.ExtractKeys(self.source_dir)

        self.assertSetEqual(result, expected)
        self.assertEqual(extractor.files_scanned, 20)

if __name__ == '__main__':
    unittest.main()
