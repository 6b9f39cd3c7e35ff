import logging
import os
from concurrent.futures import ThreadPoolExecutor

import regex

from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.LocaleSyncError import ScanReadError
from PyLocaleSync.Options import Options

# t("key"), t('key') or t(`key`), also as a member call such as i18n.t("key")
translation_call_pattern = regex.compile(r"""(?<![\w$])t\s*\(\s*(?P<quote>["'`])(?P<key>(?:(?!(?P=quote)).)+)(?P=quote)\s*\)""")

def ExtractKeysFromText(text : str) -> set[str]:
    """
    Find the literal keys passed to the translation function in a block of source code
    """
    keys = set()
    for match in translation_call_pattern.finditer(text):
        key = match.group('key').strip()
        if key:
            keys.add(key)
    return keys

class KeyExtractor:
    """
    Scans a source tree for translation keys referenced in code
    """
    def __init__(self, options : Options):
        self.extensions : tuple[str, ...] = tuple(options.source_extensions)
        self.exclude_dirs : set[str] = set(options.exclude_dirs)
        self.max_threads : int = max(1, options.get_int('max_threads') or 1)
        self.skipped_files : list[str] = []
        self.files_scanned : int = 0

    def ExtractKeys(self, root : str) -> set[str]:
        """
        Return the set of keys used in every matching source file under root
        """
        self.skipped_files = []
        self.files_scanned = 0

        if not os.path.isdir(root):
            logging.warning(_("Source directory {root} not found, no keys extracted").format(root=root))
            return set()

        paths = self.FindSourceFiles(root)

        keys : set[str] = set()
        if self.max_threads > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=self.max_threads) as executor:
                for file_keys in executor.map(self._scan_file, paths):
                    keys |= file_keys
        else:
            for path in paths:
                keys |= self._scan_file(path)

        self.files_scanned = len(paths) - len(self.skipped_files)

        logging.info(_("Found {keycount} translation keys in {filecount} source files").format(
            keycount=len(keys), filecount=self.files_scanned
        ))

        return keys

    def FindSourceFiles(self, root : str) -> list[str]:
        """
        List the source files under root that match the configured extensions
        """
        paths : list[str] = []
        stack : list[str] = [ root ]
        while stack:
            directory = stack.pop()
            try:
                with os.scandir(directory) as entries:
                    for entry in entries:
                        if entry.is_dir(follow_symlinks=False):
                            if entry.name not in self.exclude_dirs:
                                stack.append(entry.path)
                        elif entry.is_file() and self.IsSourceFile(entry.name):
                            paths.append(entry.path)

            except OSError as e:
                logging.warning(_("Unable to read directory {directory}: {error}").format(directory=directory, error=str(e)))

        return sorted(paths)

    def IsSourceFile(self, filename : str) -> bool:
        return filename.lower().endswith(self.extensions)

    def ReadSourceFile(self, path : str) -> str:
        try:
            with open(path, 'r', encoding='utf-8') as source_file:
                return source_file.read()

        except (OSError, UnicodeDecodeError) as e:
            raise ScanReadError(path, error=e)

    def _scan_file(self, path : str) -> set[str]:
        try:
            text = self.ReadSourceFile(path)

        except ScanReadError as e:
            logging.warning(_("Skipping {path}: {error}").format(path=path, error=str(e.error)))
            self.skipped_files.append(path)
            return set()

        keys = ExtractKeysFromText(text)
        if keys:
            logging.debug(f"{path}: {len(keys)} keys")
        return keys
