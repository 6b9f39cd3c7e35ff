import json
import logging
import os

from PyLocaleSync.Helpers.Keys import IsBranch
from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.LocaleSyncError import CatalogError, CatalogNotFoundError, CatalogParseError
from PyLocaleSync.MessageCatalog import MessageCatalog
from PyLocaleSync.Options import Options

class CatalogStore:
    """
    Loads and saves the JSON message catalog for each language, stored as <locales_dir>/<language>.json
    """
    def __init__(self, options : Options):
        self.locales_dir : str = options.locales_dir
        self.create_missing : bool = options.get_bool('create_missing_catalogs', False)

    def GetCatalogPath(self, language : str) -> str:
        return os.path.join(self.locales_dir, f"{language}.json")

    def LoadCatalog(self, language : str, create_missing : bool|None = None) -> MessageCatalog:
        """
        Load the catalog for a language.

        Raises CatalogNotFoundError if the file does not exist (unless missing catalogs should be created)
        and CatalogParseError if it is not a JSON object tree.
        """
        path = self.GetCatalogPath(language)
        create_missing = self.create_missing if create_missing is None else create_missing

        if not os.path.exists(path):
            if not create_missing:
                raise CatalogNotFoundError(path)

            logging.info(_("Catalog {path} does not exist, starting with an empty catalog").format(path=path))
            return MessageCatalog(language, {}, path)

        messages = LoadCatalogFile(path)

        catalog = MessageCatalog(language, messages, path)
        logging.info(_("Loaded {count} messages for {language} from {path}").format(
            count=catalog.size, language=catalog.language_name, path=path
        ))
        return catalog

    def SaveCatalog(self, catalog : MessageCatalog) -> None:
        """
        Write the catalog back to its file
        """
        path = catalog.path or self.GetCatalogPath(catalog.language)
        SaveCatalogFile(path, catalog.messages)
        catalog.path = path
        catalog.modified = False
        logging.info(_("Saved {count} messages for {language} to {path}").format(
            count=catalog.size, language=catalog.language_name, path=path
        ))

def LoadCatalogFile(path : str) -> dict:
    """
    Read a JSON object tree from a file
    """
    try:
        with open(path, 'r', encoding='utf-8') as catalog_file:
            messages = json.load(catalog_file)

    except FileNotFoundError:
        raise CatalogNotFoundError(path)

    except json.JSONDecodeError as e:
        raise CatalogParseError(_("Catalog {path} is not valid JSON: {error}").format(path=path, error=str(e)), path, e)

    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(_("Unable to read catalog {path}: {error}").format(path=path, error=str(e)), path, e)

    if not IsBranch(messages):
        raise CatalogParseError(_("Catalog {path} must contain a JSON object, found {type}").format(
            path=path, type=type(messages).__name__
        ), path)

    return messages

def SaveCatalogFile(path : str, messages : dict) -> None:
    """
    Serialize a catalog as 2-space indented JSON, preserving key order
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as catalog_file:
        json.dump(messages, catalog_file, ensure_ascii=False, indent=2)
        catalog_file.write('\n')
