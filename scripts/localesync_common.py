import os
import logging

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

from PyLocaleSync.Helpers.Parse import ParseLanguageList
from PyLocaleSync.Helpers.Resources import GetConfigPath, config_dir
from PyLocaleSync.LocaleSynchroniser import LocaleSynchroniser
from PyLocaleSync.LocaleSyncError import ProviderConfigurationError, ProviderError
from PyLocaleSync.Options import Options
from PyLocaleSync.TranslationProvider import TranslationProvider

@dataclass
class LoggerOptions():
    file_handler: logging.FileHandler|None
    log_path: str

def InitLogger(logfilename: str, debug: bool = False) -> LoggerOptions:
    """ Initialise the logger with a file handler and return the path to the log file """
    log_path = GetConfigPath(f"{logfilename}.log")
    file_handler = None

    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'INFO').upper()
        logging_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(format='%(levelname)s: %(message)s', encoding='utf-8', level=logging_level)

    if debug:
        logging.debug("Debug logging enabled")

    # Create file handler with the same logging level
    try:
        os.makedirs(config_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
        file_handler.setLevel(logging_level)
        file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logging.getLogger('').addHandler(file_handler)

    except OSError as e:
        logging.warning(f"Unable to create log file at {log_path}: {e}")

    return LoggerOptions(file_handler=file_handler, log_path=log_path)

def CreateArgParser(description : str) -> ArgumentParser:
    """
    Create the argument parser for the synchronisation command
    """
    parser = ArgumentParser(description=description)
    parser.add_argument('-s', '--source', type=str, default=None, help="Directory to scan for translation keys (default: components)")
    parser.add_argument('-d', '--locales', type=str, default=None, help="Directory containing the <language>.json catalogs (default: messages)")
    parser.add_argument('-b', '--base', type=str, default=None, help="The base language, whose catalog is the source of truth (default: en)")
    parser.add_argument('-l', '--compare', action='append', type=str, default=None, help="A language to keep in sync with the base language, may be repeated or comma separated (default: ar)")
    parser.add_argument('-p', '--provider', type=str, default=None, help="The translation provider to use (Gemini or OpenRouter)")
    parser.add_argument('-m', '--model', type=str, default=None, help="The model to use for translation")
    parser.add_argument('-k', '--apikey', type=str, default=None, help="API key for the translation provider")
    parser.add_argument('-c', '--config', type=str, default=None, help="Path to a JSON project config file (default: localesync.json)")
    parser.add_argument('--extension', action='append', type=str, default=None, help="A source file extension to scan, may be repeated (default: .ts, .tsx)")
    parser.add_argument('--exclude', action='append', type=str, default=None, help="A directory name to skip when scanning, may be repeated")
    parser.add_argument('--no-translate', dest='no_translate', action='store_true', help="Report missing keys and add placeholders without translating")
    parser.add_argument('--no-placeholders', dest='no_placeholders', action='store_true', help="Do not add placeholders for keys used in code")
    parser.add_argument('--no-orphans', dest='no_orphans', action='store_true', help="Do not translate keys that only exist in a compare catalog back into the base catalog")
    parser.add_argument('--create-missing', dest='create_missing', action='store_true', default=None, help="Start from an empty catalog if a compare catalog does not exist")
    parser.add_argument('--dry-run', dest='dry_run', action='store_true', default=None, help="Do not write any catalogs")
    parser.add_argument('--request-delay', dest='request_delay', type=float, default=None, help="Seconds to wait between translation requests")
    parser.add_argument('--max-attempts', dest='max_attempts', type=int, default=None, help="Maximum number of attempts for each translation when rate limited")
    parser.add_argument('--threads', type=int, default=None, help="Number of threads to use when scanning source files")
    parser.add_argument('--temperature', type=float, default=None, help="A higher temperature increases the random variance of translations")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    return parser

def CreateOptions(args: Namespace, **kwargs) -> Options:
    """ Create options from the environment, the project config file and the command line """
    options = Options()

    if args.config and not os.path.exists(args.config):
        raise FileNotFoundError(f"Config file not found: {args.config}")

    options.LoadSettings(args.config)

    arguments = {
        'provider': args.provider,
        'api_key': args.apikey,
        'model': args.model,
        'temperature': args.temperature,
        'source_dir': args.source,
        'locales_dir': args.locales,
        'base_language': args.base,
        'compare_languages': ParseLanguageList(args.compare) if args.compare else None,
        'source_extensions': args.extension,
        'exclude_dirs': args.exclude,
        'auto_translate': False if args.no_translate else None,
        'generate_placeholders': False if args.no_placeholders else None,
        'translate_orphans': False if args.no_orphans else None,
        'create_missing_catalogs': args.create_missing,
        'dry_run': args.dry_run,
        'request_delay': args.request_delay,
        'max_attempts': args.max_attempts,
        'max_threads': args.threads,
    }

    # Adding optional new keys from kwargs
    for key, value in kwargs.items():
        arguments[key] = value

    options.update(arguments)

    return options

def CreateSynchroniser(options : Options) -> LocaleSynchroniser:
    """
    Initialise a synchroniser, with a translation provider if translation is enabled
    """
    if not options.get_bool('auto_translate', True):
        logging.info("Translation disabled, missing keys will be reported but not translated")
        return LocaleSynchroniser(options)

    translation_provider = TranslationProvider.get_provider(options)
    if not translation_provider:
        raise ProviderError(f"Unable to create translation provider {options.provider}")

    if not translation_provider.ValidateSettings():
        raise ProviderConfigurationError(f"Invalid settings for provider {options.provider}: {translation_provider.validation_message}", translation_provider)

    logging.info(f"Using translation provider {translation_provider.name} ({translation_provider.selected_model})")

    return LocaleSynchroniser(options, translation_provider)
