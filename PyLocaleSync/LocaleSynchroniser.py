import logging

from PyLocaleSync.CatalogStore import CatalogStore
from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.KeyExtractor import KeyExtractor
from PyLocaleSync.LocaleSyncError import NoProviderError, ProviderError
from PyLocaleSync.MessageCatalog import MessageCatalog
from PyLocaleSync.Options import Options
from PyLocaleSync.Reconciler import Reconciler
from PyLocaleSync.SettingsType import SettingsType
from PyLocaleSync.SyncSummary import LanguageSummary, SyncSummary
from PyLocaleSync.TranslationClient import TranslationClient
from PyLocaleSync.TranslationJob import TranslationJob
from PyLocaleSync.TranslationPipeline import TranslationPipeline
from PyLocaleSync.TranslationProvider import TranslationProvider

class LocaleSynchroniser:
    """
    Keeps the base catalog in step with the keys used in code, and each compare catalog in step with the base catalog.

    The source tree is scanned once, then each compare language is reconciled against
    the base catalog in turn. Missing messages are translated in both directions and
    every catalog is written back even if some translations failed.
    """
    def __init__(self, options : Options, translation_provider : TranslationProvider|None = None,
                 client : TranslationClient|None = None, store : CatalogStore|None = None,
                 extractor : KeyExtractor|None = None, pipeline : TranslationPipeline|None = None):
        self.options : Options = options
        self.translation_provider : TranslationProvider|None = translation_provider
        self.client : TranslationClient|None = client
        self.store : CatalogStore = store or CatalogStore(options)
        self.extractor : KeyExtractor = extractor or KeyExtractor(options)
        self.reconciler : Reconciler = Reconciler(options)
        self.pipeline : TranslationPipeline|None = pipeline

        self.auto_translate : bool = options.get_bool('auto_translate', True)
        self.dry_run : bool = options.get_bool('dry_run', False)
        self.aborted : bool = False

    def Synchronise(self) -> SyncSummary:
        """
        Run a full synchronisation and return a summary of the outcome.

        Raises CatalogError if the base catalog or a compare catalog cannot be loaded.
        """
        base_language = self.options.base_language
        summary = SyncSummary(base_language, dry_run=self.dry_run)

        keys_in_code = self.extractor.ExtractKeys(self.options.source_dir)
        summary.keys_in_code = len(keys_in_code)
        summary.files_scanned = self.extractor.files_scanned
        summary.skipped_files = list(self.extractor.skipped_files)

        base : MessageCatalog = self.store.LoadCatalog(base_language, create_missing=False)

        compare_languages = self.options.compare_languages
        if not compare_languages:
            logging.warning(_("No languages to compare with {language}").format(language=base_language))

        for compare_language in compare_languages:
            if self.aborted:
                break

            compare : MessageCatalog = self.store.LoadCatalog(compare_language)

            language_summary = self.SynchroniseLanguage(keys_in_code, base, compare)
            summary.AddLanguage(language_summary)

        if self.pipeline and self.pipeline.degraded:
            summary.degraded = True

        return summary

    def SynchroniseLanguage(self, keys_in_code : set[str], base : MessageCatalog, compare : MessageCatalog) -> LanguageSummary:
        """
        Reconcile one compare catalog with the base catalog, fill the gaps and save both
        """
        logging.info(_("Comparing {base} with {compare}").format(base=base.language_name, compare=compare.language_name))

        result = self.reconciler.Reconcile(keys_in_code, base, compare)

        jobs : list[TranslationJob] = []
        if self.auto_translate:
            jobs = self.reconciler.CreateJobs(result, base, compare)
            if jobs:
                pipeline = self._get_pipeline()
                pipeline.TranslateJobs(jobs)
                if pipeline.aborted:
                    self.aborted = True

        elif result.missing_count:
            logging.info(_("Translation disabled, {count} missing keys were not translated").format(count=result.missing_count))

        language_summary = LanguageSummary.FromResult(result, jobs)

        if self.dry_run:
            logging.info(_("Dry run, not saving {base} or {compare}").format(base=base.language, compare=compare.language))
        else:
            self.store.SaveCatalog(base)
            self.store.SaveCatalog(compare)
            language_summary.saved = True

        return language_summary

    def AbortSynchronisation(self) -> None:
        self.aborted = True
        if self.pipeline:
            self.pipeline.AbortTranslation()

    def _get_pipeline(self) -> TranslationPipeline:
        if not self.pipeline:
            self.pipeline = TranslationPipeline(self.options, self._get_client())
        return self.pipeline

    def _get_client(self) -> TranslationClient:
        if self.client:
            return self.client

        if not self.translation_provider:
            raise NoProviderError()

        client_settings = SettingsType({
            'prompt_template': self.options.get_str('prompt_template'),
            'instructions': self.options.get_str('instructions'),
        })

        try:
            self.client = self.translation_provider.GetTranslationClient(client_settings)

        except Exception as e:
            raise ProviderError(_("Unable to create provider client: {error}").format(error=str(e)), self.translation_provider)

        if not self.client:
            raise ProviderError(_("Unable to create translation client"), self.translation_provider)

        return self.client
