import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from PyLocaleSync.Helpers.Keys import HumaniseKey
from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.MessageCatalog import MessageCatalog
from PyLocaleSync.Options import Options
from PyLocaleSync.TranslationJob import TranslationJob

@dataclass
class ReconciliationResult:
    """
    The keys that are missing from each catalog
    """
    base_language: str
    compare_language: str
    missing_in_base_from_code: list[str] = field(default_factory=list)
    missing_in_compare: list[str] = field(default_factory=list)
    missing_in_base: list[str] = field(default_factory=list)
    placeholders: dict[str, str] = field(default_factory=dict)
    conflicts: list[str] = field(default_factory=list)

    @property
    def missing_count(self) -> int:
        return len(self.missing_in_compare) + len(self.missing_in_base)

    @property
    def in_sync(self) -> bool:
        return not (self.missing_in_base_from_code or self.missing_in_compare or self.missing_in_base or self.conflicts)

class Reconciler:
    """
    Works out which keys are missing from the base and compare catalogs.

    Keys used in code but absent from the base catalog are added to it with a
    placeholder derived from the key, so the base catalog always covers every
    key referenced in source before the catalogs are compared.
    """
    def __init__(self, options : Options):
        self.generate_placeholders : bool = options.get_bool('generate_placeholders', True)
        self.translate_orphans : bool = options.get_bool('translate_orphans', True)

    def Reconcile(self, extracted : Iterable[str], base : MessageCatalog, compare : MessageCatalog) -> ReconciliationResult:
        """
        Compare the keys used in code with the base catalog, then the base catalog with the compare catalog
        """
        result = ReconciliationResult(base.language, compare.language)

        base_keys = set(base.keys)
        result.missing_in_base_from_code = sorted(key for key in set(extracted) if key not in base_keys)

        if result.missing_in_base_from_code:
            logging.info(_("{count} keys used in code are missing from {language}").format(
                count=len(result.missing_in_base_from_code), language=base.language
            ))

            if self.generate_placeholders:
                for key in result.missing_in_base_from_code:
                    if base.ConflictsWith(key):
                        # Writing a leaf here would discard messages already in the catalog
                        logging.warning(_("Key {key} used in code conflicts with existing messages in {language}, not adding a placeholder").format(
                            key=key, language=base.language
                        ))
                        result.conflicts.append(key)
                        continue

                    placeholder = HumaniseKey(key)
                    base.SetMessage(key, placeholder)
                    result.placeholders[key] = placeholder
                    logging.info(_("Added {key} to {language}: {placeholder}").format(
                        key=key, language=base.language, placeholder=placeholder
                    ))

        updated_base_keys = base.keys
        compare_keys = compare.keys
        updated_base_key_set = set(updated_base_keys)
        compare_key_set = set(compare_keys)

        result.missing_in_compare = self._find_missing(updated_base_keys, compare_key_set, compare, result.conflicts)
        result.missing_in_base = self._find_missing(compare_keys, updated_base_key_set, base, result.conflicts)

        if result.missing_in_compare:
            logging.info(_("{count} keys are missing in {language}").format(
                count=len(result.missing_in_compare), language=compare.language
            ))

        if result.missing_in_base:
            logging.info(_("{count} keys in {compare} are missing in {base}").format(
                count=len(result.missing_in_base), compare=compare.language, base=base.language
            ))

        return result

    def CreateJobs(self, result : ReconciliationResult, base : MessageCatalog, compare : MessageCatalog) -> list[TranslationJob]:
        """
        Create translation jobs to fill the gaps in each catalog, base to compare first
        """
        jobs = [ TranslationJob(key, source=base, target=compare) for key in result.missing_in_compare ]

        if self.translate_orphans:
            jobs.extend(TranslationJob(key, source=compare, target=base) for key in result.missing_in_base)

        return jobs

    def _find_missing(self, keys : list[str], present : set[str], target : MessageCatalog, conflicts : list[str]) -> list[str]:
        """
        Keys absent from the target catalog that can be added without overwriting its existing messages
        """
        missing = []
        for key in keys:
            if key in present:
                continue

            if target.ConflictsWith(key):
                logging.warning(_("Key {key} conflicts with existing messages in {language}, not translating it").format(
                    key=key, language=target.language
                ))
                conflicts.append(key)
                continue

            missing.append(key)

        return missing
