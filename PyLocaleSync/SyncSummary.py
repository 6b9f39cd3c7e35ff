from dataclasses import dataclass, field

from PyLocaleSync.Helpers import FormatKeyList
from PyLocaleSync.Helpers.Localization import _, get_language_name
from PyLocaleSync.Reconciler import ReconciliationResult
from PyLocaleSync.TranslationJob import JobStatus, TranslationJob

@dataclass
class LanguageSummary:
    """
    The outcome of synchronising the base catalog with one compare catalog
    """
    base_language: str
    compare_language: str
    missing_in_base_from_code: list[str] = field(default_factory=list)
    missing_in_compare: list[str] = field(default_factory=list)
    missing_in_base: list[str] = field(default_factory=list)
    placeholders: list[str] = field(default_factory=list)
    translated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    conflicts: list[str] = field(default_factory=list)
    unresolved: list[str] = field(default_factory=list)
    saved: bool = False

    @classmethod
    def FromResult(cls, result : ReconciliationResult, jobs : list[TranslationJob]) -> 'LanguageSummary':
        summary = cls(result.base_language, result.compare_language,
                      missing_in_base_from_code=list(result.missing_in_base_from_code),
                      missing_in_compare=list(result.missing_in_compare),
                      missing_in_base=list(result.missing_in_base),
                      placeholders=list(result.placeholders.keys()),
                      conflicts=list(result.conflicts))

        handled = set()
        for job in jobs:
            handled.add((job.key, job.target_language))
            if job.status == JobStatus.Succeeded:
                summary.translated.append(job.key)
            elif job.status == JobStatus.Failed:
                summary.failed.append(job.key)
            elif job.status == JobStatus.Skipped:
                summary.skipped.append(job.key)
                summary.unresolved.append(job.key)
            else:
                summary.unresolved.append(job.key)

        # Gaps that no job was created for remain open
        for key in result.missing_in_compare:
            if (key, result.compare_language) not in handled:
                summary.unresolved.append(key)

        for key in result.missing_in_base:
            if (key, result.base_language) not in handled:
                summary.unresolved.append(key)

        # Keys used in code that could not be added to the base catalog
        for key in result.missing_in_base_from_code:
            if key not in result.placeholders:
                summary.unresolved.append(key)

        # Keys that would overwrite existing messages in one of the catalogs
        for key in result.conflicts:
            if key not in summary.unresolved:
                summary.unresolved.append(key)

        return summary

    @property
    def missing_count(self) -> int:
        return len(self.missing_in_base_from_code) + len(self.missing_in_compare) + len(self.missing_in_base)

    @property
    def success(self) -> bool:
        return not self.unresolved and not self.failed

class SyncSummary:
    """
    Collects the results of a synchronisation run and decides the exit status
    """
    def __init__(self, base_language : str, dry_run : bool = False):
        self.base_language : str = base_language
        self.dry_run : bool = dry_run
        self.languages : list[LanguageSummary] = []
        self.keys_in_code : int = 0
        self.files_scanned : int = 0
        self.skipped_files : list[str] = []
        self.degraded : bool = False

    def AddLanguage(self, language_summary : LanguageSummary) -> None:
        self.languages.append(language_summary)
        if language_summary.failed:
            self.degraded = True

    @property
    def missing_count(self) -> int:
        return sum(language.missing_count for language in self.languages)

    @property
    def translated_count(self) -> int:
        return sum(len(language.translated) for language in self.languages)

    @property
    def skipped_count(self) -> int:
        return sum(len(language.skipped) for language in self.languages)

    @property
    def failed_count(self) -> int:
        return sum(len(language.failed) for language in self.languages)

    @property
    def unresolved_count(self) -> int:
        return sum(len(language.unresolved) for language in self.languages)

    @property
    def success(self) -> bool:
        return not self.degraded and all(language.success for language in self.languages)

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    def FormatSummary(self) -> str:
        """
        A readable report of the run, one block per compare language
        """
        lines = [
            _("Scanned {files} source files, found {keys} translation keys").format(
                files=self.files_scanned, keys=self.keys_in_code
            )
        ]

        if self.skipped_files:
            lines.append(_("Skipped {count} unreadable files: {files}").format(
                count=len(self.skipped_files), files=FormatKeyList(self.skipped_files)
            ))

        for language in self.languages:
            base_name = get_language_name(language.base_language)
            compare_name = get_language_name(language.compare_language)
            lines.append(f"{base_name} <-> {compare_name}:")
            lines.append("  " + _("Missing from {base} (used in code): {count}").format(
                base=base_name, count=len(language.missing_in_base_from_code)
            ))
            lines.append("  " + _("Missing from {compare}: {count}").format(
                compare=compare_name, count=len(language.missing_in_compare)
            ))
            lines.append("  " + _("Missing from {base}: {count}").format(
                base=base_name, count=len(language.missing_in_base)
            ))
            lines.append("  " + _("Placeholders added: {count}").format(count=len(language.placeholders)))
            lines.append("  " + _("Translated: {count}").format(count=len(language.translated)))
            lines.append("  " + _("Skipped: {count}").format(count=len(language.skipped)))
            lines.append("  " + _("Failed: {count}").format(count=len(language.failed)))

            if language.failed:
                lines.append("  " + _("Failed keys: {keys}").format(keys=FormatKeyList(language.failed)))

            if language.conflicts:
                lines.append("  " + _("Conflicting keys: {keys}").format(keys=FormatKeyList(language.conflicts)))

            if language.unresolved:
                lines.append("  " + _("Unresolved keys: {keys}").format(keys=FormatKeyList(language.unresolved)))

        if self.dry_run:
            lines.append(_("Dry run, no catalogs were written"))

        if self.success:
            lines.append(_("All catalogs are in sync"))
        elif self.degraded:
            lines.append(_("Synchronisation completed with errors"))
        else:
            lines.append(_("Synchronisation incomplete, {count} keys still missing").format(count=self.unresolved_count))

        return '\n'.join(lines)
