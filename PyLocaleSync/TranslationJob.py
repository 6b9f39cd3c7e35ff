from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from PyLocaleSync.MessageCatalog import MessageCatalog

class JobStatus(Enum):
    Pending = "pending"
    Succeeded = "succeeded"
    Skipped = "skipped"
    Failed = "failed"

@dataclass
class TranslationJob:
    """
    A message that is missing from the target catalog and should be translated from the source catalog
    """
    key: str
    source: MessageCatalog
    target: MessageCatalog
    status: JobStatus = JobStatus.Pending
    source_text: Any = None
    translation: str|None = None
    attempts: int = 0
    error: Exception|None = field(default=None, repr=False)

    @property
    def source_language(self) -> str:
        return self.source.language

    @property
    def target_language(self) -> str:
        return self.target.language

    @property
    def direction(self) -> str:
        return f"{self.source_language} -> {self.target_language}"

    @property
    def complete(self) -> bool:
        return self.status != JobStatus.Pending

    def __str__(self) -> str:
        return f"{self.key} ({self.direction}, {self.status.value})"
