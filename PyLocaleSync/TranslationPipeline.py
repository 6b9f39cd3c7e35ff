import logging
import random
import time
from collections.abc import Callable

from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.LocaleSyncError import RateLimitedError, TranslationAbortedError, TranslationFailedError
from PyLocaleSync.Options import Options
from PyLocaleSync.TranslationClient import TranslationClient
from PyLocaleSync.TranslationJob import JobStatus, TranslationJob

class TranslationPipeline:
    """
    Translates missing messages one at a time and writes the results into the target catalogs.

    Requests are strictly sequential with a fixed delay between them to stay within
    provider rate limits. Throttled requests are retried with exponential backoff,
    any other failure marks the job as failed and writes a failure marker instead.
    """
    def __init__(self, options : Options, client : TranslationClient,
                 sleep : Callable[[float], None] = time.sleep,
                 jitter : Callable[[float, float], float] = random.uniform):
        self.client : TranslationClient = client
        self.sleep = sleep
        self.jitter = jitter

        self.max_attempts : int = max(1, options.get_int('max_attempts') or 3)
        self.backoff_time : float = options.get_float('backoff_time', 1.0) or 0.0
        self.max_backoff : float = options.get_float('max_backoff', 10.0) or 0.0
        self.max_jitter : float = options.get_float('max_jitter', 0.5) or 0.0
        self.request_delay : float = options.get_float('request_delay', 1.0) or 0.0
        self.failure_marker : str = options.failure_marker

        self.degraded : bool = False
        self.aborted : bool = False
        self.requests_made : int = 0

    def TranslateJobs(self, jobs : list[TranslationJob]) -> list[TranslationJob]:
        """
        Process each job in order, updating the target catalogs
        """
        if jobs:
            logging.info(_("Translating {count} missing messages").format(count=len(jobs)))

        for job in jobs:
            if self.aborted:
                logging.info(_("Translation aborted, {count} jobs not processed").format(
                    count=len([ job for job in jobs if not job.complete ])
                ))
                break

            self.ProcessJob(job)

        return jobs

    def ProcessJob(self, job : TranslationJob) -> TranslationJob:
        """
        Translate a single message and write the result (or the failure marker) into the target catalog
        """
        source_text = job.source.GetMessage(job.key)
        job.source_text = source_text

        if not isinstance(source_text, str) or not source_text.strip():
            job.status = JobStatus.Skipped
            logging.warning(_("Skipping {key}: no {language} text to translate from").format(
                key=job.key, language=job.source_language
            ))
            return job

        if source_text == self.failure_marker:
            job.status = JobStatus.Skipped
            logging.warning(_("Skipping {key}: {language} text is a failed translation").format(
                key=job.key, language=job.source_language
            ))
            return job

        self._wait_for_next_request()

        try:
            translated = self.TranslateWithRetry(job)

        except TranslationAbortedError:
            self.aborted = True
            return job

        except TranslationFailedError as e:
            job.status = JobStatus.Failed
            job.error = e
            job.target.SetMessage(job.key, self.failure_marker)
            self.degraded = True
            logging.error(_("Failed to translate {key} ({direction}): {error}").format(
                key=job.key, direction=job.direction, error=str(e)
            ))
            return job

        job.translation = translated
        job.status = JobStatus.Succeeded
        job.target.SetMessage(job.key, translated)
        logging.info(_("Translated {key} ({direction}): {translation}").format(
            key=job.key, direction=job.direction, translation=translated
        ))
        return job

    def TranslateWithRetry(self, job : TranslationJob) -> str:
        """
        Request a translation, retrying with backoff if the provider is rate limiting requests
        """
        for attempt in range(self.max_attempts):
            job.attempts = attempt + 1
            try:
                return self.client.Translate(job.source_text, job.source_language, job.target_language)

            except TranslationAbortedError:
                raise

            except RateLimitedError as e:
                if attempt + 1 >= self.max_attempts:
                    raise TranslationFailedError(_("Still rate limited after {attempts} attempts").format(
                        attempts=job.attempts
                    ), key=job.key, attempts=job.attempts, error=e)

                delay = self.GetBackoffDelay(attempt, e.retry_after)
                logging.warning(_("Rate limited translating {key}, retrying in {delay:.1f} seconds...").format(
                    key=job.key, delay=delay
                ))
                self.sleep(delay)

            except Exception as e:
                raise TranslationFailedError(str(e), key=job.key, attempts=job.attempts, error=e)

        raise TranslationFailedError(_("No attempts made"), key=job.key)

    def GetBackoffDelay(self, attempt : int, retry_after : float|None = None) -> float:
        """
        Exponential backoff with random jitter, capped at max_backoff.
        A retry delay suggested by the provider is honoured up to the same cap.
        """
        delay = self.backoff_time * 2**attempt + self.jitter(0, self.max_jitter)
        if retry_after:
            delay = max(delay, retry_after)
        return min(delay, self.max_backoff)

    def AbortTranslation(self) -> None:
        self.aborted = True
        self.client.AbortTranslation()

    def _wait_for_next_request(self) -> None:
        if self.requests_made and self.request_delay > 0:
            self.sleep(self.request_delay)
        self.requests_made += 1
