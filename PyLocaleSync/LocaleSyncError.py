from PyLocaleSync.Helpers.Localization import _

class LocaleSyncError(Exception):
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.error = error
        self.message = message

    def __str__(self) -> str:
        if self.message:
            return self.message
        elif self.error:
            return str(self.error)
        return super().__str__()

class SettingsError(LocaleSyncError):
    """Raised when a setting cannot be coerced to the expected type."""
    pass

class CatalogError(LocaleSyncError):
    def __init__(self, message : str, path : str|None = None, error : Exception|None = None):
        super().__init__(message, error)
        self.path = path

class CatalogNotFoundError(CatalogError):
    """ The catalog file does not exist """
    def __init__(self, path : str):
        super().__init__(_("Catalog file not found: {path}").format(path=path), path)

class CatalogParseError(CatalogError):
    """ The catalog file is not a well-formed JSON object tree """
    def __init__(self, message : str, path : str|None = None, error : Exception|None = None):
        super().__init__(message, path, error)

class ScanReadError(LocaleSyncError):
    def __init__(self, path : str, error : Exception|None = None):
        super().__init__(_("Unable to read source file {path}").format(path=path), error)
        self.path = path

class NoProviderError(LocaleSyncError):
    def __init__(self):
        super().__init__(_("Provider not specified in options"))

class ProviderError(LocaleSyncError):
    def __init__(self, message : str|None = None, provider : object = None):
        super().__init__(message)
        self.provider = provider

class ProviderConfigurationError(ProviderError):
    def __init__(self, message : str, provider : object, error : Exception|None = None):
        super().__init__(message, provider)
        self.error = error

class TranslationError(LocaleSyncError):
    def __init__(self, message : str, key : str|None = None, error : Exception|None = None):
        super().__init__(message, error)
        self.key = key

class TranslationAbortedError(TranslationError):
    def __init__(self):
        super().__init__(_("Translation aborted"))

class RateLimitedError(TranslationError):
    """ The provider throttled the request, retrying later may succeed """
    def __init__(self, message : str|None = None, retry_after : float|None = None, error : Exception|None = None):
        super().__init__(message or _("Rate limit reached"), error=error)
        self.retry_after = retry_after

class TranslationResponseError(TranslationError):
    def __init__(self, message : str, response : object = None):
        super().__init__(message)
        self.response = response

class TranslationImpossibleError(TranslationError):
    """ No chance of retry succeeding """
    def __init__(self, message : str, error : Exception|None = None):
        super().__init__(message, error=error)

class TranslationFailedError(TranslationError):
    """ A job could not be translated after all attempts """
    def __init__(self, message : str, key : str|None = None, attempts : int = 0, error : Exception|None = None):
        super().__init__(message, key, error)
        self.attempts = attempts
