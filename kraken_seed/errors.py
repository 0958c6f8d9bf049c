class SeedImportError(Exception):
    """Raised when a seed file cannot be imported; the file's transaction is rolled back."""

    def __init__(self, message, *, path=None):
        super().__init__(message)
        self.path = path


class ImportFileError(SeedImportError):
    pass


class ImportDecodeError(SeedImportError):
    pass


class TransactionBeginError(SeedImportError):
    pass


class RecordLookupError(SeedImportError):
    pass


class RecordWriteError(SeedImportError):
    pass


class PluginNotFoundError(SeedImportError):
    def __init__(self, message, *, plugin_name, path=None):
        super().__init__(message, path=path)
        self.plugin_name = plugin_name


class TransactionCommitError(SeedImportError):
    pass
