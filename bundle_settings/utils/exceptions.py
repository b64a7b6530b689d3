class PackagingError(Exception):
    """Base exception for packaging settings errors."""
    pass

class ConfigurationLoadError(PackagingError):
    """Raised when a packaging configuration source is missing or malformed."""
    pass

class ResolutionError(PackagingError):
    """Raised when an entry cannot be resolved against a project root."""
    def __init__(self, message: str, entry: str = None):
        self.entry = entry
        super().__init__(message)

class ReportGenerationError(PackagingError):
    """Exception raised for manifest generation errors."""
    pass
