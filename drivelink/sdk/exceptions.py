class DriveLinkError(Exception):
    """Base class for all drivelink exceptions."""
    pass

class ConfigurationError(DriveLinkError):
    """Base class for endpoint configuration errors."""
    pass

class InvalidApiNameError(ConfigurationError, ValueError):
    """Raised when an API name is not one of the supported Drive APIs."""
    pass

class InvalidMethodError(ConfigurationError, ValueError):
    """Raised when a method name is not offered by the selected API."""
    pass

class UnsupportedOptionError(ConfigurationError, ValueError):
    """Raised when an option cannot be applied to an endpoint or consumer."""
    pass

class MissingArgumentError(ConfigurationError, ValueError):
    """Raised when a required method argument has no value."""
    pass

class ApiInvocationError(DriveLinkError):
    """Raised when the Drive API rejects a call."""

    def __init__(self, message: str, status: int = None):
        self.status = status
        super().__init__(message)
