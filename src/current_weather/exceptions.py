"""Application exception classes."""


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class LocationServiceError(Exception):
    """Raised when a location service cannot produce a position."""


class FeatureNotSupportedError(LocationServiceError):
    """Raised when the location capability does not exist on this host."""


class FeatureNotEnabledError(LocationServiceError):
    """Raised when the location capability exists but is switched off."""


class LocationPermissionError(LocationServiceError):
    """Raised when the user has not granted access to their location."""
