"""
Custom exception hierarchy for service-areas.

Provides specific exception types for each subsystem so callers can
tell recoverable data problems apart from programming errors.
"""


class ServiceAreasError(Exception):
    """Base exception for all service-areas errors."""

    def __init__(self, message: str = "", details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# --- Catalogue Exceptions ---


class CatalogueError(ServiceAreasError):
    """Base exception for suburb catalogue errors."""
    pass


class CatalogueNotFoundError(CatalogueError):
    """Raised when the catalogue file does not exist."""

    def __init__(self, path: str):
        super().__init__(
            message=f"Suburb catalogue not found at '{path}'",
            details={"path": path},
        )


class CatalogueFormatError(CatalogueError):
    """Raised when the catalogue file cannot be parsed or has the wrong shape."""
    pass


# --- Configuration Exceptions ---


class ConfigurationError(ServiceAreasError):
    """Base exception for configuration errors."""
    pass


class BusinessConfigError(ConfigurationError):
    """Raised when business.yaml is malformed or fails validation."""
    pass


# --- Geocoding Exceptions ---


class GeocodingError(ServiceAreasError):
    """Base exception for geocoding errors."""
    pass


class GeocodingNotSupportedError(GeocodingError):
    """Raised when geocoding is requested from a source that cannot geocode."""

    def __init__(self, address: str):
        super().__init__(
            message=(
                "Geocoding is not available with static suburb data. "
                "Configure center coordinates in business.yaml or the environment."
            ),
            details={"address": address},
        )


# --- Selection Exceptions ---


class SelectionError(ServiceAreasError):
    """Base exception for suburb selection errors."""
    pass


class NoSuburbMatchError(SelectionError):
    """Raised when a best match is requested from an empty candidate list."""

    def __init__(self, term: str | None = None):
        message = f"No suburb matches '{term}'" if term else "No suburb candidates to choose from"
        super().__init__(message=message, details={"term": term})
