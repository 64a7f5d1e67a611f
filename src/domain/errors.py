"""Domain error taxonomy, mapped to HTTP status codes by the API layer."""


class ValidationError(Exception):
    """Client supplied a missing or malformed value (HTTP 400)."""


class InvalidCoordinate(ValidationError):
    """A latitude / longitude is not finite or lies outside its range."""


class StorageError(Exception):
    """The backing store failed, including connectivity (HTTP 500)."""
