# ABOUTME: Custom exception classes for the Humanitec CLI wrapper
# ABOUTME: Separates configuration, validation, transport, API and decode failures

"""Custom exceptions for humctl-wrapper."""


class HumctlError(Exception):
    """Base exception for all humctl-wrapper failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(HumctlError):
    """Raised when the configuration file cannot be read or parsed."""

    pass


class MissingCredentialError(ConfigurationError):
    """Raised when the API token or organization ID is not set."""

    pass


class ValidationError(HumctlError):
    """Raised when command input is invalid."""

    pass


class UnsupportedFormatError(ValidationError):
    """Raised when an output format is not one of the supported formats."""

    def __init__(self, message: str, value: str = None):
        super().__init__(message)
        self.value = value


class MissingOptionError(ValidationError):
    """Raised when a required command option was not given."""

    def __init__(self, option: str):
        super().__init__(f'required option "--{option}" not set')
        self.option = option


class TransportError(HumctlError):
    """Raised when the request could not be sent or no response arrived."""

    pass


class APIError(HumctlError):
    """Raised when the API answers with an unexpected status code."""

    def __init__(self, status_code: int, message: str = None):
        super().__init__(message or f"API request failed with status {status_code}")
        self.status_code = status_code


class DecodeError(HumctlError):
    """Raised when a response body is not valid JSON of the expected shape."""

    pass


class CommandError(HumctlError):
    """Raised by commands to report which step of the command failed."""

    def __init__(self, step: str, cause: Exception):
        super().__init__(f"{step}: {cause}")
        self.step = step
        self.cause = cause
