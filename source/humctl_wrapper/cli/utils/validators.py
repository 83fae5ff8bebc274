# ABOUTME: Input validation functions for CLI commands
# ABOUTME: Validates application IDs and required options

"""Input validators for CLI commands."""

from humctl_wrapper.errors import MissingOptionError
from humctl_wrapper.models import APP_ID_PATTERN


def validate_app_id(app_id: str) -> bool:
    """Validate Humanitec application ID format.

    Valid formats:
    - my-app
    - app2
    - team-a-service-1

    IDs must be lowercase alphanumeric, at least two characters long, and may
    contain single hyphens between characters.
    """
    if not app_id:
        return False

    return bool(APP_ID_PATTERN.match(app_id))


def require_option(option: str, value: str | None) -> str:
    """Return the option value, raising MissingOptionError when it is empty."""
    if value is None or not str(value).strip():
        raise MissingOptionError(option)
    return value
