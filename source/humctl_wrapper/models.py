# ABOUTME: Data models for Humanitec resources
# ABOUTME: Defines the Application record and id derivation from names

"""Humanitec resource models."""

import re
from dataclasses import asdict, dataclass
from typing import Any

# Application IDs as accepted by the Humanitec API
APP_ID_PATTERN = re.compile(r"^[a-z0-9](?:-?[a-z0-9]+)+$")

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


@dataclass
class Application:
    """A Humanitec application."""

    id: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        """Convert application to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Application":
        """Create an application from an API payload.

        Keys other than ``id`` and ``name`` are ignored.

        Raises:
            ValueError: If the payload is not a mapping with string ``id`` and ``name``.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")

        for key in ("id", "name"):
            if not isinstance(data.get(key), str):
                raise ValueError(f"field '{key}' is missing or not a string")

        return cls(id=data["id"], name=data["name"])


def slugify(name: str) -> str:
    """Derive an application ID from a display name.

    "Test App" becomes "test-app".
    """
    return _NON_SLUG_CHARS.sub("-", name.lower()).strip("-")
