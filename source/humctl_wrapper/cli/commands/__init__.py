# ABOUTME: Commands module for the Humanitec CLI wrapper
# ABOUTME: Contains all CLI command implementations

"""CLI commands for humctl-wrapper."""

from .create import CreateCommand
from .delete import DeleteCommand
from .get import GetCommand
from .update import UpdateCommand

__all__ = [
    "GetCommand",
    "CreateCommand",
    "UpdateCommand",
    "DeleteCommand",
]
