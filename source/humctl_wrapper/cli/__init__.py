# ABOUTME: CLI module for the Humanitec CLI wrapper
# ABOUTME: Provides the command-line interface for managing applications

"""Command-line interface for humctl-wrapper."""

import logging
import os
import sys

from cleo.application import Application

from humctl_wrapper import __version__
from humctl_wrapper.cli.utils.humanitec import ClientFactory, HumanitecClient
from humctl_wrapper.cli.utils.output import print_error
from humctl_wrapper.config import Config
from humctl_wrapper.errors import ConfigurationError

from .commands.create import CreateCommand
from .commands.delete import DeleteCommand
from .commands.get import GetCommand
from .commands.update import UpdateCommand

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send log records to stderr; DEBUG when HUMCTL_DEBUG is set."""
    debug_mode = os.environ.get("HUMCTL_DEBUG", "").lower() in ("true", "1", "yes", "y")
    logging.basicConfig(
        level=logging.DEBUG if debug_mode else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def create_application(config: Config, client_factory: ClientFactory = HumanitecClient) -> Application:
    """Create the CLI application."""
    application = Application("humctl", __version__)

    # Add commands
    application.add(GetCommand(config, client_factory))
    application.add(CreateCommand(config, client_factory))
    application.add(UpdateCommand(config, client_factory))
    application.add(DeleteCommand(config, client_factory))

    return application


def main():
    """Main entry point for the CLI."""
    configure_logging()

    try:
        config = Config.load()
    except ConfigurationError as e:
        logger.debug("Configuration error: %s", e)
        print_error(e)
        sys.exit(1)

    application = create_application(config)
    application.run()


if __name__ == "__main__":
    main()
