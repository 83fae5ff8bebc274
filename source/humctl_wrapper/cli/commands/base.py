# ABOUTME: Base class for application commands
# ABOUTME: Runs the format, arguments, client, operation, output cycle shared by all commands

"""Shared command flow for application commands."""

import logging
from typing import Any

from cleo.commands.command import Command
from cleo.helpers import option
from cleo.io.outputs.output import Type

from humctl_wrapper.cli.utils.humanitec import Client, ClientFactory, HumanitecClient
from humctl_wrapper.cli.utils.output import OutputFormat, format_output, print_error, validate_format
from humctl_wrapper.config import Config
from humctl_wrapper.errors import CommandError, HumctlError

logger = logging.getLogger(__name__)


def common_options() -> list:
    """Options every application command accepts."""
    return [
        option("output", "o", description="Output format (table|json|yaml)", flag=False),
        option("org", "g", description="Humanitec organization ID (defaults to humanitec_org from config)", flag=False),
    ]


class ApplicationCommand(Command):
    """
    Base for commands that perform one Humanitec application operation.

    Subclasses implement ``collect_arguments`` and ``perform``; everything
    else (format resolution, client construction, error reporting and
    output) happens here. Nothing is written to standard output unless every
    step succeeds.
    """

    # Prefix used when the operation itself fails
    failure_step = "operation failed"

    def __init__(self, config: Config, client_factory: ClientFactory = HumanitecClient) -> None:
        super().__init__()
        self._config = config
        self._client_factory = client_factory

    @property
    def config(self) -> Config:
        return self._config

    def handle(self) -> int:
        """Execute the command."""
        try:
            formatted = self._run()
        except HumctlError as e:
            logger.debug("Command %s failed: %s", self.name, e)
            print_error(e)
            return 1

        self.io.output.write(formatted, type=Type.RAW)
        return 0

    def _run(self) -> str:
        output_format = self.resolve_format()
        arguments = self.collect_arguments()
        client = self.resolve_client()

        try:
            result = self.perform(client, **arguments)
        except HumctlError as e:
            raise CommandError(self.failure_step, e) from e

        try:
            return format_output(result, output_format)
        except HumctlError as e:
            raise CommandError("failed to format output", e) from e

    def resolve_format(self) -> OutputFormat:
        """Output format from --output, falling back to the configured default."""
        value = self.option("output") or self.config.default_output
        try:
            return validate_format(value)
        except HumctlError as e:
            raise CommandError("invalid output format", e) from e

    def resolve_client(self) -> Client:
        """Build a client for the organization from --org or the configuration."""
        organization = self.option("org") or self.config.organization
        try:
            return self._client_factory(
                token=self.config.token, organization=organization, base_url=self.config.api_url
            )
        except HumctlError as e:
            raise CommandError("failed to initialize client", e) from e

    def collect_arguments(self) -> dict[str, Any]:
        """Read and validate command input. Runs before any client is built."""
        return {}

    def perform(self, client: Client, **arguments: Any) -> Any:
        """Run the operation and return what should be printed."""
        raise NotImplementedError
