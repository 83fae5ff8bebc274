# ABOUTME: Create command to add a new application
# ABOUTME: Derives the application ID from the name unless one is given

"""Create command - Add an application to the organization."""

from cleo.helpers import option

from humctl_wrapper.cli.commands.base import ApplicationCommand, common_options
from humctl_wrapper.cli.utils.humanitec import Client
from humctl_wrapper.cli.utils.validators import require_option, validate_app_id
from humctl_wrapper.errors import ValidationError
from humctl_wrapper.models import slugify


class CreateCommand(ApplicationCommand):
    name = "create"
    aliases = ["add"]
    description = "Add application to Humanitec platform"
    help = """Create a new application in the organization.
The application has a name (human-friendly display name) and an ID (unique identifier).
When <comment>--id</comment> is omitted the ID is derived from the name, e.g. "Test App" becomes "test-app".
IDs must match the pattern: ^[a-z0-9](?:-?[a-z0-9]+)+$"""

    options = common_options() + [
        option("name", description="Name of the application", flag=False),
        option("id", "i", description="Application ID (derived from the name if omitted)", flag=False),
        option("skip-env-creation", "s", description="Skip environment creation", flag=True),
    ]

    failure_step = "failed to add application"

    def collect_arguments(self) -> dict:
        name = require_option("name", self.option("name"))
        app_id = self.option("id") or slugify(name)

        if not validate_app_id(app_id):
            raise ValidationError(f"invalid id: '{app_id}' must match ^[a-z0-9](?:-?[a-z0-9]+)+$")

        return {"app_id": app_id, "name": name, "skip_env_creation": bool(self.option("skip-env-creation"))}

    def perform(self, client: Client, app_id: str, name: str, skip_env_creation: bool = False):
        return client.create_app(app_id, name, skip_env_creation)
