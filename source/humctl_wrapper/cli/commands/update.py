# ABOUTME: Update command to rename an application
# ABOUTME: Changes the display name while the ID and all settings stay as they are

"""Update command - Rename an application."""

from cleo.helpers import option

from humctl_wrapper.cli.commands.base import ApplicationCommand, common_options
from humctl_wrapper.cli.utils.humanitec import Client
from humctl_wrapper.cli.utils.validators import require_option


class UpdateCommand(ApplicationCommand):
    name = "update"
    description = "Update an application in Humanitec platform"
    help = """Update an existing application in the organization.
Currently supports updating the application name while preserving all other settings and configurations."""

    options = common_options() + [
        option("name", description="ID of the application to update", flag=False),
        option("new-name", "m", description="New name for the application", flag=False),
    ]

    failure_step = "failed to update application"

    def collect_arguments(self) -> dict:
        return {
            "app_id": require_option("name", self.option("name")),
            "new_name": require_option("new-name", self.option("new-name")),
        }

    def perform(self, client: Client, app_id: str, new_name: str):
        return client.update_app(app_id, new_name)
