# ABOUTME: Delete command to remove an application
# ABOUTME: Deletes the application with its environments, history and shared values

"""Delete command - Remove an application."""

from cleo.helpers import option

from humctl_wrapper.cli.commands.base import ApplicationCommand, common_options
from humctl_wrapper.cli.utils.humanitec import Client
from humctl_wrapper.cli.utils.validators import require_option

SUCCESS_APP_DELETED = "Application successfully deleted"


class DeleteCommand(ApplicationCommand):
    name = "delete"
    description = "Delete an application from Humanitec platform"
    help = """Delete an application and everything associated with it. This includes:
- Environments
- Deployment history on those environments
- Any shared values and secrets associated

Deletions are irreversible."""

    options = common_options() + [
        option("name", description="ID of the application to delete", flag=False),
    ]

    failure_step = "failed to delete application"

    def collect_arguments(self) -> dict:
        return {"app_id": require_option("name", self.option("name"))}

    def perform(self, client: Client, app_id: str) -> str:
        client.delete_app(app_id)
        return SUCCESS_APP_DELETED
