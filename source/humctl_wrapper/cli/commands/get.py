# ABOUTME: Get command to list or show applications
# ABOUTME: Lists every application in the organization, or one when an ID is given

"""Get command - List applications or show one."""

from cleo.helpers import argument

from humctl_wrapper.cli.commands.base import ApplicationCommand, common_options
from humctl_wrapper.cli.utils.humanitec import Client


class GetCommand(ApplicationCommand):
    name = "get"
    description = "Get applications from Humanitec platform"

    arguments = [argument("id", description="ID of a single application to show", optional=True)]

    options = common_options()

    def collect_arguments(self) -> dict:
        return {"app_id": self.argument("id")}

    def perform(self, client: Client, app_id: str | None = None):
        if app_id:
            self.failure_step = "failed to get application"
            return client.get_app(app_id)

        self.failure_step = "failed to get applications"
        return client.get_apps()
