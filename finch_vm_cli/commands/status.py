import typer

from ..context import AppContext
from ..exceptions import FinchVMError
from ..schemas import VMStatus
from ..status import get_vm_status


def get_status_logic(app_context: AppContext) -> VMStatus:
    """Business logic for querying the virtual machine status."""
    return get_vm_status(
        app_context.lima_cmd_creator,
        app_context.config.app_config.instance_name,
    )


def status(ctx: typer.Context):
    """Shows the status of the Finch virtual machine."""
    app_context: AppContext = ctx.obj

    try:
        vm_status = get_status_logic(app_context)
    except FinchVMError as e:
        app_context.display.error(
            f"Unable to retrieve virtual machine status: {e}",
            "Check that limactl is installed and LIMA_HOME points to the Finch data directory.",
        )
        raise typer.Exit(1)

    app_context.display.vm_status(app_context.config.app_config.instance_name, vm_status)
