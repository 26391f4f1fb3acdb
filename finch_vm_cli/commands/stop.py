"""
Stop command implementation for the Finch VM CLI.

This module stops the Lima virtual machine that backs Finch. A graceful stop
is only attempted when the instance is running, a forced stop skips the
status check entirely. The user data disk is always detached before the
stop command is issued.

## Execution Flow Diagram

```mermaid
sequenceDiagram
    participant CLI as CLI
    participant Main as main.py
    participant Stop as stop.py<br/>(StopVMAction)
    participant Status as status.py
    participant Disk as disk.py<br/>(UserDataDiskManager)
    participant Lima as lima_client.py<br/>(LimaCmdCreator)

    CLI->>Main: finch-vm stop [--force]
    Main->>Main: @app.callback() - Initialize AppContext
    Main->>Stop: stop(ctx, force)
    Stop->>Stop: StopVMAction(creator, disk_manager, instance_name).run(force)

    alt force = False
        Stop->>Status: get_vm_status(creator, "finch")
        Status->>Lima: limactl ls -f "{{.Status}}" finch
        Lima-->>Status: "Running"
        Status-->>Stop: VMStatus.RUNNING
        Note over Stop: Stopped / Nonexistent / Unrecognized raise VMStateError
    end

    Stop->>Disk: detach_user_data_disk()
    Disk->>Lima: limactl disk ls --json
    Disk->>Lima: limactl disk unlock finch
    Stop->>Lima: limactl stop [--force] finch
    Lima-->>Stop: combined output
    Stop->>Stop: log.info("Finch virtual machine stopped successfully")
```

## Key Architecture Points

- **Exact Status Match**: Only a literal "Running" status allows a graceful stop
- **Disk First**: A failing disk detach aborts before the VM is touched
- **Debug Logs On Failure**: The combined limactl output is only shown when the stop fails
- **Errors Pass Through**: limactl failures reach the caller unchanged
"""

import typer
import logging
from typing_extensions import Annotated

from ..context import AppContext
from ..disk import UserDataDiskManager
from ..exceptions import CommandError, FinchVMError, UnrecognizedStatusError, VMAlreadyStoppedError, VMNotExistError
from ..lima_client import Command, LimaCmdCreator
from ..schemas import VMStatus
from ..status import get_vm_status

log = logging.getLogger(__name__)


class StopVMAction:
    """Stops the Finch virtual machine, gracefully or forcibly."""

    def __init__(self, creator: LimaCmdCreator, disk_manager: UserDataDiskManager, instance_name: str):
        self.creator = creator
        self.disk_manager = disk_manager
        self.instance_name = instance_name

    def run(self, force: bool = False):
        if force:
            return self._stop_forcibly()
        return self._stop_gracefully()

    def _stop_gracefully(self):
        status = get_vm_status(self.creator, self.instance_name)
        if status == VMStatus.STOPPED:
            raise VMAlreadyStoppedError(self.instance_name)
        if status == VMStatus.NONEXISTENT:
            raise VMNotExistError(self.instance_name)
        if status == VMStatus.UNRECOGNIZED:
            raise UnrecognizedStatusError()

        self.disk_manager.detach_user_data_disk()

        log.info("Stopping existing Finch virtual machine...")
        self._run_stop(self.creator.create_without_stdio("stop", self.instance_name))
        log.info("Finch virtual machine stopped successfully")

    def _stop_forcibly(self):
        self.disk_manager.detach_user_data_disk()

        log.info("Forcibly stopping Finch virtual machine...")
        self._run_stop(self.creator.create_without_stdio("stop", "--force", self.instance_name))
        log.info("Finch virtual machine stopped successfully")

    def _run_stop(self, command: Command):
        try:
            command.combined_output()
        except CommandError as e:
            log.error(f"Finch virtual machine failed to stop, debug logs:\n{e.output.decode('utf-8', errors='replace')}")
            raise


def stop_vm_logic(app_context: AppContext, force: bool = False):
    """Business logic for stopping the virtual machine."""
    if app_context.config.fell_back_to_defaults:
        log.info("Configuration file appears to be empty or corrupted. Using default settings.")

    action = StopVMAction(
        app_context.lima_cmd_creator,
        app_context.disk_manager,
        app_context.config.app_config.instance_name,
    )
    action.run(force=force)


def stop(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Forcibly stop the virtual machine without checking its status.",
        ),
    ] = False,
):
    """Stops the Finch virtual machine."""
    app_context: AppContext = ctx.obj
    try:
        stop_vm_logic(app_context, force=force)
    except FinchVMError as e:
        app_context.display.error(str(e))
        raise typer.Exit(1)
