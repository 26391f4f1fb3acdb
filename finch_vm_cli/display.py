import logging
from rich.logging import RichHandler
from rich.console import Console
from rich.panel import Panel
from typing import Optional

from .schemas import VMStatus

STATUS_STYLES = {
    VMStatus.RUNNING: "bold green",
    VMStatus.STOPPED: "yellow",
    VMStatus.NONEXISTENT: "dim",
    VMStatus.UNRECOGNIZED: "bold red",
}


class Display:
    """
    Renders CLI output and owns the logging setup.

    Commands report progress through `logging.getLogger(__name__)`; the
    records end up in the RichHandler installed here. Display itself only
    draws what logging cannot: the error panel and the VM status line.

    Verbose mode lowers the root level to DEBUG, which surfaces the limactl
    argv and the raw status string.
    """

    def __init__(self, verbose: bool = False):
        self._console = Console()
        self._verbose = verbose

        # Only one handler on the root logger, whoever configured it before
        root_logger = logging.getLogger()
        if root_logger.hasHandlers():
            root_logger.handlers.clear()

        handler = RichHandler(
            console=self._console,
            rich_tracebacks=True,
            show_path=verbose,
            show_level=verbose,
        )
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.INFO,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[handler],
        )

    @property
    def verbose(self) -> bool:
        return self._verbose

    def error(self, message: str, suggestion: Optional[str] = None):
        """Shows a failed command as a red panel, with an optional hint below it."""
        body = f"[bold red]Error:[/] {message}\n"
        if suggestion:
            body += f"\n[bold]Suggestion:[/] {suggestion}"
        self._console.print(Panel(body, border_style="red", expand=False))

    def vm_status(self, instance_name: str, status: VMStatus):
        """Prints the instance name followed by its colored status."""
        style = STATUS_STYLES[status]
        self._console.print(f"{instance_name}: [{style}]{status.value}[/]")
