import typer
from typing_extensions import Annotated
from .context import AppContext
from .commands.stop import stop
from .commands.status import status

app = typer.Typer(
    help="A CLI for managing the Finch virtual machine.",
    add_completion=False,
    no_args_is_help=True,
)

app.command("stop", help="Stop the Finch virtual machine.")(stop)
app.command("status", help="Show the status of the Finch virtual machine.")(status)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show limactl invocations and raw status output."),
    ] = False,
):
    """Builds the AppContext shared by every Finch VM command."""
    ctx.obj = AppContext(verbose=verbose)


if __name__ == "__main__":
    app()
