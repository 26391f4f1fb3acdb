import os
import subprocess
import logging
from pathlib import Path
from typing import List

from .exceptions import CommandError

log = logging.getLogger(__name__)


class Command:
    """A single limactl invocation that has been built but not run yet."""

    def __init__(self, args: List[str], env: dict):
        self.args = args
        self.env = env

    def _run(self, stderr) -> bytes:
        log.debug(f"Running command: {' '.join(self.args)}")
        try:
            result = subprocess.run(
                self.args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=stderr,
                env=self.env,
            )
        except OSError as e:
            raise CommandError(str(e), self.args) from e

        if result.returncode != 0:
            raise CommandError(
                f"command `{' '.join(self.args)}` exited with code {result.returncode}",
                self.args,
                returncode=result.returncode,
                output=result.stdout,
            )
        return result.stdout

    def output(self) -> bytes:
        """Runs the command and returns its standard output."""
        return self._run(stderr=subprocess.DEVNULL)

    def combined_output(self) -> bytes:
        """Runs the command and returns standard output and standard error merged."""
        return self._run(stderr=subprocess.STDOUT)


class LimaCmdCreator:
    """Builds limactl commands scoped to the Finch LIMA_HOME."""

    def __init__(self, limactl_path: str = "limactl", lima_home: str = "~/.finch/lima/data"):
        self.limactl_path = limactl_path
        self.lima_home = Path(lima_home).expanduser()

    def create_without_stdio(self, *args: str) -> Command:
        """Creates a command that is not attached to the terminal's standard streams."""
        env = dict(os.environ)
        env["LIMA_HOME"] = str(self.lima_home)
        return Command([self.limactl_path, *args], env)
