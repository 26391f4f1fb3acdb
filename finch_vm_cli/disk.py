import json
import logging
from typing import Optional
from pydantic import ValidationError

from .exceptions import FinchVMError
from .lima_client import LimaCmdCreator
from .schemas import LimaDisk

log = logging.getLogger(__name__)


class UserDataDiskManager:
    """Manages the persistent Lima disk that holds Finch user data."""

    def __init__(self, creator: LimaCmdCreator, disk_name: str = "finch"):
        self.creator = creator
        self.disk_name = disk_name

    def _find_disk(self) -> Optional[LimaDisk]:
        raw = self.creator.create_without_stdio("disk", "ls", "--json").output()
        try:
            lines = raw.decode("utf-8").splitlines()
        except UnicodeDecodeError as e:
            raise FinchVMError(f"Could not parse disk information for {self.disk_name}: {e}") from e

        for line in lines:
            if not line.strip():
                continue
            try:
                disk = LimaDisk(**json.loads(line))
            except (json.JSONDecodeError, ValidationError) as e:
                raise FinchVMError(f"Could not parse disk information for {self.disk_name}: {e}") from e
            if disk.name == self.disk_name:
                return disk
        return None

    def detach_user_data_disk(self):
        """Unlocks the user data disk from the instance it is attached to, if any."""
        disk = self._find_disk()
        if disk is None:
            log.debug(f"User data disk {self.disk_name} not found, nothing to detach")
            return
        if not disk.instance:
            log.debug(f"User data disk {self.disk_name} is already detached")
            return

        self.creator.create_without_stdio("disk", "unlock", self.disk_name).combined_output()
        log.info(f"Detached user data disk {self.disk_name} from instance {disk.instance}")
