import logging

from .lima_client import LimaCmdCreator
from .schemas import VMStatus

log = logging.getLogger(__name__)


def get_vm_status(creator: LimaCmdCreator, instance_name: str) -> VMStatus:
    """
    Queries limactl for the status of the given instance.

    The status string is matched exactly against what limactl prints, an
    empty result means the instance does not exist. Errors raised by the
    command are not caught here.
    """
    raw = creator.create_without_stdio("ls", "-f", "{{.Status}}", instance_name).output()
    status = raw.decode("utf-8", errors="replace").strip()
    log.debug(f"Status of virtual machine: {status}")

    if status == "Running":
        return VMStatus.RUNNING
    if status == "Stopped":
        return VMStatus.STOPPED
    if status == "":
        return VMStatus.NONEXISTENT
    return VMStatus.UNRECOGNIZED
