from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class VMStatus(Enum):
    """The state of the Finch virtual machine as reported by `limactl ls`."""
    RUNNING = "Running"
    STOPPED = "Stopped"
    NONEXISTENT = "Nonexistent"
    UNRECOGNIZED = "Unrecognized"


class AppConfig(BaseModel):
    """Defines the configuration of the Finch virtual machine CLI."""
    instance_name: str = "finch"
    limactl_path: str = "limactl"
    lima_home: str = "~/.finch/lima/data"
    user_data_disk_name: str = "finch"


class LimaDisk(BaseModel):
    """A single record of `limactl disk ls --json` output."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="Name")
    size: int = Field(default=0, alias="Size")
    dir: str = Field(default="", alias="Dir")
    instance: str = Field(default="", alias="Instance")
    instance_dir: str = Field(default="", alias="InstanceDir")
    mount_point: str = Field(default="", alias="MountPoint")
