class FinchVMError(Exception):
    pass


class CommandError(FinchVMError):
    """Raised when an external limactl command cannot be run or exits non-zero."""

    def __init__(self, message: str, cmd: list[str], returncode: int = -1, output: bytes = b""):
        super().__init__(message)
        self.cmd = cmd
        self.returncode = returncode
        self.output = output


class VMStateError(FinchVMError):
    pass


class VMAlreadyStoppedError(VMStateError):
    def __init__(self, instance_name: str):
        super().__init__(f'the instance "{instance_name}" is already stopped')
        self.instance_name = instance_name


class VMNotExistError(VMStateError):
    def __init__(self, instance_name: str):
        super().__init__(f'the instance "{instance_name}" does not exist')
        self.instance_name = instance_name


class UnrecognizedStatusError(VMStateError):
    def __init__(self):
        super().__init__("unrecognized system status")
