import sys
import logging
from .config import Config
from .disk import UserDataDiskManager
from .display import Display
from .lima_client import LimaCmdCreator

log = logging.getLogger(__name__)

class AppContext:
    """A central container for the application's runtime state."""

    def __init__(self, verbose: bool = False):
        try:
            self.display = Display(verbose=verbose)
            self.config = Config(self.display)
            app_config = self.config.app_config
            self.lima_cmd_creator = LimaCmdCreator(app_config.limactl_path, app_config.lima_home)
            self.disk_manager = UserDataDiskManager(self.lima_cmd_creator, app_config.user_data_disk_name)
        except Exception as e:
            log.error(f"Failed to initialize application: {e}", exc_info=True)
            sys.exit(1)

    @property
    def verbose(self) -> bool:
        return self.display.verbose
