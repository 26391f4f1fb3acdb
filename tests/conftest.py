import pytest
from unittest.mock import MagicMock

from finch_vm_cli.schemas import AppConfig


@pytest.fixture
def mock_app_context():
    """Fixture to mock the AppContext and its components."""
    mock_context = MagicMock()
    mock_context.display = MagicMock()
    mock_context.config = MagicMock()
    mock_context.config.fell_back_to_defaults = False
    mock_context.config.app_config = AppConfig()
    mock_context.lima_cmd_creator = MagicMock()
    mock_context.disk_manager = MagicMock()
    return mock_context


@pytest.fixture
def mock_disk_manager():
    """Fixture for a mocked UserDataDiskManager."""
    return MagicMock()
