"""Configure pytest."""

import os
import sys
from pathlib import Path

import pytest

# Get the project root directory
root_dir = Path(__file__).parent

# Add src directory to Python path
src_path = str(root_dir / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

# Remove any duplicate paths
sys.path = list(dict.fromkeys(sys.path))

# Set PYTHONPATH environment variable
os.environ["PYTHONPATH"] = src_path


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point the persisted config at a throwaway file and clear env overrides."""
    from mediastamp.utils import config

    config_dir = tmp_path_factory.mktemp("config") / "mediastamp"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_FILE", config_dir / "config.toml")
    monkeypatch.delenv("MEDIASTAMP_EXIFTOOL_COMMAND", raising=False)
    monkeypatch.delenv("MEDIASTAMP_NO_RICH", raising=False)
    return config_dir
