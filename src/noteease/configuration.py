# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import SafeLoader  # type: ignore[assignment]
import platformdirs

APP_NAME = "noteease"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_NOTES_PATH: Path = DATA_PATH / "notes.yaml"
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"

# Terminal columns
DEFAULT_SIDEBAR_BREAKPOINT = 60
DEFAULT_PREVIEW_LENGTH = 42
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    clear_ids_on_view: bool
    sidebar_breakpoint: int
    preview_length: int
    log_level: str
    log_file: Optional[str]


def resolve_data_path(data_path_setting: Optional[str]) -> Path:
    if data_path_setting is None:
        return platformdirs.user_data_path(APP_NAME)
    return Path(data_path_setting).expanduser()


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories read from disk.
    """
    global DATA_PATH, DATA_NOTES_PATH, DATA_ID_MAP_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(
        APP_CONFIG_PATH.read_text(), Loader=SafeLoader
    )
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        DATA_PATH = resolve_data_path(data_path_setting)
        DATA_NOTES_PATH = DATA_PATH / "notes.yaml"
        DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
