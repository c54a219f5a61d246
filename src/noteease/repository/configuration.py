# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CSafeDumper as SafeDumper
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import SafeDumper, SafeLoader  # type: ignore[assignment]

from noteease import configuration
from noteease.template.configuration import get_configuration_template


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if configuration.APP_CONFIG_PATH.is_file():
            self._config = load(
                configuration.APP_CONFIG_PATH.read_text(), Loader=SafeLoader
            )
        if self._config is None:
            self._config = get_configuration_template()
            return

        # Migration: fill in settings added after the config file was written
        for key, value in get_configuration_template().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(config), Dumper=SafeDumper, sort_keys=False)
        )

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        clear_ids_on_view: Optional[bool] = None,
        sidebar_breakpoint: Optional[int] = None,
        preview_length: Optional[int] = None,
        log_level: Optional[str] = None,
        log_file: Optional[str] = None,
        remove_log_file: bool = False,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if clear_ids_on_view is not None:
            self.config["clear_ids_on_view"] = clear_ids_on_view
        if sidebar_breakpoint is not None:
            self.config["sidebar_breakpoint"] = sidebar_breakpoint
        if preview_length is not None:
            self.config["preview_length"] = preview_length
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if log_file is not None:
            self.config["log_file"] = log_file
        if remove_log_file:
            self.config["log_file"] = None


CONFIGURATION_REPO = ConfigurationRepository()
