# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CSafeDumper as SafeDumper
except ImportError:
    from yaml import SafeDumper  # type: ignore[assignment]

from noteease import configuration
from noteease import state as app_state
from noteease.logger import configure_logging
from noteease.repository.configuration import CONFIGURATION_REPO
from noteease.template.configuration import get_configuration_template
from noteease.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"], config["log_file"])
    view_state.set_show_header(config["show_header"])
    app_state.set_clear_ids(config["clear_ids_on_view"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = get_configuration_template()
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(config), Dumper=SafeDumper, sort_keys=False)
        )
