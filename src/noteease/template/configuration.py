# SPDX-License-Identifier: MIT

from noteease.configuration import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PREVIEW_LENGTH,
    DEFAULT_SIDEBAR_BREAKPOINT,
    Configuration,
)


def get_configuration_template() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "clear_ids_on_view": True,
        "sidebar_breakpoint": DEFAULT_SIDEBAR_BREAKPOINT,
        "preview_length": DEFAULT_PREVIEW_LENGTH,
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": None,
    }
