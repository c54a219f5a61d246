# SPDX-License-Identifier: MIT

import atexit

from noteease.repository.configuration import CONFIGURATION_REPO
from noteease.repository.id_map import ID_MAP_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    ID_MAP_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
