# SPDX-License-Identifier: MIT

from contextvars import ContextVar

from noteease.repository.id_map import ID_MAP_REPO

# Listing notes hands out display ids starting from 1 again
_clear_ids_on_view: ContextVar[bool] = ContextVar("clear_ids_on_view", default=True)


def set_clear_ids(value: bool) -> None:
    _clear_ids_on_view.set(value)


def get_clear_ids() -> bool:
    return _clear_ids_on_view.get()


def refresh_display_ids() -> None:
    """Forget previous display ids before a list is rendered, when enabled."""
    if get_clear_ids():
        ID_MAP_REPO.clear_ids()
