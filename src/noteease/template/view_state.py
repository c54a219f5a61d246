# SPDX-License-Identifier: MIT

from noteease.model.view_state import EditBuffer, ViewMode, ViewState


def get_view_state_template() -> ViewState:
    return {
        "mode": ViewMode.EMPTY,
        "selected_id": None,
    }


def get_edit_buffer_template() -> EditBuffer:
    return {
        "title": "",
        "content": "",
    }
