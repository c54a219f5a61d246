# SPDX-License-Identifier: MIT

from typing import Optional

from yaml import dump, load

try:
    from yaml import CSafeDumper as SafeDumper
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import SafeDumper, SafeLoader  # type: ignore[assignment]

from noteease import configuration
from noteease.model.entity_id import NoteId
from noteease.model.id_map import IdMap
from noteease.template.id_map import get_id_map_template


class IdMapRepository:
    def __init__(self) -> None:
        self._id_map: Optional[IdMap] = None
        self.is_dirty = False

    @property
    def id_map(self) -> IdMap:
        if self._id_map is None:
            self.__load_data()
        if self._id_map is None:
            raise ValueError()
        return self._id_map

    def __load_data(self) -> None:
        if configuration.DATA_ID_MAP_PATH.is_file():
            self._id_map = load(
                configuration.DATA_ID_MAP_PATH.read_text(), Loader=SafeLoader
            )
        if self._id_map is None:
            self._id_map = get_id_map_template()

    def __save_data(self, id_map: IdMap) -> None:
        configuration.DATA_ID_MAP_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.DATA_ID_MAP_PATH.write_text(
            dump(dict(id_map), Dumper=SafeDumper)
        )

    def flush(self) -> bool:
        if self._id_map is not None and self.is_dirty:
            self.__save_data(self._id_map)
            self.is_dirty = False
            return True
        return False

    def clear_ids(self) -> None:
        self.is_dirty = True
        self._id_map = get_id_map_template()

    def associate_id(self, note_id: NoteId) -> int:
        """
        Create a new display id to associate with a note id
        """
        real_to_synthetic = self.id_map["real_to_synthetic"]
        if note_id in real_to_synthetic:
            return real_to_synthetic[note_id]

        self.is_dirty = True
        next_id = len(real_to_synthetic) + 1
        real_to_synthetic[note_id] = next_id
        self.id_map["synthetic_to_real"][next_id] = note_id

        return next_id

    def get_real_id(self, synthetic_id: int) -> Optional[NoteId]:
        """
        Get the note id associated with a display id
        """
        return self.id_map["synthetic_to_real"].get(synthetic_id)


ID_MAP_REPO = IdMapRepository()
