import json
import logging
from pathlib import Path
from typing import Dict

from errors import InvalidInput, NotFound, StorageFailure

logger = logging.getLogger(__name__)


class CharacterCatalog:
    """
    Read-only catalog of selectable characters.
    Structure: { "hello-kitty": { "name": ..., "img": ... } }

    The file is re-read on every call, so edits show up without a restart.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, Dict]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as err:
            raise StorageFailure(f"cannot read catalog {self.path}") from err

        if not isinstance(data, dict):
            raise StorageFailure(f"catalog {self.path} is not a JSON object")
        return data

    def list_all(self) -> Dict[str, Dict]:
        """Returns the whole catalog mapping, unchanged."""
        return self._read()

    def get(self, character_id: str) -> Dict:
        """
        Returns a single entry.
        Raises NotFound if character_id is not a catalog key.
        """
        if not character_id:
            raise InvalidInput("Missing character id")

        entry = self._read().get(character_id)
        if not entry:
            raise NotFound("not a valid Sanrio character")
        return entry
