import json
import os
import tempfile
import threading
from typing import Callable, List, TypeVar

T = TypeVar('T')

USERS = 'users'
QUESTIONS = 'questions'
GAME_RUNS = 'game-runs'


class JsonDocumentStore:
    """Flat-file store: one JSON array per named collection.

    Collections are always read and written whole. ``modify`` serialises a
    read-modify-write within this process; separate processes sharing the
    same directory still race and the last write wins.
    """

    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        self._lock = threading.RLock()

    def _path(self, name: str) -> str:
        return os.path.join(self.data_dir, f'{name}.json')

    def read(self, name: str) -> List[dict]:
        path = self._path(name)
        if not os.path.exists(path):
            return []
        with open(path, encoding='utf-8') as fh:
            return json.load(fh)

    def write(self, name: str, records: List[dict]) -> None:
        os.makedirs(self.data_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=f'.{name}.', suffix='.tmp', dir=self.data_dir)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                json.dump(records, fh, indent=2)
                fh.write('\n')
            os.replace(tmp_path, self._path(name))
        finally:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)

    def modify(self, name: str, fn: Callable[[List[dict]], T]) -> T:
        """Apply ``fn`` to the collection in place and write it back."""
        with self._lock:
            records = self.read(name)
            result = fn(records)
            self.write(name, records)
            return result
