"""Local filesystem storage for generated documents."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalStorage:
    """Reads and writes paths relative to a root directory."""

    def __init__(self, root: Path):
        self.root = root

    def _resolve(self, path: str | Path) -> Path:
        return self.root / path

    def exists(self, path: str | Path) -> bool:
        return self._resolve(path).exists()

    def make_directory(self, path: str | Path) -> bool:
        try:
            self._resolve(path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Could not create %s: %s", self._resolve(path), e)
            return False
        return True

    def write(self, path: str | Path, data: str | bytes) -> Path:
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, bytes):
            target.write_bytes(data)
        else:
            target.write_text(data, encoding="utf-8")
        return target
