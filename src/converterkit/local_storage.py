from pathlib import Path
from loguru import logger

from .base_storage import BaseStorageHandler
from .errors import ArchiveIOError, ParseError


class LocalStorageHandler(BaseStorageHandler):
    def read_bytes(self, path: Path) -> bytes:
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise ArchiveIOError(f"Cannot read '{path}': {e.strerror or e}", path=str(path)) from e
        logger.info(f"Read {len(data)} bytes from '{path}'")
        return data

    def read_text(self, path: Path) -> str:
        data = self.read_bytes(path)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"Archive '{path}' is not UTF-8 text: {e}", path=str(path)) from e

    def write_bytes(self, path: Path, data: bytes) -> bool:
        path = Path(path)
        created = self._ensure_directory(path.parent)
        try:
            # Single write call; not atomic against crashes mid-write.
            path.write_bytes(data)
        except OSError as e:
            raise ArchiveIOError(f"Cannot write '{path}': {e.strerror or e}", path=str(path)) from e
        logger.info(f"Wrote {len(data)} bytes to '{path}'")
        return created

    def write_text(self, path: Path, text: str) -> bool:
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ArchiveIOError(f"Cannot encode text for '{path}' as UTF-8: {e}", path=str(path)) from e
        return self.write_bytes(path, data)

    @staticmethod
    def _ensure_directory(directory: Path) -> bool:
        if directory.is_dir():
            return False
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ArchiveIOError(
                f"Cannot create directory '{directory}': {e.strerror or e}", path=str(directory)
            ) from e
        logger.info(f"Created directory '{directory}'")
        return True
