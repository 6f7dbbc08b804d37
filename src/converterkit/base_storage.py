from abc import ABC, abstractmethod
from pathlib import Path


class BaseStorageHandler(ABC):
    @abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        """
        Read a whole file into memory.
        """
        pass

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """
        Read a whole UTF-8 text file into memory.
        """
        pass

    @abstractmethod
    def write_bytes(self, path: Path, data: bytes) -> bool:
        """
        Write data to path, overwriting any existing file.
        Returns:
            bool: True if the parent directory had to be created.
        """
        pass

    @abstractmethod
    def write_text(self, path: Path, text: str) -> bool:
        """
        Write UTF-8 text to path, overwriting any existing file.
        Returns:
            bool: True if the parent directory had to be created.
        """
        pass
