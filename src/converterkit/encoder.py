"""
Module for archive encoding/decoding logic independent of storage specifics.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from . import __version__
from .archive import ArchiveDocument, ArchivedFile
from .base_storage import BaseStorageHandler
from .config import DEFAULT_UTC_OFFSET_HOURS
from .errors import FormatError
from .resolver import Mode
from .utils import now_timestamp, printable


@dataclass
class TransformResult:
    mode: Mode
    file_name: str
    size: int
    output_path: Path
    created_dir: bool = False


class ArchiveEncoder:
    """
    Handles the file <-> archive document transform and delegates I/O to a storage handler.
    """

    def __init__(
        self,
        storage_handler: BaseStorageHandler,
        version: str = __version__,
        utc_offset_hours: float = DEFAULT_UTC_OFFSET_HOURS,
    ) -> None:
        self.storage_handler = storage_handler
        self.version = version
        self.utc_offset_hours = utc_offset_hours

    def build_document(self, name: str, extension: str, data: bytes) -> ArchiveDocument:
        return ArchiveDocument(
            version=self.version,
            created_at=now_timestamp(self.utc_offset_hours),
            file=ArchivedFile.from_bytes(name, extension, data),
        )

    def encode_file(self, input_path: Path, output_path: Path) -> TransformResult:
        """
        Encode a file into an archive document and write it to output_path.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)
        data = self.storage_handler.read_bytes(input_path)
        name = printable(input_path.name)
        document = self.build_document(name, printable(input_path.suffix), data)
        logger.info(f"Encoded {len(data)} bytes into {len(document.file.base64)} base64 characters")
        created = self.storage_handler.write_text(output_path, document.to_json())
        return TransformResult(
            mode=Mode.ENCODE,
            file_name=name,
            size=len(data),
            output_path=output_path,
            created_dir=created,
        )

    def decode_file(
        self, archive_path: Path, output_dir: Path, output_name: Optional[str] = None
    ) -> TransformResult:
        """
        Restore the file held by an archive document.

        The restored name is output_name when given, otherwise the name stored
        in the archive.
        """
        archive_path = Path(archive_path)
        document = ArchiveDocument.from_json(self.storage_handler.read_text(archive_path))
        data = document.file.data()

        # Only the base name of an embedded name is honoured.
        final_name = output_name or Path(document.file.name.replace("\\", "/")).name
        if final_name in ("", ".", "..") or "\x00" in final_name:
            raise FormatError(
                "Archive does not record a usable file name; use --out to name the output",
                path=str(archive_path),
            )

        size = document.file.size
        if size < 0:
            size = len(data)
        elif size != len(data):
            logger.warning(f"Archive records size {size} but holds {len(data)} bytes")

        output_path = Path(output_dir) / final_name
        created = self.storage_handler.write_bytes(output_path, data)
        return TransformResult(
            mode=Mode.DECODE,
            file_name=final_name,
            size=size,
            output_path=output_path,
            created_dir=created,
        )
