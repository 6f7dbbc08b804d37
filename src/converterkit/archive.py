"""
The archive document: file metadata plus the file's bytes as base64 text.
"""

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any, Dict

from .errors import FormatError, ParseError


@dataclass(frozen=True)
class ArchivedFile:
    name: str
    extension: str
    size: int
    base64: str

    @classmethod
    def from_bytes(cls, name: str, extension: str, data: bytes) -> "ArchivedFile":
        return cls(
            name=name,
            extension=extension,
            size=len(data),
            base64=base64.b64encode(data).decode("ascii"),
        )

    def data(self) -> bytes:
        """Decode the embedded base64 text back into the original bytes."""
        try:
            # Line-wrapped base64 from other writers is accepted.
            return base64.b64decode("".join(self.base64.split()), validate=True)
        except (binascii.Error, ValueError) as e:
            raise FormatError(f"Archive holds invalid base64 data: {e}") from e


@dataclass(frozen=True)
class ArchiveDocument:
    version: str
    created_at: str
    file: ArchivedFile

    def to_dict(self) -> Dict[str, Any]:
        # Insertion order is the serialised key order.
        return {
            "version": self.version,
            "createdAt": self.created_at,
            "file": {
                "name": self.file.name,
                "extension": self.file.extension,
                "size": self.file.size,
                "base64": self.file.base64,
            },
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "ArchiveDocument":
        """
        Parse and validate archive text.

        Only ``file`` and ``file.base64`` are required; the remaining fields
        are informational and get neutral defaults when absent.

        Raises
        ------
        ParseError
            If the text is not valid JSON.
        FormatError
            If required fields are missing or have the wrong type.
        """
        try:
            payload = json.loads(text)
        except (ValueError, RecursionError) as e:
            raise ParseError(f"Could not parse archive, make sure it is valid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise FormatError("Archive is missing required fields: expected a JSON object")
        entry = payload.get("file")
        if not isinstance(entry, dict) or not isinstance(entry.get("base64"), str):
            raise FormatError("Archive is missing required fields: file.base64")

        name = entry.get("name")
        extension = entry.get("extension")
        size = entry.get("size")
        # size -1 marks an absent or unusable value
        archived = ArchivedFile(
            name=name if isinstance(name, str) else "",
            extension=extension if isinstance(extension, str) else "",
            size=size if isinstance(size, int) and not isinstance(size, bool) and size >= 0 else -1,
            base64=entry["base64"],
        )
        return cls(
            version=str(payload.get("version", "")),
            created_at=str(payload.get("createdAt", "")),
            file=archived,
        )
