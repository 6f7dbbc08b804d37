"""
Decide the operation mode and where the output goes.
"""

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import ConverterConfig
from .errors import InvalidInputError, NotFoundError


class Mode(enum.Enum):
    ENCODE = "encode"
    DECODE = "decode"


@dataclass(frozen=True)
class ResolvedPaths:
    input_path: Path
    mode: Mode
    output_dir: Path
    # None for a decode without --out: the name comes from the archive itself.
    output_name: Optional[str]


def select_mode(input_path: Path, archive_extension: str) -> Mode:
    """Pick DECODE for archive files, ENCODE for anything else."""
    if input_path.suffix.lower() == archive_extension.lower():
        return Mode.DECODE
    return Mode.ENCODE


def resolve_paths(config: ConverterConfig) -> ResolvedPaths:
    """
    Resolve the input path, operation mode and output location.

    Parameters
    ----------
    config : ConverterConfig
        Invocation settings carrying the user-supplied paths.

    Returns
    -------
    ResolvedPaths
        Absolute input path, mode, output directory and (when known) output filename.

    Raises
    ------
    NotFoundError
        If the input path does not exist.
    InvalidInputError
        If the input path is a directory.
    """
    input_path = Path(config.input_path).resolve()
    if not input_path.exists():
        raise NotFoundError(f"File not found: {config.input_path}", path=str(input_path))
    if input_path.is_dir():
        raise InvalidInputError(
            f"Directories are not supported, please specify a single file: {config.input_path}",
            path=str(input_path),
        )

    mode = select_mode(input_path, config.archive_extension)

    if config.output_path:
        resolved_output = Path(config.output_path).resolve()
        output_dir = resolved_output.parent
        output_name: Optional[str] = resolved_output.name
    elif mode is Mode.ENCODE:
        output_dir = input_path.parent
        output_name = input_path.stem + config.archive_extension
    else:
        output_dir = input_path.parent
        output_name = None

    logger.debug(f"Resolved {input_path} -> mode={mode.value}, dir={output_dir}, name={output_name}")
    return ResolvedPaths(input_path=input_path, mode=mode, output_dir=output_dir, output_name=output_name)
