from typing import Optional


class ConverterError(Exception):
    """Base class for Converter Kit errors."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


# Command line
class MissingArgumentError(ConverterError):
    pass


# Input resolution
class NotFoundError(ConverterError):
    pass


class InvalidInputError(ConverterError):
    pass


# Filesystem boundary
class ArchiveIOError(ConverterError):
    pass


# Archive document
class ParseError(ConverterError):
    pass


class FormatError(ConverterError):
    pass
