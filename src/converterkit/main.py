"""
Main entry point: convert a file to a TXT archive or restore a file from one.
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from . import __version__
from .config import ConverterConfig
from .encoder import ArchiveEncoder, TransformResult
from .errors import ConverterError, MissingArgumentError
from .local_storage import LocalStorageHandler
from .resolver import Mode, resolve_paths
from .utils import format_bytes, printable

EXAMPLES = """\
examples:
  converter photo.jpg --out archive.txt    # file -> TXT
  converter archive.txt --out photo.jpg    # TXT -> file
  converter photo.jpg                      # writes photo.txt next to the input
  converter archive.txt                    # restores the original file name
"""


class ConverterArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"❌ {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = ConverterArgumentParser(
        prog="converter",
        description="Convert a single file to a TXT archive and back.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", help="File to encode, or a .txt archive to restore.")
    parser.add_argument("-o", "--out", metavar="PATH", help="Output path (file name included).")
    parser.add_argument("-v", "--version", action="version", version=f"v{__version__}")
    return parser


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> | {message}")


def convert(config: ConverterConfig) -> TransformResult:
    """
    Resolve paths for one invocation and run the matching transform.
    """
    paths = resolve_paths(config)
    encoder = ArchiveEncoder(LocalStorageHandler(), utc_offset_hours=config.utc_offset_hours)
    if paths.mode is Mode.ENCODE:
        return encoder.encode_file(paths.input_path, paths.output_dir / paths.output_name)
    return encoder.decode_file(paths.input_path, paths.output_dir, paths.output_name)


def report(result: TransformResult) -> None:
    if result.created_dir:
        print(f"📁 Created directory: {printable(str(result.output_path.parent))}")
    if result.mode is Mode.ENCODE:
        print("✅ File -> TXT conversion complete!")
        print(f"   Source: {printable(result.file_name)} ({format_bytes(result.size)})")
    else:
        print("✅ TXT -> file restore complete!")
        print(f"   File:   {printable(result.file_name)} ({format_bytes(result.size)})")
    print(f"   Output: {printable(str(result.output_path))}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if not args.input:
            raise MissingArgumentError("Please specify an input file")
        config = ConverterConfig.from_env(args.input, args.out)
    except MissingArgumentError as e:
        print(f"❌ {e}", file=sys.stderr)
        print("   Run 'converter --help' for usage.", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(config.log_level)
    try:
        result = convert(config)
    except ConverterError as e:
        logger.debug(f"{type(e).__name__} (path={e.path})")
        print(f"❌ Conversion failed: {printable(str(e))}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130

    report(result)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
