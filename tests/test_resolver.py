"""
Pytest for mode selection and output path resolution.
"""

from pathlib import Path

import pytest
from converterkit.config import ConverterConfig
from converterkit.errors import InvalidInputError, NotFoundError
from converterkit.resolver import Mode, resolve_paths, select_mode


@pytest.fixture
def photo(tmp_path) -> Path:
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"\xff\xd8\xff")
    return path


@pytest.fixture
def archive(tmp_path) -> Path:
    path = tmp_path / "archive.txt"
    path.write_text("{}", encoding="utf-8")
    return path


def test_encode_mode_defaults_to_sibling_txt(photo):
    paths = resolve_paths(ConverterConfig(input_path=str(photo)))
    assert paths.mode is Mode.ENCODE
    assert paths.input_path == photo.resolve()
    assert paths.output_dir == photo.resolve().parent
    assert paths.output_name == "photo.txt"


def test_decode_mode_leaves_name_to_archive(archive):
    paths = resolve_paths(ConverterConfig(input_path=str(archive)))
    assert paths.mode is Mode.DECODE
    assert paths.output_dir == archive.resolve().parent
    assert paths.output_name is None


def test_mode_selection_is_case_insensitive():
    assert select_mode(Path("archive.TXT"), ".txt") is Mode.DECODE
    assert select_mode(Path("archive.Txt"), ".txt") is Mode.DECODE
    assert select_mode(Path("photo.jpg"), ".txt") is Mode.ENCODE
    assert select_mode(Path("README"), ".txt") is Mode.ENCODE


def test_custom_archive_extension(photo):
    config = ConverterConfig(input_path=str(photo), archive_extension=".JPG")
    assert config.archive_extension == ".jpg"
    assert resolve_paths(config).mode is Mode.DECODE


def test_relative_input_resolves_against_cwd(photo):
    paths = resolve_paths(ConverterConfig(input_path="photo.jpg"))
    assert paths.input_path == photo.resolve()


def test_explicit_output_splits_dir_and_name(photo, tmp_path):
    config = ConverterConfig(input_path=str(photo), output_path="nested/dir/out.txt")
    paths = resolve_paths(config)
    assert paths.output_dir == (tmp_path / "nested" / "dir").resolve()
    assert paths.output_name == "out.txt"
    # Directory creation is left to the transform.
    assert not (tmp_path / "nested").exists()


def test_explicit_output_overrides_decode_name(archive, tmp_path):
    config = ConverterConfig(input_path=str(archive), output_path=str(tmp_path / "restored.bin"))
    paths = resolve_paths(config)
    assert paths.mode is Mode.DECODE
    assert paths.output_name == "restored.bin"


def test_missing_input_raises_not_found(tmp_path):
    with pytest.raises(NotFoundError) as excinfo:
        resolve_paths(ConverterConfig(input_path=str(tmp_path / "missing.jpg")))
    assert excinfo.value.path.endswith("missing.jpg")


def test_directory_input_raises_invalid_input(tmp_path):
    folder = tmp_path / "folder"
    folder.mkdir()
    with pytest.raises(InvalidInputError):
        resolve_paths(ConverterConfig(input_path=str(folder)))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"archive_extension": "txt"},
        {"archive_extension": "."},
        {"utc_offset_hours": 30},
        {"log_level": "LOUD"},
    ],
)
def test_config_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        ConverterConfig(input_path="x", **kwargs)
