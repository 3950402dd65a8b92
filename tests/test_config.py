import sys

import pytest

from run1c.config import (
    Config,
    default_font_path,
    default_starter_path,
    default_storage_path,
    is_starter_valid,
    is_valid_path,
)


@pytest.fixture
def font_file(tmp_path):
    path = tmp_path / "test_font.ttf"
    path.write_bytes(b"")
    return str(path)


@pytest.fixture
def starter_file(tmp_path):
    path = tmp_path / "1cestart.exe"
    path.write_bytes(b"")
    return str(path)


def test_default_font_path():
    path = default_font_path()
    assert path
    assert "Fonts" in path


def test_custom_font_path(font_file, tmp_path):
    config = Config()
    assert config.use_font(font_file) is True
    assert config.font_path() == font_file

    missing = str(tmp_path / "non_existent_font.ttf")
    assert config.use_font(missing) is False
    assert config.font_path() != missing
    assert config.font_path() == font_file


def test_font_path_falls_back_to_default(tmp_path):
    config = Config()
    config.use_font(str(tmp_path / "non_existent_font.ttf"))
    assert config.font_path() == default_font_path()


def test_default_starter_path():
    path = default_starter_path()
    assert "1cv8" in path
    assert "1cestart.exe" in path


def test_default_starter_path_from_environment(monkeypatch):
    monkeypatch.setenv("PROGRAMFILES", "D:\\Apps")
    assert default_starter_path() == "D:\\Apps\\1cv8\\common\\1cestart.exe"


def test_default_starter_path_without_environment(monkeypatch):
    monkeypatch.delenv("PROGRAMFILES", raising=False)
    assert default_starter_path() == "C:\\Program Files\\1cv8\\common\\1cestart.exe"


def test_custom_starter_path(starter_file, tmp_path):
    config = Config()
    assert config.use_starter(starter_file) is True
    assert config.starter_path() == starter_file

    missing = str(tmp_path / "non_existent_1cestart.exe")
    assert config.use_starter(missing) is False
    assert config.starter_path() != missing


def test_starter_path_falls_back_to_default(monkeypatch, tmp_path):
    monkeypatch.setenv("PROGRAMFILES", "D:\\Apps")
    config = Config()
    config.use_starter(str(tmp_path / "1cestart.exe"))
    assert config.starter_path() == "D:\\Apps\\1cv8\\common\\1cestart.exe"


def test_base_font_size():
    config = Config()
    assert config.base_font_size() == 18
    assert config.use_base_font_size(24) is True
    assert config.base_font_size() == 24
    assert config.use_base_font_size(4) is False
    assert config.base_font_size() == 24
    assert config.use_base_font_size(80) is False
    assert config.base_font_size() == 24


@pytest.mark.parametrize("size", [8, 72])
def test_base_font_size_bounds(size):
    config = Config()
    config.use_base_font_size(size)
    assert config.base_font_size() == size


def test_storage_file_path():
    config = Config()
    config.use_storage_path("custom_storage.ini")
    assert config.storage_path() == "custom_storage.ini"


def test_storage_path_default_linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("HOME", "/home/user")
    assert Config().storage_path() == "/home/user/.config/run1c/run1c_storage.ini"


def test_storage_path_default_macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setenv("HOME", "/Users/user")
    assert (
        default_storage_path()
        == "/Users/user/Library/Application Support/RUN1C/run1c_storage.ini"
    )


def test_storage_path_default_windows(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.setenv("LOCALAPPDATA", "C:\\Local")
    assert default_storage_path() == "C:\\Local\\RUN1C\\run1c_storage.ini"


def test_storage_path_windows_userprofile(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.delenv("LOCALAPPDATA", raising=False)
    monkeypatch.setenv("USERPROFILE", "C:\\Users\\user")
    assert (
        default_storage_path()
        == "C:\\Users\\user\\AppData\\Local\\RUN1C\\run1c_storage.ini"
    )


def test_storage_path_without_home(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("HOME", raising=False)
    assert default_storage_path() == "run1c_storage.ini"


def test_valid_path(font_file, tmp_path):
    assert is_valid_path(font_file) is True
    assert is_valid_path(str(tmp_path / "non_existent_file.txt")) is False
    assert is_valid_path("") is False


def test_is_starter_valid(starter_file, tmp_path):
    assert is_starter_valid(starter_file) is True

    invalid = tmp_path / "invalid_file.exe"
    invalid.write_bytes(b"")
    assert is_starter_valid(str(invalid)) is False

    assert is_starter_valid(str(tmp_path / "non_existent_file.exe")) is False