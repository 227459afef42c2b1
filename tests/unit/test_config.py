from pathlib import Path

import pytest
from pydantic import ValidationError

from urls_core.config import DEFAULT_CONFIG, SafetyConfig, dump_default_config, load_config
from urls_core.errors import ConfigError


@pytest.fixture()
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("urls_core.config.runtime_config_dir", lambda: tmp_path / "user")
    return tmp_path


def test_defaults_without_files(isolated: Path) -> None:
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_explicit_file(isolated: Path) -> None:
    path = isolated / "custom.yaml"
    path.write_text("safety:\n  file_size_warn_bytes: 2000\noutput:\n  dedupe_enabled: true\n", encoding="utf-8")
    config = load_config(path)
    assert config.safety.file_size_warn_bytes == 2000
    assert config.output.dedupe_enabled
    assert config.safety.many_documents_threshold == 8


def test_project_file_is_found(isolated: Path) -> None:
    project = isolated / ".urls-core" / "config.yaml"
    project.parent.mkdir()
    project.write_text("logging:\n  level: debug\n", encoding="utf-8")
    assert load_config().logging.normalized_level() == "DEBUG"


@pytest.mark.parametrize(
    "body",
    [
        "safety: [",
        "safety:\n  file_size_warn_bytes: 10\n",
        "logging:\n  level: loud\n",
    ],
)
def test_invalid_files_raise_config_error(isolated: Path, body: str) -> None:
    path = isolated / "bad.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_config(path)
    assert isinstance(excinfo.value, ValueError)
    assert str(path) in str(excinfo.value)


def test_minimum_thresholds():
    with pytest.raises(ValidationError):
        SafetyConfig(large_output_lines_threshold=10)


def test_dumped_defaults_load_back(isolated: Path) -> None:
    target = isolated / "nested" / "config.yaml"
    dump_default_config(target)
    assert load_config(target) == DEFAULT_CONFIG
