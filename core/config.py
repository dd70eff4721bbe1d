"""
User settings for godict.

Settings live in an optional JSON file (by default ~/.godict/settings.json).
Command-line options always win over values read from the file.
"""

from dataclasses import dataclass, field
import json
from pathlib import Path

from constants import DEFAULT_GO_BINARY
from core.exceptions import ConfigError, FileReadError
from core.file_io import FileReader, FilesystemFileReader
from models import NormalizeMode


CONFIG_DIR = Path.home() / ".godict"
CONFIG_FILE = CONFIG_DIR / "settings.json"


@dataclass(frozen=True)
class Settings:
    """
    Resolved settings for a run.

    Attributes:
        mode: Normalization policy applied to every harvested token.
        go_binary: Name or path of the `go` executable used to list std.
        extra_words: Additional words seeded into every dictionary.
    """

    mode: NormalizeMode = NormalizeMode.STRICT
    go_binary: str = DEFAULT_GO_BINARY
    extra_words: tuple[str, ...] = field(default_factory=tuple)


def load_settings(
    path: Path | None = None, reader: FileReader | None = None
) -> Settings:
    """
    Load settings from a JSON file, falling back to defaults when it is absent.

    Args:
        path: Settings file to read. Defaults to CONFIG_FILE.
        reader: File reader used to load the file. Defaults to FilesystemFileReader.

    Returns:
        Settings: The parsed settings, or defaults if the file does not exist.

    Raises:
        ConfigError: If the file cannot be read, is not a JSON object, or holds
            invalid values.
    """
    config_path = path if path is not None else CONFIG_FILE
    if not config_path.exists():
        return Settings()

    reader = reader if reader is not None else FilesystemFileReader()
    try:
        data = json.loads(reader.read_text(config_path))
    except (FileReadError, json.JSONDecodeError) as e:
        raise ConfigError(
            message=f"Could not load settings from {config_path}",
            config_path=str(config_path),
            original_exception=e,
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Settings file must contain a JSON object: {config_path}",
            config_path=str(config_path),
        )

    return _settings_from_dict(data, config_path)


def _settings_from_dict(data: dict, config_path: Path) -> Settings:
    defaults = Settings()

    raw_mode = data.get("mode", defaults.mode)
    try:
        mode = NormalizeMode(raw_mode)
    except ValueError as e:
        raise ConfigError(
            message=f"Unknown normalization mode {raw_mode!r} in {config_path}",
            config_path=str(config_path),
            original_exception=e,
        ) from e

    go_binary = data.get("go_binary") or defaults.go_binary
    if not isinstance(go_binary, str):
        raise ConfigError(
            message=f"'go_binary' must be a string in {config_path}",
            config_path=str(config_path),
        )

    extra_words = data.get("extra_words", [])
    if not isinstance(extra_words, list) or not all(
        isinstance(w, str) for w in extra_words
    ):
        raise ConfigError(
            message=f"'extra_words' must be a list of strings in {config_path}",
            config_path=str(config_path),
        )

    return Settings(mode=mode, go_binary=go_binary, extra_words=tuple(extra_words))
