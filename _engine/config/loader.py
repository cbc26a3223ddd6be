import os
import tomllib
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError
from rich import print as rprint
from rich.markup import escape

from _data.deepseek import CONFIG_TEMPLATE
from _engine.errors import ConfigurationError, MissingAPIKeyError
from _types.model import Config

# --- Configuration ---
# Only the user's home directory is searched
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "git-aicommit"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


def create_default_config(path: Union[str, Path] = DEFAULT_CONFIG_FILE) -> Path:
    """
    Write the commented default configuration file.

    Args:
        path (Union[str, Path]): Where to write the file. Parent directories are created.

    Returns:
        Path: The path that was written.
    """
    config_path = Path(path)
    try:
        os.makedirs(config_path.parent, exist_ok=True)
        config_path.write_text(CONFIG_TEMPLATE, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"failed to create default config {config_path}: {e}") from e

    rprint(f"[cyan]Created default config at [dim]{escape(str(config_path))}[/dim][/cyan]")
    return config_path


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """
    Load the configuration file, bootstrapping a default one when it is absent.

    Args:
        path (Optional[Union[str, Path]]): Config file to read. Defaults to
            ``~/.config/git-aicommit/config.toml``.

    Returns:
        Config: The validated configuration.

    Raises:
        ConfigurationError: the file cannot be written, read, parsed or validated.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_FILE

    if not config_path.exists():
        create_default_config(config_path)

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"failed to load config: {config_path} is not valid TOML: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"failed to load config: {e}") from e

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"failed to load config: invalid values in {config_path}:\n{e}") from e


def require_api_key(config: Config) -> str:
    """Return the configured API key, or raise if it is empty."""
    api_key = config.deepseek.api_key.strip()
    if not api_key:
        raise MissingAPIKeyError(
            f"No DeepSeek API key found. Please set your API key in the config file ({DEFAULT_CONFIG_FILE})"
        )
    return api_key
