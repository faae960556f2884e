"""Editor settings and their YAML loader."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .yamlfile import YamlFileError, read_mapping

ClearPolicy = Literal["token", "deadline"]


class ConfigError(Exception):
    """Raised when a settings file cannot be loaded or validated."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class EditorSettings(BaseModel):
    """Tunable behavior of an editor session.

    ``clear_policy`` controls notification auto-dismissal: with ``token``
    a timer only clears the notification it was scheduled for; with
    ``deadline`` every timer clears whatever is displayed when it fires.

    The default is ``token``. The browser editor this models behaves like
    ``deadline``, where a stale timer can cut a newer notification short;
    set ``clear_policy: deadline`` to reproduce that exactly.
    """

    model_config = ConfigDict(extra="forbid")

    notification_delay: float = Field(default=3.0, ge=0)
    drop_offset_x: float = 100
    drop_offset_y: float = 50
    clear_policy: ClearPolicy = "token"


def load_settings(path: str | Path | None = None) -> EditorSettings:
    """Load editor settings from a YAML file.

    Args:
        path: Path to the settings file, or None for defaults.

    Returns:
        The parsed EditorSettings.

    Raises:
        ConfigError: If the file cannot be read, parsed, or validated.
    """
    if path is None:
        return EditorSettings()

    try:
        data = read_mapping(path)
    except YamlFileError as e:
        raise ConfigError(str(e), e.path) from e

    try:
        return EditorSettings.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid settings: {problems}", str(path)) from e
