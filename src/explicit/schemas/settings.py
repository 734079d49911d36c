"""Builder settings and their resolution.

Settings are resolved once, at startup, from three layers:

Precedence (highest to lowest):
1. CLISettings (command-line overrides)
2. user settings (dict or JSON file contents)
3. BuilderSettings defaults
"""

import json
import logging
from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import field_validator, model_validator

from explicit.schemas.base import ExplicitBaseModel

logger = logging.getLogger(__name__)


class BuilderSettings(ExplicitBaseModel):
    """How the model builder treats raw values.

    Usage
    -----
        settings = BuilderSettings(strip_whitespace=False)
        builder = ModelBuilder(specs, settings)
    """

    strip_whitespace: bool = True
    true_words: tuple[str, ...] = ("true", "1", "yes", "on")
    false_words: tuple[str, ...] = ("false", "0", "no", "off")

    @field_validator("true_words", "false_words", mode="after")
    @classmethod
    def normalize_words(cls, v):
        """Boolean words are matched case-insensitively."""
        return tuple(word.strip().lower() for word in v)

    @model_validator(mode="after")
    def words_are_disjoint(self):
        overlap = set(self.true_words) & set(self.false_words)
        if overlap:
            raise ValueError(f"true_words and false_words overlap: {sorted(overlap)}")
        return self


class CLISettings(ExplicitBaseModel):
    """Command-line overrides. Highest priority in settings resolution."""

    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None
    strip_whitespace: Optional[bool] = None

    def to_overrides(self) -> dict:
        """Return only the builder settings the command line actually set."""
        overrides = {}
        if self.strip_whitespace is not None:
            overrides["strip_whitespace"] = self.strip_whitespace
        return overrides


def merge_layers(base: dict, *overrides: dict) -> dict:
    """Merge flat settings layers; later layers override earlier ones.

    Examples
    --------
    >>> merge_layers({"a": 1, "b": 2}, {"b": 3})
    {'a': 1, 'b': 3}
    """
    result = base.copy()
    for override in overrides:
        result.update(override)
    return result


def load_settings_file(path: Union[str, Path]) -> dict:
    """Read user settings from a JSON file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file does not hold a JSON object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings not found: {path}")

    data = json.loads(path.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must hold a JSON object: {path}")
    return data


def resolve_settings(
    defaults: Optional[Union[dict, BuilderSettings]] = None,
    user: Optional[dict] = None,
    cli: Optional[Union[dict, CLISettings]] = None,
) -> BuilderSettings:
    """Resolve builder settings from defaults, user and CLI layers.

    Parameters
    ----------
    defaults : dict or BuilderSettings, optional
        Base settings. BuilderSettings() when omitted.
    user : dict, optional
        User overrides, typically from load_settings_file().
    cli : dict or CLISettings, optional
        Command-line overrides.

    Returns
    -------
    BuilderSettings
        Validated, frozen settings.

    Raises
    ------
    pydantic.ValidationError
        If any layer holds unknown keys or wrong types.
    """
    if defaults is None:
        base = BuilderSettings()
    elif isinstance(defaults, BuilderSettings):
        base = defaults
    else:
        base = BuilderSettings.model_validate(defaults)

    if cli is None:
        cli_cfg = CLISettings()
    elif isinstance(cli, CLISettings):
        cli_cfg = cli
    else:
        cli_cfg = CLISettings.model_validate(cli)

    merged = merge_layers(base.model_dump(), user or {}, cli_cfg.to_overrides())
    settings = BuilderSettings.model_validate(merged)
    logger.debug("Resolved builder settings: %s", settings.model_dump())
    return settings
