"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

OPENCC_CONFIGS = ("s2t", "s2tw", "s2twp", "s2hk", "t2s", "tw2s", "tw2sp", "hk2s", "t2tw", "t2hk")


@dataclass(frozen=True)
class FormatConfig:
    """Configuration for reformatting clipboard text.

    Attributes:
        opencc_config: OpenCC conversion profile (``"s2tw"`` converts Simplified
            Chinese to Taiwan-standard Traditional characters).
        convert_script: Whether to run the OpenCC script conversion.
        fullwidth_punctuation: Whether to rewrite half-width punctuation to
            full-width Chinese punctuation.
        cjk_spacing: Whether to insert spaces between CJK and Latin/digit runs.
        continuation_indent: Number of spaces prefixed to continuation lines
            under an open ordered list.
        source_label: Label written before a trailing URL in the footer.
        done_marker: Prefix added to each line by ``mark-done``.
        max_input_length: Maximum number of characters accepted as input.

    Examples:
        FormatConfig(opencc_config="s2twp", continuation_indent=4)
    """

    # Script conversion
    opencc_config: str = "s2tw"
    convert_script: bool = True

    # Content rewriting
    fullwidth_punctuation: bool = True
    cjk_spacing: bool = True

    # Layout
    continuation_indent: int = 3
    source_label: str = "source"
    done_marker: str = "✅"

    # Limits
    max_input_length: int = 1_000_000


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`continuation_indent` must be a positive integer")
    """


# Files searched in each directory, with the tables read from them in order
CONFIG_SOURCES: tuple[tuple[str, tuple[tuple[str, ...], ...]], ...] = (
    ("pyproject.toml", (("tool", "clipfmt"),)),
    (".clipfmt.toml", (("clipfmt",), ("tool", "clipfmt"))),
)


def load_config(search_path: Path) -> FormatConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.clipfmt]`` table from `pyproject.toml` and the ``[clipfmt]`` or
    ``[tool.clipfmt]`` table from `.clipfmt.toml` when present. Returns default
    values when no configuration is found. TOML files that cannot be read or
    decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        FormatConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path.cwd())
    """
    start = search_path.resolve()
    for directory in (start, *start.parents):
        for filename, table_paths in CONFIG_SOURCES:
            config = _load_from_file(directory / filename, table_paths)
            if config is not None:
                return config
    return FormatConfig()


def _load_from_file(
    config_file: Path, table_paths: tuple[tuple[str, ...], ...]
) -> FormatConfig | None:
    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        table = data
        for key in table_path:
            table = table.get(key) if isinstance(table, dict) else None
        if table is None:
            continue

        if not isinstance(table, dict):
            raise ConfigError(f"Invalid `[{'.'.join(table_path)}]` settings in {config_file}")
        try:
            return FormatConfig(**table)
        except TypeError as error:
            raise ConfigError(
                f"Invalid `[{'.'.join(table_path)}]` settings in {config_file}"
            ) from error

    return None


def validate_config(config: FormatConfig) -> None:
    """Validate a `FormatConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If the OpenCC profile is unknown, toggles are not booleans,
            text fields are empty, or numeric limits are non-positive.
    """
    if config.opencc_config not in OPENCC_CONFIGS:
        raise ConfigError(
            f"`opencc_config` must be one of: {', '.join(OPENCC_CONFIGS)}"
        )

    for key in ("convert_script", "fullwidth_punctuation", "cjk_spacing"):
        if not isinstance(getattr(config, key), bool):
            raise ConfigError(f"`{key}` must be a boolean")

    for key in ("source_label", "done_marker"):
        value = getattr(config, key)
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"`{key}` must not be empty")

    for key in ("continuation_indent", "max_input_length"):
        value = getattr(config, key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def apply_overrides(config: FormatConfig, **overrides: object) -> FormatConfig:
    """Apply override values to a `FormatConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        FormatConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `FormatConfig`.
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> FormatConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        FormatConfig: Validated configuration ready for formatting.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), continuation_indent=4)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config
