"""Configuration loading for linestat.

Configuration sources are merged in priority order (lowest to highest):
    1. Defaults (defined in ScanConfig)
    2. Project config (./linestat.toml)
    3. Explicit config file (``--config``)
    4. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(chunk_size=4096)
    >>> config.chunk_size
    4096
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from .exceptions import ConfigurationError, InvalidConfigError

PROJECT_CONFIG_NAME = "linestat.toml"


@dataclass(frozen=True)
class ScanConfig:
    """Settings for one invocation.

    Attributes:
        chunk_size: Bytes requested per read; affects I/O only, never results
        workers: Files scanned concurrently (1 = strictly sequential)
        debug: Emit per-line diagnostics to stderr
        average_precision: Decimal places used when printing averages
        tsv_path: Destination of the detailed TSV table ("-" = stdout)
    """

    chunk_size: int = 1024
    workers: int = 1
    debug: bool = False
    average_precision: int = 2
    tsv_path: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("chunk_size", "workers", "average_precision"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigError(name, value, "must be an integer")
        if not isinstance(self.debug, bool):
            raise InvalidConfigError("debug", self.debug, "must be true or false")
        if self.tsv_path is not None and not isinstance(self.tsv_path, str):
            raise InvalidConfigError("tsv_path", self.tsv_path, "must be a string")

        if self.chunk_size < 1:
            raise InvalidConfigError("chunk_size", self.chunk_size, "must be at least 1")
        if self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if not 0 <= self.average_precision <= 10:
            raise InvalidConfigError(
                "average_precision", self.average_precision, "must be between 0 and 10"
            )


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> ScanConfig:
    """Load configuration with project-file discovery and merging.

    Args:
        config_file: Optional explicit TOML config file
        **overrides: Direct overrides (typically from CLI flags); None values
            are ignored so unset flags never mask file settings

    Returns:
        Validated ScanConfig instance

    Raises:
        ConfigurationError: If a config file is missing, unreadable or holds
            unknown keys
        InvalidConfigError: If a value is out of range
    """
    merged: dict[str, Any] = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.is_file():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(ScanConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            details={"allowed": ", ".join(sorted(known))},
        )

    return ScanConfig(**merged)


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return the parsed dict.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
