"""Configuration loading and management for tracetool.

Configuration sources are merged in priority order:
    1. Defaults (defined in TracetoolConfig)
    2. Project config (./tracetool.toml)
    3. Explicit config file (--config)
    4. Environment variables (TRACETOOL_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(backend="simple")
    >>> config.backend
    'simple'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional

from .backends import exists as backend_exists
from .exceptions import ConfigurationError, InvalidConfigError
from .generate import GeneratorOptions

Verbosity = Literal["quiet", "normal", "verbose"]

PROJECT_CONFIG_NAME = "tracetool.toml"
ENV_PREFIX = "TRACETOOL_"


@dataclass(frozen=True)
class TracetoolConfig:
    """Settings for one generator run.

    Attributes:
        backend: Default backend when no backend flag is given
        binary: Path of the traced binary (tapset output)
        target_type: Target type used in the default probe prefix
        target_arch: Target architecture used in the default probe prefix
        probe_prefix: Explicit tapset probe prefix
        provider: DTrace provider name, also the probe macro prefix
        verbosity: Logging verbosity level
    """

    backend: Optional[str] = None
    binary: Optional[str] = None
    target_type: Optional[str] = None
    target_arch: Optional[str] = None
    probe_prefix: Optional[str] = None
    provider: str = "qemu"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.backend is not None and not backend_exists(self.backend):
            raise InvalidConfigError("backend", self.backend, "unknown backend")
        if not isinstance(self.provider, str) or not self.provider.isidentifier():
            raise InvalidConfigError("provider", self.provider, "must be a C identifier")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    def generator_options(self) -> GeneratorOptions:
        return GeneratorOptions(
            binary=self.binary,
            target_type=self.target_type,
            target_arch=self.target_arch,
            probe_prefix=self.probe_prefix,
            provider=self.provider,
        )


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> TracetoolConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); None
            values are ignored

    Returns:
        Validated TracetoolConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    # Accept the CLI spelling (target-arch) in TOML files as well
    merged = {key.replace("-", "_"): value for key, value in merged.items()}

    try:
        return TracetoolConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from TRACETOOL_* environment variables.

    Every TracetoolConfig field can be set this way, for example
    TRACETOOL_BACKEND=simple or TRACETOOL_PROBE_PREFIX=qemu.system.x86_64.
    Empty values are ignored.
    """
    result: dict[str, Any] = {}
    for f in fields(TracetoolConfig):
        value = os.environ.get(f"{ENV_PREFIX}{f.name.upper()}")
        if value:
            result[f.name] = value
    return result


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file, using the [tracetool] table when present."""
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("tracetool", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config file '{path}': [tracetool] must be a table")
    return dict(section)
