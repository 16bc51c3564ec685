from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from typeoracle.reporting.reporters import (
    CollectingReporter,
    FailureReporter,
    RaisingReporter,
)
from typeoracle.verbose import LIBRARY_LOGGER, setup_logger


def _expand(value: str) -> str:
    # Raises when a ${VAR} without a default is unset
    return expandvars(value, nounset=True)


class JunitConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str
    suite_name: str = "typeoracle"

    @field_validator("suite_name")
    @classmethod
    def suite_name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("suite_name must not be blank")
        return v


class OracleConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    reporter: Literal["raise", "collect"] = "raise"
    debug_log: str | None = None
    verbose: bool = False
    junit: JunitConfig | None = None

    @model_validator(mode="after")
    def expand_path_variables(self) -> "OracleConfig":
        """Expand ${VAR} references in path settings.

        Raises ValueError listing every missing variable so the user can fix them
        all at once.
        """
        missing: list[str] = []
        expanded: dict[str, str] = {}
        paths = {"debug_log": self.debug_log}
        if self.junit is not None:
            paths["junit.path"] = self.junit.path

        for key, value in paths.items():
            if value is None:
                continue
            try:
                expanded[key] = _expand(value)
            except Exception:
                missing.append(f"  {key}={value}")

        if missing:
            details = "\n".join(missing)
            raise ValueError(f"Config has missing environment variables:\n{details}")

        if "debug_log" in expanded:
            self.debug_log = expanded["debug_log"]
        if "junit.path" in expanded:
            self.junit.path = expanded["junit.path"]
        return self

    @model_validator(mode="after")
    def junit_requires_collecting_reporter(self) -> "OracleConfig":
        if self.junit is not None and self.reporter != "collect":
            raise ValueError("junit output requires reporter: collect")
        return self


def load_config(path: Path) -> OracleConfig:
    """Load and validate an oracle config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = OracleConfig(**raw)

    # Resolve relative paths relative to config file location
    if config.debug_log is not None and not Path(config.debug_log).is_absolute():
        config.debug_log = str((config_dir / config.debug_log).resolve())
    if config.junit is not None and not Path(config.junit.path).is_absolute():
        config.junit.path = str((config_dir / config.junit.path).resolve())

    return config


def build_reporter(config: OracleConfig) -> FailureReporter:
    if config.reporter == "collect":
        return CollectingReporter()
    return RaisingReporter()


def configure_logging(config: OracleConfig) -> logging.Logger | None:
    """Attach the configured debug log to the library logger, if any."""
    if config.debug_log is None:
        return None
    return setup_logger(config.debug_log, verbose=config.verbose, logger_name=LIBRARY_LOGGER)
