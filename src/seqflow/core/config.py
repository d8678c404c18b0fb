import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from seqflow.logger.logger import set_level

ENV_PREFIX = "SEQFLOW_"


class Settings(BaseModel):
    LOG_LEVEL: str = Field("INFO", description="Level of the package logger.")
    STRICT_FLATTEN: bool = Field(
        True,
        description="Reject str/bytes results of a flattening function instead of "
        "splitting them into characters.",
    )
    CONFIG_PATH: Optional[Path] = Field(
        None, description="JSON file the settings were read from, if any."
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @classmethod
    def load(cls, environ: Optional[Dict[str, str]] = None) -> "Settings":
        """Build settings from an optional JSON file and the environment.

        Precedence is defaults < ``$SEQFLOW_CONFIG`` file < environment.
        """
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}

        config_path = environ.get(f"{ENV_PREFIX}CONFIG")
        if config_path:
            path = Path(config_path).expanduser()
            if not path.exists():
                raise FileNotFoundError(f"seqflow config file not found at {path}")

            with open(path, "r") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("seqflow config file must contain a JSON object")

            values.update({key.upper(): val for key, val in data.items()})
            values["CONFIG_PATH"] = path

        log_level = environ.get(f"{ENV_PREFIX}LOG_LEVEL") or environ.get("LOG_LEVEL")
        if log_level:
            values["LOG_LEVEL"] = log_level

        strict = environ.get(f"{ENV_PREFIX}STRICT_FLATTEN")
        if strict is not None:
            values["STRICT_FLATTEN"] = strict

        return cls(**values)

    def apply(self) -> "Settings":
        """Push the settings that have a runtime effect (log level)."""
        set_level(self.LOG_LEVEL)
        return self


settings = Settings.load().apply()
