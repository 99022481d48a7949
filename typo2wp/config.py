"""
Run configuration for the migration.

Options are collected once at startup, from built-in defaults, an
optional JSON configuration file and the command line (in increasing
order of precedence), and frozen into a :class:`MigrationOptions`
instance that every phase receives.

A configuration file looks like::

    {
      "migration": {
        "prefix": "blog_",
        "overwrite_policy": "never",
        "gmt_offset_hours": 5,
        "report_dir": "reports/migration"
      }
    }
"""

from __future__ import annotations

import json
import os
from typing import Any, Callable, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from typo2wp.utils.dates import DEFAULT_GMT_OFFSET_HOURS
from typo2wp.utils.errors import ConfigurationError
from typo2wp.utils.prompts import yesno

OverwritePolicy = Literal["always", "never", "ask"]


class MigrationOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    from_db: str
    to_db: Optional[str] = None
    prefix: str = "wp_"
    overwrite_policy: OverwritePolicy = "ask"
    gmt_offset_hours: int = DEFAULT_GMT_OFFSET_HOURS
    post_author: int = 1
    report_dir: Optional[str] = None

    def should_overwrite(self, prompt: str, input_fn: Callable[[str], str] = input) -> bool:
        """Decide whether an existing destination row gets overwritten."""
        if self.overwrite_policy == "ask":
            return yesno(prompt, input_fn)
        return self.overwrite_policy == "always"


def load_config_file(path: Optional[str]) -> Dict[str, Any]:
    """Return the ``migration`` section of a JSON config file, if any."""
    if not path or not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read config file {path}: {e}") from e
    return dict(config.get("migration") or {})


def build_options(cli_values: Dict[str, Any], config_file: Optional[str] = None) -> MigrationOptions:
    """
    Merge config file values and command line values into options.

    ``cli_values`` entries that are ``None`` were not given on the
    command line and leave the file (or built-in) value in place.
    """
    values = load_config_file(config_file)
    values.update({k: v for k, v in cli_values.items() if v is not None})
    try:
        return MigrationOptions(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid migration options: {e}") from e
