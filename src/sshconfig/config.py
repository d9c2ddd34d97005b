"""Configuration models for the sshconfig command-line tool."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

from sshconfig.types import DEFAULT_IDENTITY_FILE, DEFAULT_PORT


class DisplayConfig(BaseModel):
    """How parsed entries are printed."""

    format: Literal["plain", "table", "json"] = "plain"
    default_port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)  # Shown for unset ports
    default_identity_file: str = DEFAULT_IDENTITY_FILE


class SSHConfigToolConfig(BaseModel):
    """Main sshconfig configuration."""

    ssh_config: str = "~/.ssh/config"
    display: DisplayConfig = DisplayConfig()


def load_config(path: Path) -> SSHConfigToolConfig:
    """Load configuration from YAML file."""
    with open(path) as f:
        data = yaml.safe_load(f)
    return SSHConfigToolConfig.model_validate(data or {})


def load_config_or_default(path: Path | None) -> SSHConfigToolConfig:
    """Load configuration if the file exists, otherwise return defaults."""
    if path is None or not path.exists():
        return SSHConfigToolConfig()
    return load_config(path)


def get_config_template() -> str:
    """Get the default configuration template."""
    return """# sshconfig configuration

# File parsed when no path is given on the command line.
ssh_config: ~/.ssh/config

display:
  format: plain  # 'plain', 'table' or 'json'
  # Shown for entries that carry no port or identity file
  default_port: 22
  default_identity_file: ~/.ssh/id_rsa
"""
