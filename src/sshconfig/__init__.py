"""Parse SSH client config files into host entries."""

from sshconfig.parser import parse_lines, parse_ssh_config, parse_ssh_config_text
from sshconfig.types import HostEntry

__all__ = ["HostEntry", "parse_lines", "parse_ssh_config", "parse_ssh_config_text"]
