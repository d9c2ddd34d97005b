"""SSH client config parser.

Reads ``Host`` blocks from an OpenSSH-style client config and returns one
:class:`HostEntry` per block, in file order. Only ``HostName``, ``Port``,
``User`` and ``IdentityFile`` are interpreted; every other directive is
accepted and ignored. Malformed lines are skipped rather than reported.
"""

import logging
import os
from typing import Iterable

from sshconfig.types import HostEntry

logger = logging.getLogger(__name__)

MAX_PORT = 65535


def parse_port(value: str) -> int | None:
    """Parse an unsigned 16-bit port number, returning None if invalid."""
    digits = value[1:] if value.startswith("+") else value
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    port = int(digits)
    if port > MAX_PORT:
        return None
    return port


def parse_lines(lines: Iterable[str]) -> list[HostEntry]:
    """Parse config lines into host entries.

    Args:
        lines: Raw config lines, with or without line terminators.

    Returns:
        Entries ordered by the position of their ``Host`` line.
    """
    entries: list[HostEntry] = []
    current: HostEntry | None = None

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()

        # Skip empty lines and full-line comments
        if not line or line.startswith("#"):
            continue

        parts = line.split(" ", 1)
        if len(parts) != 2:
            continue

        keyword = parts[0].lower()
        value = parts[1].strip()

        if keyword == "host":
            if current is not None:
                entries.append(current)
            current = HostEntry.for_host(value)
            continue

        if current is None:
            logger.debug(f"Line {lineno}: discarding {parts[0]!r} before first Host")
            continue

        if keyword == "hostname":
            current.host = value
        elif keyword == "port":
            port = parse_port(value)
            if port is None:
                logger.debug(f"Line {lineno}: ignoring invalid port {value!r}")
            else:
                current.port = port
        elif keyword == "user":
            current.user = value
        elif keyword == "identityfile":
            current.identity_file = value

    if current is not None:
        entries.append(current)

    return entries


def parse_ssh_config_text(text: str) -> list[HostEntry]:
    """Parse config text already held in memory."""
    return parse_lines(text.split("\n"))


def parse_ssh_config(path: str | os.PathLike) -> list[HostEntry]:
    """
    Parse an SSH config file.

    A leading ``~`` in the path is expanded to the home directory.

    Args:
        path: Path to the config file.

    Returns:
        Host entries in file order.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    config_path = os.path.expanduser(os.fspath(path))
    logger.debug(f"Parsing SSH config {config_path}")

    try:
        # Lines end at "\n" only; a trailing "\r" is removed by strip()
        with open(config_path, encoding="utf-8", newline="\n") as f:
            entries = parse_lines(f)
    except UnicodeDecodeError as e:
        raise OSError(f"{config_path}: stream did not contain valid UTF-8") from e

    logger.debug(f"Parsed {len(entries)} host entries from {config_path}")
    return entries
