"""Core type definitions for sshconfig."""

from pydantic import BaseModel, Field

DEFAULT_PORT = 22
DEFAULT_USER = "root"
DEFAULT_IDENTITY_FILE = "~/.ssh/id_rsa"


class HostEntry(BaseModel):
    """One ``Host`` block of an SSH client config."""

    name: str  # Text after "Host", verbatim
    host: str
    port: int | None = Field(default=DEFAULT_PORT, ge=0, le=65535)
    user: str = DEFAULT_USER
    identity_file: str | None = DEFAULT_IDENTITY_FILE

    @classmethod
    def for_host(cls, name: str) -> "HostEntry":
        """Open a new block, using the block name as the hostname."""
        return cls(name=name, host=name)

    def to_ssh_args(self) -> list[str]:
        """Convert to ssh command line arguments."""
        args = []
        if self.port is not None and self.port != DEFAULT_PORT:
            args.extend(["-p", str(self.port)])
        if self.identity_file:
            args.extend(["-i", self.identity_file])
        args.append(f"{self.user}@{self.host}")
        return args
