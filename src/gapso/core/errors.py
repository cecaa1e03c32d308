class SandboxError(Exception):
    """Base class for every error raised by the engine."""


class InvalidConfiguration(SandboxError, ValueError):
    """Bad constructor or factory parameters."""


class InvalidState(SandboxError, RuntimeError):
    """Operation not allowed in the current run state."""


class NotFound(SandboxError, KeyError):
    """Unknown benchmark name or archive id."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""
