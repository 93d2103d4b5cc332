"""
Error taxonomy and exit codes for Iceland.

Every error the core reports is an IcelandError carrying the process exit
code the CLI should terminate with. Anything else escaping a command is an
unexpected crash and exits with ERROR_GENERAL.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Config file present but unreadable
ERROR_CONFIG = 3

# Malformed persisted data (timestamp, ledger row)
ERROR_PARSE = 4

# Area not found
ERROR_NOT_FOUND = 5

# Operation conflicts with the current session/area state
ERROR_STATE = 6

# Filesystem failure
ERROR_STORAGE = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_CONFIG: "ERROR_CONFIG",
        ERROR_PARSE: "ERROR_PARSE",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_STATE: "ERROR_STATE",
        ERROR_STORAGE: "ERROR_STORAGE",
    }
    return code_names.get(code, f"UNKNOWN({code})")


class IcelandError(Exception):
    """Application error with exit code."""

    exit_code = ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(IcelandError):
    """The persisted config exists but cannot be read into the expected schema."""

    exit_code = ERROR_CONFIG


class AreaNotFound(IcelandError):
    exit_code = ERROR_NOT_FOUND

    def __init__(self, area: str, hint: str = ""):
        message = f"Area '{area}' does not exist."
        if hint:
            message = f"{message} {hint}"
        super().__init__(message)
        self.area = area


class AreaAlreadyExists(IcelandError):
    exit_code = ERROR_STATE

    def __init__(self, area: str):
        super().__init__(f"Area '{area}' already exists.")
        self.area = area


class InvalidAreaName(IcelandError):
    exit_code = ERROR_INVALID_ARGS


class NoActiveSession(IcelandError):
    exit_code = ERROR_STATE

    def __init__(self, message: str = "No active session. Use `start` first."):
        super().__init__(message)


class SessionAlreadyActive(IcelandError):
    exit_code = ERROR_STATE

    def __init__(self, message: str = "Session already started. Use `stop` first."):
        super().__init__(message)


class NoCurrentArea(IcelandError):
    exit_code = ERROR_STATE

    def __init__(self, message: str = "No current area set. Run `init` or `switch`."):
        super().__init__(message)


class ParseError(IcelandError):
    """Malformed timestamp or ledger row."""

    exit_code = ERROR_PARSE


class StorageError(IcelandError):
    """A directory or file could not be created, read, written or deleted."""

    exit_code = ERROR_STORAGE
