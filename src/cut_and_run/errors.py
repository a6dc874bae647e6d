"""Exception taxonomy and process exit statuses."""

# sysexits.h values, so shell callers can tell failure classes apart.
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_UNAVAILABLE = 69
EX_CANTCREAT = 73


class CutAndRunError(Exception):
    """Base class for errors that abort the whole run."""

    exit_code = 1


class ConfigurationError(CutAndRunError):
    """Malformed worker-count or executor configuration."""

    exit_code = EX_DATAERR


class InputUnavailableError(CutAndRunError):
    """The input file cannot be opened for reading."""

    exit_code = EX_NOINPUT


class ResourceExhaustedError(CutAndRunError):
    """Memory for the line index or a worker buffer could not be allocated."""

    exit_code = EX_UNAVAILABLE


class SpawnError(CutAndRunError):
    """A worker's output target or external command could not be created."""

    exit_code = EX_CANTCREAT
