"""Exception hierarchy for oasvc.

All exceptions inherit from :class:`OasvcError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`oasvc.exit_codes`.
The top-level error handler in :func:`oasvc.app.main` catches
``OasvcError`` and exits with the appropriate code.

The extraction core itself never raises for malformed documents; these
exceptions come from the layers around it (loading, reference lookup,
configuration and the CLI).

Subclass hierarchy::

    OasvcError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- SpecParseError      (exit 7)
    +-- ConfigError         (exit 1)
"""

from oasvc.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SPEC_PARSE_ERROR,
)


class OasvcError(Exception):
    """Base exception for all oasvc errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`oasvc.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(OasvcError):
    """Raised for invalid CLI arguments, e.g. an unknown service or operation name."""

    exit_code = EXIT_INVALID_USAGE


class SpecParseError(OasvcError):
    """Raised when a document cannot be loaded, parsed, or one of its ``$ref`` pointers cannot be followed."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class ConfigError(OasvcError):
    """Raised for configuration problems (unreadable or invalid ``oasvc.json``)."""

    exit_code = EXIT_GENERIC_FAILURE
