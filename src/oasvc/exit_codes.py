"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~oasvc.exceptions.OasvcError` subclass.
Build scripts that wrap ``oasvc extract`` can inspect the exit code to tell
a broken document apart from a bad invocation without parsing stderr.

Example::

    $ oasvc extract broken.yaml
    $ echo $?
    7   # EXIT_SPEC_PARSE_ERROR -- the document could not be loaded
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments (unknown service, operation, ...)."""

EXIT_SPEC_PARSE_ERROR = 7
"""The API description document could not be loaded, parsed or dereferenced."""
