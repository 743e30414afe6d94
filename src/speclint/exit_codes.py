"""Process exit codes of the ``speclint`` command.

CI jobs gate on these instead of parsing the report::

    $ speclint lint swagger.yaml
    $ echo $?
    3   # EXIT_LINT_ERRORS -- at least one error-severity finding

Warnings never change the exit code.
"""

EXIT_SUCCESS = 0
"""Validation ran and reported no error-severity findings."""

EXIT_GENERIC_FAILURE = 1
"""Configuration problem or internal error."""

EXIT_INVALID_USAGE = 2
"""Bad command-line arguments; raised by Click's own usage checks."""

EXIT_LINT_ERRORS = 3
"""Validation ran and reported at least one error-severity finding."""

EXIT_SPEC_PARSE_ERROR = 7
"""The API description could not be read, parsed, or recognised."""
