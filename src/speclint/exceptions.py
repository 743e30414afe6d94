"""Errors raised while loading inputs for a lint run.

Each carries the ``exit_code`` the CLI exits with after printing the message.
Rules and the validation engine never raise on document content: a malformed
operation is skipped or reported as a finding instead.

Hierarchy::

    SpeclintError (exit 1)
    +-- SpecParseError      (exit 7)  API description unreadable or unsupported
    +-- ConfigError         (exit 1)  config file missing or invalid
"""

from speclint.exit_codes import EXIT_GENERIC_FAILURE, EXIT_SPEC_PARSE_ERROR


class SpeclintError(Exception):
    """Base class for errors the CLI reports and exits on.

    Args:
        message: Printed to stderr, prefixed with ``Error:``.
        exit_code: Overrides the class-level ``exit_code``.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class SpecParseError(SpeclintError):
    """The API description could not be loaded, parsed, or recognised."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class ConfigError(SpeclintError):
    """A config file is missing, is not a JSON object, or names an unknown severity."""

    exit_code = EXIT_GENERIC_FAILURE
