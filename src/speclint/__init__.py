"""speclint -- check Swagger/OpenAPI operations against API design conventions.

This package validates an already-parsed API description against a fixed set
of conventions for operations: declared content types, ``operationId`` and
``summary`` presence, response shape, and parameter ordering. Each rule's
severity (``error``, ``warning``, or ``off``) is configurable.

Typical workflow::

    speclint init                 # write a default .speclintrc
    speclint lint swagger.yaml    # report findings, exit 3 on errors

Library use::

    from speclint.parser import load_spec
    from speclint.validation import lint

    result = lint(load_spec("swagger.yaml"))

Modules:
    app: The Typer application, its commands, and the console-script entry point.
    models: Pydantic models shared across the entire package.
    config: Config file discovery, loading, and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
    report: Findings report rendering.
"""

__version__ = "0.1.0"
