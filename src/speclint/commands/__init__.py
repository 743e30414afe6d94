"""Built-in CLI sub-commands for speclint.

* :mod:`~speclint.commands.lint` -- validate an API description.
* :mod:`~speclint.commands.init` -- write a default ``.speclintrc``.
* :mod:`~speclint.commands.rules` -- list rules and their severities.

Each module exports a plain callback function registered directly on the
root app.
"""
