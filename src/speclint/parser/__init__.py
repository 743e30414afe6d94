"""API description parser -- load documents, follow ``$ref`` pointers, and walk operations.

This sub-package supplies everything the validators need to read a raw
Swagger/OpenAPI document without changing it.

Typical usage::

    from speclint.parser import detect_spec_version, iter_operations, load_spec

    raw = load_spec("swagger.yaml")
    detect_spec_version(raw)  # "swagger 2.0"
    for operation, path_key, method in iter_operations(raw):
        ...

Sub-modules:

* :mod:`~speclint.parser.loader` -- I/O layer (URL, file, stdin) plus format
  detection.
* :mod:`~speclint.parser.resolver` -- Single-hop ``$ref`` resolution.
* :mod:`~speclint.parser.extractor` -- Walks ``paths`` and yields the
  operations to validate.
"""

from speclint.parser.extractor import for_each_operation, iter_operations
from speclint.parser.loader import detect_spec_version, load_spec
from speclint.parser.resolver import resolve_ref

__all__ = [
    "detect_spec_version",
    "for_each_operation",
    "iter_operations",
    "load_spec",
    "resolve_ref",
]
