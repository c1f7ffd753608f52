"""Command-line check that an environment satisfies a record type.

Usage::

    envrecord-check myapp.settings:Settings .env .env.local

Exits 0 when every variable resolves, non-zero with the missing-variable
report otherwise. Values are never printed.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys

from envrecord.services.field_mapping import bindings_for
from envrecord.services.loader import load_or_exit
from envrecord.utils.constant import LOG_FORMAT


def import_record_type(path: str) -> type:
    """Import a record type from a ``module:QualName`` path.

    Args:
        path: Dotted module path and attribute, separated by a colon.

    Returns:
        The imported class.

    Raises:
        ValueError: If the path is malformed or does not name a class.
        ImportError: If the module cannot be imported.
    """
    module_name, sep, qualname = path.partition(":")
    if not sep or not module_name or not qualname:
        raise ValueError(f"expected 'module:RecordType', got '{path}'")

    target: object = importlib.import_module(module_name)
    for part in qualname.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ValueError(f"'{module_name}' has no attribute '{qualname}'") from e

    if not isinstance(target, type):
        raise ValueError(f"'{path}' is not a class")
    return target


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="envrecord-check",
        description="Check that environment variables populate a record type.",
    )
    parser.add_argument("record", help="Record type as 'module:RecordType'")
    parser.add_argument("sources", nargs="*", help="Dotenv files loaded before the check")
    parser.add_argument(
        "--app-dir",
        default=".",
        help="Directory prepended to the module search path (default: current directory)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    sys.path.insert(0, args.app_dir)
    try:
        record_type = import_record_type(args.record)
        bindings = bindings_for(record_type)
    except (ImportError, TypeError, ValueError) as e:
        parser.error(str(e))

    load_or_exit(record_type, *args.sources)
    logging.info(
        "Loaded %d environment variables into %s",
        len(bindings),
        record_type.__name__,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
