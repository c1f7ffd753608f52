"""Populate typed records from environment variables.

``load`` returns a fully populated record or raises ``EnvLoadError`` listing
every missing variable. ``load_or_exit`` is the process entry-point variant:
it logs the same report and terminates with a non-zero status.

Concurrent calls share ``os.environ`` without any locking.
"""

from __future__ import annotations

import logging
import os
from typing import TypeVar

from envrecord.services.dotenv_source import Source, load_sources
from envrecord.services.errors import EnvLoadError, MissingVariable
from envrecord.services.field_mapping import bindings_for
from envrecord.utils.constant import (
    ABORT_EXIT_CODE,
    LOG_FORMAT,
    REPORT_ABORT_LINE,
    REPORT_HEADER,
)

T = TypeVar("T")


def load(record_type: type[T], *sources: Source) -> T:
    """Load dotenv sources and populate a record from the environment.

    Every field is visited once, in declaration order. A dotenv failure is
    only surfaced when at least one variable is also missing.
    The record is only constructed once every variable resolved, so its
    ``__post_init__`` never sees empty values.

    Args:
        record_type: Dataclass describing the expected variables.
        *sources: Dotenv files merged into the environment first. With none,
            the default ``.env`` file is tried.

    Returns:
        A record whose fields hold the environment values.

    Raises:
        EnvLoadError: If any field's variable is absent or empty.
        TypeError: If ``record_type`` is not a valid record type.
    """
    bindings = bindings_for(record_type)
    dotenv_error = load_sources(sources)

    values: dict[str, str] = {}
    missing: list[MissingVariable] = []
    for binding in bindings:
        value = os.environ.get(binding.env_key, "")
        if not value:
            missing.append(MissingVariable(env_key=binding.env_key, field_name=binding.field_name))
        values[binding.field_name] = value

    if missing:
        raise EnvLoadError(missing, dotenv_error, values=values)
    return record_type(**values)


def format_report(error: EnvLoadError) -> list[str]:
    """Render the abort report for a failed load.

    Args:
        error: The aggregated load failure.

    Returns:
        Header line, one `` - `` line per diagnostic, and the abort line.
    """
    return [REPORT_HEADER, *(f" - {message}" for message in error.messages()), REPORT_ABORT_LINE]


def load_or_exit(record_type: type[T], *sources: Source) -> T:
    """Populate a record or log every problem and terminate the process.

    Args:
        record_type: Dataclass describing the expected variables.
        *sources: Dotenv files merged into the environment first.

    Returns:
        The populated record. Never returns when a variable is missing.

    Raises:
        SystemExit: With a non-zero status when any variable is missing.
    """
    try:
        return load(record_type, *sources)
    except EnvLoadError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        *lines, abort_line = format_report(e)
        for line in lines:
            logging.error(line)
        logging.critical(abort_line)
        raise SystemExit(ABORT_EXIT_CODE) from e
