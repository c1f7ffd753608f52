"""Dotenv preloading into the process environment.

Sources are merged additively: a variable already present in ``os.environ``
is never overridden by a file. Parsing is delegated to python-dotenv.
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from dotenv import load_dotenv
from dotenv.parser import parse_stream

from envrecord.services.errors import DotenvLoadError
from envrecord.utils.constant import DEFAULT_DOTENV_FILE

Source = str | os.PathLike[str]


def load_source(source: Source) -> None:
    """Merge a single dotenv file into the process environment.

    Args:
        source: Path of the ``KEY=VALUE`` file.

    Raises:
        DotenvLoadError: If the file cannot be read, decoded or parsed. Nothing
            from the file is merged in that case.
    """
    try:
        content = Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeError) as e:
        raise DotenvLoadError(source, e) from e

    for binding in parse_stream(io.StringIO(content)):
        if binding.error:
            reason = ValueError(f"could not parse statement starting at line {binding.original.line}")
            raise DotenvLoadError(source, reason)

    load_dotenv(stream=io.StringIO(content), override=False)
    logging.debug("Loaded dotenv file '%s'", os.fspath(source))


def load_sources(
    sources: Iterable[Source] = (),
    *,
    default: Source = DEFAULT_DOTENV_FILE,
) -> DotenvLoadError | None:
    """Merge dotenv files into the process environment, deferring failure.

    Loading stops at the first source that cannot be read; sources before it
    stay merged.

    Args:
        sources: Dotenv files to load, in order. When empty, ``default`` is used.
        default: File loaded when no sources are given.

    Returns:
        The first load failure, or None if every source was merged.
    """
    paths = list(sources) or [default]
    for path in paths:
        try:
            load_source(path)
        except DotenvLoadError as e:
            logging.debug("Deferring dotenv load failure: %s", e)
            return e
    return None
