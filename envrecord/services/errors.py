"""Errors raised while populating a record from the environment.

Missing variables are collected rather than raised one at a time, so a single
``EnvLoadError`` describes every unresolved field of a record.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class MissingVariable:
    """A record field whose environment variable is absent or empty.

    Attributes:
        env_key: Environment variable name that was looked up.
        field_name: Record field the value was meant for.
    """

    env_key: str
    field_name: str

    def __str__(self) -> str:
        return (
            f"has no `{self.env_key}` environment variable defined "
            f"to populate into `{self.field_name}` instance field"
        )


class DotenvLoadError(Exception):
    """A dotenv source could not be read.

    Not fatal on its own: it is only reported together with missing variables.
    """

    def __init__(self, source: str | os.PathLike[str], reason: Exception) -> None:
        """Initialize the error.

        Args:
            source: Path of the dotenv file that failed to load.
            reason: Underlying read, decode or parse error.
        """
        self.source = os.fspath(source)
        self.reason = reason
        detail = getattr(reason, "strerror", None) or reason
        super().__init__(f"failed to load dotenv file '{self.source}': {detail}")


class EnvLoadError(Exception):
    """One or more record fields could not be resolved from the environment.

    Attributes:
        missing: Missing variables, in field declaration order.
        dotenv_error: Deferred dotenv failure, if any source failed to load.
        values: Field values that were read, empty for missing variables.
    """

    def __init__(
        self,
        missing: list[MissingVariable],
        dotenv_error: DotenvLoadError | None = None,
        values: dict[str, str] | None = None,
    ) -> None:
        self.missing = list(missing)
        self.dotenv_error = dotenv_error
        self.values = dict(values or {})
        super().__init__("; ".join(self.messages()))

    def messages(self) -> list[str]:
        """Return one diagnostic per problem, dotenv failure last.

        Returns:
            Diagnostic messages in report order.
        """
        lines = [str(item) for item in self.missing]
        if self.dotenv_error is not None:
            lines.append(str(self.dotenv_error))
        return lines
