"""Field-to-variable mapping for record types.

A record type is a dataclass. Each field resolves to exactly one environment
variable: the name given through ``env_field()`` or, failing that, the field's
own name. The mapping is computed once per record type and cached.
"""

from __future__ import annotations

import dataclasses
import functools
from dataclasses import dataclass
from typing import Any

from envrecord.utils.constant import ENV_METADATA_KEY


@dataclass(frozen=True)
class FieldBinding:
    """Lookup key resolved for one record field.

    Attributes:
        field_name: Name of the dataclass field.
        env_key: Environment variable the field is populated from.
    """

    field_name: str
    env_key: str


def env_field(name: str | None = None, **kwargs: Any) -> Any:  # noqa: ANN401
    """Declare a record field bound to an explicit environment variable.

    Args:
        name: Environment variable name. None or empty uses the field name.
        **kwargs: Passed through to ``dataclasses.field``.

    Returns:
        A dataclass field specifier.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    if name:
        metadata[ENV_METADATA_KEY] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def resolve_env_key(field: dataclasses.Field[Any]) -> str:
    """Return the environment variable name for a dataclass field."""
    return field.metadata.get(ENV_METADATA_KEY) or field.name


@functools.lru_cache(maxsize=None)
def bindings_for(record_type: type) -> tuple[FieldBinding, ...]:
    """Build the ordered bindings for a record type.

    Args:
        record_type: Dataclass whose fields are populated from the environment.

    Returns:
        One binding per field, in declaration order.

    Raises:
        TypeError: If ``record_type`` is not a dataclass or has a field that
            cannot be passed to its constructor.
    """
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise TypeError(f"{record_type!r} is not a dataclass type")

    bindings = []
    for field in dataclasses.fields(record_type):
        if not field.init:
            raise TypeError(
                f"{record_type.__name__}.{field.name} is declared with init=False "
                "and cannot be populated from the environment"
            )
        bindings.append(FieldBinding(field_name=field.name, env_key=resolve_env_key(field)))
    return tuple(bindings)
