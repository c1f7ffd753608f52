"""Environment snapshot for envrecord's own settings."""

from __future__ import annotations

import os

SETTINGS_PREFIX = "ENVRECORD_"


def load_project_env(prefix: str = SETTINGS_PREFIX) -> dict[str, str]:
    """Collect envrecord's own tunables from the process environment.

    Records are always resolved against the live ``os.environ``; this snapshot
    only feeds ``utils.constant``.

    Args:
        prefix: Variable name prefix reserved for envrecord settings.

    Returns:
        The matching variables, keyed by their full names.
    """
    return {key: value for key, value in os.environ.items() if key.startswith(prefix)}
