"""Group declarations stored in ``pyproject.toml``.

::

    [tool.dotenv-enum.groups]
    LocationsEnv = ["Folder", "File", "AnotherFile"]
    SettingsEnv = ["ResolutionWidth", "ResolutionHeight"]
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from .errors import DeclarationError, InvalidIdentifier
from .registry import EnvGroup, declare_group
from .variable import Getenv

logger = logging.getLogger("dotenv_enum.declarations")

TOOL_NAME = "dotenv-enum"
PYPROJECT = "pyproject.toml"


def find_pyproject(start: str | Path | None = None) -> Path:
    """Return the nearest ``pyproject.toml`` at or above *start*."""
    here = Path(start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / PYPROJECT
        if candidate.is_file():
            return candidate
    raise DeclarationError(f"no {PYPROJECT} found from {here}")


def load_groups(path: str | Path, *, getenv: Getenv = os.getenv) -> list[EnvGroup]:
    """Return the groups declared in *path* in file order."""
    path = Path(path)
    try:
        doc = tomlkit.parse(path.read_text(encoding="utf-8"))
    except (OSError, TOMLKitError) as exc:
        raise DeclarationError(f"cannot read {path}: {exc}") from exc

    table = doc
    for part in ("tool", TOOL_NAME, "groups"):
        if not isinstance(table, Mapping):
            raise DeclarationError(f"[tool.{TOOL_NAME}.groups] in {path} must be a table")
        table = table.get(part)
        if table is None:
            break
    if table is None:
        raise DeclarationError(f"{path} has no [tool.{TOOL_NAME}.groups] table")
    if not isinstance(table, Mapping):
        raise DeclarationError(f"[tool.{TOOL_NAME}.groups] in {path} must be a table")

    groups: list[EnvGroup] = []
    for name, members in table.items():
        if not isinstance(members, list):
            raise DeclarationError(f"group {name!r} must be an array of member names")
        if not all(isinstance(m, str) for m in members):
            raise DeclarationError(f"group {name!r} has a non-string member")
        try:
            groups.append(declare_group(str(name), [str(m) for m in members], getenv=getenv))
        except InvalidIdentifier as exc:
            raise DeclarationError(f"group {name!r}: {exc}") from exc
    logger.debug("loaded %d group(s) from %s", len(groups), path)
    return groups


__all__ = ["find_pyproject", "load_groups"]
