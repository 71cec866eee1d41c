from __future__ import annotations

import logging
from pathlib import Path

from dotenv import dotenv_values, find_dotenv, load_dotenv

logger = logging.getLogger("dotenv_enum.loader")


def load_env(path: str | Path | None = None, *, override: bool = False) -> bool:
    """Load a ``.env`` file into ``os.environ``.

    Without *path* the nearest ``.env`` above the working directory is used.
    Existing variables are kept unless *override* is true.  Returns ``True``
    when a file was loaded.  Must be called before any lookup that relies on
    the file.
    """
    if path is None:
        found = find_dotenv(usecwd=True)
        if not found:
            logger.debug("no .env file found")
            return False
        path = found
    path = Path(path)
    if not path.is_file():
        logger.warning(".env file %s does not exist", path)
        return False
    load_dotenv(path, override=override)
    logger.info("loaded %s", path)
    return True


def read_env_file(path: str | Path) -> dict[str, str | None]:
    """Return the variables of *path* without touching ``os.environ``.

    ``read_env_file(path).get`` can be passed as ``getenv`` to
    :func:`~dotenv_enum.registry.declare_group`.
    """
    return dict(dotenv_values(Path(path)))


__all__ = ["load_env", "read_env_file"]
