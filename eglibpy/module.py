"""Platform file names for loadable shared libraries."""

from __future__ import annotations

import os
from typing import Optional

_UNIX_PREFIX = "lib"
_UNIX_SUFFIX = ".so"
_WINDOWS_PREFIX = ""
_WINDOWS_SUFFIX = ".dll"


def module_build_path(
    directory: Optional[str],
    module_name: Optional[str],
    windows: Optional[bool] = None,
) -> Optional[str]:
    """Return the file name of the shared library ``module_name``.

    On Unix the name gets a ``lib`` prefix (unless it already starts with
    one) and a ``.so`` suffix; on Windows it gets a ``.dll`` suffix. A
    non-empty ``directory`` is joined with ``/``. ``windows`` defaults to
    the running platform.
    """
    if module_name is None:
        return None
    if windows is None:
        windows = os.name == "nt"

    prefix, suffix = (
        (_WINDOWS_PREFIX, _WINDOWS_SUFFIX) if windows else (_UNIX_PREFIX, _UNIX_SUFFIX)
    )
    if module_name.startswith("lib"):
        prefix = ""

    if directory:
        return f"{directory}/{prefix}{module_name}{suffix}"
    return f"{prefix}{module_name}{suffix}"