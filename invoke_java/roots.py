#===============================================================================
#  Invoke_Java_Launcher | roots.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-12
#  Last Update : 2026-10-15
#
#  Summary
#  -------
#  Locates the project root (from the launcher script, following symbolic
#  links) and the shared salma-hayek root next to it.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .constants import PLATFORM_ROOT_NAME
from .errors import RootResolutionError
from .models import Roots

log = logging.getLogger(__name__)


def _real_dir(path: Path, what: str) -> Path:
    try:
        real = path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise RootResolutionError(f"Cannot resolve {what} {path}: {e}") from e
    if not real.is_dir():
        raise RootResolutionError(f"{what.capitalize()} {real} is not a directory")
    return real


def resolve_roots(script_path: Union[str, Path]) -> Roots:
    """Resolve both roots from the launcher script's path.

    The script lives in <project_root>/bin and may be reached through a
    symbolic link, so the link is followed before walking up.
    """
    try:
        script = Path(script_path).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise RootResolutionError(f"Cannot resolve launcher script {script_path}: {e}") from e

    project_root = _real_dir(script.parent.parent, "project root")
    # Installed copies may have the project root and salma-hayek coincide.
    platform_root = _real_dir(project_root.parent / PLATFORM_ROOT_NAME, "platform root")

    log.debug("project root %s, platform root %s", project_root, platform_root)
    return Roots(project_root=project_root, platform_root=platform_root)
