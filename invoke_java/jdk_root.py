#===============================================================================
#  Invoke_Java_Launcher | jdk_root.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-13
#  Last Update : 2026-10-15
#
#  Summary
#  -------
#  Finds the installed JDK so tools.jar can go on the class path.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Callable, Mapping, Optional

from .errors import JdkNotFoundError

log = logging.getLogger(__name__)

Which = Callable[..., Optional[str]]


def find_jdk_root(env: Optional[Mapping[str, str]] = None, which: Which = shutil.which) -> Path:
    """Return the JDK installation directory.

    Resolution order:
      1) JAVA_HOME, if it names a directory
      2) the real location of javac on PATH (<jdk>/bin/javac)
      3) the real location of java on PATH, stepping out of a bundled jre/
    """
    env_map = os.environ if env is None else env

    java_home = (env_map.get("JAVA_HOME") or "").strip()
    if java_home and Path(java_home).is_dir():
        return Path(java_home)

    for tool in ("javac", "java"):
        found = which(tool, path=env_map.get("PATH"))
        if not found:
            continue
        candidate = Path(found).resolve().parent.parent
        if candidate.name == "jre":
            candidate = candidate.parent
        if candidate.is_dir():
            log.debug("JDK root %s (via %s)", candidate, found)
            return candidate

    raise JdkNotFoundError("No JDK found. Set JAVA_HOME or put javac on the PATH.")
