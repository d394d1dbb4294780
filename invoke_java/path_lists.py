#===============================================================================
#  Invoke_Java_Launcher | path_lists.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-12
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  Builds the class path, the executable search path extras and the child
#  process environment. Lists are only de-duplicated when they are used.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping

from .constants import (
    APPLE_EXTENSIONS_JAR,
    BIN_DIR_NAME,
    CLASSES_DIR_NAME,
    JDK_TOOLS_JAR,
    SWING_WORKER_JAR,
)
from .models import Roots
from .target_os import TargetPlatform

log = logging.getLogger(__name__)


def unique(entries: Iterable[str]) -> List[str]:
    """Drop later duplicates, keeping first occurrences in their original order."""
    seen = set()
    out: List[str] = []
    for entry in entries:
        if entry in seen:
            continue
        seen.add(entry)
        out.append(entry)
    return out


def default_class_path(
    roots: Roots,
    target: TargetPlatform,
    jdk_root_finder: Callable[[], Path],
) -> List[str]:
    class_path = [
        str(roots.project_root / CLASSES_DIR_NAME),
        str(roots.platform_root / CLASSES_DIR_NAME),
    ]

    if not target.ships_tools_classes:
        class_path.append(str(roots.platform_root / APPLE_EXTENSIONS_JAR))

        # Mac OS has these classes on the boot class path already.
        tools_jar = jdk_root_finder() / JDK_TOOLS_JAR
        if tools_jar.exists():
            class_path.append(str(tools_jar))
        else:
            log.debug("no %s; leaving it off the class path", tools_jar)

    class_path.append(str(roots.platform_root / SWING_WORKER_JAR))
    return class_path


def extra_path_components(roots: Roots, target: TargetPlatform) -> List[str]:
    """Existing bin directories from both roots, project root first."""
    components: List[str] = []
    for root in (roots.project_root, roots.platform_root):
        for sub_dir in (BIN_DIR_NAME, target.generated_bin_dir):
            directory = root / sub_dir
            if directory.is_dir():
                components.append(str(directory))
    return components


def derive_search_path(current: str, extras: Iterable[str], separator: str = os.pathsep) -> str:
    """Put our directories ahead of the inherited PATH so our setsid(1) wins.

    The separator is the scripting side's one: colon under Cygwin, even
    though the JVM itself is a native Windows program.
    """
    original = current.split(separator) if current else []
    return separator.join(unique(list(extras) + original))


def derive_environment(
    environ: Mapping[str, str],
    extras: Iterable[str],
    separator: str = os.pathsep,
) -> Dict[str, str]:
    env = dict(environ)
    env["PATH"] = derive_search_path(environ.get("PATH", ""), extras, separator)
    return env
