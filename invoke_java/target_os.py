#===============================================================================
#  Invoke_Java_Launcher | target_os.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-12
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  Classifies the host into a target OS name and resolves, once, the
#  platform capabilities the rest of the launcher consults (dock support,
#  path translation, heap defaults, bundled JDK tooling classes).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
import platform
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .constants import (
    BIN_DIR_NAME,
    CYGWIN_HEAP_SIZE,
    DEFAULT_HEAP_SIZE,
    GENERATED_DIR_NAME,
    TARGET_OS_ENV_KEY,
)

DARWIN = "Darwin"
LINUX = "Linux"
CYGWIN = "Cygwin"
WINDOWS = "Windows"


def detect_target_os(env: Optional[Mapping[str, str]] = None) -> str:
    """Return the target OS name ("Darwin", "Linux", "Cygwin", "Windows", ...)."""
    env_map = os.environ if env is None else env
    forced = (env_map.get(TARGET_OS_ENV_KEY) or "").strip()
    if forced:
        return forced

    system = platform.system()
    upper = system.upper()
    if upper.startswith("CYGWIN") or upper.startswith("MSYS"):
        return CYGWIN
    if upper.startswith("WIN"):
        return WINDOWS
    return system or "Unknown"


@dataclass(frozen=True)
class TargetPlatform:
    name: str
    supports_dock: bool = False
    ships_tools_classes: bool = False   # tools.jar classes already on the boot class path
    translates_paths: bool = False      # POSIX emulation running a native Windows JVM
    default_heap_size: str = DEFAULT_HEAP_SIZE

    @property
    def generated_bin_dir(self) -> str:
        return f"{GENERATED_DIR_NAME}/{self.name}/{BIN_DIR_NAME}"

    def runtime_options(self, dock_name: str, dock_icon: str) -> List[str]:
        """Dock presentation options; empty on platforms without a dock."""
        if not self.supports_dock:
            return []
        options = [f"-Xdock:name={dock_name}"]
        if dock_icon:
            options.append(f"-Xdock:icon={dock_icon}")
        return options


_KNOWN_PLATFORMS = {
    DARWIN: TargetPlatform(DARWIN, supports_dock=True, ships_tools_classes=True),
    CYGWIN: TargetPlatform(CYGWIN, translates_paths=True, default_heap_size=CYGWIN_HEAP_SIZE),
}


def platform_for(target_os: str) -> TargetPlatform:
    """Map an OS name onto its capability set. Unknown names get plain defaults."""
    return _KNOWN_PLATFORMS.get(target_os) or TargetPlatform(target_os)


def current_platform(env: Optional[Mapping[str, str]] = None) -> TargetPlatform:
    return platform_for(detect_target_os(env))
