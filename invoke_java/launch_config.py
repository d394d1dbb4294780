#===============================================================================
#  Invoke_Java_Launcher | launch_config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-12
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  The mutable launch configuration for one JVM start: identity, heap size,
#  icons, log file and the class path / library path / JVM argument lists.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

from .constants import (
    DEBUG_OVERRIDE_PREFIX,
    DEFAULT_LAUNCHER,
    DOCK_ICON_TEMPLATE,
    LIB_DIR_NAME,
    PNG_ICON_TEMPLATE,
)
from .jdk_root import find_jdk_root
from .models import Roots
from .path_lists import default_class_path
from .path_translator import PathTranslator
from .roots import resolve_roots
from .target_os import TargetPlatform, current_platform


class LaunchConfig:
    """Configuration phase state; consumed once by launcher.invoke().

    Entries may be added more than once from different call sites.
    Duplicates are kept here and dropped when the command line is built.
    """

    def __init__(
        self,
        name: str,
        class_name: str,
        script_path: Union[str, Path, None] = None,
        roots: Optional[Roots] = None,
        target: Optional[TargetPlatform] = None,
        translator: Optional[PathTranslator] = None,
        jdk_root_finder: Callable[[], Path] = find_jdk_root,
    ):
        self.dock_name = name
        self.launcher = DEFAULT_LAUNCHER
        self.log_filename = ""
        self._class_name = class_name

        if roots is None:
            roots = resolve_roots(script_path if script_path is not None else sys.argv[0])
        self._roots = roots
        self._target = target or current_platform()
        self.translator = translator or PathTranslator(self._target.translates_paths)

        self.heap_size = self._target.default_heap_size
        self._class_path: List[str] = default_class_path(roots, self._target, jdk_root_finder)
        self._library_path: List[str] = []
        self._extra_java_arguments: List[str] = []

        self._dock_icon = ""
        self._png_icon = ""
        self._set_icons(name)

    # ----------------------------
    # Read-only views
    # ----------------------------
    @property
    def class_name(self) -> str:
        return self._class_name

    @property
    def roots(self) -> Roots:
        return self._roots

    @property
    def target(self) -> TargetPlatform:
        return self._target

    @property
    def dock_icon(self) -> str:
        return self._dock_icon

    @property
    def png_icon(self) -> str:
        return self._png_icon

    @property
    def class_path(self) -> List[str]:
        return list(self._class_path)

    @property
    def library_path(self) -> List[str]:
        return list(self._library_path)

    @property
    def extra_java_arguments(self) -> List[str]:
        return list(self._extra_java_arguments)

    # ----------------------------
    # Configuration phase
    # ----------------------------
    def add_class_path_entries(self, new_entries: Iterable[str]) -> None:
        self._class_path.extend(str(e) for e in new_entries)

    def add_library_path_entries(self, new_entries: Iterable[str]) -> None:
        self._library_path.extend(str(e) for e in new_entries)

    def add_extra_java_arguments(self, new_arguments: Iterable[str]) -> None:
        self._extra_java_arguments.extend(new_arguments)

    def apply_settings(self, settings: Mapping[str, Any]) -> None:
        """Merge a settings mapping (see settings.load_settings) into this config."""
        if settings.get("heap_size"):
            self.heap_size = settings["heap_size"]
        if settings.get("launcher"):
            self.launcher = settings["launcher"]
        if settings.get("log_filename") is not None:
            self.log_filename = settings["log_filename"]
        self.add_class_path_entries(settings.get("class_path") or [])
        self.add_library_path_entries(settings.get("library_path") or [])
        self.add_extra_java_arguments(settings.get("java_arguments") or [])

    def _set_icons(self, name: str) -> None:
        # Checked once; a missing icon just means the option is left out.
        lib_dir = self._roots.project_root / LIB_DIR_NAME
        dock_icon = lib_dir / DOCK_ICON_TEMPLATE.format(name=name)
        if dock_icon.exists():
            self._dock_icon = str(dock_icon)
        png_icon = lib_dir / PNG_ICON_TEMPLATE.format(name=name)
        if png_icon.exists():
            self._png_icon = str(png_icon)

    # ----------------------------
    # Logging decision
    # ----------------------------
    @property
    def log_override_variable(self) -> str:
        return DEBUG_OVERRIDE_PREFIX + self.dock_name.upper()

    def logging_enabled(self, environ: Optional[Mapping[str, str]] = None) -> bool:
        env_map = os.environ if environ is None else environ
        return self.log_filename != "" and env_map.get(self.log_override_variable) is None
