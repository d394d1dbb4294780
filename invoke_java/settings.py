#===============================================================================
#  Invoke_Java_Launcher | settings.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-13
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  Load per-project launch settings (invoke-java.json) with defaults.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from .constants import SETTINGS_FILE_NAME
from .errors import SettingsError

LIST_KEYS = ("class_path", "library_path", "java_arguments")
TEXT_KEYS = ("heap_size", "launcher", "log_filename")


def default_settings() -> Dict[str, Any]:
    return {
        "heap_size": None,       # None -> platform default
        "launcher": None,        # None -> "java"
        "log_filename": None,    # None -> no file logging unless the caller sets one
        "class_path": [],        # appended after the default class path
        "library_path": [],
        "java_arguments": [],    # extra JVM flags, in order
    }


def settings_path(project_root: Path) -> Path:
    return project_root / SETTINGS_FILE_NAME


def load_settings(path: Path) -> Dict[str, Any]:
    """Load settings from disk (or defaults when the file doesn't exist)."""
    d = default_settings()
    if not path.exists():
        return d
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise SettingsError(f"Cannot read settings {path}: {e}") from e
    if not isinstance(data, dict):
        raise SettingsError(f"Settings {path} must hold a JSON object")

    for k in LIST_KEYS:
        value = data.get(k, d[k])
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise SettingsError(f"Settings {path}: '{k}' must be a list of strings")
        d[k] = list(value)
    for k in TEXT_KEYS:
        value = data.get(k, d[k])
        if value is not None and not isinstance(value, str):
            raise SettingsError(f"Settings {path}: '{k}' must be a string")
        d[k] = value
    return d
