#===============================================================================
#  Invoke_Java_Launcher | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-12
#  Last Update : 2026-10-14
#
#  Summary
#  -------
#  Exception types raised by the launcher. The CLI maps them to exit statuses.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class LauncherError(RuntimeError):
    """Base class for everything the launcher raises on purpose."""


class RootResolutionError(LauncherError):
    """Project or platform root could not be resolved."""


class JdkNotFoundError(LauncherError):
    """No JDK installation could be located."""


class PathTranslationError(LauncherError):
    """cygpath failed to convert a path."""


class SettingsError(LauncherError):
    """A settings file exists but cannot be used."""


class SpawnError(LauncherError):
    """The JVM process could not be started at all."""
