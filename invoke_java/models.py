#===============================================================================
#  Invoke_Java_Launcher | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-12
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  Shared data models used across the launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List


@dataclass(frozen=True)
class Roots:
    """The two cooperating installation trees (absolute, link-resolved)."""
    project_root: Path   # the application's own tree
    platform_root: Path  # shared salma-hayek tree; may equal project_root


@dataclass(frozen=True)
class LaunchPlan:
    """Everything needed to start the JVM, assembled but not yet executed."""
    args: List[str]
    env: Dict[str, str]
    log_path: str        # "" when file logging is off

    @property
    def logging(self) -> bool:
        return self.log_path != ""


@dataclass(frozen=True)
class LaunchResult:
    returncode: int
    logging: bool
    replayed: bool       # log echoed to stdout after a failure

    @property
    def failed(self) -> bool:
        return self.returncode != 0
