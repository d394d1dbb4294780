#===============================================================================
#  Invoke_Java_Launcher | path_translator.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-12
#  Last Update : 2026-10-15
#
#  Summary
#  -------
#  Converts Cygwin filenames and colon-separated paths into the native
#  Windows form a non-Cygwin JVM expects. A no-op everywhere else.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import subprocess
from typing import Callable, List

from .constants import CYGPATH
from .errors import PathTranslationError

Runner = Callable[[List[str]], str]


def run_cygpath(cmd: List[str]) -> str:
    try:
        p = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
    except OSError as e:
        raise PathTranslationError(f"Could not run {cmd[0]}: {e}") from e
    if p.returncode != 0:
        raise PathTranslationError(f"{' '.join(cmd)} failed (rc={p.returncode}): {p.stderr.strip()}")
    return p.stdout


class PathTranslator:
    def __init__(self, enabled: bool, runner: Runner = run_cygpath):
        self.enabled = enabled
        self._runner = runner

    def translate(self, filename_or_path: str) -> str:
        """Return the JVM's view of a Cygwin filename or colon-separated path.

        cygpath takes a Cygwin path (colon-separated, not the Windows
        semicolon) and returns a native one. An empty value stays empty.
        """
        if not self.enabled or filename_or_path == "":
            return filename_or_path
        cmd = [CYGPATH, "--windows"]
        if ":" in filename_or_path:
            cmd.append("--path")
        cmd.append(filename_or_path)
        return self._runner(cmd).strip()
