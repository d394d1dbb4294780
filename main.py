#===============================================================================
#  Invoke_Java_Launcher  |  Java application launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-12
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Starts a Java application that lives in a project tree next to the shared
#  salma-hayek tree. Builds the class path / library path, heap size, dock
#  and frame icons and optional log file capture, then runs the JVM.
#  Supports:
#    - Symbolic links to the launcher script
#    - Cygwin hosts running a native Windows JVM (paths go through cygpath)
#    - Mac OS dock name/icon
#    - DEBUGGING_<APP> to skip the log file and see output on the console
#    - Per-project settings in invoke-java.json
#
#  Folder Conventions
#  ------------------
#    <project>/bin/<launcher script>
#    <project>/classes, <project>/lib/<app>.icns, <project>/lib/<app>-128.png
#    <project>/../salma-hayek/classes, swing-worker.jar, AppleJavaExtensions.jar
#    <root>/bin, <root>/.generated/<os>/bin   -> prepended to PATH when present
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#===============================================================================

import sys

from invoke_java.cli import main


if __name__ == "__main__":
    sys.exit(main())
