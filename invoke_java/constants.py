#===============================================================================
#  Invoke_Java_Launcher | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-12
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  Central place for folder/file naming conventions and JVM option names.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "invoke-java"

# --- Installation layout ---
PLATFORM_ROOT_NAME = "salma-hayek"   # shared support tree, sibling of the project root
CLASSES_DIR_NAME = "classes"
LIB_DIR_NAME = "lib"
BIN_DIR_NAME = "bin"
GENERATED_DIR_NAME = ".generated"
SETTINGS_FILE_NAME = "invoke-java.json"

# Jars shipped in the platform root
APPLE_EXTENSIONS_JAR = "AppleJavaExtensions.jar"
SWING_WORKER_JAR = "swing-worker.jar"   # back-ported SwingWorker for pre-Java 6 runtimes
JDK_TOOLS_JAR = "lib/tools.jar"

# --- Icons (under <project_root>/lib) ---
DOCK_ICON_TEMPLATE = "{name}.icns"
PNG_ICON_TEMPLATE = "{name}-128.png"

# --- JVM invocation ---
DEFAULT_LAUNCHER = "java"
DEFAULT_HEAP_SIZE = "1g"
CYGWIN_HEAP_SIZE = "100m"

CLASS_PATH_PROPERTY = "java.class.path"
LIBRARY_PATH_PROPERTY = "java.library.path"
LOG_FILENAME_PROPERTY = "e.util.Log.filename"
FRAME_ICON_PROPERTY = "org.jessies.frameIcon"

# Setting DEBUGGING_<APP> sends the JVM's output to the console instead of the log file.
DEBUG_OVERRIDE_PREFIX = "DEBUGGING_"

TARGET_OS_ENV_KEY = "INVOKE_JAVA_TARGET_OS"
CYGPATH = "/bin/cygpath"
