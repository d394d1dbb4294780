#===============================================================================
#  Invoke_Java_Launcher | cli.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-13
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Command line entry point:
#    invoke-java NAME CLASS_NAME [options] [-- app arguments...]
#
#  Exit status is the JVM's own; 2 for configuration errors; 127 when the
#  JVM could not be started.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .constants import APP_TITLE
from .errors import LauncherError, SpawnError
from .launch_config import LaunchConfig
from .launcher import build_launch_plan, invoke
from .settings import load_settings, settings_path

log = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2
EXIT_SPAWN_ERROR = 127


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_TITLE,
        description="Start a Java application from a project tree next to salma-hayek.",
        epilog="Arguments after the first bare -- are passed to the application unchanged. "
               "JVM arguments starting with - need the = form, e.g. --java-arg=-ea.",
    )
    parser.add_argument("name", help="application name (dock name, icon and DEBUGGING_<NAME> variable)")
    parser.add_argument("class_name", help="fully-qualified main class")
    parser.add_argument("--script", help="launcher script inside <project>/bin (default: argv[0])")
    parser.add_argument("--settings", type=Path, help="JSON settings file (default: <project>/invoke-java.json)")
    parser.add_argument("--heap-size", help="maximum heap, e.g. 512m")
    parser.add_argument("--launcher", help="JVM executable (default: java)")
    parser.add_argument("--log-file", help="send JVM output to this file")
    parser.add_argument("-cp", "--class-path", action="append", default=[], help="extra class path entry")
    parser.add_argument("--library-path", action="append", default=[], help="extra native library path entry")
    parser.add_argument("-J", "--java-arg", action="append", default=[], help="extra JVM argument (use --java-arg=VALUE for values starting with -)")
    parser.add_argument("--dry-run", action="store_true", help="print the command line instead of running it")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def configure(args: argparse.Namespace) -> LaunchConfig:
    config = LaunchConfig(args.name, args.class_name, script_path=args.script or sys.argv[0])

    path = args.settings or settings_path(config.roots.project_root)
    config.apply_settings(load_settings(path))

    if args.heap_size:
        config.heap_size = args.heap_size
    if args.launcher:
        config.launcher = args.launcher
    if args.log_file is not None:
        config.log_filename = args.log_file
    config.add_class_path_entries(args.class_path)
    config.add_library_path_entries(args.library_path)
    config.add_extra_java_arguments(args.java_arg)
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    app_args: List[str] = []
    if "--" in argv:
        # Everything after the first bare -- belongs to the application, verbatim;
        # option values that look like -- have to use the --opt=VALUE form.
        i = argv.index("--")
        argv, app_args = argv[:i], argv[i + 1:]
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        config = configure(args)
        if args.dry_run:
            plan = build_launch_plan(config, app_args, argv=[])
            print(" ".join(shlex.quote(a) for a in plan.args))
            return 0
        result = invoke(config, app_args, argv=[])
    except SpawnError as e:
        log.error("%s", e)
        return EXIT_SPAWN_ERROR
    except LauncherError as e:
        log.error("%s", e)
        return EXIT_CONFIG_ERROR

    if result.failed:
        return result.returncode if result.returncode > 0 else 1
    return 0
