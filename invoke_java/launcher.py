#===============================================================================
#  Invoke_Java_Launcher | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-12
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Assembles the JVM command line from a LaunchConfig, starts it with our
#  bin directories ahead of the inherited PATH, and echoes the log file to
#  stdout if the JVM fails.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import subprocess
import sys
from typing import Callable, Iterable, List, Mapping, Optional, Sequence, TextIO

from .constants import (
    CLASS_PATH_PROPERTY,
    FRAME_ICON_PROPERTY,
    LIBRARY_PATH_PROPERTY,
    LOG_FILENAME_PROPERTY,
)
from .errors import SpawnError
from .launch_config import LaunchConfig
from .models import LaunchPlan, LaunchResult
from .path_lists import derive_environment, extra_path_components, unique

log = logging.getLogger(__name__)


def _path_option(config: LaunchConfig, prop: str, entries: Sequence[str]) -> str:
    # cygpath wants a Cygwin path, so join with colon rather than the Windows semicolon.
    return f"-D{prop}={config.translator.translate(':'.join(unique(entries)))}"


def build_launch_plan(
    config: LaunchConfig,
    extra_app_arguments: Iterable[str] = (),
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    log_to_file: bool = True,
) -> LaunchPlan:
    """Build the command line and child environment without touching the disk.

    With log_to_file=False the log option is left out even if the config
    asks for one (used when the log file could not be created).
    """
    env_map = os.environ if environ is None else environ
    forwarded = list(sys.argv[1:] if argv is None else argv)

    # The class path goes in a system property rather than -cp so the
    # Win32 launcher doesn't have to convert between the two forms.
    args: List[str] = [config.launcher]
    args.append(_path_option(config, CLASS_PATH_PROPERTY, config.class_path))
    args.append(_path_option(config, LIBRARY_PATH_PROPERTY, config.library_path))

    log_path = ""
    if log_to_file and config.logging_enabled(env_map):
        log_path = config.log_filename
        args.append(f"-D{LOG_FILENAME_PROPERTY}={config.translator.translate(log_path)}")
    elif log_to_file and config.log_filename:
        log.info("%s is set; JVM output goes to the console", config.log_override_variable)

    args.append(f"-Xmx{config.heap_size}")
    args.extend(config.target.runtime_options(config.dock_name, config.dock_icon))
    # Passed even when there is no icon (empty value), unlike -Xdock:icon.
    args.append(f"-D{FRAME_ICON_PROPERTY}={config.translator.translate(config.png_icon)}")
    args.extend(config.extra_java_arguments)
    args.append(config.class_name)
    args.extend(extra_app_arguments)
    args.extend(forwarded)

    env = derive_environment(env_map, extra_path_components(config.roots, config.target))
    return LaunchPlan(args=args, env=env, log_path=log_path)


def replay_log(log_path: str, stdout: TextIO) -> bool:
    """Copy the JVM's log to our stdout so a failure is visible in the terminal."""
    try:
        with open(log_path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                stdout.write(line if line.endswith("\n") else line + "\n")
    except OSError as e:
        log.warning("Could not read log %s: %s", log_path, e)
        return False
    stdout.flush()
    return True


def invoke(
    config: LaunchConfig,
    extra_app_arguments: Iterable[str] = (),
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    popen: Callable[..., subprocess.Popen] = subprocess.Popen,
    stdout: Optional[TextIO] = None,
) -> LaunchResult:
    """Start the JVM described by *config* and wait for it.

    A non-zero exit counts as failure. A process that cannot be started at
    all raises SpawnError instead.
    """
    out = stdout or sys.stdout
    env_map = os.environ if environ is None else environ

    log_to_file = True
    if config.logging_enabled(env_map):
        # Like touch(1), but truncating: a stale log must not look like this run's.
        try:
            with open(config.log_filename, "w", encoding="utf-8"):
                pass
        except OSError as e:
            log.warning("Cannot create log %s (%s); running without it", config.log_filename, e)
            log_to_file = False

    plan = build_launch_plan(config, extra_app_arguments, argv, env_map, log_to_file=log_to_file)

    log.debug("$ %s", " ".join(plan.args))
    try:
        p = popen(plan.args, env=plan.env)
    except OSError as e:
        raise SpawnError(f"Could not start {plan.args[0]}: {e}") from e
    rc = p.wait()

    replayed = False
    if rc != 0:
        log.debug("%s exited with rc=%s", plan.args[0], rc)
        if plan.logging:
            replayed = replay_log(plan.log_path, out)
    return LaunchResult(returncode=rc, logging=plan.logging, replayed=replayed)
