"""Launcher test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from invoke_java.models import Roots  # noqa: E402
from invoke_java.path_translator import PathTranslator  # noqa: E402
from invoke_java.target_os import platform_for  # noqa: E402


@pytest.fixture
def install_tree(tmp_path):
    """A project tree next to salma-hayek, with the launcher in <project>/bin."""
    project = tmp_path / "terminator"
    salma = tmp_path / "salma-hayek"
    for d in (project / "bin", project / "classes", project / "lib", salma / "classes", salma / "bin"):
        d.mkdir(parents=True)
    script = project / "bin" / "terminator"
    script.write_text("#!/usr/bin/env python3\n")
    return {"root": tmp_path, "project": project, "salma": salma, "script": script}


@pytest.fixture
def roots(install_tree):
    return Roots(
        project_root=install_tree["project"].resolve(),
        platform_root=install_tree["salma"].resolve(),
    )


@pytest.fixture
def jdk_root(tmp_path):
    jdk = tmp_path / "jdk"
    (jdk / "lib").mkdir(parents=True)
    (jdk / "lib" / "tools.jar").write_text("")
    return jdk


@pytest.fixture
def linux():
    return platform_for("Linux")


@pytest.fixture
def darwin():
    return platform_for("Darwin")


class FakeProcess:
    def __init__(self, rc, on_wait=None):
        self.rc = rc
        self.on_wait = on_wait

    def wait(self):
        if self.on_wait:
            self.on_wait()
        return self.rc


class FakePopen:
    """Stands in for subprocess.Popen and records what it was asked to run."""

    def __init__(self, rc=0, on_wait=None, error=None):
        self.rc = rc
        self.on_wait = on_wait
        self.error = error
        self.calls = []

    def __call__(self, args, env=None):
        self.calls.append({"args": list(args), "env": env})
        if self.error:
            raise self.error
        return FakeProcess(self.rc, self.on_wait)


@pytest.fixture
def fake_popen():
    return FakePopen


@pytest.fixture
def fake_cygpath():
    """Runner for PathTranslator that maps /cygdrive/c/x -> C:\\x without cygpath."""
    calls = []

    def runner(cmd):
        calls.append(cmd)
        value = cmd[-1]

        def one(p):
            if p.startswith("/cygdrive/c/"):
                return "C:\\" + p[len("/cygdrive/c/"):].replace("/", "\\")
            return p

        if "--path" in cmd:
            return ";".join(one(p) for p in value.split(":")) + "\n"
        return one(value) + "\n"

    runner.calls = calls
    return runner


@pytest.fixture
def identity_translator():
    return PathTranslator(False)
