"""Tests for the invoke-java command line."""

import json

import pytest

from invoke_java import cli
from invoke_java import launcher


@pytest.fixture
def env(monkeypatch, jdk_root):
    monkeypatch.setenv("INVOKE_JAVA_TARGET_OS", "Linux")
    monkeypatch.setenv("JAVA_HOME", str(jdk_root))
    monkeypatch.delenv("DEBUGGING_TERMINATOR", raising=False)


@pytest.fixture
def run_with(monkeypatch, fake_popen):
    """Route cli.invoke through a fake Popen; returns the fake for inspection."""
    def install(rc=0, error=None, on_wait=None):
        popen = fake_popen(rc=rc, error=error, on_wait=on_wait)

        def fake_invoke(config, extra_app_arguments=(), argv=None, environ=None):
            return launcher.invoke(config, extra_app_arguments, argv=argv, environ=environ, popen=popen)

        monkeypatch.setattr(cli, "invoke", fake_invoke)
        return popen
    return install


def test_dry_run_prints_command(env, install_tree, capsys):
    rc = cli.main(["Terminator", "terminator.Terminator", "--script", str(install_tree["script"]),
                   "--heap-size", "256m", "--dry-run", "--", "--new-window"])
    assert rc == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("java -Djava.class.path=")
    assert "-Xmx256m" in out
    assert out.endswith("terminator.Terminator --new-window")


def test_options_reach_the_command_line(env, install_tree, run_with):
    popen = run_with(rc=0)
    rc = cli.main([
        "Terminator", "terminator.Terminator",
        "--script", str(install_tree["script"]),
        "-cp", "/extra.jar", "--library-path", "/native", "--java-arg=-ea",
        "--launcher", "/opt/java", "--", "a", "b",
    ])
    assert rc == 0
    args = popen.calls[0]["args"]
    assert args[0] == "/opt/java"
    assert args[1].endswith(":/extra.jar")
    assert "-Djava.library.path=/native" in args
    assert args[-4:] == ["-ea", "terminator.Terminator", "a", "b"]


def test_settings_file_is_applied_and_flags_win(env, install_tree, run_with):
    (install_tree["project"] / "invoke-java.json").write_text(
        json.dumps({"heap_size": "2g", "launcher": "/settings/java", "java_arguments": ["-server"]}),
        encoding="utf-8",
    )
    popen = run_with(rc=0)
    cli.main(["Terminator", "terminator.Terminator", "--script", str(install_tree["script"]),
              "--heap-size", "64m"])
    args = popen.calls[0]["args"]
    assert args[0] == "/settings/java"
    assert "-Xmx64m" in args and "-Xmx2g" not in args
    assert "-server" in args


def test_child_failure_exit_status_and_replay(env, install_tree, run_with, tmp_path, capsys):
    log_file = tmp_path / "terminator.log"
    run_with(rc=5, on_wait=lambda: log_file.write_text("Exception in thread main\nat Terminator\n"))
    rc = cli.main(["Terminator", "terminator.Terminator", "--script", str(install_tree["script"]),
                   "--log-file", str(log_file)])
    assert rc == 5
    assert capsys.readouterr().out.splitlines() == ["Exception in thread main", "at Terminator"]


def test_spawn_error_exit_status(env, install_tree, run_with):
    run_with(error=FileNotFoundError("java"))
    rc = cli.main(["Terminator", "terminator.Terminator", "--script", str(install_tree["script"])])
    assert rc == cli.EXIT_SPAWN_ERROR


def test_unresolvable_roots_exit_status(env, tmp_path):
    rc = cli.main(["Terminator", "terminator.Terminator", "--script", str(tmp_path / "nowhere" / "bin" / "x")])
    assert rc == cli.EXIT_CONFIG_ERROR


def test_broken_settings_exit_status(env, install_tree):
    (install_tree["project"] / "invoke-java.json").write_text("{", encoding="utf-8")
    rc = cli.main(["Terminator", "terminator.Terminator", "--script", str(install_tree["script"]), "--dry-run"])
    assert rc == cli.EXIT_CONFIG_ERROR


def test_uncreatable_log_file_still_runs(env, install_tree, run_with, tmp_path):
    popen = run_with(rc=0)
    rc = cli.main(["Terminator", "terminator.Terminator", "--script", str(install_tree["script"]),
                   "--log-file", str(tmp_path / "nope" / "x.log")])
    assert rc == 0
    assert not any(a.startswith("-De.util.Log.filename") for a in popen.calls[0]["args"])


def test_dash_dash_as_java_arg_value(env, install_tree, run_with):
    popen = run_with(rc=0)
    cli.main(["Terminator", "terminator.Terminator", "--script", str(install_tree["script"]),
              "--java-arg=--", "--", "app-arg"])
    args = popen.calls[0]["args"]
    assert args[-3:] == ["--", "terminator.Terminator", "app-arg"]
