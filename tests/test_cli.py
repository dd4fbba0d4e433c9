import importlib
import json
import os
import sys

import pytest

# We import run.py as a module and exercise parse_args + main with a patched
# start_server so we do not actually start networking.


@pytest.fixture()
def run_module():
    # Ensure a clean import each time (run.py reads VERSION once)
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


def test_version_flag_outputs_version(run_module, capsys):
    ver = run_module.__version__
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    captured = capsys.readouterr().out
    assert ver in captured
    assert "Labyrinth Maze Server" in captured


def test_default_command_is_server(run_module):
    ns = run_module.parse_args([])
    assert ns.command == "server"


def test_server_main_invokes_start_server(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls.update(host=host, port=port, debug=debug)

    monkeypatch.setenv("PORT", "5555")
    monkeypatch.setenv("HOST", "127.0.0.1")
    import labyrinth.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    assert run_module.main(["server"]) == 0
    assert calls == {"host": "127.0.0.1", "port": 5555, "debug": False}


def test_server_flags_beat_env(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls.update(host=host, port=port, debug=debug)

    monkeypatch.setenv("PORT", "5555")
    import labyrinth.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    run_module.main(["server", "--port", "6100", "--host", "localhost", "--debug"])
    assert calls == {"host": "localhost", "port": 6100, "debug": True}


def test_env_file_argument(monkeypatch, tmp_path, run_module):
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=6001\n")
    monkeypatch.delenv("PORT", raising=False)
    calls = {}

    def fake_start_server(host, port, debug):
        calls["port"] = port

    import labyrinth.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    try:
        run_module.main(["--env-file", str(env_file), "server"])
    finally:
        os.environ.pop("PORT", None)
    assert calls["port"] == 6001


def test_generate_ascii(run_module, capsys):
    assert run_module.main(["generate", "--rows", "3", "--columns", "5", "--seed", "7"]) == 0
    out = capsys.readouterr().out.strip().split("\n")
    assert out[0] == "+---+---+---+---+---+"
    assert out[-1] == "seed=7 rows=3 columns=5 sampling=retry"


def test_generate_json_clamps_bad_text(run_module, capsys):
    assert run_module.main(["generate", "--rows", "one", "--columns", "0", "--seed", "1", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert (data["rows"], data["columns"]) == (2, 2)
    assert data["seed"] == 1


def test_generate_filtered_sampling(run_module, capsys):
    run_module.main(["generate", "--seed", "4", "--sampling", "filtered", "--json"])
    assert json.loads(capsys.readouterr().out)["sampling"] == "filtered"


def test_check_command_passes(run_module, capsys):
    assert run_module.main(["check", "--rows", "6", "--columns", "6", "1", "2", "3"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [r["seed"] for r in data["results"]] == [1, 2, 3]
    assert all(r["ok"] for r in data["results"])


def test_check_command_default_seeds(run_module, capsys):
    assert run_module.main(["check"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert len(data["results"]) == len(run_module.DEFAULT_CHECK_SEEDS)


def test_check_command_reports_failures(monkeypatch, run_module, capsys):
    import labyrinth.maze as maze_pkg

    def broken_analyze(result):
        return {"seed": result.seed, "ok": False}

    monkeypatch.setattr(maze_pkg, "analyze", broken_analyze)
    assert run_module.main(["check", "9"]) == 1
    captured = capsys.readouterr()
    assert "check_failed" in captured.err


def test_generate_with_unknown_env_sampling(monkeypatch, run_module, capsys):
    monkeypatch.setenv("MAZE_SAMPLING", "bogus")
    assert run_module.main(["generate", "--seed", "3", "--json"]) == 0
    out = capsys.readouterr().out
    # warning line precedes the JSON document
    assert json.loads(out[out.index("{"):])["sampling"] == "retry"


def test_check_with_unknown_env_sampling(monkeypatch, run_module, capsys):
    monkeypatch.setenv("MAZE_SAMPLING", "bogus")
    assert run_module.main(["check", "5"]) == 0
