import thinktool.cli as cli_mod


class _FakeServer:
    def __init__(self, exc=None):
        self.exc = exc
        self.transport = None

    def run(self, transport="stdio"):
        self.transport = transport
        if self.exc:
            raise self.exc


def test_cli_runs_stdio(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    fake = _FakeServer()
    monkeypatch.setattr(cli_mod, "build_server", lambda settings: fake)
    log = tmp_path / "events.jsonl"
    assert cli_mod.main(["--log-file", str(log)]) == 0
    assert fake.transport == "stdio"
    assert "starting mcp stdio server ..." in log.read_text(encoding="utf-8")
    # stdout belongs to the MCP stream
    assert capsys.readouterr().out == ""


def test_cli_failure_exit_code(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli_mod, "build_server", lambda settings: _FakeServer(OSError("stdin closed")))
    log = tmp_path / "events.jsonl"
    assert cli_mod.main(["--log-level", "ERROR", "--log-file", str(log)]) == 1
    text = log.read_text(encoding="utf-8")
    assert "failed to run server" in text and "stdin closed" in text
    assert "starting mcp" not in text
