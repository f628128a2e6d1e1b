import pytest
import requests

from enemturbo.cli.main import CLIENT_ROOT, main
from tests.helpers._tree_builders import make_tree


class _FakeResponse:
    def __init__(self, payload=None, text: str = "") -> None:
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


def test_shipped_client_tree_passes_structure_checks(capsys) -> None:
    assert main(["structure"]) == 0
    assert main(["extensions"]) == 0
    assert main(["root-file"]) == 0

    out = capsys.readouterr().out
    assert "OK: templates/index.html" in out
    assert "Client structure OK" in out
    assert CLIENT_ROOT.name == "client"


def test_extensions_exit_codes(tmp_path, capsys) -> None:
    root = make_tree(tmp_path / "client", ["src/main.js"])
    assert main(["extensions", "--root", str(root)]) == 0

    make_tree(root, ["src/index.tsx"])
    assert main(["extensions", "--root", str(root)]) == 1
    assert "index.tsx" in capsys.readouterr().err

    assert main(["extensions", "--root", str(tmp_path / "missing")]) == 2
    assert "root directory not found" in capsys.readouterr().err


def test_extensions_custom_suffix(tmp_path) -> None:
    root = make_tree(tmp_path / "client", ["src/main.js"])

    assert main(["extensions", "--root", str(root), "--ext", ".js"]) == 1


def test_root_file_exit_codes(tmp_path, capsys) -> None:
    root = make_tree(tmp_path / "client", ["index.html"])
    assert main(["root-file", "--root", str(root)]) == 0

    (tmp_path / "index.tsx").write_text("", encoding="utf-8")
    assert main(["root-file", "--root", str(root)]) == 1
    assert "Danger: found root-level index.tsx" in capsys.readouterr().err


def test_structure_lists_every_missing_file(tmp_path, capsys) -> None:
    root = make_tree(tmp_path / "client", ["main.py"])

    code = main(["structure", "--root", str(root)])

    assert code == 2
    err = capsys.readouterr().err
    assert "Missing required file: templates/index.html" in err
    assert "Missing required file: routes.py" in err
    assert "Missing required file: static/enemturbo.pdf" in err


def test_env_severity_exit_codes(tmp_path, capsys) -> None:
    assert main(["env", "--root", str(tmp_path)]) == 1

    (tmp_path / ".env.example").write_text("STRIPE_SECRET_KEY=\n", encoding="utf-8")
    assert main(["env", "--root", str(tmp_path)]) == 0
    assert ".env not found" in capsys.readouterr().err

    (tmp_path / ".env").write_text("PORT=4242\n", encoding="utf-8")
    assert main(["env", "--root", str(tmp_path)]) == 2

    (tmp_path / ".env").write_text("STRIPE_SECRET_KEY=sk_test_1\n", encoding="utf-8")
    assert main(["env", "--root", str(tmp_path)]) == 0
    assert "STRIPE_SECRET_KEY found in .env" in capsys.readouterr().out


def test_all_runs_every_check_and_returns_first_failure(tmp_path, capsys) -> None:
    root = make_tree(tmp_path / "client", ["src/app.ts"])

    code = main(["all", "--root", str(root), "--env-root", str(tmp_path)])

    assert code == 1
    err = capsys.readouterr().err
    assert "Found disallowed file" in err
    assert "Missing required file: main.py" in err
    assert ".env.example not found" in err


def test_all_passes_for_shipped_client(tmp_path) -> None:
    (tmp_path / ".env.example").write_text("STRIPE_SECRET_KEY=\n", encoding="utf-8")

    assert main(["all", "--env-root", str(tmp_path)]) == 0


def test_server_probe_ok(monkeypatch, capsys) -> None:
    seen = {}

    def fake_get(url, timeout):
        seen["url"] = url
        seen["timeout"] = timeout
        return _FakeResponse({"ok": True}, text='{"ok":true}')

    monkeypatch.setattr("enemturbo.cli.main.requests.get", fake_get)

    assert main(["server", "--url", "http://localhost:4242/"]) == 0
    assert seen == {"url": "http://localhost:4242/", "timeout": 3.0}
    assert "Server test OK" in capsys.readouterr().out


@pytest.mark.parametrize(
    ("response", "message"),
    [
        (_FakeResponse({"ok": False}, text='{"ok":false}'), "Unexpected server response"),
        (_FakeResponse(None, text="<html>"), "Server response not JSON"),
    ],
)
def test_server_probe_rejects_bad_responses(monkeypatch, capsys, response, message) -> None:
    monkeypatch.setattr("enemturbo.cli.main.requests.get", lambda url, timeout: response)

    assert main(["server", "--url", "http://localhost:4242/"]) == 2
    assert message in capsys.readouterr().err


def test_server_probe_connection_error(monkeypatch, capsys) -> None:
    def fake_get(url, timeout):
        raise requests.ConnectionError("Connection refused")

    monkeypatch.setattr("enemturbo.cli.main.requests.get", fake_get)

    assert main(["server", "--url", "http://localhost:1/"]) == 2
    assert "Error connecting to server" in capsys.readouterr().err
