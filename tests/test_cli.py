"""Tests for the interactive CLI adapter."""

from __future__ import annotations

import logging

from witclient.api import cli


def _reader(lines):
    items = iter(lines)

    def read_line(prompt):
        try:
            item = next(items)
        except StopIteration:
            raise EOFError from None
        if isinstance(item, BaseException):
            raise item
        return item

    return read_line


def test_repl_prints_results_and_skips_blank_lines(make_client, fake_session) -> None:
    client = make_client()
    fake_session.queue({"_text": "hello", "entities": {}})
    out: list[str] = []

    cli.run_repl(client, read_line=_reader(["   ", "hello"]), write=out.append)

    assert len(fake_session.calls) == 1
    assert '"_text": "hello"' in out[0]
    assert out[-1] == ""


def test_repl_logs_library_errors_and_continues(make_client, fake_session, caplog) -> None:
    client = make_client()
    fake_session.queue({"error": "bad token"}, {"_text": "again"})
    out: list[str] = []

    with caplog.at_level(logging.ERROR):
        cli.run_repl(client, read_line=_reader(["hi", "again", KeyboardInterrupt()]), write=out.append)

    assert "bad token" in caplog.text
    assert len(fake_session.calls) == 2
    assert '"_text": "again"' in out[0]


def test_main_without_token_exits_with_error(monkeypatch) -> None:
    monkeypatch.delenv("WIT_ACCESS_TOKEN", raising=False)
    assert cli.main([]) == 2


def test_main_reads_token_file(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("WIT_ACCESS_TOKEN", raising=False)
    key_file = tmp_path / "wit.key"
    key_file.write_text("cli-token\n")
    clients = []
    monkeypatch.setattr(cli, "run_repl", clients.append)

    assert cli.main(["--token-file", str(key_file), "--host", "https://wit.test"]) == 0

    assert len(clients) == 1
    assert clients[0].api_host == "https://wit.test"
    assert clients[0]._transport.headers()["Authorization"] == "Bearer cli-token"
