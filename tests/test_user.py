import io

from pipechat.channel import format_received
from pipechat.user import PROMPT, main, run_user, send_messages


class _FailingWriter:
    def write(self, data):
        raise OSError("pipe rotta")


def test_send_messages_stops_after_exit():
    writer = io.BytesIO()
    out = io.StringIO()
    sent = send_messages(writer, ["a", "b", "/exit", "c"], out)
    assert sent == 3
    assert writer.getvalue() == b"a\0b\0/exit\0"
    assert out.getvalue() == PROMPT * 3


def test_send_messages_ends_with_input():
    writer = io.BytesIO()
    out = io.StringIO()
    assert send_messages(writer, ["x"], out) == 1
    assert writer.getvalue() == b"x\0"
    assert out.getvalue() == PROMPT * 2


def test_send_messages_write_failure_stops(capsys):
    out = io.StringIO()
    assert send_messages(_FailingWriter(), ["a", "b"], out) == 0
    assert "Errore nella scrittura sulla pipe" in capsys.readouterr().err


def test_run_user_echoes_messages(tmp_path):
    path = tmp_path / "pipes" / "fifo1"
    out = io.StringIO()
    sent = run_user(path, ["ciao", "mondo", "/exit"], out)
    assert sent == 3
    text = out.getvalue()
    assert format_received("", "ciao") in text
    assert format_received("", "mondo") in text
    assert "/exit" not in text


def test_run_user_without_exit_still_finishes(tmp_path):
    out = io.StringIO()
    assert run_user(tmp_path / "fifo1", ["solo"], out) == 1
    assert format_received("", "solo") in out.getvalue()


def test_main_reads_stdin(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("  ciao\n\n/exit\n"))
    assert main(["--pipe", str(tmp_path / "fifo1")]) == 0
    assert format_received("", "ciao") in capsys.readouterr().out


def test_main_reports_existing_pipe(tmp_path, monkeypatch, capsys):
    path = tmp_path / "fifo1"
    monkeypatch.setattr("sys.stdin", io.StringIO("/exit\n"))
    assert main(["--pipe", str(path)]) == 0
    monkeypatch.setattr("sys.stdin", io.StringIO("/exit\n"))
    assert main(["--pipe", str(path)]) == 1
    captured = capsys.readouterr()
    assert "Chiusura del programma..." in captured.out
    assert "Errore nell'esecuzione del programma." in captured.err