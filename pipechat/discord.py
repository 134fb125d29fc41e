"""A chat hub with one named pipe per user, served one after another."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import BinaryIO, Iterable, TextIO

from .channel import (
    EXIT_COMMAND,
    ChatError,
    ErrorKind,
    _open_writer,
    _Receiver,
    encode_message,
    ensure_fifo,
    read_input_lines,
)

DEFAULT_DIRECTORY = "/tmpPipe"
USER_COUNT = 5
PROMPT = "Inserire il messaggio (digita '/exit' per terminare): "


def default_pipes(directory: str | os.PathLike[str] = DEFAULT_DIRECTORY) -> list[Path]:
    """Return the paths of the users' pipes inside a directory."""
    base = Path(directory)
    return [base / f"fifo{number}" for number in range(1, USER_COUNT + 1)]


def send_until_exit(writer: BinaryIO, lines: Iterable[str], out: TextIO) -> int:
    """Prompt for and send messages until the exit command or the end of input.

    Returns how many messages were written; a failed write raises ChatError.
    """
    sent = 0
    source = iter(lines)
    while True:
        out.write(PROMPT)
        out.flush()
        try:
            message = next(source)
        except StopIteration:
            break
        try:
            writer.write(encode_message(message))
        except OSError as exc:
            raise ChatError(ErrorKind.WRITE, str(exc)) from exc
        sent += 1
        if message == EXIT_COMMAND:
            break
    return sent


def run_discord(
    pipe_paths: Iterable[str | os.PathLike[str]], lines: Iterable[str], out: TextIO
) -> list[int]:
    """Create every pipe, then chat on each in turn, sharing one input source.

    Returns how many messages were sent on each pipe.
    """
    paths = list(pipe_paths)
    for path in paths:
        ensure_fifo(path)
    source = iter(lines)
    counts = []
    for path in paths:
        receiver = _Receiver(path, out)
        receiver.start()
        with _open_writer(path) as writer:
            counts.append(send_until_exit(writer, source, out))
        receiver.finish()
    return counts


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Chat hub over several named pipes.")
    parser.add_argument(
        "--dir", default=DEFAULT_DIRECTORY, help="directory holding the pipes"
    )
    args = parser.parse_args(argv)
    try:
        run_discord(default_pipes(args.dir), read_input_lines(sys.stdin), sys.stdout)
    except ChatError as exc:
        print("Errore nell'esecuzione del programma.", file=sys.stderr)
        print(exc, file=sys.stderr)
        print("Chiusura del programma...")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())