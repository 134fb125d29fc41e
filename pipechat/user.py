"""A single chat user: writes typed messages to a pipe and echoes what arrives."""

from __future__ import annotations

import argparse
import os
import sys
from typing import BinaryIO, Iterable, TextIO

from .channel import (
    EXIT_COMMAND,
    ChatError,
    _open_writer,
    _Receiver,
    encode_message,
    ensure_fifo,
    read_input_lines,
)

DEFAULT_PIPE = "/tmpPipe/fifo1"
PROMPT = "Inserire il messaggio: "


def send_messages(writer: BinaryIO, lines: Iterable[str], out: TextIO) -> int:
    """Prompt for and send messages until the exit command, input ends or a write fails.

    Returns how many messages were written, the exit command included.
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
            print(f"Errore nella scrittura sulla pipe: {exc}", file=sys.stderr)
            break
        sent += 1
        if message == EXIT_COMMAND:
            break
    return sent


def run_user(
    pipe_path: str | os.PathLike[str], lines: Iterable[str], out: TextIO
) -> int:
    """Create the pipe, receive on it in the background and send the given lines to it."""
    ensure_fifo(pipe_path)
    receiver = _Receiver(pipe_path, out)
    receiver.start()
    with _open_writer(pipe_path) as writer:
        sent = send_messages(writer, lines, out)
    receiver.finish()
    return sent


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Chat through a named pipe.")
    parser.add_argument("--pipe", default=DEFAULT_PIPE, help="path of the named pipe")
    args = parser.parse_args(argv)
    try:
        run_user(args.pipe, read_input_lines(sys.stdin), sys.stdout)
    except ChatError as exc:
        print("Errore nell'esecuzione del programma.", file=sys.stderr)
        print(exc, file=sys.stderr)
        print("Chiusura del programma...")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())