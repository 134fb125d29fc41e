# pipechat

A small terminal chat for a POSIX machine. Messages travel through named
pipes (FIFOs) as UTF-8 text ending in a NUL byte. A session creates its pipe,
starts a background receiver that reads the pipe and prints each message as

    Messaggio ricevuto da : <message>

and then prompts for lines to write into the same pipe. Typing `/exit` ends
the conversation: it is sent through the pipe, and the receiver stops when it
reads it (it is not printed).

## Installation

    pip install .

To run the test suite as well:

    pip install ".[test]"
    pytest

## Commands

### Single user

    pipechat-user [--pipe PATH]

Creates the directory of the pipe if needed and the named pipe itself
(default `/tmpPipe/fifo1`), starts the receiver on it and prompts with

    Inserire il messaggio:

Each line read from standard input is sent; blank lines are skipped and
leading whitespace is removed. Input stops at `/exit` or at the end of
standard input. If a write to the pipe fails, the error is reported on
standard error and sending stops.

### Five-user hub

    pipechat-discord [--dir DIRECTORY]

Creates the five pipes `fifo1` … `fifo5` in the directory (default
`/tmpPipe`) and then serves them one after another, all reading from the
same standard input. For each pipe a receiver prints what arrives, and you
are prompted with

    Inserire il messaggio (digita '/exit' per terminare):

Entering `/exit` closes the current conversation and moves on to the next
pipe. A failed write ends the program with an error.

## Errors

If a pipe cannot be created, opened or (in the hub) written to, the program
prints `Errore nell'esecuzione del programma.` and a description of the
failing step on standard error, prints `Chiusura del programma...` and exits
with status 1. A pipe that already exists counts as a creation failure, and
pipes are not removed when a session ends, so delete stale FIFOs before
starting a new session.

## Using it from Python

`pipechat.channel` holds the building blocks:

- `ensure_fifo(path)` creates the parent directory and the named pipe,
  raising `ChatError` if the pipe cannot be created.
- `encode_message(text)` and `decode_chunk(chunk)` convert between text and
  the NUL-terminated wire form.
- `iter_incoming(stream, chunk_size)` yields the messages read from a binary
  stream until end of file or `/exit`.
- `format_received(sender, text)` builds the display line.
- `read_input_lines(stream)` yields non-blank input lines without leading
  whitespace.
- `run_receiver(path, out)` prints every message arriving on a pipe and
  returns how many were shown.
- `ChatError` carries an `ErrorKind` (`FIFO_CREATE`, `FORK`, `OPEN`,
  `WRITE`) in its `kind` attribute and any extra text in `detail`;
  `describe(kind)` returns the description of a kind.

`pipechat.user.run_user(pipe_path, lines, out)` and
`pipechat.discord.run_discord(pipe_paths, lines, out)` run whole sessions
with the input lines and output stream you pass in;
`pipechat.user.send_messages` and `pipechat.discord.send_until_exit` run just
the prompting and sending part against an open writer, and
`pipechat.discord.default_pipes(directory)` lists the hub's five pipe paths.

## What it does not do

Each session reads back the very pipe it writes to, so what you see printed
are your own messages returned through the FIFO; nothing routes messages
between different users' pipes. No sender name travels with a message, which
is why the sender in the printed line is blank. There is no history or
storage of messages, and no network support.