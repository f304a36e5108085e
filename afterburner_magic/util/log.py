""" Module for the application's thread-safe text logger. """

import sys
from threading import Lock
from time import strftime
from traceback import format_exception
from typing import TextIO


class StreamLogger:
    """ Writes messages to pre-opened text streams with timestamps. Safe to share between threads. """

    def __init__(self, *streams:TextIO, time_fmt="[%b %d %Y %H:%M:%S]: ", repeat_mark="*", max_frames=20) -> None:
        self._streams = streams          # One or more writable/appendable text streams.
        self._time_fmt = time_fmt        # Format for timestamps using time.strftime. If None, do not add timestamps.
        self._repeat_mark = repeat_mark  # Mark to replace repeated messages. If None, log all messages fully.
        self._max_frames = max_frames    # Maximum number of stack frames to write for exceptions.
        self._last_message = ""          # Most recent unique message string.
        self._lock = Lock()              # Only one thread writes to the streams at a time.

    def _write_all(self, message:str) -> None:
        """ Write <message> to each stream in turn, flushing so nothing is lost in a buffer on a crash. """
        with self._lock:
            for stream in self._streams:
                try:
                    stream.write(message)
                    stream.flush()
                except (OSError, ValueError):
                    # A closed or broken stream must not stop the others from receiving the message.
                    continue

    def log(self, message:str) -> None:
        """ Collapse repeats, timestamp, and write <message> to all streams with a trailing newline. """
        if self._repeat_mark is not None:
            if message == self._last_message:
                message = self._repeat_mark
            else:
                self._last_message = message
        if self._time_fmt is not None:
            message = strftime(self._time_fmt) + message
        self._write_all(message + '\n')

    def log_exception(self, exc:BaseException) -> None:
        """ Log a full traceback for <exc>. This does *not* count as handling it. """
        tb_lines = format_exception(type(exc), exc, exc.__traceback__, limit=self._max_frames)
        self.log("".join(tb_lines).rstrip('\n'))


def open_logger(*filenames:str, encoding='utf-8', to_stdout=False, to_stderr=False, **kwargs) -> StreamLogger:
    """ Open a logger that appends to text files and/or prints to system streams.
        Log files will remain open until the program is closed. """
    streams = [open(f, 'a', encoding=encoding) for f in filenames]
    if to_stdout:
        streams.append(sys.stdout)
    if to_stderr:
        streams.append(sys.stderr)
    return StreamLogger(*streams, **kwargs)
