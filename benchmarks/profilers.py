""" Profilers for benchmark callables. Each one keeps a record of every run and reports the quickest. """

from cProfile import Profile
from io import StringIO
import os
import pstats
import time


class AbstractProfiler:
    """ Abstract tool to measure and format details about the execution of a Python callable. """

    def run(self, func, *args) -> None:
        """ Evaluate a function under a timer and record details about its performance. """
        raise NotImplementedError

    def format_best(self) -> str:
        """ Format a string with the details about the quickest recorded run. """
        raise NotImplementedError


class RawProfiler(AbstractProfiler):
    """ Records a function's total execution time only. """

    def __init__(self) -> None:
        self._times = []  # Time in seconds for each call to run().

    def run(self, func, *args) -> None:
        start_time = time.perf_counter()
        func(*args)
        self._times.append(time.perf_counter() - start_time)

    def format_best(self) -> str:
        return f"Total time = {min(self._times):.3f}s (worst {max(self._times):.3f}s)\n"


class DetailedProfiler(AbstractProfiler):
    """ Records execution time for each function called during a run using cProfile.
        The classifier makes many tiny calls per character, so profiling overhead is substantial. """

    def __init__(self, *, max_lines=40, path_depth=2, sort_key="cumulative") -> None:
        self._runs = []                # (total time, stats) for each call to run().
        self._max_lines = max_lines    # Maximum number of functions to list.
        self._path_depth = path_depth  # Number of trailing path components to keep in each file name.
        self._sort_key = sort_key      # pstats column to sort functions by.

    def run(self, func, *args) -> None:
        pr = Profile()
        start_time = time.perf_counter()
        pr.runcall(func, *args)
        elapsed = time.perf_counter() - start_time
        self._runs.append((elapsed, pstats.Stats(pr)))

    def _short_path(self, path:str) -> str:
        parts = os.path.normpath(path).split(os.sep)
        return os.sep.join(parts[-self._path_depth:])

    def format_best(self) -> str:
        """ List call counts and times for the quickest run, with file names shortened. """
        elapsed, stats = min(self._runs, key=lambda r: r[0])
        buf = StringIO()
        stats.stream = buf
        if not self._path_depth:
            stats.strip_dirs()
        stats.sort_stats(self._sort_key).print_stats(self._max_lines)
        lines = [f"Quickest run = {elapsed:.3f}s"]
        for line in buf.getvalue().splitlines():
            fields = line.split(maxsplit=5)
            if len(fields) == 6 and fields[0][0].isdigit():
                *numbers, location = fields
                filename, sep, func = location.rpartition(":")
                if sep and filename:
                    location = self._short_path(filename) + sep + func
                lines.append("   ".join([numbers[0].rjust(10), numbers[1].rjust(8), numbers[3].rjust(8), location]))
        return "\n".join(lines) + "\n"
