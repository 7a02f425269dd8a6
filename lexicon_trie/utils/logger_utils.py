# logger_utils.py -  for logging messages and timing lexicon operations

import time
import os
from datetime import datetime

# Directory where all log files will be stored (created on first write)
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "lexicon.log")


class Log:
    """Lightweight logger for writing messages and tracking timings."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(self, path: str = None, use_color: bool = True, echo: bool = True):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.echo = echo

    def write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if not self.echo:
            return
        # print to console (color enabled etc)
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
        else:
            print(line)

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (like timing or counts) as an INFO line.
        Example: [2026-01-01 12:45:02] INFO    | load words.txt done: 0.123s
        """
        self.write("INFO", f"{tag}: {value}{unit}")

    def time_block(self, label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("load words.txt"):
                load_words(trie, "words.txt")
        It automatically logs how long the block took.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, logger: Log, label):
        self.logger = logger
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric."""
        self.elapsed = time.perf_counter() - self.start
        if exc_type is None:
            self.logger.metric(f"{self.label} done", round(self.elapsed, 3), "s")


# shared quiet logger (file only) for library code
log = Log(echo=False)
