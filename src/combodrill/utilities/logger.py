"""
Tagged logging for combodrill.

Every line carries a level tag, a source tag and a module tag:

    [    12.345][WARN][DRIL][ROND] Key after deadline ignored

Module tags in use: CORE, MODE, ROND, DATA, CMBO, INPT, DISP.
"""

import sys
import time

class LogLevel:
    """Severity levels, lowest first."""
    DEBUG = 0
    INFO = 1
    NOTE = 2
    WARNING = 3
    ERROR = 4

    NAMES = {
        "DEBUG": DEBUG,
        "INFO": INFO,
        "NOTE": NOTE,
        "WARNING": WARNING,
        "ERROR": ERROR,
    }

    @classmethod
    def from_name(cls, name, default=INFO):
        """Resolve a level name from config (case-insensitive)."""
        if name is None:
            return default
        return cls.NAMES.get(str(name).upper(), default)

class DrillLogger:
    """Class-level logger shared by every module.

    The game owns stdout while a session is running, so the console mirror
    is off by default and writes to stderr when switched on. File output is
    appended one line at a time.
    """

    LEVEL = LogLevel.INFO
    SOURCE = "DRIL"
    PRINT_TO_CONSOLE = False
    WRITE_TO_FILE = False
    LOG_FILE_PATH = "combodrill.log"

    _STARTED = time.monotonic()

    # (tag, ANSI colour) per level
    STYLES = {
        LogLevel.DEBUG: ("DBUG", "\033[90m"),
        LogLevel.INFO: ("INFO", "\033[94m"),
        LogLevel.NOTE: ("NOTE", "\033[96m"),
        LogLevel.WARNING: ("WARN", "\033[93m"),
        LogLevel.ERROR: ("!ERR", "\033[91m"),
    }
    RESET = "\033[0m"

    @classmethod
    def set_level(cls, level):
        cls.LEVEL = level

    @classmethod
    def enable_console(cls, enable=True):
        cls.PRINT_TO_CONSOLE = enable

    @classmethod
    def enable_file_logging(cls, enable=True, path=None):
        cls.WRITE_TO_FILE = enable
        if path:
            cls.LOG_FILE_PATH = path

    @classmethod
    def format_line(cls, level, module_tag, message, source_tag=None):
        """Build one log line without emitting it."""
        elapsed = time.monotonic() - cls._STARTED
        level_tag = cls.STYLES[level][0]
        source = source_tag or cls.SOURCE
        return f"[{elapsed:>10.3f}][{level_tag:<4}][{source:<4}][{module_tag:<4}] {message}"

    @classmethod
    def _to_console(cls, level, line):
        stream = sys.stderr
        if stream.isatty():
            line = f"{cls.STYLES[level][1]}{line}{cls.RESET}"
        print(line, file=stream)

    @classmethod
    def _to_file(cls, path, line):
        try:
            with open(path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            # Unwritable log location: keep playing
            if cls.PRINT_TO_CONSOLE:
                print(f"Logger OS Error: {e}", file=sys.stderr)

    @classmethod
    def _log(cls, level, module_tag, message, source_tag=None, file_override=None):
        if level < cls.LEVEL:
            return
        line = cls.format_line(level, module_tag, message, source_tag)
        if cls.PRINT_TO_CONSOLE:
            cls._to_console(level, line)
        if file_override:
            cls._to_file(file_override, line)
        elif cls.WRITE_TO_FILE:
            cls._to_file(cls.LOG_FILE_PATH, line)

    @classmethod
    def debug(cls, tag, msg, src=None, file=None):
        cls._log(LogLevel.DEBUG, tag, msg, source_tag=src, file_override=file)

    @classmethod
    def info(cls, tag, msg, src=None, file=None):
        cls._log(LogLevel.INFO, tag, msg, source_tag=src, file_override=file)

    @classmethod
    def note(cls, tag, msg, src=None, file=None):
        cls._log(LogLevel.NOTE, tag, msg, source_tag=src, file_override=file)

    @classmethod
    def warning(cls, tag, msg, src=None, file=None):
        cls._log(LogLevel.WARNING, tag, msg, source_tag=src, file_override=file)

    @classmethod
    def error(cls, tag, msg, src=None, file=None):
        cls._log(LogLevel.ERROR, tag, msg, source_tag=src, file_override=file)
