# =============================================================================
# log.py — Logging through the Terminal sink
# =============================================================================
#
# Record layout:   [HH:MM:SS] [LEVEL] message
# The [LEVEL] tag carries the level's Tone; the rest is unstyled.
#
# Components never configure logging themselves.  They take a Logger in
# their constructor (defaulting to a "tmv.*" child logger) and the CLI calls
# configure_logging() once.
# =============================================================================

from __future__ import annotations
import logging
import platform
import time

from TMV.CFG.tones import Tone
from TMV.TIO.terminal import Terminal

ROOT_LOGGER = "tmv"

LEVEL_TONES = {
    logging.DEBUG:    Tone.DEBUG,
    logging.INFO:     Tone.INFO,
    logging.WARNING:  Tone.WARNING,
    logging.ERROR:    Tone.ERROR,
    logging.CRITICAL: Tone.ERROR,
}

LEVEL_TAGS = {
    logging.WARNING:  "WARN",
    logging.CRITICAL: "ERROR",
}


class TerminalLogHandler(logging.Handler):
    def __init__(self, terminal: Terminal, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.terminal = terminal
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stamp   = time.strftime("%H:%M:%S", time.localtime(record.created))
            tag     = LEVEL_TAGS.get(record.levelno, record.levelname)
            tone    = LEVEL_TONES.get(record.levelno, Tone.INFO)
            message = self.format(record)
            self.terminal.line([
                (f"[{stamp}] ", None),
                (f"[{tag}]", tone),
                (f" {message}", None),
            ])
        except Exception:
            self.handleError(record)


def configure_logging(terminal: Terminal, debug: bool = False) -> logging.Logger:
    """Route the "tmv" logger tree to `terminal`, replacing any earlier setup."""
    log = logging.getLogger(ROOT_LOGGER)
    for handler in list(log.handlers):
        if isinstance(handler, TerminalLogHandler):
            log.removeHandler(handler)
    log.addHandler(TerminalLogHandler(terminal))
    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.propagate = False
    return log


def section(terminal: Terminal, title: str | None = None) -> None:
    terminal.newline()
    if title and title.strip():
        terminal.line([(f"=== {title} ===", Tone.ACCENT)])
    else:
        terminal.separator(37, "=")
    terminal.newline()


def log_startup(log: logging.Logger, terminal: Terminal, app_name: str, version: str) -> None:
    section(terminal, "Application Startup")
    log.info("Starting %s v%s", app_name, version)
    log.info("Python version: %s", platform.python_version())
    log.info("Operating system: %s %s", platform.system(), platform.release())
    log.debug("Debug logging is enabled")
    section(terminal)
