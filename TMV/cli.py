#!/usr/bin/env python3
# =============================================================================
# cli.py — Terminal Music Visualizer entry point
# =============================================================================
#
# Usage:
#   tmv                          demo mode (TMV_DEMO_WAV, else synthetic)
#   tmv song.wav                 draw a PCM WAV file
#   tmv song.wav --info          print the format summary first
#   tmv song.wav --fit --debug   size to the terminal, verbose logging
#   python -m TMV ...            same thing
#
# Failure policy: nothing escapes main().  Decode failures are logged by the
# mode that hit them; anything unexpected is logged and followed by the
# usage text.  Bad option values print the usage text too, and positionals
# after the first are ignored.  The exit status is 0 either way.
# =============================================================================

from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import Sequence, TextIO

from TMV.CFG.constants import APP_NAME, APP_VERSION, ENV_NO_COLOR
from TMV.CFG.settings import Settings, build_parser, load_settings
from TMV.CFG.tones import Tone
from TMV.ADM import AudioReadError, WavReader
from TMV.SViz import AudioVisualizer
from TMV.TIO.log import configure_logging, log_startup
from TMV.TIO.terminal import Terminal, ansi_supported

WELCOME = "🎵 Welcome to Terminal Music Visualizer! 🎵"


def visualize_demo(
    settings: Settings,
    reader: WavReader,
    visualizer: AudioVisualizer,
    log: logging.Logger,
) -> None:
    try:
        log.info("Reading demo audio file...")
        if settings.demo_wav and reader.probe(settings.demo_wav):
            visualizer.visualize(reader.decode(settings.demo_wav))
        else:
            log.warning("Demo file not found. Generating sample visualization...")
            visualizer.visualize_sample()
    except AudioReadError as exc:
        log.error("Failed to visualize demo: %s", exc)
        log.debug("Demo failure detail", exc_info=True)


def visualize_file(
    path: str,
    settings: Settings,
    reader: WavReader,
    visualizer: AudioVisualizer,
    terminal: Terminal,
    log: logging.Logger,
) -> None:
    try:
        if not reader.probe(path):
            log.error("Cannot read audio file: %s", path)
            return

        if settings.info:
            for row in reader.describe(path).splitlines():
                terminal.line([(f"  {row}", Tone.PRIMARY)])
            terminal.newline()

        log.info("Processing audio file...")
        visualizer.visualize(reader.decode(path))
        log.info("Visualization complete!")
    except AudioReadError as exc:
        log.error("Failed to visualize audio file: %s", exc)
        log.debug("Decode failure detail", exc_info=True)


def show_usage(terminal: Terminal) -> None:
    terminal.newline()
    terminal.line([("Usage:", Tone.WARNING)])
    terminal.line([("  tmv [audio-file] [--info] [--fit] [--debug] [--no-color]", None)])
    terminal.newline()
    terminal.line([("  audio-file: Path to WAV audio file (optional)", None)])
    terminal.line([("              If not provided, demo visualization will be shown", None)])
    terminal.newline()
    terminal.line([("Examples:", Tone.INFO)])
    terminal.line([("  tmv", None)])
    terminal.line([("  tmv /path/to/song.wav", None)])


def run(settings: Settings, terminal: Terminal) -> None:
    log = configure_logging(terminal, settings.debug)

    if settings.clear:
        terminal.clear_screen()
    terminal.line([(WELCOME, Tone.PRIMARY)])
    terminal.newline()

    if settings.debug:
        log_startup(log, terminal, APP_NAME, APP_VERSION)

    try:
        reader = WavReader(log.getChild("reader"))
        visualizer = AudioVisualizer(
            terminal,
            log.getChild("visualizer"),
            width=settings.width,
            height=settings.height,
            num_bars=settings.bars,
            max_bar_height=settings.bar_height,
        )

        if settings.wav is None:
            log.info("No audio file specified. Using demo file...")
            visualize_demo(settings, reader, visualizer, log)
        else:
            log.info("Loading audio file: %s", settings.wav)
            visualize_file(settings.wav, settings, reader, visualizer, terminal, log)
    except Exception as exc:
        log.error("Error occurred: %s", exc)
        log.debug("Unhandled failure detail", exc_info=True)
        show_usage(terminal)


def main(argv: Sequence[str] | None = None, file: TextIO | None = None) -> int:
    # Only the first positional is used; anything after it is ignored.
    try:
        args, _ = build_parser().parse_known_args(argv)
    except argparse.ArgumentError as exc:
        terminal = Terminal(ansi=ansi_supported() and ENV_NO_COLOR not in os.environ, file=file)
        terminal.line([("Invalid arguments: ", Tone.ERROR), (str(exc), None)])
        show_usage(terminal)
        return 0

    settings = load_settings(args)
    run(settings, Terminal(ansi=settings.ansi, file=file))
    return 0


if __name__ == "__main__":
    sys.exit(main())
