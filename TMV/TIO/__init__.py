# =============================================================================
# TMV/TIO/__init__.py — Terminal I/O
# =============================================================================
#
# The only place where a Tone becomes an escape sequence.
#
# Sub-modules:
#   terminal.py  — Terminal sink (rich Console), ANSI probe, geometry
#   log.py       — logging handler that writes through the Terminal,
#                  startup banner
# =============================================================================
