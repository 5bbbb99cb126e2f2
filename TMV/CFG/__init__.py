# =============================================================================
# TMV/CFG/__init__.py — Configuration Module
# =============================================================================
#
# Single source of truth for canvas sizes, colour thresholds, demo-signal
# parameters and environment variable names.  Nothing else in TMV defines
# its own magic numbers.
#
# Sub-modules:
#   constants.py  — fixed defaults and thresholds
#   tones.py      — semantic colour tags (resolved to ANSI only in TIO)
#   settings.py   — per-run Settings built from argv + environment
# =============================================================================
