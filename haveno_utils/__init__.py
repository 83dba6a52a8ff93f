"""
haveno-utils - shared helpers for Haveno clients.

Key features:
- Exact XMR <-> atomic unit conversion (1 XMR = 10^12 atomic units)
- Legacy centineros -> atomic unit conversion
- Leveled verbosity logging on top of the stdlib logging module
- Child process termination for spawned daemons
- Payment-account form field access
- Timestamp formatting
"""

__version__ = "1.0.0"
__all__ = [
    "cli",
    "config",
    "errors",
    "forms",
    "logging_config",
    "process",
    "timestamps",
    "units",
]
