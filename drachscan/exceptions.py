"""
Exception hierarchy for drachscan.

Every error raised on purpose by the package derives from DrachScanError so the
command-line entry point can report it and exit with a non-zero status.
"""


class DrachScanError(Exception):
    """Base class for drachscan errors."""


class InputError(DrachScanError):
    """Input file missing or unreadable."""


class ConfigError(DrachScanError):
    """Invalid configuration value or configuration file."""


class OutputError(DrachScanError):
    """Output destination rejected or not writable."""


class MaskingError(DrachScanError):
    """Masking could not remove a motif within the allowed attempts."""


class NeighborConstructionError(DrachScanError, ValueError):
    """Flank request built with missing or inconsistent fields."""
