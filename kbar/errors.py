"""
Exception hierarchy for kbar.

KBarError          — base for everything raised by this package
ConfigurationError — bad BarConfig (length, style, animation)
DomainError        — percent outside what update() accepts
TerminalError      — the terminal adapter could not do what was asked
"""


class KBarError(Exception):
    """Base class for kbar errors."""


class ConfigurationError(KBarError, ValueError):
    pass


class DomainError(KBarError, ValueError):
    pass


class TerminalError(KBarError):
    pass
