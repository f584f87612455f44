"""kbar — single-line terminal progress bars"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("kbar")
except PackageNotFoundError:
    __version__ = "dev"

from kbar.bar import Animation, BarConfig, BarRenderer, BarStyle
from kbar.errors import ConfigurationError, DomainError, KBarError, TerminalError

__all__ = [
    "Animation",
    "BarConfig",
    "BarRenderer",
    "BarStyle",
    "ConfigurationError",
    "DomainError",
    "KBarError",
    "TerminalError",
    "__version__",
]
