__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'herald'
__author__ = 'Eiko Reishin (影皇嶺臣)'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .absence import *
from .commands import *
from .config import *
from .context import *
from .dispatch import *
from .faults import *
from .handlers import *
from .parsers import *
from .registry import *
from .results import *
from .help import help_command

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info",
    "help_command",
)

# Load the exposed API of each layer, leaves first
__all__ += absence.__all__  # type: ignore[attr-defined]
__all__ += results.__all__  # type: ignore[attr-defined]
__all__ += config.__all__  # type: ignore[attr-defined]
__all__ += context.__all__  # type: ignore[attr-defined]
__all__ += parsers.__all__  # type: ignore[attr-defined]
__all__ += handlers.__all__  # type: ignore[attr-defined]
__all__ += faults.__all__  # type: ignore[attr-defined]
__all__ += commands.__all__  # type: ignore[attr-defined]
__all__ += registry.__all__  # type: ignore[attr-defined]
__all__ += dispatch.__all__  # type: ignore[attr-defined]
