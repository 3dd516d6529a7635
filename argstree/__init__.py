__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'argstree'
__author__ = 'argstree contributors'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .faults import *
from .node import *
from .parser import *
from .spec import *
from .split import *
from .stringify import *

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
    "version_info"
)

# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the nodes
__all__ += node.__all__  # type: ignore[attr-defined]
# Load the exposed API of the parser
__all__ += parser.__all__  # type: ignore[attr-defined]
# spec, split and stringify are shadowed by the functions of the same name
# Load the exposed API of the spec builder
__all__ += __import__(f"{__name__}.spec", fromlist=["__all__"]).__all__
# Load the exposed API of the splitter
__all__ += __import__(f"{__name__}.split", fromlist=["__all__"]).__all__
# Load the exposed API of the formatter
__all__ += __import__(f"{__name__}.stringify", fromlist=["__all__"]).__all__
