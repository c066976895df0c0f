"""Line tables, directional comparison, loading, and rendering."""

from .codec import (
    BYTE_ORDER_MARK,
    DEFAULT_IGNORE_SET,
    LINE_SEPARATOR,
    IgnoreSet,
    code_unit_order,
)
from .compare import (
    Direction,
    Ordering,
    backward_less,
    directional_compare,
    forward_less,
    make_less,
)
from .errors import (
    ForeignSnapshotError,
    LoadError,
    ShortReadError,
    SizeMismatchError,
)
from .loader import byte_length, load_file, read_exact
from .render import Renderer, Rendering, arrange, capture_renderings
from .table import LineOrder, LineTable
from .view import CodeUnitBuffer, LineView

__all__ = [
    "BYTE_ORDER_MARK",
    "CodeUnitBuffer",
    "DEFAULT_IGNORE_SET",
    "Direction",
    "ForeignSnapshotError",
    "IgnoreSet",
    "LINE_SEPARATOR",
    "LineOrder",
    "LineTable",
    "LineView",
    "LoadError",
    "Ordering",
    "Renderer",
    "Rendering",
    "ShortReadError",
    "SizeMismatchError",
    "arrange",
    "backward_less",
    "byte_length",
    "capture_renderings",
    "code_unit_order",
    "directional_compare",
    "forward_less",
    "load_file",
    "make_less",
    "read_exact",
]
