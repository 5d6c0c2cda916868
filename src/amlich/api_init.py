"""Table bootstrap and attribute registration (import side-effect)."""
from .api import set_table
from .bootstrap import build_table
from .attributes import standard as _standard  # noqa: F401

set_table(build_table())
