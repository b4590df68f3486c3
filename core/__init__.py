from .record import Task
from .tree import (
    TaskTree,
    TreeBuildError,
    MultipleRootsError,
    NoRootFoundError,
    build_tree,
)
from .flatten import DisplayElement, flatten_tree, flatten_records
from .connectors import (
    BRANCH,
    CORNER,
    Transition,
    connector_prefixes,
    render_outline,
)

__all__ = [
    "Task",
    # Tree construction
    "TaskTree",
    "TreeBuildError",
    "MultipleRootsError",
    "NoRootFoundError",
    "build_tree",
    # Flattening
    "DisplayElement",
    "flatten_tree",
    "flatten_records",
    # Connectors
    "BRANCH",
    "CORNER",
    "Transition",
    "connector_prefixes",
    "render_outline",
]
