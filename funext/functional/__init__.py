"""Small functional helpers: composition, folds, forks and scoped resources."""

from ._collections import flat_map, fold, fold_async, foldi, mapi
from ._composition import after, apply, before, compose
from ._forking import fork, fork_all, validate
from ._piping import Identity, tap, using, using_async, wait_for

__all__ = [
    "Identity",
    "after",
    "apply",
    "before",
    "compose",
    "flat_map",
    "fold",
    "fold_async",
    "foldi",
    "fork",
    "fork_all",
    "mapi",
    "tap",
    "using",
    "using_async",
    "validate",
    "wait_for",
]
