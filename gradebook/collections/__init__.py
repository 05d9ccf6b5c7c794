"""
Collections package for the gradebook.

Exports the generic owned-element container the record model is built on.
"""

from gradebook.collections.ordered import CloneFn, DestroyFn, OrderedCollection, Position

__all__ = [
    "CloneFn",
    "DestroyFn",
    "OrderedCollection",
    "Position",
]
