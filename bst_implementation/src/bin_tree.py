import logging
from dataclasses import dataclass
from typing import Any, Iterable, Protocol, TypeAlias

from bst_implementation.src.errors import DuplicateKeyError, EmptyTreeError


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


Key: TypeAlias = Comparable


@dataclass
class BstNode:
    id: Key
    left: "BstNode | None" = None
    right: "BstNode | None" = None

    def insert(self, id: Key, *, strict: bool = False) -> None:
        insert(self, id, strict=strict)


def create_root(id: Key) -> BstNode:
    return BstNode(id)


def insert(tree: BstNode | None, id: Key, *, strict: bool = False) -> None:
    """
    Walk down from `tree` and hang a new leaf for `id` on the first empty
    slot along the search path.

    Both comparisons are checked on their own, there is no else between them.
    A key equal to a node on the path matches neither and the descent just
    stops there, so duplicates are dropped unless `strict` asks for an error.
    """
    if tree is None:
        raise EmptyTreeError()

    descended = False
    if tree.id > id:
        if tree.left is None:
            tree.left = BstNode(id)
            logging.debug(f"attached {id = } left of {tree.id}")
        else:
            insert(tree.left, id, strict=strict)
        descended = True
    if tree.id < id:
        if tree.right is None:
            tree.right = BstNode(id)
            logging.debug(f"attached {id = } right of {tree.id}")
        else:
            insert(tree.right, id, strict=strict)
        descended = True

    if not descended:
        logging.debug(f"{id = } already in tree, nothing inserted")
        if strict:
            raise DuplicateKeyError(id)


def build_tree(keys: Iterable[Key], *, strict: bool = False) -> BstNode:
    # first key is the root, the rest go in with insert in the given order
    key_iter = iter(keys)
    try:
        first = next(key_iter)
    except StopIteration:
        raise EmptyTreeError("Need at least one key to create the root") from None

    root = create_root(first)
    for key in key_iter:
        insert(root, key, strict=strict)
    return root
