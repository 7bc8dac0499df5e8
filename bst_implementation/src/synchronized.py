import threading

from bst_implementation.src.bin_tree import BstNode, Key, create_root, insert
from bst_implementation.src.snapshot import NestedRecord, to_structural_snapshot


class SynchronizedTree:
    """
    Tree handle for several writers. One lock guards the whole tree for the
    length of each call, since a descent reads and writes the same node.
    """

    def __init__(self, root_id: Key) -> None:
        self._lock = threading.Lock()
        self.root: BstNode = create_root(root_id)

    def insert(self, id: Key, *, strict: bool = False) -> None:
        with self._lock:
            insert(self.root, id, strict=strict)

    def to_structural_snapshot(self, omit_absent: bool = False) -> NestedRecord:
        with self._lock:
            return to_structural_snapshot(self.root, omit_absent)

    def __repr__(self) -> str:
        return f"SynchronizedTree<root_id={self.root.id!r}>"
