import json
from typing import Any, TypeAlias

from bst_implementation.src.bin_tree import BstNode

NestedRecord: TypeAlias = dict[str, Any]


def to_structural_snapshot(tree: BstNode, omit_absent: bool = False) -> NestedRecord:
    record: NestedRecord = {"id": tree.id}
    for side, child in (("left", tree.left), ("right", tree.right)):
        if child is not None:
            record[side] = to_structural_snapshot(child, omit_absent)
        elif not omit_absent:
            record[side] = None
    return record


def dump_snapshot(tree: BstNode, indent: int | None = 4) -> str:
    """Absent children are left out, same layout as a JSON dump of the raw nodes."""
    return json.dumps(to_structural_snapshot(tree, omit_absent=True), indent=indent)
