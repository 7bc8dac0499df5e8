from bst_implementation.src.bin_tree import BstNode


def count_nodes(node: BstNode | None) -> int:
    if node is None:
        return 0
    return 1 + count_nodes(node.left) + count_nodes(node.right)


def height(node: BstNode | None) -> int:
    # single node has height 0
    if node is None:
        return -1
    return 1 + max(height(node.left), height(node.right))


def keys_of(node: BstNode | None) -> list:
    if node is None:
        return []
    return keys_of(node.left) + [node.id] + keys_of(node.right)


def is_ordered(node: BstNode | None, low=None, high=None) -> bool:
    """Every key strictly between the bounds inherited from its ancestors."""
    if node is None:
        return True
    if low is not None and not node.id > low:
        return False
    if high is not None and not node.id < high:
        return False
    return is_ordered(node.left, low, node.id) and is_ordered(
        node.right, node.id, high
    )
