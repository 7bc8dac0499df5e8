from typing import Any


class BstError(Exception):
    pass


class EmptyTreeError(BstError, ValueError):
    def __init__(self, message: str = "Tree needs a root node before inserting"):
        super().__init__(message)


class DuplicateKeyError(BstError, ValueError):
    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Key already in tree: {key!r}")
