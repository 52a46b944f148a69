
class BinTreeError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class EmptyTreeError(BinTreeError):
    def __init__(self, operation):
        super(EmptyTreeError, self).__init__(operation)
        self.operation = operation

    def __str__(self):
        return self.operation + " failed: tree is empty"

class NullNodeError(BinTreeError):
    def __init__(self, operation, reason="node is null"):
        super(NullNodeError, self).__init__(operation, reason)
        self.operation = operation
        self.reason = reason

    def __str__(self):
        return self.operation + " failed: " + self.reason

class DuplicateKeyError(BinTreeError):
    def __init__(self, key):
        super(DuplicateKeyError, self).__init__(key)
        self.key = key

    def __str__(self):
        return "Insert failed: element already present in tree"

class ReconstructError(BinTreeError):
    def __str__(self):
        return "Create tree failed: " + ''.join(map(str, self.args))

class SizeMismatchError(ReconstructError):
    def __str__(self):
        return "Create tree failed: lists don't match size"

class ContentMismatchError(ReconstructError):
    def __str__(self):
        return "Create tree failed: list elements don't match"

class DuplicateElementsError(ReconstructError):
    def __str__(self):
        return "Create tree failed: lists contain repeating elements"

class InputError(BinTreeError):
    pass
