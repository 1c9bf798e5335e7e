class DagError(Exception):
    pass


class InvalidParents(DagError, ValueError):
    """
    Raised when a block is appended without parents.
    """


class UnknownBlock(DagError, KeyError):
    """
    Raised when an operation references a block id the DAG does not know.
    """

    def __init__(self, block):
        super().__init__(block)
        self.block = block

    def __str__(self):
        return f"unknown block '{self.block}'"
