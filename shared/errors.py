class MatrixError(ValueError):
    """Base for every error a caller can trigger with bad input matrices."""


class IncompatibleShapes(MatrixError):
    """Operands are absent, ragged, empty, or A's columns != B's rows."""


class UnsupportedElementType(MatrixError):
    """Elements are not integers, or do not fit the working dtype."""


class ShapeMismatch(AssertionError):
    # internal: a primitive got operands the engine should never produce
    pass
