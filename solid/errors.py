# solid/errors.py


class SolidExampleError(Exception):
    """Base class for errors raised by the examples."""


class UnsupportedOperationError(SolidExampleError, NotImplementedError):
    """
    Raised by a variant that was forced to implement an operation it cannot
    perform (fat interface, broken substitution).
    Seeing this error means the abstraction should be split.
    """
    def __init__(self, variant, operation):
        self.variant = variant
        self.operation = operation
        super().__init__(f"{operation} not supported by {variant}")
