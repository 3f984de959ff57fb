class UnderbarError(Exception):
    """base class for every error raised by underbar itself"""


class InvalidArgumentType(UnderbarError, TypeError):
    """a caller passed a value of the wrong kind (not a collection, not callable, ...)"""

    def __init__(self, operation: str, expected: str, actual: object):
        self.operation = operation
        self.expected = expected
        self.actual = actual
        super().__init__(f"{operation}: expected {expected}, got {type(actual).__name__}")


class MissingMethod(UnderbarError, AttributeError):
    """invoke was asked to call a method an element does not have"""

    def __init__(self, method_name: str, element: object):
        self.method_name = method_name
        self.element = element
        super().__init__(f"invoke: {type(element).__name__} has no callable '{method_name}'")
