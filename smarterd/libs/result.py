from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Error:
    """Domain error value: a machine-readable code plus a human message"""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message

    def __eq__(self, other) -> bool:
        return (
            type(self) is type(other)
            and self.code == other.code
            and self.message == other.message
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class Result(Generic[T]):
    """Outcome of a use case: exactly one of value or error is set"""

    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self.value = value
        self.error = error

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None


class Return:
    @staticmethod
    def ok(value: T = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
