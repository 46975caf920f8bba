from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .errors import NoValuePresentError

T = TypeVar("T")
U = TypeVar("U")


class Optional(Generic[T]):
    """A container which may or may not hold a value.

    ``None`` is the absence representation; any other value (``0``,
    ``False``, ``""``) is present. Instances are immutable and come only from
    the factories below. Every absent outcome is the shared ``EMPTY``.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> "Optional[T]":
        if cls is Optional:
            raise TypeError("use Optional.empty(), Optional.of() or Optional.of_nullable()")
        return super().__new__(cls)

    @staticmethod
    def empty() -> "Optional[Any]":
        return EMPTY

    @staticmethod
    def of(value: T) -> "Optional[T]":
        # No check: a None passed here behaves as absent.
        return _Present(value)

    @staticmethod
    def of_nullable(value: T | None) -> "Optional[T]":
        return _Present(value) if value is not None else EMPTY

    def get(self) -> T | None: raise NotImplementedError
    def is_present(self) -> bool: raise NotImplementedError

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        if self.is_present():
            consumer(self.get())  # type: ignore[arg-type]

    def peek(self, consumer: Callable[[T], Any]) -> "Optional[T]":
        if self.is_present():
            consumer(self.get())  # type: ignore[arg-type]
        return self

    def filter(self, predicate: Callable[[T], bool]) -> "Optional[T]":
        if self.is_present() and predicate(self.get()):  # type: ignore[arg-type]
            return self
        return EMPTY

    def map(self, mapper: Callable[[T], U | None]) -> "Optional[U]":
        if self.is_present():
            return Optional.of_nullable(mapper(self.get()))  # type: ignore[arg-type]
        return EMPTY

    def flat_map(self, mapper: Callable[[T], "Optional[U]"]) -> "Optional[U]":
        if self.is_present():
            return mapper(self.get())  # type: ignore[arg-type]
        return EMPTY

    def or_else(self, other: U) -> T | U:
        return self.get() if self.is_present() else other  # type: ignore[return-value]

    def or_else_get(self, supplier: Callable[[], U]) -> T | U:
        return self.get() if self.is_present() else supplier()  # type: ignore[return-value]

    def or_else_throw(self, error_factory: Callable[[], BaseException]) -> T:
        if not self.is_present():
            raise error_factory()
        return self.get()  # type: ignore[return-value]

    def or_else_throw_error(self, message: str) -> T:
        return self.or_else_throw(lambda: NoValuePresentError(message))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        if self.is_present() and other.is_present():
            return self.get() == other.get()
        return self.is_present() == other.is_present()

    def __hash__(self) -> int:
        return hash(self.get()) if self.is_present() else hash(None)

    def __str__(self) -> str:
        return f"Optional[{self.get()}]" if self.is_present() else "Optional.empty"

    def __repr__(self) -> str:
        return f"Optional[{self.get()!r}]" if self.is_present() else "Optional.empty"


@dataclass(frozen=True, eq=False, repr=False)
class _Present(Optional[T]):
    value: T
    def get(self) -> T: return self.value
    def is_present(self) -> bool: return self.value is not None


class _Empty(Optional[Any]):
    __slots__ = ()
    def get(self) -> None: return None
    def is_present(self) -> bool: return False
    def __reduce__(self) -> str: return "EMPTY"


EMPTY: Optional[Any] = _Empty()
