from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, TypeVar, TYPE_CHECKING

from .errors import InvariantViolation, NoSuchElement, require_callable

if TYPE_CHECKING:
    from .logger import ConsoleLogger

T = TypeVar("T")
U = TypeVar("U")


class Optional(Generic[T]):
    """A container that may or may not hold a non-None value.

    Build one with `Optional.of`, `Optional.of_nullable` or `Optional.empty`;
    every other operation either inspects it or returns a new Optional, the
    receiver is never modified.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> "Optional[T]":
        if cls is Optional:
            raise InvariantViolation("Optional cannot be instantiated directly, use of, of_nullable or empty")
        return super().__new__(cls)

    @staticmethod
    def of(value: T) -> "Optional[T]":
        if value is None:
            raise InvariantViolation("value must not be None")
        return Present(value)

    @staticmethod
    def of_nullable(value: T | None) -> "Optional[T]":
        return _wrap(value)

    @staticmethod
    def empty() -> "Optional[T]":
        return EMPTY  # type: ignore[return-value]

    def is_present(self) -> bool: raise NotImplementedError
    def is_empty(self) -> bool: return not self.is_present()

    def get(self) -> T:
        if self.is_empty():
            raise NoSuchElement("get() called on an empty Optional")
        return self.value  # type: ignore[attr-defined]

    def or_else(self, other: U) -> T | U:
        return self.value if self.is_present() else other  # type: ignore[attr-defined]

    def or_else_get(self, supplier: Callable[[], U]) -> T | U:
        require_callable(supplier, "supplier")
        if self.is_present():
            return self.value  # type: ignore[attr-defined]
        return supplier()

    def or_else_throw(self, exception_supplier: Callable[[], BaseException]) -> T:
        require_callable(exception_supplier, "exception_supplier")
        if self.is_present():
            return self.value  # type: ignore[attr-defined]
        err = exception_supplier()
        if not isinstance(err, BaseException):
            raise InvariantViolation(f"exception_supplier must produce an exception, got {type(err).__name__}")
        raise err

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        require_callable(consumer, "consumer")
        if self.is_present():
            consumer(self.value)  # type: ignore[attr-defined]

    def if_present_or_else(self, consumer: Callable[[T], Any], empty_action: Callable[[], Any]) -> None:
        require_callable(consumer, "consumer")
        require_callable(empty_action, "empty_action")
        if self.is_present():
            consumer(self.value)  # type: ignore[attr-defined]
        else:
            empty_action()

    def filter(self, predicate: Callable[[T], bool]) -> "Optional[T]":
        require_callable(predicate, "predicate")
        if self.is_empty():
            return self
        return Present(self.value) if predicate(self.value) else EMPTY  # type: ignore[attr-defined]

    def map(self, mapper: Callable[[T], U | None]) -> "Optional[U]":
        require_callable(mapper, "mapper")
        if self.is_empty():
            return self  # type: ignore[return-value]
        return _wrap(mapper(self.value))  # type: ignore[attr-defined]

    def flat_map(self, mapper: Callable[[T], "Optional[U]"]) -> "Optional[U]":
        require_callable(mapper, "mapper")
        if self.is_empty():
            return self  # type: ignore[return-value]
        out = mapper(self.value)  # type: ignore[attr-defined]
        if out is None:
            raise InvariantViolation("mapper must not return an absent reference")
        if not isinstance(out, Optional):
            raise InvariantViolation(f"mapper must return an Optional, got {type(out).__name__}")
        return out

    def or_(self, supplier: Callable[[], "T | Optional[T] | None"]) -> "Optional[T]":
        require_callable(supplier, "supplier")
        if self.is_present():
            return self
        out = supplier()
        if isinstance(out, Optional):
            return out
        return _wrap(out)

    def __iter__(self) -> Iterator[T]:
        if self.is_present():
            yield self.value  # type: ignore[attr-defined]

    def to_list(self) -> List[T]:
        return list(self)

    def trace(self, logger: "ConsoleLogger", label: str = "optional") -> "Optional[T]":
        logger.debug(label, present=self.is_present())
        return self


@dataclass(frozen=True, eq=False)
class Present(Optional[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvariantViolation("Present cannot hold None, use Optional.empty()")

    def __repr__(self) -> str: return f"Present({self.value!r})"
    def is_present(self) -> bool: return True


class _Empty(Optional[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "Empty"
    def is_present(self) -> bool: return False


EMPTY: Optional[Any] = _Empty()


def _wrap(value: T | None) -> Optional[T]:
    return Present(value) if value is not None else EMPTY


def of(value: T) -> Optional[T]:
    return Optional.of(value)


def of_nullable(value: T | None) -> Optional[T]:
    return _wrap(value)


def empty() -> Optional[Any]:
    return EMPTY
