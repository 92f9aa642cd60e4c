from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: BaseException

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error


Result = Union[Ok[T], Failure]
