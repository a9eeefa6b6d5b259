from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


# success side of a Result. usage:
#
#   res = AtURI.parse("at://example.com")
#   if isinstance(res, Ok):
#       print(res.value.authority)
@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


# failure side of a Result. the error is kept as a value (usually an exception instance) and is never raised
@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]
