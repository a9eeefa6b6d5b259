from enum import Enum
from typing import Optional


# which reference string a segment-count limit was applied to
class SegmentForm(Enum):
    LOWER = "lower"
    ROOTED_UPPER = "rooted upper"
    RELATIVE_UPPER = "relative upper"


class AtURIError(ValueError):
    pass


# the lower (base, or only) reference did not start with the "at:" token
class SchemeError(AtURIError):
    def __init__(self, token: Optional[str]):
        self.token = token
        super().__init__(f"Bad protocol {token!r}, must be 'at:'")


class ArityError(AtURIError):
    def __init__(self, form: SegmentForm, count: int, limit: int):
        self.form = form
        self.count = count
        self.limit = limit
        super().__init__(
            f"{form.value} part count {count} is greater than the maximum of {limit}"
        )


# raised by the AtURI constructor on misuse (collection w/o authority, rkey w/o collection)
class ConstructionError(AtURIError):
    pass


class SerializationError(AtURIError):
    pass
