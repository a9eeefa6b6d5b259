import logging
import re
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Union

from atproto_errors import (
    ArityError,
    AtURIError,
    ConstructionError,
    SchemeError,
    SegmentForm,
    SerializationError,
)
from atproto_result import Err, Ok, Result
from atproto_types import SoftRef, Stringifiable

logger = logging.getLogger(__name__)

# full:   "at://" AUTHORITY [ PATH ] [ "?" QUERY ] [ "#" FRAGMENT ]
# actual: "at://" AUTHORITY [ "/" COLLECTION [ "/" RKEY ] ]
AT_SCHEME_TOKEN = "at:"
AT_URI_PREFIX = "at://"
MAX_ROOTED_SEGMENTS = 4
MAX_RELATIVE_SEGMENTS = 2

# https://atproto.com/specs/record-key#record-key-syntax
RECORD_KEY_REGEX = r"^[A-Za-z0-9.\-_:~]{1,512}$"


# returns the rkey unchanged if it is valid, None otherwise. never raises
def validate_record_key(rkey: str) -> Optional[str]:
    if not isinstance(rkey, str):
        return None
    # allowed by the charset, but reserved by the record key syntax
    if rkey in (".", ".."):
        return None
    if re.fullmatch(RECORD_KEY_REGEX, rkey) is None:
        return None
    return rkey


class Segments(NamedTuple):
    """Resolved path segments of an AT URI, one fixed slot per level.

    Slots that the reference did not supply are ``None``.
    """

    scheme: Optional[str] = None
    authority: Optional[str] = None
    collection: Optional[str] = None
    rkey: Optional[str] = None


def split_segments(ref: str) -> List[str]:
    return [part for part in ref.split("/") if part]


# overlays a relative reference (collection and optionally rkey) onto the tail of a rooted one.
# scheme and authority always come from the lower reference
def merge_segments(lower: Segments, upper: List[str]) -> Segments:
    overlay = dict(zip(("collection", "rkey"), upper))
    return lower._replace(**overlay)


def resolve_segments(
    uri: str, base: Optional[str] = None
) -> Result[Segments, AtURIError]:
    """Resolve ``uri`` against an optional ``base`` into fixed path segments.

    The lower reference (``base`` if given, else ``uri``) must be rooted,
    meaning its first segment is ``at:``. With a base, a rooted ``uri``
    replaces the base entirely. A relative ``uri`` may only carry a
    collection and an rkey, which replace the base's tail.
    """
    lower = base if base is not None else uri
    upper = uri if base is not None else None

    lower_parts = split_segments(lower)
    if len(lower_parts) > MAX_ROOTED_SEGMENTS:
        return Err(ArityError(SegmentForm.LOWER, len(lower_parts), MAX_ROOTED_SEGMENTS))
    if not lower_parts or lower_parts[0] != AT_SCHEME_TOKEN:
        return Err(SchemeError(lower_parts[0] if lower_parts else None))

    if upper is None:
        return Ok(Segments(*lower_parts))

    upper_parts = split_segments(upper)
    if upper_parts and upper_parts[0] == AT_SCHEME_TOKEN:
        # rooted upper: the base is ignored
        if len(upper_parts) > MAX_ROOTED_SEGMENTS:
            return Err(
                ArityError(SegmentForm.ROOTED_UPPER, len(upper_parts), MAX_ROOTED_SEGMENTS)
            )
        return Ok(Segments(*upper_parts))

    if len(upper_parts) > MAX_RELATIVE_SEGMENTS:
        return Err(
            ArityError(SegmentForm.RELATIVE_UPPER, len(upper_parts), MAX_RELATIVE_SEGMENTS)
        )
    return Ok(merge_segments(Segments(*lower_parts), upper_parts))


def _coerce(ref: Union[str, Stringifiable]) -> Result[str, AtURIError]:
    if isinstance(ref, str):
        return Ok(ref)
    if isinstance(ref, Stringifiable):
        res = ref.to_string()
        if not isinstance(res, (Ok, Err)):
            return Err(
                AtURIError(f"to_string() returned {type(res).__name__}, expected a Result")
            )
        return res
    return Ok(str(ref))


@dataclass(frozen=True)
class AtURI:
    """``URL``-like at:// URI: an authority, optionally narrowed to a collection and a record key.

    The constructor raises ``ConstructionError`` when a collection is given
    without an authority, an rkey without a collection, or any part that
    contains a slash. Missing parts are
    stored as empty strings. Use ``AtURI.parse`` for untrusted input. It
    returns a ``Result`` instead of raising.
    """

    authority: str
    collection: str = ""
    rkey: str = ""

    def __post_init__(self):
        if not self.authority and self.collection:
            raise ConstructionError("collection w/o authority")
        if not self.collection and self.rkey:
            raise ConstructionError("rkey w/o collection")
        object.__setattr__(self, "authority", self.authority or "")
        object.__setattr__(self, "collection", self.collection or "")
        object.__setattr__(self, "rkey", self.rkey or "")
        # a slash would add or drop a path segment when serialized
        for name in ("authority", "collection", "rkey"):
            if "/" in getattr(self, name):
                raise ConstructionError(f"{name} contains '/'")

    @classmethod
    def parse(
        cls,
        uri: Union[str, Stringifiable],
        base: Optional[Union[str, Stringifiable]] = None,
    ) -> "Result[AtURI, AtURIError]":
        uri_str = _coerce(uri)
        if isinstance(uri_str, Err):
            return uri_str
        base_str = None
        if base is not None:
            base_str = _coerce(base)
            if isinstance(base_str, Err):
                return base_str

        parts = resolve_segments(
            uri_str.value, base_str.value if base_str is not None else None
        )
        if isinstance(parts, Err):
            logger.debug(
                "rejected AT URI %r (base %r): %s", uri_str.value, base, parts.error
            )
            return parts

        segments = parts.value
        try:
            return Ok(cls(segments.authority, segments.collection, segments.rkey))
        except ConstructionError as err:
            logger.debug(
                "rejected AT URI %r (base %r): %s", uri_str.value, base, err
            )
            return Err(err)

    @classmethod
    def can_parse(
        cls,
        uri: Union[str, Stringifiable],
        base: Optional[Union[str, Stringifiable]] = None,
    ) -> bool:
        return isinstance(cls.parse(uri, base), Ok)

    # canonical form: at://<authority>[/<collection>[/<rkey>]]
    def to_string(self) -> Result[str, SerializationError]:
        if not self.authority:
            return Err(SerializationError("no authority"))
        ret = AT_URI_PREFIX + self.authority
        if not self.collection:
            return Ok(ret)
        ret += "/" + self.collection
        if self.rkey:
            ret += "/" + self.rkey
        return Ok(ret)

    def __str__(self) -> str:
        res = self.to_string()
        if isinstance(res, Err):
            raise res.error
        return res.value

    # repo/collection/rkey object for XRPC endpoints like com.atproto.repo.getRecord
    def soft_ref(self) -> SoftRef:
        return {
            "repo": self.authority,
            "collection": self.collection,
            "rkey": self.rkey,
        }


def parse_full_aturi(uri: str) -> tuple[str, str, str]:
    if not uri.startswith(AT_URI_PREFIX):
        raise ValueError("Invalid AT URI: missing at:// prefix")
    res = AtURI.parse(uri)
    if isinstance(res, Err):
        raise ValueError(f"Invalid AT URI: {res.error}") from res.error
    aturi = res.value
    if not (aturi.collection and aturi.rkey):
        raise ValueError("Invalid AT URI: expected format at://repo/collection/rkey")
    return aturi.authority, aturi.collection, aturi.rkey


if __name__ == "__main__":
    assert validate_record_key("a" * 512) == "a" * 512
    assert validate_record_key("a" * 513) is None
    assert validate_record_key("") is None

    full = "at://example.com/com.example.something.other/probablygoodrkey"
    assert str(AtURI.parse(full).value) == full
    assert (
        str(AtURI.parse("com.example.something.other", "at://example.com").value)
        == "at://example.com/com.example.something.other"
    )
    assert str(AtURI.parse("at://elpmaxe.com", "at://example.com").value) == "at://elpmaxe.com"

    assert not AtURI.can_parse("at://a/b/c/d")
    assert not AtURI.can_parse("http://example.com/x")
    assert parse_full_aturi(full) == (
        "example.com",
        "com.example.something.other",
        "probablygoodrkey",
    )
