from typing import Any, Protocol, TypedDict, runtime_checkable

from atproto_result import Result


# repo/collection/rkey params for XRPC endpoints like com.atproto.repo.getRecord
class SoftRef(TypedDict):
    repo: str
    collection: str
    rkey: str


class _XErrorRequired(TypedDict):
    error: str


# standard body of an XRPC error response. https://atproto.com/specs/xrpc#error-responses
class XError(_XErrorRequired, total=False):
    message: str


# functional syntax since "$link" and "$type" are not valid identifiers
BlobLink = TypedDict("BlobLink", {"$link": str})

# atproto `blob` type. "$type" is always "blob"
XBlob = TypedDict(
    "XBlob",
    {
        "$type": str,
        "ref": BlobLink,
        "mimeType": str,
        "size": int,
    },
)


@runtime_checkable
class Stringifiable(Protocol):
    """Anything that renders to a string through a fallible ``to_string()``.

    ``AtURI`` is the main implementation. ``AtURI.parse`` accepts these
    in place of plain strings and propagates a failed rendering as-is.
    """

    def to_string(self) -> Result[str, Any]: ...
