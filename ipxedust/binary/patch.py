"""
Magic string patching for the embedded iPXE binaries.

Every iPXE build carries an embedded startup script containing
MAGIC_STRING. Overwriting it in a copy of the binary changes what the
booted machine does without rebuilding iPXE.
"""

from typing import Union

from ipxedust.binary.exceptions import PatchTooLongError

BytesLike = Union[bytes, bytearray, memoryview]

# Included in each iPXE binary within the embedded script.
MAGIC_STRING = (
    b"#a8b7e61f1075c37a793f2f92cee89f7bba00c4a8d7842ce3d40b5889032d8881\n"
    b"#ddd16a4fc4926ecefdfb6941e33c44ed3647133638f5e84021ea44d3152e7f97"
)

PADDING_BYTE = b" "


def find_magic(content: BytesLike, marker: bytes = MAGIC_STRING) -> int:
    """Return the offset of the first marker in content, or -1."""
    if isinstance(content, memoryview):
        content = content.tobytes()
    return content.find(marker)


def is_patchable(content: BytesLike, marker: bytes = MAGIC_STRING) -> bool:
    """Whether content carries the marker and can be patched."""
    return find_magic(content, marker) != -1


def patch(content: BytesLike, payload: BytesLike, *, marker: bytes = MAGIC_STRING) -> BytesLike:
    """
    Replace the magic string in content with payload.

    The marker region becomes payload followed by space padding up to the
    marker length; every other byte is left as is. Only the first marker
    occurrence is touched.

    Returns:
        content itself when payload is empty or the marker is not found,
        otherwise a new bytes object of the same length.

    Raises:
        PatchTooLongError: payload is longer than the marker.
    """
    if isinstance(payload, str):
        raise TypeError("payload must be bytes-like, not str")

    # Lengths are in bytes, whatever the item size of the view.
    if isinstance(payload, memoryview):
        payload = payload.tobytes()

    # Noop when no patch is passed.
    if len(payload) == 0:
        return content

    # Also noop when there's no magic string in the content.
    offset = find_magic(content, marker)
    if offset == -1:
        return content

    if len(payload) > len(marker):
        raise PatchTooLongError(len(payload), len(marker))

    # Work on a copy, the source buffer is shared between requests.
    dup = bytearray(content)
    end = offset + len(marker)
    dup[offset:end] = PADDING_BYTE * len(marker)
    dup[offset:offset + len(payload)] = payload

    return bytes(dup)
