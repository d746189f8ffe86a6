"""
Embedded iPXE binaries and magic string patching.

A TFTP or HTTP handler calls serve() once per transfer and sends the
returned bytes to the client as is.
"""

import structlog

from ipxedust import metrics
from ipxedust.binary.exceptions import (
    AssetLoadError,
    AssetNotFoundError,
    BinaryError,
    PatchTooLongError,
)
from ipxedust.binary.patch import MAGIC_STRING, find_magic, is_patchable, patch
from ipxedust.binary.registry import Asset, assets, files, get, get_asset, list_names

logger = structlog.get_logger()

__all__ = [
    "MAGIC_STRING",
    "Asset",
    "AssetLoadError",
    "AssetNotFoundError",
    "BinaryError",
    "PatchTooLongError",
    "assets",
    "files",
    "find_magic",
    "get",
    "get_asset",
    "is_patchable",
    "list_names",
    "patch",
    "serve",
]


def serve(name: str, payload: bytes = b"") -> bytes:
    """
    Look up a binary and apply the per-request patch to it.

    Raises:
        AssetNotFoundError: unknown binary name.
        PatchTooLongError: payload does not fit in the magic string.
    """
    content = get(name)

    try:
        result = patch(content, payload)
    except PatchTooLongError as e:
        metrics.PATCH_ERRORS.labels(asset=name).inc()
        logger.error("binary_patch_rejected", name=name, length=e.length, limit=e.limit)
        raise

    # patch() only hands back the source for a non-empty payload when
    # the magic string is missing.
    if result is not content:
        outcome = "patched"
    elif payload:
        outcome = "unpatchable"
    else:
        outcome = "noop"

    metrics.ASSETS_SERVED.labels(asset=name, outcome=outcome).inc()
    logger.info("asset_served", name=name, size=len(result), outcome=outcome)
    return result
