"""
Registry of the packaged iPXE binaries.

The binaries ship as package data under ipxedust/binary/files and are
read once, on first access, into an immutable name -> bytes table that
lives for the rest of the process.
"""

import threading
from dataclasses import dataclass
from importlib import resources
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Tuple

import structlog

from ipxedust.binary.exceptions import AssetLoadError, AssetNotFoundError

logger = structlog.get_logger()

FILES_PACKAGE = "ipxedust.binary"
FILES_DIR = "files"


@dataclass(frozen=True, slots=True)
class AssetSpec:
    """A binary known at build time."""

    name: str
    filename: str
    description: str


@dataclass(frozen=True, slots=True)
class Asset:
    """A loaded binary."""

    name: str
    filename: str
    description: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


ASSET_SPECS: Tuple[AssetSpec, ...] = (
    AssetSpec("undionly.kpxe", "undionly.kpxe", "BIOS iPXE binary for x86 architectures"),
    AssetSpec("ipxe.efi", "ipxe.efi", "UEFI iPXE binary for x86 architectures"),
    AssetSpec("snp.efi", "snp.efi", "UEFI iPXE binary for ARM architectures"),
    AssetSpec("ipxe.iso", "ipxe.iso", "iPXE ISO image"),
    # DTBs from the Armbian 6.8-edge kernels
    AssetSpec(
        "rk3588-rock-5b.dtb",
        "rockchip-rk3588-rock-5b.dtb--6.8-edge.dtb",
        "Rock-5b DTB from rockchip-rk3588-edge",
    ),
    AssetSpec(
        "rk3566-orangepi-3b.dtb",
        "rockchip-rk3566-orangepi-3b.dtb--6.8-edge.dtb",
        "OrangePi3b DTB from rockchip64-edge",
    ),
    AssetSpec(
        "meson-sm1-odroid-hc4.dtb",
        "amlogic-meson-sm1-odroid-hc4.dtb--6.8-edge.dtb",
        "OdroidHC4 DTB from meson64-edge",
    ),
)

_lock = threading.Lock()
_assets: Optional[Mapping[str, Asset]] = None
_files: Optional[Mapping[str, bytes]] = None


def _read(spec: AssetSpec) -> bytes:
    path = resources.files(FILES_PACKAGE).joinpath(FILES_DIR).joinpath(spec.filename)
    try:
        content = path.read_bytes()
    except FileNotFoundError as e:
        raise AssetLoadError(f"packaged binary missing: {spec.filename}") from e

    if not content:
        raise AssetLoadError(f"packaged binary is empty: {spec.filename}")
    return content


def _load() -> Mapping[str, Asset]:
    global _assets, _files

    if _assets is not None:
        return _assets

    with _lock:
        if _assets is None:
            loaded = {}
            for spec in ASSET_SPECS:
                content = _read(spec)
                loaded[spec.name] = Asset(spec.name, spec.filename, spec.description, content)
                logger.debug("binary_loaded", name=spec.name, size=len(content))

            _files = MappingProxyType({name: asset.content for name, asset in loaded.items()})
            _assets = MappingProxyType(loaded)
            logger.info("binaries_loaded", count=len(loaded))

    return _assets


def get(name: str) -> bytes:
    """
    Return the content of the binary registered under name.

    Raises:
        AssetNotFoundError: no binary is registered under name.
    """
    try:
        return _load()[name].content
    except KeyError:
        raise AssetNotFoundError(name) from None


def get_asset(name: str) -> Asset:
    """Return the registry entry for name, content included."""
    try:
        return _load()[name]
    except KeyError:
        raise AssetNotFoundError(name) from None


def list_names() -> FrozenSet[str]:
    """Return the names of all registered binaries."""
    return frozenset(spec.name for spec in ASSET_SPECS)


def assets() -> Tuple[Asset, ...]:
    """Return every registry entry in build order."""
    table = _load()
    return tuple(table[spec.name] for spec in ASSET_SPECS)


def files() -> Mapping[str, bytes]:
    """Return a read-only name -> content mapping of every binary."""
    _load()
    return _files
