"""Interfaces (application boundary) for PODARCHIVER.

Defines the capability contracts the archiver depends on (fetching data,
downloading resources, moving files, reading/writing file attributes), the
small DTOs they exchange, and the shared error taxonomy. Business rules stay
out of this package.

Dependency rule: this package is independent; do not import from any other
`podarchiver.*` modules. It may be imported by `podarchiver.service_layer`,
`podarchiver.adapters`, and `podarchiver.bootstrap`.
"""

from .attributes import AttributeKey, FileAttributes
from .downloader import DownloadRequest, Downloader
from .errors import (
    CapabilityError,
    MoveError,
    NotFoundError,
    TimedOut,
    TransportError,
    UnimplementedPathError,
)
from .fetcher import DataFetcher, ResponseMetadata
from .mover import FileMover

__all__ = [
    "AttributeKey",
    "CapabilityError",
    "DataFetcher",
    "DownloadRequest",
    "Downloader",
    "FileAttributes",
    "FileMover",
    "MoveError",
    "NotFoundError",
    "ResponseMetadata",
    "TimedOut",
    "TransportError",
    "UnimplementedPathError",
]
