"""Resource loading infrastructure for ResourceResolver.

Provides the protocols for byte-stream and compiled-bundle providers, plus
file-system, package-data and in-memory implementations.

Components:
    StreamProvider - Protocol for opening text resources (structural typing)
    PathStreamProvider - Disk-based provider with path-traversal prevention
    PackageStreamProvider - Provider reading package data via importlib.resources
    MemoryStreamProvider - Mutable in-memory provider
    CompiledProvider - Protocol for compiled (module) bundles
    ModuleBundleProvider - Imports bundle modules from a package

Not-found is reported by returning None. Any exception raised by a
provider propagates to the caller unchanged.

Python 3.13+.
"""

from __future__ import annotations

import importlib
import io
import logging
import sys
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path, PurePosixPath
from threading import Lock
from typing import BinaryIO, Protocol

from resbundle.localization.types import BundleName, ResourcePath
from resbundle.parsing.compiled import extract_compiled_contents

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocols
    "StreamProvider",
    "CompiledProvider",
    # Stream providers
    "PathStreamProvider",
    "PackageStreamProvider",
    "MemoryStreamProvider",
    # Compiled providers
    "ModuleBundleProvider",
]

logger = logging.getLogger(__name__)


class StreamProvider(Protocol):
    """Protocol for opening resource byte streams by resource path.

    Implementations may additionally provide
    ``last_modified(resource_path) -> float | None`` (seconds since the
    epoch) so that expired cache entries are reloaded only when the
    resource changed.

    Example:
        >>> class DictProvider:
        ...     def __init__(self, files: dict[str, bytes]) -> None:
        ...         self.files = files
        ...     def open(self, resource_path: str, force_fresh: bool = False):
        ...         data = self.files.get(resource_path)
        ...         return None if data is None else io.BytesIO(data)
    """

    def open(self, resource_path: ResourcePath, force_fresh: bool = False) -> BinaryIO | None:
        """Open a resource for reading.

        Args:
            resource_path: Slash-separated path (e.g., 'app/message_ja.properties')
            force_fresh: Bypass any transport-level cache (used on reload)

        Returns:
            Binary stream the caller closes, or None if the resource does not exist
        """


class CompiledProvider(Protocol):
    """Protocol for loading compiled bundles by bundle name.

    May additionally provide ``last_modified(bundle_name) -> float | None``.
    """

    def load_compiled(
        self, bundle_name: BundleName, force_fresh: bool = False
    ) -> Mapping[str, object] | None:
        """Return the bundle's messages, or None if no such bundle exists."""


def _validate_resource_path(resource_path: ResourcePath) -> PurePosixPath:
    """Reject absolute paths and traversal sequences.

    Raises:
        ValueError: If resource_path is unsafe
    """
    if not resource_path:
        msg = "Resource path cannot be empty"
        raise ValueError(msg)
    if resource_path.startswith(("/", "\\")) or Path(resource_path).is_absolute():
        msg = f"Absolute paths not allowed in resource path: '{resource_path}'"
        raise ValueError(msg)
    pure = PurePosixPath(resource_path.replace("\\", "/"))
    if ".." in pure.parts:
        msg = f"Path traversal sequences not allowed in resource path: '{resource_path}'"
        raise ValueError(msg)
    return pure


@dataclass(frozen=True, slots=True)
class PathStreamProvider:
    """File system stream provider rooted at a directory.

    Equal roots compare and hash equal, so resolvers built from equal
    providers share bundle cache entries.

    Reads always go to disk; ``force_fresh`` therefore has no extra effect.

    Security:
        Resource paths containing '..' or absolute paths are rejected.
        All resolved paths are validated against the root directory.

    Example:
        >>> provider = PathStreamProvider("resources")
        >>> stream = provider.open("message_ja.properties")
        # Opens: resources/message_ja.properties

    Attributes:
        root: Directory containing resource files
    """

    root: Path
    _resolved_root: Path = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        root = Path(self.root)
        object.__setattr__(self, "root", root)
        object.__setattr__(self, "_resolved_root", root.resolve())

    def _full_path(self, resource_path: ResourcePath) -> Path:
        pure = _validate_resource_path(resource_path)
        full_path = (self._resolved_root / pure).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = (
                "Path traversal detected: resolved path escapes root directory. "
                f"resource_path='{resource_path}'"
            )
            raise ValueError(msg) from None
        return full_path

    def open(self, resource_path: ResourcePath, force_fresh: bool = False) -> BinaryIO | None:  # noqa: ARG002
        """Open a resource file.

        Raises:
            ValueError: If resource_path is unsafe
            OSError: If the file exists but cannot be read
        """
        full_path = self._full_path(resource_path)
        if not full_path.is_file():
            return None
        return full_path.open("rb")

    def last_modified(self, resource_path: ResourcePath) -> float | None:
        """Modification time of the file, or None if it does not exist."""
        try:
            return self._full_path(resource_path).stat().st_mtime
        except FileNotFoundError:
            return None


@dataclass(frozen=True, slots=True)
class PackageStreamProvider:
    """Stream provider reading data files shipped inside a Python package.

    Example:
        >>> provider = PackageStreamProvider("myapp.i18n")
        >>> provider.open("message_ja.properties")  # myapp/i18n/message_ja.properties

    Attributes:
        package: Dotted name of the package holding the resources
    """

    package: str

    def open(self, resource_path: ResourcePath, force_fresh: bool = False) -> BinaryIO | None:  # noqa: ARG002
        """Open a package data file.

        Raises:
            ValueError: If resource_path is unsafe
            ModuleNotFoundError: If the package cannot be imported
        """
        pure = _validate_resource_path(resource_path)
        traversable = resources.files(self.package).joinpath(*pure.parts)
        if not traversable.is_file():
            return None
        return traversable.open("rb")

    def last_modified(self, resource_path: ResourcePath) -> float | None:
        """Modification time for file-backed packages; None otherwise."""
        pure = _validate_resource_path(resource_path)
        traversable = resources.files(self.package).joinpath(*pure.parts)
        if isinstance(traversable, Path) and traversable.is_file():
            return traversable.stat().st_mtime
        return None


class MemoryStreamProvider:
    """Mutable in-memory stream provider.

    Thread-safe. Records every ``open`` call in ``open_calls`` as
    ``(resource_path, force_fresh)`` tuples.

    Example:
        >>> provider = MemoryStreamProvider({"message.properties": b"greeting=hello"})
        >>> provider.put("message_ja.properties", "greeting=konnichiwa")
    """

    __slots__ = ("_files", "_lock", "_modified", "open_calls")

    def __init__(self, files: Mapping[ResourcePath, bytes | str] | None = None) -> None:
        self._files: dict[ResourcePath, bytes] = {}
        self._modified: dict[ResourcePath, float] = {}
        self._lock = Lock()
        self.open_calls: list[tuple[ResourcePath, bool]] = []
        for path, data in (files or {}).items():
            self.put(path, data)

    def put(self, resource_path: ResourcePath, data: bytes | str, encoding: str = "utf-8") -> None:
        """Add or replace a resource; str data is encoded with ``encoding``."""
        payload = data.encode(encoding) if isinstance(data, str) else bytes(data)
        with self._lock:
            self._files[resource_path] = payload
            self._modified[resource_path] = time.time()

    def remove(self, resource_path: ResourcePath) -> None:
        """Delete a resource if present."""
        with self._lock:
            self._files.pop(resource_path, None)
            self._modified.pop(resource_path, None)

    def open(self, resource_path: ResourcePath, force_fresh: bool = False) -> BinaryIO | None:
        with self._lock:
            self.open_calls.append((resource_path, force_fresh))
            data = self._files.get(resource_path)
        return None if data is None else io.BytesIO(data)

    def last_modified(self, resource_path: ResourcePath) -> float | None:
        with self._lock:
            return self._modified.get(resource_path)

    def __contains__(self, resource_path: object) -> bool:
        with self._lock:
            return resource_path in self._files


@dataclass(frozen=True, slots=True)
class ModuleBundleProvider:
    """Compiled-bundle provider importing one module per bundle.

    The bundle ``message_ja`` is imported as ``<package>.message_ja`` (or as
    the top-level module ``message_ja`` when ``package`` is None). Dots in
    base names address subpackages.

    Attributes:
        package: Dotted package prefix for bundle modules
    """

    package: str | None = None

    def _module_name(self, bundle_name: BundleName) -> str:
        return f"{self.package}.{bundle_name}" if self.package else bundle_name

    def load_compiled(
        self, bundle_name: BundleName, force_fresh: bool = False
    ) -> Mapping[str, object] | None:
        """Import a bundle module and read its messages.

        Args:
            bundle_name: Bundle name (e.g., 'message_ja')
            force_fresh: Re-execute an already imported module

        Returns:
            Read-only messages, or None if the module does not exist

        Raises:
            ResourceDecodeError: If the module exposes no valid mapping
            Exception: Any error raised while executing the module
        """
        module_name = self._module_name(bundle_name)
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            missing = e.name or ""
            if module_name == missing or module_name.startswith(f"{missing}."):
                return None
            raise

        if force_fresh:
            logger.debug("Re-executing compiled bundle module: %s", module_name)
            module = importlib.reload(module)
        return extract_compiled_contents(module, bundle_name)

    def last_modified(self, bundle_name: BundleName) -> float | None:
        """Modification time of the module's source file, if known."""
        module = sys.modules.get(self._module_name(bundle_name))
        origin = getattr(getattr(module, "__spec__", None), "origin", None)
        if not origin:
            return None
        try:
            return Path(origin).stat().st_mtime
        except OSError:
            return None
