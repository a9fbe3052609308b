"""Filesystem-backed bundle.

Layout:

    App.app/
        Info.plist                    (optional, CFBundleDevelopmentRegion)
        Localizable.strings           (root table, optional)
        Base.lproj/Localizable.strings
        en.lproj/Localizable.strings
        en.lproj/Localizable.stringsdict
        de.lproj/Errors.strings

macOS style bundles keep resources under Contents/Resources and the
metadata in Contents/Info.plist; DirectoryBundle.from_path() handles both.

Python 3.13+.
"""

from __future__ import annotations

import logging
import plistlib
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from lprojkit.constants import (
    DEVELOPMENT_REGION_KEY,
    INFO_PLIST_NAME,
    LPROJ_SUFFIX,
    MAX_LOOKUP_CACHE_SIZE,
    MAX_SOURCE_SIZE,
    MAX_TABLE_CACHE_SIZE,
)
from lprojkit.diagnostics import ErrorTemplate, TableLoadError
from lprojkit.enums import TableFormat
from lprojkit.locale_utils import get_system_locale, to_language_tag
from lprojkit.tables import StringTable, load_table
from lprojkit.types import LocaleCode, TableName

__all__ = ["DirectoryBundle"]

logger = logging.getLogger(__name__)


def _evict_oldest(cache: OrderedDict[str, Any], limit: int) -> None:
    """Drop least recently used entries until one more fits under limit."""
    while cache and len(cache) >= limit:
        cache.popitem(last=False)


def _validate_component(kind: str, value: str) -> None:
    """Reject names that would escape the bundle directory.

    Raises:
        ValueError: If value is empty or contains separators or ".."
    """
    if not value:
        msg = f"{kind} cannot be empty"
        raise ValueError(msg)
    if ".." in value:
        msg = f"Path traversal sequences not allowed in {kind}: '{value}'"
        raise ValueError(msg)
    if "/" in value or "\\" in value:
        msg = f"Path separators not allowed in {kind}: '{value}'"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class DirectoryBundle:
    """Bundle backed by a directory of <tag>.lproj subdirectories.

    Localization tags and preferred localizations are computed once at
    construction. Directory lookups, table existence checks and parsed
    tables are cached per instance in bounded LRU caches; the directory is
    assumed not to change while the process runs.

    Thread-safe: caches are guarded by a lock, and file reads happen outside
    of it.

    Attributes:
        path: Resource directory
        development_localization: Authoring language (last fallback)
        preferred_languages: User language preferences, best first. Empty
            means the system locale.

    Example:
        >>> bundle = DirectoryBundle("build/App.app", development_localization="en")
        >>> bundle.localizations
        ('Base', 'de', 'en')
        >>> bundle.localized_bundle("de")
        DirectoryBundle(path=PosixPath('build/App.app/de.lproj'), ...)
    """

    path: Path
    development_localization: LocaleCode | None = None
    preferred_languages: tuple[LocaleCode, ...] = ()
    _localizations: tuple[LocaleCode, ...] = field(init=False, repr=False, compare=False)
    _preferred: tuple[LocaleCode, ...] = field(init=False, repr=False, compare=False)
    _lock: threading.Lock = field(init=False, repr=False, compare=False)
    _lproj_cache: OrderedDict[LocaleCode, DirectoryBundle | None] = field(
        init=False, repr=False, compare=False
    )
    _exists_cache: OrderedDict[TableName, bool] = field(init=False, repr=False, compare=False)
    _table_cache: OrderedDict[TableName, StringTable | None] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Scan localization directories and negotiate preferred localizations.

        Raises:
            FileNotFoundError: If path is not an existing directory
        """
        path = Path(self.path)
        if not path.is_dir():
            msg = f"Bundle directory not found: '{path}'"
            raise FileNotFoundError(msg)
        object.__setattr__(self, "path", path)
        object.__setattr__(self, "preferred_languages", tuple(self.preferred_languages))
        object.__setattr__(self, "_lock", threading.Lock())
        object.__setattr__(self, "_lproj_cache", OrderedDict())
        object.__setattr__(self, "_exists_cache", OrderedDict())
        object.__setattr__(self, "_table_cache", OrderedDict())

        localizations = tuple(
            sorted(
                entry.name.removesuffix(LPROJ_SUFFIX)
                for entry in path.iterdir()
                if entry.suffix == LPROJ_SUFFIX and entry.is_dir()
            )
        )
        object.__setattr__(self, "_localizations", localizations)
        object.__setattr__(self, "_preferred", self._negotiate_preferred())

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        *,
        preferred_languages: tuple[LocaleCode, ...] = (),
    ) -> DirectoryBundle:
        """Open a bundle, reading its development localization from Info.plist.

        Args:
            path: Bundle directory. For macOS style bundles with
                Contents/Resources, resources are read from there.
            preferred_languages: User language preferences, best first

        Returns:
            DirectoryBundle rooted at the resource directory

        Raises:
            FileNotFoundError: If path is not an existing directory
        """
        root = Path(path)
        resources = root / "Contents" / "Resources"
        if resources.is_dir():
            info_plist = root / "Contents" / INFO_PLIST_NAME
        else:
            resources = root
            info_plist = root / INFO_PLIST_NAME

        return cls(
            resources,
            development_localization=_read_development_region(info_plist),
            preferred_languages=preferred_languages,
        )

    def _negotiate_preferred(self) -> tuple[LocaleCode, ...]:
        if not self._localizations:
            return ()

        # Lazy import: Babel loads CLDR data at import time; defer until needed
        from babel.core import negotiate_locale  # noqa: PLC0415

        requested = self.preferred_languages or (get_system_locale(),)
        by_lower = {tag.lower(): tag for tag in self._localizations}
        match = negotiate_locale(
            [to_language_tag(code) for code in requested],
            list(self._localizations),
            sep="-",
            aliases=None,
        )

        preferred: list[LocaleCode] = []
        if match is not None:
            preferred.append(by_lower[match.lower()])
        dev = self.development_localization
        if dev is not None and dev in self._localizations and dev not in preferred:
            preferred.append(dev)
        logger.debug("Preferred localizations for %s: %s", self.path, preferred)
        return tuple(preferred)

    @property
    def localizations(self) -> tuple[LocaleCode, ...]:
        """Tags of the <tag>.lproj directories, sorted."""
        return self._localizations

    @property
    def preferred_localizations(self) -> tuple[LocaleCode, ...]:
        """Negotiated localizations, best first, ending with the development localization."""
        return self._preferred

    def current_locale(self) -> LocaleCode:
        """Return the system locale."""
        return get_system_locale()

    def localized_bundle(self, localization: LocaleCode) -> DirectoryBundle | None:
        """Return the bundle for <localization>.lproj, or None if it does not exist.

        Raises:
            ValueError: If localization contains path separators or ".."
        """
        _validate_component("localization", localization)
        with self._lock:
            if localization in self._lproj_cache:
                self._lproj_cache.move_to_end(localization)
                return self._lproj_cache[localization]

        lproj = self.path / f"{localization}{LPROJ_SUFFIX}"
        bundle = DirectoryBundle(lproj) if lproj.is_dir() else None

        with self._lock:
            if localization not in self._lproj_cache:
                _evict_oldest(self._lproj_cache, MAX_LOOKUP_CACHE_SIZE)
            return self._lproj_cache.setdefault(localization, bundle)

    def table_path(self, table_name: TableName, table_format: TableFormat) -> Path:
        """Return the path a table file would have at this bundle's root.

        Raises:
            ValueError: If table_name contains path separators or ".."
        """
        _validate_component("table name", table_name)
        return self.path / f"{table_name}{table_format}"

    def has_table(self, table_name: TableName) -> bool:
        """Check whether <table_name>.strings or .stringsdict exists here."""
        with self._lock:
            if table_name in self._exists_cache:
                self._exists_cache.move_to_end(table_name)
                return self._exists_cache[table_name]

        exists = any(self.table_path(table_name, fmt).is_file() for fmt in TableFormat)

        with self._lock:
            if table_name not in self._exists_cache:
                _evict_oldest(self._exists_cache, MAX_LOOKUP_CACHE_SIZE)
            self._exists_cache[table_name] = exists
        return exists

    def load_table(self, table_name: TableName) -> StringTable | None:
        """Load and cache the table at this bundle's root.

        Returns:
            Parsed table, or None if neither file exists

        Raises:
            StringsSyntaxError: If the .strings file is malformed
            TableLoadError: If a file is too large, undecodable or not a valid plist
            ValueError: If table_name contains path separators or ".."
        """
        with self._lock:
            if table_name in self._table_cache:
                self._table_cache.move_to_end(table_name)
                return self._table_cache[table_name]

        strings_data = self._read(self.table_path(table_name, TableFormat.STRINGS))
        stringsdict_data = self._read(self.table_path(table_name, TableFormat.STRINGSDICT))
        table = None
        if strings_data is not None or stringsdict_data is not None:
            table = load_table(
                table_name,
                strings_data=strings_data,
                stringsdict_data=stringsdict_data,
                source_path=str(self.path / table_name),
            )

        with self._lock:
            if table_name not in self._table_cache:
                _evict_oldest(self._table_cache, MAX_TABLE_CACHE_SIZE)
            self._table_cache[table_name] = table
        return table

    @staticmethod
    def _read(path: Path) -> bytes | None:
        if not path.is_file():
            return None
        size = path.stat().st_size
        if size > MAX_SOURCE_SIZE:
            raise TableLoadError(
                ErrorTemplate.table_too_large(str(path), size, MAX_SOURCE_SIZE),
                source_path=str(path),
            )
        return path.read_bytes()

    def clear_cache(self) -> None:
        """Drop cached directory lookups and parsed tables."""
        with self._lock:
            self._lproj_cache.clear()
            self._exists_cache.clear()
            self._table_cache.clear()
        logger.debug("Bundle cache cleared for %s", self.path)


def _read_development_region(info_plist: Path) -> LocaleCode | None:
    """Read CFBundleDevelopmentRegion, logging and ignoring unreadable files."""
    if not info_plist.is_file():
        return None
    try:
        with info_plist.open("rb") as f:
            info = plistlib.load(f)
    except (OSError, ExpatError, ValueError) as e:
        diagnostic = ErrorTemplate.info_plist_unreadable(str(info_plist), str(e))
        logger.warning("%s", diagnostic.format_error())
        return None
    if not isinstance(info, dict):
        return None
    region = info.get(DEVELOPMENT_REGION_KEY)
    return str(region) if region else None
