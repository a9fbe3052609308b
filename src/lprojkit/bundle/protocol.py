"""Bundle capability protocol.

A bundle is a read-only container of localization directories. Locale
resolution only needs the handful of queries declared here, so it can run
against the filesystem (DirectoryBundle) or an in-memory fake
(MemoryBundle).

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lprojkit.tables import StringTable
    from lprojkit.types import LocaleCode, TableName

__all__ = ["Bundle"]


class Bundle(Protocol):
    """Protocol for read-only localized resource bundles.

    This is a Protocol (structural typing) rather than ABC so that callers
    can adapt any resource store without inheriting from lprojkit classes.

    Implementations must be immutable for the lifetime of the process;
    resolution results may be cached on that assumption.

    Example:
        >>> bundle = DirectoryBundle.from_path("App.app")
        >>> bundle.localizations
        ('Base', 'de', 'en')
        >>> bundle.localized_bundle("de").has_table("Localizable")
        True
    """

    @property
    def localizations(self) -> Sequence[LocaleCode]:
        """Tags of the localization directories in this bundle."""
        ...

    @property
    def development_localization(self) -> LocaleCode | None:
        """Authoring language, used as the last fallback."""
        ...

    @property
    def preferred_localizations(self) -> Sequence[LocaleCode]:
        """Localizations matching the user's preferences, best first."""
        ...

    def current_locale(self) -> LocaleCode:
        """Process-wide locale used when the bundle prefers nothing."""
        ...

    def localized_bundle(self, localization: LocaleCode) -> Bundle | None:
        """Return the bundle for the <localization>.lproj directory.

        Returns:
            Sub-bundle rooted at the localization directory, or None if the
            directory does not exist
        """
        ...

    def has_table(self, table_name: TableName) -> bool:
        """Check whether <table_name>.strings or .stringsdict exists at this bundle's root."""
        ...

    def load_table(self, table_name: TableName) -> StringTable | None:
        """Load the table at this bundle's root, or None if neither file exists."""
        ...
