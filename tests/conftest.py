"""Pytest configuration for the lprojkit test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

import os
import plistlib
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# BUNDLE FIXTURES
# =============================================================================

BundleFactory: TypeAlias = Callable[..., Path]


def _strings_source(entries: dict[str, str]) -> str:
    lines = []
    for key, value in entries.items():
        escaped_key = key.replace("\\", "\\\\").replace('"', '\\"')
        escaped_value = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        lines.append(f'"{escaped_key}" = "{escaped_value}";')
    return "\n".join(lines) + "\n"


@pytest.fixture
def make_bundle(tmp_path: Path) -> BundleFactory:
    """Create an on-disk bundle directory.

    Usage:
        root = make_bundle(
            {"en": {"Localizable": {"hello": "Hello"}}},
            root_tables={"Shared": {"ok": "OK"}},
            plurals={"en": {"Localizable": {...stringsdict dict...}}},
            development_region="en",
        )
    """

    def factory(
        localized: dict[str, dict[str, dict[str, str]]],
        *,
        root_tables: dict[str, dict[str, str]] | None = None,
        plurals: dict[str, dict[str, dict[str, object]]] | None = None,
        development_region: str | None = None,
        name: str = "App.app",
    ) -> Path:
        root = tmp_path / name
        root.mkdir()
        for tag, tables in localized.items():
            lproj = root / f"{tag}.lproj"
            lproj.mkdir()
            for table, entries in tables.items():
                (lproj / f"{table}.strings").write_text(
                    _strings_source(entries), encoding="utf-8"
                )
        for tag, tables in (plurals or {}).items():
            lproj = root / f"{tag}.lproj"
            lproj.mkdir(exist_ok=True)
            for table, entries in tables.items():
                (lproj / f"{table}.stringsdict").write_bytes(plistlib.dumps(entries))
        for table, entries in (root_tables or {}).items():
            (root / f"{table}.strings").write_text(_strings_source(entries), encoding="utf-8")
        if development_region is not None:
            (root / "Info.plist").write_bytes(
                plistlib.dumps({"CFBundleDevelopmentRegion": development_region})
            )
        return root

    return factory
