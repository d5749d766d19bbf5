#!/usr/bin/env python3
"""
Bump version script for withcell.

The version lives in two places that must agree:
- pyproject.toml (``version = "x.y.z"``)
- withcell/__init__.py (``__version__ = "x.y.z"``)

Usage:
    python scripts/bump_version.py <new_version>
    python scripts/bump_version.py <new_version> --dry-run

Example:
    python scripts/bump_version.py 0.2.0
"""

import argparse
import re
import sys
from pathlib import Path

VERSION_FILES = [
    (Path("pyproject.toml"), r'^version\s*=\s*"(.*?)"$', 'version = "{}"'),
    (Path("withcell/__init__.py"), r'^__version__\s*=\s*"(.*?)"$', '__version__ = "{}"'),
]


def current_version(path: Path, pattern: str) -> str:
    """Return the version string currently recorded in ``path``."""
    match = re.search(pattern, path.read_text(), re.MULTILINE)
    if match is None:
        raise ValueError(f"Could not find version pattern in {path}")
    return match.group(1)


def rewrite_version(path: Path, pattern: str, template: str, new_version: str) -> str:
    """Return the contents of ``path`` with its version set to ``new_version``."""
    content = path.read_text()
    updated, count = re.subn(
        pattern, template.format(new_version), content, count=1, flags=re.MULTILINE
    )
    if count == 0:
        raise ValueError(f"Could not find version pattern in {path}")
    return updated


def validate_version_format(version: str) -> bool:
    """Validate version string format (x.y.z)"""
    return bool(re.match(r"^\d+\.\d+\.\d+$", version))


def main():
    parser = argparse.ArgumentParser(description="Bump version in withcell project")
    parser.add_argument("version", help="New version number (format: x.y.z)")
    parser.add_argument(
        "--dry-run", action="store_true", help="Show what would change without writing"
    )
    args = parser.parse_args()

    if not validate_version_format(args.version):
        print(f"Error: Invalid version format '{args.version}'. Expected format: x.y.z")
        sys.exit(1)

    # Render every file first so a failure leaves nothing half-updated
    try:
        pending = []
        for path, pattern, template in VERSION_FILES:
            old = current_version(path, pattern)
            pending.append(
                (path, old, rewrite_version(path, pattern, template, args.version))
            )
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    for path, old, content in pending:
        if args.dry_run:
            print(f"Would update {path}: {old} -> {args.version}")
        else:
            path.write_text(content)
            print(f"Updated {path}: {old} -> {args.version}")

    if not args.dry_run:
        print(f"\nVersion successfully bumped to {args.version}")


if __name__ == "__main__":
    main()
