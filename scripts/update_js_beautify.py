#!/usr/bin/env python3
"""Script to download the js-beautify bundles into the package assets.

This script asks cdnjs for the latest js-beautify release, downloads the
three minified bundles and the upstream license, and writes them to
src/jsbeautify/assets/ together with a VERSION file.

Usage:
    python scripts/update_js_beautify.py --check              # Report whether assets are current
    python scripts/update_js_beautify.py --update             # Download and replace the assets
    python scripts/update_js_beautify.py --update --version 1.15.1
    python scripts/update_js_beautify.py --dry-run            # Show what would change
"""

import argparse
import subprocess
import sys
from pathlib import Path

import httpx

assets_path = Path(__file__).parent.parent / "src" / "jsbeautify" / "assets"

CDNJS_API_URL = "https://api.cdnjs.com/libraries/js-beautify?fields=version"
CDNJS_FILE_URL = "https://cdnjs.cloudflare.com/ajax/libs/js-beautify/{version}/{name}"
LICENSE_URL = "https://raw.githubusercontent.com/beautifier/js-beautify/v{version}/LICENSE"

BUNDLES = ("beautify.min.js", "beautify-css.min.js", "beautify-html.min.js")
LICENSE_NAME = "JSBeautify-LICENSE"
VERSION_NAME = "VERSION"


def get_latest_version(client: httpx.Client) -> str:
    """Get the latest js-beautify version published on cdnjs.

    Returns
    -------
    str
        Version string such as ``"1.15.1"``

    """
    response = client.get(CDNJS_API_URL)
    response.raise_for_status()
    version = response.json().get("version")
    if not version:
        raise ValueError("cdnjs response did not include a version")
    return str(version)


def get_installed_version() -> str | None:
    """Read the version recorded next to the current assets, if any."""
    version_file = assets_path / VERSION_NAME
    if not version_file.is_file():
        return None
    return version_file.read_text(encoding="utf-8").strip() or None


def download_assets(client: httpx.Client, version: str) -> dict[str, bytes]:
    """Download every asset for ``version``.

    Returns
    -------
    dict[str, bytes]
        File name to file content, including the license and VERSION file

    """
    files: dict[str, bytes] = {}
    for name in BUNDLES:
        url = CDNJS_FILE_URL.format(version=version, name=name)
        print(f"Downloading {url}")
        response = client.get(url)
        response.raise_for_status()
        files[name] = response.content

    license_url = LICENSE_URL.format(version=version)
    print(f"Downloading {license_url}")
    response = client.get(license_url)
    response.raise_for_status()
    files[LICENSE_NAME] = response.content

    files[VERSION_NAME] = f"{version}\n".encode("utf-8")
    return files


def changed_files(files: dict[str, bytes]) -> list[str]:
    """Return the names of downloaded files that differ from the current assets."""
    changed = []
    for name, content in files.items():
        target = assets_path / name
        if not target.is_file() or target.read_bytes() != content:
            changed.append(name)
    return changed


def write_assets(files: dict[str, bytes]) -> None:
    assets_path.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        (assets_path / name).write_bytes(content)


def main() -> int:
    """Execute the main entry point.

    Returns
    -------
    int
        Exit code (0 for success, 1 for failure or outdated assets with --check)

    """
    parser = argparse.ArgumentParser(description="Download js-beautify bundles into src/jsbeautify/assets")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--check", action="store_true", help="Check whether the assets match the latest release")
    group.add_argument("--update", action="store_true", help="Download the release and replace the assets")
    group.add_argument("--dry-run", action="store_true", help="Show what would change without modifying files")
    parser.add_argument("--version", help="Release to fetch instead of the latest one")
    parser.add_argument("--stage", action="store_true", help="Stage the changed assets in git")
    parser.add_argument("--timeout", type=float, default=30.0, help="HTTP timeout in seconds")

    args = parser.parse_args()

    try:
        with httpx.Client(timeout=args.timeout, follow_redirects=True) as client:
            version = args.version or get_latest_version(client)
            installed = get_installed_version()
            print(f"Latest version: {version}")
            print(f"Installed version: {installed or 'none'}")

            if args.check:
                if installed == version:
                    print("SUCCESS: js-beautify assets are up to date")
                    return 0
                print("Assets are out of date. Run: python scripts/update_js_beautify.py --update")
                return 1

            files = download_assets(client, version)
    except (httpx.HTTPError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    changed = changed_files(files)
    if not changed:
        print("No changes needed - assets are already up to date")
        return 0

    if args.dry_run:
        print("STATUS: The following files would change:")
        for name in changed:
            print(f"  - {name}")
        return 0

    write_assets(files)
    print(f"SUCCESS: Updated js-beautify assets to {version}")
    for name in changed:
        print(f"  - {name}")

    if args.stage:
        subprocess.run(["git", "add", str(assets_path)], check=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())
