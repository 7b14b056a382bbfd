#!/usr/bin/env python3
"""Publishing helper for sirocco-wc releases.

Bumps the version declared in pyproject.toml (and the package ``__version__``),
commits, tags ``vX.Y.Z``, pushes branch and tags, and creates a GitHub release
through the ``gh`` CLI when it is installed. PyPI publication itself is left to
the release workflow triggered by the tag.

Pre-flight checks refuse to run with uncommitted changes and warn when the
current branch is not ``main``.
"""

from __future__ import annotations

import argparse
import re
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import tomllib

from packaging.version import InvalidVersion, Version

BUMP_CHOICES = ("patch", "minor", "major")
RELEASE_BRANCH = "main"
RELEASES_URL = "https://github.com/scherler/sirocco-wc/releases/new"
PACKAGE_INIT = Path("src/sirocco_wc/__init__.py")

PROJECT_VERSION_RE = re.compile(r'^(version\s*=\s*")([^"]+)(")', re.MULTILINE)
DUNDER_VERSION_RE = re.compile(r'^(__version__\s*=\s*")([^"]+)(")', re.MULTILINE)

InputFn = Callable[[str], str]


class PublishError(Exception):
    """Base exception for publishing failures."""


@dataclass
class ReleasePlan:
    current: str
    new: str
    bump: str
    branch: str

    @property
    def tag(self) -> str:
        return f"v{self.new}"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Bump, tag and publish a sirocco-wc release")
    parser.add_argument(
        "--bump",
        choices=(*BUMP_CHOICES, "cancel"),
        help="Version component to bump. Prompts when omitted.",
    )
    parser.add_argument("--notes", help="Release notes. Prompts when omitted.")
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt.")
    parser.add_argument(
        "--pyproject",
        default="pyproject.toml",
        help="Path to pyproject.toml (default: %(default)s)",
    )
    return parser.parse_args(argv)


def git(*args: str, cwd: Optional[Path] = None) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        check=False,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )
    if result.returncode != 0:
        raise PublishError(f"git {' '.join(args)} failed: {result.stderr.strip() or result.stdout.strip()}")
    return result.stdout.strip()


def load_project_version(path: Path) -> str:
    if not path.exists():
        raise PublishError(f"pyproject.toml not found at {path}; run from the repository root.")
    with path.open("rb") as fp:
        data = tomllib.load(fp)
    try:
        version = data["project"]["version"]
    except KeyError as exc:
        raise PublishError("Unable to locate [project].version in pyproject.toml.") from exc
    parse_plain_version(version)
    return version


def parse_plain_version(value: str) -> Version:
    """Accept only ``X.Y.Z`` release versions."""
    try:
        parsed = Version(value)
    except InvalidVersion as exc:
        raise PublishError(f"Value '{value}' is not a valid release version.") from exc
    segments = (parsed.pre, parsed.post, parsed.dev, parsed.local)
    if len(parsed.release) != 3 or any(segment is not None for segment in segments):
        raise PublishError(f"Version '{value}' must be a plain X.Y.Z release.")
    return parsed


def calculate_new_version(current: str, bump: str) -> str:
    major, minor, patch = parse_plain_version(current).release
    if bump == "major":
        return f"{major + 1}.0.0"
    if bump == "minor":
        return f"{major}.{minor + 1}.0"
    if bump == "patch":
        return f"{major}.{minor}.{patch + 1}"
    raise PublishError(f"Invalid version type: {bump}")


def replace_version(text: str, pattern: re.Pattern[str], new_version: str) -> str:
    updated, count = pattern.subn(rf"\g<1>{new_version}\g<3>", text, count=1)
    if count == 0:
        raise PublishError("No version declaration found to update.")
    return updated


def write_version(pyproject_path: Path, new_version: str) -> List[Path]:
    touched = [pyproject_path]
    pyproject_path.write_text(
        replace_version(pyproject_path.read_text(encoding="utf-8"), PROJECT_VERSION_RE, new_version),
        encoding="utf-8",
    )
    package_init = pyproject_path.parent / PACKAGE_INIT
    if package_init.exists():
        package_init.write_text(
            replace_version(package_init.read_text(encoding="utf-8"), DUNDER_VERSION_RE, new_version),
            encoding="utf-8",
        )
        touched.append(package_init)
    return touched


def check_clean_tree(repo_root: Path) -> None:
    status = git("status", "--porcelain", cwd=repo_root)
    if status:
        print("Warning: You have uncommitted changes:")
        print(status)
        raise PublishError("Please commit or stash your changes before publishing.")


def current_branch(repo_root: Path) -> str:
    branch = git("rev-parse", "--abbrev-ref", "HEAD", cwd=repo_root)
    if branch != RELEASE_BRANCH:
        print(f"Warning: You are on branch '{branch}', not '{RELEASE_BRANCH}'")
    return branch


def prompt_bump(current: str, ask: InputFn = input) -> str:
    print(f"Current version: {current}")
    print("\nVersion bump options:")
    print(f"  patch: {calculate_new_version(current, 'patch')} (bug fixes)")
    print(f"  minor: {calculate_new_version(current, 'minor')} (new features, backward compatible)")
    print(f"  major: {calculate_new_version(current, 'major')} (breaking changes)")
    print("  cancel: Exit without publishing")
    while True:
        answer = ask("Select version type [patch]: ").strip().lower() or "patch"
        if answer in (*BUMP_CHOICES, "cancel"):
            return answer
        print("Must be patch, minor, major, or cancel")


def confirm(plan: ReleasePlan, ask: InputFn = input) -> bool:
    answer = ask(f"Proceed with {plan.bump} release ({plan.current} -> {plan.new})? (yes/no) [no]: ")
    return answer.strip().lower() in {"y", "yes"}


def prompt_notes(ask: InputFn = input) -> str:
    while True:
        notes = ask("Release notes: ").strip()
        if notes:
            return notes
        print("Release notes are required")


def create_github_release(plan: ReleasePlan, notes: str, repo_root: Path) -> bool:
    manual = f"{RELEASES_URL}?tag={plan.tag}"
    if shutil.which("gh") is None:
        print("\nGitHub CLI (gh) not installed")
        print(f"Please create the GitHub release manually: {manual}")
        return False

    result = subprocess.run(
        ["gh", "release", "create", plan.tag, "--title", f"Release {plan.new}", "--notes", notes],
        cwd=repo_root,
        check=False,
        text=True,
    )
    if result.returncode != 0:
        print("\nCould not create GitHub release automatically")
        print(f"Please create it manually: {manual}")
        return False
    print("\nGitHub release created; the release workflow publishes to PyPI.")
    return True


def publish(args: argparse.Namespace, ask: InputFn = input) -> int:
    pyproject_path = Path(args.pyproject).resolve()
    repo_root = pyproject_path.parent

    check_clean_tree(repo_root)
    branch = current_branch(repo_root)
    current = load_project_version(pyproject_path)

    bump = args.bump or prompt_bump(current, ask)
    if bump == "cancel":
        print("Publishing cancelled")
        return 0

    plan = ReleasePlan(current=current, new=calculate_new_version(current, bump), bump=bump, branch=branch)
    print(f"\nPreparing to publish version {plan.new}")
    if not args.yes and not confirm(plan, ask):
        print("Publishing cancelled")
        return 0

    notes = args.notes or prompt_notes(ask)

    touched = write_version(pyproject_path, plan.new)
    git("add", *(str(path) for path in touched), cwd=repo_root)
    git("commit", "-m", f"Bump version to {plan.new}", cwd=repo_root)
    git("tag", "-a", plan.tag, "-m", f"Release {plan.new}", cwd=repo_root)
    git("push", "origin", plan.branch, cwd=repo_root)
    git("push", "origin", "--tags", cwd=repo_root)
    print(f"\nVersion {plan.new} committed and pushed with tag {plan.tag}")

    create_github_release(plan, notes, repo_root)
    print("Publishing process completed!")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return publish(args)
    except PublishError as exc:
        print(f"ERROR: Publishing failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
