"""
Catalog loader - Fetch and parse the static course list.

Provides:
- Loading the catalog from a local JSON file or an http(s) URL
- A single error type for every way the load can fail
- Integrity checks over the prerequisite graph
"""

import json
import logging
from pathlib import Path

import requests
from pydantic import ValidationError

from correlativas.schemas import Catalog


logger = logging.getLogger(__name__)


class CatalogLoadError(RuntimeError):
    """The catalog could not be loaded; the session cannot start."""


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_text(source: str, timeout: float = 30.0) -> str:
    """
    Read the raw catalog document.

    Args:
        source: Filesystem path or http(s) URL
        timeout: HTTP timeout in seconds

    Raises:
        CatalogLoadError: On network errors, non-success status or missing file
    """
    if is_url(source):
        try:
            # always read the latest published catalog
            response = requests.get(source, timeout=timeout, headers={"Cache-Control": "no-cache"})
        except requests.RequestException as e:
            raise CatalogLoadError(f"Network error fetching {source}: {e}") from e
        if not response.ok:
            raise CatalogLoadError(f"HTTP {response.status_code}")
        return response.text

    path = Path(source)
    if not path.exists():
        raise CatalogLoadError(f"Catalog file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(f"Could not read {path}: {e}") from e


def parse_catalog(text: str) -> Catalog:
    """
    Parse a catalog document into a sorted Catalog.

    Raises:
        CatalogLoadError: On malformed JSON or a missing/invalid field
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Malformed JSON: {e}") from e

    if not isinstance(data, dict):
        raise CatalogLoadError(f"Catalog must be a JSON object, got {type(data).__name__}")

    try:
        return Catalog.model_validate(data)
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid catalog: {e}") from e


def load_catalog(source: str | Path, timeout: float = 30.0) -> Catalog:
    """
    Load the course catalog.

    Args:
        source: Filesystem path or http(s) URL of the catalog document
        timeout: HTTP timeout in seconds

    Returns:
        Catalog with courses sorted ascending by id

    Raises:
        CatalogLoadError: On any failure; no partial catalog is returned
    """
    source = str(source)
    try:
        catalog = parse_catalog(fetch_text(source, timeout=timeout))
    except CatalogLoadError as e:
        logger.error(f"Error loading catalog from {source}: {e}")
        raise
    logger.info(f"Loaded {len(catalog)} courses from {source}")
    return catalog


# -----------------------------------------------------------------------------
# Integrity checks
# -----------------------------------------------------------------------------

def find_cycles(catalog: Catalog) -> list[list[int]]:
    """
    Find prerequisite cycles (over both prerequisite lists).

    Returns:
        List of cycles, each as the list of course ids along the cycle
    """
    known = set(catalog.ids())
    graph = {
        course.id: sorted({
            pid for pid in course.requires_taken + course.requires_passed
            if pid in known and pid != course.id
        })
        for course in catalog.courses
    }

    cycles = []
    state: dict[int, int] = {}  # 1 = on stack, 2 = done
    stack: list[int] = []

    def visit(node: int):
        state[node] = 1
        stack.append(node)
        for nxt in graph[node]:
            if state.get(nxt) == 1:
                cycles.append(stack[stack.index(nxt):] + [nxt])
            elif nxt not in state:
                visit(nxt)
        stack.pop()
        state[node] = 2

    for course_id in graph:
        if course_id not in state:
            visit(course_id)

    return cycles


def find_catalog_issues(catalog: Catalog) -> list[str]:
    """
    Check the catalog for prerequisite problems.

    Reports unknown prerequisite ids, self-references and cycles. None of
    these stop the app from running; affected courses just stay locked.
    """
    issues = []
    known = set(catalog.ids())

    for course in catalog.courses:
        for label, ids in (
            ("requiresTaken", course.requires_taken),
            ("requiresPassed", course.requires_passed),
        ):
            for pid in ids:
                if pid == course.id:
                    issues.append(f"Course {course.id} lists itself in {label}")
                elif pid not in known:
                    issues.append(f"Course {course.id} {label} references unknown course {pid}")

    for cycle in find_cycles(catalog):
        issues.append("Prerequisite cycle: " + " -> ".join(str(c) for c in cycle))

    return issues
