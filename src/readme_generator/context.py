import logging
import os
import stat
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple

from readme_generator import config

logger = logging.getLogger(__name__)

CONTEXT_HEADER = "Repository Structure and Key Files:\n\n"
FILE_LIST_HEADER = "File List:\n"
KEY_FILES_HEADER = "Key File Contents:\n"
NO_KEY_FILES_NOTE = "(No key files identified or read)\n"
FILE_FOOTER = "\n---\n"


class FileListing(NamedTuple):
    paths: list[str]
    total: int  # files seen, capped at scan_limit
    complete: bool  # False when the walk gave up before counting everything

    @property
    def omitted(self) -> int:
        return self.total - len(self.paths)


class ExtractedContext(NamedTuple):
    text: str
    listing: FileListing
    key_files: list[str]


class _ContextBuffer:
    """Accumulates text without ever exceeding a fixed character budget."""

    def __init__(self, budget: int):
        self.budget = budget
        self._parts: list[str] = []
        self._used = 0

    @property
    def remaining(self) -> int:
        return self.budget - self._used

    def append(self, text: str, reserve: int = 0) -> bool:
        if self._used + len(text) + reserve > self.budget:
            return False
        self._parts.append(text)
        self._used += len(text)
        return True

    def getvalue(self) -> str:
        return "".join(self._parts)


def _sorted_entries(path: str) -> Iterator[os.DirEntry]:
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name)
    return iter(entries)


def list_files(
    root: Path,
    max_files: int,
    scan_limit: int,
    skip_dirs: set[str] = config.SKIP_DIRS,
) -> FileListing:
    # Explicit stack of directory iterators: depth-first pre-order, no recursion
    paths: list[str] = []
    total = 0
    stack = [_sorted_entries(str(root))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        if entry.is_dir(follow_symlinks=False):
            if entry.name not in skip_dirs:
                stack.append(_sorted_entries(entry.path))
            continue

        total += 1
        if len(paths) < max_files:
            paths.append(Path(entry.path).relative_to(root).as_posix())
        if total >= scan_limit:
            return FileListing(paths, total, complete=False)

    return FileListing(paths, total, complete=True)


def find_key_files(paths: list[str], key_names: Iterable[str] = config.KEY_FILES) -> list[str]:
    found = []
    for name in key_names:
        suffix = name.lower()
        match = next((p for p in paths if p.lower().endswith(suffix)), None)
        if match is not None:
            found.append(match)
    return found


def _read_key_file(root: Path, rel_path: str, max_bytes: int) -> str | None:
    path = root / rel_path
    try:
        st = path.lstat()
        if not stat.S_ISREG(st.st_mode):
            logger.info(f"Skipping {rel_path}: not a regular file")
            return None
        if st.st_size > max_bytes:
            logger.info(f"Skipping {rel_path}: {st.st_size} bytes exceeds {max_bytes}")
            return None
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning(f"Could not read file {rel_path}: {exc}")
        return None


def _omitted_line(listing: FileListing) -> str:
    if listing.complete:
        return f"- ... (and {listing.omitted} more files)\n"
    return f"- ... (and at least {listing.omitted} more files)\n"


def extract(root: Path, cfg: config.ContextConfig) -> ExtractedContext:
    buf = _ContextBuffer(cfg.context_budget)
    # Keeps room for the key-file section header and its placeholder
    reserve = len(KEY_FILES_HEADER) + len(NO_KEY_FILES_NOTE)

    listing = list_files(root, cfg.max_listed_files, cfg.scan_limit)

    buf.append(CONTEXT_HEADER, reserve)
    buf.append(FILE_LIST_HEADER, reserve)
    shown = 0
    for path in listing.paths:
        shown += buf.append(f"- {path}\n", reserve)
    if listing.omitted > 0:
        buf.append(_omitted_line(listing), reserve)
    buf.append("\n", reserve)

    buf.append(KEY_FILES_HEADER, len(NO_KEY_FILES_NOTE))
    included: list[str] = []
    for rel_path in find_key_files(listing.paths):
        if len(included) >= cfg.max_key_files:
            break

        content = _read_key_file(root, rel_path, cfg.max_file_bytes)
        if content is None:
            continue

        header = f"\n--- File: {rel_path} ---\n"
        room = buf.remaining - len(header) - len(FILE_FOOTER)
        if room <= 0:
            logger.info(f"Context budget exhausted before {rel_path}")
            break

        buf.append(header + content[:room] + FILE_FOOTER)
        included.append(rel_path)

    if not included:
        buf.append(NO_KEY_FILES_NOTE)

    text = buf.getvalue()
    logger.info(
        f"Extracted context: {len(text)} chars, {shown} of "
        f"{listing.total} files listed, {len(included)} key files read"
    )
    return ExtractedContext(text, listing, included)
