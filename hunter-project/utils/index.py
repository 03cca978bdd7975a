# What it does: Provides centralized read/write operations for the .hunter/index file (the staging area)
# How it does: The index is one `<hash>\t<path>` line per staged file, sorted by path, so identical staging states always serialize to identical bytes. Every write replaces the whole file atomically
# What data structure it uses: Dictionary (mapping repo-relative paths to blob hashes, one hash per path, last write wins)

import logging
import os

from .repository import hunter_path, write_file_atomic, INDEX_FILE

logger = logging.getLogger(__name__)


def index_path(repo_root):
    return hunter_path(repo_root, INDEX_FILE)


def parse_index_lines(text):
    """
    Parses index-format text into {path: hash}.
    Lines that are not `<hash>\\t<path>` are skipped, not fatal.
    Returns (entries, skipped_count).
    """
    entries = {}
    skipped = 0
    for line in text.split('\n'):
        if not line:
            continue
        parts = line.split('\t', 1)
        if len(parts) != 2 or not parts[0] or not parts[1]:
            skipped += 1
            continue
        hash_val, path = parts
        entries[path] = hash_val
    return entries, skipped


def serialize_index(entries): # Canonical text form: sorted by path, TAB separated, trailing newline
    return ''.join(f"{entries[path]}\t{path}\n" for path in sorted(entries))


def read_index(repo_root):
    """
    Reads the index file and returns a dictionary {path: hash}.
    A missing index is an empty index.
    """
    path = index_path(repo_root)
    if not os.path.exists(path):
        return {}
    with open(path, 'r', encoding='utf-8', newline='') as f:
        text = f.read()

    entries, skipped = parse_index_lines(text)
    if skipped:
        logger.warning("skipped %d malformed line(s) in %s", skipped, path)
    return entries


def write_index(repo_root, entries):
    write_file_atomic(index_path(repo_root), serialize_index(entries).encode('utf-8'))


def update_index_entry(repo_root, path, hash_val): # Inserts or overwrites one entry and rewrites the index
    index = read_index(repo_root)
    index[path] = hash_val
    write_index(repo_root, index)


def remove_index_entry(repo_root, path):
    index = read_index(repo_root)
    if path in index:
        del index[path]
        write_index(repo_root, index)


def clear_index(repo_root): # Empties the index, the file itself is kept
    write_file_atomic(index_path(repo_root), b'')
