# What it does: Reads, writes and verifies commit records in `.hunter/commits` and walks the commit chain
# How it does: A commit file is `commit <hash>` followed by a body holding the parent hash, an RFC 3339 timestamp, the message and a frozen copy of the index. The hash is the SHA-1 of the body, so a stored commit can always be re-verified. Parsing works section by section (header, message, staged listing) instead of searching for substrings
# What data structure it uses: Singly Linked List (each commit points to its parent, HEAD points to the newest) stored in a Hash Table keyed by commit hash

import logging
from dataclasses import dataclass, field

from .errors import CorruptRecord
from .index import parse_index_lines, serialize_index
from .objects import hash_content
from .repository import hunter_path, get_head_commit, COMMITS_DIR

logger = logging.getLogger(__name__)

COMMIT_PREFIX = 'commit '
PARENT_KEY = 'mestre'
DATE_KEY = 'data'
FILES_ANCHOR = 'arquivos staged (do índice):'


@dataclass
class Commit:
    hash: str
    parent: str
    timestamp: str
    message: str
    files: dict = field(default_factory=dict)

    @property
    def is_root(self):
        return not self.parent


def commit_path(repo_root, commit_hash):
    return hunter_path(repo_root, COMMITS_DIR, commit_hash)


def build_commit_body(parent, timestamp, message, files): # The hashed part of a commit record
    return (
        f"{PARENT_KEY}: {parent or ''}\n"
        f"{DATE_KEY}: {timestamp}\n"
        "\n"
        f"{message}\n"
        "\n"
        f"{FILES_ANCHOR}\n"
        f"{serialize_index(files)}"
    )


def format_commit(commit_hash, body):
    return f"{COMMIT_PREFIX}{commit_hash}\n{body}"


def split_commit_text(text, source='<commit>'): # Returns (hash, body) of a stored commit record
    header, sep, body = text.partition('\n')
    if not header.startswith(COMMIT_PREFIX) or not sep:
        raise CorruptRecord(source, "missing 'commit <hash>' header")
    return header[len(COMMIT_PREFIX):].strip(), body


def parse_commit(text, source='<commit>'):
    """
    Parses a commit record into a Commit.

    Sections: header lines up to the first blank line, then the message up
    to the last line equal to the staged-files anchor, then index-format
    entries. A record without the anchor has no files. Unknown header lines
    and malformed entries are skipped and logged.
    """
    commit_hash, body = split_commit_text(text, source)
    lines = body.split('\n')

    headers = {}
    skipped = 0
    pos = 0
    while pos < len(lines) and lines[pos] != '':
        key, sep, value = lines[pos].partition(':')
        if sep and key in (PARENT_KEY, DATE_KEY):
            headers[key] = value.strip()
        else:
            skipped += 1
        pos += 1
    pos += 1  # blank separator

    anchor = None
    for i in range(len(lines) - 1, pos - 1, -1):
        if lines[i] == FILES_ANCHOR:
            anchor = i
            break

    if anchor is None:
        message_lines = lines[pos:]
        files = {}
    else:
        message_lines = lines[pos:anchor]
        files, bad_entries = parse_index_lines('\n'.join(lines[anchor + 1:]))
        skipped += bad_entries

    while message_lines and message_lines[-1] == '':
        message_lines.pop()

    if skipped:
        logger.warning("skipped %d malformed line(s) in %s", skipped, source)

    return Commit(
        hash=commit_hash,
        parent=headers.get(PARENT_KEY, ''),
        timestamp=headers.get(DATE_KEY, ''),
        message='\n'.join(message_lines),
        files=files,
    )


def _read_commit_text(repo_root, commit_hash):
    with open(commit_path(repo_root, commit_hash), 'r', encoding='utf-8', newline='') as f:
        return f.read()


def read_commit(repo_root, commit_hash): # Loads a commit record, FileNotFoundError if it does not exist
    return parse_commit(_read_commit_text(repo_root, commit_hash), source=commit_path(repo_root, commit_hash))


def write_commit(repo_root, commit_hash, body): # Persists a commit record under its own hash
    with open(commit_path(repo_root, commit_hash), 'wb') as f:
        f.write(format_commit(commit_hash, body).encode('utf-8'))


def get_commit_files(repo_root, commit_hash): # Returns the {path: hash} snapshot of a commit, {} for "no commit"
    if not commit_hash:
        return {}
    return read_commit(repo_root, commit_hash).files


def verify_commit(repo_root, commit_hash):
    """
    Recomputes the digest of the stored body and checks it against both the
    file name and the `commit <hash>` header.
    """
    recorded_hash, body = split_commit_text(
        _read_commit_text(repo_root, commit_hash), source=commit_path(repo_root, commit_hash)
    )
    actual_hash = hash_content(body.encode('utf-8'))
    return actual_hash == commit_hash and recorded_hash == commit_hash


def iter_history(repo_root, start=None):
    """
    Yields commits from `start` (default HEAD) back to the root commit,
    following parent links.
    """
    commit_hash = start if start is not None else get_head_commit(repo_root)
    visited = set()
    while commit_hash:
        if commit_hash in visited:
            raise CorruptRecord(commit_path(repo_root, commit_hash), "parent chain loops back on itself")
        visited.add(commit_hash)
        commit = read_commit(repo_root, commit_hash)
        yield commit
        commit_hash = commit.parent

