# What it does: Locates the repository root, lays out the `.hunter` metadata directory and manages the HEAD pointer
# How it does: `find_repo_root` walks up the directory tree until it finds a `.hunter` directory. Every other function takes that root explicitly, so no module keeps the repository location in global state
# What data structure it uses: Uses recursion (linear recursion up the parent chain) to find the repo root. HEAD is a single pointer into the commit chain, which is a singly linked list keyed by hash

import logging
import os
import tempfile

from .errors import RepositoryNotFound, PathOutsideRepository, HunterError

logger = logging.getLogger(__name__)

HUNTER_DIR = '.hunter'
OBJECTS_DIR = 'objects'
COMMITS_DIR = 'commits'
INDEX_FILE = 'index'
HEAD_FILE = 'HEAD'


def hunter_path(repo_root, *parts): # Returns a path inside the .hunter directory of the given repository
    return os.path.join(repo_root, HUNTER_DIR, *parts)


def _search_upward(path): # Recursively searches for the .hunter directory, None when the filesystem root is reached
    hunter_dir = os.path.join(path, HUNTER_DIR)
    if os.path.isdir(hunter_dir):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return _search_upward(parent_path)


def find_repo_root(path='.'):
    """
    Returns the absolute path of the directory holding `.hunter`, searching
    from `path` upwards. Raises RepositoryNotFound when there is none.
    """
    start = os.path.abspath(path)
    root = _search_upward(start)
    if root is None:
        raise RepositoryNotFound(start)
    return root


def init_repository(path='.'):
    """
    Creates the metadata layout (objects, commits, empty index) under `path`.
    Existing directories and an existing index are left untouched.
    Returns (hunter_dir, reinitialized).
    """
    repo_root = os.path.abspath(path)
    hunter_dir = hunter_path(repo_root)
    reinitialized = os.path.isdir(hunter_dir)

    os.makedirs(hunter_path(repo_root, OBJECTS_DIR), exist_ok=True)
    os.makedirs(hunter_path(repo_root, COMMITS_DIR), exist_ok=True)

    index_path = hunter_path(repo_root, INDEX_FILE)
    if not os.path.exists(index_path):
        open(index_path, 'w').close()

    return hunter_dir, reinitialized


def write_file_atomic(path, data): # Replaces `path` with `data` (bytes) through a temporary sibling file and os.replace
    directory = os.path.dirname(path)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.tmp-')
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def get_head_commit(repo_root): # Retrieves the commit hash HEAD points to, or None if there are no commits yet
    head_path = hunter_path(repo_root, HEAD_FILE)
    if not os.path.exists(head_path):
        return None
    with open(head_path, 'r') as f:
        head_content = f.read().strip()
    return head_content or None


def update_head(repo_root, commit_hash): # Points HEAD at `commit_hash`
    write_file_atomic(hunter_path(repo_root, HEAD_FILE), commit_hash.encode())
    logger.debug("HEAD -> %s", commit_hash)


def to_repo_path(repo_root, file_path):
    """
    Resolves `file_path` (relative to the cwd, possibly through symlinks) and
    returns it relative to the repository root with '/' as separator.
    Raises PathOutsideRepository when it escapes the root.
    """
    real_root = os.path.realpath(repo_root)
    real_path = os.path.realpath(os.path.abspath(file_path))

    try:
        rel_path = os.path.relpath(real_path, real_root)
    except ValueError:
        # Different drives on Windows
        raise PathOutsideRepository(file_path, repo_root)

    if rel_path == os.pardir or rel_path.startswith(os.pardir + os.sep) or os.path.isabs(rel_path):
        raise PathOutsideRepository(file_path, repo_root)

    rel_path = rel_path.replace(os.sep, '/')
    if '\n' in rel_path or '\r' in rel_path:
        raise HunterError(f"{file_path!r} contains a line break, which the index cannot record")
    if rel_path.split('/')[0] == HUNTER_DIR:
        raise HunterError(f"'{file_path}' is inside the repository metadata directory")
    return rel_path


def working_path(repo_root, rel_path): # Converts a stored '/'-separated path back to an absolute filesystem path
    return os.path.join(repo_root, *rel_path.split('/'))
