# The command: hunter add <file>
# What it does: Takes a snapshot of a file from the working directory and stages it for the next commit by updating the index
# How it does: It resolves the path against the repository root (refusing anything outside it), stores the file content as a blob, then rewrites the index with the new (path, hash) entry. The whole update runs under the repository lock
# What data structure it uses: Hash Table / Dictionary (the index in memory and the content-addressed object store)

import logging

from utils import repository, objects, index as index_utils
from utils.lock import repo_lock

logger = logging.getLogger(__name__)


def run(args):
    repo_root = repository.find_repo_root()
    for file_path in args.files:
        rel_path, _ = stage_file(repo_root, file_path)
        print(f"Added '{rel_path}' to the index.")


def stage_file(repo_root, file_path):
    """
    Stores `file_path` as a blob and records it in the index.
    Returns (rel_path, hash). The index is untouched if anything fails.
    """
    rel_path = repository.to_repo_path(repo_root, file_path)

    with repo_lock(repo_root):
        hash_val = objects.store_file(repo_root, repository.working_path(repo_root, rel_path))
        index_utils.update_index_entry(repo_root, rel_path, hash_val)

    logger.debug("staged %s as %s", rel_path, hash_val)
    return rel_path, hash_val
