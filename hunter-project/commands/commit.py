# The command: hunter commit -m "<message>"
# What it does: Creates a permanent, uniquely identified snapshot (a commit record) of the currently staged changes
# How it does: It reads the index, takes HEAD as the parent and the current time as the timestamp, and hashes that body into the commit's name. The record is written, HEAD is advanced, and only then is the index cleared. A failure at any step leaves the index staged, so the commit can simply be retried
# What data structure it uses: Linked List (each commit points to its parent), Hash Table / Dictionary (the frozen copy of the index)

import logging
from datetime import datetime

from utils import repository, commits, objects, index as index_utils
from utils.errors import EmptyCommitMessage, EmptyStagingArea
from utils.lock import repo_lock

logger = logging.getLogger(__name__)


def run(args):
    repo_root = repository.find_repo_root()
    commit = create_commit(repo_root, args.message)

    label = 'root-commit ' if commit.is_root else ''
    print(f"[{label}{commit.hash[:7]}] {commit.message.splitlines()[0]}")
    print(f" {len(commit.files)} file(s) committed")


def create_commit(repo_root, message): # Freezes the index into a commit record, advances HEAD and clears the index
    if not message or not message.strip():
        raise EmptyCommitMessage()

    # Nothing staged: fail before the lock file is touched
    if not index_utils.read_index(repo_root):
        raise EmptyStagingArea()

    with repo_lock(repo_root):
        staged = index_utils.read_index(repo_root)
        if not staged:
            raise EmptyStagingArea()

        parent = repository.get_head_commit(repo_root) or ''
        timestamp = datetime.now().astimezone().isoformat(timespec='seconds')

        body = commits.build_commit_body(parent, timestamp, message, staged)
        commit_hash = objects.hash_content(body.encode('utf-8'))

        commits.write_commit(repo_root, commit_hash, body)
        repository.update_head(repo_root, commit_hash)
        index_utils.clear_index(repo_root)

    logger.debug("created commit %s (parent %s)", commit_hash, parent or '-')
    return commits.Commit(
        hash=commit_hash,
        parent=parent,
        timestamp=timestamp,
        message=message,
        files=dict(staged),
    )
