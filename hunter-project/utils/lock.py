# What it does: Serializes repository mutations (`add`, `commit`) across processes
# How it does: Holds an exclusive fcntl.flock on `.hunter/lock` for the duration of a `with repo_lock(...)` block. The lock is advisory, readers such as `status` never take it
# What data structure it uses: None beyond a file descriptor, the kernel keeps the lock queue

import fcntl
import logging
from contextlib import contextmanager

from .repository import hunter_path
from . import config

logger = logging.getLogger(__name__)

LOCK_FILE = 'lock'


@contextmanager
def repo_lock(repo_root):
    """
    Blocks until the repository lock is free, then holds it until the block
    exits. Does nothing when `core.lock` is set to false.
    """
    if not config.get_bool(repo_root, 'core.lock', fallback=True):
        yield
        return

    lock_path = hunter_path(repo_root, LOCK_FILE)
    with open(lock_path, 'a') as lock_f:
        fcntl.flock(lock_f.fileno(), fcntl.LOCK_EX)
        logger.debug("acquired lock %s", lock_path)
        try:
            yield
        finally:
            fcntl.flock(lock_f.fileno(), fcntl.LOCK_UN)
            logger.debug("released lock %s", lock_path)
