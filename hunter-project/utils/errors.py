# What it does: Defines the error kinds raised by the core (locator, object store, index, commit log)
# How it does: A small exception hierarchy rooted at HunterError. Filesystem failures are not wrapped, they propagate as the built-in OSError
# What data structure it uses: Class hierarchy (inheritance tree), so the CLI can catch every core failure with a single `except HunterError`


class HunterError(Exception):
    """Base class for every failure reported by the Hunter core."""


class RepositoryNotFound(HunterError):
    def __init__(self, start_dir):
        super().__init__(f"not a hunter repository (or any of the parent directories): {start_dir}")
        self.start_dir = start_dir


class PathOutsideRepository(HunterError):
    def __init__(self, path, repo_root):
        super().__init__(f"'{path}' is outside repository at '{repo_root}'")
        self.path = path
        self.repo_root = repo_root


class EmptyStagingArea(HunterError):
    def __init__(self):
        super().__init__("nothing to commit, the staging area is empty (use \"hunter add <file>\" first)")


class EmptyCommitMessage(HunterError):
    def __init__(self):
        super().__init__("aborting commit due to empty commit message")


class CorruptRecord(HunterError):
    def __init__(self, path, reason):
        super().__init__(f"corrupt record {path}: {reason}")
        self.path = path
        self.reason = reason
