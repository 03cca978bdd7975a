# What it does: Computes the three-way status between the HEAD commit, the index and the working directory
# How it does: It gathers three {path: hash} dictionaries and classifies every path in their union on two axes: staged (index vs. HEAD) and unstaged (working directory vs. index). Tracked paths (in the index or HEAD) are looked up on disk directly and hashed with a single read; the directory walk only discovers untracked files, which are never read
# What data structure it uses: Hash Table / Dictionary (the three states, O(1) lookups), Set (the union of all paths), sorted Lists (the report)

import logging
import os
from dataclasses import dataclass, field

from . import commits, index as index_utils, objects
from .repository import get_head_commit, working_path

logger = logging.getLogger(__name__)


@dataclass
class StatusReport:
    staged_new: list = field(default_factory=list)
    staged_modified: list = field(default_factory=list)
    staged_deleted: list = field(default_factory=list)
    unstaged_modified: list = field(default_factory=list)
    unstaged_deleted: list = field(default_factory=list)
    untracked: list = field(default_factory=list)
    errors: dict = field(default_factory=dict)

    def has_staged(self):
        return bool(self.staged_new or self.staged_modified or self.staged_deleted)

    def has_unstaged(self):
        return bool(self.unstaged_modified or self.unstaged_deleted)

    def is_clean(self):
        return not (self.has_staged() or self.has_unstaged() or self.untracked)


def list_working_files(repo_root):
    """
    Walks the working directory and returns the set of repo-relative,
    '/'-separated paths of all files. Dot-prefixed directories (the
    `.hunter` metadata among them) are not entered.
    """
    paths = set()
    for root, dirs, files in os.walk(repo_root):
        dirs[:] = [d for d in dirs if not d.startswith('.')]
        for name in files:
            file_path = os.path.join(root, name)
            if not os.path.isfile(file_path):
                continue
            rel_path = os.path.relpath(file_path, repo_root)
            paths.add(rel_path.replace(os.sep, '/'))
    return paths


def classify(head_files, index_files, working_files):
    """
    Pure classification over three {path: hash} mappings.

    `working_files` holds every path present on disk; its value is None when
    the content was not hashed or could not be read, which counts as a
    mismatch.

    The index is emptied by every commit, so a path recorded in HEAD but
    absent from the index whose working copy still matches the HEAD hash is
    clean. Otherwise such a path is staged-deleted, and untracked as well
    when a different working copy exists.
    """
    report = StatusReport()
    all_paths = set(head_files) | set(index_files) | set(working_files)

    for path in sorted(all_paths):
        in_head = path in head_files
        in_index = path in index_files
        in_workdir = path in working_files

        if in_index:
            # Staged axis: index vs. HEAD
            if not in_head:
                report.staged_new.append(path)
            elif head_files[path] != index_files[path]:
                report.staged_modified.append(path)

            # Working-tree axis: working directory vs. index
            if not in_workdir:
                report.unstaged_deleted.append(path)
            elif working_files[path] != index_files[path]:
                report.unstaged_modified.append(path)
        elif in_head:
            if in_workdir and working_files[path] == head_files[path]:
                continue
            report.staged_deleted.append(path)
            if in_workdir:
                report.untracked.append(path)
        else:
            report.untracked.append(path)

    return report


def compute_status(repo_root): # Reads HEAD, the index and the working directory and classifies every path
    head_files = commits.get_commit_files(repo_root, get_head_commit(repo_root))
    index_files = index_utils.read_index(repo_root)

    working_files = {}
    errors = {}

    # Tracked paths are looked up directly, they may live in directories the walk skips
    for path in set(index_files) | set(head_files):
        file_path = working_path(repo_root, path)
        if not os.path.isfile(file_path):
            continue
        try:
            working_files[path] = objects.hash_file(file_path)
        except OSError as e:
            logger.debug("could not hash %s: %s", path, e)
            errors[path] = str(e)
            working_files[path] = None

    for path in list_working_files(repo_root):
        if path not in working_files:
            working_files[path] = None

    report = classify(head_files, index_files, working_files)
    report.errors = errors
    return report
