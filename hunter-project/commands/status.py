# The command: hunter status
# What it does: Provides a summary of the repository state by comparing the HEAD commit, the index (staging area), and the working directory
# How it does: It asks the status engine for a classification of every path, then prints the staged section, the unstaged section and the untracked files in that fixed order, each sorted by path
# What data structure it uses: Hash Table / Dictionary (the three states), Lists (the sorted sections of the report)

import sys

from utils import repository
from utils.status import compute_status


def run(args): # Computes the status report and prints it
    repo_root = repository.find_repo_root()
    report = compute_status(repo_root)

    for path, error in sorted(report.errors.items()):
        print(f"warning: could not read '{path}': {error}", file=sys.stderr)

    print(_head_line(repo_root))
    for line in format_report(report):
        print(line)


def _head_line(repo_root):
    head_commit = repository.get_head_commit(repo_root)
    if head_commit:
        return f"HEAD at {head_commit[:7]}"
    return "No commits yet"


def format_report(report): # Returns the status report as a list of output lines
    lines = []

    if report.has_staged():
        lines.append("")
        lines.append("Changes to be committed:")
        lines.extend(_section_lines([
            ('new file', report.staged_new),
            ('modified', report.staged_modified),
            ('deleted', report.staged_deleted),
        ]))
    else:
        lines.append("")
        lines.append("No changes added to the staging area")

    if report.has_unstaged():
        lines.append("")
        lines.append("Changes not staged for commit:")
        lines.append("  (use \"hunter add <file>...\" to update what will be committed)")
        lines.extend(_section_lines([
            ('modified', report.unstaged_modified),
            ('deleted', report.unstaged_deleted),
        ]))

    if report.untracked:
        lines.append("")
        lines.append("Untracked files:")
        lines.append("  (use \"hunter add <file>...\" to include in what will be committed)")
        for path in report.untracked:
            lines.append(f"\t{path}")

    if report.is_clean():
        lines.append("")
        lines.append("nothing to commit, working tree clean")

    return lines


def _section_lines(changes):
    lines = []
    for change_type, paths in changes:
        for path in paths:
            lines.append(f"\t{change_type + ':':<12}{path}")
    return lines
