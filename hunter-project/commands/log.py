# The command: hunter log
# What it does: Displays the commit history by starting at the current HEAD and walking backward through the parent links
# How it does: It iterates the commit chain through `commits.iter_history`, printing each record and re-verifying its hash so a tampered or damaged record is flagged
# What data structure it uses: It performs a linear traversal of the Linked List formed by the parent links

from utils import repository, commits


def run(args):
    repo_root = repository.find_repo_root()

    if not repository.get_head_commit(repo_root): # Check if there are any commits
        print("No commits yet")
        return

    for commit in commits.iter_history(repo_root):
        marker = '' if commits.verify_commit(repo_root, commit.hash) else '  (hash mismatch!)'
        print(f"commit {commit.hash}{marker}")
        print(f"Date:   {commit.timestamp}")
        print(f"Files:  {len(commit.files)}")
        print()
        for line in commit.message.splitlines():
            print(f"    {line}")
        print()
