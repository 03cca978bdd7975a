# The command: hunter init
# What it does: Initializes a new, empty repository by creating the hidden `.hunter` directory and its internal structure
# How it does: It creates the `objects` and `commits` subdirectories and an empty `index` file in the current directory. Running it again in an existing repository changes nothing that is already there
# What data structure it uses: Tree (the file system directory structure is a tree). It also lays the foundation for a Hash Table (the object database) and a Linked List (the commit history)

import os

from utils import repository


def run(args):
    hunter_dir, reinitialized = repository.init_repository(os.getcwd())
    if reinitialized:
        print(f"Reinitialized existing Hunter repository in {hunter_dir}/")
    else:
        print(f"Initialized empty Hunter repository in {hunter_dir}/")
