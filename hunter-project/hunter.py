import argparse
import logging
import sys

from commands import init, add, commit, status, log, config
from utils import repository, config as config_utils
from utils.errors import HunterError

logger = logging.getLogger('hunter')


def build_parser():
    # The main parser
    parser = argparse.ArgumentParser(prog='hunter', description="Hunter: a minimal local version control system.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Initialize a new, empty repository.")
    init_parser.set_defaults(func=init.run)

    # Command: add
    add_parser = subparsers.add_parser("add", help="Add file contents to the index.")
    add_parser.add_argument("files", nargs="+", help="Files to add.")
    add_parser.set_defaults(func=add.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help="Record the staged changes in a new commit.")
    commit_parser.add_argument("-m", "--message", required=True, help="Commit message.")
    commit_parser.set_defaults(func=commit.run)

    # Command: status
    status_parser = subparsers.add_parser("status", help="Show the working tree status.")
    status_parser.set_defaults(func=status.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show commit logs.")
    log_parser.set_defaults(func=log.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Get or set a repository option.")
    config_parser.add_argument("key", help="The configuration key (e.g., core.lock).")
    config_parser.add_argument("value", nargs="?", help="The value to set; omit to print the current one.")
    config_parser.set_defaults(func=config.run)

    return parser


def configure_logging(verbose): # --verbose wins over log.level from the repository config
    level_name = 'WARNING'
    if verbose:
        level_name = 'DEBUG'
    else:
        # No repository or an unreadable config leaves the default level
        try:
            repo_root = repository.find_repo_root()
            level_name = config_utils.get_value(repo_root, 'log.level', fallback=level_name).upper()
        except HunterError:
            pass

    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(format='%(levelname)s: %(message)s', stream=sys.stderr)
    logging.getLogger().setLevel(level)


# The main entry point for the Hunter version control system
def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        args.func(args)
    except (HunterError, OSError, ValueError) as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"fatal: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
