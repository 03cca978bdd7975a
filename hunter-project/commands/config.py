# The command: hunter config <key> [<value>]
# What it does: Reads or sets a configuration value (e.g. core.lock, log.level) in `.hunter/config`
# What data structure it uses: Map / Hash Table / Dictionary (INI sections of key-value pairs)

from utils import repository, config as config_utils


def run(args):
    repo_root = repository.find_repo_root()

    if args.value is None:
        value = config_utils.get_value(repo_root, args.key)
        if value is not None:
            print(value)
        return

    config_utils.write_config(repo_root, args.key, args.value)
