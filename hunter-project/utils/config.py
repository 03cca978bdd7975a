# What it does: Manages all read/write operations for the `.hunter/config` file
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os

from .errors import CorruptRecord
from .repository import hunter_path

CONFIG_FILE = 'config'


def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return hunter_path(repo_root, CONFIG_FILE)


def _split_key(key):
    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise ValueError(f"invalid key '{key}', should be 'section.key'")
    if not section or not option:
        raise ValueError(f"invalid key '{key}', should be 'section.key'")
    return section, option


def read_config(repo_root): # Reads and returns the configuration as a ConfigParser object
    config = configparser.ConfigParser()
    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        try:
            config.read(config_path)
        except configparser.Error as e:
            raise CorruptRecord(config_path, str(e))
    return config


def write_config(repo_root, key, value): # Sets a configuration key to a value and writes it to the config file
    section, option = _split_key(key)
    config = read_config(repo_root)

    if not config.has_section(section):
        config.add_section(section)
    config.set(section, option, value)

    with open(get_config_path(repo_root), 'w') as configfile:
        config.write(configfile)


def get_value(repo_root, key, fallback=None):
    section, option = _split_key(key)
    return read_config(repo_root).get(section, option, fallback=fallback)


def get_bool(repo_root, key, fallback=False):
    section, option = _split_key(key)
    return read_config(repo_root).getboolean(section, option, fallback=fallback)
