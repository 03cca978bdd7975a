# Unit tests for utils/config.py and utils/lock.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'hunter-project'))

from utils import config
from utils.lock import repo_lock
from utils.errors import CorruptRecord


class TestConfig:
    # Tests for reading and writing .hunter/config

    def test_missing_config_gives_fallback(self, temp_repo):
        assert config.get_value(temp_repo, 'log.level', fallback='WARNING') == 'WARNING'
        assert config.get_bool(temp_repo, 'core.lock', fallback=True) is True

    def test_write_and_read_back(self, temp_repo):
        config.write_config(temp_repo, 'log.level', 'debug')
        config.write_config(temp_repo, 'core.lock', 'false')

        assert config.get_value(temp_repo, 'log.level') == 'debug'
        assert config.get_bool(temp_repo, 'core.lock', fallback=True) is False
        assert os.path.exists(os.path.join(temp_repo, '.hunter', 'config'))

    def test_invalid_key(self, temp_repo):
        with pytest.raises(ValueError):
            config.write_config(temp_repo, 'nodot', 'x')
        with pytest.raises(ValueError):
            config.get_value(temp_repo, '.option')


class TestRepoLock:
    # Tests for the advisory repository lock

    def test_creates_lock_file(self, temp_repo):
        with repo_lock(temp_repo):
            assert os.path.exists(os.path.join(temp_repo, '.hunter', 'lock'))

    def test_released_on_error(self, temp_repo):
        with pytest.raises(RuntimeError):
            with repo_lock(temp_repo):
                raise RuntimeError("boom")
        # Re-acquiring must not block
        with repo_lock(temp_repo):
            pass

    def test_disabled_by_config(self, temp_repo):
        config.write_config(temp_repo, 'core.lock', 'false')
        with repo_lock(temp_repo):
            assert not os.path.exists(os.path.join(temp_repo, '.hunter', 'lock'))


class TestCorruptConfig:
    # An unparseable config file is reported as a corrupt record

    def test_read_raises_corrupt_record(self, temp_repo):
        with open(os.path.join(temp_repo, '.hunter', 'config'), 'w') as f:
            f.write("not an ini file\n")

        with pytest.raises(CorruptRecord):
            config.read_config(temp_repo)

    def test_lock_reports_corrupt_config(self, temp_repo):
        with open(os.path.join(temp_repo, '.hunter', 'config'), 'w') as f:
            f.write("not an ini file\n")

        with pytest.raises(CorruptRecord):
            with repo_lock(temp_repo):
                pass
