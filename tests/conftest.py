# tests/conftest.py
import pytest

from lexicon_trie.utils.logger_utils import log


@pytest.fixture(autouse=True)
def log_to_tmp(tmp_path, monkeypatch):
    """Keep the shared file logger out of the working directory."""
    monkeypatch.setattr(log, "path", str(tmp_path / "logs" / "lexicon.log"))
    return log.path
