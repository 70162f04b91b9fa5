# tests/conftest.py
import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """configure_logging() turns propagation off; undo it so caplog sees records."""
    yield
    logger = logging.getLogger("cooccur_trie")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_file(tmp_path):
    def _write(name, text):
        p = tmp_path / name
        p.write_text(text, encoding="utf8")
        return p
    return _write
