"""
Pytest configuration and shared fixtures.
"""

import logging

import pytest


@pytest.fixture
def dist_tree(tmp_path):
    """
    Build a small packaging output tree.

    Layout::

        dist/
          bin/tool          (non-empty)
          lib/empty.so      (zero bytes)

    Returns:
        Path to the ``dist`` directory
    """
    dist = tmp_path / "dist"
    (dist / "bin").mkdir(parents=True)
    (dist / "lib").mkdir()
    (dist / "bin" / "tool").write_text("#!/bin/sh\necho tool\n")
    (dist / "lib" / "empty.so").touch()
    return dist


@pytest.fixture
def validate_log(caplog):
    """
    Capture records of the validator logger.

    Package loggers do not propagate, so the capture handler is attached
    to the logger directly.

    Returns:
        The ``caplog`` fixture, recording ``packkit.validate``
    """
    logger = logging.getLogger("packkit.validate")
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)
