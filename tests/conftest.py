#!/usr/bin/env python3
"""
ipxedust Testing Framework - Global Test Configuration
Pytest fixtures shared by the unit tests
"""

import pytest
import structlog

from ipxedust.binary import MAGIC_STRING

# 64 printable bytes, two 32 byte lines
SHORT_MARKER = b"#" + b"a" * 30 + b"\n" + b"#" + b"b" * 31


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep logging configuration from leaking between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture(scope='session')
def short_marker():
    """Provide a 64 byte marker for length boundary tests."""
    assert len(SHORT_MARKER) == 64
    return SHORT_MARKER


@pytest.fixture(scope='function')
def marked_content(short_marker):
    """Provide 200 bytes with the short marker at offset 50."""
    head = bytes(range(50))
    tail = bytes(range(200, 256)) + bytes(range(30))
    content = head + short_marker + tail
    assert len(content) == 200
    return content


@pytest.fixture(scope='function')
def ipxe_script():
    """Provide an embedded script fragment carrying the real magic string."""
    return b"#!ipxe\n\necho Loading...\n" + MAGIC_STRING + b"\n\ndhcp\nchain http://boot/auto.ipxe\n"


@pytest.fixture(scope='function')
def clean_env(monkeypatch):
    """Remove ipxedust settings from the environment."""
    for name in ("IPXEDUST_LOG_LEVEL", "IPXEDUST_LOG_FORMAT", "IPXEDUST_PATCH"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
