"""Shared test fixtures for linestat tests."""

import pytest

# Six lines: code, line comment, empty, block open, block close, code
SAMPLE_SOURCE = b"a=1\n// comment\n\n/* block\nstill block */\nb=2\n"

# Three lines: code, empty, code
SHORT_SOURCE = b"x\n\ny\n"

MIXED_SOURCE = (
    b"// Package demo does things.\r\n"
    b"package demo\r\n"
    b"\r\n"
    b"/** Block\r\n"
    b" * comment */ var x = 1 // trailing\r\n"
    b"func f() { /* inline */ return }\r\n"
    b"\t  \r\n"
    b"a := b / c * d //// many slashes\r\n"
    b"/* a /* nested */ still code? */\r\n"
    b"s := \"// not really a comment\""
)


@pytest.fixture
def sample_file(tmp_path):
    """Source file with the six-line reference layout."""
    path = tmp_path / "sample.c"
    path.write_bytes(SAMPLE_SOURCE)
    return path


@pytest.fixture
def short_file(tmp_path):
    """Three-line source file without comments."""
    path = tmp_path / "short.c"
    path.write_bytes(SHORT_SOURCE)
    return path


@pytest.fixture
def missing_file(tmp_path):
    """Path that does not exist."""
    return tmp_path / "does-not-exist.c"


@pytest.fixture
def sample_source():
    return SAMPLE_SOURCE


@pytest.fixture
def mixed_source():
    return MIXED_SOURCE
