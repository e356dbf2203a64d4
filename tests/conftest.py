"""
Shared fixtures: small Go project trees written into tmp_path.
"""

import logging
import textwrap

import pytest


@pytest.fixture
def go_tree(tmp_path):
    """
    Returns a writer: go_tree({"a.go": "...", "sub/b.go": "..."}) creates the
    files under tmp_path (dedenting their contents) and returns tmp_path.
    """
    def write(files: dict[str, str]):
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return tmp_path

    return write


MAIN_GO = """
    package main

    func main() {
    	helper()
    }

    func helper() {}
"""

STORE_GO = """
    package store

    type Store struct{}

    func (s *Store) Get() string {
    	return ""
    }
"""

BROKEN_GO = """
    package main

    func broken( {
"""


@pytest.fixture
def example_project(go_tree):
    return go_tree({"a.go": MAIN_GO, "sub/b.go": STORE_GO})


@pytest.fixture(autouse=True)
def reset_cli_logger():
    """The CLI attaches a console handler to the go_scan logger; drop it between tests."""
    yield
    logger = logging.getLogger("go_scan")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
