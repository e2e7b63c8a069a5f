"""
Pytest configuration and fixtures.
"""

import copy
import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


VALID_DOCUMENT = """BULBA!
zZz Basic Configuration
app_name ~~~~~~> "Pokedex_API"
version  ~~~~~~> 1.5
is_production ~> NotVeryEffective
missing_data ~> MissingNo

zZz Database Connection (Level 1)
(o) database (o)
    host ~~~~> "127.0.0.1"
    
    zZz Connection Pool Settings (Level 2)
    (O) pool (O)
        max_connections ~~~~> 100
        
        zZz Critical Kernel flags (Level 3)
        (@) KERNEL_FLAGS (@)
            panic_on_fail ~~~~> SuperEffective

zZz Allowed Users List
whitelist ~~~~> <| "Prof_Oak", "Mom" |>
"""

VALID_TREE = {
    "app_name": "Pokedex_API",
    "version": 1.5,
    "is_production": False,
    "missing_data": None,
    "database": {
        "host": "127.0.0.1",
        "pool": {
            "max_connections": 100,
            "KERNEL_FLAGS": {
                "panic_on_fail": True,
            },
        },
    },
    "whitelist": ["Prof_Oak", "Mom"],
}


@pytest.fixture
def valid_source() -> str:
    """Reference document exercising every statement and value form."""
    return VALID_DOCUMENT


@pytest.fixture
def valid_tree() -> dict:
    """Tree expected from the reference document."""
    return copy.deepcopy(VALID_TREE)


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[..., Path]:
    """Write document text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "document.bson") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger("bulba_bson")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
