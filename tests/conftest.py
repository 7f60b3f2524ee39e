"""
Pytest configuration and fixtures for schemabuilder tests.
"""

from __future__ import annotations

import logging
import os
import textwrap
from pathlib import Path
from typing import Callable, Dict, Generator

import pytest

from schemabuilder.config import reset_config
from schemabuilder.ordering.loader import OrderingRulesLoader


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def test_env() -> Dict[str, str]:
    """Test environment variables."""
    return {
        "SCHEMABUILDER_LOG_LEVEL": "warning",
        "SCHEMABUILDER_LOG_FORMAT": "text",
    }


@pytest.fixture(autouse=True)
def set_test_env(test_env: Dict[str, str]) -> Generator[None, None, None]:
    """Set test environment variables and a fresh config for each test."""
    original = {}
    for key, value in test_env.items():
        original[key] = os.environ.get(key)
        os.environ[key] = value
    reset_config()
    OrderingRulesLoader.clear_cache()

    yield

    reset_config()
    OrderingRulesLoader.clear_cache()
    package_logger = logging.getLogger("schemabuilder")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    for key, value in original.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value


# ============================================================================
# Fragment directory fixtures
# ============================================================================


@pytest.fixture
def write_unit(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a dedented unit file into ``tmp_path/units``."""
    root = tmp_path / "units"
    root.mkdir()

    def _write(name: str, content: str) -> Path:
        path = root / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fragment_dir(tmp_path: Path, write_unit: Callable[[str, str], Path]) -> Path:
    """A small schema: Query (start), Node before User, Scalars (end)."""
    write_unit("Query.py", '''\
        definitions = "type Query { me: User }"


        def me(obj, info):
            return {"id": "1"}


        resolvers = {"Query": {"me": me}}
    ''')
    write_unit("Node.py", '''\
        definitions = "interface Node { id: ID! }"
        before = "User"


        def resolve_type(obj, *_):
            return "User"


        resolvers = {"Node": {"__resolveType": resolve_type}}
    ''')
    write_unit("User.graphql", "type User implements Node { id: ID! }\n")
    write_unit("Scalars.py", '''\
        definitions = "scalar Date"
        end = True


        def upper(next_resolver, obj, info, **kwargs):
            return str(next_resolver()).upper()


        directives = {"upper": upper}
    ''')
    write_unit("notes.txt", "not a unit\n")
    write_unit("empty.py", "VALUE = 1\n")
    return tmp_path / "units"
