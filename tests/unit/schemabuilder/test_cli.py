"""Tests for the schemabuilder command line."""

import json

import pytest
from click.testing import CliRunner

from schemabuilder.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def conflict_dir(write_unit):
    write_unit("A.py", 'definitions = "type A"\nafter = "B"\n')
    path = write_unit("B.py", 'definitions = "type B"\nafter = "A"\n')
    return path.parent


class TestOrderCommand:
    def test_text(self, runner, fragment_dir):
        result = runner.invoke(main, ["--log-level", "error", "order", str(fragment_dir)])
        assert result.exit_code == 0, result.output
        assert "definitions: Query, Node, User, Scalars" in result.output
        assert "resolvers: Query, Node" in result.output
        assert "directives: Scalars" in result.output

    def test_json(self, runner, fragment_dir):
        result = runner.invoke(
            main, ["--log-level", "error", "order", str(fragment_dir), "--format", "json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["definitions"] == ["Query", "Node", "User", "Scalars"]
        assert data["directives"] == ["Scalars"]

    def test_rules_file(self, runner, fragment_dir, tmp_path):
        rules = tmp_path / "ordering.yaml"
        rules.write_text(
            'schema_version: "0.1.0"\n'
            "contract_type: schema_ordering\n"
            "start: []\n"
            "rules:\n"
            "  - id: Node\n"
            "    start: true\n"
        )
        result = runner.invoke(
            main, ["--log-level", "error", "order", str(fragment_dir), "--rules", str(rules)]
        )
        assert result.exit_code == 0, result.output
        assert "resolvers: Node, Query" in result.output

    def test_invalid_rules_file(self, runner, fragment_dir, tmp_path):
        rules = tmp_path / "ordering.yaml"
        rules.write_text('schema_version: "0.1.0"\ncontract_type: other\n')
        result = runner.invoke(
            main, ["--log-level", "error", "order", str(fragment_dir), "-r", str(rules)]
        )
        assert result.exit_code == 1
        assert "contract_type" in result.output

    def test_conflict(self, runner, conflict_dir):
        result = runner.invoke(main, ["--log-level", "error", "order", str(conflict_dir)])
        assert result.exit_code == 1
        assert "Ordering conflict in 'A' and 'B'" in result.output


class TestBuildCommand:
    def test_text(self, runner, fragment_dir):
        result = runner.invoke(main, ["--log-level", "error", "build", str(fragment_dir)])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "type Query { me: User }"
        assert "# resolvers: Query.me, Node.__resolveType" in result.output
        assert "# directives: upper" in result.output

    def test_json(self, runner, fragment_dir):
        result = runner.invoke(
            main, ["--log-level", "error", "build", str(fragment_dir), "--format", "json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["definitions"][-1] == "scalar Date"
        assert data["resolvers"]["Query"]["me"] == "<me>"
        assert data["directives"] == {"upper": "<upper>"}

    def test_duplicate_units(self, runner, write_unit):
        write_unit("User.graphql", "type User { id: ID! }")
        path = write_unit("User.py", 'resolvers = {"User": {}}\n')
        result = runner.invoke(main, ["--log-level", "error", "build", str(path.parent)])
        assert result.exit_code == 1
        assert "Duplicate identifier 'User'" in result.output

    def test_conflict(self, runner, conflict_dir):
        result = runner.invoke(main, ["--log-level", "error", "build", str(conflict_dir)])
        assert result.exit_code == 1
        assert "Ordering conflict" in result.output

    def test_undecodable_unit(self, runner, write_unit):
        path = write_unit("Good.graphql", "scalar Good\n")
        (path.parent / "Bad.graphql").write_bytes(b"type Bad { x: \xff\xfe }")
        result = runner.invoke(main, ["--log-level", "error", "build", str(path.parent)])
        assert result.exit_code == 1
        assert "Cannot import fragments" in result.output
