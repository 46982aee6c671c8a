import json

import yaml
from click.testing import CliRunner

from route_docs.cli import main


class TestCliResponses:
    def test_yaml_table(self):
        runner = CliRunner()
        result = runner.invoke(main, ["responses"])

        assert result.exit_code == 0
        table = yaml.safe_load(result.output)
        assert list(table) == ["GET", "PUT", "POST", "DELETE", "PATCH", "TRACE", "OPTIONS", "HEAD"]
        assert table["GET"][0] == {"code": 200, "message": "OK"}

    def test_single_method_json(self):
        runner = CliRunner()
        result = runner.invoke(main, ["responses", "--method", "delete", "--format", "json"])

        assert result.exit_code == 0
        table = json.loads(result.output)
        assert list(table) == ["DELETE"]
        assert [r["code"] for r in table["DELETE"]] == [204, 403, 401]

    def test_unknown_method(self):
        runner = CliRunner()
        result = runner.invoke(main, ["responses", "--method", "FETCH"])

        assert result.exit_code == 2
        assert "unknown HTTP method" in result.output


class TestCliIgnored:
    def test_lists_ten_types(self):
        runner = CliRunner()
        result = runner.invoke(main, ["ignored"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 10
        assert lines == sorted(lines)
        assert "starlette.requests.Request" in lines
        assert "route_docs.annotations.ApiIgnore" in lines


class TestCliRules:
    def test_rules_in_precedence_order(self):
        runner = CliRunner()
        result = runner.invoke(main, ["rules"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "1. dict -> object"
        assert lines[1] == "2. dict[str, object] -> object"
        assert lines[4] == "5. ResponseEntity[WildcardType] -> WildcardType"
        assert len(lines) == 6
