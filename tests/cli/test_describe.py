"""
Tests for cli.describe
"""

import json
import pytest
from click.testing import CliRunner

from cli import main
from cli.describe import describe_step
from cli.help_texts import ExitCodes


@pytest.fixture
def runner():
    return CliRunner()


class TestDescribeCLI:
    def test_text_output(self, runner):
        result = runner.invoke(main, ["describe"])

        assert result.exit_code == 0
        assert "Event lookup (event_lookup)" in result.output
        assert "Fields added: event" in result.output
        assert "event_lookup_step:" in result.output
        assert "useridfield: User id field, default 'userid' (required)" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(main, ["describe", "--json"])

        assert result.exit_code == 0
        info = json.loads(result.stdout)
        assert info["type"] == "event_lookup"
        assert info["fields"] == ["event"]
        assert [element["name"] for element in info["form"]] == ["useridfield", "contextidfield", "outputprefix"]

    def test_legacy_step_type(self, runner):
        result = runner.invoke(main, ["describe", "--step-type", "event_lookup_step"])

        assert result.exit_code == 0
        assert "(event_lookup)" in result.output

    def test_unknown_step_type(self, runner):
        result = runner.invoke(main, ["describe", "--step-type", "email"])

        assert result.exit_code == ExitCodes.INVALID_CONFIGURATION
        assert "Unknown step type" in result.output


class TestDescribeStep:
    def test_privacy_text_resolved(self):
        info = describe_step("event_lookup")

        assert set(info["privacy"]) == {"event_lookup_step"}
        assert not info["privacy"]["event_lookup_step"].startswith("[[")
