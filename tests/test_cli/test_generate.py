"""Tests for CLI generate and check commands."""

import json
import os
from collections.abc import Callable
from pathlib import Path
from unittest.mock import Mock, patch

from typer.testing import CliRunner

from friend_links.cli.main import app
from friend_links.exceptions import GitHubFetchError
from friend_links.github_client.models import GitHubIssue


class TestGenerateCommand:
    """Test the generate CLI command."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.runner = CliRunner()

    @patch("friend_links.cli.generate.GitHubClient")
    def test_generate_writes_outputs(
        self,
        mock_client_class: Mock,
        config_file: Path,
        tmp_path: Path,
        make_issue: Callable[..., GitHubIssue],
    ) -> None:
        """Test a full run writes JSON and JS files."""
        mock_client = Mock()
        mock_client.list_repository_issues.return_value = [
            make_issue(issue_id=1, labels=["approved", "cat-a"]),
            make_issue(issue_id=2, labels=["approved", "cat-b"]),
            make_issue(issue_id=3, labels=["approved"]),
            make_issue(issue_id=4, labels=["approved", "cat-a"], body="no data"),
        ]
        mock_client_class.return_value = mock_client

        result = self.runner.invoke(app, ["generate", "--config", str(config_file)])

        assert result.exit_code == 0, result.output
        mock_client_class.assert_called_once_with(token="config_token")
        mock_client.list_repository_issues.assert_called_once_with(
            "octocat", "links", state="open"
        )

        data = json.loads((tmp_path / "out" / "links.json").read_text("utf-8"))
        assert data == [
            {
                "group": "cat-a",
                "groupName": "Category A",
                "groupDesc": "First group",
                "entries": [{"name": "Blog 1"}],
            },
            {
                "group": "cat-b",
                "groupName": "Category B",
                "groupDesc": "Second group",
                "entries": [{"name": "Blog 2"}],
            },
        ]
        js = (tmp_path / "out" / "links.js").read_text("utf-8")
        assert js.startswith('[\n  {\n    group: "cat-a",')

    @patch("friend_links.cli.generate.GitHubClient")
    def test_output_overrides(
        self,
        mock_client_class: Mock,
        config_file: Path,
        tmp_path: Path,
    ) -> None:
        """Test command line paths and token override the configuration."""
        mock_client = Mock()
        mock_client.list_repository_issues.return_value = []
        mock_client_class.return_value = mock_client

        json_path = tmp_path / "custom.json"
        js_path = tmp_path / "custom.js"
        result = self.runner.invoke(
            app,
            [
                "generate",
                "-c",
                str(config_file),
                "--token",
                "cli_token",
                "--state",
                "all",
                "--output",
                str(json_path),
                "--js-output",
                str(js_path),
            ],
        )

        assert result.exit_code == 0, result.output
        mock_client_class.assert_called_once_with(token="cli_token")
        mock_client.list_repository_issues.assert_called_once_with(
            "octocat", "links", state="all"
        )
        assert [group["entries"] for group in json.loads(json_path.read_text())] == [
            [],
            [],
        ]
        assert js_path.exists()
        assert not (tmp_path / "out").exists()

    @patch("friend_links.cli.generate.GitHubClient")
    def test_dry_run(
        self,
        mock_client_class: Mock,
        config_file: Path,
        tmp_path: Path,
        make_issue: Callable[..., GitHubIssue],
    ) -> None:
        """Test dry run prints JSON and writes nothing."""
        mock_client = Mock()
        mock_client.list_repository_issues.return_value = [
            make_issue(issue_id=1, labels=["approved", "cat-a", "cat-b"])
        ]
        mock_client_class.return_value = mock_client

        result = self.runner.invoke(
            app, ["generate", "--config", str(config_file), "--dry-run"]
        )

        assert result.exit_code == 0, result.output
        assert '"groupName": "Category A"' in result.output
        assert not (tmp_path / "out").exists()

    @patch("friend_links.cli.generate.GitHubClient")
    def test_dry_run_stdout_is_pure_json(
        self,
        mock_client_class: Mock,
        config_file: Path,
        make_issue: Callable[..., GitHubIssue],
    ) -> None:
        """Test status output stays off stdout so the JSON can be piped."""
        mock_client = Mock()
        mock_client.list_repository_issues.return_value = [
            make_issue(issue_id=1, labels=["approved", "cat-b"])
        ]
        mock_client_class.return_value = mock_client

        result = self.runner.invoke(
            app, ["generate", "--config", str(config_file), "--dry-run"]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)[1]["entries"] == [{"name": "Blog 1"}]
        assert "Generation Parameters" in result.stderr

    @patch("friend_links.cli.generate.render_js")
    @patch("friend_links.cli.generate.GitHubClient")
    def test_render_failure_writes_nothing(
        self,
        mock_client_class: Mock,
        mock_render_js: Mock,
        config_file: Path,
        tmp_path: Path,
        make_issue: Callable[..., GitHubIssue],
    ) -> None:
        """Test a failing JS render leaves no JSON file behind."""
        mock_client = Mock()
        mock_client.list_repository_issues.return_value = [
            make_issue(issue_id=1, labels=["approved", "cat-a"])
        ]
        mock_client_class.return_value = mock_client
        mock_render_js.side_effect = TypeError("Value of type set is not JSON")

        result = self.runner.invoke(app, ["generate", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Error rendering output" in result.output
        assert not (tmp_path / "out" / "links.json").exists()
        assert not (tmp_path / "out" / "links.js").exists()

    @patch("friend_links.cli.generate.GitHubClient")
    def test_error_text_is_not_markup(
        self, mock_client_class: Mock, config_file: Path
    ) -> None:
        """Test bracketed error text is printed literally."""
        mock_client = Mock()
        mock_client.list_repository_issues.side_effect = GitHubFetchError(
            "[bold]boom[/bold]"
        )
        mock_client_class.return_value = mock_client

        result = self.runner.invoke(app, ["generate", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "[bold]boom[/bold]" in result.output

    def test_missing_config(self, tmp_path: Path) -> None:
        """Test a missing configuration file exits with an error."""
        result = self.runner.invoke(
            app, ["generate", "--config", str(tmp_path / "missing.toml")]
        )

        assert result.exit_code == 1
        assert "Configuration error" in result.output

    @patch("friend_links.cli.generate.GitHubClient")
    def test_fetch_failure(
        self, mock_client_class: Mock, config_file: Path, tmp_path: Path
    ) -> None:
        """Test a failed fetch exits without writing output."""
        mock_client = Mock()
        mock_client.list_repository_issues.side_effect = GitHubFetchError(
            "Failed to fetch issues from octocat/links: 500"
        )
        mock_client_class.return_value = mock_client

        result = self.runner.invoke(app, ["generate", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Failed to fetch issues" in result.output
        assert not (tmp_path / "out").exists()

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_token(self, tmp_path: Path) -> None:
        """Test running without any token exits with an error."""
        path = tmp_path / "config.toml"
        path.write_text(
            '[github]\nowner = "o"\nrepository = "r"\n\n[generation]\nlabel = "ok"\n',
            encoding="utf-8",
        )

        result = self.runner.invoke(app, ["generate", "--config", str(path)])

        assert result.exit_code == 1
        assert "GitHub token is required" in result.output


class TestCheckCommand:
    """Test the check CLI command."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_valid_body(self, tmp_path: Path, data_body: Callable[..., str]) -> None:
        path = tmp_path / "body.md"
        path.write_text(data_body('{"name": "My Blog"}'), encoding="utf-8")

        result = self.runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 0
        assert "PASS" in result.output
        assert '"name": "My Blog"' in result.output

    def test_invalid_body(self, tmp_path: Path) -> None:
        path = tmp_path / "body.md"
        path.write_text("Just a description", encoding="utf-8")

        result = self.runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 1
        assert "FAIL" in result.output
        assert "Missing DATA_START or DATA_END comment." in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = self.runner.invoke(app, ["check", str(tmp_path / "nope.md")])
        assert result.exit_code == 1
