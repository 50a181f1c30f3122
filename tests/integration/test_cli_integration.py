"""Integration tests for CLI commands using CliRunner."""

import json
import shlex
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from cps.cli.main import app
from cps.config import Config

runner = CliRunner()


class TestCLIIntegration:
    """CLI tests against a temporary registry."""

    @pytest.fixture
    def repos(self, workspace, make_repo):
        """Two repositories, api (with remote) and web."""
        api = make_repo(workspace / "api", remote="https://example.com/api.git")
        web = make_repo(workspace / "clients" / "web")
        return api, web

    def stored(self, registry_path):
        return json.loads(registry_path.read_text())["projects"]

    def test_no_command_shows_help(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "add" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "cps version" in result.output

    def test_add_current_directory(self, repos, monkeypatch, isolated_registry):
        api, _ = repos
        monkeypatch.chdir(api)

        result = runner.invoke(
            app, ["add", "--name", "backend", "--tags", "go, work", "-g", "srv"]
        )

        assert result.exit_code == 0, result.output
        assert "Added project: backend" in result.output
        (project,) = self.stored(isolated_registry)
        assert project["name"] == "backend"
        assert project["path"] == str(api)
        assert project["tags"] == ["go", "work"]
        assert project["group"] == "srv"
        assert project["metadata"]["gitRemote"] == "https://example.com/api.git"

    def test_add_by_path(self, repos, isolated_registry):
        _, web = repos

        result = runner.invoke(app, ["add", str(web), "-d", "Frontend"])

        assert result.exit_code == 0, result.output
        (project,) = self.stored(isolated_registry)
        assert project["name"] == "web"
        assert project["description"] == "Frontend"

    def test_add_not_a_project(self, workspace, monkeypatch):
        monkeypatch.chdir(workspace)

        result = runner.invoke(app, ["add"])

        assert result.exit_code == 1
        assert "not a valid project" in result.output

    def test_add_missing_directory(self, workspace):
        result = runner.invoke(app, ["add", str(workspace / "nope")])

        assert result.exit_code == 1
        assert "Directory does not exist" in result.output

    def test_list(self, repos):
        api, web = repos
        runner.invoke(app, ["add", str(api), "-g", "backend", "-t", "go"])
        runner.invoke(app, ["add", str(web)])

        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "Found 2 project(s)" in result.output
        assert "api" in result.output
        assert "web" in result.output

        result = runner.invoke(app, ["list", "--group", "backend"])
        assert "Found 1 project(s)" in result.output

        result = runner.invoke(app, ["list", "--tag", "rust"])
        assert "No projects found" in result.output

    def test_list_empty(self):
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "No projects found" in result.output

    def test_corrupt_registry(self, isolated_registry):
        isolated_registry.parent.mkdir(parents=True)
        isolated_registry.write_text("{broken")

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 1
        assert "Could not load" in result.output

    def test_switch_by_name(self, repos, isolated_registry):
        api, _ = repos
        runner.invoke(app, ["add", str(api)])

        result = runner.invoke(app, ["switch", "ap"])

        assert result.exit_code == 0
        assert "To switch to this project" in result.output
        (project,) = self.stored(isolated_registry)
        assert project["accessCount"] == 1

    def test_switch_claude_output(self, repos):
        api, _ = repos
        runner.invoke(app, ["add", str(api)])

        result = runner.invoke(app, ["s", "api", "--claude"])

        assert result.exit_code == 0
        assert result.stdout == f"cd {shlex.quote(str(api))}\n"

    def test_switch_not_found(self):
        result = runner.invoke(app, ["switch", "ghost"])

        assert result.exit_code == 1
        assert "Project not found: ghost" in result.output

    def test_switch_lists_projects(self, repos):
        api, web = repos
        runner.invoke(app, ["add", str(api)])
        runner.invoke(app, ["add", str(web)])

        result = runner.invoke(app, ["switch", "--recent"])

        assert result.exit_code == 0
        assert "Recent projects" in result.output
        assert "1. api" in result.output or "1. web" in result.output

    def test_switch_fzf(self, repos, isolated_registry):
        api, web = repos
        runner.invoke(app, ["add", str(api)])
        runner.invoke(app, ["add", str(web)])
        web_id = Config(isolated_registry).list_all()[1].id

        with patch(
            "cps.cli.handlers.fzf_handler.FzfSelector.select_project",
            autospec=True,
            side_effect=lambda self, projects: next(p for p in projects if p.id == web_id),
        ):
            result = runner.invoke(app, ["switch", "--fzf", "--claude"])

        assert result.exit_code == 0
        assert result.stdout == f"cd {shlex.quote(str(web))}\n"

    def test_switch_fzf_not_installed(self, repos):
        runner.invoke(app, ["add", str(repos[0])])

        with patch("cps.cli.handlers.fzf_handler.shutil.which", return_value=None):
            result = runner.invoke(app, ["switch", "--fzf"])

        assert result.exit_code == 1
        assert "fzf is not installed" in result.output

    def test_remove(self, repos, isolated_registry):
        api, web = repos
        runner.invoke(app, ["add", str(api)])
        runner.invoke(app, ["add", str(web)])

        result = runner.invoke(app, ["remove", "api", "--force"])

        assert result.exit_code == 0
        assert "Removed project 'api'" in result.output
        assert [p["name"] for p in self.stored(isolated_registry)] == ["web"]

    def test_remove_cancelled(self, repos, isolated_registry):
        runner.invoke(app, ["add", str(repos[0])])

        result = runner.invoke(app, ["rm", "api"], input="n\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert len(self.stored(isolated_registry)) == 1

    def test_remove_not_found(self):
        result = runner.invoke(app, ["remove", "ghost", "-f"])

        assert result.exit_code == 1
        assert "Project not found" in result.output

    def test_scan(self, repos, workspace, isolated_registry):
        result = runner.invoke(app, ["scan", str(workspace)])

        assert result.exit_code == 0
        assert "Found 2 repositories" in result.output
        assert self.stored(isolated_registry) == []

    def test_scan_add(self, repos, workspace, isolated_registry):
        result = runner.invoke(app, ["scan", str(workspace), "--add"])

        assert result.exit_code == 0
        assert "Added 2 project(s)" in result.output
        assert {p["name"] for p in self.stored(isolated_registry)} == {"api", "web"}

    def test_scan_depth(self, repos, workspace):
        result = runner.invoke(app, ["scan", str(workspace), "--depth", "0"])

        assert "Found 1 repositories" in result.output

    def test_scan_missing_directory(self, workspace):
        result = runner.invoke(app, ["scan", str(workspace / "nope")])

        assert result.exit_code == 1
        assert "Directory does not exist" in result.output


class TestCLIRendering:
    """Names and paths from the registry are printed literally."""

    @pytest.fixture(autouse=True)
    def wide_console(self, monkeypatch):
        from cps.cli.utils import console

        monkeypatch.setattr(console, "width", 300)

    def test_name_with_closing_tag(self, workspace, make_repo, isolated_registry):
        repo = make_repo(workspace / "api")

        result = runner.invoke(app, ["add", str(repo), "--name", "a[/b]"])
        assert result.exit_code == 0, result.output
        assert "Added project: a[/b]" in result.output

        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0, result.output
        assert "a[/b]" in result.output

        result = runner.invoke(app, ["switch"])
        assert result.exit_code == 0, result.output
        assert "1. a[/b]" in result.output

    def test_bracketed_directory_name(self, workspace, make_repo):
        repo = make_repo(workspace / "api[v2]")

        result = runner.invoke(app, ["add", str(repo), "-t", "[red]x"])
        assert result.exit_code == 0, result.output
        assert f"Path: {repo}" in result.output
        assert "Tags: [red]x" in result.output

        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0, result.output
        assert "api[v2]" in result.output
        assert str(repo) in result.output
        assert "[red]x" in result.output

        result = runner.invoke(app, ["scan", str(workspace)])
        assert result.exit_code == 0, result.output
        assert str(repo) in result.output

    def test_list_groups(self, workspace, make_repo):
        runner.invoke(app, ["add", str(make_repo(workspace / "api")), "-g", "backend"])
        runner.invoke(app, ["add", str(make_repo(workspace / "db")), "-g", "backend"])
        runner.invoke(app, ["add", str(make_repo(workspace / "web"))])

        result = runner.invoke(app, ["list", "--groups"])

        assert result.exit_code == 0, result.output
        assert "Found 1 group(s)" in result.output
        assert "@backend" in result.output
        assert "api, db" in result.output

    def test_list_groups_empty(self):
        result = runner.invoke(app, ["list", "-G"])

        assert result.exit_code == 0
        assert "No groups found" in result.output


class TestRemoveInteractive:
    """remove --fzf and argument handling."""

    def test_remove_fzf_multiple(self, workspace, make_repo, isolated_registry):
        for name in ("api", "db", "web"):
            runner.invoke(app, ["add", str(make_repo(workspace / name))])

        with patch(
            "cps.cli.handlers.fzf_handler.FzfSelector.select_multiple",
            autospec=True,
            side_effect=lambda self, projects, prompt: [
                p for p in projects if p.name != "db"
            ],
        ):
            result = runner.invoke(app, ["remove", "--fzf", "--force"])

        assert result.exit_code == 0, result.output
        assert "Removed project 'api'" in result.output
        assert "Removed project 'web'" in result.output
        stored = json.loads(isolated_registry.read_text())["projects"]
        assert [p["name"] for p in stored] == ["db"]

    def test_remove_fzf_confirm(self, workspace, make_repo, isolated_registry):
        runner.invoke(app, ["add", str(make_repo(workspace / "api"))])
        runner.invoke(app, ["add", str(make_repo(workspace / "web"))])

        with patch(
            "cps.cli.handlers.fzf_handler.FzfSelector.select_multiple",
            autospec=True,
            side_effect=lambda self, projects, prompt: projects,
        ):
            result = runner.invoke(app, ["rm", "--fzf"], input="n\n")

        assert result.exit_code == 0
        assert "Remove 2 projects (api, web)?" in result.output
        assert "Cancelled" in result.output
        assert len(json.loads(isolated_registry.read_text())["projects"]) == 2

    def test_remove_fzf_nothing_selected(self, workspace, make_repo):
        runner.invoke(app, ["add", str(make_repo(workspace / "api"))])

        with patch(
            "cps.cli.handlers.fzf_handler.FzfSelector.select_multiple",
            autospec=True,
            return_value=[],
        ):
            result = runner.invoke(app, ["remove", "--fzf"])

        assert result.exit_code == 1
        assert "No project selected" in result.output

    def test_remove_without_name(self):
        result = runner.invoke(app, ["remove"])

        assert result.exit_code == 1
        assert "Missing argument 'NAME'" in result.output
