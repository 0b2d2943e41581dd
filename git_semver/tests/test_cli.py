"""Tests for the git-semver command line (git_semver.cli)."""

import pytest

from git_semver import cli
from git_semver.errors import GitCommandError, NotAGitRepository
from git_semver.git import RawInputs


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("GIT_SEMVER_REPO_DIR", "GIT_SEMVER_GIT", "GIT_SEMVER_SHOW_DIRTY", "GIT_SEMVER_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def fake_describe(monkeypatch):
    """Make describe_repository return a fixed RawInputs and record the config."""
    seen = {}

    def _install(raw=None, error=None):
        def _describe(config):
            seen["config"] = config
            if error is not None:
                raise error
            return raw

        monkeypatch.setattr(cli, "describe_repository", _describe)
        return seen

    return _install


class TestExplicitInputs:

    def test_prints_version(self, capsys):
        assert cli.main(["--tag", "v1.2.3", "--describe", "v1.2.3-5-g1a2b3c4"]) == 0
        assert capsys.readouterr().out == "v1.2.4-dev.5\n"

    def test_no_tag(self, capsys):
        assert cli.main(["--no-tag"]) == 0
        assert capsys.readouterr().out == "v0.0.1+dirty\n"

    def test_no_dirty(self, capsys):
        assert cli.main(["--no-dirty", "--tag", "v1.2.3", "--describe", "v1.2.3-0-gabc1234-dirty"]) == 0
        assert capsys.readouterr().out == "v1.2.3\n"

    def test_invalid_describe_exit_code(self, capsys):
        assert cli.main(["--tag", "v1.2.3", "--describe", "v1.2.3-x-gabc1234"]) == 3
        assert capsys.readouterr().out == ""

    def test_malformed_core_exit_code(self, capsys):
        assert cli.main(["--tag", "v1.2", "--describe", "v1.2-0-gabc1234"]) == 4
        assert capsys.readouterr().out == ""

    def test_error_is_logged(self, caplog):
        cli.main(["--tag", "v1.2", "--describe", "v1.2-0-gabc1234"])
        assert "1.2" in caplog.text
        assert "Exiting" in caplog.text

    def test_tag_requires_describe(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--tag", "v1.2.3"])
        assert exc_info.value.code == 2

    def test_no_tag_conflicts_with_tag(self):
        with pytest.raises(SystemExit):
            cli.main(["--no-tag", "--tag", "v1.2.3", "--describe", "v1.2.3-0-gabc1234"])


class TestGitInputs:

    def test_uses_repository(self, fake_describe, capsys):
        fake_describe(RawInputs("v2.0.0-beta.1", "v2.0.0-beta.1-3-gdeadbee", True))
        assert cli.main([]) == 0
        assert capsys.readouterr().out == "v2.0.0-beta.1.3\n"

    def test_repo_dir_flag(self, fake_describe):
        seen = fake_describe(RawInputs("v1.0.0", "v1.0.0-0-gdeadbee", True))
        cli.main(["-C", "/src/project"])
        assert seen["config"].repo_dir == "/src/project"

    def test_env_config(self, fake_describe, monkeypatch, capsys):
        monkeypatch.setenv("GIT_SEMVER_SHOW_DIRTY", "0")
        fake_describe(RawInputs("v1.0.0", "v1.0.0-0-gdeadbee-dirty", True))
        assert cli.main([]) == 0
        assert capsys.readouterr().out == "v1.0.0\n"

    def test_flag_overrides_env(self, fake_describe, monkeypatch):
        monkeypatch.setenv("GIT_SEMVER_REPO_DIR", "/from/env")
        seen = fake_describe(RawInputs("v1.0.0", "v1.0.0-0-gdeadbee", True))
        cli.main(["-C", "/from/flag"])
        assert seen["config"].repo_dir == "/from/flag"

    def test_bad_env_value(self, monkeypatch):
        monkeypatch.setenv("GIT_SEMVER_SHOW_DIRTY", "sometimes")
        with pytest.raises(SystemExit) as exc_info:
            cli.main([])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize(
        "error, code",
        [
            (NotAGitRepository("/tmp"), 1),
            (GitCommandError(["git", "describe"], 128, "fatal: bad revision"), 2),
        ],
    )
    def test_git_failures(self, fake_describe, capsys, error, code):
        fake_describe(error=error)
        assert cli.main([]) == code
        assert capsys.readouterr().out == ""


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("git-semver ")
