"""Pytest fixtures for git-worktree-setup tests"""
import io
import tempfile
from pathlib import Path

import git
import pytest
from rich.console import Console

from git_worktree_setup.config import Config
from git_worktree_setup.services.display_service import DisplayService


class ScriptedTerminal:
    """Answers prompts from a fixed list and records what was asked."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def ask(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt}")
        return self.answers.pop(0)


class RecordingRunner:
    """Command runner that records commands instead of running them."""

    def __init__(self):
        self.calls = []

    def run(self, command, cwd):
        self.calls.append((list(command), Path(cwd)))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def output():
    """Rich console writing to a buffer."""
    return Console(file=io.StringIO(), width=200, highlight=False, color_system=None)


@pytest.fixture
def display(output):
    return DisplayService(output)


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def worktree_base(temp_dir):
    return temp_dir / "worktrees"


@pytest.fixture
def make_config(worktree_base):
    """Config factory defaulting to the temporary worktree base."""

    def _make(**overrides):
        values = {"worktree_base": str(worktree_base)}
        values.update(overrides)
        return Config(**values)

    return _make


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    # Create initial commit on main branch
    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")
    repo.git.branch('-M', 'main')

    # Remote used for remote-tracking refs; never contacted
    repo.create_remote('origin', 'git@github.com:test/test-repo.git')

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Repository with local branches and a remote-tracking-only branch."""
    repo = git_repo
    repo_path = Path(repo.working_dir)

    repo.git.checkout('-b', 'develop')
    (repo_path / "develop.txt").write_text("Develop content\n")
    repo.index.add(["develop.txt"])
    repo.index.commit("Add develop file")

    repo.git.checkout('main')
    repo.git.branch('feature/existing')

    # Simulate a fetched branch that was never checked out locally
    repo.git.update_ref('refs/remotes/origin/feature/remote-only', 'develop')

    yield repo


@pytest.fixture
def project_files(git_repo):
    """Untracked project files found in a real checkout."""
    root = Path(git_repo.working_dir)
    (root / ".env").write_text("API_URL=http://localhost\n")
    (root / ".env.local").write_text("SECRET=local\n")
    (root / ".env.development").write_text("MODE=development\n")
    (root / ".claude").mkdir()
    (root / ".claude" / "settings.json").write_text("{}\n")
    (root / "CLAUDE.md").write_text("# Notes\n")
    return root


@pytest.fixture
def scripted_terminal():
    """Factory for terminals answering from a list."""
    return ScriptedTerminal
