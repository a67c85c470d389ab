"""Tests for environment file seeding"""

import pytest

from git_worktree_setup.config import Config
from git_worktree_setup.models.worktree import WorktreeTarget
from git_worktree_setup.services.env_seeder import EnvironmentSeeder


@pytest.fixture
def dirs(temp_dir):
    repo_root = temp_dir / "repo"
    worktree = temp_dir / "worktrees" / "feature" / "x"
    repo_root.mkdir()
    worktree.mkdir(parents=True)
    return WorktreeTarget(repo_root, temp_dir / "worktrees", worktree, "feature/x")


class TestEnvironmentSeeder:

    def test_copies_all_env_files_once(self, dirs, display):
        root = dirs.repo_root
        (root / ".env").write_text("A=1\n")
        (root / ".env.local").write_text("B=2\n")
        (root / ".env.production").write_text("C=3\n")
        (root / ".env.d").mkdir()  # directories are ignored

        copied = EnvironmentSeeder(Config(), display).seed(dirs)

        assert copied == [".env", ".env.local", ".env.production"]
        assert (dirs.path / ".env.local").read_text() == "B=2\n"
        assert (dirs.path / ".env.production").read_text() == "C=3\n"
        assert not (dirs.path / ".env.d").exists()

    def test_title_appended_after_copied_content(self, dirs, display):
        (dirs.repo_root / ".env").write_text("A=1")

        EnvironmentSeeder(Config(), display).seed(dirs)

        assert (dirs.path / ".env").read_text() == (
            "A=1\n# Worktree browser tab title\nWORKTREE_TITLE=feature/x\n"
        )

    def test_title_written_without_any_env_file(self, dirs, display, output):
        copied = EnvironmentSeeder(Config(), display).seed(dirs)

        assert copied == []
        lines = (dirs.path / ".env").read_text().splitlines()
        assert lines[-1] == "WORKTREE_TITLE=feature/x"
        text = output.file.getvalue()
        assert ".env not found in main repository" in text
        assert "No .env files found to copy" in text

    def test_variant_only_still_warns_about_primary(self, dirs, display, output):
        (dirs.repo_root / ".env.development").write_text("MODE=dev\n")

        copied = EnvironmentSeeder(Config(), display).seed(dirs)

        assert copied == [".env.development"]
        text = output.file.getvalue()
        assert ".env not found in main repository" in text
        assert "No .env files found to copy" not in text
        assert (dirs.path / ".env").read_text().endswith("WORKTREE_TITLE=feature/x\n")

    def test_custom_title_variable(self, dirs, display):
        EnvironmentSeeder(Config(title_variable="TAB_TITLE"), display).seed(dirs)
        assert (dirs.path / ".env").read_text().endswith("TAB_TITLE=feature/x\n")
