"""Tests for the git layer"""
from pathlib import Path

import pytest

from git_worktree_setup.exceptions import GitOperationError
from git_worktree_setup.models.worktree import BranchStrategy, WorktreeTarget
from git_worktree_setup.services.git import (
    GitRepository,
    clean_git_stderr,
    find_repo_root,
    parse_worktree_porcelain,
)


PORCELAIN = """\
worktree /repo
HEAD 1111111111111111111111111111111111111111
branch refs/heads/main

worktree /repo.worktrees/feature/x
HEAD 2222222222222222222222222222222222222222
branch refs/heads/feature/x

worktree /repo.worktrees/detached
HEAD 3333333333333333333333333333333333333333
detached
"""


class TestParseWorktreePorcelain:

    def test_parses_all_entries(self):
        worktrees = parse_worktree_porcelain(PORCELAIN)
        assert [wt.path for wt in worktrees] == [
            "/repo",
            "/repo.worktrees/feature/x",
            "/repo.worktrees/detached",
        ]
        assert [wt.branch_name for wt in worktrees] == ["main", "feature/x", ""]

    def test_first_entry_is_main(self):
        worktrees = parse_worktree_porcelain(PORCELAIN)
        assert [wt.is_main for wt in worktrees] == [True, False, False]

    def test_missing_directories_are_orphaned(self):
        worktrees = parse_worktree_porcelain(PORCELAIN)
        assert all(wt.is_orphaned for wt in worktrees)

    def test_last_entry_without_blank_line(self):
        worktrees = parse_worktree_porcelain(PORCELAIN.rstrip("\n"))
        assert len(worktrees) == 3
        assert worktrees[-1].commit_sha.startswith("3333")

    def test_empty_output(self):
        assert parse_worktree_porcelain("") == []

    def test_str_shows_branch_and_main_marker(self):
        main = parse_worktree_porcelain(PORCELAIN)[0]
        assert str(main) == "/repo  1111111 [main] (main) [orphaned]"


class TestFindRepoRoot:

    def test_from_subdirectory(self, git_repo):
        root = Path(git_repo.working_dir).resolve()
        subdir = root / "src" / "deep"
        subdir.mkdir(parents=True)
        assert find_repo_root(subdir) == root

    def test_outside_repository(self, temp_dir):
        assert find_repo_root(temp_dir) is None

    def test_discover_returns_none_outside_repository(self, temp_dir):
        assert GitRepository.discover(temp_dir) is None


class TestGitRepositoryQueries:

    def test_local_and_remote_refs(self, git_repo_with_branches):
        repository = GitRepository(git_repo_with_branches.working_dir)
        assert repository.has_local_branch("develop") is True
        assert repository.has_local_branch("feature/remote-only") is False
        assert repository.has_remote_branch("feature/remote-only") is True
        assert repository.has_remote_branch("develop") is False

    def test_branch_exists(self, git_repo_with_branches):
        repository = GitRepository(git_repo_with_branches.working_dir)
        assert repository.branch_exists("feature/existing")
        assert repository.branch_exists("feature/remote-only")
        assert not repository.branch_exists("nope")

    def test_local_branches_sorted(self, git_repo_with_branches):
        repository = GitRepository(git_repo_with_branches.working_dir)
        assert repository.local_branches() == ["develop", "feature/existing", "main"]

    def test_current_branch(self, git_repo_with_branches):
        repository = GitRepository(git_repo_with_branches.working_dir)
        assert repository.current_branch() == "main"

    def test_current_branch_detached(self, git_repo):
        git_repo.git.checkout(git_repo.head.commit.hexsha)
        repository = GitRepository(git_repo.working_dir)
        assert repository.current_branch() is None

    def test_worktrees_lists_main(self, git_repo):
        repository = GitRepository(git_repo.working_dir)
        worktrees = repository.worktrees()
        assert len(worktrees) == 1
        assert worktrees[0].is_main
        assert worktrees[0].branch_name == "main"


class TestCreateWorktree:

    def target(self, repo, base, branch):
        return WorktreeTarget.from_base(Path(repo.working_dir), base, branch)

    def test_from_source(self, git_repo_with_branches, worktree_base):
        repository = GitRepository(git_repo_with_branches.working_dir)
        target = self.target(git_repo_with_branches, worktree_base, "feature/new")
        target.path.parent.mkdir(parents=True)

        repository.create_worktree(target, BranchStrategy.FROM_SOURCE, "develop")

        assert (target.path / "develop.txt").exists()
        assert repository.has_local_branch("feature/new")
        assert [wt.branch_name for wt in repository.worktrees()] == ["main", "feature/new"]

    def test_remote_tracking(self, git_repo_with_branches, worktree_base):
        repository = GitRepository(git_repo_with_branches.working_dir)
        target = self.target(git_repo_with_branches, worktree_base, "feature/remote-only")
        target.path.parent.mkdir(parents=True)

        repository.create_worktree(target, BranchStrategy.REMOTE_TRACKING)

        tracking = git_repo_with_branches.heads["feature/remote-only"].tracking_branch()
        assert tracking is not None
        assert tracking.name == "origin/feature/remote-only"

    def test_failure_raises_git_operation_error(self, git_repo, worktree_base):
        repository = GitRepository(git_repo.working_dir)
        target = self.target(git_repo, worktree_base, "feature/new")

        with pytest.raises(GitOperationError) as excinfo:
            repository.create_worktree(target, BranchStrategy.FROM_SOURCE, "no-such-branch")

        assert excinfo.value.command[:3] == ["git", "worktree", "add"]
        assert excinfo.value.exit_code == 1


class TestStartPoint:

    def test_local_source_used_as_is(self, git_repo_with_branches):
        repository = GitRepository(git_repo_with_branches.working_dir)
        assert repository.start_point("develop") == "develop"

    def test_remote_only_source_gets_remote_prefix(self, git_repo_with_branches):
        repository = GitRepository(git_repo_with_branches.working_dir)
        assert repository.start_point("feature/remote-only") == "origin/feature/remote-only"

    def test_unknown_and_missing_source_untouched(self, git_repo_with_branches):
        repository = GitRepository(git_repo_with_branches.working_dir)
        assert repository.start_point("nope") == "nope"
        assert repository.start_point(None) is None

    def test_from_remote_only_source(self, git_repo_with_branches, worktree_base):
        repository = GitRepository(git_repo_with_branches.working_dir)
        target = WorktreeTarget.from_base(Path(git_repo_with_branches.working_dir), worktree_base, "feature/new")
        target.path.parent.mkdir(parents=True)

        repository.create_worktree(target, BranchStrategy.FROM_SOURCE, "feature/remote-only")

        assert (target.path / "develop.txt").exists()


class TestCleanGitStderr:

    def test_removes_wrapper_quotes_only(self):
        raw = "\n  stderr: 'fatal: not a valid object name: 'feature/remote-only''"
        assert clean_git_stderr(raw) == "fatal: not a valid object name: 'feature/remote-only'"

    def test_plain_text_untouched(self):
        assert clean_git_stderr("  fatal: bad\n") == "fatal: bad"

    def test_unbalanced_wrapper_kept(self):
        assert clean_git_stderr("stderr: 'fatal: bad") == "'fatal: bad"
