"""Worktree setup orchestration"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, MutableMapping, Optional

from git_worktree_setup.config import Config
from git_worktree_setup.constants import WORKTREE_PATH_ENV
from git_worktree_setup.core.pipeline import PipelineResult, Step, StepStatus, run_pipeline
from git_worktree_setup.exceptions import NotAGitRepositoryError
from git_worktree_setup.logging_config import get_logger
from git_worktree_setup.models.worktree import BranchStrategy, WorktreeTarget
from git_worktree_setup.services.branch_resolution import describe_strategy, resolve_strategy
from git_worktree_setup.services.command_runner import CommandRunner
from git_worktree_setup.services.dependency_installer import DependencyInstaller
from git_worktree_setup.services.display_service import DisplayService
from git_worktree_setup.services.env_seeder import EnvironmentSeeder
from git_worktree_setup.services.git import GitRepository
from git_worktree_setup.services.preflight import configured_base, prepare_target
from git_worktree_setup.services.prompter import InteractivePrompter
from git_worktree_setup.services.shared_config import SharedConfigLinker
from git_worktree_setup.services.terminal import RichTerminal

logger = get_logger(__name__)


@dataclass
class SetupContext:
    """Values produced by earlier steps and read by later ones."""

    config: Config
    repository: Optional[GitRepository] = None
    target: Optional[WorktreeTarget] = None
    strategy: Optional[BranchStrategy] = None


class WorktreeSetup:
    """Creates and seeds one worktree.

    Collaborators are injectable so the pipeline can run against fakes:
    `repository` (ref queries and worktree creation), `terminal` (prompt
    answers), `runner` (package manager commands) and `display`.
    """

    def __init__(
        self,
        config: Config,
        repository=None,
        terminal=None,
        runner=None,
        display: Optional[DisplayService] = None,
        cwd: Optional[Path] = None,
        environ: Optional[MutableMapping[str, str]] = None,
    ):
        self.config = config
        self.repository = repository
        self.display = display or DisplayService()
        self.terminal = terminal or RichTerminal(self.display.console)
        self.runner = runner or CommandRunner()
        self.cwd = cwd or Path.cwd()
        self.environ = os.environ if environ is None else environ

    def steps(self) -> List[Step[SetupContext]]:
        return [
            Step("locate repository", self._locate_repository),
            Step("prompt", self._prompt),
            Step("preflight", self._preflight),
            Step("create worktree", self._create_worktree),
            Step("environment files", self._seed_environment),
            Step("shared config", self._link_shared_config),
            Step("shared document", self._copy_shared_doc),
            Step("install", self._install),
            Step("generate", self._generate),
            Step("summary", self._report),
        ]

    def run(self) -> PipelineResult:
        """Run every step; the result says how far it got."""
        context = SetupContext(config=self.config)
        result = run_pipeline(self.steps(), context)
        self.config = context.config
        return result

    def _locate_repository(self, context: SetupContext) -> StepStatus:
        repository = self.repository or GitRepository.discover(
            self.cwd, remote_name=context.config.remote_name
        )
        if repository is None:
            raise NotAGitRepositoryError(str(self.cwd))
        context.repository = repository
        logger.info(f"Main repository: {repository.root}")
        return StepStatus.OK

    def _prompt(self, context: SetupContext) -> StepStatus:
        if not context.config.interactive:
            return StepStatus.SKIPPED

        prompter = InteractivePrompter(context.repository, self.terminal, self.display)
        base = configured_base(context.config, context.repository.root)
        context.config = prompter.run(context.config, str(base))
        return StepStatus.OK

    def _preflight(self, context: SetupContext) -> StepStatus:
        self.display.header(f"Worktree Setup: {context.config.branch}")
        self.display.success(f"Main repository: {context.repository.root}")
        context.target = prepare_target(context.config, context.repository.root, self.cwd)
        return StepStatus.OK

    def _create_worktree(self, context: SetupContext) -> StepStatus:
        config, target = context.config, context.target
        self.display.step("Creating worktree...")

        # Parent directories for nested branch names (bugfix/ for bugfix/issue-123)
        target.path.parent.mkdir(parents=True, exist_ok=True)

        context.strategy = resolve_strategy(target.branch, config.source_branch, context.repository)
        context.repository.create_worktree(target, context.strategy, config.source_branch)
        self.display.success(
            describe_strategy(context.strategy, target.branch, config.source_branch, config.remote_name)
        )
        return StepStatus.OK

    def _seed_environment(self, context: SetupContext) -> StepStatus:
        self.display.step("Copying environment files...")
        copied = EnvironmentSeeder(context.config, self.display).seed(context.target)
        return StepStatus.OK if copied else StepStatus.WARNED

    def _link_shared_config(self, context: SetupContext) -> StepStatus:
        self.display.step(f"Symlinking {context.config.shared_config_dir} directory...")
        linked = SharedConfigLinker(context.config, self.display).link_shared_dir(context.target)
        return StepStatus.OK if linked else StepStatus.WARNED

    def _copy_shared_doc(self, context: SetupContext) -> StepStatus:
        self.display.step(f"Copying {context.config.shared_doc_file}...")
        copied = SharedConfigLinker(context.config, self.display).copy_shared_doc(context.target)
        return StepStatus.OK if copied else StepStatus.WARNED

    def _installer(self, context: SetupContext) -> DependencyInstaller:
        return DependencyInstaller(context.config, self.runner, self.display)

    def _install(self, context: SetupContext) -> StepStatus:
        package_manager = context.config.package_manager
        if context.config.skip_install:
            self.display.step(f"Skipping {package_manager} install (--no-install flag)")
            return StepStatus.SKIPPED

        self.display.step(f"Installing {package_manager} dependencies...")
        ran = self._installer(context).install(context.target.path)
        return StepStatus.OK if ran else StepStatus.WARNED

    def _generate(self, context: SetupContext) -> StepStatus:
        script = context.config.generate_script
        if context.config.skip_install:
            self.display.step(f"Skipping {script} (--no-install flag)")
            return StepStatus.SKIPPED

        self.display.step(f"Running {script}...")
        ran = self._installer(context).generate(context.target.path)
        return StepStatus.OK if ran else StepStatus.WARNED

    def _report(self, context: SetupContext) -> StepStatus:
        self.display.summary(context.target.path, context.target.branch)
        self.environ[WORKTREE_PATH_ENV] = str(context.target.path)
        return StepStatus.OK
