"""
Click context extension for colb CLI.

Provides ColbContext dataclass that holds colb-specific data passed
through the Click command chain via ctx.obj.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from ..config import CONFIG_FILENAME, config_file_path, load_config
from ..core.bootstrap import bootstrap, configure_logging
from ..core.interfaces.presenter import IPresenter
from ..core.models.config import ColbConfig
from ..presenters.console import ConsolePresenter
from ..services.execution.runner import CommandRunner
from ..services.workflow.service import Workflow
from ..services.workspace import resolve_workspace


@dataclass
class ColbContext:
    """Extended context passed through Click command chain.

    Created once at CLI startup and passed to commands via Click's
    ctx.obj mechanism.

    Attributes:
        workspace: Canonical workspace root
        cwd: Current working directory (start of package detection)
        presenter: User-facing output
    """

    workspace: Path
    cwd: Path
    presenter: IPresenter

    @classmethod
    def create(
        cls,
        workspace: str | None = None,
        cwd: Path | None = None,
        use_color: bool | None = None,
    ) -> ColbContext:
        """Create a ColbContext for the current environment.

        Args:
            workspace: --workspace override
            cwd: Working directory override (defaults to Path.cwd())
            use_color: Force colors on or off (defaults to stdout being a TTY)

        Raises:
            WorkspaceNotFoundError: The --workspace directory does not exist
        """
        if cwd is None:
            cwd = Path.cwd()
        if use_color is None:
            use_color = sys.stdout.isatty()

        presenter = ConsolePresenter(use_color=use_color)
        bootstrap(presenter)

        return cls(
            workspace=resolve_workspace(workspace, start=cwd),
            cwd=cwd,
            presenter=presenter,
        )

    @property
    def config_path(self) -> Path:
        return config_file_path(self.workspace)

    @property
    def is_configured(self) -> bool:
        """Whether the workspace has a .colb.toml."""
        return self.config_path.exists()

    def show_workspace(self) -> None:
        """Print the workspace banner."""
        self.presenter.header("Workspace")
        if self.is_configured:
            self.presenter.context(
                f"{self.workspace} (Using configuration from {CONFIG_FILENAME})"
            )
        else:
            self.presenter.context(f"{self.workspace} (Unconfigured)")

    def load_config(self) -> ColbConfig:
        """Load the workspace configuration and apply its logging options."""
        config = load_config(self.workspace)
        configure_logging(config.logging)
        return config

    def workflow(self, config: ColbConfig) -> Workflow:
        return Workflow(
            workspace=self.workspace,
            config=config,
            runner=CommandRunner(self.presenter),
            presenter=self.presenter,
            cwd=self.cwd,
        )
