"""eazypm CLI - interactive safe-chain reinstall of a project's dependencies."""

import platform
import subprocess
import sys
from pathlib import Path

import click
from rich.markup import escape

from eazypm import __version__
from eazypm.config_runtime import load_runtime_config
from eazypm.detector import default_choice_index, package_manager_choices
from eazypm.exceptions import ManifestError
from eazypm.manifest import read_dependencies
from eazypm.orchestrator import REINSTALL_MESSAGE, Orchestrator
from eazypm.pipeline import prompts
from eazypm.pipeline.renderer import SpinnerRenderer
from eazypm.pipeline.structures import RunContext, RunStage, StepResult, TaskStatus
from eazypm.pipeline.ui import console, print_banner, print_command, print_error, print_warning
from eazypm.utils.error_handler import handle_exceptions
from eazypm.utils.exit_codes import ExitCodes
from eazypm.utils.logging import logger

if platform.system() == "Windows":
    subprocess.run(["cmd", "/c", "chcp", "65001"], shell=False, capture_output=True, timeout=1)


def _report_failure(spinner: SpinnerRenderer, result: StepResult | None) -> None:
    if result is not None and result.status == TaskStatus.CANCELLED:
        spinner.fail("Interrupted")
        return
    spinner.fail("Something went wrong during installation")
    if result is not None and result.error:
        print_error(result.error)


def run(root: Path) -> int:
    """Run the interactive flow in root and return the process exit code."""
    ctx = RunContext(root=root, config=load_runtime_config(root))
    logger.debug(f"eazypm {__version__} running in {root}")

    print_banner()

    _, choices = package_manager_choices(root, timeout=ctx.config["timeouts"]["version_check"])
    default_index = default_choice_index(choices)
    if default_index is None:
        print_error("No supported package manager (npm, pnpm, yarn, bun) is installed")
        return ExitCodes.TASK_INCOMPLETE

    pm = prompts.select_package_manager(choices, default_index)

    try:
        deps = read_dependencies(root)
    except ManifestError as e:
        print_error(str(e))
        return ExitCodes.TASK_INCOMPLETE

    if not deps:
        print_error(
            "No dependencies found, you might be in the wrong directory or missing a dependencies file"
        )
        return ExitCodes.TASK_INCOMPLETE

    orchestrator = Orchestrator(ctx, pm)
    with SpinnerRenderer("Preparing eazypm") as spinner:
        orchestrator.observer = spinner
        result = orchestrator.ensure_scanner()
        if result.success:
            result = orchestrator.generate_command(deps)
    if not result.success:
        _report_failure(spinner, result)
        return ExitCodes.SUCCESS

    console.print(f"Command saved to {escape(ctx.command_file.name)}\n", highlight=False)
    print_command(str(orchestrator.command))

    if not prompts.confirm_run():
        console.print("\n")
        console.print(
            f"Skipped automatic reinstallation. You can run the command from "
            f"{escape(ctx.command_file.name)} manually",
            highlight=False,
            soft_wrap=True,
        )
        return ExitCodes.SUCCESS

    spinner = SpinnerRenderer(REINSTALL_MESSAGE)
    result = orchestrator.backup()
    if not result.success:
        _report_failure(spinner, result)
        return ExitCodes.SUCCESS
    console.print(
        f"Backup created at: {escape(str(orchestrator.backup_dir))}\n", highlight=False, soft_wrap=True
    )

    orchestrator.observer = spinner
    with spinner:
        outcome = orchestrator.reinstall()

    if outcome.stage == RunStage.DONE:
        spinner.succeed("eazypm safe-chain install completed")
        return ExitCodes.SUCCESS

    _report_failure(spinner, outcome.failure)
    print_warning(
        f"Backup is kept at {outcome.backup_dir}; node_modules may be incomplete until "
        "you rerun eazypm or restore the backup"
    )
    return ExitCodes.SUCCESS


@click.command(name="eazypm")
@click.version_option(version=__version__, prog_name="eazypm")
@click.help_option("-h", "--help")
@handle_exceptions
def cli():
    """Reinstall this project's dependencies through the Aikido safe-chain scanner.

    \b
    Run from the directory holding package.json:
      1. Pick the package manager (lockfile-detected one is preselected)
      2. The scanner install command is saved to install-command.txt
      3. Optionally back up package.json, lockfiles and node_modules
         into backup-<timestamp>/ and reinstall everything

    \b
    Exit Codes:
      0 = Finished, skipped, interrupted, or reinstall failed (see output)
      1 = No dependencies found or no package manager installed"""
    try:
        code = run(Path.cwd())
    except (KeyboardInterrupt, click.Abort):
        # click.confirm turns Ctrl+C into Abort
        console.print()
        code = ExitCodes.INTERRUPTED
    sys.exit(code)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
