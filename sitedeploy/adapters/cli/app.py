"""
Main CLI application
"""
import typer
from pathlib import Path
from typing import Optional

from ...core.logging import setup_logging, get_logger
from .deploy import register_deploy_command

logger = get_logger(__name__)

# Create main app
app = typer.Typer(
    name="sitedeploy",
    add_completion=False,
    help="Multi-target FTP/SFTP deployment tool",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

register_deploy_command(app)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Diagnostic log file path",
    ),
):
    """
    Sitedeploy - deploy local directories to FTP and SFTP servers
    
    Use subcommands to perform different operations:
    - run: Deploy (or generate manifests for) all configured sections
    """
    setup_logging(level=log_level, log_file=log_file)


def run():
    """CLI entry point"""
    app()


if __name__ == "__main__":
    run()
