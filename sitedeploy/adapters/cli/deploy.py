"""
Deploy CLI command
"""
import typer
from pathlib import Path
from typing import Optional, Dict, Any

from ...core.logging import get_logger, get_stderr_console
from ...core.exceptions import ConfigError, ServerError, TransferError
from ...core.constants import RUN_MODES
from ...domain.deploy import Runner
from ...adapters.config.loader import ConfigLoader
from ...adapters.config.section_parser import parse_config

logger = get_logger(__name__)
stderr_console = get_stderr_console()


def register_deploy_command(app: typer.Typer) -> None:
    """Register run command on the main app"""
    app.command(name="run")(deploy_run)


def deploy_run(
    config_path: str = typer.Argument(..., help="Configuration file path (TOML)"),
    mode: Optional[str] = typer.Option(
        None, "--mode", "-m", help="Run mode: deploy (sync with the server) or generate (write manifests only)"
    ),
    test: bool = typer.Option(
        False, "--test", "-t", help="Test mode for every section: report changes without touching the server"
    ),
):
    """
    Deploy all configured sections

    Examples:
        sitedeploy run deployment.toml
        sitedeploy run deployment.toml --test
        sitedeploy run deployment.toml --mode generate
    """
    try:
        path = Path(config_path).expanduser()
        if not path.exists():
            stderr_console.print(f"[red]Error:[/red] Configuration file not found: {config_path}")
            raise typer.Exit(1)

        cli_overrides: Dict[str, Any] = {}
        if mode is not None:
            if mode not in RUN_MODES:
                raise ConfigError(f"Unknown mode '{mode}', expected one of: {', '.join(RUN_MODES)}")
            cli_overrides["mode"] = mode

        cfg = ConfigLoader().load(toml_path=path, cli_overrides=cli_overrides)
        config = parse_config(cfg, config_file_path=path, force_test_mode=test)

        Runner().run(config)

    except ConfigError as e:
        stderr_console.print(f"[red]Config Error:[/red] {e}")
        raise typer.Exit(1)
    except (ServerError, TransferError) as e:
        stderr_console.print(f"[red]Deploy Error:[/red] {e}")
        raise typer.Exit(1)
    except typer.Exit:
        raise
    except Exception as e:
        logger.exception("Failed to deploy")
        stderr_console.print(f"[red]Error:[/red] Failed to deploy: {e}")
        raise typer.Exit(1)
