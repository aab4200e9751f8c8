"""Unit tests for domain/deploy/assembler.py (create_deployer)."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from sitedeploy.core.constants import BUILTIN_IGNORE_MASKS, DEFAULT_DEPLOYMENT_FILE
from sitedeploy.core.exceptions import ConfigError
from sitedeploy.domain.deploy.assembler import create_deployer, merge_ignore_masks
from sitedeploy.domain.deploy.hooks import HookUnit
from sitedeploy.domain.deploy.models import Config, FunctionHook
from sitedeploy.infrastructure.servers import FtpServer, SshServer


class TestValidation:
    """Remote URL validation happens before anything is created."""

    @pytest.mark.parametrize("remote", ["", "not a url", "example.com/www"])
    def test_invalid_remote(self, make_section, recording_logger, remote: str) -> None:
        factory = MagicMock()
        with pytest.raises(ConfigError, match="Missing or invalid 'remote' URL in config"):
            create_deployer(Config(), make_section(remote=remote), recording_logger, factory)
        factory.assert_not_called()

    @pytest.mark.parametrize(
        ("remote", "server_type"),
        [("ftp://host/path", FtpServer), ("sftp://user@host/path", SshServer)],
    )
    def test_valid_remote(self, make_section, recording_logger, remote: str, server_type: type) -> None:
        deployer = create_deployer(Config(), make_section(remote=remote), recording_logger)
        assert isinstance(deployer.server, server_type)


class TestAssembly:
    """Tests for the assembled Deployer."""

    def test_server_and_local_root(self, make_section, recording_logger, fake_server, site_dir) -> None:
        deployer = create_deployer(Config(), make_section(), recording_logger, lambda s: fake_server)
        assert deployer.server is fake_server
        assert deployer.local == site_dir
        assert deployer.logger is recording_logger

    def test_no_preprocessing(self, make_section, recording_logger, fake_server) -> None:
        section = make_section(preprocess=False, preprocess_masks=("*.js",))
        deployer = create_deployer(Config(), section, recording_logger, lambda s: fake_server)
        assert len(deployer.filters) == 0
        assert deployer.preprocess_masks == ()

    def test_preprocessing_defaults(self, make_section, recording_logger, fake_server) -> None:
        deployer = create_deployer(Config(), make_section(preprocess=True), recording_logger, lambda s: fake_server)
        assert len(deployer.filters) == 5
        assert list(deployer.preprocess_masks) == ["*.js", "*.css"]

    @pytest.mark.parametrize("declared", [(), ("*.log",), ("*.bak", "/temp/*"), (".git*",)])
    def test_builtin_ignore_masks_always_present(self, make_section, recording_logger, fake_server, declared) -> None:
        deployer = create_deployer(Config(), make_section(ignore_masks=declared), recording_logger, lambda s: fake_server)
        assert set(BUILTIN_IGNORE_MASKS) <= set(deployer.ignore_masks)
        assert deployer.ignore_masks == BUILTIN_IGNORE_MASKS + declared

    def test_merge_ignore_masks_keeps_duplicates(self, make_section) -> None:
        merged = merge_ignore_masks(make_section(ignore_masks=("*.bak",)))
        assert merged.count("*.bak") == 2

    def test_default_deployment_file(self, make_section, recording_logger, fake_server) -> None:
        deployer = create_deployer(Config(), make_section(deploy_file=""), recording_logger, lambda s: fake_server)
        assert deployer.deployment_file == DEFAULT_DEPLOYMENT_FILE

    def test_deployment_file_override(self, make_section, recording_logger, fake_server) -> None:
        deployer = create_deployer(
            Config(), make_section(deploy_file=".deployment"), recording_logger, lambda s: fake_server
        )
        assert deployer.deployment_file == ".deployment"

    def test_scalar_settings(self, make_section, recording_logger, fake_server) -> None:
        section = make_section(allow_delete=False, purges=("temp/cache",), test_mode=True)
        config = Config(temp_dir=Path("/tmp/deploy-test"))
        deployer = create_deployer(config, section, recording_logger, lambda s: fake_server)
        assert deployer.allow_delete is False
        assert deployer.to_purge == ("temp/cache",)
        assert deployer.test_mode is True
        assert deployer.temp_dir == Path("/tmp/deploy-test")

    def test_hook_units_attached(self, make_section, recording_logger, fake_server) -> None:
        func = MagicMock()
        section = make_section(before_callbacks=(FunctionHook(func),))
        config = Config()
        deployer = create_deployer(config, section, recording_logger, lambda s: fake_server)

        (before,) = deployer.settings.run_before
        (after,) = deployer.settings.run_after
        assert isinstance(before, HookUnit)
        assert isinstance(after, HookUnit)
        assert before.section is section
        assert before.config is config

    def test_assembly_does_not_connect(self, make_section, recording_logger, fake_server) -> None:
        create_deployer(Config(), make_section(), recording_logger, lambda s: fake_server)
        assert fake_server.calls == []
