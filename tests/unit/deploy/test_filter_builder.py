"""Unit tests for domain/deploy/filters.py."""

import pytest
from sitedeploy.domain.deploy.filters import build_filters, resolve_preprocess_masks


class TestBuildFilters:
    """Tests for build_filters."""

    @pytest.mark.parametrize("masks", [(), ("*.js",), ("*.less", "*.css")])
    def test_no_preprocessing_means_empty_chain(self, make_section, recording_logger, masks) -> None:
        section = make_section(preprocess=False, preprocess_masks=masks)
        assert len(build_filters(section, recording_logger)) == 0

    def test_five_step_pipeline(self, make_section, recording_logger) -> None:
        chain = build_filters(make_section(preprocess=True), recording_logger)
        steps = [(f.tag, f.name, f.final) for f in chain]
        assert steps == [
            ("js", "expand_apache_imports", False),
            ("js", "compress_js", True),
            ("css", "expand_apache_imports", False),
            ("css", "expand_css_imports", False),
            ("css", "compress_css", True),
        ]

    def test_preprocessor_uses_deploy_logger(self, make_section, recording_logger) -> None:
        chain = build_filters(make_section(preprocess=True), recording_logger)
        assert all(f.func.__self__.logger is recording_logger for f in chain)


class TestResolvePreprocessMasks:
    """Tests for resolve_preprocess_masks."""

    def test_defaults_when_empty(self, make_section) -> None:
        assert resolve_preprocess_masks(make_section(preprocess=True)) == ("*.js", "*.css")

    def test_declared_masks_verbatim(self, make_section) -> None:
        section = make_section(preprocess=True, preprocess_masks=("assets/*.js",))
        assert resolve_preprocess_masks(section) == ("assets/*.js",)

    def test_none_without_preprocessing(self, make_section) -> None:
        assert resolve_preprocess_masks(make_section(preprocess=False, preprocess_masks=("*.js",))) == ()
