"""Unit tests for domain/engine/preprocessor.py."""

import subprocess
from pathlib import Path
from unittest.mock import patch

from sitedeploy.domain.engine.preprocessor import Preprocessor


class TestExpandApacheImports:
    """Tests for Preprocessor.expand_apache_imports."""

    def test_include_is_expanded(self, tmp_path: Path, recording_logger) -> None:
        (tmp_path / "lib.js").write_text("var lib = 1;")
        origin = tmp_path / "app.js"
        content = '<!--#include file="lib.js" -->\nrun();'
        result = Preprocessor(recording_logger).expand_apache_imports(content, origin)
        assert result == "var lib = 1;\nrun();"

    def test_nested_include(self, tmp_path: Path, recording_logger) -> None:
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "a.js").write_text('<!--#include file="b.js" -->')
        (tmp_path / "sub" / "b.js").write_text("b();")
        result = Preprocessor(recording_logger).expand_apache_imports(
            '<!--#include file="sub/a.js" -->', tmp_path / "app.js"
        )
        assert result == "b();"

    def test_non_utf8_include_is_kept_byte_for_byte(self, tmp_path: Path, recording_logger) -> None:
        (tmp_path / "legacy.js").write_bytes(b"var s = '\xe9t\xe9';")
        result = Preprocessor(recording_logger).expand_apache_imports(
            '<!--#include file="legacy.js" -->', tmp_path / "app.js"
        )
        assert result.encode("utf-8", "surrogateescape") == b"var s = '\xe9t\xe9';"

    def test_missing_include_is_kept_and_reported(self, tmp_path: Path, recording_logger) -> None:
        content = '<!--#include file="missing.js" -->'
        result = Preprocessor(recording_logger).expand_apache_imports(content, tmp_path / "app.js")
        assert result == content
        assert recording_logger.records[0][1] == "red"


class TestExpandCssImports:
    """Tests for Preprocessor.expand_css_imports."""

    def test_local_imports_are_inlined(self, tmp_path: Path, recording_logger) -> None:
        (tmp_path / "reset.css").write_text("* { margin: 0; }")
        (tmp_path / "grid.css").write_text(".row {}")
        content = "@import url('reset.css');\n@import \"grid.css\";\nbody {}"
        result = Preprocessor(recording_logger).expand_css_imports(content, tmp_path / "style.css")
        assert result == "* { margin: 0; }\n.row {}\nbody {}"

    def test_media_and_remote_imports_are_kept(self, tmp_path: Path, recording_logger) -> None:
        (tmp_path / "print.css").write_text("p {}")
        content = "@import url(print.css) print;\n@import url(https://cdn.example.com/x.css);"
        result = Preprocessor(recording_logger).expand_css_imports(content, tmp_path / "style.css")
        assert result == content


class TestCompress:
    """Tests for compress_js / compress_css."""

    def test_missing_tool_leaves_content(self, tmp_path: Path, recording_logger) -> None:
        preprocessor = Preprocessor(recording_logger, js_command=["sitedeploy-missing-uglifyjs"])
        result = preprocessor.compress_js("var a = 1;", tmp_path / "app.js")
        assert result == "var a = 1;"
        message, color = recording_logger.records[0]
        assert "Unable to compress app.js" in message
        assert color == "red"

    def test_tool_output_is_used(self, tmp_path: Path, recording_logger) -> None:
        completed = subprocess.CompletedProcess(["cleancss"], 0, stdout="body{}", stderr="")
        with patch("sitedeploy.domain.engine.preprocessor.subprocess.run", return_value=completed) as run:
            result = Preprocessor(recording_logger).compress_css("body { }", tmp_path / "style.css")
        assert result == "body{}"
        assert run.call_args.kwargs["input"] == "body { }"
        assert run.call_args.args[0] == ["cleancss"]

    def test_tool_failure_leaves_content(self, tmp_path: Path, recording_logger) -> None:
        completed = subprocess.CompletedProcess(["uglifyjs"], 1, stdout="", stderr="Parse error")
        with patch("sitedeploy.domain.engine.preprocessor.subprocess.run", return_value=completed):
            result = Preprocessor(recording_logger).compress_js("var =", tmp_path / "app.js")
        assert result == "var ="
        assert "Parse error" in recording_logger.messages[0]
