"""
Asset preprocessor

Provides the filter functions used by the js/css filter chain. Compression is
delegated to external tools; when a tool is missing the content passes through.
"""
import re
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from ...core.constants import JS_COMPRESS_COMMAND, CSS_COMPRESS_COMMAND, SOURCE_ENCODING, SOURCE_ERRORS
from ...core.interfaces import DeployLogger
from ...core.logging import get_logger

logger = get_logger(__name__)

APACHE_INCLUDE_RE = re.compile(r'<!--#include\s+file="([^"]+)"\s*-->')
CSS_IMPORT_RE = re.compile(
    r"""@import\s+(?:url\(\s*)?(["']?)([^"')\s;]+)\1\s*\)?\s*([^;]*);"""
)


class Preprocessor:
    """JavaScript and CSS preprocessor"""

    def __init__(
        self,
        deploy_logger: DeployLogger,
        js_command: Optional[Sequence[str]] = None,
        css_command: Optional[Sequence[str]] = None,
    ):
        self.logger = deploy_logger
        self.js_command = tuple(js_command or JS_COMPRESS_COMMAND)
        self.css_command = tuple(css_command or CSS_COMPRESS_COMMAND)

    # ============================================================
    # Import expansion
    # ============================================================

    def expand_apache_imports(self, content: str, origin: Path) -> str:
        """Expand ``<!--#include file="..." -->`` directives relative to the origin file"""

        def replace(match: re.Match) -> str:
            file = origin.parent / match.group(1)
            if not file.is_file():
                self.logger.log(f"Include file {file} not found (in {origin})", "red")
                return match.group(0)
            return self.expand_apache_imports(file.read_text(encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS), file)

        return APACHE_INCLUDE_RE.sub(replace, content)

    def expand_css_imports(self, content: str, origin: Path) -> str:
        """Inline local ``@import`` rules without media queries"""

        def replace(match: re.Match) -> str:
            url, media = match.group(2), match.group(3).strip()
            if media or "://" in url or url.startswith("//"):
                return match.group(0)
            file = origin.parent / url
            if not file.is_file():
                self.logger.log(f"Imported file {file} not found (in {origin})", "red")
                return match.group(0)
            return self.expand_css_imports(file.read_text(encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS), file)

        return CSS_IMPORT_RE.sub(replace, content)

    # ============================================================
    # Compression
    # ============================================================

    def compress_js(self, content: str, origin: Path) -> str:
        return self._compress(self.js_command, content, origin)

    def compress_css(self, content: str, origin: Path) -> str:
        return self._compress(self.css_command, content, origin)

    def _compress(self, command: Sequence[str], content: str, origin: Path) -> str:
        try:
            result = subprocess.run(
                list(command),
                input=content,
                capture_output=True,
                text=True,
                encoding=SOURCE_ENCODING,
                errors=SOURCE_ERRORS,
                check=False,
            )  # nosec: B603
        except OSError as e:
            self.logger.log(f"Unable to compress {origin.name}: {command[0]} is not available ({e})", "red")
            return content

        if result.returncode != 0:
            self.logger.log(
                f"Unable to compress {origin.name}: {result.stderr.strip() or result.returncode}", "red"
            )
            return content

        logger.debug(f"[compress] {origin} {len(content)} → {len(result.stdout)} bytes")
        return result.stdout
