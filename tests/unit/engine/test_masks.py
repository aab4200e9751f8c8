"""Unit tests for domain/engine/masks.py."""

import pytest
from sitedeploy.core.constants import BUILTIN_IGNORE_MASKS
from sitedeploy.domain.engine.masks import matches_mask


class TestMatchesMask:
    """Tests for matches_mask."""

    @pytest.mark.parametrize(
        "path",
        ["/notes.bak", "/a/b/old.bak", "/.git", "/.gitignore", "/sub/.svn", "/Thumbs.db", "/.DS_Store", "/.idea"],
    )
    def test_builtin_masks(self, path: str) -> None:
        assert matches_mask(path, BUILTIN_IGNORE_MASKS)

    def test_name_mask_does_not_match_other_names(self) -> None:
        assert not matches_mask("/index.html", BUILTIN_IGNORE_MASKS)

    def test_anchored_mask(self) -> None:
        """Masks containing '/' match from the root only."""
        assert matches_mask("/temp/cache.txt", ["/temp/*"])
        assert not matches_mask("/app/temp/cache.txt", ["/temp/*"])

    def test_directory_only_mask(self) -> None:
        assert matches_mask("/log", ["log/"], is_dir=True)
        assert not matches_mask("/log", ["log/"], is_dir=False)

    def test_negation_last_match_wins(self) -> None:
        masks = ["*.log", "!important.log"]
        assert matches_mask("/debug.log", masks)
        assert not matches_mask("/important.log", masks)

    def test_empty_masks(self) -> None:
        assert not matches_mask("/anything", [])
        assert not matches_mask("/anything", ["", "  "])
