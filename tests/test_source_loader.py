from __future__ import annotations

from pathlib import Path

import graphviz
import pytest

from graphviz_view.source_loader import SourceLoadError, load_source


class TestLoadSource:
    def test_load(self, tmp_path: Path) -> None:
        dot = tmp_path / "hello.dot"
        dot.write_text('digraph { "Hello" -> "world" }\n', encoding="utf-8")
        source = load_source(dot)
        assert isinstance(source, graphviz.Source)
        assert '"Hello" -> "world"' in source.source

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceLoadError, match="ファイルが見つかりません"):
            load_source(tmp_path / "missing.dot")

    def test_empty_file(self, tmp_path: Path) -> None:
        dot = tmp_path / "empty.dot"
        dot.write_text("  \n", encoding="utf-8")
        with pytest.raises(SourceLoadError, match="空です"):
            load_source(dot)
