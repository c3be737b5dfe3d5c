from __future__ import annotations

from pathlib import Path

import graphviz


class SourceLoadError(Exception):
    """DOT ファイル読み込み時のエラー。"""


def load_source(path: str | Path) -> graphviz.Source:
    """DOT ファイルを読み込み、graphviz.Source を返す。

    構文の解析とレイアウトは描画時に Graphviz 側で行う。

    Args:
        path: DOT ファイルのパス

    Returns:
        graphviz.Source オブジェクト

    Raises:
        SourceLoadError: ファイルが無い・読めない・空の場合
    """
    path = Path(path)
    if not path.exists():
        raise SourceLoadError(f"ファイルが見つかりません: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceLoadError(f"ファイルを読み込めません: {path}: {e}") from e

    if not text.strip():
        raise SourceLoadError(f"DOT ファイルが空です: {path}")

    return graphviz.Source(text, filename=path.name)
