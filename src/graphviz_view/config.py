"""設定ファイルの読み込みと設定値の管理。

TOML 形式の設定ファイルを読み込み、AppConfig として返す。
設定ファイルが存在しない場合はデフォルト値を使用する。
"""

from __future__ import annotations

import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class GraphvizConfig:
    """アプリケーション全体での描画設定。"""

    format: str | None = None    # ビュー既定より優先される出力形式


@dataclass
class ViewSettings:
    """ビュー単位の描画設定。"""

    format: str | None = None    # どこにも指定が無いときの出力形式


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class AppConfig:
    """アプリケーション全体の設定。"""

    graphviz: GraphvizConfig = field(default_factory=GraphvizConfig)
    view: ViewSettings = field(default_factory=ViewSettings)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def host_config(self) -> dict[str, Any]:
        """リクエストコンテキストの config として渡す辞書を返す。"""
        return {"graphviz": {"format": self.graphviz.format}}


# ---------------------------------------------------------------------------
# バリデーション
# ---------------------------------------------------------------------------

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _fail(message: str) -> None:
    print(f"設定エラー: {message}", file=sys.stderr)
    sys.exit(1)


def _validate_format(value: object, key: str) -> str:
    """出力形式の値を検証する（既知の形式かどうかは描画時に判定する）。"""
    if not isinstance(value, str) or not value.strip():
        _fail(f"{key} は空でない文字列で指定してください")
    return str(value).strip()


def _build_graphviz(data: dict[str, object]) -> GraphvizConfig:
    cfg = GraphvizConfig()
    if "format" in data:
        cfg.format = _validate_format(data["format"], "graphviz.format")
    return cfg


def _build_view(data: dict[str, object]) -> ViewSettings:
    cfg = ViewSettings()
    if "format" in data:
        cfg.format = _validate_format(data["format"], "view.format")
    return cfg


def _build_logging(data: dict[str, object]) -> LoggingConfig:
    cfg = LoggingConfig()
    if "level" in data:
        val = data["level"]
        if not isinstance(val, str) or val.upper() not in _LOG_LEVELS:
            _fail(f"logging.level は {', '.join(_LOG_LEVELS)} のいずれかで指定してください")
        cfg.level = str(val).upper()
    return cfg


# ---------------------------------------------------------------------------
# ロード
# ---------------------------------------------------------------------------


def load_config(path: Path | None) -> AppConfig:
    """設定ファイルを読み込んで AppConfig を返す。

    Args:
        path: 設定ファイルのパス。None の場合はカレントディレクトリの
              config.toml を探索し、存在しなければデフォルト値を使用する。

    Returns:
        AppConfig オブジェクト。
    """
    config_path = path if path is not None else Path("config.toml")

    if not config_path.exists():
        return AppConfig()

    with open(config_path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            _fail(f"{config_path} を解析できません: {e}")

    app_config = AppConfig()

    graphviz = data.get("graphviz")
    if isinstance(graphviz, dict):
        app_config.graphviz = _build_graphviz(graphviz)

    view = data.get("view")
    if isinstance(view, dict):
        app_config.view = _build_view(view)

    logging_ = data.get("logging")
    if isinstance(logging_, dict):
        app_config.logging = _build_logging(logging_)

    return app_config
