from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from graphviz_view.formats import DEFAULT_FORMAT, RenderError


class RenderOutcome(Enum):
    RENDERED = "rendered"
    NOT_RENDERED = "not_rendered"
    FAILED = "failed"


@dataclass(frozen=True)
class RenderRequest:
    """1回の描画要求。

    リクエストごとにホストの状態から組み立て、描画後は破棄する。
    """

    graph: Any = None
    format_override: str | None = None
    configured_format: str | None = None
    class_default_format: str | None = None

    def format_candidates(self) -> list[str | None]:
        """優先順（リクエスト > アプリ設定 > ビュー既定）に並べた候補。"""
        return [
            self.format_override,
            self.configured_format,
            self.class_default_format,
        ]

    def resolve_format(self) -> str:
        """最初の空でない候補を返す。どれも空なら DEFAULT_FORMAT。"""
        for candidate in self.format_candidates():
            if candidate:
                return candidate
        return DEFAULT_FORMAT


@dataclass(frozen=True)
class RenderResult:
    """描画結果。"""

    outcome: RenderOutcome
    format: str | None = None
    content_type: str | None = None
    body: bytes | None = None
    error: RenderError | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is RenderOutcome.RENDERED

    @property
    def failed(self) -> bool:
        return self.outcome is RenderOutcome.FAILED

    @classmethod
    def rendered(cls, fmt: str, content_type: str, body: bytes) -> RenderResult:
        return cls(RenderOutcome.RENDERED, fmt, content_type, body)

    @classmethod
    def not_rendered(cls) -> RenderResult:
        return cls(RenderOutcome.NOT_RENDERED)

    @classmethod
    def failure(cls, fmt: str, error: RenderError) -> RenderResult:
        return cls(RenderOutcome.FAILED, fmt, error=error)
