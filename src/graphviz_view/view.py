"""Graphviz ビュー。

stash に置かれたグラフを指定形式で描画し、レスポンスに
本文と Content-Type を書き込む。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from graphviz_view.context import STASH_KEY, HostContext, lookup
from graphviz_view.formats import FORMAT_TABLE, FormatTable, RenderError
from graphviz_view.models import RenderRequest, RenderResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewConfig:
    """ビュー単位の設定。"""

    format: str | None = None


class GraphvizView:
    """グラフオブジェクトを描画してレスポンスへ書き込むビュー。

    設定はコンストラクタで明示的に受け取る。インスタンスは不変な設定しか
    持たないため、複数リクエストから同時に使ってよい。
    """

    def __init__(
        self,
        config: ViewConfig | None = None,
        formats: FormatTable = FORMAT_TABLE,
    ) -> None:
        self.config = config or ViewConfig()
        self.formats = formats

    def build_request(self, context: HostContext) -> RenderRequest:
        """ホストのコンテキストから RenderRequest を組み立てる。"""
        return RenderRequest(
            graph=lookup(context.stash, STASH_KEY, "graph"),
            format_override=lookup(context.stash, STASH_KEY, "format"),
            configured_format=lookup(context.config, STASH_KEY, "format"),
            class_default_format=self.config.format,
        )

    def render(self, request: RenderRequest) -> RenderResult:
        """形式を解決してグラフをエンコードする。レスポンスには触れない。

        Raises:
            UnknownFormatError: 未知の形式の場合
            RenderFailureError: エンコードに失敗した場合
        """
        fmt = request.resolve_format()
        spec = self.formats.lookup(fmt)
        output = spec.encode(request.graph)
        return RenderResult.rendered(fmt, spec.content_type, output)

    def process(self, context: HostContext) -> RenderResult:
        """stash のグラフを描画し、結果をレスポンスへ書き込む。

        グラフが無ければ NOT_RENDERED を返す（エラーではない）。
        描画に失敗した場合はエラーをログと context.error() に報告して
        FAILED を返し、レスポンスは変更しない。
        """
        request = self.build_request(context)
        if request.graph is None:
            if context.debug:
                context.log.debug(
                    f"No graph specified in stash[{STASH_KEY!r}]['graph'] for rendering"
                )
            return RenderResult.not_rendered()

        fmt = request.resolve_format()
        if context.debug:
            context.log.debug(f"Rendering graph as ({fmt})")

        try:
            result = self.render(request)
        except RenderError as e:
            context.log.error(str(e))
            context.error(str(e))
            return RenderResult.failure(fmt, e)

        if not context.response.content_type:
            context.response.content_type = result.content_type
        context.response.body = result.body
        logger.debug("rendered %d bytes as %s", len(result.body or b""), fmt)
        return result
