"""FastAPI 向けのアダプタ。

ルートハンドラから graph_response() を返すだけでグラフを描画できる。

    @router.get("/graph.{fmt}")
    async def graph(fmt: str):
        return graph_response(build_graph(), fmt)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import HTTPException, Response

from graphviz_view.context import RequestContext
from graphviz_view.models import RenderOutcome
from graphviz_view.view import GraphvizView

logger = logging.getLogger(__name__)

_DEFAULT_VIEW = GraphvizView()


def graph_response(
    graph: Any,
    fmt: str | None = None,
    *,
    view: GraphvizView | None = None,
    config: Mapping[str, Any] | None = None,
) -> Response:
    """グラフを描画して FastAPI の Response を返す。

    Raises:
        HTTPException: グラフが無ければ 404、描画に失敗すれば 500
    """
    context = RequestContext.for_graph(graph, fmt, config=config, log=logger)
    result = (view or _DEFAULT_VIEW).process(context)

    if result.outcome is RenderOutcome.NOT_RENDERED:
        raise HTTPException(status_code=404, detail="No graph to render")
    if result.outcome is RenderOutcome.FAILED:
        raise HTTPException(status_code=500, detail="; ".join(context.errors))

    return Response(
        content=context.response.body,
        media_type=context.response.content_type,
    )
