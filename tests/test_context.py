from __future__ import annotations

import logging

from graphviz_view.context import RequestContext, lookup


class TestLookup:
    def test_nested(self) -> None:
        assert lookup({"a": {"b": 1}}, "a", "b") == 1

    def test_missing(self) -> None:
        assert lookup({"a": {}}, "a", "b") is None
        assert lookup({}, "a", "b") is None
        assert lookup(None, "a") is None

    def test_non_mapping_in_path(self) -> None:
        assert lookup({"a": "text"}, "a", "b") is None


class TestRequestContext:
    def test_for_graph(self) -> None:
        graph = object()
        context = RequestContext.for_graph(graph, "svg", config={"graphviz": {"format": "gif"}})
        assert context.stash == {"graphviz": {"graph": graph, "format": "svg"}}
        assert context.config == {"graphviz": {"format": "gif"}}

    def test_for_graph_without_format(self) -> None:
        context = RequestContext.for_graph(None)
        assert context.stash == {"graphviz": {"graph": None}}
        assert context.config == {}

    def test_debug_follows_logger_level(self) -> None:
        log = logging.getLogger("graphviz_view.test_context")
        context = RequestContext(log=log)
        log.setLevel(logging.DEBUG)
        assert context.debug
        log.setLevel(logging.WARNING)
        assert not context.debug

    def test_error_accumulates(self) -> None:
        context = RequestContext()
        context.error("first")
        context.error("second")
        assert context.errors == ["first", "second"]
