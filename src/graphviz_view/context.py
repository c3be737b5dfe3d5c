"""ホスト（リクエスト処理フレームワーク）との境界。

GraphvizView が必要とする能力を HostContext プロトコルとして定義し、
フレームワークを持たない呼び出し元（CLI・テスト・FastAPI アダプタ）向けに
インメモリ実装 RequestContext を提供する。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

STASH_KEY = "graphviz"


class LogSink(Protocol):
    def debug(self, msg: str) -> None: ...
    def error(self, msg: str) -> None: ...


class ResponseSink(Protocol):
    content_type: str | None
    body: bytes | None


class HostContext(Protocol):
    stash: Mapping[str, Any]
    config: Mapping[str, Any]
    response: ResponseSink
    log: LogSink

    @property
    def debug(self) -> bool: ...

    def error(self, message: str) -> None: ...


def lookup(mapping: Mapping[str, Any] | None, *keys: str) -> Any:
    """ネストした辞書を keys の順にたどる。途中で見つからなければ None。"""
    value: Any = mapping
    for key in keys:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


@dataclass
class Response:
    content_type: str | None = None
    body: bytes | None = None


@dataclass
class RequestContext:
    """HostContext のインメモリ実装。

    errors には error() で報告されたメッセージが順に溜まる。
    """

    stash: dict[str, Any] = field(default_factory=dict)
    config: Mapping[str, Any] = field(default_factory=dict)
    response: Response = field(default_factory=Response)
    log: logging.Logger = field(
        default_factory=lambda: logging.getLogger("graphviz_view.request")
    )
    errors: list[str] = field(default_factory=list)

    @classmethod
    def for_graph(
        cls,
        graph: Any,
        fmt: str | None = None,
        config: Mapping[str, Any] | None = None,
        log: logging.Logger | None = None,
    ) -> RequestContext:
        """stash に graph と format を積んだコンテキストを作る。"""
        stash: dict[str, Any] = {STASH_KEY: {"graph": graph}}
        if fmt:
            stash[STASH_KEY]["format"] = fmt
        context = cls(stash=stash, config=config or {})
        if log is not None:
            context.log = log
        return context

    @property
    def debug(self) -> bool:
        return self.log.isEnabledFor(logging.DEBUG)

    def error(self, message: str) -> None:
        self.errors.append(message)
