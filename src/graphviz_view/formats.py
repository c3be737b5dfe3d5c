"""出力形式と Content-Type の対応表。

形式名ごとに Content-Type とエンコーダ（グラフをバイト列に変換する関数）を
FormatSpec として保持する。表はモジュール読み込み時に一度だけ構築され、
以後変更されない。
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

DEFAULT_FORMAT = "png"

PLAIN = "text/plain; charset=utf-8"

Encoder = Callable[[Any], bytes | None]


class RenderError(Exception):
    """グラフ描画処理のエラー。"""


class UnknownFormatError(RenderError):
    """対応表にない出力形式が指定された。"""

    def __init__(self, fmt: str, known_formats: list[str]) -> None:
        self.format = fmt
        self.known_formats = known_formats
        super().__init__(
            f"Unknown format ({fmt}). "
            f"Known formats are ({'|'.join(known_formats)})"
        )


class RenderFailureError(RenderError):
    """エンコーダが出力を返さなかった、または例外を送出した。"""

    def __init__(self, fmt: str, reason: str | None = None) -> None:
        self.format = fmt
        message = f"Could not render graph as ({fmt})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def pipe_encoder(fmt: str) -> Encoder:
    """graphviz の pipe() で指定形式に変換するエンコーダを返す。

    graphviz.Graph / Digraph / Source はいずれも pipe(format=...) を持つ。
    """

    def encode(graph: Any) -> bytes | None:
        return graph.pipe(format=fmt)

    encode.__name__ = f"pipe_{fmt}"
    return encode


@dataclass(frozen=True)
class FormatSpec:
    """1つの出力形式の定義。"""

    name: str
    content_type: str
    encoder: Encoder

    def encode(self, graph: Any) -> bytes:
        """グラフをこの形式でエンコードする。

        Raises:
            RenderFailureError: 出力が空、またはエンコーダが例外を送出した場合
        """
        try:
            output = self.encoder(graph)
        except Exception as e:  # エンコーダ由来の例外はすべて描画失敗として扱う
            raise RenderFailureError(self.name, str(e) or type(e).__name__) from e
        if not output:
            raise RenderFailureError(self.name)
        return output


class FormatTable(Mapping[str, FormatSpec]):
    """形式名 -> FormatSpec の読み取り専用マッピング。

    キーは大文字小文字を区別する完全一致で引く。
    """

    def __init__(self, specs: Mapping[str, FormatSpec]) -> None:
        self._specs = MappingProxyType(dict(specs))

    def __getitem__(self, name: str) -> FormatSpec:
        return self._specs[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def names(self) -> list[str]:
        """既知の形式名をソートして返す。"""
        return sorted(self._specs)

    def lookup(self, name: str) -> FormatSpec:
        """形式名から FormatSpec を引く。

        Raises:
            UnknownFormatError: 未知の形式名の場合
        """
        spec = self._specs.get(name)
        if spec is None:
            raise UnknownFormatError(name, self.names())
        return spec

    def content_type(self, name: str) -> str:
        return self.lookup(name).content_type

    def with_format(
        self,
        name: str,
        content_type: str,
        encoder: Encoder | None = None,
    ) -> FormatTable:
        """形式を追加・置換した新しい表を返す（元の表は変更しない）。"""
        specs = dict(self._specs)
        specs[name] = FormatSpec(name, content_type, encoder or pipe_encoder(name))
        return FormatTable(specs)

    @classmethod
    def from_content_types(cls, content_types: Mapping[str, str]) -> FormatTable:
        """形式名 -> Content-Type の辞書から、pipe エンコーダ付きの表を作る。"""
        return cls(
            {
                name: FormatSpec(name, ctype, pipe_encoder(name))
                for name, ctype in content_types.items()
            }
        )


CONTENT_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "ps": "application/postscript",
        "hpgl": PLAIN,
        "pcl": PLAIN,
        "mif": "application/x-mif",
        "pic": "image/x-pict",
        "gd": PLAIN,
        "gd2": PLAIN,
        "gif": "image/gif",
        "jpeg": "image/jpeg",
        "png": "image/x-png",
        "wbmp": "image/x-ms-bmp",
        "cmap": PLAIN,
        "cmapx": PLAIN,
        "ismap": PLAIN,
        "imap": PLAIN,
        "vrml": "x-world/x-vrml",
        "vtx": PLAIN,
        "mp": PLAIN,
        "fig": PLAIN,
        "svg": "image/svg+xml",
        "svgz": "image/svg+xml",
        "dot": PLAIN,
        "canon": PLAIN,
        "plain": PLAIN,
    }
)

FORMAT_TABLE = FormatTable.from_content_types(CONTENT_TYPES)
