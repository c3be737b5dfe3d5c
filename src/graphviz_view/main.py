import logging
from pathlib import Path

import click

from graphviz_view.config import load_config
from graphviz_view.context import RequestContext
from graphviz_view.formats import FORMAT_TABLE
from graphviz_view.source_loader import SourceLoadError, load_source
from graphviz_view.view import GraphvizView, ViewConfig

logger = logging.getLogger(__name__)

_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
    default=None,
    help="設定ファイルのパス（省略時はカレントディレクトリの config.toml を自動検索）",
)


@click.group()
def cli() -> None:
    """Graphviz グラフ描画CLIアプリケーション"""
    pass


@cli.command()
@click.option("--input", "input_path", required=True, help="入力DOTファイルパス")
@click.option("--output", "output_path", required=True, help="出力ファイルパス")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(FORMAT_TABLE.names()),
    default=None,
    help="出力形式（省略時は設定ファイルの値、どちらも無ければ png）",
)
@click.option("--verbose", "-v", is_flag=True, help="デバッグログを出力する")
@_CONFIG_OPTION
def render(
    input_path: str,
    output_path: str,
    fmt: str | None,
    verbose: bool,
    config_path: str | None,
) -> None:
    """DOTファイルのグラフを指定形式で出力する"""
    config = load_config(Path(config_path) if config_path else None)
    logging.basicConfig(level="DEBUG" if verbose else config.logging.level)

    try:
        source = load_source(input_path)
    except SourceLoadError as e:
        raise click.ClickException(str(e))

    view = GraphvizView(ViewConfig(format=config.view.format))
    context = RequestContext.for_graph(source, fmt, config=config.host_config())
    result = view.process(context)
    if not result.succeeded:
        raise click.ClickException("\n".join(context.errors) or "描画されませんでした")

    output = Path(output_path)
    # 出力先ディレクトリの自動作成
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(context.response.body or b"")
    logger.info("wrote %s (%s)", output, context.response.content_type)
    click.echo(f"出力しました: {output} ({result.format})")


@cli.command(name="formats")
def list_formats() -> None:
    """対応している出力形式と Content-Type を一覧表示する"""
    for name in FORMAT_TABLE.names():
        click.echo(f"{name}\t{FORMAT_TABLE.content_type(name)}")
