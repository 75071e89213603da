"""brf CLI

使用 typer 实现命令行界面。模式标志（-u、--uppercase 等）作为普通参数传入，
由 brf.config 统一解析。
"""

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from brf.config import UsageError, describe_mode, parse_args
from brf.models import RenameResult
from brf.renamer import FileRenamer
from brf.scanner import FileLister

app = typer.Typer(
    name="brf",
    help="批量重命名目录中的文件 - 顺序编号或转换大小写",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """日志输出到 stderr"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
def main(
    tokens: Annotated[
        Optional[list[str]],
        typer.Argument(
            help="目录路径和重命名前缀，或模式标志 "
            "(--uppercase|-u, --lowercase|-l, "
            "--first-letter-uppercase|-U, --first-letter-lowercase|-L)",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="输出调试日志（需放在位置参数之前）"),
    ] = False,
) -> None:
    """重命名目录下的所有文件"""
    setup_logging(verbose)

    try:
        config = parse_args(tokens or [])
        entries = FileLister().list_files(config.directory_path)
    except UsageError as e:
        console.print(escape(str(e)))
        raise typer.Exit(0)
    except OSError as e:
        logger.debug(f"无法打开目录: {e}")
        console.print("Path is not a directory!")
        raise typer.Exit(0)

    console.print(escape(describe_mode(config)))

    result = FileRenamer(config).rename_files(entries)
    print_result(result)

    console.print("Done!")


def print_result(result: RenameResult) -> None:
    """显示失败详情和统计"""
    for failure in result.failures:
        console.print(
            f"[red]Renaming file failed![/red] "
            f"{escape(failure.path.name)}: {escape(failure.message)}"
        )

    console.print(
        f"Files: {result.total}, "
        f"renamed: [green]{result.success_count}[/green], "
        f"failed: [red]{result.failed_count}[/red], "
        f"unchanged: {result.unchanged_count}"
    )


if __name__ == "__main__":
    app()
