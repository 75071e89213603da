"""顺序重命名的冲突规避

递增计数器直到 {prefix}_{n}{ext} 在目录中不存在。
"""

import logging
from pathlib import Path

from brf.models import RenameCounter
from brf.transformer import sequential_name

logger = logging.getLogger(__name__)


class TooManyCollisionsError(Exception):
    """超过最大探测次数仍未找到可用名称"""

    def __init__(self, directory: Path, prefix: str, attempts: int):
        self.directory = directory
        self.prefix = prefix
        self.attempts = attempts
        super().__init__(
            f"No free name for prefix {prefix!r} in {directory} "
            f"after {attempts} attempts"
        )


def path_taken(path: Path) -> bool:
    """路径上是否已有条目（包括失效的符号链接）"""
    return path.exists() or path.is_symlink()


def resolve_sequential_target(
    directory: Path,
    prefix: str,
    extension: str,
    counter: RenameCounter,
    max_probes: int | None = None,
) -> Path:
    """找到第一个未被占用的顺序名称

    每次冲突都会递增 counter。检查与重命名之间的竞争不做处理。

    Args:
        directory: 目标目录
        prefix: 重命名前缀
        extension: 扩展名（含 "."）
        counter: 计数器（会被修改）
        max_probes: 最大探测次数，None 表示不限制

    Returns:
        可用的目标路径

    Raises:
        TooManyCollisionsError: 超过 max_probes
    """
    attempts = 0
    candidate = directory / f"{sequential_name(prefix, counter.value)}{extension}"

    while path_taken(candidate):
        attempts += 1
        if max_probes is not None and attempts >= max_probes:
            raise TooManyCollisionsError(directory, prefix, attempts)
        logger.debug(f"已存在，跳过: {candidate.name}")
        counter.increment()
        candidate = directory / f"{sequential_name(prefix, counter.value)}{extension}"

    return candidate
