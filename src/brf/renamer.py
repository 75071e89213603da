"""文件重命名器

逐个处理文件，单个文件失败不会中断整个批次。
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from brf.models import (
    FileEntry,
    RenameConfig,
    RenameCounter,
    RenameFailure,
    RenameOperation,
    RenameResult,
)
from brf.resolver import TooManyCollisionsError, path_taken, resolve_sequential_target
from brf.transformer import transform_stem

logger = logging.getLogger(__name__)


class FileRenamer:
    """文件重命名器"""

    def __init__(
        self,
        config: RenameConfig,
        counter: RenameCounter | None = None,
        max_probes: int | None = None,
    ):
        """初始化重命名器

        Args:
            config: 运行配置
            counter: 计数器（默认从 0 开始）
            max_probes: 顺序重命名时的最大冲突探测次数，None 表示不限制
        """
        self.config = config
        self.counter = counter if counter is not None else RenameCounter()
        self.max_probes = max_probes

    def rename_files(self, entries: Iterable[FileEntry]) -> RenameResult:
        """批量重命名

        每个文件处理完（无论成功与否）计数器加一。

        Args:
            entries: 要处理的文件

        Returns:
            重命名结果
        """
        result = RenameResult()

        for entry in entries:
            target: Path | None = None
            try:
                target = self.target_for(entry)
                if self._rename_single(entry.path, target):
                    result.operations.append(
                        RenameOperation(original_path=entry.path, new_path=target)
                    )
                else:
                    result.unchanged_count += 1
            except (OSError, TooManyCollisionsError) as e:
                logger.error(f"重命名失败 {entry.path} -> {target}: {e}")
                result.failures.append(
                    RenameFailure(path=entry.path, target=target, message=_describe(e))
                )
            self.counter.increment()

        return result

    def target_for(self, entry: FileEntry) -> Path:
        """计算文件的目标路径（目录不变）

        Raises:
            TooManyCollisionsError: 顺序重命名找不到可用名称
        """
        directory = entry.path.parent

        if self.config.is_sequential:
            return resolve_sequential_target(
                directory,
                self.config.rename_prefix,
                entry.extension,
                self.counter,
                max_probes=self.max_probes,
            )

        stem = transform_stem(self.config, entry.stem, self.counter)
        return directory / f"{stem}{entry.extension}"

    def _rename_single(self, src: Path, tgt: Path) -> bool:
        """重命名单个文件

        Args:
            src: 源路径
            tgt: 目标路径

        Returns:
            是否执行了重命名（名称未变化时返回 False）

        Raises:
            FileExistsError: 目标已被其他文件占用
            OSError: 重命名失败
        """
        if src == tgt:
            logger.debug(f"名称未变化: {src.name}")
            return False

        if path_taken(tgt) and not _is_case_variant(src, tgt):
            raise FileExistsError(f"Target already exists: {tgt.name}")

        src.rename(tgt)
        logger.info(f"重命名: {src.name} -> {tgt.name}")
        return True


def _is_case_variant(src: Path, tgt: Path) -> bool:
    """目标是否只是源文件在不区分大小写的文件系统上的另一种写法

    目录中存在与目标完全同名的条目（包括指向同一 inode 的硬链接）时返回 False。
    """
    if tgt.name in os.listdir(tgt.parent):
        return False
    try:
        return src.samefile(tgt)
    except OSError:
        return False


def _describe(error: Exception) -> str:
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)
