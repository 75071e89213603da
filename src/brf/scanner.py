"""目录文件列举

列出目录下（不递归）的普通文件，按文件系统返回的顺序。
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from brf.models import FileEntry
from brf.transformer import split_name

logger = logging.getLogger(__name__)


class FileLister:
    """文件列举器"""

    def list_files(self, directory: Path) -> Iterator[FileEntry]:
        """列出目录下的普通文件

        目录在调用时立即打开，文件项按需产生。

        Args:
            directory: 目录路径

        Returns:
            FileEntry 迭代器

        Raises:
            FileNotFoundError: 目录不存在
            NotADirectoryError: 路径不是目录
            PermissionError: 无法读取目录
        """
        directory = Path(directory)

        if not directory.exists():
            raise FileNotFoundError(f"目录不存在: {directory}")

        if not directory.is_dir():
            raise NotADirectoryError(f"路径不是目录: {directory}")

        return self._iter_entries(directory, os.scandir(directory))

    def _iter_entries(
        self, directory: Path, entries: Iterator[os.DirEntry]
    ) -> Iterator[FileEntry]:
        with entries:
            for entry in entries:
                try:
                    # 不跟随符号链接
                    if not entry.is_file(follow_symlinks=False):
                        continue
                except OSError as e:
                    logger.warning(f"无法读取文件信息，跳过 {entry.name}: {e}")
                    continue

                stem, extension = split_name(entry.name)
                yield FileEntry(
                    path=directory / entry.name,
                    stem=stem,
                    extension=extension,
                )
