"""brf - 目录文件批量重命名工具

支持顺序编号重命名，以及全大写、全小写、首字母大写、首字母小写四种转换。
"""

__version__ = "0.1.0"

from brf.config import parse_args
from brf.models import RenameConfig, RenameMode, RenameResult
from brf.renamer import FileRenamer
from brf.scanner import FileLister

__all__ = [
    "parse_args",
    "RenameConfig",
    "RenameMode",
    "RenameResult",
    "FileRenamer",
    "FileLister",
]
