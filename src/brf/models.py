"""brf 数据模型

运行配置使用 Pydantic 冻结模型，其余为运行期的 dataclass。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class RenameMode(str, Enum):
    """重命名模式"""

    SEQUENTIAL_RENAME = "sequential_rename"  # {prefix}_{n}
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    FIRST_LETTER_UPPERCASE = "first_letter_uppercase"
    FIRST_LETTER_LOWERCASE = "first_letter_lowercase"


class RenameConfig(BaseModel):
    """运行配置 - 启动时由命令行参数创建，之后不可修改"""

    model_config = ConfigDict(frozen=True)

    directory_path: Path
    rename_prefix: str = ""  # 仅顺序重命名模式使用
    mode: RenameMode = RenameMode.SEQUENTIAL_RENAME

    @property
    def is_sequential(self) -> bool:
        return self.mode is RenameMode.SEQUENTIAL_RENAME


@dataclass
class FileEntry:
    """目录中的单个文件"""

    path: Path
    stem: str
    extension: str  # 含前导 "."，无扩展名时为 ""

    @property
    def name(self) -> str:
        return self.path.name


@dataclass
class RenameCounter:
    """单次运行的计数器，顺序重命名时用于生成不冲突的序号"""

    value: int = 0

    def increment(self) -> int:
        self.value += 1
        return self.value


# ============ 结果模型 ============


@dataclass
class RenameOperation:
    """单次重命名操作"""

    original_path: Path
    new_path: Path


@dataclass
class RenameFailure:
    """重命名失败的文件"""

    path: Path
    target: Path | None
    message: str


@dataclass
class RenameResult:
    """批量重命名结果"""

    operations: list[RenameOperation] = field(default_factory=list)
    failures: list[RenameFailure] = field(default_factory=list)
    unchanged_count: int = 0  # 新名称与原名称相同

    @property
    def success_count(self) -> int:
        return len(self.operations)

    @property
    def failed_count(self) -> int:
        return len(self.failures)

    @property
    def total(self) -> int:
        return self.success_count + self.failed_count + self.unchanged_count
