"""命令行参数解析

将原始参数 [目录, 前缀或模式标志] 转换为 RenameConfig。
"""

from collections.abc import Sequence
from pathlib import Path

from brf.models import RenameConfig, RenameMode

# (长格式, 短格式) -> 模式，区分大小写
MODE_FLAGS: dict[tuple[str, str], RenameMode] = {
    ("--uppercase", "-u"): RenameMode.UPPERCASE,
    ("--lowercase", "-l"): RenameMode.LOWERCASE,
    ("--first-letter-uppercase", "-U"): RenameMode.FIRST_LETTER_UPPERCASE,
    ("--first-letter-lowercase", "-L"): RenameMode.FIRST_LETTER_LOWERCASE,
}

_FLAG_LOOKUP: dict[str, RenameMode] = {
    flag: mode for flags, mode in MODE_FLAGS.items() for flag in flags
}

USAGE = (
    "Invalid number of arguments. "
    "Usage: `brf <dir_path> <file_name | mode>`. Example: `brf ./files img`\n"
    "Modes: "
    + ", ".join(f"{long} | {short}" for long, short in MODE_FLAGS)
)

_BANNERS = {
    RenameMode.UPPERCASE: "Renaming files to uppercase",
    RenameMode.LOWERCASE: "Renaming files to lowercase",
    RenameMode.FIRST_LETTER_UPPERCASE: "Renaming files first letter to uppercase",
    RenameMode.FIRST_LETTER_LOWERCASE: "Renaming files first letter to lowercase",
}


class UsageError(ValueError):
    """参数数量不正确"""

    def __init__(self, message: str = USAGE):
        super().__init__(message)


def mode_for_token(token: str) -> RenameMode | None:
    """查找模式标志，未识别时返回 None"""
    return _FLAG_LOOKUP.get(token)


def parse_args(tokens: Sequence[str]) -> RenameConfig:
    """解析参数

    Args:
        tokens: 不含程序名的参数列表，必须恰好两项

    Returns:
        RenameConfig

    Raises:
        UsageError: 参数数量不是 2
        FileNotFoundError: 目录参数为空
    """
    if len(tokens) != 2:
        raise UsageError()

    directory, second = tokens
    if not directory:
        # Path("") 等价于当前目录
        raise FileNotFoundError("目录参数为空")

    mode = mode_for_token(second)
    if mode is None:
        return RenameConfig(
            directory_path=Path(directory),
            rename_prefix=second,
            mode=RenameMode.SEQUENTIAL_RENAME,
        )
    return RenameConfig(directory_path=Path(directory), mode=mode)


def describe_mode(config: RenameConfig) -> str:
    """当前模式的提示信息"""
    if config.is_sequential:
        return f"Renaming files to: `{config.rename_prefix}_xx`"
    return _BANNERS[config.mode]
