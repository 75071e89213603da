"""名称转换

根据重命名模式计算新的主文件名（不含扩展名）。
"""

from brf.models import RenameConfig, RenameCounter, RenameMode


def get_extension(name: str) -> str:
    """获取扩展名

    取最后一个 "." 之后的部分。没有 "." 或唯一的 "." 在开头（如 .bashrc）
    时视为无扩展名。

    Args:
        name: 文件名

    Returns:
        带前导 "." 的扩展名，无扩展名时返回 ""
    """
    before, dot, after = name.rpartition(".")
    if not dot or not before:
        return ""
    return f".{after}"


def get_stem(name: str, extension: str) -> str:
    """去掉文件名末尾的扩展名

    末尾连续重复的扩展名会全部去掉，例如 "x.a.a" 得到 "x"。

    Args:
        name: 文件名
        extension: get_extension 的结果

    Returns:
        主文件名
    """
    if not extension:
        return name
    while name.endswith(extension):
        name = name[: -len(extension)]
    return name


def split_name(name: str) -> tuple[str, str]:
    """拆分文件名为 (主文件名, 扩展名)"""
    extension = get_extension(name)
    return get_stem(name, extension), extension


def is_alphabetic(c: str) -> bool:
    """Unicode Alphabetic 属性（含 Nl 类字母数字，如 ⅰ；以及有大小写的符号，如 ⓐ）"""
    return c.isalpha() or c.upper() != c or c.lower() != c


def to_uppercase(s: str) -> str:
    return s.upper()


def to_lowercase(s: str) -> str:
    return s.lower()


def to_first_letter_uppercase(s: str) -> str:
    """首字母大写，首字符不是字母时原样返回"""
    if not s or not is_alphabetic(s[0]):
        return s
    return s[0].upper() + s[1:]


def to_first_letter_lowercase(s: str) -> str:
    """首字母小写，首字符不是字母时原样返回"""
    if not s or not is_alphabetic(s[0]):
        return s
    return s[0].lower() + s[1:]


def sequential_name(prefix: str, number: int) -> str:
    return f"{prefix}_{number}"


_CASE_TRANSFORMS = {
    RenameMode.UPPERCASE: to_uppercase,
    RenameMode.LOWERCASE: to_lowercase,
    RenameMode.FIRST_LETTER_UPPERCASE: to_first_letter_uppercase,
    RenameMode.FIRST_LETTER_LOWERCASE: to_first_letter_lowercase,
}


def transform_stem(config: RenameConfig, stem: str, counter: RenameCounter) -> str:
    """按当前模式计算新的主文件名

    Args:
        config: 运行配置
        stem: 原主文件名（顺序重命名模式下忽略）
        counter: 当前计数器

    Returns:
        新的主文件名
    """
    if config.is_sequential:
        return sequential_name(config.rename_prefix, counter.value)
    return _CASE_TRANSFORMS[config.mode](stem)
