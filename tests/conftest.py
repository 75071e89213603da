"""brf 测试公共 fixture"""

from pathlib import Path

import pytest

from brf.models import FileEntry
from brf.transformer import split_name


@pytest.fixture
def make_entry():
    """从已存在的文件路径构造 FileEntry"""

    def _make(path: Path) -> FileEntry:
        stem, extension = split_name(path.name)
        return FileEntry(path=path, stem=stem, extension=extension)

    return _make


@pytest.fixture
def make_files(tmp_path):
    """在 tmp_path 下创建文件，内容为文件名，返回路径列表"""

    def _make(*names: str) -> list[Path]:
        paths = []
        for name in names:
            path = tmp_path / name
            path.write_text(name)
            paths.append(path)
        return paths

    return _make


@pytest.fixture
def case_sensitive_fs(tmp_path) -> bool:
    probe = tmp_path / "case_probe"
    probe.touch()
    sensitive = not (tmp_path / "CASE_PROBE").exists()
    probe.unlink()
    return sensitive
