"""brf CLI 入口点"""

import sys

from brf.cli import app


def setup_utf8_output():
    """Windows 控制台改用 UTF-8，文件名中的非 ASCII 字符不会在失败信息里变成乱码"""
    if sys.platform != "win32":
        return
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8", errors="replace")


def main():
    setup_utf8_output()
    app(prog_name="brf")


if __name__ == "__main__":
    main()
