#!/usr/bin/env python3
"""
hostsctl - 主入口点

读取、编辑和查询 hosts 文件。
"""

import sys
from pathlib import Path

# 将当前目录添加到路径以导入 hostsctl 模块
sys.path.insert(0, str(Path(__file__).parent))

from hostsctl.cli import main


if __name__ == '__main__':
    sys.exit(main())
