"""
Hosts 文件读写模块，支持原子性更新
"""

import logging
import os
import stat
import sys
import tempfile
from pathlib import Path
from typing import Optional, TextIO

from hostsctl.models import HostFile
from hostsctl.parser import parse_hosts
from hostsctl.renderer import render_hosts

# 非 UTF-8 字节以代理字符保存在内存中，写回时还原为原始字节
ENCODING = "utf-8"
ERRORS = "surrogateescape"


def write_output(text: str, stream: Optional[TextIO] = None) -> None:
    """
    把命令输出写到控制台

    有底层字节缓冲区时直接写入原始字节，保证非 UTF-8 内容原样输出。

    参数:
        text: 要输出的文本
        stream: 目标流 (默认: sys.stdout)
    """
    stream = stream if stream is not None else sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(text)
        return

    stream.flush()
    buffer.write(text.encode(ENCODING, ERRORS))
    buffer.flush()


class HostsFileManager:
    """
    管理 hosts 文件的整文件读写

    每次命令读取一次完整文件，最多写回一次。
    写入使用临时文件 + 重命名，防止文件损坏。
    不提供进程间锁：多个进程同时修改同一文件时，最后写入的生效。
    """

    DEFAULT_MODE = 0o644

    def __init__(
        self,
        hosts_path: str,
        logger: logging.Logger,
        debug: bool = False,
        stdout: Optional[TextIO] = None
    ):
        """
        初始化 hosts 文件管理器

        参数:
            hosts_path: hosts 文件路径
            logger: 日志记录器实例
            debug: 为 True 时把渲染结果打印到控制台而不写文件
            stdout: 调试输出的目标流 (默认: sys.stdout)
        """
        self.hosts_path = Path(hosts_path)
        self.logger = logger
        self.debug = debug
        self.stdout = stdout

    def read_entries(self) -> HostFile:
        """
        读取并解析 hosts 文件

        返回:
            按文件顺序排列的行条目列表

        异常:
            FileNotFoundError: 如果 hosts 文件不存在
            PermissionError: 如果没有读取权限
            OSError: 如果读取失败
        """
        try:
            with open(self.hosts_path, 'r', encoding=ENCODING, errors=ERRORS, newline='') as f:
                contents = f.read()

        except FileNotFoundError:
            self.logger.error(f"Hosts 文件不存在: {self.hosts_path}")
            raise
        except PermissionError:
            self.logger.error(f"读取 hosts 文件权限被拒绝: {self.hosts_path}")
            raise
        except OSError as e:
            self.logger.error(f"读取 hosts 文件时出错: {e}")
            raise

        entries = parse_hosts(contents)
        self.logger.debug(f"从 {self.hosts_path} 解析了 {len(entries)} 行")
        return entries

    def write_entries(self, entries: HostFile) -> None:
        """
        渲染并原子性写回 hosts 文件

        调试模式下只打印到控制台，不修改文件。

        参数:
            entries: 要写入的行条目列表

        异常:
            PermissionError: 如果没有写入 hosts 文件的权限
            OSError: 如果文件系统操作失败
        """
        content = render_hosts(entries)

        if self.debug:
            write_output(content, self.stdout)
            return

        try:
            # 符号链接写入其指向的真实文件，而不是替换链接本身
            target = self.hosts_path.resolve()
            mode = self._current_mode(target)

            # 写入临时文件（同一目录）
            temp_fd, temp_path = tempfile.mkstemp(
                dir=target.parent,
                prefix='.hosts.tmp.',
                text=True
            )

            try:
                with os.fdopen(temp_fd, 'w', encoding=ENCODING, errors=ERRORS, newline='') as f:
                    f.write(content)
                os.chmod(temp_path, mode)

                # 原子性替换（同一文件系统内有效）
                os.replace(temp_path, target)
                self.logger.info(f"已更新 {target}")

            except Exception:
                # 出错时清理临时文件
                if os.path.exists(temp_path):
                    os.unlink(temp_path)
                raise

        except PermissionError:
            self.logger.error(f"写入 hosts 文件权限被拒绝: {self.hosts_path}")
            raise
        except OSError as e:
            self.logger.error(f"更新 hosts 文件失败: {e}")
            raise

    def _current_mode(self, target: Path) -> int:
        """原文件的权限位，文件不存在时为 0644"""
        try:
            return stat.S_IMODE(target.stat().st_mode)
        except FileNotFoundError:
            return self.DEFAULT_MODE
