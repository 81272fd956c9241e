"""
hostsctl 主应用模块
"""

import logging
import sys
from typing import List, Optional, TextIO

from hostsctl import operations
from hostsctl.config import Config
from hostsctl.hosts_manager import HostsFileManager, write_output
from hostsctl.renderer import render_records


class HostsEditor:
    """
    主应用控制器，每个命令对应一个方法

    每个命令都是一次完整的 读取 → 修改/查询 → 写回 流程：
    - add / rmip / rmhost 修改后写回文件（调试模式下打印）
    - resolve / list 只读，从不写文件
    """

    def __init__(self, config: Config, stdout: Optional[TextIO] = None):
        """
        初始化 hostsctl 应用

        参数:
            config: 应用配置
            stdout: 命令输出的目标流 (默认: sys.stdout)

        异常:
            ValueError: 如果配置无效
        """
        self.config = config
        self.config.validate()

        self.stdout = stdout
        self.logger = self._setup_logging()
        self.hosts_manager = HostsFileManager(
            config.hosts_file_path,
            self.logger,
            debug=config.debug,
            stdout=stdout
        )

    def _setup_logging(self) -> logging.Logger:
        """
        配置日志系统

        日志输出到 stderr，stdout 留给命令输出。

        返回:
            配置好的日志记录器实例
        """
        logger = logging.getLogger('hostsctl')
        logger.setLevel(self.config.log_level)

        # 避免重复的处理器，已有处理器只同步级别
        if logger.handlers:
            for handler in logger.handlers:
                handler.setLevel(self.config.log_level)
            return logger

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(self.config.log_level)

        # 格式: 时间戳 - 名称 - 级别 - 消息
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        return logger

    def add(self, ip: str, hostnames: List[str]) -> None:
        """添加 IP 与主机名的映射并写回"""
        hosts = self.hosts_manager.read_entries()
        operations.add_host(hosts, ip, hostnames)
        self.logger.info(f"已添加: {ip} -> {', '.join(hostnames)}")
        self.hosts_manager.write_entries(hosts)

    def remove_ip(self, ip: str) -> None:
        """删除 IP 及其所有主机名并写回"""
        hosts = self.hosts_manager.read_entries()
        before = len(hosts)
        operations.remove_ip(hosts, ip)

        removed = before - len(hosts)
        if removed:
            self.logger.info(f"已移除 {removed} 条 {ip} 的记录")
        else:
            self.logger.debug(f"没有找到 IP: {ip}")
        self.hosts_manager.write_entries(hosts)

    def remove_hosts(self, hostnames: List[str]) -> None:
        """从所有记录中删除主机名并写回"""
        hosts = self.hosts_manager.read_entries()
        operations.remove_hostnames(hosts, hostnames)
        self.logger.info(f"已移除主机名: {', '.join(hostnames)}")
        self.hosts_manager.write_entries(hosts)

    def resolve(self, hostname: str) -> Optional[str]:
        """
        解析主机名，找到时打印 IP

        返回:
            对应的 IP，找不到返回 None（不算错误）
        """
        hosts = self.hosts_manager.read_entries()
        ip = operations.resolve(hosts, hostname)
        if ip is None:
            self.logger.debug(f"没有找到主机名: {hostname}")
            return None

        write_output(ip + "\n", self.stdout)
        return ip

    def list_hosts(self) -> None:
        """打印所有记录行，不含注释和空行"""
        hosts = self.hosts_manager.read_entries()
        write_output(render_records(hosts), self.stdout)
