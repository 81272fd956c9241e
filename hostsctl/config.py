"""
配置管理模块，支持环境变量
"""

import os
from dataclasses import dataclass


@dataclass
class Config:
    """应用配置类，从环境变量加载配置"""

    hosts_file_path: str = "/etc/hosts"
    debug: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """
        从环境变量加载配置

        环境变量说明:
            HOSTS_FILE: hosts 文件路径 (默认: /etc/hosts)
            HOSTS_DEBUG: 输出到控制台而不写文件 (默认: false)
            LOG_LEVEL: 日志级别 (默认: WARNING)
        """
        return cls(
            hosts_file_path=os.getenv("HOSTS_FILE", "/etc/hosts"),
            debug=os.getenv("HOSTS_DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper()
        )

    def validate(self) -> None:
        """验证配置是否有效"""
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_log_levels:
            raise ValueError(
                f"无效的 LOG_LEVEL: {self.log_level}. "
                f"必须是以下之一: {', '.join(sorted(valid_log_levels))}"
            )
        if not self.hosts_file_path:
            raise ValueError("hosts 文件路径不能为空")
