"""
hosts 文件数据模型
"""

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class Passthrough:
    """
    原样保留的行

    包括注释（以 # 开头）、空行以及字段少于两个的无效行。

    属性:
        line: 去除首尾空白后的原始行内容
    """

    line: str

    def to_hosts_line(self) -> str:
        return self.line


@dataclass
class Record:
    """
    代表 hosts 文件中的单条记录：一个 IP 对应一个或多个主机名

    属性:
        ip: IP 地址（不做语法校验）
        hostnames: 主机名列表，保持插入顺序；add 合并时去重
    """

    ip: str
    hostnames: List[str] = field(default_factory=list)

    def to_hosts_line(self) -> str:
        """
        转换为 hosts 文件行格式

        格式: <IP>\t<主机名> <主机名> ...

        返回:
            格式化的 hosts 文件行（不含换行符）
        """
        return f"{self.ip}\t{' '.join(self.hostnames)}"


LineEntry = Union[Passthrough, Record]

# hosts 文件在内存中的表示：有序的行条目列表
HostFile = List[LineEntry]


def is_record(entry: LineEntry) -> bool:
    """
    判断行条目是否为记录

    异常:
        TypeError: 如果条目既不是 Passthrough 也不是 Record
    """
    if isinstance(entry, Record):
        return True
    if isinstance(entry, Passthrough):
        return False
    raise TypeError(f"未知的行条目类型: {type(entry).__name__}")


def unique(values: List[str]) -> List[str]:
    """去重并保留首次出现的顺序"""
    seen = set()
    result = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result
