"""
hosts 文件解析模块
"""

from hostsctl.models import HostFile, LineEntry, Passthrough, Record


def parse_line(row: str) -> LineEntry:
    """
    解析单行内容

    参数:
        row: 原始行（可带首尾空白）

    返回:
        注释、空行和字段不足两个的行返回 Passthrough，其余返回 Record
    """
    row = row.strip()

    # 注释和空行原样保留
    if not row or row.startswith("#"):
        return Passthrough(row)

    fields = row.split()
    if len(fields) < 2:
        return Passthrough(row)

    return Record(ip=fields[0], hostnames=fields[1:])


def parse_hosts(text: str) -> HostFile:
    """
    将 hosts 文件内容解析为行条目列表

    按 \\n 分行。文件以换行结尾时最后会得到一个空的 Passthrough，
    渲染时用它还原结尾换行。

    参数:
        text: hosts 文件的完整内容

    返回:
        按文件顺序排列的行条目列表
    """
    return [parse_line(row) for row in text.split("\n")]
