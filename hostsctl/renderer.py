"""
hosts 文件渲染模块
"""

from hostsctl.models import HostFile, LineEntry, Passthrough, Record, is_record


def render_entry(entry: LineEntry) -> str:
    """
    渲染单个行条目（不含换行符）

    异常:
        TypeError: 如果条目既不是 Passthrough 也不是 Record
    """
    if isinstance(entry, Record):
        return entry.to_hosts_line()
    if isinstance(entry, Passthrough):
        return entry.to_hosts_line()
    raise TypeError(f"未知的行条目类型: {type(entry).__name__}")


def render_hosts(hosts: HostFile) -> str:
    """
    渲染完整的 hosts 文件，保留注释和空行

    条目之间以换行分隔；末尾的空 Passthrough 对应文件结尾的换行。

    参数:
        hosts: 行条目列表

    返回:
        可直接写回磁盘的文件内容
    """
    return "\n".join(render_entry(entry) for entry in hosts)


def render_records(hosts: HostFile) -> str:
    """只渲染记录行，跳过注释和空行，每条记录以换行结尾"""
    return "".join(
        render_entry(entry) + "\n"
        for entry in hosts
        if is_record(entry)
    )
