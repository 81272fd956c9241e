"""
hosts 记录操作模块

所有函数都在传入的列表上原地修改，并返回同一个列表。
"""

from typing import List, Optional

from hostsctl.models import HostFile, Passthrough, Record, is_record, unique


def add_host(hosts: HostFile, ip: str, hostnames: List[str]) -> HostFile:
    """
    为 IP 添加主机名

    只合并第一条 IP 相同的记录，后面的同 IP 记录保持不变。
    找不到时在文件末尾追加新记录；如果文件以换行结尾，
    新记录插在结尾的空行之前，以保留结尾换行。

    参数:
        hosts: 行条目列表
        ip: IP 地址
        hostnames: 要添加的主机名，至少一个

    返回:
        修改后的行条目列表

    异常:
        ValueError: 如果 ip 为空或没有主机名
    """
    if not ip:
        raise ValueError("IP 不能为空")
    if not hostnames:
        raise ValueError("至少需要一个主机名")

    for entry in hosts:
        if is_record(entry) and entry.ip == ip:
            entry.hostnames = unique(entry.hostnames + list(hostnames))
            return hosts

    record = Record(ip=ip, hostnames=unique(list(hostnames)))
    if hosts and hosts[-1] == Passthrough(""):
        hosts.insert(len(hosts) - 1, record)
    else:
        hosts.append(record)
    return hosts


def remove_ip(hosts: HostFile, ip: str) -> HostFile:
    """删除所有 IP 匹配的记录，不存在时什么也不做"""
    for i in range(len(hosts) - 1, -1, -1):
        entry = hosts[i]
        if is_record(entry) and entry.ip == ip:
            del hosts[i]
    return hosts


def remove_hostnames(hosts: HostFile, hostnames: List[str]) -> HostFile:
    """
    从所有记录中删除指定的主机名

    记录的主机名被删光时，整行记录一并删除。

    参数:
        hosts: 行条目列表
        hostnames: 要删除的主机名

    返回:
        修改后的行条目列表
    """
    for i in range(len(hosts) - 1, -1, -1):
        entry = hosts[i]
        if not is_record(entry):
            continue

        for hostname in hostnames:
            if hostname in entry.hostnames:
                entry.hostnames.remove(hostname)

        if not entry.hostnames:
            del hosts[i]
    return hosts


def resolve(hosts: HostFile, hostname: str) -> Optional[str]:
    """
    查找主机名对应的 IP

    返回:
        第一条包含该主机名的记录的 IP，找不到返回 None
    """
    for entry in hosts:
        if is_record(entry) and hostname in entry.hostnames:
            return entry.ip
    return None
