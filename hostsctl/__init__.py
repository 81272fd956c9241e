"""
hostsctl - 读取、编辑和查询 hosts 文件
"""

__version__ = "1.0.0"
__author__ = "hostsctl Project"

from hostsctl.app import HostsEditor
from hostsctl.config import Config
from hostsctl.models import HostFile, LineEntry, Passthrough, Record
from hostsctl.operations import add_host, remove_hostnames, remove_ip, resolve
from hostsctl.parser import parse_hosts
from hostsctl.renderer import render_hosts, render_records

__all__ = [
    "HostsEditor",
    "Config",
    "HostFile",
    "LineEntry",
    "Passthrough",
    "Record",
    "add_host",
    "remove_hostnames",
    "remove_ip",
    "resolve",
    "parse_hosts",
    "render_hosts",
    "render_records",
]
