"""hostsctl 命令行入口

用法::

    hostsctl [-f FILE] [-d] add IP HOSTNAME [HOSTNAME ...]
    hostsctl [-f FILE] [-d] rmip IP
    hostsctl [-f FILE] [-d] rmhost HOSTNAME [HOSTNAME ...]
    hostsctl [-f FILE] resolve HOSTNAME
    hostsctl [-f FILE] list

hosts 文件路径也可以通过 ``HOSTS_FILE`` 环境变量指定。
"""

import argparse
import dataclasses
import sys
from typing import List, Optional

from hostsctl.app import HostsEditor
from hostsctl.config import Config


def _build_parser() -> argparse.ArgumentParser:
    """构建 ``hostsctl`` 的参数解析器"""
    parser = argparse.ArgumentParser(
        prog="hostsctl",
        description="读取、编辑和查询 hosts 文件。",
    )
    parser.add_argument(
        "--file",
        "-f",
        default=None,
        help="hosts 文件路径 (默认: HOSTS_FILE 环境变量或 /etc/hosts)。",
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="把结果打印到控制台而不写文件。",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="日志级别 (默认: LOG_LEVEL 环境变量或 WARNING)。",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    add = subparsers.add_parser("add", help="添加 IP 与主机名的映射")
    add.add_argument("ip")
    add.add_argument("hostnames", nargs="+", metavar="hostname")

    rmip = subparsers.add_parser("rmip", help="删除 IP 及其所有主机名")
    rmip.add_argument("ip")

    rmhost = subparsers.add_parser("rmhost", help="从所有记录中删除主机名")
    rmhost.add_argument("hostnames", nargs="+", metavar="hostname")

    resolve = subparsers.add_parser("resolve", help="解析主机名对应的 IP")
    resolve.add_argument("hostname")

    subparsers.add_parser("list", help="列出所有记录")

    return parser


def _load_config(args: argparse.Namespace) -> Config:
    """环境变量配置，命令行参数优先"""
    config = Config.from_env()
    overrides = {}
    if args.file is not None:
        overrides["hosts_file_path"] = args.file
    if args.debug:
        overrides["debug"] = True
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return dataclasses.replace(config, **overrides)


def _run(editor: HostsEditor, args: argparse.Namespace) -> None:
    if args.command == "add":
        editor.add(args.ip, args.hostnames)
    elif args.command == "rmip":
        editor.remove_ip(args.ip)
    elif args.command == "rmhost":
        editor.remove_hosts(args.hostnames)
    elif args.command == "resolve":
        editor.resolve(args.hostname)
    elif args.command == "list":
        editor.list_hosts()
    else:
        raise ValueError(f"未知命令: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """解析命令行参数并执行命令，返回退出码"""
    args = _build_parser().parse_args(argv)

    try:
        editor = HostsEditor(_load_config(args))
    except ValueError as e:
        print(f"初始化 hostsctl 失败: {e}", file=sys.stderr)
        return 1

    try:
        _run(editor, args)
    except KeyboardInterrupt:
        editor.logger.info("被用户中断")
        return 130
    except OSError as e:
        editor.logger.error(f"命令 {args.command} 失败: {e}")
        return 1
    except Exception as e:
        editor.logger.error(f"致命错误: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
