"""共享 fixtures"""

import logging

import pytest


SAMPLE_HOSTS = (
    "# comment\n"
    "127.0.0.1 localhost\n"
    "10.0.0.5 foo.test bar.test\n"
)


@pytest.fixture(autouse=True)
def reset_logger():
    """每个测试之后移除 hostsctl 日志处理器，避免引用已关闭的捕获流"""
    yield
    logger = logging.getLogger("hostsctl")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def hosts_file(tmp_path):
    path = tmp_path / "hosts"
    path.write_text(SAMPLE_HOSTS)
    return path
