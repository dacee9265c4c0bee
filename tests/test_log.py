import sys

from loguru import logger

from wechat_sdk.log import setup_logging


def test_setup_logging_writes_daily_file(tmp_path):
    try:
        setup_logging(level="DEBUG", log_dir=str(tmp_path))
        logger.info("日志测试")
        logger.complete()
        files = list(tmp_path.glob("wechat_sdk_*.log"))
        assert len(files) == 1
        assert "日志测试" in files[0].read_text(encoding="utf-8")
    finally:
        logger.remove()
        logger.add(sys.stderr)
