"""从环境变量(.env)读取服务配置"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger

from .constants import SIGN_TYPE_MD5, TRADE_TYPE_JSAPI
from .errors import ConfigError

# 加载环境变量
load_dotenv()


def _check_required(required_configs):
    missing_configs = [name for name, value in required_configs if not value]
    if missing_configs:
        error_msg = f"缺少必要的配置项: {', '.join(missing_configs)}\n请确保在.env文件中配置了所有必要的环境变量"
        logger.error(error_msg)
        raise ConfigError(error_msg)


@dataclass
class PayConfig:
    app_id: str = ""
    mch_id: str = ""
    api_key: str = ""
    sign_type: str = SIGN_TYPE_MD5
    trade_type: str = TRADE_TYPE_JSAPI

    @classmethod
    def from_env(cls):
        config = cls(
            app_id=os.getenv("WECHAT_APP_ID", ""),
            mch_id=os.getenv("WECHAT_MCH_ID", ""),
            api_key=os.getenv("WECHAT_API_KEY", ""),
            sign_type=os.getenv("WECHAT_SIGN_TYPE", SIGN_TYPE_MD5),
            trade_type=os.getenv("WECHAT_TRADE_TYPE", TRADE_TYPE_JSAPI),
        )
        config.validate()
        return config

    def validate(self):
        """验证配置是否完整"""
        _check_required([
            ("WECHAT_APP_ID", self.app_id),
            ("WECHAT_MCH_ID", self.mch_id),
            ("WECHAT_API_KEY", self.api_key),
        ])


@dataclass
class MchConfig:
    app_id: str = ""
    mch_id: str = ""
    api_key: str = ""
    ca_cert_file: str = ""
    api_cert_file: str = ""
    api_key_file: str = ""
    sign_type: str = SIGN_TYPE_MD5

    @classmethod
    def from_env(cls):
        config = cls(
            app_id=os.getenv("WECHAT_APP_ID", ""),
            mch_id=os.getenv("WECHAT_MCH_ID", ""),
            api_key=os.getenv("WECHAT_API_KEY", ""),
            ca_cert_file=os.getenv("WECHAT_CA_CERT_PATH", ""),
            api_cert_file=os.getenv("WECHAT_API_CERT_PATH", ""),
            api_key_file=os.getenv("WECHAT_API_KEY_PATH", ""),
            sign_type=os.getenv("WECHAT_SIGN_TYPE", SIGN_TYPE_MD5),
        )
        config.validate()
        return config

    def validate(self):
        _check_required([
            ("WECHAT_APP_ID", self.app_id),
            ("WECHAT_MCH_ID", self.mch_id),
            ("WECHAT_API_KEY", self.api_key),
            ("WECHAT_CA_CERT_PATH", self.ca_cert_file),
            ("WECHAT_API_CERT_PATH", self.api_cert_file),
            ("WECHAT_API_KEY_PATH", self.api_key_file),
        ])


@dataclass
class MiniConfig:
    app_id: str = ""
    app_secret: str = ""

    @classmethod
    def from_env(cls):
        config = cls(
            app_id=os.getenv("WECHAT_APP_ID", ""),
            app_secret=os.getenv("WECHAT_APP_SECRET", ""),
        )
        config.validate()
        return config

    def validate(self):
        _check_required([
            ("WECHAT_APP_ID", self.app_id),
            ("WECHAT_APP_SECRET", self.app_secret),
        ])
