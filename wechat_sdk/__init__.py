"""微信支付/小程序服务端SDK"""
from .context import background, with_cancel, with_timeout
from .errors import (
    APIError,
    CancellationError,
    CanceledError,
    ConfigError,
    DeadlineExceededError,
    EncodingError,
    SignTypeError,
    SerializationError,
    TokenMissingError,
    TransportError,
    WeChatSDKError,
)
from .http import CtxHttp
from .services.mch.wechat_mch import WeChatMch
from .services.mini.wechat_mini import WeChatMini
from .services.pay.wechat_pay import WeChatPay
from .util import NonceGenerator, gen_param_str, rand_string

__version__ = "0.1.0"
