"""SDK异常定义"""


class WeChatSDKError(Exception):
    """所有SDK异常的基类"""


class ConfigError(WeChatSDKError, ValueError):
    """配置缺失或证书文件无法加载"""


class EncodingError(WeChatSDKError, ValueError):
    """参数串URL编码/解码往返失败"""


class SerializationError(WeChatSDKError, ValueError):
    """请求对象无法展开为扁平的字符串字典"""


class SignTypeError(WeChatSDKError, ValueError):
    """不支持的签名类型"""


class TransportError(WeChatSDKError):
    """网络层错误(连接失败、DNS失败、请求体写入失败等)

    不会直接抛给调用方, 而是作为 error 参数交给响应处理函数。
    """

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause


class CancellationError(WeChatSDKError):
    """上下文在请求完成前被取消或超时"""


class DeadlineExceededError(CancellationError):
    def __init__(self, message="context deadline exceeded"):
        super().__init__(message)


class CanceledError(CancellationError):
    def __init__(self, message="context canceled"):
        super().__init__(message)


class TokenMissingError(WeChatSDKError):
    def __init__(self, message="token missing"):
        super().__init__(message)


class APIError(WeChatSDKError):
    """微信接口返回的业务错误(errcode/errmsg)"""

    def __init__(self, errmsg, errcode=None):
        super().__init__(errmsg)
        self.errcode = errcode
        self.errmsg = errmsg
