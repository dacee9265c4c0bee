"""小程序接口请求与响应结构"""
from dataclasses import dataclass, field


@dataclass
class ErrorResp:
    errcode: int = 0
    errmsg: str = ""


@dataclass
class SessionResp(ErrorResp):
    openid: str = ""
    session_key: str = ""
    unionid: str = ""


@dataclass
class AccessTokenResp(ErrorResp):
    access_token: str = ""  # 获取到的凭证
    expires_in: int = 0  # 凭证有效时间, 单位: 秒, 目前是7200秒之内的值


@dataclass
class SubscribeMessageReq:
    touser: str = ""
    template_id: str = ""
    page: str = ""
    data: dict = field(default_factory=dict)
    miniprogram_state: str = ""
    lang: str = ""


@dataclass
class LineColor:
    r: int = 0
    g: int = 0
    b: int = 0


@dataclass
class WxCodeUnlimitedReq:
    scene: str = ""
    page: str = ""
    width: int = 0
    auto_color: bool = False
    line_color: LineColor = field(default_factory=LineColor)
    is_hyaline: bool = False
