import json

from urllib3.filepost import encode_multipart_formdata

from ...config import MiniConfig
from ...constants import API_CONFIGS, CONTENT_TYPE_JSON
from ...errors import APIError, TokenMissingError
from ...wechat_base import WeChatServiceBase, json_handler
from .models import AccessTokenResp, ErrorResp, SessionResp, SubscribeMessageReq, WxCodeUnlimitedReq


class WeChatMini(WeChatServiceBase):
    """微信小程序服务端接口"""

    service_name = "wxmini"

    def __init__(self, cfg: MiniConfig | None = None, client=None, nonce_generator=None):
        cfg = cfg if cfg is not None else MiniConfig.from_env()
        super().__init__(client, nonce_generator=nonce_generator)
        self.cfg = cfg
        self.token = ""
        self.logger.info("初始化微信小程序服务成功")

    def set_access_token(self, token: str):
        """设置access_token"""
        self.token = token

    def code2session(self, ctx, js_code: str) -> SessionResp:
        """登录凭证校验

        通过 wx.login 接口获得临时登录凭证 code 后传到开发者服务器调用此接口完成登录流程。
        接口文档: https://developers.weixin.qq.com/miniprogram/dev/api-backend/open-api/login/auth.code2Session.html
        """
        query = {
            "appid": self.cfg.app_id,
            "secret": self.cfg.app_secret,
            "js_code": js_code,
            "grant_type": "authorization_code",
        }
        return self.call_api(ctx, API_CONFIGS["code2session"], "", None, json_handler(SessionResp), query=query)

    def access_token(self, ctx) -> AccessTokenResp:
        """获取小程序全局唯一后台接口调用凭据(access_token)

        接口文档: https://developers.weixin.qq.com/miniprogram/dev/api-backend/open-api/access-token/auth.getAccessToken.html
        """
        query = {
            "grant_type": "client_credential",
            "appid": self.cfg.app_id,
            "secret": self.cfg.app_secret,
        }
        resp = self.call_api(ctx, API_CONFIGS["access_token"], "", None, json_handler(AccessTokenResp), query=query)
        if resp.errcode:
            self.logger.error(f"获取access_token失败: {resp.errcode} {resp.errmsg}")
        return resp

    def send_subscribe_message(self, ctx, req: SubscribeMessageReq) -> ErrorResp:
        """发送订阅消息

        接口文档: https://developers.weixin.qq.com/miniprogram/dev/api-backend/open-api/subscribe-message/subscribeMessage.send.html
        """
        query = self._token_query()
        return self.call_api(ctx, API_CONFIGS["subscribe_message"], CONTENT_TYPE_JSON, req, json_handler(ErrorResp), query=query)

    def wxcode_unlimited(self, ctx, req: WxCodeUnlimitedReq) -> bytes:
        """获取小程序码, 适用于需要的码数量极多的业务场景, 生成的小程序码永久有效

        接口成功时返回图片二进制, 失败时返回JSON错误, 两者没有统一的结构:
        响应体无法解析为JSON对象就认为是图片, 能解析出来就是错误结果。
        接口文档: https://developers.weixin.qq.com/miniprogram/dev/api-backend/open-api/qr-code/wxacode.getUnlimited.html
        """
        query = self._token_query()

        def handle(response, error):
            if error is not None:
                raise error
            buff = response.content
            try:
                result = json.loads(buff)
            except ValueError:
                return buff
            if not isinstance(result, dict):
                return buff
            raise APIError(result.get("errmsg", ""), result.get("errcode"))

        return self.call_api(ctx, API_CONFIGS["wxcode_unlimited"], CONTENT_TYPE_JSON, req, handle, query=query)

    def check_image(self, ctx, media: bytes) -> ErrorResp:
        """校验一张图片是否含有违法违规内容

        接口文档: https://developers.weixin.qq.com/miniprogram/dev/api-backend/open-api/sec-check/security.imgSecCheck.html
        """
        query = self._token_query()
        body, content_type = encode_multipart_formdata({"media": media})
        return self.call_api(ctx, API_CONFIGS["img_sec_check"], content_type, body, json_handler(ErrorResp), query=query)

    def check_message(self, ctx, msg: str) -> ErrorResp:
        """检查一段文本是否含有违法违规内容

        接口文档: https://developers.weixin.qq.com/miniprogram/dev/api-backend/open-api/sec-check/security.msgSecCheck.html
        """
        query = self._token_query()
        req = {"content": msg}
        return self.call_api(ctx, API_CONFIGS["msg_sec_check"], CONTENT_TYPE_JSON, req, json_handler(ErrorResp), query=query)

    def _token_query(self):
        if not self.token:
            raise TokenMissingError()
        return {"access_token": self.token}
