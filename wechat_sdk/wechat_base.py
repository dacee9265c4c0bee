from urllib.parse import urlencode

import requests
from loguru import logger

from .codec import flatten, from_json, from_xml, to_json, to_xml
from .constants import CONTENT_TYPE_JSON, CONTENT_TYPE_XML, NONCE_LENGTH, SIGN_TYPE_MD5
from .http import CtxHttp, HandlerFunc
from .util import default_nonce_generator, gen_param_str, make_sign


class WeChatServiceBase:
    """微信服务基础类，处理签名、随机串和请求分发等公共功能"""

    service_name = "wx"

    def __init__(self, client=None, key="", sign_type=SIGN_TYPE_MD5, nonce_generator=None):
        self.client = client if client is not None else CtxHttp()
        self.key = key
        self.sign_type = sign_type or SIGN_TYPE_MD5
        self.nonce_generator = nonce_generator or default_nonce_generator
        self.logger = logger.bind(service=self.service_name)

    def rand_string(self, n=NONCE_LENGTH):
        return self.nonce_generator.generate(n)

    def get(self, ctx, url, handler: HandlerFunc):
        return self.do_req(ctx, "GET", url, "", None, handler)

    def post_json(self, ctx, url, req, handler: HandlerFunc):
        return self.do_req(ctx, "POST", url, CONTENT_TYPE_JSON, req, handler)

    def post_xml(self, ctx, url, req, handler: HandlerFunc):
        return self.do_req(ctx, "POST", url, CONTENT_TYPE_XML, req, handler)

    def call_api(self, ctx, api, content_type, req, handler: HandlerFunc, query=None):
        """按 API_CONFIGS 中的接口配置(method/url/desc)发送请求, query 为追加到地址上的查询参数"""
        url = api["url"]
        if query:
            url = f"{url}?{urlencode(query)}"
        self.logger.info(f"[{self.service_name}] 调用接口: {api['desc']}")
        return self.do_req(ctx, api["method"], url, content_type, req, handler)

    def do_req(self, ctx, method, url, content_type, req, handler: HandlerFunc):
        """按 content_type 序列化请求体并发送

        XML/JSON 类型会把 req 序列化后发送, 其他类型只接受原始 bytes,
        content_type 非空时设置同名请求头。返回 handler 的返回值。
        """
        self.logger.info(f"[{self.service_name}] request - url: {url}, contentType: {content_type}")
        self.logger.debug(f"[{self.service_name}] request body: {req!r}")
        try:
            if content_type == CONTENT_TYPE_XML:
                body = to_xml(req)
            elif content_type == CONTENT_TYPE_JSON:
                body = to_json(req)
            elif isinstance(req, (bytes, bytearray)):
                body = bytes(req)
            else:
                body = None

            headers = {"Content-Type": content_type} if content_type else None
            return self.client.do(ctx, method, url, headers, body, handler)
        except Exception as e:
            self.logger.error(f"[{self.service_name}] request failed - url: {url}, error: {str(e)}")
            raise

    def sign(self, req, sign_type=None) -> str:
        """生成请求签名

        签名规则参考: https://pay.weixin.qq.com/wiki/doc/api/jsapi.php?chapter=4_3
        """
        param_str = gen_param_str(flatten(req))
        self.logger.debug(f"待签名参数串: {param_str}")
        return make_sign(param_str, self.key, sign_type or self.sign_type)

    def verify(self, record) -> bool:
        """清空 sign 字段后重新计算签名, 与原签名完全一致才算通过"""
        params = flatten(record)
        old_sign = params.get("sign", "")
        params["sign"] = ""
        sign = self.sign(params, params.get("sign_type") or self.sign_type)
        return old_sign == sign


def xml_handler(cls):
    """把响应体按XML解码为cls, 网络错误直接抛出"""

    def handle(response: requests.Response | None, error):
        if error is not None:
            raise error
        return from_xml(cls, response.content)

    return handle


def json_handler(cls):
    def handle(response: requests.Response | None, error):
        if error is not None:
            raise error
        return from_json(cls, response.content)

    return handle
