"""企业付款到零钱、付款查询与申请退款(需要商户API证书)"""
import os

import requests
from loguru import logger

from ...config import MchConfig
from ...constants import API_CONFIGS, CONTENT_TYPE_XML
from ...errors import ConfigError
from ...http import CtxHttp
from ...wechat_base import WeChatServiceBase, xml_handler
from .models import (
    MchPaymentQueryReq,
    MchPaymentQueryResp,
    MchPayRefundReq,
    MchPayRefundResp,
    MchPayReq,
    MchPayResp,
)


class WeChatMch(WeChatServiceBase):
    """微信商户接口实现类"""

    service_name = "wxmch"

    def __init__(self, cfg: MchConfig | None = None, client=None, nonce_generator=None):
        cfg = cfg if cfg is not None else MchConfig.from_env()
        self.cfg = cfg
        if client is None:
            client = CtxHttp(self.tls_session())
        super().__init__(client, key=cfg.api_key, sign_type=cfg.sign_type, nonce_generator=nonce_generator)
        self.logger.info("初始化微信商户服务成功")

    def tls_session(self) -> requests.Session:
        """构造携带商户API证书的会话"""
        files = [
            ("WECHAT_CA_CERT_PATH", self.cfg.ca_cert_file),
            ("WECHAT_API_CERT_PATH", self.cfg.api_cert_file),
            ("WECHAT_API_KEY_PATH", self.cfg.api_key_file),
        ]
        for name, path in files:
            if not path or not os.path.isfile(path):
                error_msg = f"加载商户证书失败: {name}={path} 文件不存在"
                logger.error(error_msg)
                raise ConfigError(error_msg)

        session = requests.Session()
        session.verify = self.cfg.ca_cert_file
        session.cert = (self.cfg.api_cert_file, self.cfg.api_key_file)
        return session

    def transfer_to_balance(self, ctx, req: MchPayReq) -> MchPayResp:
        """企业付款到零钱

        接口文档: https://pay.weixin.qq.com/wiki/doc/api/tools/mch_pay.php?chapter=14_2
        """
        self.logger.info(f"开始企业付款 - 商户订单号: {req.partner_trade_no}, 金额: {req.amount}分")
        req.mch_appid = req.mch_appid or self.cfg.app_id
        req.mchid = req.mchid or self.cfg.mch_id
        req.nonce_str = req.nonce_str or self.rand_string()
        req.sign = ""
        req.sign = self.sign(req)

        resp = self.call_api(ctx, API_CONFIGS["mch_transfer"], CONTENT_TYPE_XML, req, xml_handler(MchPayResp))
        self.logger.info(f"[wxmch] transfer to balance resp: {resp}")
        return resp

    def query_transfer(self, ctx, partner_trade_no: str) -> MchPaymentQueryResp:
        """查询企业付款

        接口文档: https://pay.weixin.qq.com/wiki/doc/api/tools/mch_pay.php?chapter=14_3
        """
        req = MchPaymentQueryReq(
            appid=self.cfg.app_id,
            mch_id=self.cfg.mch_id,
            nonce_str=self.rand_string(),
            partner_trade_no=partner_trade_no,
        )
        req.sign = self.sign(req)

        resp = self.call_api(ctx, API_CONFIGS["mch_transfer_query"], CONTENT_TYPE_XML, req, xml_handler(MchPaymentQueryResp))
        self.logger.info(f"[wxmch] query transfer resp: {resp}")
        return resp

    def refund(self, ctx, req: MchPayRefundReq) -> MchPayRefundResp:
        """申请退款

        接口文档: https://pay.weixin.qq.com/wiki/doc/api/jsapi.php?chapter=9_4
        """
        self.logger.info(f"开始申请退款 - 退款单号: {req.out_refund_no}, 金额: {req.refund_fee}分")
        req.appid = req.appid or self.cfg.app_id
        req.mch_id = req.mch_id or self.cfg.mch_id
        req.nonce_str = req.nonce_str or self.rand_string()
        req.sign = ""
        req.sign = self.sign(req)

        resp = self.call_api(ctx, API_CONFIGS["refund"], CONTENT_TYPE_XML, req, xml_handler(MchPayRefundResp))
        self.logger.info(f"[wxmch] refund resp: {resp}")
        return resp
