import time

from ...codec import from_dict, to_xml, xml_to_dict
from ...config import PayConfig
from ...constants import API_CONFIGS, CONTENT_TYPE_XML, RETURN_CODE_SUCCESS, TRADE_STATE_MAP
from ...errors import WeChatSDKError
from ...wechat_base import WeChatServiceBase, xml_handler
from .models import (
    CloseOrderReq,
    CloseOrderResp,
    NotifyReq,
    NotifyResp,
    PrepayReturn,
    QueryOrderReq,
    QueryOrderResp,
    UnifiedOrderReq,
    UnifiedOrderResp,
)


class WeChatPay(WeChatServiceBase):
    """微信支付(JSAPI/小程序)接口"""

    service_name = "wxpay"

    def __init__(self, cfg: PayConfig | None = None, client=None, nonce_generator=None):
        cfg = cfg if cfg is not None else PayConfig.from_env()
        super().__init__(client, key=cfg.api_key, sign_type=cfg.sign_type, nonce_generator=nonce_generator)
        self.cfg = cfg
        self.logger.info("初始化微信支付服务成功")

    def unified_order(self, ctx, req: UnifiedOrderReq) -> UnifiedOrderResp:
        """统一下单

        未填写的 appid/mch_id/nonce_str/sign_type/trade_type 使用服务配置补全, 然后签名。
        接口文档: https://pay.weixin.qq.com/wiki/doc/api/jsapi.php?chapter=9_1
        """
        self.logger.info(f"开始统一下单 - 商户订单号: {req.out_trade_no}, 金额: {req.total_fee}分")
        req.appid = req.appid or self.cfg.app_id
        req.mch_id = req.mch_id or self.cfg.mch_id
        req.nonce_str = req.nonce_str or self.rand_string()
        req.sign_type = req.sign_type or self.sign_type
        req.trade_type = req.trade_type or self.cfg.trade_type
        req.sign = ""
        req.sign = self.sign(req, req.sign_type)

        resp = self.call_api(ctx, API_CONFIGS["unified_order"], CONTENT_TYPE_XML, req, xml_handler(UnifiedOrderResp))
        self.logger.info(f"[wxpay] unified order resp: {resp}")
        return resp

    def query_order(self, ctx, out_trade_no: str) -> QueryOrderResp:
        """查询订单

        接口文档: https://pay.weixin.qq.com/wiki/doc/api/jsapi.php?chapter=9_2
        """
        req = QueryOrderReq(
            appid=self.cfg.app_id,
            mch_id=self.cfg.mch_id,
            out_trade_no=out_trade_no,
            nonce_str=self.rand_string(),
            sign_type=self.sign_type,
        )
        req.sign = self.sign(req)

        resp = self.call_api(ctx, API_CONFIGS["query_order"], CONTENT_TYPE_XML, req, xml_handler(QueryOrderResp))
        state_msg = TRADE_STATE_MAP.get(resp.trade_state, "未知状态")
        self.logger.info(f"订单查询结果 - 商户订单号: {out_trade_no}, 状态: {resp.trade_state}({state_msg})")
        return resp

    def close_order(self, ctx, out_trade_no: str) -> CloseOrderResp:
        """关闭订单

        商户订单支付失败需要生成新单号重新发起支付时, 或用户支付超时系统不再受理时,
        需要对原订单号调用关单, 避免重复支付。
        接口文档: https://pay.weixin.qq.com/wiki/doc/api/jsapi.php?chapter=9_3
        """
        req = CloseOrderReq(
            appid=self.cfg.app_id,
            mch_id=self.cfg.mch_id,
            nonce_str=self.rand_string(),
            out_trade_no=out_trade_no,
            sign_type=self.sign_type,
        )
        req.sign = self.sign(req)

        resp = self.call_api(ctx, API_CONFIGS["close_order"], CONTENT_TYPE_XML, req, xml_handler(CloseOrderResp))
        self.logger.info(f"[wxpay] close order resp: {resp}")
        return resp

    def gen_prepay(self, prepay_id: str, nonce_str: str = "") -> PrepayReturn:
        """生成小程序调起支付所需的参数"""
        prepay = PrepayReturn(
            app_id=self.cfg.app_id,
            time_stamp=str(int(time.time())),
            nonce_str=nonce_str or self.rand_string(),
            package=f"prepay_id={prepay_id}",
            sign_type=self.sign_type,
        )
        prepay.pay_sign = self.sign(prepay)
        return prepay

    def verify_sign(self, notify) -> bool:
        """校验支付结果通知的签名, notify 可以是 NotifyReq 或通知的完整参数字典

        真实通知里可能带有 NotifyReq 未声明的字段(如代金券信息),
        这些字段同样参与签名, 所以优先传入 parse_notify_params 的结果。
        """
        try:
            ok = self.verify(notify)
        except WeChatSDKError as e:
            self.logger.error(f"[wxpay] verify sign error: {str(e)}")
            return False
        if not ok:
            self.logger.warning("支付结果通知验签失败")
        return ok

    def parse_notify_params(self, body: bytes) -> dict[str, str]:
        return xml_to_dict(body)

    def parse_notify(self, body: bytes) -> NotifyReq:
        return from_dict(NotifyReq, self.parse_notify_params(body))

    def handle_notify(self, body: bytes) -> NotifyReq:
        """解析并验签支付结果通知, 验签失败抛出 WeChatSDKError"""
        params = self.parse_notify_params(body)
        if not self.verify_sign(params):
            raise WeChatSDKError("支付结果通知验签失败")
        notify = from_dict(NotifyReq, params)
        self.logger.info(
            f"支付结果通知 - 商户订单号: {notify.out_trade_no}, 微信支付单号: {notify.transaction_id}, "
            f"结果: {notify.result_code}"
        )
        return notify

    @staticmethod
    def notify_response(return_code: str = RETURN_CODE_SUCCESS, return_msg: str = "OK") -> bytes:
        """生成回复微信支付通知的XML报文"""
        return to_xml(NotifyResp(return_code=return_code, return_msg=return_msg))

