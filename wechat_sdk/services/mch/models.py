"""企业付款/退款接口请求与响应结构"""
from dataclasses import dataclass


@dataclass
class MchPayReq:
    mch_appid: str = ""
    mchid: str = ""
    nonce_str: str = ""
    sign: str = ""
    partner_trade_no: str = ""
    openid: str = ""
    check_name: str = ""  # NO_CHECK: 不校验真实姓名, FORCE_CHECK: 强校验真实姓名
    amount: int = 0  # 付款金额, 单位为分
    desc: str = ""
    spbill_create_ip: str = ""


@dataclass
class MchPayResp:
    return_code: str = ""
    return_msg: str = ""
    mch_appid: str = ""
    mchid: str = ""
    nonce_str: str = ""
    result_code: str = ""
    err_code: str = ""
    err_code_des: str = ""
    partner_trade_no: str = ""
    payment_no: str = ""
    payment_time: str = ""


@dataclass
class MchPaymentQueryReq:
    appid: str = ""
    mch_id: str = ""
    nonce_str: str = ""
    sign: str = ""
    partner_trade_no: str = ""


@dataclass
class MchPaymentQueryResp:
    return_code: str = ""
    return_msg: str = ""
    appid: str = ""
    mch_id: str = ""
    nonce_str: str = ""
    result_code: str = ""
    err_code: str = ""
    err_code_des: str = ""
    partner_trade_no: str = ""
    detail_id: str = ""
    status: str = ""
    reason: str = ""
    openid: str = ""
    transfer_name: str = ""
    payment_amount: int = 0
    transfer_time: str = ""
    payment_time: str = ""
    desc: str = ""


@dataclass
class MchPayRefundReq:
    appid: str = ""
    mch_id: str = ""
    nonce_str: str = ""
    sign: str = ""
    transaction_id: str = ""
    out_refund_no: str = ""
    total_fee: int = 0
    refund_fee: int = 0
    refund_desc: str = ""


@dataclass
class MchPayRefundResp:
    return_code: str = ""
    return_msg: str = ""
    appid: str = ""
    mch_id: str = ""
    nonce_str: str = ""
    result_code: str = ""
    err_code: str = ""
    err_code_des: str = ""
    transaction_id: str = ""
    out_trade_no: str = ""
    out_refund_no: str = ""
    refund_id: str = ""
    refund_fee: int = 0
    total_fee: int = 0
    cash_fee: int = 0
