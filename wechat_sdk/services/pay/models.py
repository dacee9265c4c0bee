"""支付接口请求/响应结构"""
from dataclasses import dataclass, field


@dataclass
class UnifiedOrderReq:
    appid: str = ""  # 小程序ID
    mch_id: str = ""  # 商户号
    device_info: str = ""  # 设备号
    nonce_str: str = ""  # 随机字符串
    sign: str = ""  # 签名
    sign_type: str = ""  # 签名类型
    body: str = ""  # 商品描述
    detail: str = ""  # 商品详情
    attach: str = ""  # 附加数据
    out_trade_no: str = ""  # 商户订单号
    fee_type: str = ""  # 标价币种
    total_fee: int = 0  # 标价金额, 单位为分
    spbill_create_ip: str = ""  # 终端IP
    time_start: str = ""  # 交易起始时间
    time_expire: str = ""  # 交易结束时间
    goods_tag: str = ""  # 订单优惠标记
    notify_url: str = ""  # 通知地址
    trade_type: str = ""  # 交易类型
    openid: str = ""  # trade_type=JSAPI时必传, 用户在商户appid下的唯一标识


@dataclass
class UnifiedOrderResp:
    return_code: str = ""
    return_msg: str = ""
    appid: str = ""
    mch_id: str = ""
    nonce_str: str = ""
    sign: str = ""
    result_code: str = ""
    err_code: str = ""
    err_code_des: str = ""
    trade_type: str = ""
    prepay_id: str = ""
    code_url: str = ""


@dataclass
class QueryOrderReq:
    appid: str = ""
    mch_id: str = ""
    out_trade_no: str = ""
    nonce_str: str = ""
    sign: str = ""
    sign_type: str = ""


@dataclass
class QueryOrderResp:
    return_code: str = ""
    return_msg: str = ""
    appid: str = ""
    mch_id: str = ""
    nonce_str: str = ""
    sign: str = ""
    result_code: str = ""
    err_code: str = ""
    err_code_des: str = ""
    device_info: str = ""
    openid: str = ""
    is_subscribe: str = ""
    trade_type: str = ""
    # 交易状态, 取值参考 TRADE_STATE_MAP
    trade_state: str = ""
    trade_state_desc: str = ""
    bank_type: str = ""
    total_fee: int = 0
    settlement_total_fee: int = 0
    fee_type: str = ""
    cash_fee: int = 0
    cash_fee_type: str = ""
    transaction_id: str = ""
    out_trade_no: str = ""
    time_end: str = ""


@dataclass
class CloseOrderReq:
    appid: str = ""
    mch_id: str = ""
    nonce_str: str = ""
    out_trade_no: str = ""
    sign: str = ""
    sign_type: str = ""


@dataclass
class CloseOrderResp:
    return_code: str = ""
    return_msg: str = ""
    appid: str = ""
    mch_id: str = ""
    nonce_str: str = ""
    sign: str = ""
    result_code: str = ""
    result_msg: str = ""
    err_code: str = ""
    err_code_des: str = ""


@dataclass
class PrepayReturn:
    """小程序调起支付所需的参数, 签名放在 paySign"""

    app_id: str = field(default="", metadata={"name": "appId"})
    time_stamp: str = field(default="", metadata={"name": "timeStamp"})
    nonce_str: str = field(default="", metadata={"name": "nonceStr"})
    package: str = ""
    sign_type: str = field(default="", metadata={"name": "signType"})
    pay_sign: str = field(default="", metadata={"name": "paySign"})


@dataclass
class NotifyReq:
    return_code: str = ""
    return_msg: str = ""
    appid: str = ""
    mch_id: str = ""
    device_info: str = ""
    nonce_str: str = ""
    sign: str = ""
    sign_type: str = ""
    result_code: str = ""
    err_code: str = ""
    err_code_des: str = ""
    openid: str = ""
    is_subscribe: str = ""
    trade_type: str = ""
    bank_type: str = ""
    total_fee: str = ""
    fee_type: str = ""
    cash_fee: str = ""
    cash_fee_type: str = ""
    transaction_id: str = ""
    out_trade_no: str = ""
    time_end: str = ""


@dataclass
class NotifyResp:
    return_code: str = ""
    return_msg: str = ""
