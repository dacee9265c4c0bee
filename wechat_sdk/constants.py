"""接口地址与公共常量配置"""

CONTENT_TYPE_XML = "application/xml"
CONTENT_TYPE_JSON = "application/json"

# 签名类型, 默认为MD5, 支持HMAC-SHA256和MD5
SIGN_TYPE_MD5 = "MD5"
SIGN_TYPE_HMAC_SHA256 = "HMAC-SHA256"

TRADE_TYPE_JSAPI = "JSAPI"

# 随机串长度
NONCE_LENGTH = 32

RETURN_CODE_SUCCESS = "SUCCESS"
RETURN_CODE_FAIL = "FAIL"

# 交易状态映射表
TRADE_STATE_MAP = {
    "SUCCESS": "支付成功",
    "REFUND": "转入退款",
    "NOTPAY": "未支付",
    "CLOSED": "已关闭",
    "REVOKED": "已撤销(刷卡支付)",
    "USERPAYING": "用户支付中",
    "PAYERROR": "支付失败(其他原因, 如银行返回失败)",
}

# API配置
API_CONFIGS = {
    "unified_order": {
        # 接口请求方法
        "method": "POST",
        # 接口请求地址
        "url": "https://api.mch.weixin.qq.com/pay/unifiedorder",
        # 接口描述
        "desc": "统一下单",
    },
    "query_order": {
        "method": "POST",
        "url": "https://api.mch.weixin.qq.com/pay/orderquery",
        "desc": "查询订单",
    },
    "close_order": {
        "method": "POST",
        "url": "https://api.mch.weixin.qq.com/pay/closeorder",
        "desc": "关闭订单",
    },
    "mch_transfer": {
        "method": "POST",
        "url": "https://api.mch.weixin.qq.com/mmpaymkttransfers/promotion/transfers",
        "desc": "企业付款到零钱",
    },
    "mch_transfer_query": {
        "method": "POST",
        "url": "https://api.mch.weixin.qq.com/mmpaymkttransfers/gettransferinfo",
        "desc": "查询企业付款",
    },
    "refund": {
        "method": "POST",
        "url": "https://api.mch.weixin.qq.com/secapi/pay/refund",
        "desc": "申请退款",
    },
    "code2session": {
        "method": "GET",
        "url": "https://api.weixin.qq.com/sns/jscode2session",
        "desc": "登录凭证校验",
    },
    "access_token": {
        "method": "GET",
        "url": "https://api.weixin.qq.com/cgi-bin/token",
        "desc": "获取接口调用凭据",
    },
    "subscribe_message": {
        "method": "POST",
        "url": "https://api.weixin.qq.com/cgi-bin/message/subscribe/send",
        "desc": "发送订阅消息",
    },
    "wxcode_unlimited": {
        "method": "POST",
        "url": "https://api.weixin.qq.com/wxa/getwxacodeunlimit",
        "desc": "获取小程序码",
    },
    "img_sec_check": {
        "method": "POST",
        "url": "https://api.weixin.qq.com/wxa/img_sec_check",
        "desc": "图片内容安全检测",
    },
    "msg_sec_check": {
        "method": "POST",
        "url": "https://api.weixin.qq.com/wxa/msg_sec_check",
        "desc": "文本内容安全检测",
    },
}
