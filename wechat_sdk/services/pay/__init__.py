from .wechat_pay import WeChatPay
