from .wechat_mch import WeChatMch
