from .wechat_mini import WeChatMini
