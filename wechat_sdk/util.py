"""随机串、参数串拼接与摘要工具"""
import random
import threading
import time
from urllib.parse import unquote_plus, urlencode

from Crypto.Hash import HMAC, MD5, SHA256

from .constants import SIGN_TYPE_HMAC_SHA256, SIGN_TYPE_MD5
from .errors import EncodingError, SignTypeError

LETTERS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
LETTER_IDX_BITS = 6  # 6位足够表示一个字符下标
LETTER_IDX_MASK = (1 << LETTER_IDX_BITS) - 1
LETTER_IDX_MAX = 63 // LETTER_IDX_BITS  # 一次63位随机数可取出的下标个数


class NonceGenerator:
    """随机字符串生成器

    只用于防重放的 nonce_str, 不是密钥, 因此使用普通伪随机源即可。
    内部随机源会被多个线程共享, 每次取数都加锁。
    """

    def __init__(self, seed=None):
        self._random = random.Random(time.time_ns() if seed is None else seed)
        self._lock = threading.Lock()

    def generate(self, n: int) -> str:
        """生成长度为n的字母数字随机串, 一次随机数拆成多个6位下标使用"""
        buf = []
        with self._lock:
            cache, remain = self._random.getrandbits(63), LETTER_IDX_MAX
            while len(buf) < n:
                if remain == 0:
                    cache, remain = self._random.getrandbits(63), LETTER_IDX_MAX
                idx = cache & LETTER_IDX_MASK
                if idx < len(LETTERS):
                    buf.append(LETTERS[idx])
                cache >>= LETTER_IDX_BITS
                remain -= 1
        return "".join(buf)


# 进程级默认生成器, 启动时以时间为种子初始化一次
default_nonce_generator = NonceGenerator()


def rand_string(n: int) -> str:
    return default_nonce_generator.generate(n)


def gen_param_str(params: dict[str, str]) -> str:
    """生成待签名参数串

    1. 去掉值为空字符串的参数
    2. 按参数名ASCII码从小到大排序后做URL编码
    3. 再把编码结果还原成原始字符, 微信签名要求参数值不做URL编码

    Raises:
        EncodingError: 编码或解码往返失败
    """
    pairs = sorted((k, v) for k, v in params.items() if v != "")
    try:
        escaped = urlencode(pairs)
        return unquote_plus(escaped, errors="strict")
    except (UnicodeError, TypeError) as e:
        raise EncodingError(f"参数串编码失败: {str(e)}") from e


def hash_md5(sign_str: str) -> str:
    digest = MD5.new(sign_str.encode("utf-8"))
    return digest.hexdigest().upper()


def hash_hmac_sha256(sign_str: str, key: str) -> str:
    digest = HMAC.new(key.encode("utf-8"), sign_str.encode("utf-8"), digestmod=SHA256)
    return digest.hexdigest().upper()


def make_sign(param_str: str, key: str, sign_type: str = SIGN_TYPE_MD5) -> str:
    """对 参数串&key=商户密钥 计算签名, 结果为大写十六进制"""
    sign_str = f"{param_str}&key={key}"
    if sign_type == SIGN_TYPE_HMAC_SHA256:
        return hash_hmac_sha256(sign_str, key)
    if sign_type in (SIGN_TYPE_MD5, "", None):
        return hash_md5(sign_str)
    raise SignTypeError(f"不支持的签名类型: {sign_type}")
