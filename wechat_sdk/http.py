"""可取消的HTTP请求

网络请求在后台线程中执行, 调用线程等待 "请求完成" 与 "上下文取消" 两者中先发生的一个:

- 请求先完成: 在调用线程中执行处理函数 handler(response, error), 返回它的结果
- 上下文先取消: 立即抛出取消异常, 不等待后台请求, 也不会调用 handler

后台线程把结果写入自己的 Future, 写入从不阻塞, 调用方放弃等待后线程照常结束。
"""
import threading
from concurrent.futures import FIRST_COMPLETED, Future, wait
from typing import Any, Callable

import requests
from loguru import logger

from .constants import CONTENT_TYPE_JSON, CONTENT_TYPE_XML
from .errors import TransportError

HandlerFunc = Callable[[requests.Response | None, TransportError | None], Any]


class CtxHttp:
    """基于 requests.Session 的可取消请求实现

    TLS/证书等传输配置由传入的 session 负责。
    """

    def __init__(self, session=None):
        self.session = session if session is not None else requests.Session()

    def get(self, ctx, url, handler: HandlerFunc):
        return self.do(ctx, "GET", url, None, None, handler)

    def post(self, ctx, url, content_type, body, handler: HandlerFunc):
        return self.do(ctx, "POST", url, {"Content-Type": content_type}, body, handler)

    def post_json(self, ctx, url, body, handler: HandlerFunc):
        return self.post(ctx, url, CONTENT_TYPE_JSON, body, handler)

    def post_xml(self, ctx, url, body, handler: HandlerFunc):
        return self.post(ctx, url, CONTENT_TYPE_XML, body, handler)

    def do(self, ctx, method, url, headers, body, handler: HandlerFunc):
        """发送请求并等待结果或取消

        Raises:
            CancellationError: 上下文在请求完成前已取消或超时
        """
        err = ctx.err()
        if err is not None:
            raise err
        timeout = ctx.remaining()
        if timeout is not None and timeout <= 0:
            # 检查之后截止时间已到
            raise ctx.err()

        outcome = Future()
        worker = threading.Thread(
            target=self._round_trip,
            args=(outcome, timeout, method, url, headers, body),
            name=f"ctx-http-{method}",
            daemon=True,
        )
        worker.start()

        wait([outcome, ctx.done()], return_when=FIRST_COMPLETED)
        if not outcome.done():
            logger.warning(f"请求被取消: {method} {url}")
            raise ctx.err()

        response, error = outcome.result()
        return handler(response, error)

    def _round_trip(self, outcome, timeout, method, url, headers, body):
        try:
            try:
                response = self.session.request(
                    method, url, headers=headers, data=body, timeout=timeout
                )
                outcome.set_result((response, None))
            except requests.RequestException as e:
                outcome.set_result((None, TransportError(f"请求失败: {str(e)}", cause=e)))
        except Exception as e:
            logger.exception(f"ctx http 后台线程异常: {str(e)}")
            if not outcome.done():
                outcome.set_result((None, TransportError(f"后台请求异常: {str(e)}", cause=e)))
