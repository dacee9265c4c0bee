"""请求上下文: 超时与主动取消信号

一个上下文只属于一次调用, 由调用方持有并负责取消, 分发器只观察不修改。

    with with_timeout(10) as ctx:
        resp = pay.query_order(ctx, "ORDER1")
"""
import threading
import time
from concurrent.futures import Future

from .errors import CanceledError, DeadlineExceededError


class Context:
    def __init__(self, parent=None, timeout=None):
        self._done = Future()
        self._lock = threading.Lock()
        self._timer = None
        self._parent = parent
        self._children = set()
        self._deadline = parent.deadline if parent is not None else None

        if timeout is not None:
            deadline = time.monotonic() + timeout
            if self._deadline is None or deadline < self._deadline:
                self._deadline = deadline

        if parent is not None:
            parent._add_child(self)

        if timeout is not None and not self._done.done():
            self._timer = threading.Timer(max(timeout, 0), self._expire)
            self._timer.daemon = True
            self._timer.start()

    @property
    def deadline(self):
        """截止时间(time.monotonic()时钟), 没有截止时间时为None"""
        return self._deadline

    def remaining(self):
        """距离截止时间的剩余秒数, 不会小于0"""
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    def done(self) -> Future:
        """上下文结束时完成的future, 结果为对应的取消异常"""
        return self._done

    def err(self):
        if not self._done.done() and self._deadline is not None and time.monotonic() >= self._deadline:
            self._expire()
        if self._done.done():
            return self._done.result()
        return None

    def cancel(self):
        self._finish(CanceledError())

    def _expire(self):
        self._finish(DeadlineExceededError())

    def _add_child(self, child):
        with self._lock:
            if not self._done.done():
                self._children.add(child)
                return
        child._finish(self._done.result())

    def _remove_child(self, child):
        with self._lock:
            self._children.discard(child)

    def _finish(self, error):
        with self._lock:
            if self._done.done():
                return
            self._done.set_result(error)
            children, self._children = self._children, set()
        if self._timer is not None:
            self._timer.cancel()
        for child in children:
            child._finish(error)
        # 结束后从父上下文摘除
        if self._parent is not None:
            self._parent._remove_child(self)
            self._parent = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cancel()
        return False


def background() -> Context:
    """永不取消的根上下文"""
    return Context()


def with_cancel(parent=None) -> Context:
    return Context(parent)


def with_timeout(seconds, parent=None) -> Context:
    return Context(parent, timeout=seconds)
