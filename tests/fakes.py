import threading
import time


class FakeResponse:
    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code


class FakeSession:
    """记录请求并返回预设响应的 requests.Session 替身"""

    def __init__(self, content=b"", delay=0, exc=None):
        self.content = content
        self.delay = delay
        self.exc = exc
        self.calls = []
        self.finished = threading.Event()

    def request(self, method, url, headers=None, data=None, timeout=None):
        self.calls.append({"method": method, "url": url, "headers": headers, "data": data, "timeout": timeout})
        try:
            if self.delay:
                time.sleep(self.delay)
            if self.exc is not None:
                raise self.exc
            return FakeResponse(self.content)
        finally:
            self.finished.set()
