import time

import pytest

from wechat_sdk.context import background, with_cancel, with_timeout
from wechat_sdk.errors import CanceledError, CancellationError, DeadlineExceededError


def test_background_never_done():
    ctx = background()
    assert ctx.err() is None
    assert ctx.remaining() is None
    assert not ctx.done().done()


def test_cancel():
    ctx = with_cancel()
    ctx.cancel()
    assert isinstance(ctx.err(), CanceledError)
    assert ctx.done().done()


def test_cancel_is_idempotent():
    ctx = with_cancel()
    ctx.cancel()
    first = ctx.err()
    ctx.cancel()
    assert ctx.err() is first


def test_timeout_expires():
    ctx = with_timeout(0.05)
    assert ctx.err() is None
    ctx.done().result(timeout=2)
    assert isinstance(ctx.err(), DeadlineExceededError)
    assert isinstance(ctx.err(), CancellationError)
    assert ctx.remaining() == 0.0


def test_err_checks_deadline_directly():
    ctx = with_timeout(0.01)
    time.sleep(0.05)
    assert isinstance(ctx.err(), DeadlineExceededError)


def test_parent_cancel_propagates():
    parent = with_cancel()
    child = with_timeout(10, parent)
    parent.cancel()
    assert isinstance(child.err(), CanceledError)


def test_child_inherits_parent_deadline():
    parent = with_timeout(0.5)
    child = with_cancel(parent)
    assert child.remaining() is not None
    assert child.remaining() <= 0.5


def test_child_cancel_does_not_touch_parent():
    parent = with_cancel()
    child = with_cancel(parent)
    child.cancel()
    assert parent.err() is None


def test_context_manager_cancels_on_exit():
    with with_timeout(10) as ctx:
        assert ctx.err() is None
    assert isinstance(ctx.err(), CanceledError)


def test_context_manager_keeps_deadline_error():
    with with_timeout(0.01) as ctx:
        time.sleep(0.05)
        with pytest.raises(DeadlineExceededError):
            raise ctx.err()
    assert isinstance(ctx.err(), DeadlineExceededError)


def test_finished_children_are_released_by_parent():
    parent = with_cancel()
    for _ in range(1000):
        with with_cancel(parent):
            pass
    assert parent._children == set()


def test_expired_child_is_released_by_parent():
    parent = with_cancel()
    child = with_timeout(0.01, parent)
    assert child in parent._children
    time.sleep(0.1)
    assert isinstance(child.err(), DeadlineExceededError)
    assert parent._children == set()
    assert parent.err() is None


def test_child_of_done_parent_finishes_immediately():
    parent = with_cancel()
    parent.cancel()
    child = with_timeout(10, parent)
    assert isinstance(child.err(), CanceledError)
    assert parent._children == set()
