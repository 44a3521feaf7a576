import threading
import time

from wiredoc.ctxutil import DelayedCancel, with_delay


def test_cancelled_after_done_and_delay():
    done = threading.Event()
    ctx = with_delay(done, 0.05)
    done.set()
    assert ctx.wait(2.0) is True
    assert ctx.is_cancelled() is True


def test_not_cancelled_without_done():
    done = threading.Event()
    ctx = with_delay(done, 0.0)
    assert ctx.wait(0.1) is False
    assert ctx.is_cancelled() is False
    ctx.cancel()


def test_delay_is_respected():
    done = threading.Event()
    done.set()
    start = time.monotonic()
    ctx = with_delay(done, 0.3)
    assert ctx.wait(2.0) is True
    assert time.monotonic() - start >= 0.25


def test_manual_cancel_before_done():
    done = threading.Event()
    ctx = with_delay(done, 10.0)
    ctx.cancel()
    assert ctx.is_cancelled() is True
    assert ctx.wait(0) is True


def test_manual_cancel_during_delay():
    done = threading.Event()
    done.set()
    ctx = with_delay(done, 10.0)
    ctx.cancel()
    assert ctx.wait(0.5) is True


def test_context_manager_cancels():
    with DelayedCancel() as ctx:
        assert ctx.is_cancelled() is False
    assert ctx.is_cancelled() is True