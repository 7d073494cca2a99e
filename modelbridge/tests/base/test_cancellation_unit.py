"""Unit tests for cooperative cancellation primitives."""
from __future__ import annotations

import pytest

from modelbridge.base.cancellation import CancellationToken, CancelledError, raise_if_cancelled


def test_cancel_cascades_to_children_and_is_idempotent():
    parent = CancellationToken()
    child1 = parent.child()
    child2 = parent.child()

    parent.cancel(reason="stop")
    parent.cancel(reason="ignored")

    assert parent.cancelled is True and parent.reason == "stop"  # nosec B101
    assert child1.cancelled is True and child1.reason == "stop"  # nosec B101
    assert child2.cancelled is True and child2.reason == "stop"  # nosec B101


def test_child_cancel_does_not_affect_parent():
    parent = CancellationToken()
    child = parent.child()
    child.cancel("branch")
    assert child.cancelled and not parent.cancelled  # nosec B101


def test_link_child_after_parent_cancel_immediately_cancels_child():
    parent = CancellationToken()
    parent.cancel("done")
    late_child = CancellationToken(parent=parent)
    assert late_child.cancelled is True and late_child.reason == "done"  # nosec B101


def test_raise_if_cancelled_raises_runtime_error_subclass():
    token = CancellationToken.already_cancelled("terminate")
    with pytest.raises(CancelledError, match="terminate"):
        token.raise_if_cancelled()
    assert issubclass(CancelledError, RuntimeError)  # nosec B101


def test_module_helper_accepts_missing_token():
    raise_if_cancelled(None)
    raise_if_cancelled(CancellationToken())
    with pytest.raises(CancelledError):
        raise_if_cancelled(CancellationToken.already_cancelled())
