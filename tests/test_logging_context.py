"""Tests for logging context propagation."""

import threading

import pytest

from project_matcher.logging.context import (
    clear_log_context,
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
)


def test_empty_context():
    assert get_log_context() == {}


def test_push_and_pop():
    token = push_log_context(email_subject="RE: Permit", candidates=3)
    assert get_log_context() == {"email_subject": "RE: Permit", "candidates": 3}
    pop_log_context(token)
    assert get_log_context() == {}


def test_nested_push_overrides_and_restores():
    outer = push_log_context(email_subject="first")
    inner = push_log_context(email_subject="second", candidates=2)
    assert get_log_context() == {"email_subject": "second", "candidates": 2}

    pop_log_context(inner)
    assert get_log_context() == {"email_subject": "first"}
    pop_log_context(outer)


def test_get_returns_copy():
    push_log_context(email_subject="x")
    snapshot = get_log_context()
    snapshot["email_subject"] = "mutated"
    assert get_log_context()["email_subject"] == "x"


def test_clear():
    push_log_context(email_subject="x")
    clear_log_context()
    assert get_log_context() == {}


def test_context_manager():
    with log_context(email_subject="RE: Permit") as ctx:
        assert get_log_context() == {"email_subject": "RE: Permit"}
        assert ctx.fields == {"email_subject": "RE: Permit"}
    assert get_log_context() == {}


def test_context_manager_restores_on_exception():
    with pytest.raises(RuntimeError):
        with log_context(email_subject="boom"):
            raise RuntimeError("fail")
    assert get_log_context() == {}


def test_threads_do_not_share_context():
    seen = {}

    def worker():
        seen["thread"] = get_log_context()

    with log_context(email_subject="main thread"):
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

    assert seen["thread"] == {}
