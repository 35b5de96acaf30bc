"""
Unit tests for LifecycleHooks and CaseContext.
"""

import pytest

from redefine.lifecycle.hooks import CaseContext, LifecycleHooks


class TestCaseContext:
    """Test per-case scratch storage."""

    def test_put_get_pop(self):
        ctx = CaseContext(name="case")
        ctx.put("k", 1)

        assert "k" in ctx
        assert ctx.get("k") == 1
        assert ctx.pop("k") == 1
        assert "k" not in ctx

    def test_pop_default(self):
        ctx = CaseContext()
        assert ctx.pop("missing", None) is None
        with pytest.raises(KeyError):
            ctx.pop("missing")

    def test_contexts_are_independent(self):
        first, second = CaseContext(), CaseContext()
        first.put("k", 1)

        assert "k" not in second
        assert first.case_id != second.case_id


class TestLifecycleHooks:
    """Test hook ordering and failure handling."""

    def test_order(self):
        """Test before-hooks run in order, after-hooks in reverse."""
        hooks = LifecycleHooks()
        events = []

        hooks.before_each(lambda ctx: events.append("before-1"))
        hooks.before_each(lambda ctx: events.append("before-2"))
        hooks.after_each(lambda ctx: events.append("after-1"))
        hooks.after_each(lambda ctx: events.append("after-2"))

        hooks.run_case(lambda ctx: events.append("body"))

        assert events == ["before-1", "before-2", "body", "after-2", "after-1"]

    def test_decorator_registration(self):
        hooks = LifecycleHooks()

        @hooks.before_each
        def setup(ctx):
            ctx.put("ready", True)

        assert hooks.before_hooks == [setup]
        assert hooks.run_case(lambda ctx: ctx.get("ready")) is True

    def test_fresh_context_per_case(self):
        """Test each case gets its own context."""
        hooks = LifecycleHooks()
        seen = []
        hooks.before_each(lambda ctx: seen.append(ctx))

        hooks.run_case(lambda ctx: None, name="one")
        hooks.run_case(lambda ctx: None, name="two")

        assert [c.name for c in seen] == ["one", "two"]
        assert seen[0] is not seen[1]

    def test_explicit_context(self):
        hooks = LifecycleHooks()
        ctx = CaseContext(name="given")
        assert hooks.run_case(lambda c: c, ctx=ctx) is ctx

    def test_after_hooks_run_when_body_raises(self):
        hooks = LifecycleHooks()
        events = []
        hooks.after_each(lambda ctx: events.append("after"))

        def failing(ctx):
            raise ValueError("body")

        with pytest.raises(ValueError):
            hooks.run_case(failing)

        assert events == ["after"]

    def test_body_error_wins_over_after_error(self):
        """Test the body's exception propagates when an after-hook also fails."""
        hooks = LifecycleHooks()

        def bad_after(ctx):
            raise RuntimeError("after")

        def bad_body(ctx):
            raise ValueError("body")

        hooks.after_each(bad_after)

        with pytest.raises(ValueError, match="body"):
            hooks.run_case(bad_body)

    def test_after_error_propagates_after_all_hooks(self):
        """Test a failing after-hook does not stop the others."""
        hooks = LifecycleHooks()
        events = []

        def bad_after(ctx):
            raise RuntimeError("after")

        hooks.after_each(lambda ctx: events.append("first-registered"))
        hooks.after_each(bad_after)

        with pytest.raises(RuntimeError, match="after"):
            hooks.run_case(lambda ctx: None)

        assert events == ["first-registered"]

    def test_paired_after_skipped_when_before_fails(self):
        """Test a pair's after-hook only runs if its before-hook completed."""
        hooks = LifecycleHooks()
        events = []

        def failing_before(ctx):
            raise RuntimeError("setup")

        hooks.pair(lambda ctx: events.append("before-1"), lambda ctx: events.append("after-1"))
        hooks.pair(failing_before, lambda ctx: events.append("after-2"))

        with pytest.raises(RuntimeError, match="setup"):
            hooks.run_case(lambda ctx: events.append("body"))

        assert events == ["before-1", "after-1"]

    def test_base_exception_in_after_hook_runs_remaining_restores(self):
        """Test an after-hook raising a BaseException does not skip the others."""
        hooks = LifecycleHooks()
        events = []

        def failing_after(ctx):
            pytest.fail("after-hook failure")

        hooks.after_each(lambda ctx: events.append("restore"))
        hooks.after_each(failing_after)

        with pytest.raises(pytest.fail.Exception, match="after-hook failure"):
            hooks.run_case(lambda ctx: None)

        assert events == ["restore"]

    def test_base_exception_after_body_failure(self):
        """Test the body's error still propagates past a BaseException in a hook."""
        hooks = LifecycleHooks()
        events = []

        def skipping_after(ctx):
            pytest.skip("after-hook skip")

        def bad_body(ctx):
            raise ValueError("body")

        hooks.after_each(lambda ctx: events.append("restore"))
        hooks.after_each(skipping_after)

        with pytest.raises(ValueError, match="body"):
            hooks.run_case(bad_body)

        assert events == ["restore"]
