from __future__ import annotations

import functools
import importlib.util
import types
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


def _collect(*args):
    return args


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for null-guard tests")
class NullGuardTests(unittest.TestCase):
    def test_fnull_substitutes_defaults_for_absent_arguments(self) -> None:
        from combinax import fnull

        safe_mult = fnull(lambda total, n: total * n, 1, 1)
        self.assertEqual(safe_mult(None, None), 1)
        self.assertEqual(safe_mult(None, 5), 5)
        self.assertEqual(safe_mult(3, None), 3)
        self.assertEqual(functools.reduce(safe_mult, [1, 2, 3, None, 5]), 30)

    def test_fnull_leaves_present_values_untouched(self) -> None:
        from combinax import fnull

        guarded = fnull(_collect, "d", "d")
        self.assertEqual(guarded(False, 0), (False, 0))
        self.assertEqual(guarded("", []), ("", []))

    def test_fnull_reuses_last_default_past_declared_positions(self) -> None:
        from combinax import fnull

        guarded = fnull(_collect, "a", "b")
        self.assertEqual(guarded(None, None, None, None), ("a", "b", "b", "b"))
        self.assertEqual(fnull(_collect, 0)(None, None, 3), (0, 0, 3))

    def test_fnull_fills_missing_declared_positions(self) -> None:
        from combinax import fnull

        guarded = fnull(lambda a, b: (a, b), 1, 2)
        self.assertEqual(guarded(7), (7, 2))
        self.assertEqual(guarded(), (1, 2))

    def test_fnull_without_defaults_passes_absence_through(self) -> None:
        from combinax import fnull

        self.assertEqual(fnull(_collect)(None, 1), (None, 1))

    def test_fnull_forwards_keywords_and_errors(self) -> None:
        from combinax import fnull

        def build(a, *, scale=1):
            if a < 0:
                raise ValueError("negative")
            return a * scale

        guarded = fnull(build, 4)
        self.assertEqual(guarded(None, scale=3), 12)
        with self.assertRaisesRegex(ValueError, "negative"):
            guarded(-1)

    def test_defaults_reads_fallback_for_absent_fields(self) -> None:
        from combinax import defaults

        lookup = defaults({"critical": 108})
        self.assertEqual(lookup({"critical": 9}, "critical"), 9)
        self.assertEqual(lookup({}, "critical"), 108)
        self.assertEqual(lookup({"critical": None}, "critical"), 108)
        self.assertEqual(lookup({"critical": 0}, "critical"), 0)
        self.assertEqual(lookup(types.SimpleNamespace(critical=7), "critical"), 7)
        self.assertIsNone(lookup({}, "other"))
        self.assertIsNone(lookup(None, "critical"))

    def test_do_when_runs_action_only_for_truthy_conditions(self) -> None:
        from combinax import do_when

        calls = []

        def action():
            calls.append(1)
            return "ran"

        self.assertEqual(do_when(True, action), "ran")
        self.assertEqual(do_when(0, action), "ran")
        self.assertIsNone(do_when(False, action))
        self.assertIsNone(do_when(None, action))
        self.assertEqual(len(calls), 2)


if __name__ == "__main__":
    unittest.main()
