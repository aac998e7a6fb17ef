import unittest

from tetris_events import GameEvents, Signal


class TestSignals(unittest.TestCase):
    def test_given_listeners_when_emitting_then_all_called_with_args(self):
        sig = Signal("lines_cleared")
        got = []
        sig.connect(lambda n: got.append(("a", n)))
        sig.connect(lambda n: got.append(("b", n)))
        sig.emit(3)
        self.assertEqual(sorted(got), [("a", 3), ("b", 3)])
        self.assertEqual(len(sig), 2)

    def test_given_disconnected_listener_when_emitting_then_not_called(self):
        sig = Signal("moved")
        got = []
        fn = sig.connect(lambda: got.append(1))
        sig.disconnect(fn)
        sig.emit()
        self.assertEqual(got, [])

    def test_given_failing_listener_when_emitting_then_error_propagates(self):
        sig = Signal("game_over")

        def boom():
            raise RuntimeError("boom")

        sig.connect(boom)
        with self.assertRaises(RuntimeError):
            sig.emit()

    def test_given_game_events_when_indexing_then_named_channels(self):
        ev = GameEvents()
        self.assertIs(ev["tetris"], ev.tetris)
        for name in GameEvents.NAMES:
            self.assertIsInstance(ev[name], Signal)
        with self.assertRaises(KeyError):
            ev["explode"]


if __name__ == "__main__":
    unittest.main()
