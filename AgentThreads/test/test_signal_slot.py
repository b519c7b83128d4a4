import threading
import unittest

from AgentThreads.core.SignalSlot import SignalSlot
from AgentThreads.test.TestAgents import wait_for


class TestSignalSlot(unittest.TestCase):

    def test_created_empty(self):
        slot = SignalSlot()
        self.assertFalse(slot.pending)
        # nothing to consume, the cancel predicate ends the wait right away
        self.assertFalse(slot.acquire(lambda: True))

    def test_signals_coalesce_into_one_token(self):
        slot = SignalSlot()
        for _ in range(5):
            slot.signal()
        self.assertTrue(slot.pending)

        self.assertTrue(slot.acquire())
        self.assertFalse(slot.pending)
        self.assertFalse(slot.acquire(lambda: True))

    def test_acquire_blocks_until_signal(self):
        slot = SignalSlot()
        acquired = threading.Event()

        def consumer():
            if slot.acquire():
                acquired.set()

        t = threading.Thread(target=consumer, daemon=True)
        t.start()
        self.assertFalse(acquired.wait(0.1))

        slot.signal()
        self.assertTrue(acquired.wait(5.0))
        t.join(5.0)
        self.assertFalse(slot.pending)

    def test_interrupt_cancels_wait_without_consuming(self):
        slot = SignalSlot()
        cancelled = threading.Event()
        results = []

        t = threading.Thread(target=lambda: results.append(slot.acquire(cancelled.is_set)), daemon=True)
        t.start()
        self.assertTrue(wait_for(t.is_alive))

        cancelled.set()
        slot.interrupt()
        t.join(5.0)
        self.assertFalse(t.is_alive())
        self.assertEqual(results, [False])

    def test_cancelled_consumer_leaves_token(self):
        slot = SignalSlot()
        slot.signal()
        self.assertFalse(slot.acquire(lambda: True))
        self.assertTrue(slot.pending)


if __name__ == "__main__":
    unittest.main()
