import tempfile
import unittest
from pathlib import Path

from AgentThreads.debugger.ConsoleDebugger import ConsoleDebugger
from AgentThreads.support.InboxAgent import InboxAgent, PersonAdded
from AgentThreads.test.TestAgents import Note, RecordingInboxAgent, make_config, wait_for


class TestInboxAgent(unittest.TestCase):

    def setUp(self):
        self.agent = RecordingInboxAgent(name="host")

    def tearDown(self):
        self.agent.stop_thread()

    def test_handle_is_required(self):
        class NoHandler(InboxAgent):
            pass

        with self.assertRaises(TypeError):
            NoHandler(make_config())

    def test_posts_before_start_are_handled_in_order(self):
        for i in range(5):
            self.agent.post(Note(text=f"n{i}"))
        self.assertEqual(len(self.agent), 5)

        self.agent.start_thread()
        self.assertTrue(wait_for(lambda: self.agent.handled_count == 5))
        self.assertEqual([n.text for n in self.agent.handled], [f"n{i}" for i in range(5)])
        self.assertEqual(self.agent.size(), 0)
        # all posts were coalesced into the single start wake
        self.assertEqual(self.agent.thread_state.wake_count, 1)

    def test_add_person(self):
        self.agent.start_thread()
        self.assertTrue(self.agent.add_person("Customers", "Alice"))
        self.assertFalse(self.agent.add_person("Customers", None))
        self.assertTrue(wait_for(lambda: self.agent.handled_count == 1))
        self.assertEqual(self.agent.handled, [PersonAdded(person_type="Customers", name="Alice")])

    def test_failed_item_is_retried_on_next_signal(self):
        self.agent.post(Note(text="fail-once"))
        self.agent.post(Note(text="after"))
        self.agent.start_thread()

        self.assertTrue(wait_for(lambda: self.agent.thread_state.failure_count == 1))
        self.assertEqual([n.text for n in self.agent.pending()], ["fail-once", "after"])

        self.agent.state_changed()
        self.assertTrue(wait_for(lambda: self.agent.handled_count == 2))
        self.assertEqual([n.text for n in self.agent.handled], ["fail-once", "after"])

    def test_console_debugger_logs_loop_events(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            debugger = ConsoleDebugger(log_dir=temp_dir)
            self.agent.debugger = debugger
            self.agent.post(Note(text="fail-once"))
            self.agent.start_thread()
            self.assertTrue(wait_for(lambda: self.agent.thread_state.failure_count == 1))
            self.agent.state_changed()
            self.assertTrue(wait_for(lambda: self.agent.handled_count == 1))
            self.agent.stop_thread()

            log = (Path(temp_dir) / "console_debug.log").read_text(encoding="utf-8")
            self.assertIn("RecordingInboxAgent(host) started", log)
            self.assertIn("woke up (wake 1)", log)
            self.assertIn("Error in agent", log)
            self.assertIn("first attempt fails", log)
            self.assertIn("executed action 1", log)
            self.assertIn("has nothing to do", log)
            self.assertIn("stopped: wakes=2 actions=1 failures=1", log)


if __name__ == "__main__":
    unittest.main()
