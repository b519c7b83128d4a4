import threading

from rich.markup import escape

from AgentThreads.core.AgentState import AgentThreadState, ThreadStatus
from AgentThreads.core.SignalSlot import SignalSlot
from agent_logging import logger, rich_console
from util.SchedulerException import SchedulerException


class AgentThread(threading.Thread):
    """
    Execution context of one agent.

    The thread sleeps on the agent's signal slot until someone calls
    ``state_changed()``, then calls ``pick_and_execute_an_action()`` repeatedly
    until it returns False, and goes back to sleep. An instance runs at most
    once; the agent creates a fresh one for every restart.

    Attributes:
        state (AgentThreadState): Counters and lifecycle status of this context.
    """
    state: AgentThreadState

    def __init__(self, agent: "Agent", slot: SignalSlot) -> None:
        super().__init__(name=agent.name, daemon=agent.config.daemon)
        self._agent = agent
        self._slot = slot
        self._go_on = False
        self._exiting = False
        self.state = AgentThreadState()

    @property
    def is_running(self) -> bool:
        return self._go_on and self.is_alive()

    def start(self) -> None:
        # flag is set before the thread exists so an early stop_agent() is never lost
        self._go_on = True
        self.state.status = ThreadStatus.RUNNING
        super().start()

    def stop_agent(self) -> None:
        """Stops the loop and wakes the thread if it is waiting."""
        self._go_on = False
        self._slot.interrupt()

    def rearm(self) -> bool:
        """
        Undo a stop_agent() that the loop has not acted on yet.

        :return: False if the loop already exited.
        """
        if self._exiting:
            return False
        self._go_on = True
        return True

    def _cancelled(self) -> bool:
        return not self._go_on

    def _notify(self, hook: str, *args) -> None:
        """Calls a debugger hook; a failing hook is logged and never ends the loop."""
        debugger = self._agent.debugger
        if not debugger:
            return
        try:
            getattr(debugger, hook)(self._agent, *args)
        except Exception as e:
            logger.error("Debugger hook %s failed for agent %s: %r", hook, self.name, e)

    def run(self) -> None:
        logger.debug("Agent thread %s started", self.name)
        self._notify("agent_started")
        try:
            while self._go_on:
                # The agent sleeps here until someone calls state_changed()
                if not self._slot.acquire(self._cancelled):
                    continue
                self.state.wake_count += 1
                self._notify("wake", self.state.wake_count)
                self._drain()
        finally:
            self._exiting = True
            self.state.status = ThreadStatus.STOPPED
            logger.debug("Agent thread %s stopped after %d wakes", self.name, self.state.wake_count)
            self._notify("agent_stopped", self.state)

    def _drain(self) -> None:
        """
        Calls the decision callback until it reports that nothing is left to do.
        A stop in the middle of a drain hands the token back to the slot so the
        next context picks up the remaining work.
        """
        agent = self._agent
        while self._go_on:
            try:
                did_act = bool(agent.pick_and_execute_an_action())
            except Exception as e:
                self._report_failure(e)
                return

            self.state.consecutive_failures = 0
            if not did_act:
                self.state.idle_count += 1
                self._notify("idle", self.state.wake_count)
                return

            self.state.action_count += 1
            self._notify("action", self.state.action_count)

        self._slot.signal()

    def _report_failure(self, e: Exception) -> None:
        agent = self._agent
        self.state.failure_count += 1
        self.state.consecutive_failures += 1
        self.state.last_error = repr(e)

        error = SchedulerException(agent.name, "Unexpected exception caught in agent thread", e,
                                   thread_name=self.name, wake_count=self.state.wake_count)
        logger.error(str(error))
        agent.print("Unexpected exception caught in agent thread:", e)
        self._notify("error_agent", self.state.wake_count, error)

        limit = agent.config.max_consecutive_failures
        if limit is not None and self.state.consecutive_failures >= limit:
            rich_console.print(
                f"[red]{escape(agent.name)}: giving up after {self.state.consecutive_failures} consecutive failures[/red]"
            )
            logger.error("Agent thread %s stopped after %d consecutive failures",
                         self.name, self.state.consecutive_failures)
            self._go_on = False
