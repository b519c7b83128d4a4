import threading
import traceback
from typing import Optional

from pydantic import BaseModel, Field

from AgentThreads.core.AgentState import AgentThreadState
from AgentThreads.core.AgentThread import AgentThread
from AgentThreads.core.Schedulable import Schedulable
from AgentThreads.core.SignalSlot import SignalSlot
from agent_config import (AGENT_DAEMON_THREADS, AGENT_JOIN_TIMEOUT,
                          AGENT_MAX_CONSECUTIVE_FAILURES, AGENT_PRINT_ACTIONS)
from agent_logging import logger, rich_console


class AgentConfig(BaseModel):
    """
    Configuration shared by all agents. Defaults come from ``agent_config``.
    """
    name: Optional[str] = Field(None, description="Name used in messages and as thread name; short class name if empty.")
    daemon: bool = Field(AGENT_DAEMON_THREADS, description="Run the agent thread as a daemon thread.")
    join_timeout: Optional[float] = Field(AGENT_JOIN_TIMEOUT, description="Seconds stop_thread() waits for the thread, None waits forever.")
    max_consecutive_failures: Optional[int] = Field(AGENT_MAX_CONSECUTIVE_FAILURES, ge=1,
                                                    description="Stop the thread after this many failures in a row, None never gives up.")
    print_actions: bool = Field(AGENT_PRINT_ACTIONS, description="Print messages passed to do().")


class Agent(Schedulable):
    """
    Base class for simple agents.

    Each agent owns a background thread that sleeps until ``state_changed()`` is
    called and then runs ``pick_and_execute_an_action()`` as long as it returns
    True. Subclasses only implement that method and call ``state_changed()``
    whenever they receive something that might make them act.

    Attributes:
        name (str): Agent name for messages.
        config (AgentConfig): Thread and diagnostic settings.
    """
    # Static
    name: str
    _config: AgentConfig
    _debugger: "DebugInterface" = None

    # Dynamic
    _state_change: SignalSlot
    _agent_thread: Optional[AgentThread]
    _retiring_thread: Optional[AgentThread]
    _last_thread_state: AgentThreadState

    def __init__(self, config: AgentConfig = None, name: str = None) -> None:
        """
        Initializes the agent; the thread is not started until start_thread().

        Raises:
            TypeError: If the subclass does not implement `pick_and_execute_an_action`.
        """
        if type(self).pick_and_execute_an_action is Agent.pick_and_execute_an_action:
            raise TypeError("Each Agent subclass must implement `pick_and_execute_an_action`.")
        self._config = config if config is not None else AgentConfig()
        self.name = name or self._config.name or self._short_name()
        self._state_change = SignalSlot()
        self._agent_thread = None
        self._retiring_thread = None
        self._last_thread_state = AgentThreadState()
        self._lifecycle_lock = threading.RLock()

    def _short_name(self) -> str:
        return f"{self.__class__.__name__}@{id(self) & 0xffff:04x}"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name} running={self.is_running}>"

    @property
    def config(self) -> AgentConfig:
        return self._config

    @property
    def debugger(self) -> "DebugInterface":
        return self._debugger

    @debugger.setter
    def debugger(self, debugger: "DebugInterface") -> None:
        self._debugger = debugger

    @property
    def is_running(self) -> bool:
        thread = self._agent_thread
        return thread is not None and thread.is_running

    @property
    def thread_state(self) -> AgentThreadState:
        """State of the current thread, or of the last one after a stop."""
        thread = self._agent_thread
        return thread.state if thread is not None else self._last_thread_state

    @property
    def has_pending_signal(self) -> bool:
        return self._state_change.pending

    def state_changed(self) -> None:
        """
        This should be called whenever state has changed that might cause
        the agent to do something. Safe from any thread, never blocks.
        """
        self._state_change.signal()

    def signal(self) -> None:
        """Alias of state_changed() for external collaborators."""
        self.state_changed()

    def pick_and_execute_an_action(self) -> bool:
        """
        Agents must implement this scheduler to perform any actions appropriate for the
        current state. Will be called whenever a state change has occurred,
        and will be called repeatedly as long as it returns True.

        Returns:
            bool: True iff some action was executed that might have changed the state.
        """
        raise NotImplementedError

    def do(self, msg: str) -> None:
        """
        The simulated action code.
        """
        logger.debug("%s: %s", self.name, msg)
        if self._config.print_actions:
            self.print(msg)

    def print(self, msg: str, exc: BaseException = None) -> None:
        """
        Print message, with the stack trace of `exc` if given.
        """
        text = f"{self.name}: {msg}\n"
        if exc is not None:
            text += "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        rich_console.print(text, end="", markup=False, highlight=False)

    def start_thread(self) -> None:
        """
        Start the agent thread. Calling it on a running agent does not create a
        second thread, it only wakes the current one.

        A previous thread that is still finishing its last action (stop timed
        out, or it gave up after too many failures) is joined first, so two
        threads never run the decision callback at the same time.

        Raises:
            RuntimeError: If called from the agent's own thread after it left its loop.
        """
        while True:
            with self._lifecycle_lock:
                thread = self._agent_thread
                if thread is not None and thread.is_running:
                    self._state_change.signal()
                    return
                previous = self._retiring_thread or thread
                if previous is not None and previous.is_alive():
                    if previous is threading.current_thread():
                        # stop and start from inside our own callback keep the same thread
                        if not previous.rearm():
                            raise RuntimeError(f"Agent {self.name} cannot restart from its exiting thread")
                        self._agent_thread = previous
                        self._retiring_thread = None
                        self._state_change.signal()
                        logger.info("Agent %s re-armed", self.name)
                        return
                else:
                    thread = AgentThread(self, self._state_change)
                    self._agent_thread = thread
                    self._retiring_thread = None
                    # one decision pass right after start, coalesced with earlier signals
                    self._state_change.signal()
                    thread.start()
                    break
            logger.info("Agent %s waits for its previous thread to finish", self.name)
            previous.join()
        logger.info("Agent %s started", self.name)

    def stop_thread(self) -> None:
        """
        Stop the agent thread and wait for it to finish its current action.
        Pending signals are kept for the next start_thread().
        """
        with self._lifecycle_lock:
            thread = self._agent_thread
            if thread is None:
                return
            self._agent_thread = None
            self._retiring_thread = thread
            self._last_thread_state = thread.state
            thread.stop_agent()

        if thread is threading.current_thread():
            # called from our own decision callback, the loop exits after it returns
            logger.info("Agent %s stopping itself", self.name)
            return
        thread.join(self._config.join_timeout)
        if thread.is_alive():
            logger.warning("Agent %s did not stop within %s seconds", self.name, self._config.join_timeout)
            return
        with self._lifecycle_lock:
            if self._retiring_thread is thread:
                self._retiring_thread = None
        logger.info("Agent %s stopped", self.name)

    def start(self) -> None:
        self.start_thread()

    def stop(self) -> None:
        self.stop_thread()

    def save_state(self) -> dict:
        """
        Return a *pure-Python* snapshot of the agent runtime state.
        """
        return {
            "name": self.name,
            "is_running": self.is_running,
            "pending_signal": self.has_pending_signal,
            "thread_state": self.thread_state.model_dump(mode="json"),
        }
