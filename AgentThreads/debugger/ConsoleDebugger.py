import threading
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from AgentThreads.DebugInterface import DebugInterface
from AgentThreads.core.AgentState import AgentThreadState


class ConsoleDebugger(DebugInterface):
    """
    A console-based debugger that prints and optionally logs agent thread events.
    """
    def __init__(self, print_console: bool = False, log_dir: Optional[Union[str, Path]] = None):
        """
        :param print_console: If True, prints every event.
        :param log_dir: Optional directory to save a 'console_debug.log' file. The
                        log file is reset on construction and appended thereafter.
        """
        super().__init__()
        self.print_console = print_console
        self._lock = threading.Lock()
        if log_dir:
            self.log_dir = Path(log_dir)
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self.log_file = self.log_dir / 'console_debug.log'
            self.log_file.unlink(missing_ok=True)
        else:
            self.log_file = None

    def _timestamp(self) -> str:
        return datetime.now().isoformat()

    def _log(self, message: str) -> None:
        """Prints to console and appends to log file if configured."""
        line = f"[{self._timestamp()}] [{threading.current_thread().name}] {message}"
        with self._lock:
            if self.print_console:
                print(line)
            if self.log_file:
                with open(self.log_file, 'a', encoding='utf-8') as f:
                    f.write(line + "\n")

    def agent_started(self, agent: "Agent") -> None:
        self._log(f"Agent {type(agent).__name__}({agent.name}) started")

    def agent_stopped(self, agent: "Agent", state: AgentThreadState) -> None:
        self._log(f"Agent {type(agent).__name__}({agent.name}) stopped: wakes={state.wake_count} "
                  f"actions={state.action_count} failures={state.failure_count}")

    def wake(self, agent: "Agent", wake_count: int) -> None:
        self._log(f"Agent {type(agent).__name__}({agent.name}) woke up (wake {wake_count})")

    def action(self, agent: "Agent", action_count: int) -> None:
        self._log(f"Agent {type(agent).__name__}({agent.name}) executed action {action_count}")

    def idle(self, agent: "Agent", wake_count: int) -> None:
        self._log(f"Agent {type(agent).__name__}({agent.name}) has nothing to do and will sleep (wake {wake_count})")

    def error_agent(self, agent: "Agent", wake_count: int, exception: Exception) -> None:
        self._log(f"Error in agent {type(agent).__name__}({agent.name}) during wake {wake_count}: {exception}")
