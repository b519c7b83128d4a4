from typing import Optional


class SchedulerException(Exception):
    """
    Unexpected failure of an agent's decision callback, as reported by its thread.

    Attributes:
        agent_name (str): Agent whose callback failed.
        thread_name (str): Thread that ran the callback.
        wake_count (int): Wake of that thread during which the failure happened.
        original_exception (Exception): What the callback raised.
    """

    def __init__(self, agent_name: str, message: str, original_exception: Exception,
                 thread_name: Optional[str] = None, wake_count: Optional[int] = None):
        where = f" (thread {thread_name}, wake {wake_count})" if thread_name is not None else ""
        super().__init__(f"Agent {agent_name}{where}: {message}: {original_exception!r}")
        self.agent_name = agent_name
        self.thread_name = thread_name
        self.wake_count = wake_count
        self.original_exception = original_exception
