from typing import Callable

from AgentThreads.core.Agent import Agent, AgentConfig


class CallbackAgent(Agent):
    """
    Agent whose decision callback is a plain callable. Handy for tests and for
    wiring small reactive behaviours without writing a subclass.
    """

    def __init__(
        self,
        callback: Callable[[], bool],
        config: AgentConfig = None,
        **kwargs
    ):
        super().__init__(config, **kwargs)
        self._callback = callback

    def pick_and_execute_an_action(self) -> bool:
        return bool(self._callback())
