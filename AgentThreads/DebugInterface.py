from AgentThreads.core.AgentState import AgentThreadState


class DebugInterface:
    """
    Abstract interface for debugging agent threads.
    Implement this interface to receive callbacks on the wait/poll loop of an agent.

    All callbacks except the lifecycle ones run on the agent's own thread, so an
    implementation shared by several agents has to be thread safe.
    """

    def __init__(self):
        """
        Constructor
        """
        pass

    def agent_started(self, agent: "Agent") -> None:
        """
        Called on the agent thread before it waits for the first signal.

        :param agent: The agent whose thread started.
        """
        pass

    def agent_stopped(self, agent: "Agent", state: AgentThreadState) -> None:
        """
        Called on the agent thread right before it terminates.

        :param agent: The agent whose thread stopped.
        :param state: Final counters of the thread.
        """
        pass

    def wake(self, agent: "Agent", wake_count: int) -> None:
        """
        Called after the agent consumed a signal and before it starts deciding.

        :param agent: The agent that woke up.
        :param wake_count: Number of signals consumed by this thread so far.
        """
        pass

    def action(self, agent: "Agent", action_count: int) -> None:
        """
        Called after a decision pass that executed an action.

        :param agent: The agent that acted.
        :param action_count: Number of actions executed by this thread so far.
        """
        pass

    def idle(self, agent: "Agent", wake_count: int) -> None:
        """
        Called when the decision pass found nothing to do and the agent goes back to sleep.

        :param agent: The agent going idle.
        :param wake_count: Wake that ended with this idle pass.
        """
        pass

    def error_agent(self, agent: "Agent", wake_count: int, exception: Exception) -> None:
        """
        Called when the decision callback raised an unexpected exception.

        :param agent: The agent instance that errored.
        :param wake_count: Wake during which the error happened.
        :param exception: The wrapped exception.
        """
        pass
