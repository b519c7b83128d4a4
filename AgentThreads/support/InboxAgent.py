import threading
from collections import deque
from typing import Deque, List, Optional

from pydantic import BaseModel, Field

from AgentThreads.core.Agent import Agent, AgentConfig


class PersonAdded(BaseModel):
    """
    Event posted by the user interface when a person was entered.
    """
    person_type: str = Field(..., description="Kind of person, e.g. 'Customers' or 'Waiters'.")
    name: str = Field(..., description="Name entered by the user.")


class InboxAgent(Agent):
    """
    An agent that receives events from other threads through a FIFO inbox and
    handles one of them per decision pass.

    External collaborators call :meth:`post`, which queues the item and wakes the
    agent. Subclasses implement :meth:`handle`. If ``handle`` raises, the item is
    put back at the front of the inbox so the order is kept and it is retried on
    the next signal.
    """
    _inbox: Deque[BaseModel]
    handled_count: int

    def __init__(self, config: AgentConfig = None, **kwargs) -> None:
        """Initialize the InboxAgent with an empty inbox."""
        if type(self).handle is InboxAgent.handle:
            raise TypeError("Each InboxAgent subclass must implement `handle`.")
        super().__init__(config, **kwargs)
        self._inbox = deque()
        self._inbox_lock = threading.Lock()
        self.handled_count = 0

    def post(self, item: BaseModel) -> None:
        """Queue a message and wake the agent."""
        with self._inbox_lock:
            self._inbox.append(item)
        self.state_changed()

    def add_person(self, person_type: str, name: Optional[str]) -> bool:
        """
        Post a :class:`PersonAdded` event. A missing name (cancelled dialog) is ignored.

        Returns:
            bool: True if an event was posted.
        """
        if name is None:
            return False
        self.post(PersonAdded(person_type=person_type, name=name))
        return True

    def size(self) -> int:
        """Return the number of queued messages."""
        with self._inbox_lock:
            return len(self._inbox)

    def pending(self) -> List[BaseModel]:
        """Return a copy of the queued messages in FIFO order."""
        with self._inbox_lock:
            return list(self._inbox)

    def handle(self, item: BaseModel) -> None:
        """
        Handle one message. Runs on the agent thread.

        Args:
            item (BaseModel): The oldest queued message.
        """
        raise NotImplementedError

    def pick_and_execute_an_action(self) -> bool:
        with self._inbox_lock:
            if not self._inbox:
                return False
            item = self._inbox.popleft()
        try:
            self.handle(item)
        except Exception:
            # Push the message back to the front of the queue to preserve order
            with self._inbox_lock:
                self._inbox.appendleft(item)
            raise
        self.handled_count += 1
        return True

    __len__ = size
