import threading
from typing import Callable, Optional


class SignalSlot:
    """
    Binary wake primitive holding at most one pending token.

    Any number of ``signal()`` calls made before the token is consumed collapse
    into a single wake. The consumer blocks in ``acquire()`` until a token is
    present or its ``cancelled`` predicate turns true; ``interrupt()`` wakes all
    waiters so they re-check that predicate without consuming anything.

    Attributes:
        _pending (bool): True while a token is waiting to be consumed.
    """
    _pending: bool

    def __init__(self) -> None:
        """Creates an empty slot, a consumer has to wait for the first signal."""
        self._pending = False
        self._condition = threading.Condition(threading.Lock())

    @property
    def pending(self) -> bool:
        with self._condition:
            return self._pending

    def signal(self) -> None:
        """
        Makes sure a token is available. Never blocks on anything but the
        internal lock and is idempotent while a token is pending.
        """
        with self._condition:
            if not self._pending:
                self._pending = True
                self._condition.notify()

    def acquire(self, cancelled: Optional[Callable[[], bool]] = None) -> bool:
        """
        Blocks until a token is available, then consumes it.

        :param cancelled: Checked on every wake; when it returns True the wait
                          ends without consuming the token.
        :return: True if a token was consumed, False if the wait was cancelled.
        """
        with self._condition:
            while not self._pending:
                if cancelled is not None and cancelled():
                    return False
                self._condition.wait()
            if cancelled is not None and cancelled():
                # leave the token for whoever runs next
                return False
            self._pending = False
            return True

    def interrupt(self) -> None:
        """Wakes every waiter so it re-evaluates its cancel predicate."""
        with self._condition:
            self._condition.notify_all()
