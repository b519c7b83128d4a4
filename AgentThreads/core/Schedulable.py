from typing import Protocol, runtime_checkable


@runtime_checkable
class Schedulable(Protocol):
    """
    Minimal contract required by the agent thread.
    Domain agents and the GUI only ever talk to an agent through it.
    """
    # ---- identity / meta ----
    name: str

    # ---- scheduling ----
    def pick_and_execute_an_action(self) -> bool: ...   # return ‹True› if the agent did work
    def state_changed(self) -> None: ...                 # wake the agent, coalesced

    # ---- life-cycle ----
    def start_thread(self) -> None: ...
    def stop_thread(self) -> None: ...
    def save_state(self) -> dict: ...                    # serialise into a *pure* python object
