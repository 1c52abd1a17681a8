from __future__ import annotations

from statemachine import State, StateMachine

from launcher.api.models import LaunchPhase


class LaunchFSM(StateMachine):
    """Lifecycle of one launch call.

    - happy path: resolving -> pack_loading -> engine_starting -> notifying -> completed
    - `failed` is absorbing and only reachable while a hook runs (pack loading or notifying).
    """

    resolving = State(LaunchPhase.resolving.value, value=LaunchPhase.resolving.value, initial=True)
    pack_loading = State(LaunchPhase.pack_loading.value, value=LaunchPhase.pack_loading.value)
    engine_starting = State(LaunchPhase.engine_starting.value, value=LaunchPhase.engine_starting.value)
    notifying = State(LaunchPhase.notifying.value, value=LaunchPhase.notifying.value)
    completed = State(LaunchPhase.completed.value, value=LaunchPhase.completed.value, final=True)
    failed = State(LaunchPhase.failed.value, value=LaunchPhase.failed.value, final=True)

    resolved = resolving.to(pack_loading)
    pack_loaded = pack_loading.to(engine_starting)
    engine_started = engine_starting.to(notifying)
    notified = notifying.to(completed)
    fail = pack_loading.to(failed) | notifying.to(failed)

    @property
    def phase(self) -> LaunchPhase:
        return LaunchPhase(str(self.current_state.value))
