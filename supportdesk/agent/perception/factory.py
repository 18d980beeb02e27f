"""Perception backend registry.

Backends are selected by name from configuration so the agent never
branches on which implementation it holds.
"""

from supportdesk.agent.perception.base import PerceptionMechanism
from supportdesk.agent.perception.rule_based import RuleBasedPerception

_BACKENDS: dict[str, type[PerceptionMechanism]] = {
    RuleBasedPerception.name: RuleBasedPerception,
}


def register_perception(name: str, backend: type[PerceptionMechanism]) -> None:
    """Register an alternate perception implementation under ``name``."""
    _BACKENDS[name] = backend


def available_backends() -> list[str]:
    return sorted(_BACKENDS)


def create_perception(name: str) -> PerceptionMechanism:
    """Instantiate the perception backend registered under ``name``.

    Raises:
        ValueError: If no backend is registered under that name
    """
    backend = _BACKENDS.get(name)
    if backend is None:
        raise ValueError(
            f"Unknown perception backend: {name!r}. "
            f"Available: {', '.join(available_backends())}"
        )
    return backend()
