"""API dependencies."""
from ..core.simulator import get_simulator, LevelSimulator


def get_level_simulator() -> LevelSimulator:
    """Dependency for level simulator."""
    return get_simulator()
