class ConfigurationError(ValueError):
    """Raised when a simulation is constructed with invalid parameters."""


class SimulationError(RuntimeError):
    """Raised when the tick loop is driven incorrectly (e.g. a re-entrant step)."""
