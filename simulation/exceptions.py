class SimulationError(Exception):
    """Base class for every error raised by the simulator."""


class ConfigurationError(SimulationError, ValueError):
    """Invalid run configuration (step size, step count, mu, initial state...)."""


class SingularityError(SimulationError, ArithmeticError):
    """The body reached the attractor's center, where the force law is undefined."""


class OutputError(SimulationError):
    """The output destination could not be opened or written."""
