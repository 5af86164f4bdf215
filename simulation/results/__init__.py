from .trajectory import Trajectory

__all__ = ["Trajectory"]
