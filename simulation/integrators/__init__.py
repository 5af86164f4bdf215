from .step import rk4_step

__all__ = ["rk4_step"]
