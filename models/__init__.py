from .state import State
from .central_body import CentralBody, EARTH, BODY_REGISTRY
from .two_body import acceleration, two_body_derivatives

__all__ = [
    "State",
    "CentralBody",
    "EARTH",
    "BODY_REGISTRY",
    "acceleration",
    "two_body_derivatives",
]
