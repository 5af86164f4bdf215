from dataclasses import dataclass


@dataclass(frozen=True)
class CentralBody:
    """
    Physical parameters of the attracting body, fixed at the origin.
    """

    name: str
    G: float  # [m³/kg/s²] Gravitational constant
    M: float  # [kg] Body mass
    radius: float  # [m] Mean radius, used only to draw the body

    @property
    def mu(self) -> float:
        """[m³/s²] Gravitational parameter (G * M)"""
        return self.G * self.M

    def circular_speed(self, r: float) -> float:
        """[m/s] Speed of a circular orbit of radius r"""
        return (self.mu / r) ** 0.5


G_NEWTON = 6.67430e-11  # [m³/kg/s²]

EARTH = CentralBody(name="Earth", G=G_NEWTON, M=5.972e24, radius=6.371e6)

BODY_REGISTRY = {
    "earth": EARTH,
}
