"""
Oscillator physical parameters
"""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class DynamicsParams:
    """Physical parameters of a unit point oscillator"""

    mass: float = 1.0  # kg
    spring_constant: float = 15.0  # N/m (k)
    damping: float = 0.1  # N·s/m (b)
    natural_frequency: float = field(init=False, default=0.0)  # rad/s, calculated

    def __post_init__(self) -> None:
        """Validate inputs and calculate derived parameters"""
        if not self.mass > 0:
            raise ValueError(f"mass must be positive, got {self.mass}")
        if not self.spring_constant >= 0:
            raise ValueError(f"spring_constant must be non-negative, got {self.spring_constant}")
        if not self.damping >= 0:
            raise ValueError(f"damping must be non-negative, got {self.damping}")
        # omega = sqrt(k / m)
        object.__setattr__(self, "natural_frequency", math.sqrt(self.spring_constant / self.mass))

    @property
    def is_undamped(self) -> bool:
        return self.damping == 0.0
