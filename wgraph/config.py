"""Configuration classes for wgraph algorithms."""

from dataclasses import dataclass

#: Largest value representable by a signed 64-bit integer. Used as the
#: "effectively infinite" bound for flow accumulation.
MAX = 2**63 - 1


@dataclass
class AlgorithmConfig:
    """Tunables for the max-flow engine."""

    # Upper bound for accumulated flow; also the starting bottleneck value
    max_value: int = MAX

    def saturated(self, flow: int) -> bool:
        """Return True when ``flow`` has reached the infinite bound."""
        return flow >= self.max_value


# Global configuration instance
ALGORITHM_CONFIG = AlgorithmConfig()
