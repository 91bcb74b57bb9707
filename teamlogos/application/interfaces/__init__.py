"""Application interfaces (ports): service protocols.

Define contracts for infrastructure implementations (DIP).
"""

from teamlogos.application.interfaces.services import ILogoCache, ILogoSource

__all__ = [
    "ILogoCache",
    "ILogoSource",
]
