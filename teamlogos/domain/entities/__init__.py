"""Domain entities."""

from teamlogos.domain.entities.logo import TeamLogo

__all__ = ["TeamLogo"]
