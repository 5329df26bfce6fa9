"""Application services - orchestration on top of the ports."""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
