"""Coordinators - Orchestration layer connecting UI with business logic."""

from .catalog_coordinator import CatalogCoordinator, user_message

__all__ = ["CatalogCoordinator", "user_message"]
