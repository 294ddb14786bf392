"""Advisor app bootstrap."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from agents.recommendation_agent import RecommendationAgent
from ride_app.config import RideAppConfig
from ride_app.logging_config import configure_logging, get_logger
from tools.profile_provider import InMemoryProfileProvider, ProfileProvider

LOGGER = get_logger(__name__)


class RideOutfitApp:
    """Wires together configuration, logging, the profile store and the agent."""

    def __init__(
        self,
        config: RideAppConfig | None = None,
        profile_provider: ProfileProvider | None = None,
    ) -> None:
        self.config = config or RideAppConfig.from_env()
        configure_logging(self.config.log_level, service_name=self.config.service_name)
        self.profile_provider = profile_provider or InMemoryProfileProvider()
        self.recommendation_agent = RecommendationAgent(
            config=self.config, profile_provider=self.profile_provider
        )
        LOGGER.info(
            "advisor app ready",
            extra={"service": self.config.service_name, "environment": self.config.environment or "local"},
        )

    def recommend(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the recommendation envelope for one resolved weather snapshot."""

        return self.recommendation_agent.recommend(payload)


__all__ = ["RideOutfitApp"]
