"""Profile provider abstractions supplying a rider's thermal bias."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Mapping

from models.inputs import NEUTRAL_BIAS, PersonalizationBias

LOGGER = logging.getLogger(__name__)


class ProfileProvider(ABC):
    """Abstract source of personalisation for a rider."""

    @abstractmethod
    def get_bias(self, user_id: str) -> PersonalizationBias:
        """Return the rider's bias, or a neutral one when nothing is known."""


class InMemoryProfileProvider(ProfileProvider):
    """Dictionary-backed provider for local runs and tests."""

    def __init__(self, biases: Mapping[str, PersonalizationBias] | None = None) -> None:
        self._biases: Dict[str, PersonalizationBias] = dict(biases or {})

    def set_bias(self, user_id: str, bias: PersonalizationBias) -> None:
        self._biases[user_id] = bias

    def get_bias(self, user_id: str) -> PersonalizationBias:
        bias = self._biases.get(user_id)
        if bias is None:
            LOGGER.debug("No stored bias, using neutral profile")
            return NEUTRAL_BIAS
        return bias


__all__ = ["InMemoryProfileProvider", "ProfileProvider"]
