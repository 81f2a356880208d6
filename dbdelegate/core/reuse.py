"""Reusable container configuration.

A validated value object consumed by the container lifecycle manager. It is
only ever created through :class:`ReusableContainerConfigurationBuilder`,
which applies the defaults and rejects invalid combinations.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ConflictingImageVersionsReuseBehaviour(str, Enum):
    """What to do when a reusable container runs a different image version"""

    FAIL = "fail"
    RECREATE = "recreate"
    REUSE = "reuse"


class ReusableContainerConfiguration(BaseModel):
    """Immutable settings controlling whether an existing container is reused"""

    model_config = ConfigDict(frozen=True)

    container_name: str = Field(..., description="Name of the reusable container")
    image_conflict_behaviour: ConflictingImageVersionsReuseBehaviour = Field(
        ..., description="Behaviour on conflicting image versions"
    )
    is_enabled: bool = Field(..., description="Whether reuse is enabled")

    @staticmethod
    def builder() -> "ReusableContainerConfigurationBuilder":
        return ReusableContainerConfigurationBuilder()


class ReusableContainerConfigurationBuilder:
    """Fluent builder; validation happens in :meth:`build`."""

    def __init__(self):
        self._container_name: Optional[str] = None
        self._is_enabled: bool = True
        self._image_conflict_behaviour: Optional[ConflictingImageVersionsReuseBehaviour] = (
            ConflictingImageVersionsReuseBehaviour.FAIL
        )

    def with_container_name(self, container_name: str) -> "ReusableContainerConfigurationBuilder":
        self._container_name = container_name
        return self

    def with_conflicting_image_versions_reuse_behaviour(
        self, behaviour: ConflictingImageVersionsReuseBehaviour
    ) -> "ReusableContainerConfigurationBuilder":
        self._image_conflict_behaviour = behaviour
        return self

    def is_enabled(self, is_enabled: bool) -> "ReusableContainerConfigurationBuilder":
        self._is_enabled = is_enabled
        return self

    def build(self) -> ReusableContainerConfiguration:
        if self._container_name is None or not self._container_name.strip():
            raise ValueError("Container name must be specified with REUSABLE mode")
        if self._image_conflict_behaviour is None:
            raise ValueError("ConflictingImageVersionsReuseBehaviour cannot be None")
        return ReusableContainerConfiguration(
            container_name=self._container_name,
            image_conflict_behaviour=self._image_conflict_behaviour,
            is_enabled=self._is_enabled,
        )
