from pydantic import BaseModel, Field, computed_field


class LivenessResponse(BaseModel):
    status: bool = Field(default=True, description="Process is up")


class ServiceHealthResponse(BaseModel):
    name: str = Field(description="Service name")
    status: bool = Field(description="Service status")


class HealthResponse(BaseModel):
    services: list[ServiceHealthResponse] = Field(
        default_factory=list, description="Services health status"
    )

    @classmethod
    def from_checks(cls, checks: dict[str, bool]) -> "HealthResponse":
        return cls(
            services=[
                ServiceHealthResponse(name=name, status=status)
                for name, status in checks.items()
            ]
        )

    @computed_field
    def status(self) -> bool:
        """Status.

        Returns:
            True when every dependency of the corpus is reachable.

        """
        return all(service.status for service in self.services)
