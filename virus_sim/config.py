"""Run configuration for a simulation."""
from pydantic import (
    BaseModel,
    ConfigDict,
    NonNegativeInt,
    PositiveFloat,
    PositiveInt,
    ValidationError,
    model_validator,
)

from . import constants as c
from .errors import ConfigurationError


class SimulationConfig(BaseModel):
    """Parameters fixed for the lifetime of one run."""
    model_config = ConfigDict(frozen=True)

    duration: PositiveFloat = c.DEFAULT_DURATION       # seconds of wall-clock time
    num_agents: PositiveInt = c.DEFAULT_NUM_AGENTS
    num_infected: NonNegativeInt = c.DEFAULT_NUM_INFECTED
    seed: int | None = None

    @model_validator(mode="after")
    def check_infected_fits(self):
        if self.num_infected > self.num_agents:
            raise ValueError(
                f"num_infected ({self.num_infected}) cannot exceed num_agents ({self.num_agents})"
            )
        return self


def build_config(**params) -> SimulationConfig:
    """Validates `params`, turning pydantic errors into a ConfigurationError."""
    try:
        return SimulationConfig(**params)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid simulation configuration: {problems}") from exc
