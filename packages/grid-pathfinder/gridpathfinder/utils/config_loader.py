"""Load and configure solver settings from a YAML file."""

from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator, model_validator

from gridpathfinder.adapters.text import MarkerSet
from gridpathfinder.constants import (
    DEFAULT_SOLVED_SUFFIX,
    DIAGONAL_STEP_COST,
    ORTHOGONAL_STEP_COST,
)
from gridpathfinder.cost_model import CostModel
from gridpathfinder.logging_config import (
    logger,
)
from gridpathfinder.theme import DEFAULT_THEME, Theme


class SearchConfig(BaseModel):
    """Configuration for the search loop."""

    max_expansions: int | None = None

    @field_validator("max_expansions")
    @classmethod
    def validate_max_expansions(cls, value: int | None) -> int | None:
        """Validate the expansion limit."""
        if value is not None and value < 1:
            error_message = f"max_expansions must be at least 1, got {value}."
            raise ValueError(error_message)
        return value


class CostConfig(BaseModel):
    """Configuration for the fixed step costs."""

    orthogonal: int = ORTHOGONAL_STEP_COST
    diagonal: int = DIAGONAL_STEP_COST

    @field_validator("orthogonal", "diagonal")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        """Step costs must be positive."""
        if value <= 0:
            error_message = f"Step costs must be positive, got {value}."
            raise ValueError(error_message)
        return value

    @model_validator(mode="after")
    def validate_ordering(self) -> "CostConfig":
        """A diagonal step may not be cheaper than an orthogonal one."""
        if self.diagonal < self.orthogonal:
            error_message = (
                f"Diagonal cost ({self.diagonal}) must not be lower than "
                f"orthogonal cost ({self.orthogonal})."
            )
            raise ValueError(error_message)
        return self


class OutputConfig(BaseModel):
    """Configuration for displaying and writing solved grids."""

    theme: Theme = DEFAULT_THEME
    mark_explored: bool = False
    write_solution: bool = True
    solved_suffix: str = DEFAULT_SOLVED_SUFFIX

    @field_validator("solved_suffix")
    @classmethod
    def validate_solved_suffix(cls, value: str) -> str:
        """The suffix must produce a file name distinct from the input."""
        if not value:
            error_message = "solved_suffix must not be empty."
            raise ValueError(error_message)
        return value


class SolverConfig(BaseModel):
    """Configuration for a pathfinding run."""

    search: SearchConfig | None = None
    costs: CostConfig | None = None
    markers: MarkerSet | None = None
    output: OutputConfig | None = None


def load_solver_config(config_path: str | Path) -> SolverConfig:
    """
    Load solver configuration from a YAML file and parse it into a SolverConfig model.

    Args:
        config_path (str | Path): Path to the YAML configuration file.

    Returns
    -------
        SolverConfig: Parsed configuration as a Pydantic model.
    """
    with Path(config_path).open(encoding="utf-8") as file:
        data = yaml.safe_load(file) or {}
        return SolverConfig(**data)


def configure_cost_model(config: SolverConfig) -> CostModel:
    """
    Build the cost model from the configuration.

    Args:
        config (SolverConfig): Solver configuration object.

    Returns
    -------
        CostModel: Default 10/14 costs unless overridden.
    """
    if config.costs is None:
        return CostModel()

    if (config.costs.orthogonal, config.costs.diagonal) != (
        ORTHOGONAL_STEP_COST,
        DIAGONAL_STEP_COST,
    ):
        logger.info(
            f"Using custom step costs: orthogonal={config.costs.orthogonal}, "
            f"diagonal={config.costs.diagonal}",
        )
    return CostModel(orthogonal_cost=config.costs.orthogonal, diagonal_cost=config.costs.diagonal)


def configure_search(config: SolverConfig) -> SearchConfig:
    """Return the search configuration, or defaults if not specified."""
    return config.search or SearchConfig()


def configure_markers(config: SolverConfig) -> MarkerSet:
    """Return the marker characters, or defaults if not specified."""
    return config.markers or MarkerSet()


def configure_output(config: SolverConfig) -> OutputConfig:
    """Return the output configuration, or defaults if not specified."""
    return config.output or OutputConfig()
