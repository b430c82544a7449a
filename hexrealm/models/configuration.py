"""Game configuration model and loader.

Configuration files use one ``key=value`` pair per line. Values are
arithmetic expressions that may refer to keys defined on earlier lines:

    m=4
    n=4
    init_budget=1000
    max_dep=init_budget*100
"""

import logging
from pathlib import Path
from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..utils.constants import (
    DEFAULT_COLS,
    DEFAULT_INITIAL_BUDGET,
    DEFAULT_INITIAL_DEPOSIT,
    DEFAULT_INITIAL_PLAN_MINUTES,
    DEFAULT_INITIAL_PLAN_SECONDS,
    DEFAULT_INTEREST_PERCENTAGE,
    DEFAULT_MAX_DEPOSIT,
    DEFAULT_REVISION_COST,
    DEFAULT_REVISION_PLAN_MINUTES,
    DEFAULT_REVISION_PLAN_SECONDS,
    DEFAULT_ROWS,
)
from ..utils.expression import ExpressionError, evaluate

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a configuration file cannot be turned into a Configuration."""


class Configuration(BaseModel):
    """Immutable numeric parameters of a match.

    Fields accept either their Python name or the short key used in
    configuration files (``m``, ``n``, ``init_budget``, ...).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    rows: int = Field(default=DEFAULT_ROWS, ge=1, alias="m")
    cols: int = Field(default=DEFAULT_COLS, ge=1, alias="n")
    initial_plan_minutes: int = Field(
        default=DEFAULT_INITIAL_PLAN_MINUTES, ge=0, alias="init_plan_min"
    )
    initial_plan_seconds: int = Field(
        default=DEFAULT_INITIAL_PLAN_SECONDS, ge=0, alias="init_plan_sec"
    )
    initial_budget: int = Field(default=DEFAULT_INITIAL_BUDGET, ge=0, alias="init_budget")
    initial_deposit: int = Field(
        default=DEFAULT_INITIAL_DEPOSIT, ge=0, alias="init_center_dep"
    )
    revision_plan_minutes: int = Field(
        default=DEFAULT_REVISION_PLAN_MINUTES, ge=0, alias="plan_rev_min"
    )
    revision_plan_seconds: int = Field(
        default=DEFAULT_REVISION_PLAN_SECONDS, ge=0, alias="plan_rev_sec"
    )
    revision_cost: int = Field(default=DEFAULT_REVISION_COST, ge=0, alias="rev_cost")
    max_deposit: int = Field(default=DEFAULT_MAX_DEPOSIT, ge=0, alias="max_dep")
    interest_percentage: int = Field(
        default=DEFAULT_INTEREST_PERCENTAGE, ge=0, alias="interest_pct"
    )

    @property
    def region_count(self) -> int:
        return self.rows * self.cols


def _field_names_by_key() -> Dict[str, str]:
    names = {}
    for name, info in Configuration.model_fields.items():
        names[name] = name
        if info.alias:
            names[info.alias] = name
    return names


def parse_configuration(text: str) -> Configuration:
    """Build a Configuration from ``key=value`` lines.

    Blank lines and lines starting with ``#`` are ignored. Keys may be
    field names or file aliases; missing keys keep their defaults.

    Args:
        text: Configuration file contents

    Returns:
        Validated Configuration

    Raises:
        ConfigurationError: On unknown or repeated keys, malformed lines,
            bad expressions, or values failing validation
    """
    keys = _field_names_by_key()
    values: Dict[str, int] = {}
    bindings: Dict[str, int] = {}

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            raise ConfigurationError(f"Line {lineno}: expected 'key=value', got '{line}'")

        key, expr = (part.strip() for part in line.split("=", 1))
        if key not in keys:
            raise ConfigurationError(f"Line {lineno}: unknown key '{key}'")
        field_name = keys[key]
        if field_name in values:
            raise ConfigurationError(f"Line {lineno}: '{key}' is defined twice")

        try:
            value = evaluate(expr, bindings)
        except ExpressionError as e:
            raise ConfigurationError(f"Line {lineno}: {e}") from e

        values[field_name] = value
        bindings[field_name] = value
        alias = Configuration.model_fields[field_name].alias
        if alias:
            bindings[alias] = value

    try:
        return Configuration.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


def load_configuration(path: Union[str, Path]) -> Configuration:
    """Load a Configuration from a ``key=value`` file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigurationError: If the contents are invalid
    """
    path = Path(path)
    with open(path) as f:
        config = parse_configuration(f.read())
    logger.info("Loaded configuration from %s (%dx%d grid)", path, config.rows, config.cols)
    return config
