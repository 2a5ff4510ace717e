from __future__ import annotations

import logging
import os
from typing import Annotated, Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# Environment variable → AppConfig field
ENV_VARS: Dict[str, str] = {
    "GRAPH_TICK_MS": "tick_interval_ms",
    "GRAPH_CANVAS_WIDTH": "canvas_width",
    "GRAPH_CANVAS_HEIGHT": "canvas_height",
    "GRAPH_VERTEX_RADIUS": "vertex_radius",
    "GRAPH_LOG_FILE": "log_file",
}


class AppConfig(BaseModel):
    """Runtime settings for the interactive analyzer"""
    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    tick_interval_ms: Annotated[int, Field(ge=1)] = 500
    canvas_width: Annotated[float, Field(gt=0)] = 100.0
    canvas_height: Annotated[float, Field(gt=0)] = 60.0
    vertex_radius: Annotated[float, Field(gt=0)] = 1.5
    log_file: Optional[str] = "graph_analyzer.log"


def load_config(env_file: Optional[str] = None, **overrides: Any) -> AppConfig:
    """Build AppConfig from the environment (and an optional .env file).

    Keyword overrides set to None are ignored so CLI flags can be passed
    through unconditionally. Invalid values raise pydantic.ValidationError.
    """
    load_dotenv(env_file)

    values: Dict[str, Any] = {}
    for env_name, field_name in ENV_VARS.items():
        raw = os.getenv(env_name)
        if raw is not None and raw != "":
            values[field_name] = raw
    values.update({k: v for k, v in overrides.items() if v is not None})

    config = AppConfig(**values)
    logger.debug(f"Loaded config: {config.model_dump()}")
    return config
