"""Tracker configuration loaded from the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError

from tally.errors import TallyConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "TALLY_"


class TallyConfig(BaseModel):
    """Output options for an AssertionTracker.

    Attributes:
    ----------
    verbose: bool
        Print every passing assertion, not just failures
    fancy: bool
        Use Unicode check/cross glyphs instead of ASCII markers
    color: bool | None
        Force color on or off; None lets the console detect the terminal
    """

    model_config = ConfigDict(frozen=True)

    verbose: bool = False
    fancy: bool = False
    color: bool | None = None


def load_config(environ: Mapping[str, str] | None = None) -> TallyConfig:
    """Build a TallyConfig from TALLY_* variables.

    Reads the process environment, after loading the nearest ``.env`` file
    at or above the working directory, unless an explicit mapping is given.
    Unset or empty variables keep the defaults.

    Raises:
        TallyConfigError: If a variable is not a valid boolean.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    values: dict[str, str] = {}
    for name in TallyConfig.model_fields:
        variable = f"{ENV_PREFIX}{name.upper()}"
        raw = environ.get(variable, "").strip()
        if not raw:
            continue
        try:
            TallyConfig.model_validate({name: raw})
        except ValidationError as e:
            raise TallyConfigError(variable, raw, cause=e) from e
        values[name] = raw

    config = TallyConfig.model_validate(values)
    logger.debug("Loaded tally config: %s", config)
    return config
