# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Success marker output.
"""

import logging
from pathlib import Path
from typing import Union

from ..config import SUCCESS_MESSAGE
from .orchestrator import BuildResult, BuildState

logger = logging.getLogger(__name__)


def record_success(result: BuildResult, out_path: Union[str, Path]) -> Path:
    """Write the success marker for a passed build and return its path."""
    if not result.succeeded or result.state is not BuildState.SUCCEEDED:
        raise ValueError(f"Refusing to record a build in state {result.state.value}")

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(f"{SUCCESS_MESSAGE}\n", encoding="utf-8")
    logger.info(f"Wrote success marker to {out_path}")
    return out_path
