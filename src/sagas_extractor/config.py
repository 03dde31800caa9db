# -*- coding: utf-8 -*-
"""
Extractor settings.
"""

from __future__ import annotations

import logging
from typing import Optional

__all__ = ["DEFAULT_OUTPUT_PATH", "SagasExtractorConfig", "create_config"]

DEFAULT_OUTPUT_PATH = "out/test.png"


class SagasExtractorConfig:
    """Settings shared by the CLI and the high-level API."""

    def __init__(
        self,
        debug_mode: bool = False,
        output_path: str = DEFAULT_OUTPUT_PATH,
        dump_header: bool = True,
        log_level: Optional[int] = None,
    ):
        self.debug_mode = debug_mode
        self.output_path = output_path
        self.dump_header = dump_header
        # explicit level wins over debug_mode
        if log_level is None:
            log_level = logging.DEBUG if debug_mode else logging.WARNING
        self.log_level = log_level

    def __repr__(self) -> str:
        return (
            f"SagasExtractorConfig(debug_mode={self.debug_mode}, output_path={self.output_path!r}, "
            f"dump_header={self.dump_header}, log_level={logging.getLevelName(self.log_level)})"
        )


def create_config(
    debug_mode: bool = False,
    output_path: str = DEFAULT_OUTPUT_PATH,
    dump_header: bool = True,
    log_level: Optional[int] = None,
) -> SagasExtractorConfig:
    """
    Build a config object.

    Args:
        debug_mode: log every decode stage at DEBUG
        output_path: where the CLI writes the PNG
        dump_header: print the parsed header before extracting
        log_level: overrides the level implied by debug_mode

    Returns:
        SagasExtractorConfig
    """
    return SagasExtractorConfig(
        debug_mode=debug_mode,
        output_path=output_path,
        dump_header=dump_header,
        log_level=log_level,
    )
