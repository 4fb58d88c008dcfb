"""Stage 1 — Build-server detection.

Runs before configuration resolution so that a CI-supplied branch name is
the one used for branch overrides, release detection and branch tokens.

Writes (only the fields the detected server supplies):
    build_server_name, canonical_branch_name, branch_name, build_number
"""

from __future__ import annotations

import logging

from verscribe.bridge.base import BuildServer, short_branch_name
from verscribe.bridge.build_servers import default_build_servers, detect
from verscribe.pipeline.base import BaseContextProcessor
from verscribe.pipeline.context import VersionContext

logger = logging.getLogger(__name__)


class BuildServerContextProcessor(BaseContextProcessor):
    """Applies the overrides of the first build server recognising the environment."""

    def __init__(self, servers: list[BuildServer] | None = None) -> None:
        self._servers = default_build_servers() if servers is None else list(servers)

    @property
    def processor_id(self) -> str:
        return "build_server"

    def process(self, context: VersionContext) -> None:
        overrides = detect(context.environ, self._servers)
        if overrides is None:
            logger.debug("no build server detected")
            return

        result = context.result
        result.build_server_name = overrides.build_server_name
        if overrides.canonical_branch_name is not None:
            result.canonical_branch_name = overrides.canonical_branch_name
            result.branch_name = short_branch_name(overrides.canonical_branch_name)
        if overrides.build_number is not None:
            result.build_number = overrides.build_number

        logger.info(
            "build server %s: branch=%s build=%s",
            overrides.build_server_name,
            overrides.canonical_branch_name,
            overrides.build_number,
        )
