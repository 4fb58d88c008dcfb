"""Abstract context processor with an enforced lifecycle.

Every concrete processor inherits from BaseContextProcessor and implements
only ``process()``.  The ``apply()`` wrapper is **not overridable** — it logs
entry and exit and lets failures propagate unchanged so the calculator can
abort the run:

    apply -> process -> (log) -> return | raise
"""

from __future__ import annotations

import abc
import logging
from typing import final

from verscribe.pipeline.context import VersionContext

logger = logging.getLogger(__name__)


class BaseContextProcessor(abc.ABC):
    """Abstract base for all pipeline stages.

    Subclasses **must** implement:
        * ``processor_id`` — unique identifier (e.g. ``"configuration"``).
        * ``process(context)`` — read and/or mutate the context.

    A processor may rely only on processors that run before it in the
    calculator's fixed order.
    """

    @property
    @abc.abstractmethod
    def processor_id(self) -> str:
        """Unique processor identifier."""
        ...

    @abc.abstractmethod
    def process(self, context: VersionContext) -> None:
        """Mutate *context* in place."""
        ...

    @final
    def apply(self, context: VersionContext) -> None:
        """Run the processor.  **Do not override.**"""
        logger.info("[%s] starting", self.processor_id)
        try:
            self.process(context)
        except Exception as exc:
            logger.error("[%s] failed: %s", self.processor_id, exc)
            raise
        logger.info("[%s] done", self.processor_id)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} processor_id={self.processor_id!r}>"
