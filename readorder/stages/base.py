"""Base stage class for pipeline stages.

This module defines the abstract base class for all pipeline stages,
providing a consistent interface and common functionality.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from readorder.exceptions import ProcessingError

logger = logging.getLogger(__name__)

__all__ = ["BaseStage", "StageResult", "StageError"]

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class StageError(ProcessingError):
    """Exception raised when stage processing fails."""

    def __init__(self, stage_name: str, message: str, cause: Exception | None = None):
        self.stage_name = stage_name
        self.cause = cause
        super().__init__(f"[{stage_name}] {message}")


@dataclass
class StageResult(Generic[OutputT]):
    """Result from a pipeline stage.

    Attributes:
        data: The output data from the stage
        stage_name: Name of the stage that produced this result
        processing_time_ms: Time taken to process in milliseconds
        metadata: Additional metadata from processing
    """

    data: OutputT
    stage_name: str
    processing_time_ms: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def processing_time_sec(self) -> float:
        return self.processing_time_ms / 1000.0


class BaseStage(ABC, Generic[InputT, OutputT]):
    """Abstract base class for all pipeline stages.

    Subclasses implement `_process_impl`. This base class provides:

    - Consistent interface (process, process_with_result)
    - Timing and DEBUG logging
    - Error wrapping with stage context (StageError)

    Example:
        >>> class MyStage(BaseStage[list[LayoutBox], list[ContentElement]]):
        ...     name = "my-stage"
        ...
        ...     def _process_impl(self, input_data, **context):
        ...         return [...]
    """

    name: str = "base-stage"

    @abstractmethod
    def _process_impl(self, input_data: InputT, **context: Any) -> OutputT:
        """Internal processing implementation.

        Args:
            input_data: Input from previous stage
            **context: Additional context (extent, page_index, ...)

        Returns:
            Processed output for next stage
        """

    def process(self, input_data: InputT, **context: Any) -> OutputT:
        """Process input and produce output.

        Raises:
            StageError: If processing fails
        """
        return self.process_with_result(input_data, **context).data

    def process_with_result(self, input_data: InputT, **context: Any) -> StageResult[OutputT]:
        """Process and return result with timing metadata.

        Raises:
            StageError: If processing fails
        """
        start_time = time.perf_counter()

        try:
            result = self._process_impl(input_data, **context)
        except StageError:
            raise
        except Exception as e:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.error("%s failed after %.2fms: %s", self.name, elapsed_ms, e)
            raise StageError(self.name, str(e), cause=e) from e

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug("%s completed in %.2fms", self.name, elapsed_ms)

        return StageResult(data=result, stage_name=self.name, processing_time_ms=elapsed_ms)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
