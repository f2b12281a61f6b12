"""Pipeline stages for page processing.

Each stage performs one task and can be composed into pipelines.

Stage inheritance:
    BaseStage → AssemblyStage, OrderingStage

Usage:
    >>> from readorder.stages import AssemblyStage, OrderingStage
    >>> elements = AssemblyStage().process(page_input)
    >>> ordered = OrderingStage(create_sorter("xycut-plus")).process(elements, extent=page_input.extent)
"""

from __future__ import annotations

from readorder.stages.assembly_stage import AssemblyStage
from readorder.stages.base import BaseStage, StageError, StageResult
from readorder.stages.ordering_stage import OrderingStage

__all__ = [
    # Base classes
    "BaseStage",
    "StageError",
    "StageResult",
    # Stages
    "AssemblyStage",
    "OrderingStage",
]
