"""Skill tree endpoints: catalogs, validation and learner progress."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from dailyarc.core.config import get_settings
from dailyarc.core.enums import TrainingMode
from dailyarc.schemas.skill import (
    NodeProgress,
    ProgressRequest,
    ProgressResponse,
    SkillNode,
    TreeValidation,
)
from dailyarc.services.strength import (
    build_metric_table,
    merge_metric_values,
    metrics_lookup_from_table,
)
from dailyarc.services.tree_builder import build_skill_tree
from dailyarc.services.tree_validator import validate_skill_tree
from dailyarc.services.unlock_resolver import (
    get_max_level,
    get_next_progressions,
    get_node_state,
    get_progression_percentage,
)

router = APIRouter()


def _resolve_mode(mode: TrainingMode | None) -> TrainingMode:
    return mode or get_settings().default_training_mode


@router.get("/tree", response_model=list[SkillNode])
async def get_tree(mode: TrainingMode | None = None):
    """All nodes for a training mode (defaults to the configured mode)."""
    return build_skill_tree(_resolve_mode(mode))


@router.get("/tree/validate", response_model=TreeValidation)
async def validate_tree(mode: TrainingMode | None = None):
    """Structural report for a mode's tree. Errors are data, not failures."""
    return validate_skill_tree(build_skill_tree(_resolve_mode(mode)))


@router.get("/nodes/{node_id}", response_model=SkillNode)
async def get_node(node_id: str, mode: TrainingMode | None = None):
    tree = build_skill_tree(_resolve_mode(mode))
    node = next((n for n in tree if n.id == node_id), None)
    if not node:
        raise HTTPException(status_code=404, detail="Skill node not found")
    return node


@router.post("/progress", response_model=ProgressResponse)
async def progress(payload: ProgressRequest):
    """
    Lock state of every node for a learner.
    Cross-prerequisite metrics come from the logged history (with bodyweight)
    and/or explicit metric values; explicit values win.
    """
    mode = _resolve_mode(payload.mode)
    tree = build_skill_tree(mode)
    completed = set(payload.completed_ids)

    table = build_metric_table(payload.history, payload.bodyweight_kg, completed)
    lookup = metrics_lookup_from_table(merge_metric_values(table, payload.metrics))

    nodes = [
        NodeProgress(
            id=n.id,
            name=n.name,
            level=n.level,
            exercise_type=n.exercise_type,
            state=get_node_state(n.id, completed, tree, lookup),
        )
        for n in tree
    ]
    completed_count = sum(1 for n in tree if n.id in completed)
    return ProgressResponse(
        mode=mode,
        nodes=nodes,
        next_progressions=[n.id for n in get_next_progressions(completed, tree, lookup)],
        completed_count=completed_count,
        total_count=len(tree),
        percentage=get_progression_percentage(completed_count, len(tree)),
        max_level=get_max_level(completed, tree),
    )
