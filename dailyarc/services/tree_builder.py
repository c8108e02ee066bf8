"""Skill tree assembly from the static catalogs."""

from __future__ import annotations

import logging

from dailyarc.core.calisthenics_data import CALISTHENICS_TREE
from dailyarc.core.cardio_data import CARDIO_TREE
from dailyarc.core.enums import ExerciseType, TrainingMode
from dailyarc.core.weightlifting_data import WEIGHTLIFTING_TREE
from dailyarc.schemas.skill import LegacyExerciseNode, SkillNode
from dailyarc.services.tree_validator import validate_skill_tree

logger = logging.getLogger(__name__)


def legacy_node_to_skill_node(node: LegacyExerciseNode) -> SkillNode:
    """Lift a legacy calisthenics node into the canonical shape, field by field."""
    return SkillNode(
        id=node.id,
        name=node.name,
        level=node.level,
        sets=node.sets,
        reps=node.reps,
        description=node.description,
        category=node.category,
        exercise_type=ExerciseType.CALISTHENICS,
        prerequisites=tuple(node.prerequisites or ()),
        cross_prerequisites=(),
        target_bw_ratio=0,
    )


# Lifted once; catalogs are immutable so every build can share these tuples.
_BODYWEIGHT_NODES: tuple[SkillNode, ...] = tuple(
    legacy_node_to_skill_node(n) for n in CALISTHENICS_TREE
)

_CATALOGS: dict[TrainingMode, tuple[SkillNode, ...]] = {
    TrainingMode.BODYWEIGHT: _BODYWEIGHT_NODES,
    TrainingMode.IRON: WEIGHTLIFTING_TREE,
    TrainingMode.CARDIO: CARDIO_TREE,
    # Ids are namespaced by exercise name; uniqueness is checked by the validator
    TrainingMode.HYBRID: _BODYWEIGHT_NODES + WEIGHTLIFTING_TREE + CARDIO_TREE,
}


def build_skill_tree(mode: TrainingMode | str) -> list[SkillNode]:
    """
    Return the working tree for a training mode.

    Validation problems are logged as warnings and never raised: a best-effort
    tree is always returned.
    """
    mode = TrainingMode(mode)
    tree = list(_CATALOGS[mode])

    validation = validate_skill_tree(tree)
    if not validation.valid:
        logger.warning(
            "%s tree has %d validation error(s) (may still function)",
            mode.value,
            len(validation.errors),
        )
        for error in validation.errors:
            logger.warning("  %s", error)

    logger.info("Built %s tree with %d nodes", mode.value, len(tree))
    return tree
