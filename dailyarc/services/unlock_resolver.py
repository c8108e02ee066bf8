"""Unlock resolution: derive each node's lock state from a learner's completions.

Pure predicates over caller-supplied values. Completion-based prerequisites use
AND semantics; cross-modality prerequisites additionally require a metric value,
supplied through an injected lookup, to meet its threshold. A missing or
non-numeric metric counts as unmet.

State per node is derived, never stored: locked -> unlocked -> completed.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Sequence

from dailyarc.core.enums import CrossMetric, NodeState
from dailyarc.core.numbers import is_finite_number, round_int
from dailyarc.schemas.skill import SkillNode

# (exercise_id, metric) -> value, or None when the caller has no value
MetricsLookup = Callable[[str, CrossMetric], float | None]


def _find_node(tree: Sequence[SkillNode], node_id: str) -> SkillNode | None:
    return next((n for n in tree if n.id == node_id), None)


def _node_unlocked(
    node: SkillNode,
    completed: Collection[str],
    metrics_lookup: MetricsLookup | None,
) -> bool:
    if not node.prerequisites and not node.cross_prerequisites:
        return True
    if not all(prereq in completed for prereq in node.prerequisites):
        return False
    for cross in node.cross_prerequisites:
        value = metrics_lookup(cross.exercise_id, cross.metric) if metrics_lookup else None
        if not is_finite_number(value) or value < cross.threshold:
            return False
    return True


def is_unlocked(
    node_id: str,
    completed_ids: Iterable[str],
    tree: Sequence[SkillNode],
    metrics_lookup: MetricsLookup | None = None,
) -> bool:
    """True when every prerequisite is completed and every cross-prerequisite is met."""
    node = _find_node(tree, node_id)
    if node is None:
        return False
    return _node_unlocked(node, set(completed_ids), metrics_lookup)


def get_unlocked(
    completed_ids: Iterable[str],
    tree: Sequence[SkillNode],
    metrics_lookup: MetricsLookup | None = None,
) -> list[SkillNode]:
    """All accessible nodes, including ones already completed. Tree order."""
    completed = set(completed_ids)
    return [n for n in tree if _node_unlocked(n, completed, metrics_lookup)]


def get_next_progressions(
    completed_ids: Iterable[str],
    tree: Sequence[SkillNode],
    metrics_lookup: MetricsLookup | None = None,
) -> list[SkillNode]:
    """Unlocked but not yet completed: what the learner can start now."""
    completed = set(completed_ids)
    return [
        n
        for n in tree
        if n.id not in completed and _node_unlocked(n, completed, metrics_lookup)
    ]


def get_node_state(
    node_id: str,
    completed_ids: Iterable[str],
    tree: Sequence[SkillNode],
    metrics_lookup: MetricsLookup | None = None,
) -> NodeState:
    """Derived state; unknown ids are locked. A completed node stays completed."""
    node = _find_node(tree, node_id)
    if node is None:
        return NodeState.LOCKED
    completed = set(completed_ids)
    if node.id in completed:
        return NodeState.COMPLETED
    if _node_unlocked(node, completed, metrics_lookup):
        return NodeState.UNLOCKED
    return NodeState.LOCKED


def get_max_level(completed_ids: Iterable[str], tree: Sequence[SkillNode]) -> int:
    """Highest level among completed nodes found in the tree; 0 when none."""
    completed = set(completed_ids)
    return max((n.level for n in tree if n.id in completed), default=0)


def get_progression_percentage(completed_count: int, total_count: int) -> int:
    """
    round(completed / total * 100), halves up. Not capped at 100 when
    completed exceeds total; an empty tree is 0%.
    """
    if total_count <= 0 or completed_count <= 0:
        return 0
    return round_int(completed_count / total_count * 100)
