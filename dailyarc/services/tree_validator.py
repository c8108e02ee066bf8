"""Structural checks over an assembled skill tree.

Never raises: every problem is reported as a readable error string and the
caller decides what to do with them. Checked per node:
- level within 1-10, and level-1 nodes carry no prerequisites
- ids are unique, prerequisites and cross-prerequisite exercises exist
- no prerequisite sits at a strictly higher level than its dependent
- no prerequisite cycles
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Sequence

from dailyarc.core.constants import MAX_SKILL_LEVEL, MIN_SKILL_LEVEL
from dailyarc.schemas.skill import SkillNode, TreeValidation

logger = logging.getLogger(__name__)


def _find_cycles(tree: Sequence[SkillNode]) -> list[list[str]]:
    """DFS over prerequisite edges; returns each cycle once as a path a -> ... -> a."""
    edges = {node.id: node.prerequisites for node in tree}
    visiting: set[str] = set()
    done: set[str] = set()
    cycles: list[list[str]] = []

    for start in edges:
        if start in done:
            continue
        # One prerequisite iterator per node on the path; deep chains must not recurse
        path = [start]
        visiting.add(start)
        stack = [iter(edges[start])]
        while stack:
            prereq = next(stack[-1], None)
            if prereq is None:
                stack.pop()
                finished = path.pop()
                visiting.discard(finished)
                done.add(finished)
            elif prereq not in edges:
                continue  # Dangling ids are reported separately
            elif prereq in visiting:
                cycles.append(path[path.index(prereq):] + [prereq])
            elif prereq not in done:
                path.append(prereq)
                visiting.add(prereq)
                stack.append(iter(edges[prereq]))
    return cycles


def validate_skill_tree(tree: Sequence[SkillNode]) -> TreeValidation:
    errors: list[str] = []
    levels = {node.id: node.level for node in tree}

    for node_id, count in Counter(node.id for node in tree).items():
        if count > 1:
            errors.append(f"{node_id}: id appears {count} times in tree")

    for node in tree:
        if node.level < MIN_SKILL_LEVEL or node.level > MAX_SKILL_LEVEL:
            errors.append(
                f"{node.id}: level {node.level} must be {MIN_SKILL_LEVEL}-{MAX_SKILL_LEVEL}"
            )

        for prereq_id in node.prerequisites:
            if prereq_id not in levels:
                errors.append(f'{node.id}: prerequisite "{prereq_id}" does not exist in tree')
            elif levels[prereq_id] > node.level:
                errors.append(
                    f'{node.id}: prerequisite "{prereq_id}" is level {levels[prereq_id]}, '
                    f"above dependent level {node.level}"
                )

        for cross in node.cross_prerequisites:
            if cross.exercise_id not in levels:
                errors.append(
                    f'{node.id}: cross-prerequisite exercise "{cross.exercise_id}" does not exist in tree'
                )

        if node.level == MIN_SKILL_LEVEL and node.prerequisites:
            errors.append(f"{node.id}: level 1 node should not have prerequisites")

    for cycle in _find_cycles(tree):
        errors.append(f"{cycle[0]}: prerequisite cycle {' -> '.join(cycle)}")

    if logger.isEnabledFor(logging.DEBUG):
        by_level: dict[int, list[str]] = defaultdict(list)
        for node in tree:
            by_level[node.level].append(node.id)
        logger.debug("Tree by level: %s", dict(sorted(by_level.items())))

    return TreeValidation(valid=not errors, errors=errors)
