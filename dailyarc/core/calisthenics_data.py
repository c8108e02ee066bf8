"""Calisthenics (bodyweight) progression catalog.

Authored in the legacy node shape; the tree builder lifts each entry into a
SkillNode. The push-up arc branches after standard push-ups and rejoins at the
one-arm push-up, which needs both branches.
"""

from dailyarc.core.enums import ExerciseCategory
from dailyarc.schemas.skill import LegacyExerciseNode

CALISTHENICS_TREE: tuple[LegacyExerciseNode, ...] = (
    LegacyExerciseNode(
        id="wall-pu",
        name="Wall Pushups",
        level=1,
        sets=3,
        reps=20,
        description="Stand arm-length from wall, push away.",
        category=ExerciseCategory.PUSH,
        prerequisites=(),
    ),
    LegacyExerciseNode(
        id="incline-pu",
        name="Incline Pushups",
        level=2,
        sets=3,
        reps=15,
        description="Hands on elevated surface, full ROM.",
        category=ExerciseCategory.PUSH,
        prerequisites=("wall-pu",),
    ),
    LegacyExerciseNode(
        id="knee-pu",
        name="Knee Pushups",
        level=3,
        sets=3,
        reps=15,
        description="Standard pushup position on knees.",
        category=ExerciseCategory.PUSH,
        prerequisites=("incline-pu",),
    ),
    LegacyExerciseNode(
        id="standard-pu",
        name="Standard Pushups",
        level=4,
        sets=4,
        reps=12,
        description="Full pushup with strict form.",
        category=ExerciseCategory.PUSH,
        prerequisites=("knee-pu",),
    ),
    LegacyExerciseNode(
        id="diamond-pu",
        name="Diamond Pushups",
        level=5,
        sets=4,
        reps=10,
        description="Hands together forming a diamond.",
        category=ExerciseCategory.PUSH,
        prerequisites=("standard-pu",),
    ),
    LegacyExerciseNode(
        id="archer-pu",
        name="Archer Pushups",
        level=6,
        sets=3,
        reps=8,
        description="Wide stance, shift weight side to side.",
        category=ExerciseCategory.PUSH,
        prerequisites=("standard-pu",),  # Branch: parallel to diamond
    ),
    LegacyExerciseNode(
        id="pseudo-planche",
        name="Pseudo Planche",
        level=7,
        sets=3,
        reps=8,
        description="Hands by waist, lean forward.",
        category=ExerciseCategory.PUSH,
        prerequisites=("diamond-pu",),
    ),
    LegacyExerciseNode(
        id="one-arm-pu",
        name="One-Arm Pushup",
        level=8,
        sets=3,
        reps=5,
        description="Single arm pushup - the pinnacle.",
        category=ExerciseCategory.PUSH,
        prerequisites=("archer-pu", "pseudo-planche"),
    ),
)
