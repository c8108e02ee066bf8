"""Weightlifting (iron) progression catalog.

Bench press is gated on standard push-ups from the calisthenics catalog, so in
iron-only mode its prerequisite is dangling and the validator reports it.
The advanced shrimp squat is a calisthenics node gated purely on back-squat
relative strength.
"""

from dailyarc.core.enums import CrossMetric, ExerciseCategory, ExerciseType
from dailyarc.schemas.skill import CrossPrerequisite, SkillNode

_IRON = ExerciseType.WEIGHTLIFTING
_LEGS = ExerciseCategory.LEGS
_PUSH = ExerciseCategory.PUSH
_PULL = ExerciseCategory.PULL

WEIGHTLIFTING_TREE: tuple[SkillNode, ...] = (
    # ── Legs / posterior chain ──
    SkillNode(
        id="goblet-squat",
        name="Goblet Squat",
        level=1,
        sets=3,
        reps=12,
        description="Hold weight at chest height, squat deep.",
        category=_LEGS,
        exercise_type=_IRON,
    ),
    SkillNode(
        id="back-squat",
        name="Back Squat",
        level=2,
        sets=3,
        reps=5,
        description="Barbell across upper back. The king of leg exercises.",
        category=_LEGS,
        exercise_type=_IRON,
        prerequisites=("goblet-squat",),
    ),
    SkillNode(
        id="deadlift",
        name="Deadlift",
        level=3,
        sets=3,
        reps=5,
        description="Lift heavy off the floor. Neutral spine.",
        category=_LEGS,
        exercise_type=_IRON,
        prerequisites=("back-squat",),
    ),
    # ── Push / chest ──
    SkillNode(
        id="bench-press",
        name="Bench Press",
        level=2,
        sets=3,
        reps=5,
        description="Barbell bench press. Keep shoulders tucked.",
        category=_PUSH,
        exercise_type=_IRON,
        prerequisites=("standard-pu",),  # Cross-modality: calisthenics tree
    ),
    # ── Pull / back ──
    SkillNode(
        id="barbell-row",
        name="Barbell Row (Pendlay)",
        level=2,
        sets=4,
        reps=5,
        description="Row from floor, explode at chest, torso parallel.",
        category=_PULL,
        exercise_type=_IRON,
        prerequisites=("deadlift",),
    ),
    # ── Power ──
    SkillNode(
        id="power-clean",
        name="Power Clean",
        level=4,
        sets=3,
        reps=3,
        description="Explosive pull from floor to front rack position.",
        category=_LEGS,
        exercise_type=_IRON,
        prerequisites=("deadlift", "front-squat"),
    ),
    SkillNode(
        id="romanian-deadlift",
        name="Romanian Deadlift (RDL)",
        level=3,
        sets=3,
        reps=8,
        description="Hip hinge, keep legs nearly straight, posterior chain dominant.",
        category=_LEGS,
        exercise_type=_IRON,
        prerequisites=("deadlift",),
    ),
    SkillNode(
        id="front-squat",
        name="Front Squat",
        level=3,
        sets=3,
        reps=5,
        description="Barbell on front deltoids, elbows high, quad dominant.",
        category=_LEGS,
        exercise_type=_IRON,
        prerequisites=("back-squat",),
    ),
    SkillNode(
        id="overhead-press",
        name="Overhead Press (OHP)",
        level=2,
        sets=3,
        reps=5,
        description="Standing barbell press, strict form, no leg drive.",
        category=_PUSH,
        exercise_type=_IRON,
        prerequisites=("bench-press",),
    ),
    SkillNode(
        id="arnold-press",
        name="Arnold Press (Dumbbell)",
        level=3,
        sets=3,
        reps=8,
        description="Dumbbell press with rotating palms, increases ROM.",
        category=_PUSH,
        exercise_type=_IRON,
        prerequisites=("overhead-press",),
    ),
    SkillNode(
        id="bulgarian-split-squat",
        name="Bulgarian Split Squat",
        level=3,
        sets=3,
        reps=8,
        description="Rear foot elevated, dumbbell split squat.",
        category=_LEGS,
        exercise_type=_IRON,
        prerequisites=("back-squat",),
    ),
    SkillNode(
        id="sumo-deadlift",
        name="Sumo Deadlift",
        level=3,
        sets=3,
        reps=5,
        description="Wide stance deadlift, knees tracking over toes.",
        category=_LEGS,
        exercise_type=_IRON,
        prerequisites=("deadlift",),
    ),
    SkillNode(
        id="snatch",
        name="Snatch",
        level=5,
        sets=3,
        reps=3,
        description="Complex Olympic lift, explosive full body movement.",
        category=_LEGS,
        exercise_type=_IRON,
        prerequisites=("power-clean",),
    ),
    # ── Hybrid: bodyweight skill gated on barbell strength ──
    SkillNode(
        id="adv-shrimp-squat",
        name="Adv. Shrimp Squat",
        level=4,
        sets=3,
        reps=8,
        description="Hold back foot with both hands. Knee touches ground.",
        category=_LEGS,
        exercise_type=ExerciseType.CALISTHENICS,
        cross_prerequisites=(
            CrossPrerequisite(
                exercise_id="back-squat",
                metric=CrossMetric.ONE_RM_BW_RATIO,
                threshold=1.5,
            ),
        ),
        target_bw_ratio=1.5,
    ),
)
