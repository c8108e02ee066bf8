"""Cardio progression catalog.

Running work is filed under legs and jump-rope skill work under core; there is
no dedicated cardio category.
"""

from dailyarc.core.enums import ExerciseCategory, ExerciseType
from dailyarc.schemas.skill import SkillNode

_CARDIO = ExerciseType.CARDIO
_LEGS = ExerciseCategory.LEGS
_CORE = ExerciseCategory.CORE

CARDIO_TREE: tuple[SkillNode, ...] = (
    SkillNode(
        id="walk-jog-15",
        name="15min Walk/Jog",
        level=1,
        sets=1,
        reps=1,
        duration=900,
        zone=2,
        description="Alternating walk and jog to build aerobic base.",
        category=_CORE,
        exercise_type=_CARDIO,
    ),
    SkillNode(
        id="zone2-30",
        name="30min Zone 2",
        level=2,
        sets=1,
        reps=1,
        duration=1800,
        zone=2,
        description="Steady state low intensity cardio.",
        category=_LEGS,
        exercise_type=_CARDIO,
        prerequisites=("walk-jog-15",),
    ),
    SkillNode(
        id="run-5k",
        name="5K Run",
        level=3,
        sets=1,
        reps=1,
        distance=5,
        description="Complete a 5km run at a steady pace.",
        category=_LEGS,
        exercise_type=_CARDIO,
        prerequisites=("zone2-30",),
    ),
    SkillNode(
        id="intervals-400m",
        name="400m Intervals",
        level=4,
        sets=8,
        reps=1,
        distance=0.4,
        description="8 sets of 400m sprints with 2min rest.",
        category=_LEGS,
        exercise_type=_CARDIO,
        prerequisites=("run-5k",),
    ),
    SkillNode(
        id="run-10k",
        name="10K Run",
        level=5,
        sets=1,
        reps=1,
        distance=10,
        description="Complete a 10km run.",
        category=_LEGS,
        exercise_type=_CARDIO,
        prerequisites=("run-5k",),
    ),
    # ── Zone 2 base building ──
    SkillNode(
        id="zone2-60",
        name="Zone 2 Base (60min)",
        level=4,
        sets=1,
        reps=1,
        duration=3600,
        zone=2,
        description="One hour conversational pace cardio. Aerobic base building.",
        category=_LEGS,
        exercise_type=_CARDIO,
        prerequisites=("zone2-30",),
    ),
    # ── Tempo / threshold ──
    SkillNode(
        id="tempo-run-5k",
        name="Tempo Run (5K)",
        level=5,
        sets=1,
        reps=1,
        distance=5,
        zone=3,
        description="5K at threshold pace (80-85% max HR), sustained effort.",
        category=_LEGS,
        exercise_type=_CARDIO,
        prerequisites=("run-5k",),
    ),
    # ── Sprint intervals ──
    SkillNode(
        id="sprint-200m",
        name="Sprint Intervals (200m)",
        level=5,
        sets=6,
        reps=1,
        distance=0.2,
        zone=5,
        description="6 x 200m sprints @ 90% effort with 2min rest.",
        category=_LEGS,
        exercise_type=_CARDIO,
        prerequisites=("intervals-400m",),
    ),
    # ── Jump rope ──
    SkillNode(
        id="double-unders-practice",
        name="Double-Unders (50)",
        level=3,
        sets=5,
        reps=50,
        description="Jump rope with rope turning twice per jump, 50 reps per set.",
        category=_CORE,
        exercise_type=_CARDIO,
        prerequisites=("walk-jog-15",),
    ),
    SkillNode(
        id="double-unders-100",
        name="Double-Unders (100)",
        level=4,
        sets=3,
        reps=100,
        description="Unbroken sets of 100 double-unders, jump rope skill.",
        category=_CORE,
        exercise_type=_CARDIO,
        prerequisites=("double-unders-practice",),
    ),
    # ── Hills ──
    SkillNode(
        id="hill-sprints",
        name="Hill Sprints",
        level=4,
        sets=6,
        reps=1,
        distance=0.1,
        zone=5,
        description="6 x uphill sprints (100m), max effort, walk recovery.",
        category=_LEGS,
        exercise_type=_CARDIO,
        prerequisites=("sprint-200m",),
    ),
    # ── Fartlek ──
    SkillNode(
        id="fartlek-run",
        name="Fartlek Run (30min)",
        level=4,
        sets=1,
        reps=1,
        duration=1800,
        zone=3,
        description="Speed play: mix of fast and slow intervals within steady run.",
        category=_LEGS,
        exercise_type=_CARDIO,
        prerequisites=("run-5k",),
    ),
    # ── Endurance milestones ──
    SkillNode(
        id="half-marathon",
        name="Half Marathon (21.1km)",
        level=6,
        sets=1,
        reps=1,
        distance=21.1,
        zone=2,
        description="Half marathon distance run at conversational pace.",
        category=_LEGS,
        exercise_type=_CARDIO,
        prerequisites=("run-10k",),
    ),
)
