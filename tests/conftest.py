import pytest
from fastapi.testclient import TestClient

from dailyarc.core.enums import ExerciseCategory, ExerciseType
from dailyarc.main import app
from dailyarc.schemas.skill import SkillNode
from dailyarc.services.tree_builder import build_skill_tree


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def bodyweight_tree():
    return build_skill_tree("bodyweight")


@pytest.fixture
def hybrid_tree():
    return build_skill_tree("hybrid")


@pytest.fixture
def make_node():
    def _make(node_id, level=1, prerequisites=(), **kwargs):
        return SkillNode(
            id=node_id,
            name=node_id.title(),
            level=level,
            sets=3,
            reps=10,
            description="",
            category=kwargs.pop("category", ExerciseCategory.PUSH),
            exercise_type=kwargs.pop("exercise_type", ExerciseType.CALISTHENICS),
            prerequisites=tuple(prerequisites),
            **kwargs,
        )

    return _make
