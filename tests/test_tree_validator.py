from dailyarc.services.tree_builder import build_skill_tree
from dailyarc.services.tree_validator import validate_skill_tree


def test_bodyweight_catalog_is_valid():
    result = validate_skill_tree(build_skill_tree("bodyweight"))
    assert result.valid
    assert result.errors == []


def test_iron_catalog_reports_dangling_cross_modality_prerequisite():
    result = validate_skill_tree(build_skill_tree("iron"))
    assert not result.valid
    assert 'bench-press: prerequisite "standard-pu" does not exist in tree' in result.errors


def test_level_out_of_range(make_node):
    result = validate_skill_tree([make_node("a", level=0), make_node("b", level=11)])
    assert "a: level 0 must be 1-10" in result.errors
    assert "b: level 11 must be 1-10" in result.errors


def test_level_one_with_prerequisites_is_reported(make_node):
    tree = [make_node("a"), make_node("b", level=1, prerequisites=["a"])]
    result = validate_skill_tree(tree)
    assert result.errors == ["b: level 1 node should not have prerequisites"]


def test_prerequisite_above_dependent_level(make_node):
    tree = [make_node("a"), make_node("hard", level=5, prerequisites=["a"]), make_node("easy", level=2, prerequisites=["hard"])]
    result = validate_skill_tree(tree)
    assert result.errors == ['easy: prerequisite "hard" is level 5, above dependent level 2']


def test_duplicate_ids(make_node):
    result = validate_skill_tree([make_node("a"), make_node("a")])
    assert result.errors == ["a: id appears 2 times in tree"]


def test_cycle_is_detected_without_recursing_forever(make_node):
    tree = [
        make_node("root"),
        make_node("a", level=2, prerequisites=["root", "c"]),
        make_node("b", level=2, prerequisites=["a"]),
        make_node("c", level=2, prerequisites=["b"]),
    ]
    result = validate_skill_tree(tree)
    cycles = [e for e in result.errors if "cycle" in e]
    assert len(cycles) == 1
    assert "a -> c -> b -> a" in cycles[0]


def test_self_loop(make_node):
    result = validate_skill_tree([make_node("a", level=2, prerequisites=["a"])])
    assert any("cycle a -> a" in e for e in result.errors)


def test_missing_cross_prerequisite_exercise(make_node):
    from dailyarc.core.enums import CrossMetric
    from dailyarc.schemas.skill import CrossPrerequisite

    node = make_node(
        "shrimp",
        level=4,
        cross_prerequisites=(CrossPrerequisite(exercise_id="squat", metric=CrossMetric.ONE_RM_BW_RATIO, threshold=1.5),),
    )
    result = validate_skill_tree([node])
    assert result.errors == ['shrimp: cross-prerequisite exercise "squat" does not exist in tree']


def test_validator_never_raises_on_empty_tree():
    result = validate_skill_tree([])
    assert result.valid


def test_hybrid_tree_resolves_cross_catalog_ids_but_flags_level_inversions():
    errors = validate_skill_tree(build_skill_tree("hybrid")).errors
    assert not any("does not exist" in e for e in errors)
    assert 'bench-press: prerequisite "standard-pu" is level 4, above dependent level 2' in errors
    assert not any("cycle" in e for e in errors)


def test_deep_prerequisite_chain_does_not_overflow(make_node):
    tree = [make_node("n0")]
    tree += [make_node(f"n{i}", level=2, prerequisites=[f"n{i - 1}"]) for i in range(1, 3000)]
    result = validate_skill_tree(tree)
    assert result.valid, result.errors


def test_cycle_closing_a_deep_chain_is_reported(make_node):
    tree = [make_node("n0", level=2, prerequisites=["n2999"])]
    tree += [make_node(f"n{i}", level=2, prerequisites=[f"n{i - 1}"]) for i in range(1, 3000)]
    cycles = [e for e in validate_skill_tree(tree).errors if "cycle" in e]
    assert len(cycles) == 1
    assert cycles[0].count(" -> ") == 3000
