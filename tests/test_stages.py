from team_generator.models import EvolutionNode
from team_generator.stages import compute_stage


def _linear() -> EvolutionNode:
    return EvolutionNode("a", [EvolutionNode("b", [EvolutionNode("c")])])


def test_linear_chain_depths() -> None:
    tree = _linear()
    assert compute_stage(tree, "a") == 1
    assert compute_stage(tree, "b") == 2
    assert compute_stage(tree, "c") == 3


def test_missing_name_falls_back_to_base_stage() -> None:
    assert compute_stage(_linear(), "zzz") == 1


def test_branching_tree_finds_later_sibling() -> None:
    tree = EvolutionNode(
        "eevee",
        [EvolutionNode("vaporeon"), EvolutionNode("jolteon"), EvolutionNode("sylveon")],
    )
    assert compute_stage(tree, "sylveon") == 2


def test_first_match_in_preorder_wins() -> None:
    # Pre-order: the match inside the first branch beats a shallower later sibling.
    tree = EvolutionNode(
        "root",
        [
            EvolutionNode("left", [EvolutionNode("dup")]),
            EvolutionNode("dup"),
        ],
    )
    assert compute_stage(tree, "dup") == 3
