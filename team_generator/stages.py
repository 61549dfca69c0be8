from __future__ import annotations

from typing import Optional

from team_generator.models import EvolutionNode


def _find_depth(node: EvolutionNode, target: str, depth: int) -> Optional[int]:
    if node.name == target:
        return depth
    for child in node.evolves_to:
        found = _find_depth(child, target, depth + 1)
        if found is not None:
            return found
    return None


def compute_stage(tree: EvolutionNode, species_name: str) -> int:
    """
    Return the 1-based depth of ``species_name`` in an evolution tree.

    Pre-order walk that stops at the first match. A name missing from the tree
    falls back to stage 1 rather than raising.
    """
    return _find_depth(tree, species_name, 1) or 1
