"""
Common test fixtures shared by all modules.

Provides leaf constants, known-good roots and tree factories.
"""

from merkle_core.merkle import MerkleTree


LEAF_AB = "0x" + "ab" * 32
LEAF_ABCD = "0x" + "ab" * 31 + "cd"
LEAF_ZERO = "0x" + "00" * 32

# Leaf i of the sequential tree is i * 0x1111...11
SEQUENTIAL_MULTIPLIER = int("1" * 64, 16)

# Known roots
DEPTH3_AB_MIDDLE = "0x699fc94ff1ec83f1abf531030e324003e7758298281645245f7c698425a5e0e7"
DEPTH3_AB_ROOT = "0xa2422433244a1da24b3c4db126dcc593666f98365403e6aaf07fae011c824f09"
DEPTH2_SET_ROOT = "0x1e69d9c46ca7065c20d7a9bb407f574fd92fd862f69cb96e1146926c8f198e81"
DEPTH20_AB_ROOT = "0xd4490f4d374ca8a44685fe9471c5b8dbe58cdffd13d30d9aba15dd29efb92930"
DEPTH10_RESET_ROOT = "0xc795494aa662dd012c5de6c52f0ab28ee9135fe846074d62bb7807cf98742fd9"
SEQUENTIAL_ROOT = "0x57054e43fa56333fd51343b09460d48b9204999c376624f52480c5593b91eff4"


def sequential_leaf(i: int) -> str:
    """Hex value of leaf i in the sequential tree."""
    return f"0x{i * SEQUENTIAL_MULTIPLIER:064x}"


def make_sequential_tree(depth: int = 5) -> MerkleTree:
    """Tree built from zero leaves, then leaf i set to sequential_leaf(i)."""
    tree = MerkleTree(depth, LEAF_ZERO)
    for i in range(tree.num_leaves):
        tree.set(i, sequential_leaf(i))
    return tree
