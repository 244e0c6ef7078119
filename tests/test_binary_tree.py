import io

import pytest

from dskit.binary_tree import (
    TreeNode,
    build_preorder,
    format_inorder,
    format_postorder,
    format_preorder,
    inorder_traversal,
    invert_tree,
    is_balanced,
    is_complete,
    is_same_tree,
    is_subtree,
    is_symmetric,
    is_unival_tree,
    leaf_count,
    level_count,
    level_order,
    main,
    max_depth,
    postorder_traversal,
    preorder_traversal,
    tree_find,
    tree_height,
    tree_size,
)

SAMPLE = "ABD##E#H##CF##G##"
FULL_BST = "DBA##C##FE##G##"
CHAIN = "ABC####"
SYMMETRIC = "ABC##D##BD##C##"
TEXTS = [SAMPLE, FULL_BST, CHAIN, SYMMETRIC, "A##", "A#B#C##"]


def letters(text):
    return [c for c in text if c != "#"]


@pytest.mark.parametrize("text", TEXTS)
def test_format_preorder_round_trips_to_text(text):
    root = build_preorder(text)
    assert format_preorder(root).replace(" ", "").replace("N", "#") == text


@pytest.mark.parametrize("text", TEXTS)
def test_preorder_and_size_match_text(text):
    root = build_preorder(text)
    assert preorder_traversal(root) == letters(text)
    assert tree_size(root) == len(letters(text))


def test_empty_tree():
    root = build_preorder("#")
    assert root is None
    assert tree_size(root) == 0
    assert format_preorder(root) == "N "
    assert level_order(root) == []
    assert is_complete(root)
    assert is_balanced(root)
    assert is_symmetric(root)


@pytest.mark.parametrize("text", ["", "AB#", "A#"])
def test_truncated_text_raises(text):
    with pytest.raises(ValueError):
        build_preorder(text)


def test_sample_leaves_and_height():
    root = build_preorder(SAMPLE)
    assert leaf_count(root) == 4
    assert tree_height(root) == 4
    assert max_depth(root) == tree_height(root)


@pytest.mark.parametrize("text", TEXTS)
def test_level_counts_sum_to_size(text):
    root = build_preorder(text)
    height = tree_height(root)
    assert level_count(root, 1) == 1
    assert sum(level_count(root, k) for k in range(1, height + 1)) == tree_size(root)
    assert level_count(root, height + 1) == 0


def test_level_count_rejects_non_positive_level():
    with pytest.raises(ValueError):
        level_count(build_preorder(SAMPLE), 0)


def test_inorder_of_search_tree_is_sorted():
    root = build_preorder(FULL_BST)
    assert inorder_traversal(root) == sorted(letters(FULL_BST))


@pytest.mark.parametrize("text", TEXTS)
def test_inverted_preorder_is_reversed_postorder(text):
    post = postorder_traversal(build_preorder(text))
    inorder = inorder_traversal(build_preorder(text))
    inverted = invert_tree(build_preorder(text))
    assert preorder_traversal(inverted) == post[::-1]
    assert inorder_traversal(inverted) == inorder[::-1]


@pytest.mark.parametrize("text", TEXTS)
def test_formats_include_a_marker_for_every_absent_child(text):
    root = build_preorder(text)
    size = tree_size(root)
    for fmt in (format_preorder, format_inorder, format_postorder):
        tokens = fmt(root).split()
        assert len(tokens) == 2 * size + 1
        assert tokens.count("N") == size + 1
    assert [t for t in format_postorder(root).split() if t != "N"] == postorder_traversal(root)


def test_tree_find():
    root = build_preorder(SAMPLE)
    assert tree_find(root, "B") is root.left
    assert tree_find(root, "H").val == "H"
    assert tree_find(root, "Z") is None


def test_level_order_starts_at_root_and_visits_all():
    root = build_preorder(FULL_BST)
    order = level_order(root)
    assert order[0] == root.val
    assert set(order[1:3]) == {root.left.val, root.right.val}
    assert sorted(order) == sorted(letters(FULL_BST))


def test_is_complete():
    assert is_complete(build_preorder(FULL_BST))
    assert is_complete(build_preorder("AB###"))
    assert not is_complete(build_preorder("A#B##"))
    assert not is_complete(build_preorder(SAMPLE))


def test_is_same_tree():
    assert is_same_tree(build_preorder(SAMPLE), build_preorder(SAMPLE))
    assert not is_same_tree(build_preorder(SAMPLE), build_preorder(FULL_BST))
    assert not is_same_tree(build_preorder("A##"), None)
    assert is_same_tree(None, None)


def test_is_unival_tree():
    assert is_unival_tree(build_preorder("AA##A##"))
    assert not is_unival_tree(build_preorder("AA##B##"))
    assert is_unival_tree(None)


def test_double_inversion_restores_tree():
    root = build_preorder(SAMPLE)
    assert invert_tree(invert_tree(root)) is root
    assert is_same_tree(root, build_preorder(SAMPLE))


def test_is_subtree():
    root = build_preorder(SAMPLE)
    assert is_subtree(root, build_preorder("BD##E#H##"))
    assert is_subtree(root, build_preorder("H##"))
    assert not is_subtree(root, build_preorder("E##"))
    assert not is_subtree(root, build_preorder("BD##E##"))
    assert not is_subtree(None, build_preorder("A##"))


def test_is_balanced():
    assert is_balanced(build_preorder(FULL_BST))
    assert is_balanced(build_preorder(SAMPLE))
    assert not is_balanced(build_preorder(CHAIN))


def test_is_symmetric():
    root = build_preorder(SYMMETRIC)
    assert is_symmetric(root)
    assert is_same_tree(invert_tree(build_preorder(SYMMETRIC)), root)
    assert not is_symmetric(build_preorder(SAMPLE))


def test_tree_node_defaults():
    node = TreeNode("X")
    assert tree_size(node) == 1
    assert leaf_count(node) == 1


def test_main_with_argument(capsys):
    assert main([FULL_BST]) == 0
    assert capsys.readouterr().out.split() == sorted(letters(FULL_BST))


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE + "\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.split() == inorder_traversal(build_preorder(SAMPLE))
    assert out.endswith(" ")


def test_main_reports_bad_input(capsys):
    assert main(["AB"]) == 1
    assert "error" in capsys.readouterr().err