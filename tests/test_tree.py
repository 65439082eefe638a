from eightpuzzle.tree import TreeNode


def _chain(values):
    nodes = [TreeNode(values[0])]
    for value in values[1:]:
        child = TreeNode(value, father=nodes[-1])
        nodes[-1].right = child
        nodes.append(child)
    return nodes


def test_new_node_is_unlinked():
    node = TreeNode("562031874")
    assert node.distance == 0
    assert node.father is None
    assert node.children() == []


def test_root_depth_and_path():
    node = TreeNode("123804765")
    assert node.depth() == 0
    assert node.path_from_root() == ["123804765"]


def test_children_order_right_left_up_down():
    root = TreeNode("123804765")
    down = TreeNode("123864705", father=root)
    up = TreeNode("103824765", father=root)
    left = TreeNode("123084765", father=root)
    right = TreeNode("123840765", father=root)
    root.down, root.up, root.left, root.right = down, up, left, right
    assert root.children() == [
        ("Right", right),
        ("Left", left),
        ("Up", up),
        ("Down", down),
    ]


def test_children_skips_missing():
    root = TreeNode("123804765")
    up = TreeNode("103824765", father=root)
    root.up = up
    assert root.children() == [("Up", up)]


def test_path_from_root_follows_fathers():
    values = ["562031874", "562301874", "062531874"]
    nodes = _chain(values)
    assert nodes[-1].path_from_root() == values


def test_depth_matches_path_length():
    values = ["123456780", "123456708", "123406758", "123046758"]
    nodes = _chain(values)
    for node in nodes:
        assert node.depth() == len(node.path_from_root()) - 1


def test_nodes_compare_by_identity():
    first = TreeNode("123804765")
    second = TreeNode("123804765")
    assert first == first
    assert not (first == second)