from graph_pathfinder.search.frontier import Frontier


def test_pops_in_key_order():
    q = Frontier()
    for vid, key in [(1, 5), (2, 1), (3, 3)]:
        q.push(vid, key)
    assert [q.pop()[0] for _ in range(3)] == [2, 3, 1]
    assert not q


def test_multi_part_keys_then_fifo():
    q = Frontier()
    q.push(10, 5, 3)
    q.push(11, 5, 1)
    q.push(12, 5, 1)
    q.push(13, 4, 4)
    assert len(q) == 4
    order = [q.pop() for _ in range(4)]
    assert [v for v, _ in order] == [13, 11, 12, 10]
    assert order[0][1] == (4, 4)


def test_vertex_ids_never_compared_on_ties():
    # identical keys: order comes from insertion sequence, not from the ids
    q = Frontier()
    q.push(9, 0)
    q.push(1, 0)
    assert q.pop()[0] == 9
    assert q.pop()[0] == 1
