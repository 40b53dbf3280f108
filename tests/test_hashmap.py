from algokit.hashmap import ChainedHashMap


def test_put_then_get():
    table = ChainedHashMap()
    table.put(1, 1)
    table.put(2, 2)
    assert table.get(1) == 1
    assert table.get(2) == 2


def test_missing_key_gives_minus_one():
    table = ChainedHashMap()
    table.put(1, 1)
    assert table.get(3) == -1


def test_put_replaces_value():
    table = ChainedHashMap()
    table.put(2, 1)
    table.put(2, 5)
    assert table.get(2) == 5
    assert len(table) == 1


def test_remove():
    table = ChainedHashMap()
    table.put(2, 1)
    table.remove(2)
    assert table.get(2) == -1
    assert 2 not in table
    assert len(table) == 0


def test_remove_missing_key_changes_nothing():
    table = ChainedHashMap()
    table.put(4, 40)
    table.remove(5)
    assert table.get(4) == 40
    assert len(table) == 1


def test_colliding_keys_are_kept_apart():
    table = ChainedHashMap()
    base = 17
    keys = [base + i * ChainedHashMap.SIZE for i in range(4)]
    for key in keys:
        table.put(key, key * 2)
    assert [table.get(key) for key in keys] == [key * 2 for key in keys]
    table.remove(keys[1])
    assert table.get(keys[1]) == -1
    assert [table.get(key) for key in (keys[0], keys[2], keys[3])] == [
        keys[0] * 2,
        keys[2] * 2,
        keys[3] * 2,
    ]


def test_many_keys_round_trip():
    table = ChainedHashMap()
    for key in range(0, 100000, 7):
        table.put(key, key + 1)
    assert all(table.get(key) == key + 1 for key in range(0, 100000, 7))
    assert len(table) == len(range(0, 100000, 7))
    assert 7 in table
    assert 8 not in table