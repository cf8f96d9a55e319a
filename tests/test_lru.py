from shulzcache.lru import LinkedListLRU


def test_hit_on_missing_key_is_false():
    lru = LinkedListLRU()
    assert lru.hit(5) is False
    assert len(lru) == 0


def test_hit_or_add_then_hit():
    lru = LinkedListLRU()
    lru.hit_or_add(5)
    assert lru.hit(5) is True
    assert len(lru) == 1


def test_hit_or_add_existing_does_not_duplicate():
    lru = LinkedListLRU()
    lru.hit_or_add(1)
    lru.hit_or_add(1)
    assert len(lru) == 1


def test_size_to_within_limit_returns_empty():
    lru = LinkedListLRU()
    for key in range(3):
        lru.hit_or_add(key)
    assert lru.size_to(3) == []
    assert len(lru) == 3


def test_size_to_evicts_oldest_first():
    lru = LinkedListLRU()
    for key in range(5):
        lru.hit_or_add(key)
    assert lru.size_to(2) == [0, 1, 2]
    assert len(lru) == 2
    assert lru.hit(3) and lru.hit(4)
    assert not lru.hit(0)


def test_hit_refreshes_recency():
    lru = LinkedListLRU()
    for key in range(3):
        lru.hit_or_add(key)
    lru.hit(0)
    assert lru.size_to(1) == [1, 2]
    assert lru.hit(0)


def test_size_to_zero_empties():
    lru = LinkedListLRU()
    for key in range(4):
        lru.hit_or_add(key)
    assert lru.size_to(0) == [0, 1, 2, 3]
    assert len(lru) == 0