import threading

from models.property_models import Property
from utils.data_store import PropertyStore, ReadWriteLock


def make_property(property_id: int, tag: str = "a") -> Property:
    return Property(
        id=property_id,
        prefecture=f"{tag}-pref",
        city="city",
        town="town",
        chome="1",
        banchi="2",
        go="3",
        building="",
        price="100",
        nearest_station="station",
        property_type="house",
        land_area="50",
    )


def test_empty_store():
    store = PropertyStore()
    assert store.list_all() == ()
    assert store.get(1) is None
    assert len(store) == 0


def test_replace_all_then_list_and_get():
    store = PropertyStore()
    store.replace_all([make_property(i) for i in (3, 1, 2)])

    assert [p.id for p in store.list_all()] == [1, 2, 3]
    for i in (1, 2, 3):
        assert store.get(i).id == i
    assert store.get(0) is None
    assert store.get(4) is None


def test_get_miss_does_not_create_entry():
    store = PropertyStore()
    store.replace_all([make_property(1)])

    assert store.get(99) is None
    assert len(store) == 1


def test_second_upload_supersedes_first():
    store = PropertyStore()
    store.replace_all([make_property(i, "old") for i in range(1, 6)])
    store.replace_all([make_property(i, "new") for i in range(1, 3)])

    props = store.list_all()
    assert [p.id for p in props] == [1, 2]
    assert all(p.prefecture == "new-pref" for p in props)
    assert store.get(5) is None


def test_list_all_is_a_snapshot():
    store = PropertyStore()
    store.replace_all([make_property(1)])
    snapshot = store.list_all()

    store.replace_all([])
    assert [p.id for p in snapshot] == [1]
    assert store.list_all() == ()


def test_readers_never_see_a_mixed_upload():
    store = PropertyStore()
    uploads = [[make_property(i, tag) for i in range(1, 51)] for tag in ("a", "b")]
    store.replace_all(uploads[0])

    writers_done = threading.Event()
    errors = []

    def writer():
        for n in range(300):
            store.replace_all(uploads[n % 2])

    def reader():
        while not writers_done.is_set():
            tags = {p.prefecture for p in store.list_all()}
            if len(tags) != 1 or len(store.list_all()) != 50:
                errors.append(tags)

    writers = [threading.Thread(target=writer) for _ in range(2)]
    readers = [threading.Thread(target=reader) for _ in range(4)]
    for t in writers + readers:
        t.start()
    for t in writers:
        t.join()
    writers_done.set()
    for t in readers:
        t.join()

    assert errors == []


def test_write_lock_excludes_readers():
    lock = ReadWriteLock()
    entered = threading.Event()
    events = []

    def reader():
        with lock.read():
            events.append("read")
        entered.set()

    with lock.write():
        t = threading.Thread(target=reader)
        t.start()
        assert not entered.wait(0.1)
        events.append("write-done")

    t.join()
    assert events == ["write-done", "read"]


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    both_inside = threading.Barrier(2, timeout=2)

    def reader():
        with lock.read():
            both_inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not both_inside.broken
