from pathlib import Path

from buildmart.core.storage import LocalStorage


def test_set_and_get_item(storage: LocalStorage) -> None:
    storage.set_item("cart", "[]")
    assert storage.get_item("cart") == "[]"
    assert storage.get_item("missing") is None


def test_values_survive_a_new_instance(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "storage.json"
    LocalStorage(path).set_item("cart", '[{"id": "a"}]')

    assert path.exists()
    assert LocalStorage(path).get_item("cart") == '[{"id": "a"}]'


def test_set_item_keeps_other_keys(storage: LocalStorage) -> None:
    storage.set_item("a", "1")
    storage.set_item("b", "2")
    storage.set_item("a", "3")

    assert storage.get_item("a") == "3"
    assert storage.get_item("b") == "2"


def test_remove_item_and_clear(storage: LocalStorage) -> None:
    storage.set_item("a", "1")
    storage.set_item("b", "2")

    storage.remove_item("a")
    storage.remove_item("never-set")
    assert storage.get_item("a") is None
    assert storage.get_item("b") == "2"

    storage.clear()
    assert storage.get_item("b") is None


def test_last_write_wins_between_instances(tmp_path: Path) -> None:
    first = LocalStorage(tmp_path / "storage.json")
    second = LocalStorage(tmp_path / "storage.json")

    first.set_item("cart", "from-first")
    second.set_item("cart", "from-second")

    assert first.get_item("cart") == "from-second"


def test_corrupt_file_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")
    assert LocalStorage(path).get_item("cart") is None

    path.write_text('["a list"]', encoding="utf-8")
    assert LocalStorage(path).get_item("cart") is None
