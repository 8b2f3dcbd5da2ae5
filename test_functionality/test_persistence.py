"""
Test mock persistence: history store, key/value storage, ids
"""
import json

from domain.entities import MealHistoryItem
from domain.models import NutritionalInfo, User
from infrastructure.identifiers import SystemClock, TimestampIdGenerator
from infrastructure.persistence.history_repo import InMemoryHistoryRepository
from infrastructure.persistence.local_storage import InMemoryKeyValueStore, JsonFileKeyValueStore
from infrastructure.persistence.user_repo import KeyValueUserDirectory


def meal(item_id: str, ts: int) -> MealHistoryItem:
    return MealHistoryItem(item_id, ts, NutritionalInfo(summary=item_id), "data:image/jpeg;base64,")


# --- history ---

async def test_history_prepends_and_never_dedupes():
    repo = InMemoryHistoryRepository()
    await repo.append_meal(meal("a", 1))
    await repo.append_meal(meal("b", 2))
    await repo.append_meal(meal("b", 2))

    history = await repo.get()

    assert [m.id for m in history.meals] == ["b", "b", "a"]


async def test_history_get_is_a_deep_copy():
    repo = InMemoryHistoryRepository()
    await repo.append_meal(meal("a", 1))

    copy = await repo.get()
    copy.meals[0].nutritional_info.food_items.append("stolen")
    copy.meals.append(meal("x", 9))

    again = await repo.get()
    assert [m.id for m in again.meals] == ["a"]
    assert again.meals[0].nutritional_info.food_items == []


# --- ids ---

def test_ids_are_prefix_and_timestamp():
    ids = TimestampIdGenerator()

    assert ids.new_id("meal", 1000) == "meal-1000"
    assert ids.new_id("plan", 1000) == "plan-1000"
    assert ids.new_id("meal", 1001) == "meal-1001"


def test_same_millisecond_ids_get_a_counter():
    ids = TimestampIdGenerator()

    generated = [ids.new_id("meal", 1000) for _ in range(3)]

    assert generated == ["meal-1000", "meal-1000-1", "meal-1000-2"]


def test_clock_going_back_keeps_ids_unique():
    ids = TimestampIdGenerator()

    assert ids.new_id("plan", 2000) == "plan-2000"
    assert ids.new_id("plan", 1999) == "plan-2000-1"


def test_system_clock_is_epoch_milliseconds():
    now = SystemClock().now_ms()

    assert isinstance(now, int)
    assert now > 1_600_000_000_000


# --- key/value storage ---

def test_in_memory_store_get_set_remove():
    store = InMemoryKeyValueStore({"a": "1"})

    store.set("b", "2")
    store.remove("a")
    store.remove("missing")

    assert store.get("a") is None
    assert store.get("b") == "2"


def test_json_file_store_survives_reopen(tmp_path):
    path = tmp_path / "storage" / "local.json"
    JsonFileKeyValueStore(path).set("user", '{"name": "A", "email": "a@x.com"}')

    reopened = JsonFileKeyValueStore(path)

    assert reopened.get("user") == '{"name": "A", "email": "a@x.com"}'
    reopened.remove("user")
    assert json.loads(path.read_text(encoding="utf-8")) == {}


def test_json_file_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "local.json"
    path.write_text("not json at all", encoding="utf-8")
    store = JsonFileKeyValueStore(path)

    assert store.get("user") is None
    store.set("user", "x")
    assert store.get("user") == "x"


def test_user_directory_over_file_store(tmp_path):
    directory = KeyValueUserDirectory(JsonFileKeyValueStore(tmp_path / "local.json"))
    directory.add(User("Alice", "alice@x.com"))

    reopened = KeyValueUserDirectory(JsonFileKeyValueStore(tmp_path / "local.json"))

    assert reopened.find_by_email("alice@x.com") == User("Alice", "alice@x.com")
    assert reopened.find_by_email("bob@x.com") is None


def test_adding_over_corrupt_user_db_warns(store, caplog):
    store.set("user_db", "{corrupt")
    directory = KeyValueUserDirectory(store)

    directory.add(User("Alice", "alice@x.com"))

    assert "previously stored accounts are lost" in caplog.text
    assert directory.list_users() == [User("Alice", "alice@x.com")]


def test_adding_to_readable_user_db_does_not_warn(store, caplog):
    directory = KeyValueUserDirectory(store)

    directory.add(User("Alice", "alice@x.com"))
    directory.add(User("Bob", "bob@x.com"))

    assert "previously stored accounts are lost" not in caplog.text
    assert [u.email for u in directory.list_users()] == ["alice@x.com", "bob@x.com"]
