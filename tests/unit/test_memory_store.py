import logging

from studio.db import schemas
from studio.storage import MemoryStore


def test_memory_store_accepts_duplicate_usernames():
    store = MemoryStore()
    first = store.create_user(schemas.UserCreate(username="dup", password="a"))
    second = store.create_user(schemas.UserCreate(username="dup", password="b"))
    assert first.id == 1 and second.id == 2
    # lookup returns the first match
    assert store.get_user_by_username("dup") == first


def test_memory_store_counters_do_not_reuse_deleted_ids():
    store = MemoryStore()
    item = schemas.PortfolioItemCreate(title="T", description="D", image="/img/a.jpg", category="team")
    a = store.create_portfolio_item(item)
    store.delete_portfolio_item(a.id)
    b = store.create_portfolio_item(item)
    assert b.id == a.id + 1


def test_memory_store_instances_are_isolated():
    one, two = MemoryStore(), MemoryStore()
    one.create_contact(schemas.ContactCreate(name="n", email="n@x.io", subject="s", message="m"))
    assert len(one.get_contacts()) == 1
    assert two.get_contacts() == []


def test_memory_store_logs_mutations_without_payload(caplog):
    caplog.set_level(logging.INFO, logger="studio.storage.memory")
    store = MemoryStore()
    store.create_contact(schemas.ContactCreate(name="n", email="n@x.io", subject="s", message="private text"))
    messages = [r.getMessage() for r in caplog.records if r.name == "studio.storage.memory"]
    assert messages == ["contact_created id=1"]
    assert not any("private text" in m for m in messages)


def test_memory_store_close_is_noop():
    store = MemoryStore()
    store.close()
    assert store.get_bookings() == []
