"""Unit tests for the in-memory credential store."""

from __future__ import annotations

import threading

import pytest

from tokenauth.infra.memory.credential_store import InMemoryCredentialStore
from tokenauth.services._shared.errors import AlreadyExistsError

from tests.factories.user import register_user


def test_register_assigns_sequential_ids(store) -> None:
    first = register_user(store)
    second = register_user(store)

    assert (first.id, second.id) == (1, 2)
    assert store.count() == 2


def test_register_returns_public_view_without_secrets(store) -> None:
    public = register_user(store, username="alice", email="alice@example.com")

    assert public.username == "alice"
    assert public.email == "alice@example.com"
    assert not hasattr(public, "password_digest")
    assert not hasattr(public, "refresh_tokens")


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"username": "alice", "email": "other@example.com"}, "username"),
        ({"username": "other", "email": "alice@example.com"}, "email"),
    ],
)
def test_register_rejects_duplicates(store, alice, overrides, field) -> None:
    with pytest.raises(AlreadyExistsError) as exc_info:
        register_user(store, **overrides)

    assert exc_info.value.field == field
    assert store.count() == 1


def test_password_is_stored_as_digest(store, alice) -> None:
    record = store.find_by_id(alice.id)

    assert record is not None
    assert record.password_digest != "secret123"
    assert store.verify_password("secret123", record.password_digest) is True
    assert store.verify_password("wrong-password", record.password_digest) is False


def test_verify_password_tolerates_malformed_digest(store) -> None:
    assert store.verify_password("secret123", "not-a-digest") is False
    assert store.verify_password("secret123", "") is False


@pytest.mark.parametrize("credential", ["alice", "alice@example.com"])
def test_find_by_credential_matches_username_or_email(store, alice, credential) -> None:
    found = store.find_by_credential(credential)

    assert found is not None
    assert found.id == alice.id


@pytest.mark.parametrize("credential", ["Alice", "ALICE@example.com", "bob", ""])
def test_find_by_credential_is_exact(store, alice, credential) -> None:
    assert store.find_by_credential(credential) is None


@pytest.mark.parametrize("user_id", [1, "1"])
def test_find_by_id_accepts_int_or_decimal_string(store, alice, user_id) -> None:
    found = store.find_by_id(user_id)

    assert found is not None
    assert found.username == "alice"


@pytest.mark.parametrize(
    "user_id", [999, "999", "abc", "-1", "", "²", "①", "١", True, None, 1.0]
)
def test_find_by_id_unknown_or_malformed(store, alice, user_id) -> None:
    assert store.find_by_id(user_id) is None


def test_refresh_tokens_are_bounded_fifo(store, alice) -> None:
    for i in range(7):
        store.add_refresh_token(alice.id, f"rt-{i}")

    record = store.find_by_id(alice.id)
    assert record is not None
    assert record.refresh_tokens == ["rt-2", "rt-3", "rt-4", "rt-5", "rt-6"]
    assert store.has_refresh_token(alice.id, "rt-0") is False
    assert store.has_refresh_token(alice.id, "rt-6") is True


def test_custom_retention_bound(hasher) -> None:
    store = InMemoryCredentialStore(hasher=hasher, max_refresh_tokens=2)
    user = register_user(store)
    for token in ("a", "b", "c"):
        store.add_refresh_token(user.id, token)

    assert [store.has_refresh_token(user.id, t) for t in ("a", "b", "c")] == [False, True, True]


def test_retention_bound_must_be_positive(hasher) -> None:
    with pytest.raises(ValueError):
        InMemoryCredentialStore(hasher=hasher, max_refresh_tokens=0)


def test_token_operations_on_unknown_user_are_noops(store) -> None:
    store.add_refresh_token(42, "rt")
    store.remove_refresh_token(42, "rt")

    assert store.has_refresh_token(42, "rt") is False


def test_remove_refresh_token_is_idempotent(store, alice) -> None:
    store.add_refresh_token(alice.id, "rt-1")
    store.add_refresh_token(alice.id, "rt-2")

    store.remove_refresh_token(str(alice.id), "rt-1")
    store.remove_refresh_token(alice.id, "rt-1")

    assert store.has_refresh_token(alice.id, "rt-1") is False
    assert store.has_refresh_token(alice.id, "rt-2") is True


def test_returned_records_are_detached(store, alice) -> None:
    record = store.find_by_id(alice.id)
    assert record is not None
    record.refresh_tokens.append("smuggled")

    assert store.has_refresh_token(alice.id, "smuggled") is False


def test_list_all_in_registration_order(store) -> None:
    names = ["carol", "alice", "bob"]
    for name in names:
        register_user(store, username=name, email=f"{name}@example.com")

    assert [u.username for u in store.list_all()] == names


def test_concurrent_registration_of_same_username_admits_one(store) -> None:
    errors: list[Exception] = []
    barrier = threading.Barrier(8)

    def worker(i: int) -> None:
        barrier.wait()
        try:
            store.register("racer", f"racer{i}@example.com", "secret123")
        except AlreadyExistsError as exc:
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.count() == 1
    assert len(errors) == 7


def test_concurrent_token_appends_respect_bound(store, alice) -> None:
    def worker(i: int) -> None:
        for j in range(20):
            store.add_refresh_token(alice.id, f"rt-{i}-{j}")

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    record = store.find_by_id(alice.id)
    assert record is not None
    assert len(record.refresh_tokens) == 5


@pytest.mark.parametrize("user_id", ["²", "①", "١"])
def test_token_operations_with_non_ascii_digits_are_noops(store, alice, user_id) -> None:
    store.add_refresh_token(user_id, "rt")
    store.remove_refresh_token(user_id, "rt")

    assert store.has_refresh_token(user_id, "rt") is False
    assert store.find_by_id(alice.id).refresh_tokens == []
