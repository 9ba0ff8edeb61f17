import sqlite3

import pytest

from auralib.keyring.credential import Credential
from auralib.keyring.store import Store

NAME = "org.example.test"
PASSWORD = "password"


@pytest.fixture
def store(tmp_path):
    Store.destroy_named(NAME, tmp_path)
    with Store(NAME, PASSWORD, tmp_path) as opened:
        yield opened


def test_add_credentials(store):
    password = "password"
    store.add_credential(Credential("YT", "https://youtube.com", "theawesomeguy", password))
    store.add_credential(Credential("Google", "https://google.com", "user@example.com", "secret"))
    assert len(store.get_all_credentials()) == 2
    creds = store.get_credentials("YT")
    assert len(creds) == 1
    assert creds[0].name == "YT"
    assert creds[0].uri == "https://youtube.com"
    assert creds[0].username == "theawesomeguy"
    assert creds[0].password == "password"


def test_destroy_store(store):
    path = store.path
    assert path.exists()
    store.destroy()
    assert not path.exists()
    assert not Store.exists(NAME, path.parent)


def test_path_and_name(store, tmp_path):
    assert store.name == NAME
    assert store.path == tmp_path / f"{NAME}.ring"


def test_get_credential_by_id(store):
    cred = Credential("YT", "https://youtube.com", "theawesomeguy", "secret")
    store.add_credential(cred)
    found = store.get_credential(cred.id)
    assert found == cred
    assert found.username == "theawesomeguy"
    assert store.get_credential(cred.id + 1) is None


def test_order_is_insertion_order(store):
    first = Credential("B", "", "u1", "secret")
    second = Credential("A", "", "u2", "secret")
    store.add_credential(first)
    store.add_credential(second)
    assert [c.id for c in store.get_all_credentials()] == [first.id, second.id]


def test_update_credential(store):
    cred = Credential("YT", "https://youtube.com", "theawesomeguy", "secret")
    store.add_credential(cred)
    cred.username = "other"
    cred.uri = ""
    store.update_credential(cred)
    found = store.get_credential(cred.id)
    assert found.username == "other"
    assert found.uri == ""


def test_delete_credential(store):
    cred = Credential("YT", "", "theawesomeguy", "secret")
    store.add_credential(cred)
    store.delete_credential(cred.id)
    assert store.get_all_credentials() == []


def test_duplicate_id_rejected(store):
    cred = Credential("YT", "", "theawesomeguy", "secret", id=42)
    store.add_credential(cred)
    with pytest.raises(sqlite3.IntegrityError):
        store.add_credential(Credential("Other", "", "x", "secret", id=42))


def test_reopen_keeps_data(tmp_path):
    cred = Credential("YT", "https://youtube.com", "theawesomeguy", "secret")
    with Store(NAME, PASSWORD, tmp_path) as first:
        first.add_credential(cred)
    with Store(NAME, PASSWORD, tmp_path) as second:
        assert second.get_all_credentials() == [cred]


def test_wrong_password_rejected(tmp_path):
    Store(NAME, PASSWORD, tmp_path).close()
    with pytest.raises(ValueError):
        Store(NAME, "secret", tmp_path)


def test_closed_store_raises(store):
    store.destroy()
    with pytest.raises(RuntimeError):
        store.get_all_credentials()


def test_destroy_named(tmp_path):
    Store(NAME, PASSWORD, tmp_path).close()
    assert Store.exists(NAME, tmp_path)
    Store.destroy_named(NAME, tmp_path)
    assert not Store.exists(NAME, tmp_path)
    Store.destroy_named(NAME, tmp_path)
    assert not Store.exists(NAME, tmp_path)