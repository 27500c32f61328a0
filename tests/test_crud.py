# tests/test_crud.py

import pytest
from core.errors import DuplicateUser, StorageError
from crud import mensajes, reservas, users
from models.mensaje import Mensaje
from models.reserva import Reserva


def test_register_stores_only_the_hash(db, ctx):
    user_id = users.register(db, ctx.hasher, "ana", "ana@x.com", "pw123")
    user = users.find_by_username(db, "ana")
    assert user.id == user_id
    assert user.email == "ana@x.com"
    assert user.password != "pw123"
    assert ctx.hasher.verify("pw123", user.password)


def test_duplicate_username_is_rejected(db, ctx):
    users.register(db, ctx.hasher, "ana", "ana@x.com", "pw123")
    with pytest.raises(DuplicateUser):
        users.register(db, ctx.hasher, "ana", "other@x.com", "pw456")


def test_duplicate_email_is_rejected(db, ctx):
    users.register(db, ctx.hasher, "ana", "ana@x.com", "pw123")
    with pytest.raises(DuplicateUser):
        users.register(db, ctx.hasher, "bob", "ana@x.com", "pw456")


def test_email_is_optional(db, ctx):
    users.register(db, ctx.hasher, "ana", None, "pw123")
    users.register(db, ctx.hasher, "bob", "", "pw123")
    assert users.find_by_username(db, "bob").email is None


def test_find_by_username(db, ctx):
    users.register(db, ctx.hasher, "  ana ", None, "pw123")
    assert users.find_by_username(db, "ana") is not None
    assert users.find_by_username(db, " ana") is not None
    assert users.find_by_username(db, "Ana") is None
    assert users.find_by_username(db, "") is None


def test_list_is_scoped_and_most_recent_first(db):
    first = reservas.create(db, 1, "Lima", "100", "2025-01-01")
    reservas.create(db, 2, "Cusco", "200", "2025-02-01")
    second = reservas.create(db, 1, "Puno", "50", "2024-12-01")

    rows = reservas.list_by_owner(db, 1)
    assert [r.id for r in rows] == [second, first]
    assert all(r.user_id == 1 for r in rows)
    assert reservas.list_by_owner(db, 3) == []


def test_free_text_price_and_date_are_kept(db):
    reservas.create(db, 1, "Lima", "cien soles", "pronto")
    row = reservas.list_by_owner(db, 1)[0]
    assert (row.destino, row.precio, row.fecha_viaje) == ("Lima", "cien soles", "pronto")


def test_delete_requires_matching_owner(db):
    rid = reservas.create(db, 1, "Lima", "100", "2025-01-01")

    assert reservas.delete_owned(db, rid, 2) is False
    assert db.get(Reserva, rid) is not None

    assert reservas.delete_owned(db, rid, 1) is True
    assert reservas.list_by_owner(db, 1) == []


def test_delete_missing_id_is_noop(db):
    assert reservas.delete_owned(db, 999, 1) is False


def test_contact_message_is_stored(db):
    mensajes.submit(db, "Ana", "ana@x.com", "Hola")
    row = db.query(Mensaje).one()
    assert (row.nombre, row.email, row.mensaje) == ("Ana", "ana@x.com", "Hola")
    assert row.created_at is not None


def test_contact_message_without_body_fails_in_storage(db):
    with pytest.raises(StorageError):
        mensajes.submit(db, "Ana", "ana@x.com", None)
    assert db.query(Mensaje).count() == 0
