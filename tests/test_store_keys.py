import hashlib

from store import keys


def test_slug_consistency():
    v = "hotel-42"
    assert keys._slug(v) == keys._slug(v)
    assert keys._slug(v) == hashlib.sha256(v.encode()).hexdigest()[:32]


def test_keys_format():
    pid = "hotel-42"
    assert keys.reservations(pid) == f"rm:{keys._slug(pid)}:reservations"
    assert keys.adjustments(pid) == f"rm:{keys._slug(pid)}:adjustments"
    assert keys.reservations("a") != keys.reservations("b")
