from dataclasses import dataclass
from typing import Optional

from nullsafe import equal, hash_code
from nullsafe.domain.hashing import HASH_SEED, NONE_HASH, element_hash


@dataclass(eq=False)
class Point:
    x: int
    y: Optional[str]

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return equal(self.x, other.x) and equal(self.y, other.y)

    def __hash__(self):
        return hash_code(self.x, self.y)


def test_empty_is_constant():
    assert hash_code() == HASH_SEED
    assert hash_code() == hash_code()


def test_known_int_values():
    # ((1*31 + 1)*31 + 2)*31 + 3
    assert hash_code(1, 2, 3) == 30817
    assert hash_code(3, 2, 1) == 32737


def test_deterministic_for_equal_elements():
    assert hash_code("a", 2, (3, 4)) == hash_code("a", 2, (3, 4))
    assert hash_code("ab", None) == hash_code("".join(["a", "b"]), None)


def test_order_sensitive():
    assert hash_code(1, 2, 3) != hash_code(3, 2, 1)
    assert hash_code("a", "b") != hash_code("b", "a")


def test_none_contributes_zero():
    assert element_hash(None) == NONE_HASH == 0
    assert hash_code(None) == 31
    assert hash_code(None, None) == 31 * 31
    assert hash_code("a", None) != hash_code("a")


def test_single_value_is_not_its_own_hash():
    assert hash_code(7) == 31 + 7
    assert hash_code(7) != hash(7)


def test_wraps_to_signed_32_bit():
    for values in [(2**40,), (2**62, -(2**62), 12345), tuple(range(1000))]:
        h = hash_code(*values)
        assert -(2**31) <= h < 2**31


def test_single_list_argument_hashed_by_identity():
    a = [1, 2]
    b = [1, 2]
    assert hash_code(a) == hash_code(a)
    assert hash_code(a) != hash_code(b)
    assert hash_code(a) != hash_code(1, 2)
    assert hash_code(*a) == hash_code(*b) == hash_code(1, 2)


def test_unhashable_values_do_not_raise():
    d = {"k": [1]}
    s = {1, 2}
    t = (1, [2])
    assert hash_code(d, s, t) == hash_code(d, s, t)
    assert isinstance(hash_code(d), int)


def test_equal_objects_hash_equally():
    p = Point(1, "a")
    q = Point(1, "".join(["a"]))
    assert p == q
    assert hash(p) == hash(q)
    assert len({p, q, Point(1, None)}) == 2


def test_equal_unhashable_values_hash_differently():
    a = [1]
    b = [1]
    assert equal(a, b)
    assert hash_code(a) != hash_code(b)
