"""Tests for the S3 permutation table."""
import pytest

from lagrange.errors import InvalidArgumentError
from lagrange.symmetric import (
    IDENTITY,
    S3_ELEMENTS,
    apply_permutation,
    compose,
    element_order,
    find_element,
    get_element,
    inverse,
    list_symmetric_group_s3,
    validate_permutation,
)


class TestTable:
    def test_six_distinct_elements(self):
        els = list_symmetric_group_s3()
        assert len(els) == 6
        assert len({el.perm for el in els}) == 6
        assert [el.id for el in els] == ["e", "12", "13", "23", "123", "132"]

    def test_identity_first(self):
        assert S3_ELEMENTS[0].perm == IDENTITY
        assert S3_ELEMENTS[0].label == "e"

    def test_labels_are_cycle_notation(self):
        assert get_element("123").label == "(1 2 3)"
        assert get_element("13").latex == "(1\\,3)"

    def test_to_dict(self):
        assert get_element("23").to_dict() == {
            "id": "23",
            "label": "(2 3)",
            "latex": "(2\\,3)",
            "perm": [0, 2, 1],
        }


class TestApply:
    def test_apply_is_bijection_on_values(self):
        values = ["v0", "v1", "v2"]
        for el in S3_ELEMENTS:
            out = apply_permutation(values, el.perm)
            assert sorted(out) == values

    def test_apply_substitutes_by_index(self):
        assert apply_permutation(["a", "b", "c"], (1, 2, 0)) == ["b", "c", "a"]
        assert apply_permutation([10, 20, 30], (2, 1, 0)) == [30, 20, 10]

    def test_compose_matches_sequential_application(self):
        values = ["x", "y", "z"]
        for f in S3_ELEMENTS:
            for s in S3_ELEMENTS:
                expected = apply_permutation(apply_permutation(values, f.perm), s.perm)
                assert apply_permutation(values, compose(f.perm, s.perm)) == expected

    def test_closure_and_inverse(self):
        perms = {el.perm for el in S3_ELEMENTS}
        for f in perms:
            assert compose(f, inverse(f)) == IDENTITY
            for s in perms:
                assert compose(f, s) in perms

    def test_element_orders(self):
        orders = {el.id: element_order(el.perm) for el in S3_ELEMENTS}
        assert orders == {"e": 1, "12": 2, "13": 2, "23": 2, "123": 3, "132": 3}


class TestLookup:
    def test_lookup_by_index(self):
        assert get_element(4).id == "123"

    @pytest.mark.parametrize("key", [-1, 6, "14", "", True])
    def test_invalid_lookup(self, key):
        with pytest.raises(InvalidArgumentError):
            get_element(key)

    def test_find_element(self):
        assert find_element([2, 0, 1]).id == "132"

    @pytest.mark.parametrize(
        "perm",
        [(0, 0, 1), (0, 1), (0, 1, 3), ("a", 1, 2), (0.9, 1.2, 2.7), (0.0, 1.0, 2.0), "012", (True, False, 2), None],
    )
    def test_validate_rejects_non_bijections(self, perm):
        with pytest.raises(InvalidArgumentError):
            validate_permutation(perm)

    def test_validate_accepts_list_and_returns_tuple(self):
        assert validate_permutation([1, 2, 0]) == (1, 2, 0)


class TestResolventRejectsNonIntegerPermutations:
    def test_float_permutation_is_not_truncated(self, cube_roots_of_unity):
        from lagrange.resolvent import evaluate_resolvent
        with pytest.raises(InvalidArgumentError):
            evaluate_resolvent(cube_roots_of_unity, (0.9, 1.2, 2.7))
