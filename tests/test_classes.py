"""Tests for conjugacy classes and class equations."""
import pytest

from lagrange import dihedral
from lagrange.classes import conjugacy_classes, dihedral_class_equation, s3_class_equation


class TestClassEquation:
    def test_s3(self):
        eq = s3_class_equation()
        assert eq.order == 6
        assert eq.center == ["e"]
        assert sorted(eq.sizes) == [1, 2, 3]
        assert eq.equation == "6 = 1 + 2 + 3"

    def test_d4_has_nontrivial_center(self):
        eq = dihedral_class_equation(4)
        assert eq.center == ["e", "r^2"]
        assert eq.equation == "8 = 2 + 2 + 2 + 2"
        assert ["s", "sr^2"] in eq.classes
        assert ["sr^1", "sr^3"] in eq.classes

    def test_d3_matches_s3(self):
        assert dihedral_class_equation(3).equation == s3_class_equation().equation

    @pytest.mark.parametrize("n,center", [(5, 1), (6, 2), (7, 1), (8, 2)])
    def test_center_size_by_parity(self, n, center):
        eq = dihedral_class_equation(n)
        assert len(eq.center) == center
        assert sum(eq.sizes) == 2 * n

    def test_class_sizes_divide_order(self):
        els = dihedral.generate_dihedral_group(6)
        for cls in conjugacy_classes(els, dihedral.compose, dihedral.inverse):
            assert 12 % len(cls) == 0

    def test_report(self):
        rep = s3_class_equation().to_report()
        assert rep["group"] == "S3"
        assert rep["equation"] == "6 = 1 + 2 + 3"
        assert rep["classes"][0] == ["e"]
