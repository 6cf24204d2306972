"""Catalog lookups for rotors and reflectors."""

import pytest

from errors import ConfigurationError
from wheels import ALPHABET_SIZE, Alpha26, REFLECTORS, ROTORS, get_reflector, get_rotor


class TestCatalog:
    def test_sizes(self):
        assert ALPHABET_SIZE == 26
        assert len(ROTORS) >= 5
        assert len(REFLECTORS) >= 4

    @pytest.mark.parametrize("spec", ROTORS, ids=lambda s: s.name)
    def test_rotor_wirings_are_permutations(self, spec):
        assert sorted(spec.wiring) == list(Alpha26)
        assert spec.turnover in Alpha26

    @pytest.mark.parametrize("spec", REFLECTORS, ids=lambda s: s.name)
    def test_reflectors_are_fixed_point_free_involutions(self, spec):
        table = [Alpha26.index(c) for c in spec.wiring]
        for i, j in enumerate(table):
            assert i != j
            assert table[j] == i

    def test_turnover_offset(self):
        assert get_rotor(1).turnover_offset == Alpha26.index("R")
        assert get_rotor("V").turnover_offset == 0


class TestLookup:
    def test_one_based_index(self):
        assert get_rotor(1).name == "I"
        assert get_rotor(5).name == "V"
        assert get_reflector(1).name == "B"
        assert get_reflector(4).name == "C-THIN"

    def test_by_name_and_digit_string(self):
        assert get_rotor("ii") is get_rotor(2)
        assert get_rotor("3") is get_rotor("III")
        assert get_reflector("b-thin") is get_reflector(3)

    @pytest.mark.parametrize("bad", [0, 6, -1, "VI", "", 2.0, True, "\u00b2", "\u0663x"])
    def test_rotor_out_of_catalog(self, bad):
        with pytest.raises(ConfigurationError):
            get_rotor(bad)

    @pytest.mark.parametrize("bad", [0, 5, "A", "UKW"])
    def test_reflector_out_of_catalog(self, bad):
        with pytest.raises(ConfigurationError):
            get_reflector(bad)

    def test_configuration_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            get_rotor(99)
