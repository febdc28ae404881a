from decimal import Decimal

import pytest

from unmint.utils import to_base_units, from_base_units, sol_to_lamports, lamports_to_sol


class TestUtils:
    def test_to_base_units(self):
        assert to_base_units('1.5', 6) == 1500000
        assert to_base_units('0.0000009', 6) == 0
        assert to_base_units('0.00015', 5) == 15
        assert to_base_units('5', 5) == 500000
        assert to_base_units('5.123459', 5) == 512345
        assert to_base_units(5, 0) == 5
        assert to_base_units(Decimal('2.25'), 2) == 225

    def test_to_base_units_float(self):
        assert to_base_units(1.5, 6) == 1500000
        assert to_base_units(1.1, 9) == 1100000000
        assert to_base_units(0.3, 1) == 3

    def test_to_base_units_large(self):
        assert to_base_units('18446744073.709551615', 9) == 2 ** 64 - 1
        assert to_base_units('1E+3', 6) == 1000000000

    @pytest.mark.parametrize('amount', ['-1', -0.5, 'abc', 'NaN', 'Infinity'])
    def test_to_base_units_invalid(self, amount):
        with pytest.raises(ValueError):
            to_base_units(amount, 6)

    def test_to_base_units_invalid_decimals(self):
        with pytest.raises(ValueError):
            to_base_units('1', -1)

    def test_from_base_units(self):
        assert from_base_units(15, 5) == '0.00015'
        assert from_base_units(500000, 5) == '5'
        assert from_base_units(512345, 5) == '5.12345'
        assert from_base_units(0, 6) == '0'

    def test_sol(self):
        assert sol_to_lamports('0.001') == 1000000
        assert sol_to_lamports(1) == 10 ** 9
        assert lamports_to_sol(1500000000) == '1.5'
