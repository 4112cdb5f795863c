"""
Unit tests for tax.py module.

Tests flat capital gains rates and the after-tax identity.
"""

import pytest

from invcalc.config import TaxJurisdiction
from invcalc.exceptions import ValidationError
from invcalc.tax import TAX_RATES, apply_tax, tax_rate


class TestTaxRate:

    def test_rates(self):
        assert tax_rate(TaxJurisdiction.NONE) == 0.0
        assert tax_rate("us") == 0.15
        assert tax_rate("germany") == 0.25

    def test_unknown(self):
        with pytest.raises(ValidationError):
            tax_rate("france")

    def test_table_read_only(self):
        with pytest.raises(TypeError):
            TAX_RATES[TaxJurisdiction.US] = 0.5


class TestApplyTax:

    def test_us_example(self):
        """Gain 486 at 15% -> 72.90 tax."""
        summary = apply_tax(12486.0, 12000.0, "us")

        assert summary.gain_before_tax == pytest.approx(486.0)
        assert summary.tax_paid == pytest.approx(72.9)
        assert summary.total_after_tax == pytest.approx(12413.1)

    def test_germany(self):
        summary = apply_tax(12486.0, 12000.0, "germany")
        assert summary.tax_paid == pytest.approx(121.5)

    def test_none(self):
        summary = apply_tax(12486.0, 12000.0, "none")
        assert summary.tax_paid == 0.0
        assert summary.total_after_tax == 12486.0

    def test_loss_is_refunded(self):
        """No floor at zero: a loss yields negative tax."""
        summary = apply_tax(9000.0, 10000.0, "germany")

        assert summary.tax_paid == pytest.approx(-250.0)
        assert summary.total_after_tax == pytest.approx(9250.0)

    @pytest.mark.parametrize("jurisdiction", list(TaxJurisdiction))
    def test_after_tax_identity(self, jurisdiction):
        total, invested = 15321.77, 14000.0
        summary = apply_tax(total, invested, jurisdiction)
        assert summary.total_after_tax == total - summary.tax_paid
