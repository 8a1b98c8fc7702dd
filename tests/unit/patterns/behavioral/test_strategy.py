"""Tests for the strategy pattern."""

import pytest

from pattern_catalog.domain.patterns.behavioral.strategy import (
    BankTransferPayment,
    BubbleSort,
    CreditCardPayment,
    DiscountPricing,
    EmailValidation,
    FormValidator,
    MergeSort,
    PasswordValidation,
    PaymentProcessor,
    PayPalPayment,
    PhoneValidation,
    PremiumPricing,
    PriceCalculator,
    QuickSort,
    RegularPricing,
    Sorter,
)


class TestPaymentStrategies:
    """Test swapping payment strategies at runtime."""

    def test_processor_delegates_to_strategy(self, transcript):
        """Test each strategy formats its own message."""
        processor = PaymentProcessor(CreditCardPayment("1234567890123456", "12/25"))

        first = processor.process(100.0)
        processor.set_strategy(PayPalPayment("user@example.com"))
        second = processor.process(50.5)

        assert first == "Processing $100.00 via Credit Card ending in 3456"
        assert second == "Processing $50.50 via PayPal account: user@example.com"
        assert transcript.messages("PaymentProcessor") == [first, second]

    def test_bank_transfer_masks_account(self):
        """Test only the last four digits are shown."""
        message = BankTransferPayment("987654321", "021000021").process_payment(10)

        assert message.endswith("account ending in 4321")


class TestSortingStrategies:
    """Test interchangeable sorting algorithms."""

    @pytest.mark.parametrize("strategy", [BubbleSort(), QuickSort(), MergeSort()])
    def test_strategies_agree(self, strategy):
        """Test every algorithm produces the same order."""
        data = [64, 34, 25, 12, 22, 11, 90, 25]

        assert strategy.sort(data) == sorted(data)

    @pytest.mark.parametrize("strategy", [BubbleSort(), QuickSort(), MergeSort()])
    def test_input_is_not_modified(self, strategy):
        """Test sorting is pure."""
        data = [3, 1, 2]

        strategy.sort(data)

        assert data == [3, 1, 2]

    def test_sorter_reports_strategy(self, transcript):
        """Test the context narrates the active algorithm."""
        sorter = Sorter(QuickSort())

        assert sorter.sort([]) == []
        assert transcript.contains("Using Quick Sort to sort array")


class TestPricingStrategies:
    """Test pricing rules."""

    def test_prices(self):
        """Test regular, discount and premium pricing."""
        calculator = PriceCalculator(RegularPricing())
        assert calculator.calculate(100.0) == 100.0

        calculator.set_strategy(DiscountPricing(20))
        assert calculator.calculate(100.0) == pytest.approx(80.0)

        calculator.set_strategy(PremiumPricing(1.5))
        assert calculator.calculate(100.0) == pytest.approx(150.0)

    def test_total_applies_strategy_to_each_price(self):
        """Test totals use the current strategy."""
        calculator = PriceCalculator(DiscountPricing(10))

        assert calculator.total([10.0, 20.0]) == pytest.approx(27.0)

    def test_discount_name(self):
        """Test the strategy name includes the discount."""
        assert DiscountPricing(15).name == "Discount Pricing (15% off)"


class TestValidationStrategies:
    """Test input validation rules."""

    def test_email(self):
        """Test email format validation."""
        assert EmailValidation().validate("user@example.com").is_valid
        result = EmailValidation().validate("invalid-email")
        assert result.errors == ["Invalid email format"]

    def test_password_collects_every_failure(self):
        """Test all password rules are reported."""
        result = PasswordValidation().validate("abc")

        assert not result.is_valid
        assert len(result.errors) == 3

    def test_strong_password(self):
        """Test a password satisfying all rules."""
        assert PasswordValidation().validate("StrongPass123").is_valid

    def test_phone_ignores_formatting(self):
        """Test punctuation is stripped before counting digits."""
        assert PhoneValidation().validate("(555) 123-4567").is_valid
        assert not PhoneValidation().validate("123").is_valid

    def test_form_validator_narrates_result(self, transcript):
        """Test the validator reports pass and fail."""
        validator = FormValidator(PhoneValidation())

        validator.validate("123")

        assert transcript.contains("Phone validation failed: '123' - Phone number must be 10 digits")
