"""Strategy - interchangeable algorithms behind a common interface."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Sequence, TypeVar

from pattern_catalog.infrastructure.narration import narrate, section

T = TypeVar("T")


# =============================================================================
# PAYMENT
# =============================================================================

class PaymentStrategy(ABC):

    @abstractmethod
    def process_payment(self, amount: float) -> str:
        pass


class CreditCardPayment(PaymentStrategy):

    def __init__(self, card_number: str, expiry_date: str):
        self.card_number = card_number
        self.expiry_date = expiry_date

    def process_payment(self, amount: float) -> str:
        return f"Processing ${amount:.2f} via Credit Card ending in {self.card_number[-4:]}"


class PayPalPayment(PaymentStrategy):

    def __init__(self, email: str):
        self.email = email

    def process_payment(self, amount: float) -> str:
        return f"Processing ${amount:.2f} via PayPal account: {self.email}"


class BankTransferPayment(PaymentStrategy):

    def __init__(self, account_number: str, routing_number: str):
        self.account_number = account_number
        self.routing_number = routing_number

    def process_payment(self, amount: float) -> str:
        return f"Processing ${amount:.2f} via Bank Transfer to account ending in {self.account_number[-4:]}"


class PaymentProcessor:

    def __init__(self, strategy: PaymentStrategy):
        self.strategy = strategy

    def set_strategy(self, strategy: PaymentStrategy) -> None:
        self.strategy = strategy

    def process(self, amount: float) -> str:
        return narrate("PaymentProcessor", self.strategy.process_payment(amount))


# =============================================================================
# SORTING
# =============================================================================

class SortingStrategy(ABC):
    """Pure sort; the input sequence is never modified."""

    name = "Sort"

    @abstractmethod
    def sort(self, items: Sequence[T]) -> List[T]:
        pass


class BubbleSort(SortingStrategy):
    name = "Bubble Sort"

    def sort(self, items: Sequence[T]) -> List[T]:
        result = list(items)
        n = len(result)
        for i in range(n):
            for j in range(n - i - 1):
                if result[j] > result[j + 1]:
                    result[j], result[j + 1] = result[j + 1], result[j]
        return result


class QuickSort(SortingStrategy):
    name = "Quick Sort"

    def sort(self, items: Sequence[T]) -> List[T]:
        if len(items) <= 1:
            return list(items)
        pivot = items[len(items) // 2]
        less = [x for x in items if x < pivot]
        equal = [x for x in items if x == pivot]
        greater = [x for x in items if x > pivot]
        return self.sort(less) + equal + self.sort(greater)


class MergeSort(SortingStrategy):
    name = "Merge Sort"

    def sort(self, items: Sequence[T]) -> List[T]:
        if len(items) <= 1:
            return list(items)
        middle = len(items) // 2
        return self._merge(self.sort(items[:middle]), self.sort(items[middle:]))

    @staticmethod
    def _merge(left: List[T], right: List[T]) -> List[T]:
        result = []
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i] < right[j]:
                result.append(left[i])
                i += 1
            else:
                result.append(right[j])
                j += 1
        result.extend(left[i:])
        result.extend(right[j:])
        return result


class Sorter:

    def __init__(self, strategy: SortingStrategy):
        self.strategy = strategy

    def set_strategy(self, strategy: SortingStrategy) -> None:
        self.strategy = strategy

    def sort(self, items: Sequence[T]) -> List[T]:
        narrate("Sorter", f"Using {self.strategy.name} to sort array")
        return self.strategy.sort(items)


# =============================================================================
# PRICING
# =============================================================================

class PricingStrategy(ABC):
    name = "Pricing"

    @abstractmethod
    def calculate_price(self, base_price: float) -> float:
        pass


class RegularPricing(PricingStrategy):
    name = "Regular Pricing"

    def calculate_price(self, base_price: float) -> float:
        return base_price


class DiscountPricing(PricingStrategy):

    def __init__(self, discount_percentage: float):
        self.discount_percentage = discount_percentage
        self.name = f"Discount Pricing ({int(discount_percentage)}% off)"

    def calculate_price(self, base_price: float) -> float:
        return base_price * (1.0 - self.discount_percentage / 100.0)


class PremiumPricing(PricingStrategy):

    def __init__(self, multiplier: float):
        self.multiplier = multiplier
        self.name = f"Premium Pricing ({multiplier}x)"

    def calculate_price(self, base_price: float) -> float:
        return base_price * self.multiplier


class PriceCalculator:

    def __init__(self, strategy: PricingStrategy):
        self.strategy = strategy

    def set_strategy(self, strategy: PricingStrategy) -> None:
        self.strategy = strategy

    def calculate(self, base_price: float) -> float:
        final_price = self.strategy.calculate_price(base_price)
        narrate("PriceCalculator", f"Using {self.strategy.name}: ${base_price:.2f} -> ${final_price:.2f}")
        return final_price

    def total(self, base_prices: Sequence[float]) -> float:
        return sum(self.strategy.calculate_price(price) for price in base_prices)


# =============================================================================
# VALIDATION
# =============================================================================

@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)


class ValidationStrategy(ABC):
    validation_type = "Input"

    @abstractmethod
    def validate(self, value: str) -> ValidationResult:
        pass


class EmailValidation(ValidationStrategy):
    validation_type = "Email"
    PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")

    def validate(self, value: str) -> ValidationResult:
        if self.PATTERN.fullmatch(value):
            return ValidationResult(True)
        return ValidationResult(False, ["Invalid email format"])


class PasswordValidation(ValidationStrategy):
    validation_type = "Password"

    def validate(self, value: str) -> ValidationResult:
        errors = []
        if len(value) < 8:
            errors.append("Password must be at least 8 characters long")
        if not any(c.isupper() for c in value):
            errors.append("Password must contain an uppercase letter")
        if not any(c.islower() for c in value):
            errors.append("Password must contain a lowercase letter")
        if not any(c.isdigit() for c in value):
            errors.append("Password must contain a number")
        return ValidationResult(not errors, errors)


class PhoneValidation(ValidationStrategy):
    validation_type = "Phone"

    def validate(self, value: str) -> ValidationResult:
        digits = re.sub(r"[^0-9]", "", value)
        if len(digits) == 10:
            return ValidationResult(True)
        return ValidationResult(False, ["Phone number must be 10 digits"])


class FormValidator:

    def __init__(self, strategy: ValidationStrategy):
        self.strategy = strategy

    def set_strategy(self, strategy: ValidationStrategy) -> None:
        self.strategy = strategy

    def validate(self, value: str) -> ValidationResult:
        result = self.strategy.validate(value)
        kind = self.strategy.validation_type
        if result.is_valid:
            narrate("FormValidator", f"{kind} validation passed: '{value}'")
        else:
            narrate("FormValidator", f"{kind} validation failed: '{value}' - {'; '.join(result.errors)}")
        return result


def run_demo() -> None:
    section("Payment Strategy")
    processor = PaymentProcessor(CreditCardPayment("1234567890123456", "12/25"))
    processor.process(100.0)
    processor.set_strategy(PayPalPayment("user@example.com"))
    processor.process(250.0)
    processor.set_strategy(BankTransferPayment("9876543210", "123456789"))
    processor.process(500.0)

    section("Sorting Strategy")
    numbers = [64, 34, 25, 12, 22, 11, 90, 88, 76, 50, 42]
    narrate("Demo", f"Original array: {numbers}")
    sorter = Sorter(BubbleSort())
    for strategy in (BubbleSort(), QuickSort(), MergeSort()):
        sorter.set_strategy(strategy)
        narrate("Demo", f"Result: {sorter.sort(numbers)}")

    section("Pricing Strategy")
    calculator = PriceCalculator(RegularPricing())
    for strategy in (RegularPricing(), DiscountPricing(20), PremiumPricing(1.5)):
        calculator.set_strategy(strategy)
        calculator.calculate(100.0)

    section("Validation Strategy")
    validator = FormValidator(EmailValidation())
    validator.validate("user@example.com")
    validator.validate("invalid-email")
    validator.set_strategy(PasswordValidation())
    validator.validate("Password123")
    validator.validate("weak")
    validator.set_strategy(PhoneValidation())
    validator.validate("(555) 123-4567")
    validator.validate("123")

    section("Runtime Strategy Switching")
    for strategy, value in zip(
        (EmailValidation(), PasswordValidation(), PhoneValidation()),
        ("test@email.com", "SecurePass123", "5551234567"),
    ):
        validator.set_strategy(strategy)
        validator.validate(value)
