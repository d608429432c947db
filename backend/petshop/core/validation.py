"""
Common validation utilities for the Pet Shop services.

Validators accumulate every problem found in a payload into a
``ValidationResult`` together with the cleaned (trimmed, converted) values.
Services call ``raise_if_invalid()`` before touching any state, so an invalid
request never leaves a half-built entity behind.
"""

import logging
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Tuple

from petshop.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

CPF_DIGITS = 11
_NON_DIGITS = re.compile(r"[^0-9]")
_CPF_GROUPS = re.compile(r"(\d{3})(\d{3})(\d{3})(\d{2})")


class ValidationResult:
    """Container for validation results."""

    def __init__(self):
        self.errors: List[str] = []
        self.field_errors: List[Tuple[Optional[str], str]] = []
        self.is_valid: bool = True
        self.cleaned_data: Dict[str, Any] = {}

    def add_error(self, message: str, field: Optional[str] = None):
        """Add validation error."""
        error_msg = f"{field}: {message}" if field else message
        self.errors.append(error_msg)
        self.field_errors.append((field, message))
        self.is_valid = False
        logger.warning(f"Validation error: {error_msg}")

    def raise_if_invalid(self) -> Dict[str, Any]:
        """Raise the first collected error, or return the cleaned data."""
        if not self.is_valid:
            field, message = self.field_errors[0]
            raise ValidationError(message, field)
        return self.cleaned_data


def digits_only(value: str) -> str:
    return _NON_DIGITS.sub("", value or "")


def format_cpf(digits: str) -> str:
    """Format 11 CPF digits as XXX.XXX.XXX-XX."""
    return _CPF_GROUPS.sub(r"\1.\2.\3-\4", digits)


def normalize_cpf(value: Any) -> str:
    """
    Return the canonical form of a CPF.

    Any punctuation is accepted on input; exactly 11 digits must remain.

    Raises:
        ValidationError: If the value does not carry exactly 11 digits
    """
    digits = digits_only(str(value) if value is not None else "")
    if len(digits) != CPF_DIGITS:
        raise ValidationError(
            f"Invalid CPF. It must contain {CPF_DIGITS} digits.", "cpf"
        )
    return format_cpf(digits)


def to_decimal(value: Any) -> Decimal:
    """Convert a number or numeric string to Decimal without float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidOperation(f"Boolean is not a number: {value}")
    if isinstance(value, str):
        value = value.strip().replace(" ", "")
        # Brazilian format (1.234,56 -> 1234.56)
        if "," in value and "." in value:
            value = value.replace(".", "").replace(",", ".")
        elif "," in value:
            value = value.replace(",", ".")
    return Decimal(str(value))


class BaseValidator:
    """Base validator with common validation methods."""

    def validate(
        self, data: Dict[str, Any]
    ) -> ValidationResult:  # pragma: no cover - interface definition
        """Validate data for a specific entity type."""
        raise NotImplementedError("Subclasses must implement validate")

    @staticmethod
    def validate_required_field(
        value: Any, field_name: str, result: ValidationResult
    ) -> bool:
        """Validate that a required field is present and not empty."""
        if (
            value is None
            or value == ""
            or (isinstance(value, str) and value.strip() == "")
        ):
            result.add_error(f"{field_name} is required", field_name)
            return False
        return True

    @staticmethod
    def validate_date(
        value: Any,
        field_name: str,
        result: ValidationResult,
        not_after: Optional[date] = None,
    ) -> Optional[date]:
        """Validate and convert a date field, optionally refusing future dates."""
        if value is None or value == "":
            return None

        if isinstance(value, datetime):
            parsed = value.date()
        elif isinstance(value, date):
            parsed = value
        elif isinstance(value, str):
            try:
                parsed = datetime.strptime(value.strip(), "%Y-%m-%d").date()
            except ValueError:
                result.add_error("Invalid date. Use format YYYY-MM-DD", field_name)
                return None
        else:
            result.add_error("Invalid date format", field_name)
            return None

        if not_after is not None and parsed > not_after:
            result.add_error("Future dates are not allowed", field_name)
            return None

        return parsed

    @staticmethod
    def validate_decimal(
        value: Any,
        field_name: str,
        result: ValidationResult,
        min_value: Optional[Decimal] = None,
        max_value: Optional[Decimal] = None,
        min_exclusive: bool = False,
    ) -> Optional[Decimal]:
        """Validate and convert decimal field."""
        if value is None or value == "":
            return None

        try:
            decimal_value = to_decimal(value)
        except (InvalidOperation, TypeError, ValueError):
            result.add_error("Invalid value. Use a numeric format", field_name)
            return None

        if not decimal_value.is_finite():
            result.add_error("Invalid value. Use a numeric format", field_name)
            return None

        if min_value is not None:
            if min_exclusive and decimal_value <= min_value:
                result.add_error(f"Value must be greater than {min_value}", field_name)
                return None
            if not min_exclusive and decimal_value < min_value:
                result.add_error(
                    f"Value must be at least {min_value}", field_name
                )
                return None

        if max_value is not None and decimal_value > max_value:
            result.add_error(f"Value must be at most {max_value}", field_name)
            return None

        return decimal_value

    @staticmethod
    def validate_integer(
        value: Any,
        field_name: str,
        result: ValidationResult,
        min_value: Optional[int] = None,
        max_value: Optional[int] = None,
    ) -> Optional[int]:
        """Validate and convert integer field."""
        if value is None or value == "":
            return None

        if isinstance(value, bool):
            result.add_error("Value must be a whole number", field_name)
            return None

        try:
            if isinstance(value, (int, str)):
                int_value = int(value)
            else:
                decimal_value = to_decimal(value)
                if decimal_value != decimal_value.to_integral_value():
                    raise ValueError(value)
                int_value = int(decimal_value)
        except (InvalidOperation, ValueError, TypeError):
            result.add_error("Value must be a whole number", field_name)
            return None

        if min_value is not None and int_value < min_value:
            result.add_error(f"Value must be at least {min_value}", field_name)
            return None

        if max_value is not None and int_value > max_value:
            result.add_error(f"Value must be at most {max_value}", field_name)
            return None

        return int_value

    @staticmethod
    def validate_string(
        value: Any,
        field_name: str,
        result: ValidationResult,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
    ) -> Optional[str]:
        """Validate string field."""
        if value is None:
            return None

        if not isinstance(value, str):
            value = str(value)

        value = value.strip()

        if min_length is not None and len(value) < min_length:
            result.add_error(f"Must have at least {min_length} characters", field_name)
            return None

        if max_length is not None and len(value) > max_length:
            result.add_error(f"Must have at most {max_length} characters", field_name)
            return None

        return value if value else None

    @staticmethod
    def validate_choice(
        value: Any,
        field_name: str,
        result: ValidationResult,
        allowed_values: List[str],
    ) -> Optional[str]:
        """Match value case-insensitively against allowed_values, returning the canonical spelling."""
        if value is None:
            return None
        text = str(value).strip().lower()
        for allowed in allowed_values:
            if allowed.lower() == text:
                return allowed
        result.add_error(
            f"Value must be one of: {', '.join(allowed_values)}", field_name
        )
        return None


class ClientValidator(BaseValidator):
    """Validator for client registration payloads."""

    REQUIRED_FIELDS = ("cpf", "name", "phone", "address")

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        for field_name in self.REQUIRED_FIELDS:
            self.validate_required_field(data.get(field_name), field_name, result)

        if data.get("cpf") is not None:
            try:
                result.cleaned_data["cpf"] = normalize_cpf(data.get("cpf"))
            except ValidationError as e:
                result.add_error(e.message, "cpf")

        for field_name in ("name", "phone", "address"):
            text = self.validate_string(data.get(field_name), field_name, result)
            if text:
                result.cleaned_data[field_name] = text

        return result


class PetValidator(BaseValidator):
    """Validator for pet registration and edits."""

    ALLOWED_SPECIES = ["Dog", "Cat"]

    def __init__(self, today: Optional[date] = None):
        self.today = today

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        self.validate_required_field(data.get("name"), "name", result)
        self.validate_required_field(data.get("species"), "species", result)
        self.validate_required_field(data.get("weight"), "weight", result)
        self.validate_required_field(data.get("birth_date"), "birth_date", result)

        name = self.validate_string(data.get("name"), "name", result)
        if name:
            result.cleaned_data["name"] = name

        species = self.validate_choice(
            data.get("species"), "species", result, self.ALLOWED_SPECIES
        )
        if species:
            result.cleaned_data["species"] = species

        weight = self.validate_decimal(
            data.get("weight"), "weight", result, min_value=Decimal("0"), min_exclusive=True
        )
        if weight is not None:
            result.cleaned_data["weight"] = weight

        birth_date = self.validate_date(
            data.get("birth_date"), "birth_date", result, not_after=self.today
        )
        if birth_date:
            result.cleaned_data["birth_date"] = birth_date

        return result


class ProductValidator(BaseValidator):
    """Validator for product registration."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        for field_name in ("name", "price", "stock", "category", "code"):
            self.validate_required_field(data.get(field_name), field_name, result)

        name = self.validate_string(data.get("name"), "name", result)
        if name:
            result.cleaned_data["name"] = name

        price = self.validate_decimal(
            data.get("price"), "price", result, min_value=Decimal("0"), min_exclusive=True
        )
        if price is not None:
            result.cleaned_data["price"] = price

        stock = self.validate_integer(data.get("stock"), "stock", result, min_value=0)
        if stock is not None:
            result.cleaned_data["stock"] = stock

        category = self.validate_string(data.get("category"), "category", result)
        if category:
            result.cleaned_data["category"] = category

        code = self.validate_integer(data.get("code"), "code", result, min_value=1)
        if code is not None:
            result.cleaned_data["code"] = code

        return result


class AmountValidator(BaseValidator):
    """Validator for non-negative money amounts (revenue and expenses)."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        self.validate_required_field(data.get("amount"), "amount", result)
        amount = self.validate_decimal(
            data.get("amount"), "amount", result, min_value=Decimal("0")
        )
        if amount is not None:
            result.cleaned_data["amount"] = amount

        return result


# Factory function to get appropriate validator
def get_validator(entity_type: str, today: Optional[date] = None) -> BaseValidator:
    """Get validator instance for entity type."""
    validators = {
        "client": ClientValidator(),
        "pet": PetValidator(today=today),
        "product": ProductValidator(),
        "amount": AmountValidator(),
    }

    validator = validators.get(entity_type.lower())
    if not validator:
        raise ValueError(f"No validator found for entity type: {entity_type}")

    return validator


# Convenience functions for common validations
def validate_client(data: Dict[str, Any]) -> ValidationResult:
    """Validate client data."""
    return get_validator("client").validate(data)


def validate_pet(data: Dict[str, Any], today: Optional[date] = None) -> ValidationResult:
    """Validate pet data; birth dates after ``today`` are refused."""
    return get_validator("pet", today=today).validate(data)


def validate_product(data: Dict[str, Any]) -> ValidationResult:
    """Validate product data."""
    return get_validator("product").validate(data)


def validate_amount(value: Any) -> Decimal:
    """Validate a non-negative amount and return it as Decimal."""
    return get_validator("amount").validate({"amount": value}).raise_if_invalid()[
        "amount"
    ]
