"""
Reusable Pydantic validation utilities for the input boundary.

This module provides standardized validators for:
- Mutual exclusivity (either/or requirements)
- Calendar ordering of (year, month) pairs
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ValidationMixin:
    """
    Mixin class providing reusable validation methods for Pydantic models.

    This class can be inherited alongside Pydantic Model to add common
    validation patterns without code duplication.
    """

    @classmethod
    def validate_either_or_required(
        cls,
        data: Dict[str, Any],
        field_a: str,
        field_b: str,
        error_message: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Validate that exactly one of two fields is provided.

        Args:
            data: Model data dictionary
            field_a: First field name
            field_b: Second field name
            error_message: Custom error message

        Returns:
            Validated data dictionary

        Raises:
            ValueError: If neither or both fields are provided
        """
        value_a = data.get(field_a)
        value_b = data.get(field_b)

        if value_a is None and value_b is None:
            msg = error_message or f"Either {field_a} or {field_b} must be provided"
            raise ValueError(msg)

        if value_a is not None and value_b is not None:
            msg = error_message or f"Cannot provide both {field_a} and {field_b}"
            raise ValueError(msg)

        return data

    @classmethod
    def validate_month_ordering(
        cls,
        start_year: int,
        start_month: int,
        end_year: int,
        end_month: int,
        error_message: Optional[str] = None,
    ) -> int:
        """
        Validate that (end_year, end_month) falls strictly after the start.

        Returns:
            Number of whole months between the two points

        Raises:
            ValueError: If the end point is not after the start point
        """
        months = (end_year - start_year) * 12 + (end_month - start_month)
        if months <= 0:
            msg = error_message or (
                f"{end_year}-{end_month:02d} must be after {start_year}-{start_month:02d}"
            )
            raise ValueError(msg)
        return months

