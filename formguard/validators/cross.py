"""
Cross-field validation rules.

These rules need more than one field's value, so they do not fit the
single-field validator contract. Callers compute them from the raw (or
sanitized) values and inject the result into the session::

    session.add_cross_field_error(
        CrossValidators.date_order("start_date", start, "end_date", end)
    )
"""

from datetime import date
from typing import Optional

from formguard.results import ValidationError


class CrossValidators:
    """Rules spanning several fields. Each returns an error or None."""

    @staticmethod
    def date_order(
        start_field_name: str,
        start_date: Optional[date],
        end_field_name: str,
        end_date: Optional[date]
    ) -> Optional[ValidationError]:
        """
        The start date must be strictly before the end date.

        Passes when either date is missing. The error's field name is the two
        field names joined by a comma.
        """
        if start_date is not None and end_date is not None and not start_date < end_date:
            return ValidationError(
                f"{start_field_name},{end_field_name}",
                f"{start_field_name} must be before {end_field_name}",
                "dateOrder"
            )
        return None


__all__ = ['CrossValidators']
