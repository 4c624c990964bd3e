"""
Base schema for parameter models.

Provides a base class with shared export helpers so parameter models
serialize the same way everywhere.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class BaseParameterModel(BaseModel):
    """
    Base class for parameter models.

    Provides common functionality including:
    - to_dict() method with enum conversion
    - Consistent configuration

    Fields are assigned directly by the populate operations, so assignment
    is not re-validated.
    """

    model_config = ConfigDict(
        extra="forbid",  # Reject unknown fields
        use_enum_values=False,  # Keep enums as enum instances
        validate_assignment=False,
    )

    def to_dict(self) -> Dict[str, Any]:
        """
        Export parameters to a plain dictionary.

        Enum values are converted to strings, sub-objects to dictionaries.
        Absent sub-objects are kept as None.

        Returns:
            Dictionary of field values

        Example:
            >>> params = ParameterSet(profile=H264Profile.MAIN)
            >>> data = params.to_dict()
            >>> # Returns {"profile": "main", ...}
        """
        data = self.model_dump()

        # Convert enum values to strings
        for key, value in data.items():
            if hasattr(value, "value"):
                data[key] = value.value

        return data
