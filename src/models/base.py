"""Base model for all data models in the grouping library.

This module provides a base Pydantic model with the common configuration
shared by input records and computed grouping results.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Serialization to/from dictionaries
    - Immutability (frozen models)
    - Arbitrary types support for dates and decimals

    Example:
        >>> class RateCode(BaseDataModel):
        ...     code: str
        >>> rate = RateCode(code="ST")
        >>> rate.model_dump()
        {'code': 'ST'}
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        strict=False,
        # Reject unknown fields so typos in column mappings fail loudly
        extra="forbid",
        # Records and results are values; they never change after creation
        frozen=True,
    )
