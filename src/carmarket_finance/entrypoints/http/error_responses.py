"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "annual_depreciation_rate_percent",
                "message": "Must be between 0 and 100",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Car with identifier '...' not found",
                "code": "NOT_FOUND"
            }

        Validation error with field details:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "car_id",
                        "message": "Must be a valid UUID format",
                        "code": "INVALID_UUID"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "Car with identifier '550e8400-e29b-41d4-a716-446655440000' not found",
                    "code": "NOT_FOUND",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "car_id",
                            "message": "Must be a valid UUID format",
                            "code": "INVALID_UUID",
                        }
                    ],
                },
            ]
        }
    )
