"""Marshmallow schemas for Category."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 100


class CategoryFormSchema(Schema):
    """Validate the create/update Category form."""

    name = fields.Str(
        required=True,
        validate=[
            validate.Length(min=1, error="Category name required"),
            validate.Length(
                max=NAME_MAX_LENGTH,
                error=f"Category name must be at most {NAME_MAX_LENGTH} characters",
            ),
        ],
    )
    description = fields.Str(
        required=True,
        validate=[
            validate.Length(min=1, error="Category description required"),
            validate.Length(
                max=DESCRIPTION_MAX_LENGTH,
                error=f"Category description must be at most {DESCRIPTION_MAX_LENGTH} characters",
            ),
        ],
    )
