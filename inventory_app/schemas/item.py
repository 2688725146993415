"""Marshmallow schemas for Item."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class ItemFormSchema(Schema):
    """Validate the create/update Item form.

    The optional image upload is not part of the schema; it is checked by
    `UploadStorage.validate` and merged into the same error map.
    """

    name = fields.Str(
        required=True,
        validate=[
            validate.Length(min=1, error="Item name required"),
            validate.Length(
                max=NAME_MAX_LENGTH,
                error=f"Item name must be at most {NAME_MAX_LENGTH} characters",
            ),
        ],
    )
    description = fields.Str(
        required=True,
        validate=[
            validate.Length(min=1, error="Item description required"),
            validate.Length(
                max=DESCRIPTION_MAX_LENGTH,
                error=f"Item description must be at most {DESCRIPTION_MAX_LENGTH} characters",
            ),
        ],
    )
    price = fields.Float(
        required=True,
        validate=validate.Range(min=0, error="Price must not be negative"),
        error_messages={"invalid": "Price must be a number"},
    )
    stock = fields.Int(
        required=True,
        validate=validate.Range(min=0, error="Stock must not be negative"),
        error_messages={"invalid": "Stock must be a whole number"},
    )
    category = fields.Int(
        required=True,
        validate=validate.Range(min=1, error="Category required"),
        error_messages={"invalid": "Category required"},
    )
