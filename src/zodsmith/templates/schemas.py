"""
Built-in schema templates.

Definitions are kept as plain dicts in the editor's JSON shape and
validated into SchemaTemplate models on first use.
"""

import functools
from typing import Any

from zodsmith.models.schema_definition import SchemaDefinition, SchemaTemplate


def _field(
    name: str,
    field_type: str,
    description: str,
    validations: dict[str, Any] | None = None,
    required: bool = True,
    nullable: bool = False,
) -> dict[str, Any]:
    return {
        "name": name,
        "type": field_type,
        "required": required,
        "nullable": nullable,
        "description": description,
        "validations": validations or {},
    }


TEMPLATE_DEFINITIONS: list[dict[str, Any]] = [
    # User
    {
        "id": "user",
        "name": "User",
        "description": "User account with profile fields and role",
        "icon": "User",
        "schema": {
            "name": "User",
            "description": "A registered user",
            "fields": [
                _field("id", "string", "Unique identifier", {"uuid": True}),
                _field("email", "string", "Email address", {"email": True}),
                _field("name", "string", "Full name", {"min": 2, "max": 100}),
                _field("username", "string", "Public username", {"min": 3, "max": 30}),
                _field(
                    "age", "number", "Age in years",
                    {"min": 0, "max": 150, "int": True},
                    required=False, nullable=True,
                ),
                _field("isActive", "boolean", "Whether the account is active"),
                _field("role", "enum", "Access role", {"values": ["admin", "user", "guest"]}),
                _field("createdAt", "date", "Creation date"),
            ],
        },
    },
    # Product
    {
        "id": "product",
        "name": "Product",
        "description": "Catalog product with pricing and stock",
        "icon": "Package",
        "schema": {
            "name": "Product",
            "description": "A product in the catalog",
            "fields": [
                _field("id", "string", "Unique identifier", {"uuid": True}),
                _field("name", "string", "Product name", {"min": 1, "max": 200}),
                _field(
                    "description", "string", "Product description",
                    {"max": 2000}, required=False, nullable=True,
                ),
                _field("price", "number", "Unit price", {"min": 0, "nonnegative": True}),
                _field(
                    "quantity", "number", "Units in stock",
                    {"min": 0, "int": True, "nonnegative": True},
                ),
                _field("sku", "string", "Stock keeping unit", {"min": 1, "max": 50}),
                _field(
                    "category", "enum", "Product category",
                    {"values": ["electronics", "clothing", "food", "other"]},
                ),
                _field("tags", "array", "Search tags", {"itemType": "string"}, required=False),
                _field("isAvailable", "boolean", "Whether the product can be ordered"),
            ],
        },
    },
    # Address
    {
        "id": "address",
        "name": "Address",
        "description": "Postal address",
        "icon": "MapPin",
        "schema": {
            "name": "Address",
            "description": "A postal address",
            "fields": [
                _field("street", "string", "Street and number", {"min": 1, "max": 200}),
                _field(
                    "street2", "string", "Apartment, suite, etc.",
                    {"max": 100}, required=False, nullable=True,
                ),
                _field("city", "string", "City", {"min": 1, "max": 100}),
                _field("state", "string", "State or region", {"min": 1, "max": 100}),
                _field("postalCode", "string", "Postal code", {"min": 3, "max": 20}),
                _field("country", "string", "ISO 3166-1 alpha-2 country code", {"length": 2}),
            ],
        },
    },
    # API response
    {
        "id": "api-response",
        "name": "API Response",
        "description": "Generic API response envelope",
        "icon": "Globe",
        "schema": {
            "name": "ApiResponse",
            "description": "Standard API response",
            "fields": [
                _field("success", "boolean", "Whether the request succeeded"),
                _field(
                    "message", "string", "Human-readable message",
                    {"max": 500}, required=False, nullable=True,
                ),
                _field("errorCode", "string", "Error code", required=False, nullable=True),
                _field("timestamp", "date", "Response time"),
            ],
        },
    },
    # Blog post
    {
        "id": "blog-post",
        "name": "Blog Post",
        "description": "Blog article with publishing status",
        "icon": "FileText",
        "schema": {
            "name": "BlogPost",
            "description": "A blog article",
            "fields": [
                _field("id", "string", "Unique identifier", {"uuid": True}),
                _field("title", "string", "Post title", {"min": 1, "max": 200}),
                _field("slug", "string", "URL slug", {"min": 1, "max": 200}),
                _field("content", "string", "Post body", {"min": 1}),
                _field(
                    "excerpt", "string", "Short summary",
                    {"max": 500}, required=False, nullable=True,
                ),
                _field("authorId", "string", "Author identifier", {"uuid": True}),
                _field(
                    "status", "enum", "Publishing status",
                    {"values": ["draft", "published", "archived"]},
                ),
                _field("tags", "array", "Post tags", {"itemType": "string"}, required=False),
                _field("publishedAt", "date", "Publication date", required=False, nullable=True),
                _field("createdAt", "date", "Creation date"),
            ],
        },
    },
    # Contact form
    {
        "id": "contact-form",
        "name": "Contact Form",
        "description": "Contact form submission",
        "icon": "Mail",
        "schema": {
            "name": "ContactForm",
            "description": "A contact form submission",
            "fields": [
                _field("name", "string", "Sender name", {"min": 2, "max": 100}),
                _field("email", "string", "Sender email", {"email": True}),
                _field("subject", "string", "Message subject", {"min": 1, "max": 200}),
                _field("message", "string", "Message body", {"min": 10, "max": 5000}),
                _field(
                    "phone", "string", "Phone number",
                    {"max": 20}, required=False, nullable=True,
                ),
            ],
        },
    },
    # Login
    {
        "id": "login",
        "name": "Login",
        "description": "Login credentials",
        "icon": "LogIn",
        "schema": {
            "name": "Login",
            "description": "Login form credentials",
            "fields": [
                _field("email", "string", "Account email", {"email": True}),
                _field("password", "string", "Account password", {"min": 8, "max": 100}),
                _field("rememberMe", "boolean", "Keep the session alive", required=False),
            ],
        },
    },
    # Settings
    {
        "id": "settings",
        "name": "Settings",
        "description": "User preferences",
        "icon": "Settings",
        "schema": {
            "name": "Settings",
            "description": "User preferences",
            "fields": [
                _field("theme", "enum", "Color theme", {"values": ["light", "dark", "system"]}),
                _field("language", "string", "ISO 639-1 language code", {"length": 2}),
                _field("notifications", "boolean", "Whether notifications are enabled"),
                _field(
                    "emailDigest", "enum", "Digest frequency",
                    {"values": ["never", "daily", "weekly", "monthly"]},
                ),
                _field("timezone", "string", "IANA timezone name", {"min": 1, "max": 50}),
            ],
        },
    },
]


@functools.lru_cache(maxsize=1)
def _load_templates() -> tuple[SchemaTemplate, ...]:
    return tuple(SchemaTemplate.model_validate(definition) for definition in TEMPLATE_DEFINITIONS)


def get_templates() -> list[SchemaTemplate]:
    """Get copies of all built-in templates, in display order."""
    return [template.model_copy(deep=True) for template in _load_templates()]


def get_template_ids() -> list[str]:
    """Get template IDs."""
    return [definition["id"] for definition in TEMPLATE_DEFINITIONS]


def get_template_by_id(template_id: str) -> SchemaTemplate | None:
    """
    Get a copy of a template by ID, or None if there is no such template.

    Editing the returned template never changes the built-in library.
    """
    for template in _load_templates():
        if template.id == template_id:
            return template.model_copy(deep=True)
    return None


def schema_from_template(template: SchemaTemplate) -> SchemaDefinition:
    """
    Create a new schema from a template.

    The result is a deep copy, so editing it never changes the
    cached template.
    """
    return template.schema_.model_copy(deep=True)
