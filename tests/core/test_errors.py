"""Error Hierarchy — codes, HTTP statuses, and the JSON error body.

Tests:
    - Each error family maps to its category and status
    - to_response carries field and resource context when present
    - Subclasses keep their parent's status but expose specific codes
"""

from game_catalog.core.errors import (
    AuthenticationError, CatalogError, CategoryCycleError, ConflictError,
    DatabaseError, DuplicateNameError, ErrorCategory, InventoryEntryNotFoundError,
    ItemNotFoundError, ResourceNotFoundError, SelfParentError, ValidationError,
)


def test_validation_error_shape():
    err = ValidationError("Bad price", "price")
    body = err.to_response()["error"]
    assert err.http_status == 400
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == "validation"
    assert body["field"] == "price"
    assert "timestamp" in body


def test_category_errors_are_validation_errors():
    assert isinstance(SelfParentError(1), ValidationError)
    assert isinstance(CategoryCycleError(1, 3), ValidationError)
    assert SelfParentError(1).code == "CATEGORY_SELF_PARENT"
    assert CategoryCycleError(1, 3).code == "CATEGORY_CYCLE"


def test_authentication_error_defaults():
    err = AuthenticationError()
    assert err.http_status == 401
    assert err.category is ErrorCategory.AUTHENTICATION
    assert err.message == "Authentication required"


def test_not_found_carries_resource_context():
    body = ResourceNotFoundError("Category", 7).to_response()["error"]
    assert body["message"] == "Category with ID 7 not found"
    assert body["context"] == {"resource_type": "Category", "resource_id": "7"}


def test_item_not_found_is_resource_not_found():
    err = ItemNotFoundError(10)
    assert isinstance(err, ResourceNotFoundError)
    assert err.http_status == 404
    assert err.code == "ITEM_NOT_FOUND"


def test_inventory_entry_not_found_message():
    err = InventoryEntryNotFoundError(5, 10)
    assert err.message == "Item with ID 10 not found in user's inventory"
    assert str(err) == err.message
    assert err.code == "INVENTORY_ENTRY_NOT_FOUND"


def test_conflict_identifies_field():
    err = ConflictError("Email already registered", "email")
    assert err.http_status == 409
    assert err.to_response()["error"]["field"] == "email"


def test_duplicate_name_is_conflict_on_name():
    err = DuplicateNameError("Weapons")
    assert isinstance(err, ConflictError)
    assert err.field == "name"


def test_database_error_is_503():
    err = DatabaseError("Connection lost", "execute")
    assert isinstance(err, CatalogError)
    assert err.http_status == 503
