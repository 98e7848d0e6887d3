"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    EMAIL = "email"
    PASSWORD = "password"  # plaintext, request side only
    PASSWORD_HASH = "password_hash"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    VERSION = "version"

    # MongoDB specific
    MONGO_ID = "_id"
