"""Constants for Amenity model field names"""


class AmenityFields:
    """Field name constants for Amenity model"""
    ID = "id"
    NAME = "name"
    DESCRIPTION = "description"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    VERSION = "version"

    # MongoDB specific
    MONGO_ID = "_id"
    NAME_KEY = "name_key"  # lower-cased name for case-insensitive lookups
