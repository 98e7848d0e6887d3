"""Constants for Review model field names"""


class ReviewFields:
    """Field name constants for Review model"""
    ID = "id"
    RATING = "rating"
    COMMENT = "comment"
    USER_ID = "user_id"
    PLACE_ID = "place_id"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    VERSION = "version"

    # MongoDB specific
    MONGO_ID = "_id"
