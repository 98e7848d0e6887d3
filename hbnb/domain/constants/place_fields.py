"""Constants for Place model field names"""


class PlaceFields:
    """Field name constants for Place model"""
    ID = "id"
    TITLE = "title"
    DESCRIPTION = "description"
    PRICE = "price"
    LATITUDE = "latitude"
    LONGITUDE = "longitude"
    OWNER_ID = "owner_id"
    AMENITY_IDS = "amenity_ids"
    AVERAGE_RATING = "average_rating"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    VERSION = "version"

    # MongoDB specific
    MONGO_ID = "_id"
