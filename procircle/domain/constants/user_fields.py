"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    HASHED_PASSWORD = "hashed_password"
    BIO = "bio"
    PROFILE_PICTURE_URL = "profile_picture_url"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
