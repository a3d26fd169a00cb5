"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post model"""
    ID = "id"
    AUTHOR_ID = "author_id"
    CONTENT = "content"
    LIKED_BY = "liked_by"
    COMMENTS = "comments"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class CommentFields:
    """Field name constants for comment subdocuments embedded in a post"""
    AUTHOR_ID = "author_id"
    TEXT = "text"
    CREATED_AT = "created_at"
