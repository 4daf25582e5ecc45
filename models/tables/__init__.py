"""Tables and derived indices owned by the ContentStore."""

from models.tables.analytics_table import AnalyticsTable
from models.tables.comment_table import CommentTable
from models.tables.effect_table import EffectTable
from models.tables.follow_table import FollowTable
from models.tables.hashtag_index import HashtagIndex
from models.tables.like_table import LikeTable
from models.tables.post_table import PostTable
from models.tables.profile_table import ProfileTable

__all__ = [
    "AnalyticsTable",
    "CommentTable",
    "EffectTable",
    "FollowTable",
    "HashtagIndex",
    "LikeTable",
    "PostTable",
    "ProfileTable",
]
