"""Entity records held by the store tables."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class MediaType(str, Enum):
    """Kind of media attached to a post."""

    VIDEO = "video"
    PHOTO = "photo"


class UserRole(str, Enum):
    """Coarse permission tag attached to an identity."""

    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


class UserProfile(BaseModel):
    """A registered user's profile.

    Counters are denormalized and maintained by post, like and follow
    operations; they are never edited directly by profile updates.

    Args:
        identity: Opaque caller identity that owns this profile.
        username: Globally unique handle (exact match for uniqueness).
        bio: Free-form profile text.
        avatar: Optional external blob handle for the profile picture.
        followers_count: Number of identities following this user.
        following_count: Number of identities this user follows.
        total_likes: Likes received across all of this user's posts.
        posts_count: Number of live posts authored.
        created_at: When the profile was registered.
    """

    identity: str = Field(description="Owning caller identity")
    username: str = Field(description="Globally unique handle")
    bio: str = Field(default="", description="Profile text")
    avatar: Optional[str] = Field(default=None, description="External blob handle for the avatar")
    followers_count: int = Field(default=0, ge=0)
    following_count: int = Field(default=0, ge=0)
    total_likes: int = Field(default=0, ge=0)
    posts_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(description="When the profile was registered")

    def to_dict(self) -> dict[str, Any]:
        """Convert this profile to a JSON-friendly dictionary.

        Returns:
            Dictionary representation of this profile.
        """
        return {
            "identity": self.identity,
            "username": self.username,
            "bio": self.bio,
            "avatar": self.avatar,
            "followers_count": self.followers_count,
            "following_count": self.following_count,
            "total_likes": self.total_likes,
            "posts_count": self.posts_count,
            "created_at": self.created_at.isoformat(),
        }


class Post(BaseModel):
    """A photo or video post.

    Args:
        id: Store-allocated identifier, starting at 1.
        author_identity: Identity of the author.
        media: Opaque external blob handle, stored verbatim.
        media_type: Whether the media is a photo or a video.
        caption: Post caption, searched case-insensitively.
        hashtags: Hashtag tokens recorded when the post was created.
        likes_count: Number of distinct likers.
        comments_count: Number of live comments.
        created_at: When the post was created.
    """

    id: int = Field(ge=1)
    author_identity: str
    media: str
    media_type: MediaType
    caption: str = ""
    hashtags: list[str] = Field(default_factory=list)
    likes_count: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Convert this post to a JSON-friendly dictionary."""
        return {
            "id": self.id,
            "author_identity": self.author_identity,
            "media": self.media,
            "media_type": self.media_type.value,
            "caption": self.caption,
            "hashtags": list(self.hashtags),
            "likes_count": self.likes_count,
            "comments_count": self.comments_count,
            "created_at": self.created_at.isoformat(),
        }


class Comment(BaseModel):
    """A comment attached to a post."""

    id: int = Field(ge=1)
    post_id: int
    author_identity: str
    text: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Convert this comment to a JSON-friendly dictionary."""
        return {
            "id": self.id,
            "post_id": self.post_id,
            "author_identity": self.author_identity,
            "text": self.text,
            "created_at": self.created_at.isoformat(),
        }


class Hashtag(BaseModel):
    """A hashtag and the posts that carried it at creation time.

    ``post_count`` is driven by likes on referencing posts, not by the
    size of ``post_ids``.
    """

    name: str
    post_ids: list[int] = Field(default_factory=list)
    post_count: int = Field(default=0, ge=0)


class TrendingPost(BaseModel):
    """Summary row of the trending-posts view."""

    post_id: int
    likes_count: int


class TrendingUser(BaseModel):
    """A user ranked by how many of their posts are trending."""

    identity: str
    username: str
    avatar: Optional[str] = None
    trending_posts_count: int = 0


class SocialFeature(BaseModel):
    """An entry of the social-feature catalog."""

    name: str
    engagement_rate: int = 0
    icon_url: str = ""
    posts_count: int = 0


class VisualEffect(BaseModel):
    """A user-created visual effect preset.

    Args:
        name: Display name of the effect.
        effect_type: Free-form effect kind (filter, overlay, ...).
        intensity: Strength from 0 to 100.
        preview_url: External link to a preview image.
        creator_identity: Identity that created the effect.
        created_at: When the effect was created.
    """

    name: str
    effect_type: str
    intensity: int = Field(ge=0, le=100)
    preview_url: str = ""
    creator_identity: str
    created_at: datetime
