"""The Content Store: every table plus the operations that keep them consistent.

ContentStore is the single writer over all tables. Each public operation
runs under one re-entrant lock and validates the call completely before the
first mutation, so a rejected call leaves no trace and no caller can see a
half-applied update.
"""

import functools
import logging
import threading
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional, Union

from pydantic import BaseModel, Field, PrivateAttr

from models.auth import AuthorizationProvider, RoleRegistry
from models.entities import (
    Comment,
    Hashtag,
    MediaType,
    Post,
    SocialFeature,
    TrendingPost,
    TrendingUser,
    UserProfile,
    UserRole,
    VisualEffect,
)
from models.errors import ConflictError, NotFoundError, UnauthorizedError
from models.pagination import paginate
from models.tables import (
    AnalyticsTable,
    CommentTable,
    EffectTable,
    FollowTable,
    HashtagIndex,
    LikeTable,
    PostTable,
    ProfileTable,
)
from models.tables.analytics_table import engagement_key
from models.tables.hashtag_index import extract_hashtags

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _detached(value: Any) -> Any:
    """Deep-copy stored records (or lists of them) before they leave the store."""
    if isinstance(value, BaseModel):
        return value.model_copy(deep=True)
    if isinstance(value, list):
        return [_detached(item) for item in value]
    return value


def atomic(method: Callable) -> Callable:
    """Run a store method while holding the store lock."""

    @functools.wraps(method)
    def wrapper(self: "ContentStore", *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


class ContentStore(BaseModel):
    """In-memory social graph and content store.

    Holds the profile, post, comment, like, follow, hashtag, analytics and
    effect tables and exposes every operation the presentation layer may
    call. Identity checks go through the injected AuthorizationProvider;
    the store never decides who someone is.

    Write operations take the caller identity as their first argument.
    Reads that need no identity take none.

    Attributes:
        auth: Authorization provider consulted before mutations.
        clock: Returns the current time for created_at stamps.
        trending_posts_limit: Size of the trending-posts view.
        viral_engagement_threshold: Engagement rate at which content is viral.
        default_effect_intensity: Intensity used when a requested one is out of range.
    """

    auth: AuthorizationProvider = Field(default_factory=RoleRegistry)
    clock: Callable[[], datetime] = Field(default=_utc_now)
    trending_posts_limit: int = Field(default=20, ge=1)
    viral_engagement_threshold: float = Field(default=5.0, ge=0)
    default_effect_intensity: int = Field(default=50, ge=0, le=100)

    profiles: ProfileTable = Field(default_factory=ProfileTable)
    posts: PostTable = Field(default_factory=PostTable)
    comments: CommentTable = Field(default_factory=CommentTable)
    likes: LikeTable = Field(default_factory=LikeTable)
    follows: FollowTable = Field(default_factory=FollowTable)
    hashtags: HashtagIndex = Field(default_factory=HashtagIndex)
    analytics: AnalyticsTable = Field(default_factory=AnalyticsTable)
    effects: EffectTable = Field(default_factory=EffectTable)

    _lock: Any = PrivateAttr(default_factory=threading.RLock)

    class Config:
        arbitrary_types_allowed = True

    # ===== Authorization helpers =====

    def _require_user(self, caller: Optional[str], action: str) -> str:
        if not self.auth.has_capability(caller, UserRole.USER):
            logger.warning(f"Rejected {action}: {caller!r} is not an authenticated user")
            raise UnauthorizedError(f"Only authenticated users can {action}")
        return caller

    def _require_admin(self, caller: Optional[str], action: str) -> str:
        if not self.auth.is_admin(caller):
            logger.warning(f"Rejected {action}: {caller!r} is not an admin")
            raise UnauthorizedError(f"Only admins can {action}")
        return caller

    def _require_post(self, post_id: int) -> Post:
        post = self.posts.get(post_id)
        if post is None:
            raise NotFoundError(f"Post {post_id} not found")
        return post

    # ===== Profiles =====

    @atomic
    def get_own_profile(self, caller: Optional[str]) -> Optional[UserProfile]:
        """Return the caller's own profile, or None if they never registered."""
        self._require_user(caller, "view profiles")
        return _detached(self.profiles.get(caller))

    @atomic
    def get_profile(self, caller: Optional[str], target: str) -> Optional[UserProfile]:
        """Return another identity's profile, or None."""
        self._require_user(caller, "view profiles")
        return _detached(self.profiles.get(target))

    @atomic
    def register(
        self, caller: Optional[str], username: str, bio: str, avatar: Optional[str] = None
    ) -> UserProfile:
        """Create the caller's profile with every counter at zero.

        Args:
            caller: Identity registering.
            username: Requested handle; must not be held by anyone (exact match).
            bio: Profile text.
            avatar: Optional external blob handle.

        Returns:
            The new profile.

        Raises:
            UnauthorizedError: If the caller is not an authenticated user.
            ConflictError: If the username is taken or the caller already has a profile.
        """
        self._require_user(caller, "register")
        if self.profiles.owner_of_username(username) is not None:
            raise ConflictError(f"Username {username!r} is already taken")
        if self.profiles.get(caller) is not None:
            raise ConflictError("Caller already has a profile")

        now = self.clock()
        profile = UserProfile(identity=caller, username=username, bio=bio, avatar=avatar, created_at=now)
        self.profiles.put(profile, now)
        logger.info(f"Registered {caller} as {username!r}")
        return _detached(profile)

    @atomic
    def update_profile(
        self, caller: Optional[str], username: str, bio: str, avatar: Optional[str] = None
    ) -> UserProfile:
        """Replace the caller's username, bio and avatar.

        Counters and created_at are preserved.

        Raises:
            UnauthorizedError: If the caller is not an authenticated user.
            ConflictError: If another identity holds ``username``.
            NotFoundError: If the caller has no profile.
        """
        self._require_user(caller, "update profiles")
        owner = self.profiles.owner_of_username(username)
        if owner is not None and owner != caller:
            raise ConflictError(f"Username {username!r} is already taken")
        current = self.profiles.get(caller)
        if current is None:
            raise NotFoundError("Caller has no profile to update")

        updated = current.model_copy(update={"username": username, "bio": bio, "avatar": avatar})
        self.profiles.put(updated, self.clock())
        logger.info(f"Updated profile of {caller}")
        return _detached(updated)

    @atomic
    def save_profile(self, caller: Optional[str], profile: UserProfile) -> UserProfile:
        """Upsert a full profile for the caller.

        The stored record is always owned by the caller, whatever identity
        the submitted profile carries. No uniqueness check is made here.
        """
        self._require_user(caller, "save profiles")
        stored = profile.model_copy(update={"identity": caller}, deep=True)
        self.profiles.put(stored, self.clock())
        logger.info(f"Saved profile of {caller}")
        return _detached(stored)

    # ===== Posts =====

    @atomic
    def create_post(
        self,
        caller: Optional[str],
        media: str,
        media_type: Union[MediaType, str],
        caption: str,
        hashtags: Optional[Iterable[str]] = None,
    ) -> int:
        """Publish a post and return its id.

        Only hashtag tokens (``#`` followed by at least one character) are
        kept from ``hashtags``; when it is None the caption is tokenized
        instead. A single string is treated as one whitespace separated
        chunk, not as a sequence of characters.

        Raises:
            UnauthorizedError: If the caller is not an authenticated user.
            NotFoundError: If the caller has no profile.
            ValueError: If ``media_type`` is not photo or video.
        """
        self._require_user(caller, "create posts")
        if self.profiles.get(caller) is None:
            raise NotFoundError("Register a profile before posting")
        media_type = MediaType(media_type)
        if hashtags is None:
            hashtags = [caption]
        elif isinstance(hashtags, str):
            hashtags = [hashtags]
        tags = extract_hashtags(hashtags)

        now = self.clock()
        post = Post(
            id=self.posts.allocate_id(),
            author_identity=caller,
            media=media,
            media_type=media_type,
            caption=caption,
            hashtags=tags,
            created_at=now,
        )
        self.posts.add(post, now)
        if tags:
            self.hashtags.link_post(tags, post.id, now)
        self.profiles.adjust_counter(caller, "posts_count", 1, now)
        logger.info(f"{caller} created post {post.id} with hashtags {tags}")
        return post.id

    @atomic
    def delete_post(self, caller: Optional[str], post_id: int) -> None:
        """Delete a post along with its likes, comments and hashtag links.

        Raises:
            UnauthorizedError: Unless the caller is the author or an admin.
            NotFoundError: If the post does not exist.
        """
        self._require_user(caller, "delete posts")
        post = self._require_post(post_id)
        if post.author_identity != caller and not self.auth.is_admin(caller):
            logger.warning(f"Rejected delete of post {post_id} by {caller}")
            raise UnauthorizedError("Only the author or an admin can delete this post")

        now = self.clock()
        self.posts.remove(post_id, now)
        self.likes.drop_post(post_id, now)
        removed_comments = self.comments.remove_for_post(post_id, now)
        if post.hashtags:
            self.hashtags.unlink_post(post.hashtags, post_id, post.likes_count, now)
        self.profiles.adjust_counter(post.author_identity, "total_likes", -post.likes_count, now)
        self.profiles.adjust_counter(post.author_identity, "posts_count", -1, now)
        logger.info(
            f"{caller} deleted post {post_id} "
            f"({post.likes_count} likes, {len(removed_comments)} comments removed)"
        )

    @atomic
    def get_post(self, post_id: int) -> Optional[Post]:
        return _detached(self.posts.get(post_id))

    @atomic
    def get_feed(self, page: int, page_size: int) -> list[Post]:
        """All posts, newest first, one page at a time."""
        return _detached(paginate(self.posts.recent(), page, page_size))

    @atomic
    def get_posts_by_user(self, user: str, page: int, page_size: int) -> list[Post]:
        return _detached(paginate(self.posts.by_author(user), page, page_size))

    @atomic
    def get_trending_posts_list(self, page: int, page_size: int) -> list[Post]:
        """All posts, most liked first."""
        return _detached(paginate(self.posts.most_liked(), page, page_size))

    @atomic
    def search_posts(self, query: str, page: int, page_size: int) -> list[Post]:
        """Posts whose caption contains ``query`` (case-insensitive), newest first."""
        return _detached(paginate(self.posts.search(query), page, page_size))

    # ===== Comments =====

    @atomic
    def add_comment(self, caller: Optional[str], post_id: int, text: str) -> int:
        """Comment on a post and return the comment id.

        Raises:
            UnauthorizedError: If the caller is not an authenticated user.
            NotFoundError: If the post does not exist.
        """
        self._require_user(caller, "comment")
        self._require_post(post_id)

        now = self.clock()
        comment = Comment(
            id=self.comments.allocate_id(), post_id=post_id, author_identity=caller, text=text, created_at=now
        )
        self.comments.add(comment, now)
        self.posts.adjust_comments(post_id, 1, now)
        logger.info(f"{caller} commented {comment.id} on post {post_id}")
        return comment.id

    @atomic
    def delete_comment(self, caller: Optional[str], comment_id: int) -> None:
        """Delete a comment.

        Allowed for the comment author, the author of the post it is on,
        and admins. The post's comment counter is decremented only if the
        post still exists.

        Raises:
            UnauthorizedError: If the caller may not delete this comment.
            NotFoundError: If the comment does not exist.
        """
        self._require_user(caller, "delete comments")
        comment = self.comments.get(comment_id)
        if comment is None:
            raise NotFoundError(f"Comment {comment_id} not found")
        post = self.posts.get(comment.post_id)
        allowed = (
            comment.author_identity == caller
            or (post is not None and post.author_identity == caller)
            or self.auth.is_admin(caller)
        )
        if not allowed:
            logger.warning(f"Rejected delete of comment {comment_id} by {caller}")
            raise UnauthorizedError("Only the comment author, the post author or an admin can delete this comment")

        now = self.clock()
        self.comments.remove(comment_id, now)
        if post is not None:
            self.posts.adjust_comments(post.id, -1, now)
        logger.info(f"{caller} deleted comment {comment_id}")

    @atomic
    def get_comments(self, post_id: int, page: int, page_size: int) -> list[Comment]:
        """Comments on a post, oldest first."""
        return _detached(paginate(self.comments.for_post(post_id), page, page_size))

    # ===== Likes =====

    @atomic
    def like(self, caller: Optional[str], post_id: int) -> None:
        """Like a post.

        Bumps the post's likes, the author's total likes and the like-driven
        count of every hashtag recorded on the post.

        Raises:
            UnauthorizedError: If the caller is not an authenticated user.
            NotFoundError: If the post does not exist.
            ConflictError: If the caller already likes the post.
        """
        self._require_user(caller, "like posts")
        post = self._require_post(post_id)
        if self.likes.is_liked(post_id, caller):
            raise ConflictError(f"Post {post_id} is already liked")

        now = self.clock()
        self.likes.add(post_id, caller, now)
        self.posts.adjust_likes(post_id, 1, now)
        self.profiles.adjust_counter(post.author_identity, "total_likes", 1, now)
        if post.hashtags:
            self.hashtags.record_like(post.hashtags, post_id, now)
        logger.info(f"{caller} liked post {post_id}")

    @atomic
    def unlike(self, caller: Optional[str], post_id: int) -> None:
        """Withdraw a like.

        Raises:
            UnauthorizedError: If the caller is not an authenticated user.
            NotFoundError: If the post has never been liked.
            ConflictError: If the caller does not currently like the post.
        """
        self._require_user(caller, "unlike posts")
        if not self.likes.has_like_set(post_id):
            raise NotFoundError(f"Post {post_id} has no likes")
        if not self.likes.is_liked(post_id, caller):
            raise ConflictError(f"Post {post_id} is not liked")

        now = self.clock()
        self.likes.remove(post_id, caller, now)
        post = self.posts.get(post_id)
        if post is not None:
            self.posts.adjust_likes(post_id, -1, now)
            self.profiles.adjust_counter(post.author_identity, "total_likes", -1, now)
            if post.hashtags:
                self.hashtags.record_unlike(post.hashtags, now)
        logger.info(f"{caller} unliked post {post_id}")

    @atomic
    def is_liked(self, caller: Optional[str], post_id: int) -> bool:
        self._require_user(caller, "check likes")
        return self.likes.is_liked(post_id, caller)

    # ===== Follows =====

    @atomic
    def follow(self, caller: Optional[str], target: str) -> None:
        """Follow ``target``.

        Raises:
            UnauthorizedError: If the caller is not an authenticated user.
            ConflictError: On a self-follow or when already following.
        """
        self._require_user(caller, "follow")
        if caller == target:
            raise ConflictError("Cannot follow yourself")
        if self.follows.is_following(caller, target):
            raise ConflictError(f"Already following {target}")

        now = self.clock()
        self.follows.follow(caller, target, now)
        self.profiles.adjust_counter(caller, "following_count", 1, now)
        self.profiles.adjust_counter(target, "followers_count", 1, now)
        logger.info(f"{caller} followed {target}")

    @atomic
    def unfollow(self, caller: Optional[str], target: str) -> None:
        """Stop following ``target``.

        Raises:
            UnauthorizedError: If the caller is not an authenticated user.
            ConflictError: On a self target or when not following ``target``.
        """
        self._require_user(caller, "unfollow")
        if caller == target:
            raise ConflictError("Cannot unfollow yourself")
        if not self.follows.has_following_set(caller):
            raise ConflictError("Not following anyone")
        if not self.follows.is_following(caller, target):
            raise ConflictError(f"Not following {target}")

        now = self.clock()
        self.follows.unfollow(caller, target, now)
        self.profiles.adjust_counter(caller, "following_count", -1, now)
        self.profiles.adjust_counter(target, "followers_count", -1, now)
        logger.info(f"{caller} unfollowed {target}")

    @atomic
    def is_following(self, caller: Optional[str], target: str) -> bool:
        self._require_user(caller, "check follows")
        return self.follows.is_following(caller, target)

    @atomic
    def get_followers(self, user: str, page: int, page_size: int) -> list[str]:
        return _detached(paginate(self.follows.followers_of(user), page, page_size))

    @atomic
    def get_following(self, user: str, page: int, page_size: int) -> list[str]:
        return _detached(paginate(self.follows.following_of(user), page, page_size))

    # ===== Search & derived views =====

    @atomic
    def search_users(self, query: str, page: int, page_size: int) -> list[UserProfile]:
        """Profiles whose username contains ``query`` (case-insensitive), in registration order."""
        return _detached(paginate(self.profiles.search(query), page, page_size))

    @atomic
    def get_top_hashtags(self) -> list[Hashtag]:
        return _detached(self.hashtags.top())

    @atomic
    def get_top_trending_users(self) -> list[TrendingUser]:
        return _detached(self.analytics.top_trending_users)

    @atomic
    def get_trending_posts(self) -> list[TrendingPost]:
        return _detached(self.analytics.trending_posts)

    @atomic
    def get_trending_features(self) -> Optional[list[SocialFeature]]:
        return _detached(self.analytics.trending_features())

    @atomic
    def get_related_features(self, feature_name: str) -> Optional[list[SocialFeature]]:
        return _detached(self.analytics.related_to(feature_name))

    @atomic
    def get_feature_details(self, feature_name: str) -> Optional[SocialFeature]:
        return _detached(self.analytics.features.get(feature_name))

    @atomic
    def get_engagement_rate(self, content_id: str, content_type: str) -> float:
        return self.analytics.engagement_rate(content_id, content_type)

    @atomic
    def is_viral(self, content_id: str, content_type: str) -> bool:
        """Return True once content's engagement rate reaches the viral threshold."""
        key = engagement_key(content_id, content_type)
        if key not in self.analytics.engagement_rates:
            return False
        return self.analytics.engagement_rates[key] >= self.viral_engagement_threshold

    @atomic
    def refresh_analytics(self, caller: Optional[str]) -> dict[str, Any]:
        """Recompute every analytics view from the live tables.

        Trending posts are the most liked posts with at least one like.
        Each hashtag becomes a social feature whose engagement rate is the
        mean of likes plus comments over its live posts; features sharing a
        post are related. A post's engagement rate is its likes plus
        comments divided by its author's follower count (at least one).

        Args:
            caller: Must be an admin.

        Returns:
            Counts of what was produced.

        Raises:
            UnauthorizedError: If the caller is not an admin.
        """
        self._require_admin(caller, "refresh analytics")
        now = self.clock()

        trending = [p for p in self.posts.most_liked() if p.likes_count > 0][: self.trending_posts_limit]
        trending_posts = [TrendingPost(post_id=p.id, likes_count=p.likes_count) for p in trending]

        per_author = Counter(p.author_identity for p in trending)
        top_users = []
        for identity, count in per_author.items():
            profile = self.profiles.get(identity)
            top_users.append(
                TrendingUser(
                    identity=identity,
                    username=profile.username if profile else identity,
                    avatar=profile.avatar if profile else None,
                    trending_posts_count=count,
                )
            )
        top_users.sort(key=lambda u: (-u.trending_posts_count, u.username))

        features: dict[str, SocialFeature] = {}
        feature_posts: dict[str, set[int]] = {}
        engagement_rates: dict[str, float] = {}
        for hashtag in self.hashtags.hashtags.values():
            live = [p for p in (self.posts.get(i) for i in hashtag.post_ids) if p is not None]
            if not live:
                continue
            interactions = sum(p.likes_count + p.comments_count for p in live)
            rate = interactions // len(live)
            features[hashtag.name] = SocialFeature(
                name=hashtag.name, engagement_rate=rate, posts_count=len(live)
            )
            feature_posts[hashtag.name] = {p.id for p in live}
            engagement_rates[engagement_key(hashtag.name, "hashtag")] = float(rate)

        related = {
            name: [other for other, ids in feature_posts.items() if other != name and ids & post_ids]
            for name, post_ids in feature_posts.items()
        }

        for post in self.posts.posts.values():
            author = self.profiles.get(post.author_identity)
            audience = max(author.followers_count if author else 0, 1)
            engagement_rates[engagement_key(str(post.id), "post")] = (
                post.likes_count + post.comments_count
            ) / audience

        self.analytics.replace(trending_posts, top_users, features, related, engagement_rates, now)
        result = {
            "trending_posts": len(trending_posts),
            "trending_users": len(top_users),
            "features": len(features),
            "engagement_rates": len(engagement_rates),
        }
        logger.info(f"Analytics refreshed by {caller}: {result}")
        return result

    # ===== Roles =====

    @atomic
    def get_caller_role(self, caller: Optional[str]) -> UserRole:
        if self.auth.is_admin(caller):
            return UserRole.ADMIN
        if self.auth.has_capability(caller, UserRole.USER):
            return UserRole.USER
        return UserRole.GUEST

    @atomic
    def is_caller_admin(self, caller: Optional[str]) -> bool:
        return self.auth.is_admin(caller)

    @atomic
    def assign_role(self, caller: Optional[str], user: str, role: Union[UserRole, str]) -> None:
        """Give ``user`` a role. Admin only.

        Raises:
            UnauthorizedError: If the caller is not an admin.
            RuntimeError: If the authorization provider does not keep role assignments.
        """
        self._require_admin(caller, "assign roles")
        if not isinstance(self.auth, RoleRegistry):
            raise RuntimeError(f"{type(self.auth).__name__} does not support role assignment")
        self.auth.assign_role(user, UserRole(role))

    # ===== Visual effects =====

    @atomic
    def create_visual_effect(
        self, caller: Optional[str], name: str, effect_type: str, intensity: int, preview_url: str
    ) -> VisualEffect:
        """Add a visual effect preset.

        An intensity outside 0..100 is replaced with the default intensity
        rather than rejected.
        """
        self._require_user(caller, "create visual effects")
        if not 0 <= intensity <= 100:
            logger.debug(f"Clamping effect intensity {intensity} to {self.default_effect_intensity}")
            intensity = self.default_effect_intensity

        now = self.clock()
        effect = VisualEffect(
            name=name,
            effect_type=effect_type,
            intensity=intensity,
            preview_url=preview_url,
            creator_identity=caller,
            created_at=now,
        )
        self.effects.add(effect, now)
        logger.info(f"{caller} created visual effect {name!r}")
        return _detached(effect)

    @atomic
    def get_visual_effects(self) -> list[VisualEffect]:
        return _detached(self.effects.effects)

    # ===== Maintenance =====

    def _tables(self) -> list:
        return [
            self.profiles,
            self.posts,
            self.comments,
            self.likes,
            self.follows,
            self.hashtags,
            self.analytics,
            self.effects,
        ]

    @atomic
    def get_snapshot(self) -> dict[str, Any]:
        """Return a JSON-serializable dump of every table."""
        return {table.table_name: table.get_snapshot() for table in self._tables()}

    @atomic
    def get_summary(self) -> dict[str, str]:
        return {table.table_name: table.summary for table in self._tables()}

    @atomic
    def validate_state(self) -> list[str]:
        """Check per-table and cross-table consistency.

        Returns:
            List of validation error messages (empty list if valid).
        """
        issues = []
        for table in self._tables():
            issues.extend(table.validate_state())

        authored = Counter(p.author_identity for p in self.posts.posts.values())
        comment_counts = Counter(c.post_id for c in self.comments.comments.values())

        for post in self.posts.posts.values():
            if post.likes_count != self.likes.count(post.id):
                issues.append(
                    f"Post {post.id} likes_count {post.likes_count} != {self.likes.count(post.id)} likers"
                )
            if post.comments_count != comment_counts.get(post.id, 0):
                issues.append(
                    f"Post {post.id} comments_count {post.comments_count} != "
                    f"{comment_counts.get(post.id, 0)} comments"
                )

        for post_id in comment_counts:
            if self.posts.get(post_id) is None:
                issues.append(f"Comments reference missing post {post_id}")
        for post_id in self.likes.likes:
            if self.posts.get(post_id) is None:
                issues.append(f"Like-set exists for missing post {post_id}")

        for identity, profile in self.profiles.profiles.items():
            if profile.posts_count != authored.get(identity, 0):
                issues.append(
                    f"{identity} posts_count {profile.posts_count} != {authored.get(identity, 0)} posts"
                )
            followers = len(self.follows.followers_of(identity))
            following = len(self.follows.following_of(identity))
            if profile.followers_count != followers:
                issues.append(f"{identity} followers_count {profile.followers_count} != {followers}")
            if profile.following_count != following:
                issues.append(f"{identity} following_count {profile.following_count} != {following}")

        return issues

    @atomic
    def clear(self) -> None:
        """Empty every table and restart id allocation at 1."""
        for table in self._tables():
            table.clear()
        logger.info("Content store cleared")

    # Caller-checked maintenance; the unchecked methods above are for in-process use.

    @atomic
    def dump_store(self, caller: Optional[str]) -> dict[str, Any]:
        """Return every table snapshot and summary. Admin only.

        Raises:
            UnauthorizedError: If the caller is not an admin.
        """
        self._require_admin(caller, "read the store state")
        return {"tables": self.get_snapshot(), "summary": self.get_summary()}

    @atomic
    def check_store(self, caller: Optional[str]) -> list[str]:
        """Run validate_state on behalf of an admin."""
        self._require_admin(caller, "validate the store")
        return self.validate_state()

    @atomic
    def reset_store(self, caller: Optional[str]) -> None:
        """Clear every table on behalf of an admin."""
        self._require_admin(caller, "clear the store")
        logger.info(f"Store reset requested by {caller}")
        self.clear()
