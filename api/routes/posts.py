"""Post endpoints.

Provides post creation and deletion, the public feed and trending listings,
likes, and the comments attached to a post. Listings are public; every
write needs an authenticated caller.
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.dependencies import CallerDep, ContentStoreDep, PageDep
from api.models import ActionResponse, FlagResponse, PageResponse
from models.entities import Comment, MediaType, Post

router = APIRouter(
    prefix="/posts",
    tags=["posts"],
)


# ============================================================================
# Request Models
# ============================================================================


class CreatePostRequest(BaseModel):
    """Request model for publishing a post.

    Attributes:
        media: External blob handle of the uploaded media.
        media_type: "photo" or "video".
        caption: Post caption.
        hashtags: Tag strings; only tokens like "#fun" are kept. When omitted,
            hashtags are taken from the caption.
    """

    media: str = Field(min_length=1, description="External blob handle of the media")
    media_type: MediaType = Field(description="Kind of media")
    caption: str = Field(default="", description="Post caption")
    hashtags: list[str] | None = Field(default=None, description="Tag strings")


class AddCommentRequest(BaseModel):
    text: str = Field(min_length=1, description="Comment text")


# ============================================================================
# Route Handlers
# ============================================================================


@router.post("", response_model=ActionResponse)
async def create_post(request: CreatePostRequest, store: ContentStoreDep, caller: CallerDep) -> ActionResponse:
    """Publish a post for the caller.

    Args:
        request: Media handle, type, caption and hashtags.
        store: The content store dependency.
        caller: Caller identity from the identity header.

    Returns:
        Action response carrying the new post id.
    """
    post_id = store.create_post(caller, request.media, request.media_type, request.caption, request.hashtags)
    return ActionResponse(message=f"Post {post_id} created", id=post_id)


@router.get("/feed", response_model=PageResponse[Post])
async def get_feed(store: ContentStoreDep, paging: PageDep) -> PageResponse[Post]:
    """Get all posts, newest first."""
    items = store.get_feed(paging.page, paging.page_size)
    return PageResponse[Post].build(items, paging.page, paging.page_size)


@router.get("/trending", response_model=PageResponse[Post])
async def get_trending_posts_list(store: ContentStoreDep, paging: PageDep) -> PageResponse[Post]:
    """Get all posts, most liked first."""
    items = store.get_trending_posts_list(paging.page, paging.page_size)
    return PageResponse[Post].build(items, paging.page, paging.page_size)


@router.get("/{post_id}", response_model=Post | None)
async def get_post(post_id: int, store: ContentStoreDep) -> Post | None:
    """Get a post by id, or null if it does not exist."""
    return store.get_post(post_id)


@router.delete("/{post_id}", response_model=ActionResponse)
async def delete_post(post_id: int, store: ContentStoreDep, caller: CallerDep) -> ActionResponse:
    """Delete a post (author or admin only).

    The post's likes, comments and hashtag links are removed with it.
    """
    store.delete_post(caller, post_id)
    return ActionResponse(message=f"Post {post_id} deleted", id=post_id)


# ----- Likes -----


@router.post("/{post_id}/like", response_model=ActionResponse)
async def like_post(post_id: int, store: ContentStoreDep, caller: CallerDep) -> ActionResponse:
    """Like a post as the caller."""
    store.like(caller, post_id)
    return ActionResponse(message=f"Post {post_id} liked", id=post_id)


@router.delete("/{post_id}/like", response_model=ActionResponse)
async def unlike_post(post_id: int, store: ContentStoreDep, caller: CallerDep) -> ActionResponse:
    """Withdraw the caller's like."""
    store.unlike(caller, post_id)
    return ActionResponse(message=f"Post {post_id} unliked", id=post_id)


@router.get("/{post_id}/like", response_model=FlagResponse)
async def is_liked(post_id: int, store: ContentStoreDep, caller: CallerDep) -> FlagResponse:
    """Check whether the caller likes a post."""
    return FlagResponse(value=store.is_liked(caller, post_id))


# ----- Comments -----


@router.get("/{post_id}/comments", response_model=PageResponse[Comment])
async def get_comments(post_id: int, store: ContentStoreDep, paging: PageDep) -> PageResponse[Comment]:
    """Get a post's comments, oldest first."""
    items = store.get_comments(post_id, paging.page, paging.page_size)
    return PageResponse[Comment].build(items, paging.page, paging.page_size)


@router.post("/{post_id}/comments", response_model=ActionResponse)
async def add_comment(
    post_id: int, request: AddCommentRequest, store: ContentStoreDep, caller: CallerDep
) -> ActionResponse:
    """Comment on a post as the caller.

    Returns:
        Action response carrying the new comment id.
    """
    comment_id = store.add_comment(caller, post_id, request.text)
    return ActionResponse(message=f"Comment {comment_id} added to post {post_id}", id=comment_id)
