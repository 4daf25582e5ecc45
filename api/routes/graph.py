"""Follow graph and per-user listing endpoints."""

from fastapi import APIRouter

from api.dependencies import CallerDep, ContentStoreDep, PageDep
from api.models import ActionResponse, FlagResponse, PageResponse
from models.entities import Post

router = APIRouter(
    prefix="/users",
    tags=["graph"],
)


@router.post("/{target}/follow", response_model=ActionResponse)
async def follow(target: str, store: ContentStoreDep, caller: CallerDep) -> ActionResponse:
    """Follow ``target`` as the caller.

    Args:
        target: Identity to follow.
        store: The content store dependency.
        caller: Caller identity from the identity header.

    Returns:
        Confirmation message.
    """
    store.follow(caller, target)
    return ActionResponse(message=f"Now following {target}")


@router.delete("/{target}/follow", response_model=ActionResponse)
async def unfollow(target: str, store: ContentStoreDep, caller: CallerDep) -> ActionResponse:
    """Stop following ``target``."""
    store.unfollow(caller, target)
    return ActionResponse(message=f"No longer following {target}")


@router.get("/{target}/follow", response_model=FlagResponse)
async def is_following(target: str, store: ContentStoreDep, caller: CallerDep) -> FlagResponse:
    """Check whether the caller follows ``target``."""
    return FlagResponse(value=store.is_following(caller, target))


@router.get("/{identity}/followers", response_model=PageResponse[str])
async def get_followers(identity: str, store: ContentStoreDep, paging: PageDep) -> PageResponse[str]:
    """List who follows ``identity``, in the order they followed."""
    items = store.get_followers(identity, paging.page, paging.page_size)
    return PageResponse[str].build(items, paging.page, paging.page_size)


@router.get("/{identity}/following", response_model=PageResponse[str])
async def get_following(identity: str, store: ContentStoreDep, paging: PageDep) -> PageResponse[str]:
    """List who ``identity`` follows, in the order they were followed."""
    items = store.get_following(identity, paging.page, paging.page_size)
    return PageResponse[str].build(items, paging.page, paging.page_size)


@router.get("/{identity}/posts", response_model=PageResponse[Post])
async def get_posts_by_user(identity: str, store: ContentStoreDep, paging: PageDep) -> PageResponse[Post]:
    """List posts authored by ``identity``, newest first."""
    items = store.get_posts_by_user(identity, paging.page, paging.page_size)
    return PageResponse[Post].build(items, paging.page, paging.page_size)
