"""Comment endpoints.

Comments are created and listed under /posts/{post_id}/comments; this
router only handles deletion by comment id.
"""

from fastapi import APIRouter

from api.dependencies import CallerDep, ContentStoreDep
from api.models import ActionResponse

router = APIRouter(
    prefix="/comments",
    tags=["comments"],
)


@router.delete("/{comment_id}", response_model=ActionResponse)
async def delete_comment(comment_id: int, store: ContentStoreDep, caller: CallerDep) -> ActionResponse:
    """Delete a comment.

    Allowed for the comment's author, the author of the post it belongs to,
    and admins.
    """
    store.delete_comment(caller, comment_id)
    return ActionResponse(message=f"Comment {comment_id} deleted", id=comment_id)
