"""
Helpers shared by the settings routers.
"""
from fastapi import HTTPException, status

from app.loaders.collection_loader import LoaderState
from app.loaders.pages import PageLoader
from app.schemas.settings import PageResponse


async def render_page(page: PageLoader) -> PageResponse:
    """
    Load a settings page for the HTTP layer.

    An unauthenticated session becomes a 401. A failed read is returned
    as-is with its error set so the client can show a banner.
    """
    view = await page.load()
    if view.state == LoaderState.UNAUTHENTICATED:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return PageResponse.from_view(view)


def not_found(entity: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity} not found",
    )


def bad_request(error: ValueError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(error),
    )
