import logging
from contextlib import asynccontextmanager
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler, request_validation_exception_handler
from fastapi import FastAPI, Request, status, HTTPException, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from schemas import (
    CheckoutRequest,
    CheckoutResponse,
    CommentCreate,
    CommentResponse,
    CreatedResponse,
    PostCreate,
    PostDetailResponse,
    PostResponse,
    PostUpdate,
    ProjectCreate,
    ProjectResponse,
    SuccessResponse,
)

from typing import Annotated

from sqlalchemy.ext.asyncio import AsyncSession

import crud
import models  # noqa: F401  registers the tables on Base.metadata
import payments
from config import Settings, get_settings
from database import AsyncSessionLocal, create_tables, engine, get_db
from seed import seed_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # startup
    await create_tables(engine)
    async with AsyncSessionLocal() as db:
        await seed_database(db)
    logger.info("Store ready at %s", engine.url.render_as_string(hide_password=True))
    yield
    # shutdown
    await engine.dispose()
    logger.info("Store closed")


app = FastAPI(lifespan=lifespan)


def _row_id(value: str) -> int | None:
    # ids that can't name a row behave like ids with no row
    try:
        return int(value)
    except ValueError:
        return None


# --- Checkout ---

@app.post("/api/create-checkout-session", response_model=CheckoutResponse)
async def create_checkout_session(
    checkout: CheckoutRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    logger.info("POST /api/create-checkout-session - Received request: %s", checkout.model_dump())
    try:
        session = await run_in_threadpool(
            payments.create_checkout_session,
            settings,
            checkout.amount,
            checkout.currency,
            checkout.name,
        )
    except (payments.PaymentNotConfigured, payments.PaymentError) as error:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=error.message)
    return {"id": session.id, "url": session.url}


# --- Blog ---

@app.get("/api/posts", response_model=list[PostResponse])
async def get_posts(db: Annotated[AsyncSession, Depends(get_db)]):
    return await crud.list_posts(db)


@app.get("/api/posts/{post_id}", response_model=PostDetailResponse)
async def get_post(post_id: str, db: Annotated[AsyncSession, Depends(get_db)]):
    row_id = _row_id(post_id)
    found = await crud.get_post(db, row_id) if row_id is not None else None
    if found:
        post, comments = found
        return PostDetailResponse(
            **PostResponse.model_validate(post).model_dump(),
            comments=[CommentResponse.model_validate(comment) for comment in comments],
        )
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


@app.post("/api/posts", response_model=CreatedResponse)
async def create_post(post: PostCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    post_id = await crud.create_post(db, title=post.title, content=post.content)
    return {"id": post_id}


@app.put("/api/posts/{post_id}", response_model=SuccessResponse)
async def update_post_full(
    post_id: str,
    post_data: PostUpdate,
    db: Annotated[AsyncSession, Depends(get_db)]
):
    row_id = _row_id(post_id)
    if row_id is not None:
        await crud.update_post(db, row_id, title=post_data.title, content=post_data.content)
    return {"success": True}


@app.delete("/api/posts/{post_id}", response_model=SuccessResponse)
async def delete_post(post_id: str, db: Annotated[AsyncSession, Depends(get_db)]):
    row_id = _row_id(post_id)
    if row_id is not None:
        await crud.delete_post(db, row_id)
    return {"success": True}


@app.post("/api/posts/{post_id}/comments", response_model=CreatedResponse)
async def create_comment(
    post_id: int,
    comment: CommentCreate,
    db: Annotated[AsyncSession, Depends(get_db)]
):
    comment_id = await crud.create_comment(db, post_id, author=comment.author, content=comment.content)
    return {"id": comment_id}


# --- Projects ---

@app.get("/api/projects", response_model=list[ProjectResponse])
async def get_projects(db: Annotated[AsyncSession, Depends(get_db)]):
    return await crud.list_projects(db)


@app.post("/api/projects", response_model=CreatedResponse)
async def create_project(project: ProjectCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    project_id = await crud.create_project(db, **project.model_dump())
    return {"id": project_id}


@app.delete("/api/projects/{project_id}", response_model=SuccessResponse)
async def delete_project(project_id: str, db: Annotated[AsyncSession, Depends(get_db)]):
    row_id = _row_id(project_id)
    if row_id is not None:
        await crud.delete_project(db, row_id)
    return {"success": True}


@app.exception_handler(StarletteHTTPException)
async def general_http_exception_handler(request: Request, exception: StarletteHTTPException):
    if not request.url.path.startswith("/api"):
        return await http_exception_handler(request, exception)

    message = (
        exception.detail
        if exception.detail
        else "An error occurred. Please check your request and try again."
    )

    return JSONResponse(
        {"error": message},
        status_code=exception.status_code,
        headers=getattr(exception, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exception: RequestValidationError):
    if not request.url.path.startswith("/api"):
        return await request_validation_exception_handler(request, exception)

    return JSONResponse(
        {
            "error": "Invalid request. Please check your input and try again",
            "detail": jsonable_encoder(exception.errors()),
        },
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
    )


def run():
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server running on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
