"""Record access for posts, comments and projects.

Every function takes the request's session, runs one statement (``get_post``
runs two) and commits writes immediately. Nothing here validates field
contents; that is left to the request schemas and the table constraints.
"""
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

import models


async def list_posts(db: AsyncSession) -> list[models.Post]:
    result = await db.execute(
        select(models.Post).order_by(models.Post.published_at.desc(), models.Post.id.desc())
    )
    return list(result.scalars().all())


async def get_post(db: AsyncSession, post_id: int) -> tuple[models.Post, list[models.Comment]] | None:
    """Return the post and its comments, newest first, or None if absent."""
    result = await db.execute(select(models.Post).where(models.Post.id == post_id))
    post = result.scalars().first()
    if not post:
        return None

    result = await db.execute(
        select(models.Comment)
        .where(models.Comment.post_id == post_id)
        .order_by(models.Comment.created_at.desc(), models.Comment.id.desc())
    )
    return post, list(result.scalars().all())


async def create_post(db: AsyncSession, title: str, content: str) -> int:
    new_post = models.Post(title=title, content=content)
    db.add(new_post)
    await db.commit()
    return new_post.id


async def update_post(db: AsyncSession, post_id: int, title: str, content: str) -> bool:
    """Overwrite title and content. Returns False when no post has that id."""
    result = await db.execute(
        update(models.Post)
        .where(models.Post.id == post_id)
        .values(title=title, content=content, updated_at=models.utcnow())
    )
    await db.commit()
    return result.rowcount > 0


async def delete_post(db: AsyncSession, post_id: int) -> None:
    # comments go with it via ON DELETE CASCADE
    await db.execute(delete(models.Post).where(models.Post.id == post_id))
    await db.commit()


async def create_comment(db: AsyncSession, post_id: int, author: str, content: str) -> int:
    new_comment = models.Comment(post_id=post_id, author=author, content=content)
    db.add(new_comment)
    await db.commit()
    return new_comment.id


async def list_projects(db: AsyncSession) -> list[models.Project]:
    result = await db.execute(
        select(models.Project).order_by(models.Project.created_at.desc(), models.Project.id.desc())
    )
    return list(result.scalars().all())


async def create_project(
    db: AsyncSession,
    title: str,
    description: str,
    category: str,
    image_url: str | None = None,
    video_url: str | None = None,
    live_url: str | None = None,
    repo_url: str | None = None,
) -> int:
    new_project = models.Project(
        title=title,
        description=description,
        category=category,
        image_url=image_url,
        video_url=video_url,
        live_url=live_url,
        repo_url=repo_url,
    )
    db.add(new_project)
    await db.commit()
    return new_project.id


async def delete_project(db: AsyncSession, project_id: int) -> None:
    await db.execute(delete(models.Project).where(models.Project.id == project_id))
    await db.commit()
