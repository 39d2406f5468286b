import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

import models

logger = logging.getLogger(__name__)

SEED_PROJECTS = [
    {
        "title": "AI Image Generator",
        "description": "A full-stack application that uses Gemini to generate high-quality images from text prompts.",
        "category": "AI/ML",
        "image_url": "https://picsum.photos/seed/ai/800/600",
        "live_url": "#",
        "repo_url": "#",
    },
    {
        "title": "Crypto Dashboard",
        "description": "Real-time cryptocurrency tracking dashboard with interactive charts and price alerts.",
        "category": "Fintech",
        "image_url": "https://picsum.photos/seed/crypto/800/600",
        "live_url": "#",
        "repo_url": "#",
    },
    {
        "title": "E-commerce Platform",
        "description": "A scalable e-commerce solution with integrated Stripe payments and inventory management.",
        "category": "E-commerce",
        "image_url": "https://picsum.photos/seed/shop/800/600",
        "live_url": "#",
        "repo_url": "#",
    },
]

SEED_POSTS = [
    {
        "title": "The Future of Web Development",
        "content": (
            "Web development is evolving faster than ever. From AI-driven coding assistants to the rise of "
            "edge computing, the landscape is shifting. In this post, we explore the key trends that will "
            "define the next decade of the web."
        ),
    },
    {
        "title": "Mastering React 19",
        "content": (
            "React 19 brings a host of new features and improvements. We dive deep into the new hooks, the "
            "compiler, and how to optimize your applications for the best user experience."
        ),
    },
    {
        "title": "Building Scalable APIs with Express",
        "content": (
            "Express remains the go-to framework for Node.js developers. Learn how to structure your projects "
            "for scale, implement robust middleware, and handle complex database interactions."
        ),
    },
]


async def _is_empty(db: AsyncSession, model) -> bool:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one() == 0


async def seed_database(db: AsyncSession) -> None:
    """Insert the sample rows into each table that is currently empty."""
    if await _is_empty(db, models.Project):
        db.add_all([models.Project(**row) for row in SEED_PROJECTS])
        await db.commit()
        logger.info("Seeded %d sample projects", len(SEED_PROJECTS))

    if await _is_empty(db, models.Post):
        db.add_all([models.Post(**row) for row in SEED_POSTS])
        await db.commit()
        logger.info("Seeded %d sample posts", len(SEED_POSTS))
